"""Reader for the .chcpenv file written by `cordova-hcp server`.

TIER 1: May import from core only.
"""

import json
from pathlib import Path
from typing import Any

from core.types import BuildContext, Result
from lib.config import CHCP_CLI_ENVIRONMENT_CONFIG

CONFIG_URL_KEY = "config_url"


def read_object_from_file(file_path: Path) -> Result[dict[str, Any]]:
    """Read a JSON object from a file.

    Args:
        file_path: Path to the file.

    Returns:
        Result with the parsed object, or a failure if the file is missing,
        unreadable, not valid JSON, or not a JSON object.
    """
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return Result.failure(f"{file_path.name} not found")
    except (OSError, UnicodeDecodeError) as e:
        return Result.failure(f"cannot read {file_path.name}: {e}")
    except json.JSONDecodeError as e:
        return Result.failure(f"invalid JSON in {file_path.name}: {e}")

    if not isinstance(data, dict):
        return Result.failure(f"{file_path.name} does not contain a JSON object")

    return Result.success(data)


def get_local_server_url(ctx: BuildContext) -> Result[str]:
    """Get the local server's chcp.json URL from .chcpenv.

    Args:
        ctx: Build context.

    Returns:
        Result with the config_url value, or a failure if the file or the
        field is missing.
    """
    env_config = read_object_from_file(ctx.project_root / CHCP_CLI_ENVIRONMENT_CONFIG)
    if not env_config.ok:
        return Result.failure(env_config.error)

    url = env_config.value.get(CONFIG_URL_KEY)
    if not isinstance(url, str) or not url.strip():
        return Result.failure(f"{CONFIG_URL_KEY} is missing in {CHCP_CLI_ENVIRONMENT_CONFIG}")

    return Result.success(url.strip())
