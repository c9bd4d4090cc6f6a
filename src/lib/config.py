"""Configuration management.

TIER 1: May import from core only.

Resolves the Cordova project root and turns the hook environment that
Cordova exports (CORDOVA_CMDLINE, CORDOVA_PLATFORMS) into a BuildContext.
"""

import os
import shlex
from collections.abc import Mapping
from pathlib import Path

from core.errors import ConfigError
from core.types import BuildContext

HOT_CODE_PUSH_PLUGIN_NAME = "cordova-hot-code-push-plugin"
CHCP_CLI_ENVIRONMENT_CONFIG = ".chcpenv"
RELEASE_BUILD_FLAG = "--release"
PROJECT_CONFIG_XML = "config.xml"

_project_root_cache: Path | None = None


def get_project_root() -> Path:
    """Get the Cordova project root directory.

    Checks the PROJECT_ROOT environment variable, then walks up from the
    current directory to the first one holding a config.xml.

    Returns:
        Project root path.

    Raises:
        ConfigError: If project root cannot be found.
    """
    global _project_root_cache

    if _project_root_cache is not None:
        return _project_root_cache

    if env_root := os.environ.get("PROJECT_ROOT"):
        _project_root_cache = Path(env_root)
        return _project_root_cache

    current = Path.cwd()
    while True:
        if (current / PROJECT_CONFIG_XML).exists():
            _project_root_cache = current
            return _project_root_cache
        if current == current.parent:
            break
        current = current.parent

    raise ConfigError(f"Could not find project root (no {PROJECT_CONFIG_XML} found)")


def parse_options(cmdline: str) -> tuple[str, ...]:
    """Split a build command line into option tokens.

    Args:
        cmdline: Raw command line, e.g. "cordova build ios --release".

    Returns:
        Tokens in order. Unbalanced quotes fall back to whitespace split.
    """
    try:
        return tuple(shlex.split(cmdline))
    except ValueError:
        return tuple(cmdline.split())


def parse_platforms(value: str) -> tuple[str, ...]:
    """Parse a comma-separated platform list, dropping blanks."""
    return tuple(p.strip() for p in value.split(",") if p.strip())


def load_build_context(environ: Mapping[str, str] | None = None) -> BuildContext:
    """Build the context for one hook invocation.

    Args:
        environ: Environment to read (defaults to os.environ).

    Returns:
        Immutable BuildContext.

    Raises:
        ConfigError: If the project root cannot be found.
    """
    if environ is None:
        environ = os.environ

    return BuildContext(
        project_root=get_project_root(),
        options=parse_options(environ.get("CORDOVA_CMDLINE", "")),
        platforms=parse_platforms(environ.get("CORDOVA_PLATFORMS", "")),
    )


def clear_cache() -> None:
    """Clear project root cache (for testing)."""
    global _project_root_cache
    _project_root_cache = None
