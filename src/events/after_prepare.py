#!/usr/bin/env python3
"""after_prepare hook - points Hot Code Push at the local dev server.

TIER 3: Entry point, may import from all layers.

If local development mode is enabled for the Hot Code Push plugin, injects
the local server URL from .chcpenv into the platform config.xml files and
bumps the build version so the app re-installs its web assets.
"""

from core.errors import HookError
from core.ports import PreferenceStorePort, VersionUpdaterPort
from core.types import BuildContext, Outcome, PluginPreferences
from lib import build_version, preferences
from lib.config import HOT_CODE_PUSH_PLUGIN_NAME, RELEASE_BUILD_FLAG, load_build_context
from lib.environment import get_local_server_url
from lib.logger import get_logger
from lib.preferences import CONFIG_FILE, LOCAL_DEVELOPMENT, summarize

HEADER = "CHCP Local Development Add-on:"
INDENT = "    "

logger = get_logger("after_prepare")


def print_start_header() -> None:
    """Mark the start of this hook's output."""
    logger.info(HEADER)


def log_info(msg: str) -> None:
    logger.info(INDENT + msg)


def log_warning(msg: str) -> None:
    logger.warning(INDENT + msg)


def log_error(msg: str) -> None:
    logger.error(INDENT + msg)


def is_chcp_plugin_installed(ctx: BuildContext) -> bool:
    """Check if the Hot Code Push plugin is installed in the project."""
    plugin_xml = ctx.project_root / "plugins" / HOT_CODE_PUSH_PLUGIN_NAME / "plugin.xml"
    return plugin_xml.is_file()


def is_building_for_release(ctx: BuildContext) -> bool:
    """Check if the current build was started with --release."""
    return RELEASE_BUILD_FLAG in ctx.options


def is_local_development_enabled(prefs: PluginPreferences) -> bool:
    section = prefs.get(LOCAL_DEVELOPMENT) or {}
    return bool(section.get("enabled", False))


def check_execution_allowed(ctx: BuildContext, prefs: PluginPreferences) -> Outcome | None:
    """Run the gates in order.

    Returns:
        The abort outcome of the first failing gate, or None if allowed.
    """
    if not is_chcp_plugin_installed(ctx):
        log_warning("WARNING! Hot Code Push plugin is not installed. Exiting.")
        return Outcome.ABORT_WARNING

    if is_building_for_release(ctx):
        log_warning(
            "WARNING! You are building for release! Consider removing this plugin "
            "from your app before publishing it on the store."
        )
        return Outcome.ABORT_WARNING

    if not is_local_development_enabled(prefs):
        log_info("Local development mode for CHCP plugin is disabled. Doing nothing.")
        return Outcome.ABORT_SILENT

    return None


def _log_results(results: list[tuple[str, bool, str]]) -> None:
    for path, ok, msg in results or []:
        if ok:
            logger.debug(f"{INDENT}{path}: {msg}")
        else:
            log_warning(f"{path}: {msg}")


def run(
    ctx: BuildContext,
    store: PreferenceStorePort = preferences,
    updater: VersionUpdaterPort = build_version,
) -> Outcome:
    """Handle one after_prepare event.

    Args:
        ctx: Build context.
        store: Preference store (default: lib.preferences).
        updater: Build version updater (default: lib.build_version).

    Returns:
        Decision tree leaf that was reached.
    """
    print_start_header()

    loaded = store.read_options(ctx)
    if not loaded.ok:
        log_warning("WARNING! Can't find config.xml! Exiting.")
        logger.debug(f"{INDENT}{loaded.error}")
        return Outcome.ABORT_WARNING

    prefs = loaded.value
    logger.debug(f"{INDENT}Plugin preferences: {summarize(prefs)}")

    aborted = check_execution_allowed(ctx, prefs)
    if aborted is not None:
        return aborted

    if not prefs.get(CONFIG_FILE):
        log_info("Config-file is not set, local-development mode is enabled by default.")

    server_url = get_local_server_url(ctx)
    if not server_url.ok:
        log_error(
            "Can't find .chcpenv config file with local server preferences. "
            'Did you run "cordova-hcp server"?'
        )
        logger.debug(f"{INDENT}{server_url.error}")
        return Outcome.ABORT_ERROR

    log_info(f"Setting config-file to local server: {server_url.value}")
    prefs[CONFIG_FILE] = server_url.value

    try:
        written = store.write_options(ctx, prefs)
    except (HookError, OSError) as e:
        log_error(f"Failed to apply local development settings: {e}")
        return Outcome.ABORT_ERROR

    failed = [f"{path} ({msg})" for path, ok, msg in written if not ok]
    if failed or not any(msg == "updated" for _, _, msg in written):
        reason = ", ".join(failed) or "no platform config.xml found"
        log_error(f"Failed to apply local development settings: {reason}")
        return Outcome.ABORT_ERROR
    _log_results(written)

    try:
        _log_results(updater.increase_build_version(ctx))
    except (HookError, OSError) as e:
        log_error(f"Failed to increase build version: {e}")
        return Outcome.ABORT_ERROR

    return Outcome.APPLIED


def main() -> None:
    """Handle after_prepare - read the Cordova hook environment and run."""
    try:
        ctx = load_build_context()
    except HookError as e:
        print_start_header()
        log_warning("WARNING! Can't find config.xml! Exiting.")
        logger.debug(f"{INDENT}{e}")
        return

    run(ctx)


if __name__ == "__main__":
    import sys

    try:
        main()
    except Exception as e:
        # Never fail the build
        print(f"{INDENT}CHCP local development hook error: {e}")
        sys.exit(0)
