"""Hot Code Push preference block in config.xml.

TIER 1: May import from core only.

The plugin reads its settings from a <chcp> block inside <widget>:

    <chcp>
        <config-file url="https://example.com/chcp.json"/>
        <local-development enabled="true"/>
    </chcp>

read_options() loads the block from the project's config.xml. Cordova has
already copied that file into each platform by the time the hook runs, so
write_options() patches the prepared platform copies instead.
"""

import copy
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

from core.errors import XmlError
from core.types import BuildContext, Platform, PluginPreferences, Result
from lib.config import PROJECT_CONFIG_XML
from lib.xml_helper import (
    find_child,
    local_name,
    namespace_of,
    qualify,
    read_app_name,
    read_xml,
    remove_children,
    write_xml,
)

CHCP_TAG = "chcp"
CONFIG_FILE = "config-file"
LOCAL_DEVELOPMENT = "local-development"

DEFAULT_PREFERENCES: PluginPreferences = {
    CONFIG_FILE: "",
    LOCAL_DEVELOPMENT: {"enabled": False},
}


def _parse_bool(value: str | None) -> bool:
    return (value or "").strip().lower() == "true"


def parse_preferences(widget: ET.Element) -> PluginPreferences:
    """Extract plugin preferences from a <widget> element.

    Args:
        widget: Root element of a config.xml.

    Returns:
        Preferences with defaults filled in for missing entries.
    """
    preferences = copy.deepcopy(DEFAULT_PREFERENCES)

    chcp = find_child(widget, CHCP_TAG)
    if chcp is None:
        return preferences

    for child in chcp:
        if not isinstance(child.tag, str):
            continue
        name = local_name(child.tag)
        if name == CONFIG_FILE:
            preferences[CONFIG_FILE] = child.get("url", "")
        elif name == LOCAL_DEVELOPMENT:
            preferences[LOCAL_DEVELOPMENT] = {"enabled": _parse_bool(child.get("enabled"))}
        else:
            preferences[name] = dict(child.attrib)

    return preferences


def build_chcp_element(preferences: PluginPreferences, namespace: str = "") -> ET.Element:
    """Generate a <chcp> element from preferences."""
    chcp = ET.Element(qualify(CHCP_TAG, namespace))

    for name, value in preferences.items():
        tag = qualify(name, namespace)
        if name == CONFIG_FILE:
            if value:
                ET.SubElement(chcp, tag, {"url": value})
        elif name == LOCAL_DEVELOPMENT:
            enabled = bool(value.get("enabled")) if isinstance(value, dict) else bool(value)
            ET.SubElement(chcp, tag, {"enabled": "true" if enabled else "false"})
        elif isinstance(value, dict):
            ET.SubElement(chcp, tag, {k: str(v) for k, v in value.items()})

    return chcp


def read_options(ctx: BuildContext) -> Result[PluginPreferences]:
    """Read plugin preferences from the project's config.xml.

    Args:
        ctx: Build context.

    Returns:
        Result with the preferences, or a failure if config.xml is missing
        or not well-formed.
    """
    config_path = ctx.project_root / PROJECT_CONFIG_XML
    if not config_path.is_file():
        return Result.failure(f"{PROJECT_CONFIG_XML} not found in {ctx.project_root}")

    try:
        tree = read_xml(config_path)
    except XmlError as e:
        return Result.failure(str(e))

    return Result.success(parse_preferences(tree.getroot()))


def platform_config_paths(ctx: BuildContext, platform: Platform) -> list[Path]:
    """Candidate locations of a platform's prepared config.xml, in priority order."""
    platforms_dir = ctx.project_root / "platforms"

    if platform == Platform.ANDROID:
        android = platforms_dir / "android"
        return [
            android / "app" / "src" / "main" / "res" / "xml" / PROJECT_CONFIG_XML,
            android / "res" / "xml" / PROJECT_CONFIG_XML,
        ]

    app_name = read_app_name(ctx.project_root)
    if not app_name:
        return []
    return [platforms_dir / "ios" / app_name / PROJECT_CONFIG_XML]


def _inject_preferences(tree: ET.ElementTree, preferences: PluginPreferences) -> None:
    """Replace the <chcp> block of one parsed config.xml."""
    widget = tree.getroot()

    remove_children(widget, CHCP_TAG)
    widget.append(build_chcp_element(preferences, namespace_of(widget)))


def write_options(ctx: BuildContext, preferences: PluginPreferences) -> list[tuple[str, bool, str]]:
    """Write plugin preferences into every prepared platform config.xml.

    The existing <chcp> block is fully replaced. Every target is parsed
    before anything is written: if one of them is broken, no file changes.

    Args:
        ctx: Build context.
        preferences: Preferences to write.

    Returns:
        List of (file_path, success, message) tuples.
    """
    results: list[tuple[str, bool, str]] = []
    targets: list[tuple[str, Path, ET.ElementTree]] = []
    broken = False

    for name in ctx.platforms:
        platform = Platform.parse(name)
        if platform is None:
            results.append((name, True, "skipped (unsupported platform)"))
            continue

        config_path = next((p for p in platform_config_paths(ctx, platform) if p.is_file()), None)
        if config_path is None:
            results.append((platform.value, True, "skipped (config.xml not found)"))
            continue

        rel_path = str(config_path.relative_to(ctx.project_root))
        try:
            targets.append((rel_path, config_path, read_xml(config_path)))
        except XmlError as e:
            results.append((rel_path, False, f"failed: {e}"))
            broken = True

    if broken:
        results.extend((rel_path, True, "skipped (not written)") for rel_path, _, _ in targets)
        return results

    for rel_path, config_path, tree in targets:
        _inject_preferences(tree, preferences)
        try:
            write_xml(tree, config_path)
            results.append((rel_path, True, "updated"))
        except XmlError as e:
            results.append((rel_path, False, f"failed: {e}"))

    return results


def summarize(preferences: PluginPreferences) -> dict[str, Any]:
    """Flatten preferences to dot-notation keys for display."""
    flat: dict[str, Any] = {}
    for name, value in preferences.items():
        if isinstance(value, dict):
            for key, item in value.items():
                flat[f"{name}.{key}"] = item
        else:
            flat[name] = value
    return flat
