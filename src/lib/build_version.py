"""Build version bump for prepared platforms.

TIER 1: May import from core only.

Hot Code Push keeps the bundled web assets until the native build version
changes. Bumping it after every local-development prepare forces a fresh
asset install on the next run of the app.
"""

import plistlib
from pathlib import Path

from core.errors import VersionError, XmlError
from core.types import BuildContext, Platform
from lib.xml_helper import ANDROID_NS, read_app_name, read_xml, write_xml

ANDROID_VERSION_CODE = f"{{{ANDROID_NS}}}versionCode"
IOS_BUNDLE_VERSION = "CFBundleVersion"


def next_version_code(current: str | None) -> str:
    """Increment an Android versionCode; invalid or missing starts at 1."""
    try:
        return str(int(current) + 1)
    except (TypeError, ValueError):
        return "1"


def next_bundle_version(current: str | None) -> str:
    """Increment the last numeric component of a CFBundleVersion.

    Example:
        >>> next_bundle_version("1.0.3")
        '1.0.4'
    """
    if not current:
        return "1"

    parts = str(current).strip().split(".")
    try:
        parts[-1] = str(int(parts[-1]) + 1)
    except ValueError:
        parts.append("1")
    return ".".join(parts)


def android_manifest_paths(project_root: Path) -> list[Path]:
    """Candidate AndroidManifest.xml locations, in priority order."""
    android = project_root / "platforms" / "android"
    return [
        android / "app" / "src" / "main" / "AndroidManifest.xml",
        android / "AndroidManifest.xml",
    ]


def ios_plist_paths(project_root: Path) -> list[Path]:
    """Candidate Info.plist locations for the iOS project."""
    app_name = read_app_name(project_root)
    if not app_name:
        return []
    return [project_root / "platforms" / "ios" / app_name / f"{app_name}-Info.plist"]


def _increase_android(manifest: Path) -> str:
    try:
        tree = read_xml(manifest)
    except XmlError as e:
        raise VersionError(str(e)) from e

    root = tree.getroot()
    old_code = root.get(ANDROID_VERSION_CODE)
    new_code = next_version_code(old_code)
    root.set(ANDROID_VERSION_CODE, new_code)

    try:
        write_xml(tree, manifest)
    except XmlError as e:
        raise VersionError(str(e)) from e

    return f"versionCode {old_code} -> {new_code}"


def _increase_ios(plist_path: Path) -> str:
    try:
        with plist_path.open("rb") as fp:
            data = plistlib.load(fp)
    except (OSError, plistlib.InvalidFileException, ValueError) as e:
        raise VersionError(f"Cannot read {plist_path.name}: {e}") from e

    if not isinstance(data, dict):
        raise VersionError(f"{plist_path.name} is not a dictionary plist")

    old_version = data.get(IOS_BUNDLE_VERSION)
    new_version = next_bundle_version(old_version)
    data[IOS_BUNDLE_VERSION] = new_version

    try:
        with plist_path.open("wb") as fp:
            plistlib.dump(data, fp)
    except OSError as e:
        raise VersionError(f"Cannot write {plist_path.name}: {e}") from e

    return f"{IOS_BUNDLE_VERSION} {old_version} -> {new_version}"


def increase_build_version(ctx: BuildContext) -> list[tuple[str, bool, str]]:
    """Bump the native build version of every prepared platform.

    Not idempotent: each call increments again.

    Args:
        ctx: Build context.

    Returns:
        List of (file_path, success, message) tuples.
    """
    results: list[tuple[str, bool, str]] = []

    for name in ctx.platforms:
        platform = Platform.parse(name)
        if platform is None:
            results.append((name, True, "skipped (unsupported platform)"))
            continue

        if platform == Platform.ANDROID:
            candidates, update = android_manifest_paths(ctx.project_root), _increase_android
        else:
            candidates, update = ios_plist_paths(ctx.project_root), _increase_ios

        target = next((p for p in candidates if p.is_file()), None)
        if target is None:
            results.append((platform.value, True, "skipped (not found)"))
            continue

        rel_path = str(target.relative_to(ctx.project_root))
        try:
            results.append((rel_path, True, update(target)))
        except VersionError as e:
            results.append((rel_path, False, f"failed: {e}"))

    return results
