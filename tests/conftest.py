"""Pytest configuration and shared fixtures."""

import plistlib
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

APP_NAME = "TestApp"

DEFAULT_CHCP = """    <chcp>
        <config-file url="https://cdn.example.com/chcp.json"/>
        <local-development enabled="true"/>
    </chcp>
"""


def config_xml(chcp: str = DEFAULT_CHCP, name: str = APP_NAME) -> str:
    """Return a Cordova config.xml with the given <chcp> block."""
    return f"""<?xml version='1.0' encoding='utf-8'?>
<widget id="com.example.app" version="1.0.0" xmlns="http://www.w3.org/ns/widgets" xmlns:cdv="http://cordova.apache.org/ns/1.0">
    <name>{name}</name>
    <!-- keep me -->
    <content src="index.html" />
{chcp}</widget>
"""


ANDROID_MANIFEST = """<?xml version='1.0' encoding='utf-8'?>
<manifest android:versionCode="10" android:versionName="1.0.0" package="com.example.app" xmlns:android="http://schemas.android.com/apk/res/android">
    <application android:label="@string/app_name" />
</manifest>
"""


@pytest.fixture
def cordova_project(tmp_path):
    """Create a prepared Cordova project with the plugin installed.

    Android and iOS platforms are present, each with its own copy of
    config.xml and a native version file.
    """
    (tmp_path / "config.xml").write_text(config_xml())

    plugin_dir = tmp_path / "plugins" / "cordova-hot-code-push-plugin"
    plugin_dir.mkdir(parents=True)
    (plugin_dir / "plugin.xml").write_text("<plugin />")

    android_main = tmp_path / "platforms" / "android" / "app" / "src" / "main"
    (android_main / "res" / "xml").mkdir(parents=True)
    (android_main / "res" / "xml" / "config.xml").write_text(config_xml())
    (android_main / "AndroidManifest.xml").write_text(ANDROID_MANIFEST)

    ios_app = tmp_path / "platforms" / "ios" / APP_NAME
    ios_app.mkdir(parents=True)
    (ios_app / "config.xml").write_text(config_xml())
    with (ios_app / f"{APP_NAME}-Info.plist").open("wb") as fp:
        plistlib.dump({"CFBundleIdentifier": "com.example.app", "CFBundleVersion": "1.0.3"}, fp)

    return tmp_path


@pytest.fixture
def write_chcpenv():
    """Return a helper that writes .chcpenv into a project."""

    def _write(root: Path, content: str) -> Path:
        path = root / ".chcpenv"
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def hook_log(caplog, monkeypatch):
    """Route the after_prepare logger into caplog (it does not propagate by default)."""
    from lib.logger import get_logger

    monkeypatch.setattr(get_logger("after_prepare"), "propagate", True)
    return caplog


@pytest.fixture
def clear_config_cache():
    """Clear project root cache before and after test."""
    from lib.config import clear_cache

    clear_cache()
    yield
    clear_cache()
