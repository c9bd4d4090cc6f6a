"""Tests for core/types.py and core/ports.py."""

from dataclasses import FrozenInstanceError
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from core.ports import PreferenceStorePort, VersionUpdaterPort
from core.types import BuildContext, Platform, Result


class TestResult:
    """Tests for Result."""

    def test_success(self):
        result = Result.success({"a": 1})

        assert result.ok
        assert result.value == {"a": 1}
        assert result.error is None

    def test_failure(self):
        result = Result.failure("missing")

        assert not result.ok
        assert result.value is None
        assert result.error == "missing"

    def test_success_with_falsy_value_is_ok(self):
        """An empty value is still a success."""
        assert Result.success("").ok


class TestBuildContext:
    """Tests for BuildContext."""

    def test_is_immutable(self):
        ctx = BuildContext(project_root=Path("/app"), options=("--release",))

        with pytest.raises(FrozenInstanceError):
            ctx.options = ()

    def test_defaults(self):
        ctx = BuildContext(project_root=Path("/app"))

        assert ctx.options == ()
        assert ctx.platforms == ()


class TestPlatform:
    """Tests for Platform.parse()."""

    @pytest.mark.parametrize(
        "name,expected",
        [("android", Platform.ANDROID), (" iOS ", Platform.IOS), ("browser", None), ("", None)],
    )
    def test_parse(self, name, expected):
        assert Platform.parse(name) is expected


class TestPorts:
    """Tests for the runtime-checkable ports."""

    def test_lib_modules_satisfy_ports(self):
        from lib import build_version, preferences

        assert isinstance(preferences, PreferenceStorePort)
        assert isinstance(build_version, VersionUpdaterPort)

    def test_rejects_incomplete_implementation(self):
        assert not isinstance(object(), PreferenceStorePort)

    def test_mock_satisfies_port(self):
        assert isinstance(MagicMock(), VersionUpdaterPort)
