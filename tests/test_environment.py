"""Tests for lib/environment.py - .chcpenv reader."""

import json

import pytest

from core.types import BuildContext
from lib.environment import get_local_server_url, read_object_from_file


class TestReadObjectFromFile:
    """Tests for read_object_from_file()."""

    def test_reads_json_object(self, tmp_path):
        """Should parse a JSON object."""
        path = tmp_path / ".chcpenv"
        path.write_text(json.dumps({"config_url": "http://a", "content_url": "http://b"}))

        result = read_object_from_file(path)

        assert result.ok
        assert result.value["content_url"] == "http://b"

    def test_missing_file(self, tmp_path):
        """Should fail without raising for a missing file."""
        result = read_object_from_file(tmp_path / ".chcpenv")

        assert not result.ok
        assert "not found" in result.error

    def test_invalid_json(self, tmp_path):
        """Should fail for invalid JSON."""
        path = tmp_path / ".chcpenv"
        path.write_text("{config_url: ")

        result = read_object_from_file(path)

        assert not result.ok
        assert "invalid JSON" in result.error

    def test_non_object(self, tmp_path):
        """A JSON array is not an environment config."""
        path = tmp_path / ".chcpenv"
        path.write_text("[1, 2]")

        assert not read_object_from_file(path).ok

    def test_directory_instead_of_file(self, tmp_path):
        """Unreadable paths fail instead of raising."""
        (tmp_path / ".chcpenv").mkdir()

        assert not read_object_from_file(tmp_path / ".chcpenv").ok


class TestGetLocalServerUrl:
    """Tests for get_local_server_url()."""

    def test_returns_config_url(self, tmp_path, write_chcpenv):
        """Should return config_url from .chcpenv in the project root."""
        write_chcpenv(tmp_path, json.dumps({"config_url": "http://192.168.1.5:8000/chcp.json"}))

        result = get_local_server_url(BuildContext(project_root=tmp_path))

        assert result.value == "http://192.168.1.5:8000/chcp.json"

    @pytest.mark.parametrize(
        "payload",
        [{}, {"config_url": ""}, {"config_url": "   "}, {"config_url": 42}, {"url": "http://a"}],
    )
    def test_missing_or_invalid_field(self, tmp_path, write_chcpenv, payload):
        """Should fail when config_url is absent or not a usable string."""
        write_chcpenv(tmp_path, json.dumps(payload))

        result = get_local_server_url(BuildContext(project_root=tmp_path))

        assert not result.ok
        assert "config_url" in result.error

    def test_missing_file_reports_file(self, tmp_path):
        """Failure reason should name the missing file."""
        result = get_local_server_url(BuildContext(project_root=tmp_path))

        assert ".chcpenv" in result.error
