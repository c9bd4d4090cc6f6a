"""Lib module - I/O adapters.

TIER 1: May import from core only.
"""

from lib.build_version import increase_build_version
from lib.config import clear_cache, get_project_root, load_build_context
from lib.environment import get_local_server_url, read_object_from_file
from lib.logger import get_logger
from lib.preferences import read_options, write_options

__all__ = [
    "clear_cache",
    "get_local_server_url",
    "get_logger",
    "get_project_root",
    "increase_build_version",
    "load_build_context",
    "read_object_from_file",
    "read_options",
    "write_options",
]
