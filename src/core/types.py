"""Core types and enums.

TIER 0: No internal imports, only Python stdlib.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Generic, TypeVar

T = TypeVar("T")

# Plugin preference block, keyed by preference name.
# "config-file" holds a URL string, every other entry a dict of XML attributes.
PluginPreferences = dict[str, Any]


class Platform(str, Enum):
    """Cordova platforms the hook knows how to update."""

    ANDROID = "android"
    IOS = "ios"

    @classmethod
    def parse(cls, name: str) -> "Platform | None":
        """Return the platform for a name, or None if unsupported."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


class Outcome(str, Enum):
    """Terminal node reached by one hook invocation."""

    ABORT_SILENT = "abort-silent"
    ABORT_WARNING = "abort-with-warning"
    ABORT_ERROR = "abort-with-error"
    APPLIED = "proceed-to-mutation"


@dataclass(frozen=True)
class BuildContext:
    """What the build tool tells us about the current prepare step."""

    project_root: Path
    options: tuple[str, ...] = ()
    platforms: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a fallible read: a value or the reason it failed."""

    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Check if the operation succeeded."""
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, reason: str) -> "Result[T]":
        return cls(error=reason)
