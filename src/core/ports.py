"""Port interfaces for the hook's collaborators.

TIER 0: No internal imports, only Python stdlib.

The decision engine depends on these contracts, not on the lib modules
that implement them. Tests swap in doubles that satisfy the same ports.

Usage:
    from lib import build_version, preferences
    from core.ports import PreferenceStorePort

    assert isinstance(preferences, PreferenceStorePort)
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PreferenceStorePort(Protocol):
    """Port for the plugin preference block.

    Implemented by: lib.preferences
    """

    def read_options(self, ctx: Any) -> Any:
        """Load plugin preferences, as a Result."""
        ...

    def write_options(self, ctx: Any, preferences: dict[str, Any]) -> Any:
        """Overwrite the plugin preference block."""
        ...


@runtime_checkable
class VersionUpdaterPort(Protocol):
    """Port for the native build version marker.

    Implemented by: lib.build_version
    """

    def increase_build_version(self, ctx: Any) -> Any:
        """Bump the build version of every prepared platform."""
        ...

