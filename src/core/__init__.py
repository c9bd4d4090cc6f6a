"""Core module - types, errors, ports.

TIER 0: No internal imports, only Python stdlib.

Exports:
- Error types: HookError, ConfigError, XmlError, VersionError
- Types: BuildContext, Result, PluginPreferences
- Enums: Platform, Outcome
- Ports: PreferenceStorePort, VersionUpdaterPort
"""

from core.errors import ConfigError, HookError, VersionError, XmlError
from core.ports import PreferenceStorePort, VersionUpdaterPort
from core.types import BuildContext, Outcome, Platform, PluginPreferences, Result

__all__ = [
    "BuildContext",
    "ConfigError",
    "HookError",
    "Outcome",
    "Platform",
    "PluginPreferences",
    "PreferenceStorePort",
    "Result",
    "VersionError",
    "VersionUpdaterPort",
    "XmlError",
]
