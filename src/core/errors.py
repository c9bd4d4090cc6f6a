"""Custom exceptions for the local development hook.

TIER 0: No internal imports, only Python stdlib.
"""


class HookError(Exception):
    """Base exception for the local development hook."""

    pass


class ConfigError(HookError):
    """Project configuration error."""

    pass


class XmlError(HookError):
    """XML file could not be parsed or written."""

    pass


class VersionError(HookError):
    """Native build version could not be updated."""

    pass
