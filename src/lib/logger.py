"""Console output for the hook.

TIER 1: May import from core only.

Cordova shows hook output inline with its own build log, so records are
printed as bare messages: informational ones on stdout, warnings and
errors on stderr. Debug details (parsed preferences, per-file results)
only show up with CHCP_LOG_LEVEL=DEBUG.
"""

import logging
import os
import sys

DEFAULT_FORMAT = "%(message)s"
DEFAULT_LEVEL = "INFO"

_loggers: dict[str, logging.Logger] = {}


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def _handler(stream, level: int = logging.NOTSET) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    handler.setLevel(level)
    return handler


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Get the hook logger named chcp.<name>.

    The level comes from `level`, else CHCP_LOG_LEVEL, else INFO. Unknown
    level names fall back to INFO.
    """
    full_name = f"chcp.{name}"

    if full_name in _loggers:
        return _loggers[full_name]

    logger = logging.getLogger(full_name)

    if not logger.handlers:
        stdout = _handler(sys.stdout)
        stdout.addFilter(_BelowWarning())
        logger.addHandler(stdout)
        logger.addHandler(_handler(sys.stderr, logging.WARNING))

        level_name = (level or os.environ.get("CHCP_LOG_LEVEL", DEFAULT_LEVEL)).upper()
        logger.setLevel(getattr(logging, level_name, logging.INFO))

        # Build tool output only, never the root logger
        logger.propagate = False

    _loggers[full_name] = logger
    return logger
