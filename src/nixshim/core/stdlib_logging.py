from __future__ import annotations

import logging
import sys
from typing import Optional

from nixshim.core.exceptions import ConfigError

LOGGER_NAME = "nixshim"
LOG_LEVEL_VAR = "NIXSHIM_LOG"
DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"

_NIXSHIM_HANDLER: logging.Handler | None = None


def level_from_name(name: str) -> int:
    """Map a level name like ``debug`` or ``WARNING`` to its number.

    Raises:
        ConfigError: the name is not a standard logging level.
    """
    level = logging.getLevelName(str(name).strip().upper())
    if not isinstance(level, int):
        raise ConfigError(
            f"Unknown log level: {name!r}",
            context={"level": name, "valid": ["debug", "info", "warning", "error", "critical"]},
        )
    return level


def configure_logging(level: str = "warning", *, fmt: Optional[str] = None) -> logging.Logger:
    """Send ``nixshim`` log records at ``level`` and above to stderr.

    Idempotent per-process: calling again replaces the handler installed by
    the previous call. Records do not propagate to the root logger.
    """
    global _NIXSHIM_HANDLER

    numeric = level_from_name(level)
    logger = logging.getLogger(LOGGER_NAME)

    if _NIXSHIM_HANDLER is not None:
        logger.removeHandler(_NIXSHIM_HANDLER)
        _NIXSHIM_HANDLER.close()
        _NIXSHIM_HANDLER = None

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(numeric)
    logger.propagate = False

    _NIXSHIM_HANDLER = handler
    return logger


def reset_logging_for_tests() -> None:
    """Test-only: remove the installed handler and restore defaults."""
    global _NIXSHIM_HANDLER
    logger = logging.getLogger(LOGGER_NAME)
    if _NIXSHIM_HANDLER is not None:
        logger.removeHandler(_NIXSHIM_HANDLER)
        _NIXSHIM_HANDLER.close()
    _NIXSHIM_HANDLER = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


__all__ = [
    "LOGGER_NAME",
    "LOG_LEVEL_VAR",
    "DEFAULT_FORMAT",
    "level_from_name",
    "configure_logging",
    "reset_logging_for_tests",
]
