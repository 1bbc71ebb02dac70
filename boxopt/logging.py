"""Logging utilities for boxopt.

Every module obtains its logger through :func:`get_logger` so that all output
shares one handler format and one level switch.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

_LEVEL_ENV_VAR = "BOXOPT_LOG_LEVEL"
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _level_from_env() -> int:
    value = os.getenv(_LEVEL_ENV_VAR, "WARNING")
    return getattr(logging, value.upper(), logging.WARNING)


# Defaults applied to loggers created later
_DEFAULT_LEVEL = _level_from_env()
_DEFAULT_STREAM: Optional[object] = None
_DEFAULT_FORMAT = _FORMAT

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached to avoid duplicate handlers. The logger name should
    typically be `__name__` from the calling module.

    Args:
        name: Logger name (typically `__name__`). If None, returns the package
            logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from boxopt.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Starting descent")
    """
    if name is None:
        name = "boxopt"

    logger_name = name if name == "boxopt" or name.startswith("boxopt.") else f"boxopt.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)

        handler = logging.StreamHandler(_DEFAULT_STREAM or sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))

        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for all boxopt loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').
    """
    level = _resolve_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Configure logging for boxopt.

    Replaces the handlers of every logger created so far and sets the default
    used for loggers created later.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream (default: sys.stderr).
    """
    level = _resolve_level(level)
    requested_stream = stream

    if stream is None:
        stream = sys.stderr

    formatter = logging.Formatter(format_string or _FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    global _DEFAULT_LEVEL, _DEFAULT_STREAM, _DEFAULT_FORMAT
    _DEFAULT_LEVEL = level
    _DEFAULT_STREAM = requested_stream
    _DEFAULT_FORMAT = format_string or _FORMAT


__all__ = ["configure_logging", "get_logger", "set_log_level"]
