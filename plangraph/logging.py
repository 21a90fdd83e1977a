"""Logging utilities for plangraph.

Provides per-module loggers under the ``plangraph`` namespace with a single
stderr handler each, plus helpers to change level and format at runtime.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

# Default logging level
_DEFAULT_LEVEL = logging.WARNING

_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached to avoid duplicate handlers. The logger name should
    typically be `__name__` from the calling module.

    Args:
        name: Logger name (typically `__name__`). If None, returns the
            package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from plangraph.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Added vertex %r", "A")
    """
    if name is None:
        name = "plangraph"

    if name == "plangraph" or name.startswith("plangraph."):
        logger_name = name
    else:
        logger_name = f"plangraph.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    # Only configure if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))

        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def set_log_level(level: int | str) -> None:
    """Set the logging level for all plangraph loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').

    Example:
        >>> import logging
        >>> from plangraph.logging import set_log_level
        >>> set_log_level(logging.DEBUG)
    """
    level = _coerce_level(level)

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
    """Configure logging for plangraph.

    Replaces the handler of every logger created so far and changes the
    defaults used for loggers created later. Typically called once at
    application startup.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream (default: sys.stderr).
    """
    level = _coerce_level(level)

    if stream is None:
        stream = sys.stderr

    if format_string is None:
        format_string = _DEFAULT_FORMAT

    formatter = logging.Formatter(format_string)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level
