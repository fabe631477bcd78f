"""Logging helpers for gradkit.

Every solver module asks for its logger through :func:`get_logger` so that
all output lives under the ``gradkit`` namespace and can be tuned in one
place.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}

# set by configure_logging; None means stderr at call time
_stream: Optional[object] = None
_format: str = _DEFAULT_FORMAT


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached so repeated calls never stack handlers. Pass
    ``__name__`` from the calling module.

    Args:
        name: Logger name. ``None`` returns the package logger.

    Returns:
        A logger named ``gradkit.<name>`` writing to stderr.

    Example:
        >>> from gradkit.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("fitting theta")
    """
    if name is None:
        name = "gradkit"

    logger_name = name if name == "gradkit" or name.startswith("gradkit.") else f"gradkit.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        handler = logging.StreamHandler(_stream if _stream is not None else sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_format))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every gradkit logger, existing and future.

    Args:
        level: A ``logging`` level constant or its name (``"DEBUG"``, ...).
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Replace the handlers of all gradkit loggers.

    Typically called once at application startup. Loggers created afterwards
    pick up the same level, format and stream.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the default.
        stream: Output stream (default: sys.stderr).
    """
    global _DEFAULT_LEVEL, _stream, _format
    level = _coerce_level(level)

    _stream = stream
    _format = format_string or _DEFAULT_FORMAT
    if stream is None:
        stream = sys.stderr

    formatter = logging.Formatter(_format)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _DEFAULT_LEVEL = level


__all__ = ["configure_logging", "get_logger", "set_log_level"]
