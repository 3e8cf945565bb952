"""Logging helpers for fmin.

Every module obtains its logger through :func:`get_logger` so that all
package output shares one handler, one format and one level switch.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create the package logger for ``name``.

    Loggers are cached so that repeated calls never stack handlers. Names
    outside the package namespace are prefixed with ``fmin.``.

    Args:
        name: Logger name, normally ``__name__``. ``None`` gives the
            package root logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from fmin.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("line search failed, restarting")
    """
    if name is None:
        name = "fmin"
    if name != "fmin" and not name.startswith("fmin."):
        name = f"fmin.{name}"

    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every fmin logger, existing and future.

    Args:
        level: ``logging`` level constant or its name (``"DEBUG"`` etc.).
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
    stream: Optional[IO[str]] = None,
) -> None:
    """Replace the handlers of all fmin loggers.

    Args:
        level: Logging level (default: WARNING).
        format_string: Record format. Defaults to
            ``[%(levelname)s] %(name)s: %(message)s``.
        stream: Output stream (default: ``sys.stderr``).

    Example:
        >>> import logging
        >>> from fmin.logging import configure_logging
        >>> configure_logging(level=logging.DEBUG)
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)
    formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)
    if stream is None:
        stream = sys.stderr

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
