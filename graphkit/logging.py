"""Logging helpers for graphkit.

Every graphkit logger is a child of the ``graphkit`` logger, owns exactly one
stream handler and does not propagate to the root logger. Level, format and
stream are package-wide settings: ``configure_logging`` changes them for the
loggers created so far and for every logger created afterwards.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "graphkit"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_settings = {
    "level": logging.WARNING,
    "format": _DEFAULT_FORMAT,
    "stream": None,  # None means sys.stderr at the time of the call
}

_loggers: dict[str, logging.Logger] = {}


def _as_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _qualify(name: Optional[str]) -> str:
    if not name or name == PACKAGE_LOGGER:
        return PACKAGE_LOGGER
    if name.startswith(PACKAGE_LOGGER + "."):
        return name
    return f"{PACKAGE_LOGGER}.{name}"


def _install_handler(logger: logging.Logger) -> None:
    """Replace the logger's handlers with one built from the current settings."""
    for old in list(logger.handlers):
        logger.removeHandler(old)

    stream = _settings["stream"]
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(_settings["level"])
    handler.setFormatter(logging.Formatter(_settings["format"]))

    logger.addHandler(handler)
    logger.setLevel(_settings["level"])
    logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the graphkit logger for name, creating it on first use.

    Names outside the package are nested under it, so ``get_logger("search")``
    and ``get_logger("graphkit.search")`` are the same logger. Repeated calls
    never add handlers.

    Args:
        name: Usually ``__name__`` of the calling module. None gives the
            package logger.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("expanded %d nodes", 12)
    """
    qualified = _qualify(name)
    logger = _loggers.get(qualified)
    if logger is None:
        logger = logging.getLogger(qualified)
        _install_handler(logger)
        _loggers[qualified] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Change the level of all graphkit loggers, keeping their handlers.

    Args:
        level: ``logging.DEBUG`` etc., or the level's name such as 'DEBUG'.
    """
    _settings["level"] = _as_level(level)
    for logger in _loggers.values():
        logger.setLevel(_settings["level"])
        for handler in logger.handlers:
            handler.setLevel(_settings["level"])


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Set level, format and output stream for graphkit logging.

    Existing loggers get a fresh handler; loggers created later pick up the
    same settings. Passing None for format_string or stream restores the
    default format and stderr.
    """
    _settings["level"] = _as_level(level)
    _settings["format"] = format_string or _DEFAULT_FORMAT
    _settings["stream"] = stream
    for logger in _loggers.values():
        _install_handler(logger)
