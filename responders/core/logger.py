"""Logging setup for the responders package."""

from __future__ import annotations

import logging
from typing import Literal

LogLevel = Literal["silent", "error", "warn", "info", "debug"]

PACKAGE_LOGGER_NAME = "responders"

_LEVELS: dict[str, int] = {
    "silent": logging.CRITICAL + 10,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

_current_level: LogLevel = "warn"


def configure_logger(log_level: LogLevel = "warn", prefix: str = "Responders") -> logging.Logger:
    """Attach a prefixed stream handler to the package logger and set its level.

    Calling this more than once replaces the handler installed by the previous
    call instead of stacking another one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_responders_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(f"[{prefix}] %(levelname)s %(name)s: %(message)s"))
    handler._responders_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.propagate = False

    set_log_level(log_level)
    return logger


def set_log_level(log_level: LogLevel) -> None:
    global _current_level

    if log_level not in _LEVELS:
        raise ValueError(f"Unknown log level: {log_level!r}")
    _current_level = log_level
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(_LEVELS[log_level])


def get_log_level() -> LogLevel:
    return _current_level
