"""Centralised logging helpers for emojiscript."""

from __future__ import annotations

import logging
from typing import Dict, Optional

_LOGGER_CACHE: Dict[str, logging.Logger] = {}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def get_logger(name: str = "emojiscript") -> logging.Logger:
    """Return a cached :class:`logging.Logger` instance."""

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]


def resolve_level(level: Optional[str]) -> int:
    """Map a level name (``debug``, ``info``, ``warn``, ``error``) to ``logging``."""
    return _LEVELS.get((level or "info").lower(), logging.INFO)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a console handler to the package logger at ``level``."""

    package_logger = get_logger("emojiscript")
    package_logger.setLevel(resolve_level(level))

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        # Prevent propagation to root logger to avoid duplicate messages
        package_logger.propagate = False
    return package_logger


__all__ = ["get_logger", "resolve_level", "configure_logging", "LOG_FORMAT"]
