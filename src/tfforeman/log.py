"""Logging setup for the SDK, provider, and CLI."""

from __future__ import annotations

import logging
from pathlib import Path

LOGGER_NAME = "tfforeman"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LEVEL_ALIASES = {
    "TRACE": logging.DEBUG,
    "WARN": logging.WARNING,
}


def resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name in _LEVEL_ALIASES:
        return _LEVEL_ALIASES[name]
    if name == "NONE":
        return logging.CRITICAL + 10
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {level}")
    return resolved


def configure_logging(level: str | int = "WARNING", log_file: str | Path | None = None) -> logging.Logger:
    """Attach a single handler to the package logger.

    Repeated calls replace the handler installed by a previous call.
    """

    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if getattr(existing, "_tfforeman_handler", False):
            logger.removeHandler(existing)
            existing.close()

    if log_file is not None:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._tfforeman_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    return logger
