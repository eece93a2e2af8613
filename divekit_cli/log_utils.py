"""Logging helpers."""
from __future__ import annotations

import logging

from .cli_shared import LOG_LEVELS, UsageError

LOGGER_NAME = "divekit_cli"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "info") -> logging.Logger:
    name = (level or "info").strip().lower()
    if name not in LOG_LEVELS:
        raise UsageError(f"invalid log level {level!r}")
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, name.upper()))
    return logger
