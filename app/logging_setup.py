"""Logging configuration for the engine service."""

from __future__ import annotations

import logging

from app.config import settings

APP_LOGGER = "app"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach one stream handler to the ``app`` logger.

    The level defaults to ``settings.log_level`` (LOG_LEVEL). Calling this
    again only updates the level; handlers are never duplicated.
    """
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel((level or settings.log_level).upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
