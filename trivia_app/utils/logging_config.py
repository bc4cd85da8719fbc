"""Logging configuration helpers for the trivia application."""

from __future__ import annotations

import logging
from logging import Logger

from trivia_app.utils.env import env_str

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# httpx logs every request at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: int | None = None) -> Logger:
    """Configure basic logging for the application and return the app logger.

    Without an explicit ``level`` the ``TRIVIA_LOG_LEVEL`` environment variable
    is used (a level name such as ``DEBUG``), defaulting to INFO.
    """
    if level is None:
        level = logging.getLevelName(env_str("TRIVIA_LOG_LEVEL", "INFO").upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    return logging.getLogger("trivia_app")
