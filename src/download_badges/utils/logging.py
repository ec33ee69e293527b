"""Logging configuration for download_badges."""

from __future__ import annotations

import logging
import sys

from download_badges.config import LOG_LEVEL

logger = logging.getLogger("download_badges")

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Send package logs to stderr at the given level name (e.g. "DEBUG")."""
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
