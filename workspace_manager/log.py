"""Logging configuration using loguru."""

from __future__ import annotations

import sys

from loguru import logger

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def setup_logging(level: str = "WARNING") -> None:
    """Configure loguru as the sole logging sink.

    Call this once at process startup.  Logs go to stderr so stdout only
    carries the result line.
    """
    level = level.upper()

    # Remove default loguru handler and add ours
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )

    logger.debug("Logging initialised (level={})", level)
