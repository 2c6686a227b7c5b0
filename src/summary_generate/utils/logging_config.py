"""Logging setup shared by the CLI and library modules."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from summary_generate.config import SUMMARY_GENERATE_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_ROOT_LOGGER = "summary_generate"
LOG_LEVEL_CHOICES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the package namespace."""
    return logging.getLogger(name)


def configure_logging(level: str | None = None, *, stream: TextIO | None = None) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    stdout is reserved for the book JSON handed back to mdBook, so log records
    must never go there.

    Args:
        level: Level name (e.g. "DEBUG"). Defaults to SUMMARY_GENERATE_LOG_LEVEL.
        stream: Stream for the handler. Defaults to sys.stderr.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    resolved = (level or SUMMARY_GENERATE_LOG_LEVEL).upper()
    level_value = logging.getLevelName(resolved)
    # getLevelName returns a "Level X" string for unknown names.
    logger.setLevel(level_value if isinstance(level_value, int) else logging.WARNING)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    return logger
