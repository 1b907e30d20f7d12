"""Logging configuration for the REPL."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_handler: logging.Handler | None = None


def setup_logging(level: str = "WARNING") -> None:
    """Send log records for the ``lispy_core`` package to stderr.

    stdout stays reserved for evaluation results.
    """
    global _handler
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger("lispy_core")
    logger.setLevel(numeric_level)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)
    logger.debug("logging initialized at %s level", level.upper())
