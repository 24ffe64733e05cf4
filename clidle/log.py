"""Logging setup shared by the CLI entry points."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "clidle"


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    The interactive game draws on stdout with cursor movement, so logs go to
    stderr and default to WARNING to keep the board clean.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Prevent duplicate handlers when called twice (tests, replay + play)
    if logger.handlers:
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
    return logger
