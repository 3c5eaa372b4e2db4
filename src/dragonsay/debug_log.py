"""Logging setup for the CLI.

Log records go to stderr so they never interleave with frames on stdout.
"""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "dragonsay"

_logging_initialized: bool = False


def debug_requested() -> bool:
    """Check whether DRAGONSAY_DEBUG asks for debug output."""
    return os.environ.get("DRAGONSAY_DEBUG", "").lower() in ("1", "true")


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Idempotent: later calls only adjust the level.
    """
    global _logging_initialized

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose or debug_requested() else logging.WARNING)

    if _logging_initialized:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    _logging_initialized = True
    logger.debug("logging initialized")
    return logger


__all__ = ["LOGGER_NAME", "debug_requested", "setup_logging"]
