"""Logging configuration utilities for gitdiffparser."""

import logging
import os
import sys
from typing import Optional, TextIO

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_log_level(level: Optional[str] = None) -> str:
    """Pick the log level from the argument, GITDIFF_LOG_LEVEL or LOG_LEVEL."""
    value = level or os.getenv("GITDIFF_LOG_LEVEL") or os.getenv("LOG_LEVEL", "INFO")
    return value.upper()


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """Configure application-wide logging once.

    Log records go to stderr by default so CLI output on stdout stays clean.
    """
    if logging.getLogger().handlers:
        return

    logging.basicConfig(
        level=resolve_log_level(level),
        format=_LOG_FORMAT,
        stream=stream or sys.stderr,
    )
