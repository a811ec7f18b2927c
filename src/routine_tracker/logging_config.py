"""Logging setup."""

import logging
import sys

from .config import config


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger with a single stderr handler.

    Safe to call more than once; existing handlers are replaced.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, (level or config.LOG_LEVEL).upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
    root.addHandler(handler)

    # aiosqlite logs every statement at DEBUG
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
