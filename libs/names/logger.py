"""Diagnostics for the names pipelines, kept on stderr."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

__all__ = ["logger", "resolve_level", "setup_logger"]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(value: Optional[str], default: int = logging.WARNING) -> int:
    """Map a level name such as ``debug`` to its number, or ``default`` if unknown."""
    if not value:
        return default
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else default


def setup_logger(name: str = "hamlet_pipelines", level: Optional[str] = None) -> logging.Logger:
    """Attach a single stderr handler to ``name``, leveled from ``LOG_LEVEL``."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(resolve_level(level or os.getenv("LOG_LEVEL")))
        logger.propagate = False
    return logger


logger = setup_logger()
