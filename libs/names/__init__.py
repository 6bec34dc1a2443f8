"""Shared helpers for normalizing and rendering character names."""

from .formatters import capitalize, format_header, format_names
from .logger import logger, resolve_level, setup_logger
from .parsers import split_names, starts_with

__all__ = [
    "capitalize",
    "format_header",
    "format_names",
    "logger",
    "resolve_level",
    "setup_logger",
    "split_names",
    "starts_with",
]
