"""Parsing helpers for raw character names."""

from __future__ import annotations
from typing import List


def starts_with(name: str, letter: str = "h") -> bool:
    """Return True if ``name`` begins with ``letter``, ignoring case."""
    return name[:1].lower() == letter.lower()


def split_names(blob: str, delimiter: str = ",") -> List[str]:
    """Split a delimited blob of names on the literal delimiter."""
    return blob.split(delimiter)
