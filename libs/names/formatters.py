"""Formatting helpers shared across the pipelines."""

from typing import Iterable

from colorama import Fore, Style


def capitalize(name: str) -> str:
    """Uppercase the first character of ``name`` and lowercase the rest."""
    if not name:
        return name
    return name[:1].upper() + name[1:].lower()


def format_names(names: Iterable[str]) -> str:
    """Render names as a single bracketed, comma-separated line."""
    return f"[{', '.join(names)}]"


def format_header(title: str) -> str:
    """Wrap a section header in a predictable color sequence."""
    return f"{Fore.GREEN}{title}{Style.RESET_ALL}"
