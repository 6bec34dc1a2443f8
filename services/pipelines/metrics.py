"""Aggregation helpers for name pipelines."""

from __future__ import annotations

import operator
from functools import reduce
from typing import Callable, Dict, Iterable, List, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def name_length_map(names: Iterable[str]) -> Dict[str, int]:
    """Group names by identity, summing their lengths, with keys in sorted order."""
    grouped: Dict[str, int] = {}
    for name in names:
        grouped[name] = grouped.get(name, 0) + len(name)
    return {name: grouped[name] for name in sorted(grouped)}


def sum_values(values: Iterable[int]) -> int:
    """Sum values with a two-argument reduction seeded at zero."""
    return reduce(lambda x, y: x + y, values, 0)


def map_reduce(
    items: Sequence[T],
    identity: R,
    accumulator: Callable[[R, T], R],
    combiner: Callable[[R, R], R],
    chunk_size: int = 2,
) -> R:
    """
    Fold ``items`` chunk by chunk, then merge the partial results.

    Each chunk is folded with ``accumulator`` starting from ``identity`` and the
    partial results are merged with ``combiner``. The result only matches a
    plain left fold when ``combiner`` is associative and ``identity`` is its
    neutral element, which is what makes the chunks safe to run in any order.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    partials: List[R] = [
        reduce(accumulator, items[start : start + chunk_size], identity)
        for start in range(0, len(items), chunk_size)
    ]
    return reduce(combiner, partials, identity)


def total_length(names: Sequence[str], chunk_size: int = 2) -> int:
    """Sum the length of every name; the accumulator plays the role of "map"."""
    return map_reduce(
        names,
        0,
        lambda total, name: total + len(name),
        operator.add,
        chunk_size=chunk_size,
    )
