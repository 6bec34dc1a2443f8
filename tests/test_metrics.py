"""Tests for services.pipelines.metrics."""

from __future__ import annotations

import operator

import pytest

from services.pipelines import name_length_map, sum_values, total_length
from services.pipelines.metrics import map_reduce


def test_name_length_map_for_matching_characters() -> None:
    grouped = name_length_map(["Horatio", "Hamlet"])
    assert grouped == {"Hamlet": 6, "Horatio": 7}
    assert list(grouped) == ["Hamlet", "Horatio"]


def test_name_length_map_sums_colliding_keys() -> None:
    grouped = name_length_map(["Hamlet", "Horatio", "Hamlet"])
    assert grouped == {"Hamlet": 12, "Horatio": 7}


def test_sum_values() -> None:
    assert sum_values([6, 7]) == 13
    assert sum_values([]) == 0


def test_total_length_matches_grouped_total() -> None:
    names = ["Hamlet", "Horatio"]
    assert total_length(names) == sum_values(name_length_map(names).values()) == 13


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 10])
def test_total_length_is_independent_of_chunking(chunk_size: int) -> None:
    names = ["Hamlet", "Horatio", "Gertrude", "Ophelia", "Laertes"]
    assert total_length(names, chunk_size=chunk_size) == sum(len(n) for n in names)


def test_total_length_of_nothing_is_zero() -> None:
    assert total_length([]) == 0


def test_map_reduce_merges_partials_with_combiner() -> None:
    calls: list[tuple[int, int]] = []

    def combine(left: int, right: int) -> int:
        calls.append((left, right))
        return left + right

    result = map_reduce([1, 2, 3, 4, 5], 0, operator.add, combine, chunk_size=2)
    assert result == 15
    # Partials are 3, 7 and 5, merged onto the identity.
    assert calls == [(0, 3), (3, 7), (10, 5)]


def test_map_reduce_rejects_non_positive_chunks() -> None:
    with pytest.raises(ValueError):
        map_reduce([1], 0, operator.add, operator.add, chunk_size=0)
