"""Pipelines over the characters of Hamlet."""

from .dataset import CHARACTERS, CHARACTERS_CSV
from .metrics import map_reduce, name_length_map, sum_values, total_length
from .runners import (
    PROCEDURES,
    run_baseline,
    run_collect,
    run_collect_reduce,
    run_for_each,
    run_map_reduce,
    select_names,
)

__all__ = [
    "CHARACTERS",
    "CHARACTERS_CSV",
    "PROCEDURES",
    "map_reduce",
    "name_length_map",
    "run_baseline",
    "run_collect",
    "run_collect_reduce",
    "run_for_each",
    "run_map_reduce",
    "select_names",
    "sum_values",
    "total_length",
]
