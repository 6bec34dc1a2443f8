"""Five equivalent ways to filter, capitalize, sort and total character names.

``run_baseline`` is the imperative reference; the other procedures express the
same work as pipelines. Every procedure prints a header naming itself followed
by its results, and owns its own copy of the input.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Tuple

from click import echo

from libs.names import (
    capitalize,
    format_header,
    format_names,
    logger,
    split_names,
    starts_with,
)
from .dataset import CHARACTERS, CHARACTERS_CSV
from .metrics import name_length_map, sum_values, total_length


def _header(procedure: Callable[..., None]) -> None:
    echo(format_header(f"Results from {procedure.__name__}():"))


def _count_message(names: Iterable[str], count: int) -> str:
    return (
        f"Count of lengths of Hamlet characters' names {format_names(names)}"
        f" starting with 'h' or 'H' = {count}"
    )


def select_names(names: Iterable[str]) -> List[str]:
    """Keep names starting with 'h' or 'H', capitalize them and sort ascending."""
    return sorted(capitalize(name) for name in names if starts_with(name, "h"))


def run_baseline(names: Iterable[str] = CHARACTERS) -> None:
    """Filter and capitalize in place with an explicit cursor, then sort and print."""
    _header(run_baseline)

    characters = list(names)

    # Removal shifts the next name into slot i, so i only advances on retention.
    i = 0
    while i < len(characters):
        if not starts_with(characters[i], "h"):
            del characters[i]
        else:
            characters[i] = capitalize(characters[i])
            i += 1

    characters.sort()
    logger.debug("run_baseline kept %d names", len(characters))

    for name in characters:
        echo(name)


def run_for_each(names: Iterable[str] = CHARACTERS) -> None:
    """Print each name of the filtered, capitalized, sorted pipeline."""
    _header(run_for_each)

    pipeline = sorted(map(capitalize, filter(lambda s: starts_with(s, "h"), names)))
    logger.debug("run_for_each kept %d names", len(pipeline))
    for name in pipeline:
        echo(name)


def run_collect(names: Iterable[str] = CHARACTERS) -> None:
    """Collect the pipeline into a list and print it as one line."""
    _header(run_collect)

    results = select_names(names)
    logger.debug("run_collect collected %d names", len(results))

    echo(format_names(results))


def run_collect_reduce(blob: str = CHARACTERS_CSV) -> None:
    """Group matching names by their length, then reduce the lengths to a total."""
    _header(run_collect_reduce)

    matching = name_length_map(
        capitalize(name) for name in split_names(blob, ",") if starts_with(name, "h")
    )
    count = sum_values(matching.values())
    logger.debug("run_collect_reduce grouped %s into %d", matching, count)

    echo(_count_message(matching.keys(), count))


def run_map_reduce(blob: str = CHARACTERS_CSV) -> None:
    """Total the name lengths with a separate accumulator and combiner."""
    _header(run_map_reduce)

    characters = select_names(split_names(blob, ","))
    count = total_length(characters)
    logger.debug("run_map_reduce reduced %s into %d", characters, count)

    echo(_count_message(characters, count))


PROCEDURES: Tuple[Callable[..., None], ...] = (
    run_baseline,
    run_for_each,
    run_collect,
    run_collect_reduce,
    run_map_reduce,
)
