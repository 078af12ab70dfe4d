"""Grouping of value sequences into runs of adjacent values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from .adjacency import Adjacency, AdjacencyError, SuccessorAdjacency, adjacency_for

T = TypeVar("T")

_NO_VALUE = object()


@dataclass(frozen=True)
class Run(Generic[T]):
    """A maximal stretch of consecutive input values, each adjacent to the one before."""

    start: T
    end: T
    length: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.length, int) or self.length < 1:
            raise ValueError(f"Run length must be a positive integer, got {self.length!r}")
        if self.length == 1 and self.start != self.end:
            raise ValueError(
                f"Run({self.start!r}, {self.end!r}) covers more than one value; pass its length explicitly"
            )

    @property
    def is_singleton(self) -> bool:
        return self.length == 1


def build_runs(values: Iterable[T], adjacency: Adjacency | None = None) -> Iterator[Run[T]]:
    """
    Group values into runs of adjacent values, in input order.

    A value extends the current run only if it is adjacent to the run's end.
    Anything else (gaps, decreasing values, duplicates, a value after a
    maximum with no successor) closes the current run and starts a new one.
    The input is consumed once, left to right.

    Args:
        values: Values in any order; duplicates allowed.
        adjacency: Adjacency to use. Defaults to ``adjacency_for`` the first value.

    Yields:
        Run: Each run as soon as its boundary is seen.
    """
    iterator = iter(values)
    first = next(iterator, _NO_VALUE)
    if first is _NO_VALUE:
        return

    if adjacency is None:
        adjacency = adjacency_for(first)

    start = end = first
    length = 1
    for value in iterator:
        if adjacency.is_adjacent(end, value):
            end = value
            length += 1
        else:
            yield Run(start, end, length)
            start = end = value
            length = 1

    yield Run(start, end, length)


def expand_run(run: Run[T], adjacency: SuccessorAdjacency) -> Iterator[T]:
    """
    Yield every value covered by a run, walking successors from its start.

    Raises:
        AdjacencyError: If the adjacency has no successor function.
    """
    if not isinstance(adjacency, SuccessorAdjacency):
        raise AdjacencyError(
            f"Cannot expand runs with {type(adjacency).__name__}.",
            "Expanding needs a successor-based adjacency such as INTEGER or CHAR.",
        )

    value = run.start
    yield value
    for _ in range(run.length - 1):
        value = adjacency.successor(value)
        yield value


def expand_runs(runs: Iterable[Run[T]], adjacency: SuccessorAdjacency) -> Iterator[T]:
    """Yield the values covered by each run in order (inverse of ``build_runs``)."""
    for run in runs:
        yield from expand_run(run, adjacency)
