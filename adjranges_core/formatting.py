"""Formatting helpers that render runs of adjacent values as compact text."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from itertools import chain
from typing import Any

from .adjacency import Adjacency, PredicateAdjacency, adjacency_for
from .config import DEFAULT_SETTINGS, FormatSettings
from .logging_config import get_logger
from .runs import Run, build_runs

_NO_ITEM = object()


def format_run(run: Run, settings: FormatSettings | None = None, render: Callable[[Any], str] = str) -> str:
    """Render one run as ``start`` or ``start-end``."""
    settings = settings or DEFAULT_SETTINGS
    if run.is_singleton:
        return render(run.start)
    return f"{render(run.start)}{settings.range_separator}{render(run.end)}"


def format_ranges(
    items: Iterable[Any],
    wrapped: bool = True,
    adjacency: Adjacency | None = None,
    settings: FormatSettings | None = None,
    render: Callable[[Any], str] = str,
) -> str:
    """
    Render values (or prebuilt runs) with adjacent runs collapsed into ranges.

    Args:
        items: Runs from ``build_runs``, or raw values to group first. The first
            item decides which.
        wrapped: Surround the result with the open/close delimiters.
        adjacency: Adjacency used when grouping raw values.
        settings: Separators and delimiters (defaults to ``[a, b-c]`` style).
        render: Converts a single value to text.

    Returns:
        String such as "[42, 100-104, 20, 31-34]", or "42, 100-104, 20, 31-34" when not wrapped.
    """
    settings = settings or DEFAULT_SETTINGS

    iterator = iter(items)
    first = next(iterator, _NO_ITEM)
    if first is _NO_ITEM:
        body = ""
    else:
        items = chain((first,), iterator)
        runs = items if isinstance(first, Run) else build_runs(items, adjacency)
        body = settings.separator.join(format_run(run, settings, render) for run in runs)

    if wrapped:
        return f"{settings.open_delimiter}{body}{settings.close_delimiter}"
    return body


def condense_ranges(
    items: Iterable[Any],
    adjacency: Adjacency | None = None,
    settings: FormatSettings | None = None,
    render: Callable[[Any], str] = str,
) -> str:
    """
    Condense values into comma-separated ranges without delimiters.

    Returns:
        String representation with ranges (for example: "10, 12-15, 20").
    """
    return format_ranges(items, wrapped=False, adjacency=adjacency, settings=settings, render=render)


class AdjacentRanges:
    """
    Deferred display of a value sequence with adjacent runs collapsed.

    Nothing is grouped until the object is converted to text, so it can be
    passed as a logging argument at no cost when the record is filtered out.
    ``str()`` gives the bare form, ``repr()`` the wrapped form. With
    ``format()``, the format code ``"w"`` selects wrapped and ``""`` bare.
    """

    def __init__(
        self,
        values: Iterable[Any],
        adjacency: Adjacency | None = None,
        settings: FormatSettings | None = None,
        render: Callable[[Any], str] = str,
    ) -> None:
        self.values = tuple(values)
        if adjacency is None and self.values:
            adjacency = adjacency_for(self.values[0])
        self.adjacency = adjacency
        self.settings = settings or DEFAULT_SETTINGS
        self.render = render

    def runs(self) -> list[Run]:
        return list(build_runs(self.values, self.adjacency))

    def _format(self, wrapped: bool) -> str:
        return format_ranges(
            self.values,
            wrapped=wrapped,
            adjacency=self.adjacency,
            settings=self.settings,
            render=self.render,
        )

    def __str__(self) -> str:
        return self._format(wrapped=False)

    def __repr__(self) -> str:
        return self._format(wrapped=True)

    def __format__(self, format_spec: str) -> str:
        if format_spec == "":
            return self._format(wrapped=False)
        if format_spec == "w":
            return self._format(wrapped=True)
        raise ValueError(f"Unknown format code '{format_spec}' for AdjacentRanges; use '' or 'w'")


def debug_adjacent(
    values: Iterable[Any],
    adjacency: Adjacency | None = None,
    settings: FormatSettings | None = None,
    render: Callable[[Any], str] = str,
) -> AdjacentRanges:
    """Wrap values for deferred display, using the default adjacency for their type."""
    return AdjacentRanges(values, adjacency=adjacency, settings=settings, render=render)


def debug_adjacent_by(
    values: Iterable[Any],
    is_adjacent: Callable[[Any, Any], bool],
    settings: FormatSettings | None = None,
    render: Callable[[Any], str] = str,
) -> AdjacentRanges:
    """Wrap values for deferred display, using ``is_adjacent(current, candidate)`` for grouping."""
    return AdjacentRanges(values, adjacency=PredicateAdjacency(is_adjacent), settings=settings, render=render)


def log_adjacent(
    label: str,
    values: Iterable[Any],
    adjacency: Adjacency | None = None,
    level: int = logging.DEBUG,
    logger: logging.Logger | None = None,
) -> AdjacentRanges:
    """
    Log ``label: <ranges>`` on the package logger, grouping only if the record is emitted.

    Returns:
        The AdjacentRanges that was logged, for reuse by the caller.
    """
    display = AdjacentRanges(values, adjacency=adjacency)
    (logger or get_logger()).log(level, "%s: %r", label, display)
    return display
