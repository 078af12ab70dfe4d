"""
Adjacency capability used to group values into runs.

A value ``b`` is adjacent to ``a`` when ``b`` is the forward neighbour of ``a``
(for integers: ``b == a + 1``). Only the forward relation counts, so
descending or repeated values never form a run.

Successor implementations must be deterministic, must never return their
input, and must return ``None`` at a maximum value instead of wrapping
around. A successor that wraps would merge the maximum with the minimum.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

from .constants import INTEGER_BOUNDS, MAX_CODE_POINT, SURROGATE_RANGE

T = TypeVar("T")


class AdjacencyError(TypeError):
    """Raised when no adjacency can be used for the given values."""

    def __init__(self, message: str, hint: str | None = None):
        self.message = message
        self.hint = hint
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nHint: {self.hint}"
        return self.message


class Adjacency(Protocol[T]):
    """Protocol for deciding whether one value directly follows another."""

    def is_adjacent(self, current: T, candidate: T) -> bool:
        """Return True if ``candidate`` is the forward neighbour of ``current``."""
        ...


class Discrete(Protocol):
    """Protocol for custom value types that know their own successor."""

    def successor(self) -> Any:
        """Return the next value, or None if there is none."""
        ...


class SuccessorAdjacency(ABC):
    """Adjacency defined by a successor function."""

    @abstractmethod
    def successor(self, value: Any) -> Any:
        """
        Return the value directly after ``value``.

        Returns None when ``value`` has no successor, either because it is the
        maximum of its domain or because it lies outside the domain. Must not
        return ``value`` itself and must not wrap around to a minimum.
        """

    def is_adjacent(self, current: Any, candidate: Any) -> bool:
        after = self.successor(current)
        if after is None or after == current:
            return False
        return after == candidate


@dataclass(frozen=True)
class IntegerAdjacency(SuccessorAdjacency):
    """
    Successor adjacency for integers, optionally bounded.

    Args:
        minimum: Smallest representable value (None for unbounded).
        maximum: Largest representable value (None for unbounded). The maximum
            has no successor.
    """

    minimum: int | None = None
    maximum: int | None = None

    def successor(self, value: int) -> int | None:
        if self.minimum is not None and value < self.minimum:
            return None
        if self.maximum is not None and value >= self.maximum:
            return None
        return value + 1


class CharAdjacency(SuccessorAdjacency):
    """Successor adjacency for single characters, by Unicode scalar value."""

    def successor(self, value: str) -> str | None:
        if not isinstance(value, str) or len(value) != 1:
            return None
        code_point = ord(value)
        if SURROGATE_RANGE[0] <= code_point <= SURROGATE_RANGE[1]:
            return None
        next_code_point = code_point + 1
        if next_code_point > MAX_CODE_POINT:
            return None
        if SURROGATE_RANGE[0] <= next_code_point <= SURROGATE_RANGE[1]:
            return None
        return chr(next_code_point)


class MethodAdjacency(SuccessorAdjacency):
    """Successor adjacency that delegates to the value's own ``successor()``."""

    def successor(self, value: Discrete) -> Any:
        return value.successor()


class PredicateAdjacency:
    """Adjacency backed by a caller-supplied ``is_adjacent(current, candidate)`` callable."""

    def __init__(self, is_adjacent: Callable[[Any, Any], bool]) -> None:
        if not callable(is_adjacent):
            raise AdjacencyError(
                "PredicateAdjacency requires a callable.",
                "Pass a function taking (current, candidate) and returning bool.",
            )
        self._is_adjacent = is_adjacent

    def is_adjacent(self, current: Any, candidate: Any) -> bool:
        return bool(self._is_adjacent(current, candidate))


INTEGER = IntegerAdjacency()
U8 = IntegerAdjacency(*INTEGER_BOUNDS['u8'])
U16 = IntegerAdjacency(*INTEGER_BOUNDS['u16'])
U32 = IntegerAdjacency(*INTEGER_BOUNDS['u32'])
U64 = IntegerAdjacency(*INTEGER_BOUNDS['u64'])
U128 = IntegerAdjacency(*INTEGER_BOUNDS['u128'])
I8 = IntegerAdjacency(*INTEGER_BOUNDS['i8'])
I16 = IntegerAdjacency(*INTEGER_BOUNDS['i16'])
I32 = IntegerAdjacency(*INTEGER_BOUNDS['i32'])
I64 = IntegerAdjacency(*INTEGER_BOUNDS['i64'])
I128 = IntegerAdjacency(*INTEGER_BOUNDS['i128'])
CHAR = CharAdjacency()
METHOD = MethodAdjacency()


def adjacency_for(value: Any) -> Adjacency:
    """
    Pick the default adjacency for a value.

    Args:
        value: A representative value (usually the first of the sequence).

    Returns:
        INTEGER for ints, CHAR for one-character strings, METHOD for objects
        with a callable ``successor``.

    Raises:
        AdjacencyError: If the value type has no default adjacency.
    """
    if isinstance(value, bool):
        raise AdjacencyError(
            "bool values have no default adjacency.",
            "Pass adjacency=INTEGER explicitly if True should follow False.",
        )
    if isinstance(value, int):
        return INTEGER
    if isinstance(value, str) and len(value) == 1:
        return CHAR
    if callable(getattr(value, "successor", None)):
        return METHOD
    raise AdjacencyError(
        f"No default adjacency for values of type {type(value).__name__}.",
        "Pass an adjacency, or give the type a successor() method.",
    )
