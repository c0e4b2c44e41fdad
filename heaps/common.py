"""Common types, comparison helpers and errors shared by the heap implementations.

The heaps only ever ask "does this key strictly precede that one?", so any
ordered scalar works as a key, as does anything deriving from Comparable.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from enum import Enum
from typing import Any, cast

__all__ = [
    "Comparable",
    "EmptyHeapError",
    "HeapError",
    "KeyIncreaseError",
    "Ordering",
    "Sized",
    "compare",
    "render_key",
]


class HeapError(Exception):
    """Base class for errors raised by heap operations."""

    pass


class KeyIncreaseError(HeapError, ValueError):
    """Raised when decrease_key is asked to make a key larger.

    The heap is left exactly as it was before the call.
    """

    def __init__(self, current: Any, requested: Any) -> None:
        super().__init__(f"Key {requested} is bigger than current key {current}")
        self.current = current
        self.requested = requested


class EmptyHeapError(HeapError, IndexError):
    """Raised when removing the minimum of an empty heap."""

    pass


class Sized(metaclass=ABCMeta):
    @abstractmethod
    def size(self) -> int: ...

    def empty(self) -> bool:
        return self.size() == 0

    def __bool__(self) -> bool:
        return not self.empty()

    def __len__(self) -> int:
        return self.size()


class Ordering(Enum):
    """Enumeration representing the result of a comparison operation."""

    Lt = -1
    Eq = 0
    Gt = 1


class Comparable[T](metaclass=ABCMeta):
    @abstractmethod
    def compare(self, other: T) -> Ordering: ...

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, type(self)):
            return self.compare(cast(T, other)) == Ordering.Eq
        else:
            return False

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __lt__(self, other: T) -> bool:
        return self.compare(other) == Ordering.Lt

    def __le__(self, other: T) -> bool:
        return not self.__gt__(other)

    def __gt__(self, other: T) -> bool:
        return self.compare(other) == Ordering.Gt

    def __ge__(self, other: T) -> bool:
        return not self.__lt__(other)


def compare[T](a: T, b: T) -> Ordering:
    """Compare two keys and return their ordering relationship.

    Only __lt__ is consulted, so keys need nothing more than a strict weak
    order. Incomparable keys (neither is less) are reported as Eq.

    Args:
        a: First key to compare.
        b: Second key to compare.

    Returns:
        Ordering indicating the relationship between a and b.
    """
    # Unsafe lt because generic protocols are half-baked
    if cast(Any, a) < b:
        return Ordering.Lt
    elif cast(Any, b) < a:
        return Ordering.Gt
    else:
        return Ordering.Eq


def render_key(key: Any) -> str:
    """Render a key zero-padded to two characters (5 -> "05", 13 -> "13")."""
    return str(key).rjust(2, "0")
