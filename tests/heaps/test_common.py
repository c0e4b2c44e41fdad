"""Tests for comparison helpers and errors"""

from dataclasses import dataclass
from typing import override

import pytest

from heaps.common import (
    Comparable,
    EmptyHeapError,
    HeapError,
    KeyIncreaseError,
    Ordering,
    compare,
    render_key,
)
from heaps.fibonacci import FibonacciHeap


@dataclass(frozen=True, eq=False)
class Version(Comparable["Version"]):
    major: int
    minor: int

    @override
    def compare(self, other: "Version") -> Ordering:
        return compare((self.major, self.minor), (other.major, other.minor))

    def __str__(self) -> str:
        return f"v{self.major}.{self.minor}"


def test_compare() -> None:
    assert compare(1, 2) == Ordering.Lt
    assert compare(2, 1) == Ordering.Gt
    assert compare(2, 2) == Ordering.Eq
    assert compare(1, 2.5) == Ordering.Lt
    assert compare("b", "a") == Ordering.Gt


def test_comparable_operators() -> None:
    assert Version(1, 2) < Version(1, 3)
    assert Version(2, 0) > Version(1, 9)
    assert Version(1, 1) == Version(1, 1)
    assert Version(1, 1) <= Version(1, 1)
    assert Version(1, 1) != Version(1, 2)
    assert Version(1, 1) != (1, 1)


def test_comparable_keys_in_heap() -> None:
    heap = FibonacciHeap([Version(2, 0), Version(1, 5), Version(1, 7)])
    node = heap.roots()[2]
    heap.decrease_key(node, Version(0, 9))
    assert heap.to_string() == "(v2.0) (v1.5) (v0.9)"
    assert heap.delete_minimum() == Version(0, 9)
    assert heap.delete_minimum() == Version(1, 5)


def test_render_key() -> None:
    assert render_key(5) == "05"
    assert render_key(13) == "13"
    assert render_key(100) == "100"
    assert render_key(-1) == "-1"
    assert render_key("a") == "0a"


def test_error_hierarchy() -> None:
    error = KeyIncreaseError(3, 4)
    assert isinstance(error, HeapError)
    assert isinstance(error, ValueError)
    assert str(error) == "Key 4 is bigger than current key 3"
    assert issubclass(EmptyHeapError, HeapError)
    assert issubclass(EmptyHeapError, IndexError)
    with pytest.raises(HeapError):
        FibonacciHeap().delete_minimum()
