"""The priority queue contract shared by every heap implementation.

Algorithms such as Dijkstra are written against PriorityQueue only, so the
backing heap can be swapped without touching them.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Optional, Protocol, Self

from heaps.common import EmptyHeapError, Sized

__all__ = ["Handle", "PriorityQueue"]


class Handle[K](Protocol):
    """Anything returned by insert: a node exposing its current key."""

    key: K


class PriorityQueue[K, N: Handle](Sized):
    """A mutable min-priority queue over keys of type K with node handles N.

    Handles returned by insert stay valid until their node is removed by
    remove_minimum, delete_minimum or remove. Using a handle after that, or
    with a heap that does not own it, is undefined behaviour.
    """

    @abstractmethod
    def insert(self, key: K) -> N:
        """Insert a key and return the handle of its new node."""
        ...

    @abstractmethod
    def get_minimum(self) -> Optional[N]:
        """Return the minimum node, or None if the heap is empty."""
        ...

    @abstractmethod
    def remove_minimum(self) -> N:
        """Remove the minimum node and return it.

        Raises:
            EmptyHeapError: If the heap is empty.
        """
        ...

    @abstractmethod
    def merge(self, other: Self, consume: bool = False) -> None:
        """Add every key of other to this heap.

        Args:
            other: The heap to merge in.
            consume: If True, take other's nodes over and leave other empty.
                Otherwise other is copied and left untouched.

        Raises:
            ValueError: If consume is True and other is this heap.
        """
        ...

    @abstractmethod
    def decrease_key(self, node: N, new_key: K) -> None:
        """Lower the key of a live node.

        Raises:
            KeyIncreaseError: If new_key is greater than the node's key.
        """
        ...

    @abstractmethod
    def remove(self, node: N) -> None:
        """Remove an arbitrary live node from the heap."""
        ...

    @abstractmethod
    def to_string(self) -> str:
        """Render the heap structure deterministically."""
        ...

    def find_minimum(self) -> Optional[K]:
        """Return the minimum key, or None if the heap is empty."""
        node = self.get_minimum()
        return None if node is None else node.key

    def delete_minimum(self) -> K:
        """Remove the minimum node and return its key.

        Raises:
            EmptyHeapError: If the heap is empty.
        """
        return self.remove_minimum().key

    def _check_nonempty(self) -> None:
        if self.empty():
            raise EmptyHeapError(f"{type(self).__name__} is empty")

    def __str__(self) -> str:
        return self.to_string()
