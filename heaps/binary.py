"""Array-backed binary min-heap.

This is the baseline the Fibonacci heap is measured against. Insertion and
extraction are O(log n), but merge re-heapifies the whole array in O(n), and
decrease_key is O(n) in the worst case because handles do not know their
position in the array: after a key changes, the heap is scanned for the first
order violation and sifted up from there.

Arbitrary removal marks the node as removed, which makes it compare below
every other key, then extracts the minimum. No sentinel key is needed, so any
ordered key type works.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, override

from heaps.common import KeyIncreaseError, Ordering, compare, render_key
from heaps.queue import PriorityQueue

__all__ = ["BinaryHeap", "BinaryNode"]


@dataclass(eq=False)
class BinaryNode[K]:
    """A key wrapped so callers can hold on to it across heap mutations.

    Attributes:
        key: The value used for heap ordering.
        removed: Set while the node is being removed; a removed node
            precedes everything.
    """

    key: K
    removed: bool = False


def _precedes[K](lhs: BinaryNode[K], rhs: BinaryNode[K]) -> bool:
    if lhs.removed:
        return not rhs.removed
    if rhs.removed:
        return False
    return compare(lhs.key, rhs.key) == Ordering.Lt


class BinaryHeap[K](PriorityQueue[K, BinaryNode[K]]):
    """A binary min-heap stored in a Python list.

    Invariant: heap[i] <= heap[2i+1] and heap[i] <= heap[2i+2] for all valid
    indices, after every public operation.
    """

    def __init__(self, keys: Iterable[K] = ()) -> None:
        self._heap: List[BinaryNode[K]] = [BinaryNode(key) for key in keys]
        self._heapify()

    @override
    def size(self) -> int:
        return len(self._heap)

    def nodes(self) -> List[BinaryNode[K]]:
        """Return the backing array (in heap order, not sorted order)."""
        return self._heap

    @override
    def get_minimum(self) -> Optional[BinaryNode[K]]:
        return self._heap[0] if self._heap else None

    @override
    def insert(self, key: K) -> BinaryNode[K]:
        """Insert a new node in time O(log n)."""
        node = BinaryNode(key)
        self._heap.append(node)
        self._sift_up(len(self._heap) - 1)
        return node

    @override
    def merge(self, other: BinaryHeap[K], consume: bool = False) -> None:
        """Merge the nodes of another binary heap in time O(n + m).

        A copying merge creates fresh nodes, so handles into other stay
        valid for other only.
        """
        if consume and other is self:
            raise ValueError("Cannot consume a heap into itself")
        if consume:
            self._heap.extend(other._heap)
            other._heap = []
        else:
            self._heap.extend([BinaryNode(node.key) for node in other._heap])
        self._heapify()

    @override
    def remove_minimum(self) -> BinaryNode[K]:
        """Remove the minimum node in time O(log n)."""
        self._check_nonempty()
        last = len(self._heap) - 1
        self._swap(0, last)
        deleted = self._heap.pop()
        if self._heap:
            self._sift_down(0)
        return deleted

    @override
    def decrease_key(self, node: BinaryNode[K], new_key: K) -> None:
        """Decrease the key of an existing node in time O(n)."""
        if compare(node.key, new_key) == Ordering.Lt:
            raise KeyIncreaseError(node.key, new_key)
        node.key = new_key
        self._restore_order()

    @override
    def remove(self, node: BinaryNode[K]) -> None:
        """Remove an arbitrary node in time O(n)."""
        node.removed = True
        self._restore_order()
        self.remove_minimum()

    @override
    def to_string(self) -> str:
        return " ".join(render_key(node.key) for node in self._heap)

    def _restore_order(self) -> None:
        # Only one node changed, so at most one position violates heap order
        for index in range(1, len(self._heap)):
            if _precedes(self._heap[index], self._heap[(index - 1) // 2]):
                self._sift_up(index)
                return

    def _heapify(self) -> None:
        for index in reversed(range(len(self._heap) // 2)):
            self._sift_down(index)

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if not _precedes(self._heap[index], self._heap[parent]):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._heap)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and _precedes(self._heap[child], self._heap[smallest]):
                    smallest = child
            if smallest == index:
                break
            self._swap(index, smallest)
            index = smallest

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]
