"""Fibonacci min-heap, as described by Fredman and Tarjan.

The heap is a forest of heap-ordered trees whose roots sit in a root list,
plus a cached pointer to the minimum root. Structural work is deferred:

- insert and merge only append to the root list, O(1).
- remove_minimum promotes the children of the minimum to roots and then
  consolidates, linking roots of equal rank until every rank is unique. This
  is O(log n) amortized; the potential (roots + 2 * marked nodes) pays for the
  linear scan.
- decrease_key cuts a node that now precedes its parent into the root list,
  marking the parent. A parent that loses a second child is cut as well, and
  so on up the tree (cascading cut). O(1) amortized.
- remove marks the node as removed, which makes it precede every other key,
  applies the decrease_key restructuring and extracts the minimum. This needs
  no sentinel "negative infinity" key, so any ordered key type works.

Parent links are weak references; a node is owned by its parent's children
list or by the heap's root list, never both.

Time complexity summary:

| Operation      | Amortized   |
|----------------|-------------|
| insert         | O(1)        |
| merge          | O(1) consuming, O(n) copying |
| get_minimum    | O(1)        |
| remove_minimum | O(log n)    |
| decrease_key   | O(1)        |
| remove         | O(log n)    |
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, override

from heaps.common import KeyIncreaseError, Ordering, compare, render_key
from heaps.queue import PriorityQueue

__all__ = ["FibonacciHeap", "FibonacciNode"]


@dataclass(eq=False)
class FibonacciNode[K]:
    """A node of a Fibonacci heap tree.

    Attributes:
        key: The value used for heap ordering.
        children: Owned child nodes, in link/cut order.
        marked: Whether the node lost a child since it last became a child.
        removed: Set while the node is being removed; a removed node
            precedes everything.
    """

    key: K
    children: List[FibonacciNode[K]] = field(default_factory=list)
    marked: bool = False
    removed: bool = False
    _parent: Optional[weakref.ref[FibonacciNode[K]]] = field(
        default=None, repr=False
    )

    @property
    def parent(self) -> Optional[FibonacciNode[K]]:
        return None if self._parent is None else self._parent()

    @parent.setter
    def parent(self, node: Optional[FibonacciNode[K]]) -> None:
        self._parent = None if node is None else weakref.ref(node)

    def is_root(self) -> bool:
        return self.parent is None

    def rank(self) -> int:
        return len(self.children)


def _precedes[K](lhs: FibonacciNode[K], rhs: FibonacciNode[K]) -> bool:
    if lhs.removed:
        return not rhs.removed
    if rhs.removed:
        return False
    return compare(lhs.key, rhs.key) == Ordering.Lt


def _copy_tree[K](root: FibonacciNode[K]) -> FibonacciNode[K]:
    clone = FibonacciNode(root.key, marked=root.marked)
    stack = [(root, clone)]
    while stack:
        node, node_clone = stack.pop()
        for child in node.children:
            child_clone = FibonacciNode(child.key, marked=child.marked)
            child_clone.parent = node_clone
            node_clone.children.append(child_clone)
            stack.append((child, child_clone))
    return clone


def _link[K](lhs: FibonacciNode[K], rhs: FibonacciNode[K]) -> FibonacciNode[K]:
    """Make the larger of two roots a child of the other and return the root.

    lhs stays the root only if it strictly precedes rhs, so equal keys
    always resolve the same way.
    """
    if _precedes(lhs, rhs):
        parent, child = lhs, rhs
    else:
        parent, child = rhs, lhs
    parent.children.append(child)
    child.parent = parent
    child.marked = False
    return parent


def _push_siblings[K](
    stack: List[FibonacciNode[K] | str], nodes: List[FibonacciNode[K]]
) -> None:
    for index in reversed(range(len(nodes))):
        stack.append(nodes[index])
        if index > 0:
            stack.append(" ")


def _render_trees[K](roots: List[FibonacciNode[K]]) -> str:
    # Trees may be deeper than the recursion limit
    parts: List[str] = []
    stack: List[FibonacciNode[K] | str] = []
    _push_siblings(stack, roots)
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        parts.append("(" + render_key(item.key))
        if item.marked:
            parts.append("*")
        stack.append(")")
        _push_siblings(stack, item.children)
        if item.children:
            stack.append(" ")
    return "".join(parts)


class FibonacciHeap[K](PriorityQueue[K, FibonacciNode[K]]):
    """A mutable Fibonacci min-heap."""

    def __init__(self, keys: Iterable[K] = ()) -> None:
        self._trees: List[FibonacciNode[K]] = [FibonacciNode(key) for key in keys]
        self._num_elements = len(self._trees)
        self._minimum = self._search_minimum()

    @override
    def size(self) -> int:
        return self._num_elements

    def roots(self) -> List[FibonacciNode[K]]:
        """Return the root list."""
        return self._trees

    @override
    def get_minimum(self) -> Optional[FibonacciNode[K]]:
        return self._minimum

    @override
    def insert(self, key: K) -> FibonacciNode[K]:
        """Insert a new singleton root in time O(1)."""
        node = FibonacciNode(key)
        self._trees.append(node)
        self._num_elements += 1
        if self._minimum is None or _precedes(node, self._minimum):
            self._minimum = node
        return node

    @override
    def merge(self, other: FibonacciHeap[K], consume: bool = False) -> None:
        """Merge the trees of another Fibonacci heap.

        A consuming merge splices other's root list in O(1) and leaves other
        empty. A copying merge duplicates every node of other in O(n), so
        handles into other stay valid for other only.
        """
        if consume and other is self:
            raise ValueError("Cannot consume a heap into itself")
        if other._minimum is None:
            return
        if consume:
            trees = other._trees
            minimum = other._minimum
            other._trees = []
            other._minimum = None
        else:
            trees = [_copy_tree(root) for root in other._trees]
            minimum = trees[other._trees.index(other._minimum)]
        self._num_elements += other._num_elements
        if consume:
            other._num_elements = 0
        self._trees.extend(trees)
        if self._minimum is None or _precedes(minimum, self._minimum):
            self._minimum = minimum

    @override
    def remove_minimum(self) -> FibonacciNode[K]:
        """Remove the minimum node in amortized time O(log n)."""
        self._check_nonempty()
        deleted = self._minimum
        assert deleted is not None

        # Promote the children of the minimum to roots
        self._trees.remove(deleted)
        self._num_elements -= 1
        for child in deleted.children:
            child.parent = None
            child.marked = False
        self._trees.extend(deleted.children)
        deleted.children = []

        self._consolidate()
        self._minimum = self._search_minimum()
        return deleted

    @override
    def decrease_key(self, node: FibonacciNode[K], new_key: K) -> None:
        """Decrease the key of an existing node in amortized time O(1)."""
        if compare(node.key, new_key) == Ordering.Lt:
            raise KeyIncreaseError(node.key, new_key)
        node.key = new_key
        self._restructure(node)

    @override
    def remove(self, node: FibonacciNode[K]) -> None:
        """Remove an arbitrary node in amortized time O(log n)."""
        node.removed = True
        self._restructure(node)
        self.remove_minimum()

    @override
    def to_string(self) -> str:
        """Render the forest as space-separated S-expressions, one per root."""
        return _render_trees(self._trees)

    def _restructure(self, node: FibonacciNode[K]) -> None:
        assert self._minimum is not None
        if _precedes(node, self._minimum):
            self._minimum = node

        parent = node.parent
        if parent is None or not _precedes(node, parent):
            return

        self._cut(node, parent)
        # Cascading cut: a node losing its second child is cut as well
        while not parent.is_root():
            if not parent.marked:
                parent.marked = True
                break
            grandparent = parent.parent
            assert grandparent is not None
            self._cut(parent, grandparent)
            parent = grandparent

    def _cut(self, node: FibonacciNode[K], parent: FibonacciNode[K]) -> None:
        parent.children.remove(node)
        self._trees.append(node)
        node.marked = False
        node.parent = None

    def _consolidate(self) -> None:
        # Trees keep the position of the earliest root they absorbed
        slots: List[Optional[FibonacciNode[K]]] = []
        by_rank: Dict[int, int] = {}
        for root in self._trees:
            current = root
            position: Optional[int] = None
            while current.rank() in by_rank:
                other_position = by_rank.pop(current.rank())
                other = slots[other_position]
                assert other is not None
                current = _link(current, other)
                slots[other_position] = current
                if position is not None:
                    slots[position] = None
                position = other_position
            if position is None:
                position = len(slots)
                slots.append(current)
            by_rank[current.rank()] = position
        self._trees = [root for root in slots if root is not None]

    def _search_minimum(self) -> Optional[FibonacciNode[K]]:
        minimum: Optional[FibonacciNode[K]] = None
        for root in self._trees:
            if minimum is None or _precedes(root, minimum):
                minimum = root
        return minimum
