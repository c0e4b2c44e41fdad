"""Directed arcs of a weighted graph.

An Edge is both an adjacency-list entry (target key plus arc weight) and a
priority-queue entry during shortest-path search (node key plus tentative
distance). Either way it is ordered by weight alone.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import override

from heaps.common import Comparable, Ordering, compare

__all__ = ["INFINITY", "INVALID_KEY", "Edge", "Key", "Weight"]

type Key = int
type Weight = float

INVALID_KEY: Key = -1
"""Marks a node with no known predecessor."""

INFINITY: Weight = float("inf")
"""Distance of a node not yet reached."""


@dataclass(frozen=True, eq=False)
class Edge(Comparable["Edge"]):
    """An arc to node `key` with the given weight, compared on weight only."""

    key: Key
    weight: Weight

    @override
    def compare(self, other: Edge) -> Ordering:
        return compare(self.weight, other.weight)

    def __str__(self) -> str:
        return f"{self.key}:{self.weight:g}"
