"""Dijkstra's shortest path over any priority queue.

The queue holds Edge(node, distance) entries. Each relaxation inserts a new
entry instead of decreasing an old one, so the queue may hold stale entries
for a node; the search stops as soon as the destination is the minimum, which
is its final distance because weights are non-negative. Negative weights are
not detected and give wrong paths.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List

from heaps.graph.edge import INFINITY, INVALID_KEY, Edge, Key, Weight
from heaps.graph.graph import Graph
from heaps.queue import PriorityQueue

__all__ = ["QueueFactory", "dijkstra"]

type QueueFactory = Callable[[], PriorityQueue[Edge, Any]]
"""Builds an empty priority queue, e.g. BinaryHeap or FibonacciHeap."""


def dijkstra(
    graph: Graph, source: Key, destination: Key, queue_factory: QueueFactory
) -> List[Key]:
    """Find a minimum-weight path from source to destination.

    Args:
        graph: Adjacency list with non-negative weights; not modified.
        source: Start node.
        destination: End node.
        queue_factory: Creates the priority queue driving the search.

    Returns:
        The nodes of the path, from source to destination. If destination is
        unreachable the path is just [source], so callers must check the last
        node before trusting it.
    """
    assert 0 <= source < len(graph)
    assert 0 <= destination < len(graph)

    parent: List[Key] = [INVALID_KEY] * len(graph)
    distance: List[Weight] = [INFINITY] * len(graph)
    queue = queue_factory()

    distance[source] = 0.0
    queue.insert(Edge(source, distance[source]))

    while not queue.empty():
        u = queue.delete_minimum().key
        if u == destination:
            break
        for edge in graph[u]:
            v = edge.key
            candidate = distance[u] + edge.weight
            if distance[v] > candidate:
                distance[v] = candidate
                parent[v] = u
                queue.insert(Edge(v, candidate))

    path: List[Key] = []
    node = destination
    while parent[node] != INVALID_KEY:
        path.append(node)
        node = parent[node]
    path.append(source)
    path.reverse()

    if path[-1] != destination:
        logging.debug("no path from %d to %d", source, destination)
    return path
