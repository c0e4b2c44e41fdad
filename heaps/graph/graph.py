"""Adjacency-list graphs and random graph generation."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import numpy as np

from heaps import constants
from heaps.graph.edge import Edge, Key, Weight

__all__ = ["Graph", "generate_random_graph", "mk_graph"]

type Graph = List[List[Edge]]
"""Outgoing edges of each node, indexed by node key 0..n-1."""


def mk_graph(num_nodes: int, arcs: Iterable[Tuple[Key, Key, Weight]]) -> Graph:
    """Build a graph from (source, target, weight) triples.

    Args:
        num_nodes: Number of nodes; keys are 0..num_nodes-1.
        arcs: Directed arcs, added to each source's list in the given order.

    Returns:
        The adjacency list.

    Raises:
        ValueError: If an arc refers to a key outside the graph.
    """
    graph: Graph = [[] for _ in range(num_nodes)]
    for src, dst, weight in arcs:
        if not (0 <= src < num_nodes and 0 <= dst < num_nodes):
            raise ValueError(
                f"Arc {src}->{dst} out of bounds for graph of size {num_nodes}"
            )
        graph[src].append(Edge(dst, weight))
    return graph


def generate_random_graph(
    num_nodes: int,
    num_edges: int,
    max_weight: Weight,
    rng: Optional[np.random.Generator] = None,
) -> Graph:
    """Generate a directed graph with uniformly random arcs.

    Sources and targets are drawn uniformly from all nodes (self loops and
    parallel arcs are possible) and weights uniformly from [0, max_weight).

    Args:
        num_nodes: Number of nodes.
        num_edges: Number of arcs; at most num_nodes * (num_nodes - 1) / 2.
        max_weight: Exclusive upper bound on arc weights.
        rng: Random source, seeded with constants.DEFAULT_SEED if omitted.

    Returns:
        The adjacency list.
    """
    assert (num_nodes == 0 and num_edges == 0) or (
        num_edges <= num_nodes * (num_nodes - 1) / 2
    )
    if rng is None:
        rng = np.random.default_rng(constants.DEFAULT_SEED)

    graph: Graph = [[] for _ in range(num_nodes)]
    if num_edges == 0:
        return graph

    sources = rng.integers(0, num_nodes, size=num_edges)
    targets = rng.integers(0, num_nodes, size=num_edges)
    weights = rng.uniform(0.0, max_weight, size=num_edges)
    for src, dst, weight in zip(sources, targets, weights):
        graph[int(src)].append(Edge(int(dst), float(weight)))
    return graph
