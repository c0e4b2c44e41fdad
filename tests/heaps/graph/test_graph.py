"""Tests for graph construction and random generation"""

import numpy as np
import pytest

from heaps.graph.edge import Edge
from heaps.graph.graph import generate_random_graph, mk_graph


def test_edge_orders_by_weight() -> None:
    assert Edge(4, 1.0) < Edge(0, 2.0)
    assert Edge(0, 3.0) > Edge(9, 2.5)
    assert Edge(1, 2.0) == Edge(7, 2.0)
    assert str(Edge(3, 2.5)) == "3:2.5"


def test_mk_graph() -> None:
    graph = mk_graph(3, [(0, 1, 1.5), (0, 2, 0.5), (2, 1, 4.0)])
    assert len(graph) == 3
    assert [(edge.key, edge.weight) for edge in graph[0]] == [(1, 1.5), (2, 0.5)]
    assert graph[1] == []
    assert [(edge.key, edge.weight) for edge in graph[2]] == [(1, 4.0)]


def test_mk_graph_rejects_unknown_nodes() -> None:
    with pytest.raises(ValueError) as info:
        mk_graph(2, [(0, 2, 1.0)])
    assert "out of bounds" in str(info.value)


def test_random_graph_shape() -> None:
    graph = generate_random_graph(50, 100, 1000.0, rng=np.random.default_rng(1))
    assert len(graph) == 50
    edges = [edge for edges in graph for edge in edges]
    assert len(edges) == 100
    for edge in edges:
        assert isinstance(edge.key, int)
        assert 0 <= edge.key < 50
        assert 0.0 <= edge.weight < 1000.0


def test_random_graph_is_deterministic() -> None:
    def edges(seed: int) -> list:
        graph = generate_random_graph(20, 40, 10.0, rng=np.random.default_rng(seed))
        return [[(edge.key, edge.weight) for edge in row] for row in graph]

    assert edges(7) == edges(7)
    assert edges(7) != edges(8)


def test_random_graph_default_seed() -> None:
    first = generate_random_graph(10, 20, 5.0)
    second = generate_random_graph(10, 20, 5.0)
    assert [[(e.key, e.weight) for e in row] for row in first] == [
        [(e.key, e.weight) for e in row] for row in second
    ]


def test_random_graph_empty() -> None:
    assert generate_random_graph(0, 0, 1.0) == []
    assert generate_random_graph(3, 0, 1.0) == [[], [], []]


def test_random_graph_rejects_too_many_edges() -> None:
    # 4 nodes hold at most 6 edges
    generate_random_graph(4, 6, 1.0)
    with pytest.raises(AssertionError):
        generate_random_graph(4, 7, 1.0)


def test_random_graph_rejects_edges_without_nodes() -> None:
    with pytest.raises(AssertionError):
        generate_random_graph(0, 1, 1.0)
