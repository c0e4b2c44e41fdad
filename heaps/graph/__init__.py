from heaps.graph.dijkstra import dijkstra
from heaps.graph.edge import INFINITY, INVALID_KEY, Edge, Key, Weight
from heaps.graph.graph import Graph, generate_random_graph, mk_graph

__all__ = [
    "Edge",
    "Graph",
    "INFINITY",
    "INVALID_KEY",
    "Key",
    "Weight",
    "dijkstra",
    "generate_random_graph",
    "mk_graph",
]
