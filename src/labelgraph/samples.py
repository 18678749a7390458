"""Small sample graphs used by the demo command and in examples."""

from __future__ import annotations

from .models import Graph


def build_directed_sample() -> Graph:
    """Four-vertex directed graph whose cheapest A→D route is A→B→C→D (9), not A→D (10)."""
    graph = Graph.new(directed=True)
    for vertex in ("A", "B", "C", "D"):
        graph.add_vertex(vertex)
    graph.add_edge("A", "B", "connects", 4.0)
    graph.add_edge("B", "C", "connects", 3.0)
    graph.add_edge("C", "D", "connects", 2.0)
    graph.add_edge("A", "D", "connects", 10.0)
    return graph


def build_undirected_sample() -> Graph:
    graph = Graph.new(directed=False)
    for vertex in ("X", "Y", "Z"):
        graph.add_vertex(vertex)
    graph.add_edge("X", "Y", "friends", 1.0)
    graph.add_edge("Y", "Z", "friends", 1.0)
    return graph
