from __future__ import annotations

import math

from labelgraph.models import Graph
from labelgraph.renderers import format_distance, render_distances, render_graph


def test_render_graph_contains_header_and_edges(directed_graph: Graph) -> None:
    output = render_graph(directed_graph)
    assert "Graph: directed (4 vertices, 4 edges)" in output
    assert "→ B [connects] 4" in output
    assert "→ D [connects] 10" in output


def test_render_graph_undirected_lists_mirrored_edges(undirected_graph: Graph) -> None:
    output = render_graph(undirected_graph)
    assert "Graph: undirected (3 vertices, 4 edges)" in output
    assert output.count("[friends]") == 4


def test_render_graph_keeps_edge_order(directed_graph: Graph) -> None:
    output = render_graph(directed_graph)
    assert output.index("→ B [connects]") < output.index("→ D [connects] 10")


def test_render_graph_empty() -> None:
    assert "Graph: directed (0 vertices, 0 edges)" in render_graph(Graph.new(directed=True))


def test_render_distances_orders_by_distance() -> None:
    output = render_distances({"D": 9.0, "A": 0.0, "Z": math.inf, "B": 4.0})
    assert "Vertex" in output
    assert "Distance" in output
    assert "unreachable" in output
    positions = [output.index(f" {vertex} ") for vertex in ("A", "B", "D", "Z")]
    assert positions == sorted(positions)


def test_format_distance() -> None:
    assert format_distance(0.0) == "0"
    assert format_distance(7.5) == "7.5"
    assert format_distance(math.inf) == "unreachable"
