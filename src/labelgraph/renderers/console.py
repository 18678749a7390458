"""Rich-based graph console rendering."""

from __future__ import annotations

import math
from io import StringIO

from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from ..models import Edge, Graph

_WIDTH = 120


def render_graph(graph: Graph) -> str:
    tree = Tree(_graph_label(graph))
    for vertex, edges in graph.vertices.items():
        branch = tree.add(vertex)
        for edge in edges:
            branch.add(_edge_label(edge))
    return _export(tree)


def render_distances(distances: dict[str, float]) -> str:
    """Render a distance mapping as a table, nearest vertex first."""
    table = Table("Vertex", "Distance")
    for vertex, distance in sorted(distances.items(), key=_distance_sort_key):
        table.add_row(vertex, format_distance(distance))
    return _export(table)


def format_distance(distance: float) -> str:
    if math.isinf(distance) and distance > 0:
        return "unreachable"
    return f"{distance:g}"


def _graph_label(graph: Graph) -> str:
    kind = "directed" if graph.directed else "undirected"
    return f"Graph: {kind} ({graph.vertex_count} vertices, {graph.edge_count} edges)"


def _edge_label(edge: Edge) -> str:
    return f"→ {edge.to} [{edge.relationship}] {edge.weight:g}"


def _distance_sort_key(item: tuple[str, float]) -> tuple[bool, float, str]:
    vertex, distance = item
    # NaN compares false against everything; push it to the end.
    if math.isnan(distance):
        return (True, math.inf, vertex)
    return (False, distance, vertex)


def _export(renderable: Tree | Table) -> str:
    console = Console(record=True, width=_WIDTH, markup=False, file=StringIO())
    console.print(renderable)
    return console.export_text()
