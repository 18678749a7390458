"""Inspect subcommand implementation."""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path

from ..models import Graph
from ..renderers import render_graph
from .common import load_graph_or_report


def run_inspect(graph_file: Path, *, as_json: bool) -> int:
    graph = load_graph_or_report(graph_file)
    if graph is None:
        return 1

    if as_json:
        print(json.dumps(_build_summary(graph), ensure_ascii=True, sort_keys=True))
        return 0

    print(f"Directed: {'yes' if graph.directed else 'no'}")
    print(f"Vertices: {graph.vertex_count}")
    print(f"Edges: {graph.edge_count}")
    print("Relationship counts:")
    for relationship, count in _relationship_counts(graph).items():
        print(f"  - {relationship}: {count}")
    print()
    print(render_graph(graph))
    return 0


def _relationship_counts(graph: Graph) -> dict[str, int]:
    counts = Counter(edge.relationship for edges in graph.vertices.values() for edge in edges)
    return dict(sorted(counts.items(), key=lambda item: item[0]))


def _build_summary(graph: Graph) -> dict[str, object]:
    return {
        "directed": graph.directed,
        "vertex_count": graph.vertex_count,
        "edge_count": graph.edge_count,
        "vertices": list(graph.vertices),
        "relationship_counts": _relationship_counts(graph),
    }
