"""Demo subcommand: build the sample graphs, query them and round-trip them through JSON."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

from ..algorithms import Visitor, bfs, dfs, dijkstra
from ..exceptions import LabelgraphError
from ..models import Graph
from ..renderers import render_distances, render_graph
from ..samples import build_directed_sample, build_undirected_sample
from ..serializers import load_graph_json, save_graph_json

Traversal = Callable[[Graph, str, Visitor], None]


def run_demo(output_dir: Path) -> int:
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        print(f"Error: cannot create output directory {output_dir}: {exc}", file=sys.stderr)
        return 1
    try:
        _run_samples(output_dir)
    except LabelgraphError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def _run_samples(output_dir: Path) -> None:
    print("Creating a directed graph...")
    directed = build_directed_sample()
    _print_neighbors(directed, "A")

    print()
    for relationship in directed.relationships:
        print(f"Neighbors of A with {relationship!r} relationship:")
        print(f"  {directed.get_neighbors_by_relationship('A', relationship)}")

    print()
    print("DFS traversal:")
    print(" ".join(_collect(dfs, directed, "A")))
    print()
    print("BFS traversal:")
    print(" ".join(_collect(bfs, directed, "A")))

    print()
    print("Shortest paths from A:")
    print(render_distances(dijkstra(directed, "A")))
    _round_trip(directed, output_dir / "directed_graph.json")

    print()
    print("Creating an undirected graph...")
    undirected = build_undirected_sample()
    _print_neighbors(undirected, "Y")
    _round_trip(undirected, output_dir / "undirected_graph.json")


def _collect(traversal: Traversal, graph: Graph, start: str) -> list[str]:
    order: list[str] = []
    traversal(graph, start, order.append)
    return order


def _print_neighbors(graph: Graph, vertex: str) -> None:
    print(f"Neighbors of {vertex}:")
    for edge in graph.get_neighbors(vertex) or []:
        print(f"  To: {edge.to}, Relationship: {edge.relationship}, Weight: {edge.weight:g}")


def _round_trip(graph: Graph, path: Path) -> None:
    save_graph_json(graph, path)
    loaded = load_graph_json(path)
    print()
    print(f"Saved and reloaded {path}:")
    print(render_graph(loaded))
