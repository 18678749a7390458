"""Traverse and shortest-path subcommand implementations."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Literal

from ..algorithms import dijkstra, iter_bfs, iter_dfs
from ..renderers import render_distances
from .common import load_graph_or_report

TraversalOrder = Literal["dfs", "bfs"]


def run_traverse(graph_file: Path, start: str, order: TraversalOrder) -> int:
    graph = load_graph_or_report(graph_file)
    if graph is None:
        return 1
    walk = iter_dfs if order == "dfs" else iter_bfs
    print(" ".join(walk(graph, start)))
    return 0


def run_shortest(graph_file: Path, start: str, *, as_json: bool) -> int:
    graph = load_graph_or_report(graph_file)
    if graph is None:
        return 1
    distances = dijkstra(graph, start)

    if as_json:
        payload = {
            vertex: (None if math.isinf(distance) else distance)
            for vertex, distance in distances.items()
        }
        print(json.dumps(payload, ensure_ascii=True, sort_keys=True))
        return 0

    print(f"Shortest distances from {start}:")
    print(render_distances(distances))
    return 0
