"""labelgraph — in-memory labeled graphs with traversal, shortest paths and JSON persistence.

    from labelgraph import Graph, bfs, dfs, dijkstra

    graph = Graph.new(directed=True)
    graph.add_edge("A", "B", "connects", 4.0)
    dfs(graph, "A", print)
    dijkstra(graph, "A")          # {"A": 0.0, "B": 4.0}
    graph.save_to_file("graph.json")
    Graph.load_from_file("graph.json")
"""

from __future__ import annotations

from .algorithms import Visitor, bfs, dfs, dijkstra, iter_bfs, iter_dfs
from .config import PersistenceConfig
from .exceptions import (
    GraphFileNotFoundError,
    GraphParseError,
    GraphReadError,
    GraphSerializeError,
    GraphWriteError,
    LabelgraphError,
)
from .models import Edge, Graph

__all__ = [
    "Edge",
    "Graph",
    "GraphFileNotFoundError",
    "GraphParseError",
    "GraphReadError",
    "GraphSerializeError",
    "GraphWriteError",
    "LabelgraphError",
    "PersistenceConfig",
    "Visitor",
    "bfs",
    "dfs",
    "dijkstra",
    "iter_bfs",
    "iter_dfs",
]
