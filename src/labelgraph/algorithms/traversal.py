"""Depth-first and breadth-first traversal."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterator

from ..models import Graph

Visitor = Callable[[str], None]

logger = logging.getLogger(__name__)


def dfs(graph: Graph, start: str, visit: Visitor) -> None:
    """Call ``visit`` for every vertex reachable from ``start``, depth first.

    Destinations are explored in edge insertion order. Each vertex is visited
    at most once. An unknown ``start`` is still visited, with no neighbors.
    """
    if start not in graph:
        logger.debug("DFS start vertex %r is not in the graph", start)
    for vertex in iter_dfs(graph, start):
        visit(vertex)


def iter_dfs(graph: Graph, start: str) -> Iterator[str]:
    """Yield vertices depth first, keeping one neighbor iterator per open vertex."""
    visited = {start}
    yield start
    stack = [iter(graph.get_neighbors(start) or [])]
    while stack:
        edge = next(stack[-1], None)
        if edge is None:
            stack.pop()
            continue
        if edge.to in visited:
            continue
        visited.add(edge.to)
        yield edge.to
        stack.append(iter(graph.get_neighbors(edge.to) or []))


def bfs(graph: Graph, start: str, visit: Visitor) -> None:
    """Call ``visit`` for every vertex reachable from ``start``, breadth first.

    Vertices are visited in non-decreasing hop count from ``start``, each
    exactly once. An unknown ``start`` is visited alone.
    """
    if start not in graph:
        logger.debug("BFS start vertex %r is not in the graph", start)
    for vertex in iter_bfs(graph, start):
        visit(vertex)


def iter_bfs(graph: Graph, start: str) -> Iterator[str]:
    """Yield vertices breadth first, in the order ``bfs`` visits them."""
    visited = {start}
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        yield vertex
        for edge in graph.get_neighbors(vertex) or []:
            if edge.to not in visited:
                visited.add(edge.to)
                queue.append(edge.to)
