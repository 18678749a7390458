"""Single-source shortest path distances."""

from __future__ import annotations

import logging
import math

from ..models import Graph

logger = logging.getLogger(__name__)


def dijkstra(graph: Graph, start: str) -> dict[str, float]:
    """Return the shortest distance from ``start`` to every vertex.

    Unreachable vertices map to ``math.inf``. Ties between equally distant
    candidates are broken arbitrarily. Edge weights must be non-negative;
    results for negative weights are unspecified.

    If ``start`` is not a vertex it is still reported at distance 0.0, and
    every vertex of the graph stays at ``math.inf``.
    """
    distances = dict.fromkeys(graph.vertices, math.inf)
    if start not in distances:
        logger.debug("Dijkstra start vertex %r is not in the graph", start)
    distances[start] = 0.0
    unvisited = set(graph.vertices)

    while unvisited:
        current = min(unvisited, key=distances.__getitem__)
        unvisited.remove(current)
        for edge in graph.get_neighbors(current) or []:
            distance = distances[current] + edge.weight
            if distance < distances[edge.to]:
                distances[edge.to] = distance

    return distances
