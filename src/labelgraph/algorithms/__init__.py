"""Graph traversal and shortest-path algorithms."""

from .shortest_path import dijkstra
from .traversal import Visitor, bfs, dfs, iter_bfs, iter_dfs

__all__ = ["Visitor", "bfs", "dfs", "dijkstra", "iter_bfs", "iter_dfs"]
