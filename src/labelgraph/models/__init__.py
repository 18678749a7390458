"""Data models for labeled graphs."""

from .edge import Edge
from .graph import Graph

__all__ = ["Edge", "Graph"]
