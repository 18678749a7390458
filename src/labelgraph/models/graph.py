"""Graph model — adjacency-list container for labeled, weighted edges."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, model_validator

from .edge import Edge

if TYPE_CHECKING:
    from ..config import PersistenceConfig


class Graph(BaseModel):
    """Mapping of vertex id to its outgoing edges, in insertion order.

    Every edge destination is also a vertex key. Undirected graphs store each
    edge twice, once per endpoint. Parallel edges are kept as-is.
    """

    model_config = ConfigDict(strict=True, extra="ignore", ser_json_inf_nan="constants")

    vertices: dict[str, list[Edge]]
    directed: bool

    @classmethod
    def new(cls, directed: bool) -> Graph:
        return cls(vertices={}, directed=directed)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.vertices

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self.vertices.values())

    @property
    def relationships(self) -> list[str]:
        return sorted({edge.relationship for edges in self.vertices.values() for edge in edges})

    def add_vertex(self, vertex: str) -> None:
        self.vertices.setdefault(vertex, [])

    def add_edge(self, source: str, target: str, relationship: str, weight: float) -> None:
        self.vertices.setdefault(source, []).append(
            Edge(to=target, relationship=relationship, weight=weight)
        )
        if not self.directed:
            self.vertices.setdefault(target, []).append(
                Edge(to=source, relationship=relationship, weight=weight)
            )
        self.vertices.setdefault(target, [])

    def get_neighbors(self, vertex: str) -> list[Edge] | None:
        return self.vertices.get(vertex)

    def get_neighbors_by_relationship(self, vertex: str, relationship: str) -> list[str]:
        return [
            edge.to for edge in self.vertices.get(vertex, []) if edge.relationship == relationship
        ]

    def save_to_file(self, path: str | Path, *, config: PersistenceConfig | None = None) -> Path:
        """Write the graph as JSON. See ``labelgraph.serializers.save_graph_json``."""
        from ..serializers import save_graph_json

        return save_graph_json(self, path, config=config)

    @classmethod
    def load_from_file(cls, path: str | Path, *, config: PersistenceConfig | None = None) -> Graph:
        """Read a graph from JSON. See ``labelgraph.serializers.load_graph_json``."""
        from ..serializers import load_graph_json

        return load_graph_json(path, config=config)

    @model_validator(mode="after")
    def validate_edge_destinations(self) -> Graph:
        for source, edges in self.vertices.items():
            for edge in edges:
                if edge.to not in self.vertices:
                    raise ValueError(
                        f"Edge destination not found in vertices: {source} -> {edge.to}"
                    )
        return self
