from __future__ import annotations

import json
import math
from collections import Counter
from pathlib import Path

from labelgraph.config import PersistenceConfig
from labelgraph.models import Graph
from labelgraph.serializers import graph_from_json, graph_to_json, load_graph_json, save_graph_json


def _edge_multisets(graph: Graph) -> dict[str, Counter[tuple[str, str, float]]]:
    return {
        vertex: Counter((edge.to, edge.relationship, edge.weight) for edge in edges)
        for vertex, edges in graph.vertices.items()
    }


def test_graph_to_json_has_vertices_and_directed_fields(directed_graph: Graph) -> None:
    document = json.loads(graph_to_json(directed_graph))

    assert set(document) == {"vertices", "directed"}
    assert document["directed"] is True
    assert document["vertices"]["A"] == [
        {"to": "B", "relationship": "connects", "weight": 4.0},
        {"to": "D", "relationship": "connects", "weight": 10.0},
    ]
    assert document["vertices"]["D"] == []


def test_graph_to_and_from_json_roundtrip(undirected_graph: Graph) -> None:
    loaded = graph_from_json(graph_to_json(undirected_graph))

    assert loaded.directed is False
    assert loaded.vertices.keys() == undirected_graph.vertices.keys()
    assert _edge_multisets(loaded) == _edge_multisets(undirected_graph)


def test_graph_from_json_accepts_integer_weights_and_extra_fields() -> None:
    payload = (
        '{"vertices": {"A": [{"to": "B", "relationship": "r", "weight": 3, "note": "x"}],'
        ' "B": []}, "directed": true, "name": "ignored"}'
    )
    graph = graph_from_json(payload)

    assert graph.get_neighbors_by_relationship("A", "r") == ["B"]
    neighbors = graph.get_neighbors("A")
    assert neighbors is not None
    assert neighbors[0].weight == 3.0


def test_save_and_load_graph_json_file(directed_graph: Graph, tmp_path: Path) -> None:
    output = tmp_path / "graph.json"
    assert save_graph_json(directed_graph, output) == output

    loaded = load_graph_json(output)
    assert loaded.directed is True
    assert loaded.vertices.keys() == directed_graph.vertices.keys()
    assert _edge_multisets(loaded) == _edge_multisets(directed_graph)


def test_graph_save_and_load_methods(undirected_graph: Graph, tmp_path: Path) -> None:
    output = tmp_path / "undirected.json"
    undirected_graph.save_to_file(output)

    loaded = Graph.load_from_file(output)
    assert loaded == undirected_graph


def test_negative_weights_survive_roundtrip(tmp_path: Path) -> None:
    graph = Graph.new(directed=True)
    graph.add_edge("A", "B", "debt", -12.5)
    output = tmp_path / "negative.json"
    graph.save_to_file(output)

    assert Graph.load_from_file(output) == graph


def test_non_finite_weights_survive_roundtrip(tmp_path: Path) -> None:
    graph = Graph.new(directed=True)
    graph.add_edge("A", "B", "unknown", float("nan"))
    graph.add_edge("A", "C", "blocked", math.inf)
    graph.add_edge("A", "D", "credit", -math.inf)
    output = tmp_path / "non_finite.json"
    graph.save_to_file(output)

    text = output.read_text(encoding="utf-8")
    assert "NaN" in text
    assert "-Infinity" in text

    neighbors = Graph.load_from_file(output).get_neighbors("A")
    assert neighbors is not None
    assert [edge.to for edge in neighbors] == ["B", "C", "D"]
    assert math.isnan(neighbors[0].weight)
    assert neighbors[1].weight == math.inf
    assert neighbors[2].weight == -math.inf


def test_persistence_config_controls_indent(directed_graph: Graph, tmp_path: Path) -> None:
    output = tmp_path / "compact.json"
    save_graph_json(directed_graph, output, config=PersistenceConfig(indent=None))

    text = output.read_text(encoding="utf-8")
    assert "\n" not in text
    assert load_graph_json(output, config=PersistenceConfig(indent=None)) == directed_graph
