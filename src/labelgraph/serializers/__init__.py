"""Serialization helpers."""

from .json import graph_from_json, graph_to_json, load_graph_json, save_graph_json

__all__ = ["graph_from_json", "graph_to_json", "load_graph_json", "save_graph_json"]
