"""JSON serialization helpers for graphs."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from ..config import PersistenceConfig
from ..exceptions import (
    GraphFileNotFoundError,
    GraphParseError,
    GraphReadError,
    GraphSerializeError,
    GraphWriteError,
)
from ..models import Graph

logger = logging.getLogger(__name__)


def graph_to_json(graph: Graph, *, indent: int | None = 2) -> str:
    """Encode a graph as a JSON document with ``vertices`` and ``directed`` fields.

    Raises ``GraphSerializeError`` if the graph cannot be encoded.
    """
    try:
        return graph.model_dump_json(indent=indent)
    except PydanticSerializationError as exc:
        raise GraphSerializeError(f"Failed to encode graph JSON: {exc}") from exc


def graph_from_json(payload: str | bytes) -> Graph:
    """Parse a JSON document into a Graph.

    Raises ``GraphParseError`` on invalid, truncated or wrongly shaped input,
    including edges that point at vertices missing from the mapping.
    """
    try:
        return Graph.model_validate_json(payload)
    except ValidationError as exc:
        raise GraphParseError(f"Failed to parse graph JSON: {exc}") from exc


def save_graph_json(
    graph: Graph,
    path: str | Path,
    *,
    config: PersistenceConfig | None = None,
) -> Path:
    """Write a graph to ``path``. The parent directory must already exist.

    Raises ``GraphSerializeError`` when encoding fails and ``GraphWriteError``
    when the file cannot be written.
    """
    config = config or PersistenceConfig()
    output_path = Path(path)
    payload = graph_to_json(graph, indent=config.indent)
    try:
        output_path.write_text(payload, encoding=config.encoding)
    except OSError as exc:
        logger.warning("Failed to write graph to %s: %s", output_path, exc)
        raise GraphWriteError(f"Failed to write graph file {output_path}: {exc}") from exc
    logger.debug(
        "Saved graph with %d vertices and %d edges to %s",
        graph.vertex_count,
        graph.edge_count,
        output_path,
    )
    return output_path


def load_graph_json(path: str | Path, *, config: PersistenceConfig | None = None) -> Graph:
    """Load a graph from a JSON file.

    Raises ``GraphFileNotFoundError`` (a ``GraphReadError``) if the file is
    missing, ``GraphReadError`` for other storage failures, and
    ``GraphParseError`` if the content is not a valid graph document.
    """
    config = config or PersistenceConfig()
    input_path = Path(path)
    try:
        payload = input_path.read_text(encoding=config.encoding)
    except FileNotFoundError as exc:
        logger.warning("Graph file not found: %s", input_path)
        raise GraphFileNotFoundError(f"Graph file not found: {input_path}") from exc
    except UnicodeDecodeError as exc:
        logger.warning("Graph file %s is not valid %s text", input_path, config.encoding)
        raise GraphParseError(f"Failed to decode graph file {input_path}: {exc}") from exc
    except OSError as exc:
        logger.warning("Failed to read graph file %s: %s", input_path, exc)
        raise GraphReadError(f"Failed to read graph file {input_path}: {exc}") from exc

    try:
        graph = graph_from_json(payload)
    except GraphParseError:
        logger.warning("Graph file %s has malformed content", input_path)
        raise
    logger.debug(
        "Loaded graph with %d vertices and %d edges from %s",
        graph.vertex_count,
        graph.edge_count,
        input_path,
    )
    return graph
