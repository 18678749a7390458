"""Public exception types for labelgraph."""

from __future__ import annotations


class LabelgraphError(Exception):
    """Base class for all labelgraph exceptions."""


class GraphReadError(LabelgraphError):
    """Raised when a graph file cannot be read from storage."""


class GraphFileNotFoundError(GraphReadError):
    """Raised when a graph file does not exist."""


class GraphParseError(LabelgraphError):
    """Raised when graph file content cannot be decoded into a graph."""


class GraphWriteError(LabelgraphError):
    """Raised when a graph cannot be written to storage."""


class GraphSerializeError(LabelgraphError):
    """Raised when a graph cannot be encoded as JSON."""
