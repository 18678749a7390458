"""Helpers shared by CLI subcommands."""

from __future__ import annotations

import sys
from pathlib import Path

from ..exceptions import GraphFileNotFoundError, GraphParseError, GraphReadError
from ..models import Graph
from ..serializers import load_graph_json


def load_graph_or_report(graph_file: Path) -> Graph | None:
    """Load a graph, printing an error to stderr and returning None on failure."""
    try:
        return load_graph_json(graph_file)
    except GraphFileNotFoundError:
        print(f"Error: file not found: {graph_file}", file=sys.stderr)
    except GraphParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    except GraphReadError as exc:
        print(f"Error: failed to read {graph_file}: {exc}", file=sys.stderr)
    return None
