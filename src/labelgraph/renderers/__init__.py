"""Graph renderers."""

from .console import format_distance, render_distances, render_graph

__all__ = ["format_distance", "render_distances", "render_graph"]
