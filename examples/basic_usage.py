"""Basic usage example: build a small route graph, query it, persist it."""

from __future__ import annotations

from pathlib import Path

from labelgraph import Graph, bfs, dfs, dijkstra
from labelgraph.renderers import render_distances, render_graph


def main() -> None:
    output_dir = Path("artifacts")
    output_dir.mkdir(exist_ok=True)

    routes = Graph.new(directed=False)
    routes.add_edge("Oslo", "Stockholm", "rail", 6.5)
    routes.add_edge("Oslo", "Copenhagen", "ferry", 17.0)
    routes.add_edge("Stockholm", "Copenhagen", "rail", 5.2)
    routes.add_edge("Copenhagen", "Hamburg", "rail", 4.7)

    print(render_graph(routes))
    print("Rail links from Stockholm:", routes.get_neighbors_by_relationship("Stockholm", "rail"))

    visited: list[str] = []
    dfs(routes, "Oslo", visited.append)
    print("DFS:", " ".join(visited))

    visited.clear()
    bfs(routes, "Oslo", visited.append)
    print("BFS:", " ".join(visited))

    print(render_distances(dijkstra(routes, "Oslo")))

    graph_path = routes.save_to_file(output_dir / "routes.json")
    reloaded = Graph.load_from_file(graph_path)
    print(f"Graph file saved to: {graph_path} ({reloaded.vertex_count} vertices)")


if __name__ == "__main__":
    main()
