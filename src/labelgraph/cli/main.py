"""Command line interface for labelgraph."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import cast

from .demo_cmd import run_demo
from .inspect_cmd import run_inspect
from .query_cmds import TraversalOrder, run_shortest, run_traverse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="labelgraph")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging threshold for library diagnostics",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect_parser = subparsers.add_parser("inspect", help="Inspect a graph JSON file")
    inspect_parser.add_argument("graph_file", type=Path, help="Path to graph JSON file")
    inspect_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable summary JSON instead of text output",
    )

    traverse_parser = subparsers.add_parser("traverse", help="Print traversal order")
    traverse_parser.add_argument("graph_file", type=Path, help="Path to graph JSON file")
    traverse_parser.add_argument("start", help="Start vertex id")
    traverse_parser.add_argument(
        "--order",
        choices=["dfs", "bfs"],
        default="dfs",
        help="Depth-first or breadth-first traversal",
    )

    shortest_parser = subparsers.add_parser("shortest", help="Print shortest distances")
    shortest_parser.add_argument("graph_file", type=Path, help="Path to graph JSON file")
    shortest_parser.add_argument("start", help="Start vertex id")
    shortest_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit distances as JSON (null for unreachable vertices)",
    )

    demo_parser = subparsers.add_parser("demo", help="Build, query and save the sample graphs")
    demo_parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory for the saved sample graph files",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "inspect":
        return run_inspect(args.graph_file, as_json=args.json)
    if args.command == "traverse":
        return run_traverse(args.graph_file, args.start, cast(TraversalOrder, args.order))
    if args.command == "shortest":
        return run_shortest(args.graph_file, args.start, as_json=args.json)
    if args.command == "demo":
        return run_demo(args.output_dir)

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
