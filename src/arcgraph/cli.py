"""Command Line Interface for arcgraph.

This module provides a CLI for running the graph algorithms over a graph described
in JSON. The graph argument is either a JSON string or a file path prefixed with
'@' (see ``arcgraph.core.builder`` for the format).

The CLI supports the following commands:
    - show: Print the tree view of the graph
    - dfs: Print the depth-first visitation order
    - bfs: Print the breadth-first visitation order
    - path: Print the shortest distance and path between two nodes
    - demo: Show the built-in 20-node demo graph and query it
    - bench: Time repeated queries on a graph (the demo graph by default)

Example Usage:
    python -m arcgraph show @graph.json
    python -m arcgraph dfs '{"num_nodes": 3, "edges": ["0 -(1)-> 1"]}' --start 0
    python -m arcgraph path @graph.json --start 0 --target 5
    python -m arcgraph bench --runs 1000
"""

import argparse
import logging
import sys
from typing import List, Optional

from .benchmark import demo_graph, run_benchmark
from .config import BenchmarkConfig, RenderConfig, setup_logging
from .core.builder import load_graph
from .core.exceptions import (
    ConfigurationError,
    GraphOperationError,
    ResourceNotFoundError,
    ValidationError,
)
from .core.graph import Graph

logger = logging.getLogger(__name__)


def format_path(graph: Graph, start: int, target: int) -> str:
    """Format a shortest path query result for display."""
    result = graph.dijkstra_dist(start, target)
    if not result.reachable:
        return f"No path from {start} to {target}"
    return f"Dijkstra distance: {result.distance}, path: {result.path}"


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="arcgraph", description="Weighted graph CLI")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    show = subparsers.add_parser("show", help="Print the graph as a tree")
    show.add_argument("graph", help="JSON string or @filename describing the graph")
    show.add_argument("--indent", type=int, default=4, help="Spaces per depth level")

    for name, help_text in (("dfs", "Depth-first traversal"), ("bfs", "Breadth-first traversal")):
        traversal = subparsers.add_parser(name, help=help_text)
        traversal.add_argument("graph", help="JSON string or @filename describing the graph")
        traversal.add_argument("--start", type=int, default=0, help="Start node id")

    path = subparsers.add_parser("path", help="Shortest path between two nodes")
    path.add_argument("graph", help="JSON string or @filename describing the graph")
    path.add_argument("--start", type=int, default=0, help="Start node id")
    path.add_argument("--target", type=int, required=True, help="Target node id")

    subparsers.add_parser("demo", help="Show and query the built-in demo graph")

    bench = subparsers.add_parser("bench", help="Time repeated queries")
    bench.add_argument("graph", nargs="?", help="JSON string or @filename; demo graph if omitted")
    bench.add_argument("--runs", type=int, default=10000, help="Runs per algorithm")
    bench.add_argument("--start", type=int, default=0, help="Start node id")
    bench.add_argument("--target", type=int, default=12, help="Target node id")

    return parser


def run_command(args: argparse.Namespace) -> None:
    """Execute a parsed command, writing results to stdout."""
    if args.command == "show":
        load_graph(args.graph).show(config=RenderConfig(indent=args.indent))

    elif args.command == "dfs":
        print(f"DFS: {load_graph(args.graph).dfs(args.start)}")

    elif args.command == "bfs":
        print(f"BFS: {load_graph(args.graph).bfs(args.start)}")

    elif args.command == "path":
        print(format_path(load_graph(args.graph), args.start, args.target))

    elif args.command == "demo":
        graph = demo_graph()
        graph.show()
        print(f"DFS: {graph.dfs(0)}")
        print(f"BFS: {graph.bfs(0)}")
        print(format_path(graph, 0, 12))

    elif args.command == "bench":
        graph = load_graph(args.graph) if args.graph else demo_graph()
        config = BenchmarkConfig(runs=args.runs, start=args.start, target=args.target)
        for line in run_benchmark(graph, config).lines():
            print(line)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        int: Process exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        setup_logging(args.log_level)
        run_command(args)
    except (
        ConfigurationError,
        GraphOperationError,
        ResourceNotFoundError,
        ValidationError,
    ) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
