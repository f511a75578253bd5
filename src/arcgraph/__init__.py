"""
arcgraph - Directed, weighted in-memory graph

This package provides a small append-only graph primitive with:

- Node and edge insertion with dense integer node ids
- Deterministic depth-first and breadth-first traversal
- Single-pair shortest paths (Dijkstra)
- A text tree view of the graph that marks back edges
- Graph-literal and JSON builders, a demo graph and a timing benchmark
"""

__version__ = "0.1.0"
__author__ = "arcgraph Team"

# Version compatibility check
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("arcgraph requires Python 3.10 or higher")

# Import commonly used components for easier access
from .core.builder import build_graph, load_graph, parse_edge_literal
from .core.exceptions import NodeNotFoundError, ValidationError
from .core.graph import Graph
from .core.graph_paths import PathResult

__all__ = [
    "Graph",
    "NodeNotFoundError",
    "PathResult",
    "ValidationError",
    "build_graph",
    "load_graph",
    "parse_edge_literal",
]
