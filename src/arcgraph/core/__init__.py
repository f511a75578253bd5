"""Core graph functionality."""

from .exceptions import (
    ConfigurationError,
    GraphOperationError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from .models import Edge, Node
from .types import GraphProtocol, NodeId
from .graph import Graph
from .graph_paths import PathResult, PathValidationError
from .builder import build_graph, graph_from_dict, load_graph, parse_edge_literal
from .display import GraphRenderer

__all__ = [
    "ConfigurationError",
    "Edge",
    "Graph",
    "GraphOperationError",
    "GraphProtocol",
    "GraphRenderer",
    "Node",
    "NodeId",
    "NodeNotFoundError",
    "PathResult",
    "PathValidationError",
    "ResourceNotFoundError",
    "ValidationError",
    "build_graph",
    "graph_from_dict",
    "load_graph",
    "parse_edge_literal",
]
