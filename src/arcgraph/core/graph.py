"""
Core graph data structure.

This module provides the Graph class: a directed, weighted, append-only graph
whose nodes are identified by dense zero-based integer ids assigned at insertion
time. Each node carries an arbitrary value and owns a set of outgoing
``(target, weight)`` edges.

The class itself only handles storage and validation. Traversal, shortest path
and rendering live in their own modules and operate on any object satisfying
``GraphProtocol``; the Graph methods are thin entry points into them.

The graph provides no internal synchronization. Mutation must not overlap with
any other operation on the same instance; concurrent read-only queries after the
build phase are fine.
"""

import logging
from typing import Any, Iterator, List, Optional, TextIO

from ..config import RenderConfig
from .display import GraphRenderer
from .exceptions import NodeNotFoundError, ValidationError
from .graph_paths import PathResult, dijkstra
from .models import Edge, Node
from .traversal import bfs, dfs
from .types import NodeId, Weight

logger = logging.getLogger(__name__)


class Graph:
    """
    Directed, weighted graph with positional node ids.

    Node ids form the contiguous range ``[0, len(graph))``. Adding an edge whose
    ``(target, weight)`` pair already exists on the source is a no-op; the same
    target with a different weight creates a parallel edge. Nodes and edges are
    never removed.

    Attributes:
        _nodes (List[Node]): Nodes indexed by id
        _edge_count (int): Total number of distinct edges
    """

    def __init__(self) -> None:
        self._nodes: List[Node] = []
        self._edge_count = 0

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeId]:
        return iter(range(len(self._nodes)))

    def __contains__(self, node_id: object) -> bool:
        return self.has_node(node_id)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"

    @property
    def node_count(self) -> int:
        """Number of nodes in the graph."""
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        """Number of distinct edges in the graph."""
        return self._edge_count

    def add_node(self, value: Any) -> NodeId:
        """
        Append a node holding ``value``.

        Args:
            value: Arbitrary value to store on the node

        Returns:
            NodeId: The new node's id, equal to the node count before insertion
        """
        node_id = len(self._nodes)
        self._nodes.append(Node(node_id, value))
        logger.debug(f"Added node {node_id}")
        return node_id

    def add_edge(self, from_id: NodeId, to_id: NodeId, weight: Weight) -> None:
        """
        Add a directed edge ``from_id -> to_id`` with the given weight.

        Re-adding an existing ``(to_id, weight)`` pair on the same source is
        silently ignored. Self-loops are allowed.

        Args:
            from_id: Source node id
            to_id: Target node id
            weight: Non-negative integer weight

        Raises:
            NodeNotFoundError: If either endpoint does not exist; the source is
                checked first and ``role`` names the invalid endpoint
            ValidationError: If the weight is not a non-negative integer
        """
        if not self.has_node(from_id):
            raise NodeNotFoundError(from_id, role="source")
        if not self.has_node(to_id):
            raise NodeNotFoundError(to_id, role="target")
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise ValidationError(f"Edge weight must be an integer, got {weight!r}")
        if weight < 0:
            raise ValidationError(f"Edge weight must be non-negative, got {weight}")

        edges = self._nodes[from_id].edges
        edge = Edge(to_id, weight)
        if edge in edges:
            logger.debug(f"Ignoring duplicate edge {from_id} -({weight})-> {to_id}")
            return

        edges.add(edge)
        self._edge_count += 1
        logger.debug(f"Added edge {from_id} -({weight})-> {to_id}")

    def has_node(self, node_id: NodeId) -> bool:
        """
        Check whether ``node_id`` references an existing node.

        Only plain integers are node ids; floats, strings and bools never match.
        """
        if isinstance(node_id, bool) or not isinstance(node_id, int):
            return False
        return 0 <= node_id < len(self._nodes)

    def node(self, node_id: NodeId) -> Node:
        """
        Get the node with the given id.

        Raises:
            NodeNotFoundError: If the node does not exist
        """
        if not self.has_node(node_id):
            raise NodeNotFoundError(node_id)
        return self._nodes[node_id]

    def value(self, node_id: NodeId) -> Any:
        """Get the value stored on a node."""
        return self.node(node_id).value

    def edges(self, node_id: NodeId) -> List[Edge]:
        """Outgoing edges of a node, ordered by (target, weight)."""
        return self.node(node_id).sorted_edges()

    def neighbors(self, node_id: NodeId) -> List[NodeId]:
        """Distinct outgoing neighbor ids of a node, in ascending order."""
        return self.node(node_id).neighbor_ids()

    def out_degree(self, node_id: NodeId) -> int:
        """Number of outgoing edges of a node, parallel edges included."""
        return len(self.node(node_id).edges)

    def dfs(self, start_id: NodeId) -> List[NodeId]:
        """Depth-first visitation order from ``start_id``."""
        return dfs(self, start_id)

    def bfs(self, start_id: NodeId) -> List[NodeId]:
        """Breadth-first visitation order from ``start_id``."""
        return bfs(self, start_id)

    def dijkstra_dist(self, start_id: NodeId, to_id: NodeId) -> PathResult:
        """
        Shortest distance and path from ``start_id`` to ``to_id``.

        Returns:
            PathResult: ``(distance, path)``; ``(math.inf, [])`` when ``to_id``
            is unreachable
        """
        return dijkstra(self, start_id, to_id)

    def render(self, config: Optional[RenderConfig] = None) -> str:
        """Tree view of the graph as a string."""
        return GraphRenderer(self, config).render()

    def show(self, stream: Optional[TextIO] = None, config: Optional[RenderConfig] = None) -> None:
        """Write the tree view of the graph to ``stream`` (stdout by default)."""
        GraphRenderer(self, config).write(stream)
