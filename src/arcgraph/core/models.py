"""
Node and edge models for the arcgraph package.

Nodes are identified purely by their position in the graph: a zero-based id
assigned at insertion time. Each node owns its outgoing edges, stored as a set of
``(target, weight)`` records so that re-inserting an identical edge is a no-op
while parallel edges with different weights coexist.
"""

from dataclasses import dataclass, field
from typing import Any, List, Set


@dataclass(frozen=True, order=True)
class Edge:
    """
    Directed, weighted arc owned by its source node.

    Equality, hashing and ordering are all defined over ``(target, weight)``,
    so sorting a node's edges gives a stable, reproducible order.

    Attributes:
        target (int): Id of the node this edge points to
        weight (int): Non-negative edge weight
    """

    target: int
    weight: int


@dataclass(eq=False)
class Node:
    """
    Graph node holding an opaque value and its outgoing edges.

    Two nodes are equal if and only if their ids match; the value and the edge
    set play no part in identity.

    Attributes:
        id (int): Zero-based insertion index
        value (Any): Caller supplied value
        edges (Set[Edge]): Outgoing edges
    """

    id: int
    value: Any
    edges: Set[Edge] = field(default_factory=set)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Node id: {self.id}"

    def sorted_edges(self) -> List[Edge]:
        """Outgoing edges ordered by (target, weight)."""
        return sorted(self.edges)

    def neighbor_ids(self) -> List[int]:
        """Distinct target ids in ascending order."""
        return sorted({edge.target for edge in self.edges})
