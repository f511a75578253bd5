"""
Core type definitions and protocols.

This module provides type definitions and protocols shared by the graph container
and the algorithms that run over it, so the algorithm modules never need to import
the concrete ``Graph`` class.
"""

from typing import Iterator, Protocol, Tuple, Union

from .models import Node

NodeId = int
Weight = int
Distance = Union[int, float]
EdgeTriple = Tuple[NodeId, NodeId, Weight]


class GraphProtocol(Protocol):
    """Protocol defining the read-only graph operations used by algorithms."""

    def __len__(self) -> int:
        """Number of nodes in the graph."""
        ...

    def __iter__(self) -> Iterator[NodeId]:
        """Iterate node ids in ascending order."""
        ...

    def node(self, node_id: NodeId) -> Node:
        """Get the node with the given id."""
        ...

    def has_node(self, node_id: NodeId) -> bool:
        """Check if a node id exists."""
        ...
