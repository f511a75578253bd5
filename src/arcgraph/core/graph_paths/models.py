"""
Data models for graph path finding.

This module provides the core data structures returned by shortest path queries:
- PathResult: ``(distance, path)`` pair with validation helpers
- PathValidationError: Exception for path validation failures

``PathResult`` is a named tuple, so callers can unpack it directly or compare it
with a plain ``(distance, [ids...])`` tuple.

Example:
    >>> result = graph.dijkstra_dist(0, 5)
    >>> distance, path = result
    >>> result.reachable
    True
"""

import math
from typing import List, NamedTuple, Optional

from ..types import Distance, GraphProtocol, NodeId


class PathValidationError(Exception):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - Discontinuities in the path (consecutive nodes not joined by an edge)
    - A total weight that does not match the reported distance
    - Unknown node ids in the path
    """

    pass


class PathResult(NamedTuple):
    """
    Result of a single-pair shortest path query.

    Attributes:
        distance: Total weight of the path, ``math.inf`` when there is no path
        path: Node ids from start to target inclusive, empty when there is no path
    """

    distance: Distance
    path: List[NodeId]

    @classmethod
    def unreachable(cls) -> "PathResult":
        """Sentinel result for a target that cannot be reached."""
        return cls(math.inf, [])

    @property
    def reachable(self) -> bool:
        """Whether a path was found."""
        return bool(self.path) and not math.isinf(self.distance)

    @property
    def hops(self) -> int:
        """Number of edges along the path."""
        return max(len(self.path) - 1, 0)

    def validate(
        self,
        graph: GraphProtocol,
        start: Optional[NodeId] = None,
        target: Optional[NodeId] = None,
    ) -> None:
        """
        Check the path against the graph it was computed on.

        Every consecutive pair of ids must be joined by at least one edge, and the
        sum of the cheapest such edges must equal ``distance``. When given, the
        path must begin at ``start`` and end at ``target``. The unreachable
        sentinel is always valid.

        Args:
            graph: Graph the path was computed on
            start: Expected first node of the path
            target: Expected last node of the path

        Raises:
            PathValidationError: If the path is inconsistent with the graph
        """
        if not self.path:
            if not math.isinf(self.distance):
                raise PathValidationError(
                    f"Empty path must have infinite distance, got {self.distance}"
                )
            return

        if start is not None and self.path[0] != start:
            raise PathValidationError(f"Path starts at {self.path[0]}, expected {start}")
        if target is not None and self.path[-1] != target:
            raise PathValidationError(f"Path ends at {self.path[-1]}, expected {target}")

        for node_id in self.path:
            if not graph.has_node(node_id):
                raise PathValidationError(f"Path references unknown node {node_id}")

        total = 0
        for i, (source, dest) in enumerate(zip(self.path, self.path[1:])):
            weights = [
                edge.weight for edge in graph.node(source).edges if edge.target == dest
            ]
            if not weights:
                raise PathValidationError(
                    f"Path discontinuity at index {i}: no edge from {source} to {dest}"
                )
            total += min(weights)

        if total != self.distance:
            raise PathValidationError(
                f"Path weight {total} does not match distance {self.distance}"
            )
