"""Single-pair shortest path using Dijkstra's algorithm."""

import logging
import math
from heapq import heappop, heappush
from typing import List, Optional, Tuple

from ..exceptions import GraphOperationError, NodeNotFoundError
from ..types import Distance, GraphProtocol, NodeId
from .models import PathResult

logger = logging.getLogger(__name__)


def dijkstra(graph: GraphProtocol, start: NodeId, target: NodeId) -> PathResult:
    """
    Find the cheapest path from ``start`` to ``target``.

    Uses a binary heap of ``(distance, node_id)`` entries. Instead of a
    decrease-key operation, improved distances are pushed as new entries and
    outdated ones are skipped when popped. The search stops as soon as the
    target is popped, since the first pop of a node carries its final distance.

    Args:
        graph: Graph to search
        start: Source node id
        target: Destination node id

    Returns:
        PathResult with the total distance and the node ids from start to target,
        or ``PathResult.unreachable()`` when no path exists

    Raises:
        NodeNotFoundError: If either node does not exist
    """
    if not graph.has_node(start):
        raise NodeNotFoundError(start)
    if not graph.has_node(target):
        raise NodeNotFoundError(target)

    node_count = len(graph)
    distances: List[Distance] = [math.inf] * node_count
    previous: List[Optional[NodeId]] = [None] * node_count
    heap: List[Tuple[Distance, NodeId]] = []

    distances[start] = 0
    heappush(heap, (0, start))

    while heap:
        cost, position = heappop(heap)
        if position == target:
            break

        # Skip outdated entries
        if cost > distances[position]:
            continue

        for edge in graph.node(position).edges:
            alt = cost + edge.weight
            if alt < distances[edge.target]:
                distances[edge.target] = alt
                previous[edge.target] = position
                heappush(heap, (alt, edge.target))

    if math.isinf(distances[target]):
        logger.debug(f"No path from {start} to {target}")
        return PathResult.unreachable()

    path = _reconstruct_path(previous, start, target)
    logger.debug(f"Shortest path {start} -> {target}: distance {distances[target]}")
    return PathResult(distances[target], path)


def _reconstruct_path(
    previous: List[Optional[NodeId]], start: NodeId, target: NodeId
) -> List[NodeId]:
    """Walk predecessor links back from target to start."""
    path = [target]
    current = target
    while current != start:
        parent = previous[current]
        if parent is None:
            raise GraphOperationError(f"Broken predecessor chain at node {current}")
        path.append(parent)
        current = parent
    path.reverse()
    return path
