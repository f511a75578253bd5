"""
Graph traversal algorithms.

Both traversals are iterative and canonicalize branching order by sorting
neighbor ids, so the visitation order only depends on the graph structure and
never on set iteration order. Nodes not reachable from the start are never
visited.
"""

import logging
from collections import deque
from typing import Deque, List, Set

from .exceptions import NodeNotFoundError
from .types import GraphProtocol, NodeId

logger = logging.getLogger(__name__)


def _require_node(graph: GraphProtocol, node_id: NodeId) -> None:
    if not graph.has_node(node_id):
        raise NodeNotFoundError(node_id)


def dfs(graph: GraphProtocol, start: NodeId) -> List[NodeId]:
    """
    Depth-first traversal from ``start``.

    A node is marked visited when it is popped rather than when it is pushed, so
    the same id may sit on the stack several times; later copies are skipped.
    Neighbors are pushed in descending id order so the lowest id is explored
    first.

    Args:
        graph: Graph to traverse
        start: Starting node id

    Returns:
        Node ids in visitation order, each at most once

    Raises:
        NodeNotFoundError: If ``start`` does not exist
    """
    _require_node(graph, start)

    path: List[NodeId] = []
    visited: Set[NodeId] = set()
    stack: List[NodeId] = [start]

    while stack:
        node_id = stack.pop()
        if node_id in visited:
            continue
        visited.add(node_id)
        path.append(node_id)

        for neighbor in reversed(graph.node(node_id).neighbor_ids()):
            if neighbor not in visited:
                stack.append(neighbor)

    logger.debug(f"DFS from {start} visited {len(path)} nodes")
    return path


def bfs(graph: GraphProtocol, start: NodeId) -> List[NodeId]:
    """
    Breadth-first traversal from ``start``.

    Nodes are marked visited as soon as they are enqueued, which keeps a node
    reached through several parents from entering the queue twice.

    Args:
        graph: Graph to traverse
        start: Starting node id

    Returns:
        Node ids in level order, ascending by id within a level's parent

    Raises:
        NodeNotFoundError: If ``start`` does not exist
    """
    _require_node(graph, start)

    path: List[NodeId] = []
    visited: Set[NodeId] = {start}
    queue: Deque[NodeId] = deque([start])

    while queue:
        node_id = queue.popleft()
        path.append(node_id)

        for neighbor in graph.node(node_id).neighbor_ids():
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    logger.debug(f"BFS from {start} visited {len(path)} nodes")
    return path
