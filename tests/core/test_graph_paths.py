"""
Tests for graph path finding algorithms.
"""

import math

import pytest

from arcgraph.core.exceptions import NodeNotFoundError
from arcgraph.core.graph import Graph
from arcgraph.core.graph_paths import PathResult, PathValidationError, dijkstra


def test_shortest_path_cyclic(cyclic_graph):
    """Test the cheaper two-hop route beats the alternatives."""
    assert cyclic_graph.dijkstra_dist(0, 5) == (3, [0, 2, 5])


def test_shortest_path_unpacks(cyclic_graph):
    """Test the result unpacks into distance and path."""
    distance, path = cyclic_graph.dijkstra_dist(0, 4)
    assert distance == 3
    assert path == [0, 1, 3, 4]


def test_shortest_path_to_self(cyclic_graph):
    """Test the path from a node to itself has zero weight and a single node."""
    for node in cyclic_graph:
        assert cyclic_graph.dijkstra_dist(node, node) == (0, [node])


def test_shortest_path_through_cycle(cyclic_graph):
    """Test paths that wrap around the cycle back through the start."""
    result = cyclic_graph.dijkstra_dist(3, 2)
    assert result == (3, [3, 4, 0, 2])
    result.validate(cyclic_graph)


def test_shortest_path_properties(cyclic_graph, tree_graph):
    """Test every reachable pair yields a consistent path."""
    for graph in (cyclic_graph, tree_graph):
        for start in graph:
            reachable = set(graph.bfs(start))
            for target in graph:
                result = graph.dijkstra_dist(start, target)
                if target not in reachable:
                    assert not result.reachable
                    continue
                assert result.path[0] == start
                assert result.path[-1] == target
                result.validate(graph)


def test_unreachable_target(disconnected_graph):
    """Test an unreachable target returns the no-path sentinel."""
    result = disconnected_graph.dijkstra_dist(0, 3)
    assert result == PathResult.unreachable()
    assert math.isinf(result.distance)
    assert result.path == []
    assert not result.reachable
    assert result.hops == 0


def test_unreachable_against_edge_direction(disconnected_graph):
    """Test edges are only followed in their own direction."""
    assert not disconnected_graph.dijkstra_dist(1, 0).reachable


def test_parallel_edges_use_cheapest():
    """Test the lighter of two parallel edges is chosen."""
    graph = Graph()
    for i in range(2):
        graph.add_node(i)
    graph.add_edge(0, 1, 9)
    graph.add_edge(0, 1, 4)
    assert graph.dijkstra_dist(0, 1) == (4, [0, 1])


def test_zero_weight_edges():
    """Test zero-weight edges are handled."""
    graph = Graph()
    for i in range(3):
        graph.add_node(i)
    graph.add_edge(0, 1, 0)
    graph.add_edge(1, 2, 0)
    graph.add_edge(0, 2, 1)
    assert graph.dijkstra_dist(0, 2) == (0, [0, 1, 2])


def test_longer_path_with_lower_weight():
    """Test more hops win when the total weight is lower."""
    graph = Graph()
    for i in range(4):
        graph.add_node(i)
    graph.add_edge(0, 3, 10)
    graph.add_edge(0, 1, 2)
    graph.add_edge(1, 2, 2)
    graph.add_edge(2, 3, 2)
    result = dijkstra(graph, 0, 3)
    assert result == (6, [0, 1, 2, 3])
    assert result.hops == 3


@pytest.mark.parametrize("start, target, bad", [(7, 0, 7), (0, 7, 7)])
def test_shortest_path_unknown_node(tree_graph, start, target, bad):
    """Test unknown endpoints raise."""
    with pytest.raises(NodeNotFoundError) as exc:
        tree_graph.dijkstra_dist(start, target)
    assert exc.value.node_id == bad


def test_validate_rejects_wrong_distance(cyclic_graph):
    """Test validation catches a distance that does not match the path."""
    with pytest.raises(PathValidationError, match="does not match distance"):
        PathResult(5, [0, 2, 5]).validate(cyclic_graph)


def test_validate_rejects_discontinuity(cyclic_graph):
    """Test validation catches consecutive nodes without an edge."""
    with pytest.raises(PathValidationError, match="discontinuity"):
        PathResult(1, [0, 5]).validate(cyclic_graph)


def test_validate_rejects_unknown_node(cyclic_graph):
    """Test validation catches ids outside the graph."""
    with pytest.raises(PathValidationError, match="unknown node"):
        PathResult(1, [0, 99]).validate(cyclic_graph)


def test_validate_rejects_finite_empty_path(cyclic_graph):
    """Test an empty path must carry an infinite distance."""
    with pytest.raises(PathValidationError):
        PathResult(0, []).validate(cyclic_graph)
    PathResult.unreachable().validate(cyclic_graph)


def test_validate_checks_endpoints(cyclic_graph):
    """Test validation against the requested start and target."""
    result = cyclic_graph.dijkstra_dist(0, 5)
    result.validate(cyclic_graph, start=0, target=5)
    with pytest.raises(PathValidationError, match="starts at 0, expected 1"):
        result.validate(cyclic_graph, start=1, target=5)
    with pytest.raises(PathValidationError, match="ends at 5, expected 4"):
        result.validate(cyclic_graph, start=0, target=4)
