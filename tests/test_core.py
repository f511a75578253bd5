"""
Core functionality tests through the public package interface.
"""

import math

import arcgraph
from arcgraph import Graph, PathResult, build_graph


def test_public_exports():
    """Test the package exposes its main entry points."""
    assert set(arcgraph.__all__) >= {"Graph", "PathResult", "build_graph", "load_graph"}
    assert arcgraph.__version__ == "0.1.0"


def test_core_build_and_query():
    """Test building a graph and running every query on it."""
    graph = Graph()
    a = graph.add_node("a")
    b = graph.add_node("b")
    c = graph.add_node("c")
    graph.add_edge(a, b, 2)
    graph.add_edge(b, c, 2)
    graph.add_edge(a, c, 5)

    assert graph.dfs(a) == [a, b, c]
    assert graph.bfs(a) == [a, b, c]
    assert graph.dijkstra_dist(a, c) == (4, [a, b, c])
    assert isinstance(graph.dijkstra_dist(a, c), PathResult)


def test_core_unreachable_sentinel():
    """Test the no-path result through the public API."""
    graph = build_graph(2)
    distance, path = graph.dijkstra_dist(0, 1)
    assert math.isinf(distance)
    assert path == []
