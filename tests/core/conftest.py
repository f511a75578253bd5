"""Shared test fixtures."""

import pytest

from arcgraph.core.graph import Graph


@pytest.fixture
def tree_graph() -> Graph:
    """
    Fixture providing an acyclic test graph:
    0 -(1)-> 1 -(1)-> 3 -(1)-> 4
    |
    (1)
    v
    2 -(2)-> 5
    """
    graph = Graph()
    nodes = [graph.add_node(value) for value in (11, 22, 33, 44, 55, 66)]
    graph.add_edge(nodes[0], nodes[1], 1)
    graph.add_edge(nodes[0], nodes[2], 1)
    graph.add_edge(nodes[1], nodes[3], 1)
    graph.add_edge(nodes[3], nodes[4], 1)
    graph.add_edge(nodes[2], nodes[5], 2)
    return graph


@pytest.fixture
def cyclic_graph() -> Graph:
    """
    Fixture providing a test graph with a cycle back to the start:
    0 -(1)-> 1 -(1)-> 3 -(1)-> 4 -(1)-> 0
    |        |                 ^
    |(1)     |(3)              | (1)
    v        v                 |
    2 -(2)-> 5 ----------------+
    """
    graph = Graph()
    nodes = [graph.add_node(value) for value in (11, 22, 33, 44, 55, 66)]
    graph.add_edge(nodes[0], nodes[1], 1)
    graph.add_edge(nodes[0], nodes[2], 1)
    graph.add_edge(nodes[1], nodes[3], 1)
    graph.add_edge(nodes[1], nodes[5], 3)
    graph.add_edge(nodes[3], nodes[4], 1)
    graph.add_edge(nodes[2], nodes[5], 2)
    graph.add_edge(nodes[5], nodes[4], 1)
    graph.add_edge(nodes[4], nodes[0], 1)
    return graph


@pytest.fixture
def disconnected_graph() -> Graph:
    """
    Fixture providing a graph with an unreachable island:
    0 -(2)-> 1        2 -(1)-> 3
    """
    graph = Graph()
    for value in "abcd":
        graph.add_node(value)
    graph.add_edge(0, 1, 2)
    graph.add_edge(2, 3, 1)
    return graph
