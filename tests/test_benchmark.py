"""
Tests for the demo graph and the benchmark runner.
"""

import pytest

from arcgraph.benchmark import (
    DEMO_EDGES,
    DEMO_NUM_NODES,
    BenchmarkReport,
    demo_graph,
    run_benchmark,
)
from arcgraph.config import BenchmarkConfig
from arcgraph.core.exceptions import NodeNotFoundError


@pytest.fixture
def demo():
    """Fixture providing the 20-node demo graph."""
    return demo_graph()


def test_demo_graph_shape(demo):
    """Test the demo graph has every node and edge."""
    assert len(demo) == DEMO_NUM_NODES
    assert demo.edge_count == len(DEMO_EDGES) == 31


def test_demo_dfs(demo):
    """Test DFS over the demo graph."""
    assert demo.dfs(0) == [0, 1, 3, 6, 11, 10, 12, 15, 16, 17, 18, 19, 13, 8, 5, 4, 7, 9, 2]


def test_demo_bfs(demo):
    """Test BFS over the demo graph."""
    assert demo.bfs(0) == [0, 1, 2, 16, 3, 5, 19, 17, 6, 8, 4, 18, 11, 7, 10, 9, 12, 13, 15]


def test_demo_node_14_unreachable(demo):
    """Test node 14 has no incoming edges."""
    assert 14 not in demo.dfs(0)
    assert not demo.dijkstra_dist(0, 14).reachable


def test_demo_shortest_path(demo):
    """Test the demo shortest path from 0 to 12."""
    result = demo.dijkstra_dist(0, 12)
    assert result == (19, [0, 1, 5, 4, 7, 10, 12])
    result.validate(demo)


def test_run_benchmark(demo):
    """Test the benchmark reports one timing per algorithm."""
    report = run_benchmark(demo, BenchmarkConfig(runs=3))
    assert report.runs == 3
    assert set(report.timings_us) == {"dfs", "bfs", "dijkstra"}
    assert all(total >= 0 for total in report.timings_us.values())
    assert report.rss_bytes > 0


def test_run_benchmark_unknown_node(demo):
    """Test the configured endpoints must exist."""
    with pytest.raises(NodeNotFoundError):
        run_benchmark(demo, BenchmarkConfig(runs=1, target=20))


def test_report_lines():
    """Test the report summary format."""
    report = BenchmarkReport(runs=10, timings_us={"dfs": 42}, rss_bytes=2 * 1024 * 1024)
    assert list(report.lines()) == [
        "Time of dfs for 10 runs: 42 microseconds",
        "Resident memory: 2.0 MB",
    ]
