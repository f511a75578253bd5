"""
Demo graph and timing benchmark.

The demo graph has 20 nodes (values 0..19) and 31 weighted edges. It contains
the cycle 0 -> 1 -> 3 -> 8 -> 11 -> 10 -> 12 -> 15 -> 0 and a source node, 14,
that is not reachable from node 0.

``run_benchmark`` times repeated DFS, BFS and shortest path queries and reports
the accumulated wall time per algorithm in microseconds.
"""

import logging
import os
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

import psutil

from .config import BenchmarkConfig
from .core.builder import build_graph
from .core.exceptions import NodeNotFoundError
from .core.graph import Graph

logger = logging.getLogger(__name__)

DEMO_NUM_NODES = 20
DEMO_EDGES = [
    "0 -(3)-> 1",
    "0 -(5)-> 2",
    "0 -(1)-> 16",
    "1 -(2)-> 3",
    "1 -(3)-> 5",
    "2 -(6)-> 5",
    "2 -(2)-> 19",
    "3 -(4)-> 6",
    "3 -(1)-> 8",
    "4 -(1)-> 7",
    "5 -(5)-> 4",
    "5 -(7)-> 8",
    "6 -(7)-> 11",
    "7 -(2)-> 8",
    "7 -(6)-> 9",
    "7 -(3)-> 10",
    "8 -(8)-> 11",
    "9 -(7)-> 12",
    "10 -(4)-> 12",
    "10 -(5)-> 13",
    "11 -(4)-> 10",
    "12 -(9)-> 15",
    "12 -(8)-> 16",
    "13 -(9)-> 15",
    "14 -(1)-> 16",
    "14 -(6)-> 17",
    "14 -(4)-> 18",
    "15 -(8)-> 0",
    "16 -(1)-> 17",
    "17 -(2)-> 18",
    "18 -(3)-> 19",
]


def demo_graph() -> Graph:
    """Build the 20-node demo graph."""
    return build_graph(DEMO_NUM_NODES, DEMO_EDGES)


@dataclass
class BenchmarkReport:
    """
    Accumulated timings of a benchmark run.

    Attributes:
        runs (int): Number of runs per algorithm
        timings_us (Dict[str, int]): Total microseconds per algorithm name
        rss_bytes (int): Resident set size of the process after the runs
    """

    runs: int
    timings_us: Dict[str, int] = field(default_factory=dict)
    rss_bytes: int = 0

    def lines(self):
        """Human readable summary, one line per algorithm."""
        for name, total in self.timings_us.items():
            yield f"Time of {name} for {self.runs} runs: {total} microseconds"
        yield f"Resident memory: {self.rss_bytes / 1024 / 1024:.1f} MB"


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


def _time_runs(func: Callable[[], object], runs: int) -> int:
    total_ns = 0
    for _ in range(runs):
        started = time.perf_counter_ns()
        func()
        total_ns += time.perf_counter_ns() - started
    return total_ns // 1000


def run_benchmark(graph: Graph, config: Optional[BenchmarkConfig] = None) -> BenchmarkReport:
    """
    Time repeated traversals and shortest path queries on ``graph``.

    Args:
        graph: Graph to benchmark
        config: Run count and query endpoints, defaults to ``BenchmarkConfig()``

    Returns:
        BenchmarkReport: Accumulated timings per algorithm

    Raises:
        NodeNotFoundError: If the configured start or target is not in the graph
    """
    config = config or BenchmarkConfig()
    for node_id in (config.start, config.target):
        if not graph.has_node(node_id):
            raise NodeNotFoundError(node_id)

    algorithms: Dict[str, Callable[[], object]] = {
        "dfs": lambda: graph.dfs(config.start),
        "bfs": lambda: graph.bfs(config.start),
        "dijkstra": lambda: graph.dijkstra_dist(config.start, config.target),
    }

    report = BenchmarkReport(runs=config.runs)
    for name, func in algorithms.items():
        report.timings_us[name] = _time_runs(func, config.runs)
        logger.info(f"{name}: {report.timings_us[name]} us for {config.runs} runs")

    report.rss_bytes = get_memory_usage()
    return report
