"""Graph path finding functionality."""

from .models import PathResult, PathValidationError
from .shortest_path import dijkstra

__all__ = [
    "PathResult",
    "PathValidationError",
    "dijkstra",
]
