"""
Configuration for rendering, benchmarking and logging.

Configuration objects are plain dataclasses with sensible defaults. Components
accept them as optional arguments and fall back to the defaults when none is
given; invalid values are rejected at construction time.
"""

import logging
from dataclasses import dataclass
from typing import Optional, TextIO, Union

from .core.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class RenderConfig:
    """
    Layout settings for the tree view produced by ``Graph.show``.

    Attributes:
        indent (int): Spaces added per depth level
        value_width (int): Minimum width of the value line inside a node box
    """

    indent: int = 4
    value_width: int = 7

    def __post_init__(self):
        if self.indent < 0:
            raise ConfigurationError(f"indent must be non-negative, got {self.indent}")
        if self.value_width < 0:
            raise ConfigurationError(
                f"value_width must be non-negative, got {self.value_width}"
            )


@dataclass
class BenchmarkConfig:
    """
    Settings for timing repeated traversals.

    Attributes:
        runs (int): Number of timed runs per algorithm
        start (int): Start node for every algorithm
        target (int): Target node for the shortest path runs
    """

    runs: int = 10000
    start: int = 0
    target: int = 12

    def __post_init__(self):
        if self.runs <= 0:
            raise ConfigurationError(f"runs must be positive, got {self.runs}")
        if self.start < 0 or self.target < 0:
            raise ConfigurationError("start and target must be non-negative node ids")


def setup_logging(level: Union[int, str] = logging.WARNING, stream: Optional[TextIO] = None) -> None:
    """
    Configure package logging for command line use.

    Library code only creates module loggers; this attaches a single formatted
    stream handler to the ``arcgraph`` logger.

    Args:
        level: Logging level name or number
        stream: Stream for the handler, stderr when omitted

    Raises:
        ConfigurationError: If the level name is unknown
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ConfigurationError(f"Unknown log level: {level}")
        level = resolved

    package_logger = logging.getLogger("arcgraph")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
