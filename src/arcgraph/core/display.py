"""
Text rendering of a graph as an indented tree.

Every node not yet rendered starts a new tree, in ascending id order. Below each
node box one line is written per outgoing edge, ordered by ``(target, weight)``.
An edge pointing at a node that has already been rendered is annotated as a back
edge and not descended into, which keeps rendering finite on cyclic graphs.

Rendering uses an explicit stack instead of recursion, so very deep graphs do not
hit the interpreter recursion limit.
"""

import io
import sys
from typing import Iterator, List, Optional, Set, TextIO, Tuple

from ..config import RenderConfig
from .models import Edge
from .types import GraphProtocol, NodeId


class GraphRenderer:
    """
    Renders a graph as nested node boxes joined by weighted edge lines.

    Example output for ``0 -(1)-> 1``::

        ┌─────────┐
        │ Node  0 │
        │ 0       │
        └─────────┘
        ├─[1]─> Node 1
            ┌─────────┐
            │ Node  1 │
            │ 1       │
            └─────────┘
            └─
    """

    def __init__(self, graph: GraphProtocol, config: Optional[RenderConfig] = None):
        self.graph = graph
        self.config = config or RenderConfig()

    def render(self) -> str:
        """Render the whole graph to a string."""
        buffer = io.StringIO()
        self.write(buffer)
        return buffer.getvalue()

    def write(self, stream: Optional[TextIO] = None) -> None:
        """Write the rendering to ``stream`` (stdout by default)."""
        out = stream if stream is not None else sys.stdout
        for line in self.lines():
            out.write(line + "\n")

    def lines(self) -> Iterator[str]:
        """Yield the rendered output line by line."""
        shown: Set[NodeId] = set()
        for node_id in self.graph:
            if node_id not in shown:
                yield from self._render_tree(node_id, shown)

    def _render_tree(self, root: NodeId, shown: Set[NodeId]) -> Iterator[str]:
        stack: List[Tuple[int, Iterator[Edge]]] = []

        shown.add(root)
        yield from self._node_box(root, 0)
        stack.append((0, iter(self.graph.node(root).sorted_edges())))

        while stack:
            depth, edges = stack[-1]
            edge = next(edges, None)
            if edge is None:
                stack.pop()
                continue

            pad = self._pad(depth)
            if edge.target in shown:
                yield f"{pad}├─[{edge.weight}]─> Back to Node {edge.target}"
                continue

            yield f"{pad}├─[{edge.weight}]─> Node {edge.target}"
            shown.add(edge.target)
            yield from self._node_box(edge.target, depth + 1)
            stack.append((depth + 1, iter(self.graph.node(edge.target).sorted_edges())))

    def _node_box(self, node_id: NodeId, depth: int) -> Iterator[str]:
        node = self.graph.node(node_id)
        pad = self._pad(depth)
        value = repr(node.value).ljust(self.config.value_width)
        yield f"{pad}┌─────────┐"
        yield f"{pad}│ Node {node_id:2} │"
        yield f"{pad}│ {value} │"
        yield f"{pad}└─────────┘"
        if not node.edges:
            yield f"{pad}└─"

    def _pad(self, depth: int) -> str:
        return " " * (depth * self.config.indent)
