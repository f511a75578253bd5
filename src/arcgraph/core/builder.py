"""
Graph construction helpers.

This module provides convenience layers over ``Graph.add_node`` and
``Graph.add_edge``:
- ``build_graph``: build a graph from a node count and an edge list
- ``parse_edge_literal``: parse the ``"from -(weight)-> to"`` edge notation
- ``graph_from_dict`` / ``load_graph``: build a graph from a JSON description

A JSON description looks like::

    {
        "num_nodes": 3,
        "values": ["a", "b", "c"],
        "edges": [[0, 1, 2], "1 -(5)-> 2"]
    }

``values`` is optional; when omitted each node's value is its own id. Edges may
be given either as ``[from, to, weight]`` triples or as edge literals.
"""

import json
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Sequence, Union

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .exceptions import ValidationError
from .graph import Graph
from .types import EdgeTriple

EdgeInput = Union[EdgeTriple, Sequence[int], str]

EDGE_LITERAL_PATTERN = re.compile(r"^\s*(\d+)\s*-\(\s*(\d+)\s*\)->\s*(\d+)\s*$")

GRAPH_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "num_nodes": {"type": "integer", "minimum": 0},
        "values": {"type": "array"},
        "edges": {
            "type": "array",
            "items": {
                "oneOf": [
                    {
                        "type": "array",
                        "items": {"type": "integer", "minimum": 0},
                        "minItems": 3,
                        "maxItems": 3,
                    },
                    {"type": "string"},
                ]
            },
        },
    },
    "required": ["num_nodes"],
    "additionalProperties": False,
}


def parse_edge_literal(literal: str) -> EdgeTriple:
    """
    Parse an edge literal of the form ``"from -(weight)-> to"``.

    Args:
        literal: Edge literal, e.g. ``"0 -(3)-> 1"``

    Returns:
        EdgeTriple: ``(from_id, to_id, weight)``

    Raises:
        ValidationError: If the literal does not match the notation
    """
    match = EDGE_LITERAL_PATTERN.match(literal)
    if match is None:
        raise ValidationError(f"Invalid edge literal: {literal!r}")
    source, weight, target = (int(part) for part in match.groups())
    return source, target, weight


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _as_edge_triple(edge: EdgeInput) -> EdgeTriple:
    if isinstance(edge, str):
        return parse_edge_literal(edge)
    if len(edge) != 3:
        raise ValidationError(f"Edge must be a (from, to, weight) triple, got {edge!r}")
    source, target, weight = edge
    if not all(_is_int(part) for part in (source, target, weight)):
        raise ValidationError(f"Edge values must be integers, got {edge!r}")
    return source, target, weight


def build_graph(
    num_nodes: int,
    edges: Iterable[EdgeInput] = (),
    values: Optional[Sequence[Any]] = None,
) -> Graph:
    """
    Build a graph with ``num_nodes`` nodes and the given edges.

    Nodes are added first, each holding its own id as value unless ``values`` is
    given; edges are then added in order.

    Args:
        num_nodes: Number of nodes to create
        edges: ``(from, to, weight)`` triples or edge literals
        values: Optional per-node values, one per node

    Returns:
        Graph: The populated graph

    Raises:
        ValidationError: If ``values`` has the wrong length or an edge is malformed
        NodeNotFoundError: If an edge references a node outside the graph
    """
    if not _is_int(num_nodes):
        raise ValidationError(f"num_nodes must be an integer, got {num_nodes!r}")
    if num_nodes < 0:
        raise ValidationError(f"num_nodes must be non-negative, got {num_nodes}")
    if values is not None and len(values) != num_nodes:
        raise ValidationError(f"Expected {num_nodes} values, got {len(values)}")

    graph = Graph()
    for i in range(num_nodes):
        graph.add_node(values[i] if values is not None else i)

    for edge in edges:
        graph.add_edge(*_as_edge_triple(edge))

    return graph


def graph_from_dict(data: Dict[str, Any]) -> Graph:
    """
    Build a graph from a parsed JSON description.

    Raises:
        ValidationError: If the description does not match ``GRAPH_SCHEMA``
    """
    try:
        json_validate(instance=data, schema=GRAPH_SCHEMA)
    except JsonSchemaError as e:
        raise ValidationError(f"Invalid graph description: {e.message}")

    return build_graph(data["num_nodes"], data.get("edges", []), data.get("values"))


def parse_json_input(json_str: str) -> Any:
    """
    Parse JSON input from either a string or file.

    Args:
        json_str: Either a JSON string or a file path prefixed with '@'.
            Relative paths are resolved against the current directory.

    Returns:
        Parsed JSON data

    Raises:
        ValidationError: If the JSON is invalid or the file cannot be read
    """
    if json_str.startswith("@"):
        file_path = Path(json_str[1:])
        if not file_path.is_absolute():
            file_path = Path(os.getcwd()) / file_path

        if not file_path.exists():
            raise ValidationError(f"File not found: {file_path}")

        try:
            json_str = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ValidationError(f"Cannot read {file_path}: {e}")

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON input: {e}")


def load_graph(source: str) -> Graph:
    """Build a graph from a JSON string or ``@file`` reference."""
    return graph_from_dict(parse_json_input(source))
