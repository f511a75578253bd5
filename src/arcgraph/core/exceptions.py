"""
Custom exceptions for the arcgraph package.

This module defines the hierarchy of custom exceptions used throughout the package
to report invalid graph operations in a structured and meaningful way. Every
exception raised by a failing call leaves the graph exactly as it was before the
call.
"""

from typing import Optional


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when input data fails to meet the required validation
    criteria, such as a negative edge weight or a malformed graph description.

    Examples:
        * Negative or non-integer edge weights
        * Graph descriptions that do not match the JSON schema
        * Unparseable edge literals
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    Examples:
        * Path reconstruction over an inconsistent predecessor chain
        * Queries that cannot be answered on the current graph
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Non-positive benchmark run counts
        * Negative indentation widths
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    This exception is raised when attempting to access or operate on a
    resource that does not exist in the graph.
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a node id does not reference an existing node.

    Node ids are dense, so any id outside ``[0, node_count)`` is unknown.
    The offending id is kept on ``node_id`` and, when the error comes from an
    edge insertion, the endpoint that was invalid is kept on ``role``
    (``"source"`` or ``"target"``).

    Examples:
        * Edge insertion with an unknown source or target id
        * Traversal or shortest path started from an unknown id
    """

    def __init__(self, node_id: int, role: Optional[str] = None):
        self.node_id = node_id
        self.role = role
        message = f"Node with ID {node_id} does not exist"
        if role is not None:
            message = f"{message} (edge {role})"
        super().__init__(message)
