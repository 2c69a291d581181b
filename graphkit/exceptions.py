"""Exceptions raised by graphkit."""

from typing import Hashable


class GraphError(Exception):
    """Base exception for graph operations."""


class NodeNotFoundError(GraphError, KeyError):
    """Raised when an operation needs the adjacency of a node that is not in the graph."""

    def __init__(self, node: Hashable):
        self.node = node
        super().__init__(f"The provided node is not part of the graph: {node!r}")

    def __str__(self) -> str:
        return self.args[0]


class EdgeNotFoundError(GraphError, KeyError):
    """Raised when a weight is requested for an edge that does not exist."""

    def __init__(self, start: Hashable, destination: Hashable):
        self.start = start
        self.destination = destination
        super().__init__(f"The provided edge does not exist: {start!r} -> {destination!r}")

    def __str__(self) -> str:
        return self.args[0]
