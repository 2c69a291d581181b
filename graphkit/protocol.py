"""Graph protocols: the capability contract every representation implements.

Public API:
    Graph: Membership, adjacency and directionality of any graph.
    WeightedGraph: Graph whose edges carry a real-valued weight.

Traversal, search and transforms are free functions written against these
protocols, so a representation only supplies storage.
"""

from __future__ import annotations

from typing import Hashable, Protocol, Set, TypeVar, runtime_checkable

N = TypeVar("N", bound=Hashable)


@runtime_checkable
class Graph(Protocol[N]):
    """Common interface for graph representations.

    Nodes are opaque hashable values. ``directed`` is fixed at construction;
    an undirected graph stores both (a, b) and (b, a) for every edge.
    """

    @property
    def directed(self) -> bool:
        """True if edges are ordered pairs."""
        ...

    def contains_node(self, node: N) -> bool:
        """Return True if node is in the graph. Never raises."""
        ...

    def contains_edge(self, start: N, destination: N) -> bool:
        """Return True if the edge start -> destination exists. Never raises."""
        ...

    def adjacent_nodes(self, node: N) -> Set[N]:
        """Return the neighbors of node.

        Raises:
            NodeNotFoundError: If node is not in the graph.
        """
        ...

    def nodes(self) -> Set[N]:
        """Return all nodes of the graph."""
        ...


@runtime_checkable
class WeightedGraph(Graph[N], Protocol[N]):
    """Graph whose edges carry a weight, used as traversal cost by search."""

    def edge_weight(self, start: N, destination: N) -> float:
        """Return the weight of the edge start -> destination.

        Raises:
            EdgeNotFoundError: If the edge does not exist.
        """
        ...
