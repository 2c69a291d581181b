"""
Core graph data structures.

Provides ListGraph (unweighted) and WeightedListGraph with hash-map
adjacency representations. Both satisfy the protocols in
``graphkit.protocol`` and are accepted by every algorithm in the package.

Neighbor enumeration order is the order of the underlying set/dict and is
not part of the contract. Queries return copies; the graph exclusively owns
its adjacency storage.
"""

from typing import Dict, Generic, Hashable, Iterable, Iterator, Set, Tuple, TypeVar

from .diagnostics import (
    assert_no_dangling_edges,
    assert_symmetric,
    assert_valid_weight,
    is_debug_enabled,
)
from .exceptions import EdgeNotFoundError, NodeNotFoundError

N = TypeVar("N", bound=Hashable)


class ListGraph(Generic[N]):
    """
    Unweighted graph backed by a node -> set-of-neighbors map.

    Supports directed and undirected graphs. In an undirected graph every
    edge is stored in both directions.

    Attributes:
        directed: If True, graph is directed; otherwise undirected.

    Complexity:
        - add_nodes: O(k) for k nodes
        - add_edge, contains_node, contains_edge: O(1) expected
        - remove_node: O(V)
        - adjacent_nodes: O(deg(v))
    """

    def __init__(self, directed: bool = False):
        """
        Initialize an empty graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
        """
        self._directed = directed
        self._adj: Dict[N, Set[N]] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[N, N]], directed: bool = False) -> "ListGraph[N]":
        """
        Build a graph from (start, destination) pairs.

        Example:
            >>> G = ListGraph.from_edges([(1, 2), (2, 3)], directed=True)
            >>> G.contains_edge(2, 3)
            True
        """
        graph = cls(directed)
        for start, destination in edges:
            graph.add_edge(start, destination)
        return graph

    @property
    def directed(self) -> bool:
        return self._directed

    def contains_node(self, node: N) -> bool:
        return node in self._adj

    def contains_edge(self, start: N, destination: N) -> bool:
        neighbours = self._adj.get(start)
        return neighbours is not None and destination in neighbours

    def nodes(self) -> Set[N]:
        """Return a copy of the node set."""
        return set(self._adj)

    def adjacent_nodes(self, node: N) -> Set[N]:
        """
        Return the neighbors of a node.

        Args:
            node: Node to get neighbors for.

        Returns:
            New set holding the neighbors.

        Raises:
            NodeNotFoundError: If node is not in graph.
        """
        if node not in self._adj:
            raise NodeNotFoundError(node)
        return set(self._adj[node])

    def add_nodes(self, *nodes: N) -> None:
        """
        Add nodes to the graph.

        Nodes already present keep their edges.

        Args:
            nodes: Hashable node values.
        """
        for node in nodes:
            if node not in self._adj:
                self._adj[node] = set()

    def add_edge(self, start: N, destination: N) -> None:
        """
        Add an edge from start to destination, adding missing nodes first.

        For undirected graphs, also adds the edge from destination to start.
        Adding an existing edge is a no-op.
        """
        self.add_nodes(start, destination)
        self._adj[start].add(destination)
        if not self._directed:
            self._adj[destination].add(start)

        if is_debug_enabled():
            self._check_invariants()

    def remove_node(self, node: N) -> None:
        """Remove a node together with every edge into or out of it. No-op if absent."""
        self._adj.pop(node, None)
        for neighbours in self._adj.values():
            neighbours.discard(node)

        if is_debug_enabled():
            self._check_invariants()

    def remove_edge(self, start: N, destination: N) -> None:
        """Remove the edge start -> destination (and its mirror if undirected). No-op if absent."""
        if start in self._adj:
            self._adj[start].discard(destination)
        if not self._directed and destination in self._adj:
            self._adj[destination].discard(start)

    def clear(self) -> None:
        """Remove all nodes and edges, keeping directionality."""
        self._adj.clear()

    def _check_invariants(self) -> None:
        assert_no_dangling_edges(self)
        assert_symmetric(self)

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __iter__(self) -> Iterator[N]:
        return iter(list(self._adj))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._directed == other._directed and self._adj == other._adj

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        edge_count = sum(len(neighbours) for neighbours in self._adj.values())
        return f"ListGraph(directed={self._directed}, nodes={len(self._adj)}, edges={edge_count})"


class WeightedListGraph(Generic[N]):
    """
    Weighted graph backed by a node -> {neighbor: weight} map.

    Supports directed and undirected graphs. An edge exists exactly when its
    weight is recorded. Weights may be infinite; NaN weights are rejected
    while debug mode is enabled.

    Attributes:
        directed: If True, graph is directed; otherwise undirected.

    Complexity:
        - add_nodes: O(k) for k nodes
        - add_edge, edge_weight, contains_edge: O(1) expected
        - remove_node: O(V)
        - adjacent_nodes: O(deg(v))
    """

    def __init__(self, directed: bool = False):
        """
        Initialize an empty weighted graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
        """
        self._directed = directed
        self._adj: Dict[N, Dict[N, float]] = {}

    @classmethod
    def from_edges(
        cls, edges: Iterable[Tuple[N, N, float]], directed: bool = False
    ) -> "WeightedListGraph[N]":
        """
        Build a graph from (start, destination, weight) triples.

        Example:
            >>> G = WeightedListGraph.from_edges([("A", "B", 1.5)])
            >>> G.edge_weight("B", "A")
            1.5
        """
        graph = cls(directed)
        for start, destination, weight in edges:
            graph.add_edge(start, destination, weight)
        return graph

    @property
    def directed(self) -> bool:
        return self._directed

    def contains_node(self, node: N) -> bool:
        return node in self._adj

    def contains_edge(self, start: N, destination: N) -> bool:
        neighbours = self._adj.get(start)
        return neighbours is not None and destination in neighbours

    def nodes(self) -> Set[N]:
        """Return a copy of the node set."""
        return set(self._adj)

    def adjacent_nodes(self, node: N) -> Set[N]:
        """
        Return the neighbors of a node.

        Raises:
            NodeNotFoundError: If node is not in graph.
        """
        if node not in self._adj:
            raise NodeNotFoundError(node)
        return set(self._adj[node])

    def adjacent_weights(self, node: N) -> Dict[N, float]:
        """
        Return a copy of the neighbor -> weight map of a node.

        Raises:
            NodeNotFoundError: If node is not in graph.
        """
        if node not in self._adj:
            raise NodeNotFoundError(node)
        return dict(self._adj[node])

    def edge_weight(self, start: N, destination: N) -> float:
        """
        Return the weight of the edge start -> destination.

        Raises:
            EdgeNotFoundError: If the edge does not exist.
        """
        neighbours = self._adj.get(start)
        if neighbours is None or destination not in neighbours:
            raise EdgeNotFoundError(start, destination)
        return neighbours[destination]

    def add_nodes(self, *nodes: N) -> None:
        """
        Add nodes to the graph.

        Nodes already present keep their edges.
        """
        for node in nodes:
            if node not in self._adj:
                self._adj[node] = {}

    def add_edge(self, start: N, destination: N, weight: float = 1.0) -> None:
        """
        Add or update a weighted edge from start to destination.

        Missing nodes are added first. Any previous weight of the edge is
        overwritten; for undirected graphs both directions get the weight.

        Args:
            start: Source node.
            destination: Target node.
            weight: Edge weight (default 1.0).

        Raises:
            ValueError: If debug mode is enabled and weight is NaN.
        """
        debug = is_debug_enabled()
        if debug:
            assert_valid_weight(weight, start, destination)

        self.add_nodes(start, destination)
        self._adj[start][destination] = weight
        if not self._directed:
            self._adj[destination][start] = weight

        if debug:
            self._check_invariants()

    def remove_node(self, node: N) -> None:
        """Remove a node together with every edge into or out of it. No-op if absent."""
        self._adj.pop(node, None)
        for neighbours in self._adj.values():
            neighbours.pop(node, None)

        if is_debug_enabled():
            self._check_invariants()

    def remove_edge(self, start: N, destination: N) -> None:
        """Remove the edge start -> destination (and its mirror if undirected). No-op if absent."""
        if start in self._adj:
            self._adj[start].pop(destination, None)
        if not self._directed and destination in self._adj:
            self._adj[destination].pop(start, None)

    def clear(self) -> None:
        """Remove all nodes and edges, keeping directionality."""
        self._adj.clear()

    def _check_invariants(self) -> None:
        assert_no_dangling_edges(self)
        assert_symmetric(self)

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __iter__(self) -> Iterator[N]:
        return iter(list(self._adj))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._directed == other._directed and self._adj == other._adj

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        edge_count = sum(len(neighbours) for neighbours in self._adj.values())
        return (
            f"WeightedListGraph(directed={self._directed}, "
            f"nodes={len(self._adj)}, edges={edge_count})"
        )
