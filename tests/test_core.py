"""Tests for core graph data structures."""

import pytest

from graphkit import (
    EdgeNotFoundError,
    Graph,
    GraphError,
    ListGraph,
    NodeNotFoundError,
    WeightedGraph,
    WeightedListGraph,
)


class TestListGraph:
    """Tests for unweighted ListGraph class."""

    def test_empty_graph(self):
        """Test empty graph creation."""
        G = ListGraph()
        assert G.directed is False
        assert len(G) == 0
        assert G.nodes() == set()

    def test_add_nodes(self):
        """Test adding nodes."""
        G = ListGraph()
        G.add_nodes("A", "B")
        assert G.nodes() == {"A", "B"}
        assert G.contains_node("A")
        assert "B" in G
        assert G.adjacent_nodes("A") == set()

    def test_add_nodes_keeps_existing_edges(self):
        """Test that re-adding a node does not clear its edges."""
        G = ListGraph(directed=True)
        G.add_edge(1, 2)
        G.add_nodes(1)
        assert G.contains_edge(1, 2)
        assert G.adjacent_nodes(1) == {2}

    def test_add_edge_adds_nodes(self):
        """Test that adding an edge adds unknown endpoints."""
        G = ListGraph(directed=True)
        G.add_edge(1, 2)
        assert G.contains_node(1)
        assert G.contains_node(2)
        assert G.contains_edge(1, 2)

    def test_add_edge_undirected(self):
        """Test that undirected edges are stored both ways."""
        G = ListGraph(directed=False)
        G.add_edge("A", "B")
        G.add_edge("B", "C")

        assert G.contains_edge("A", "B")
        assert G.contains_edge("B", "A")
        assert G.adjacent_nodes("B") == {"A", "C"}

    def test_add_edge_directed(self):
        """Test that directed edges are stored one way."""
        G = ListGraph(directed=True)
        G.add_edge("A", "B")

        assert G.contains_edge("A", "B")
        assert not G.contains_edge("B", "A")
        assert G.adjacent_nodes("B") == set()

    def test_remove_node_purges_edges(self):
        """Test that removing a node removes incoming edges too."""
        G = ListGraph(directed=True)
        G.add_nodes(1, 2, 3)
        G.add_edge(1, 2)
        G.add_edge(3, 2)
        G.remove_node(2)

        assert not G.contains_node(2)
        assert not G.contains_edge(1, 2)
        for node in G.nodes():
            assert 2 not in G.adjacent_nodes(node)

    def test_remove_missing_node_is_noop(self):
        """Test removing a node that is not in the graph."""
        G = ListGraph()
        G.add_edge(1, 2)
        G.remove_node(99)
        assert G.nodes() == {1, 2}

    def test_remove_edge_undirected(self):
        """Test that removing an undirected edge removes its mirror."""
        G = ListGraph()
        G.add_edge(1, 2)
        G.remove_edge(2, 1)
        assert not G.contains_edge(1, 2)
        assert not G.contains_edge(2, 1)
        assert G.nodes() == {1, 2}

    def test_remove_edge_directed_keeps_reverse(self):
        """Test that removing a directed edge leaves the reverse edge."""
        G = ListGraph(directed=True)
        G.add_edge(1, 2)
        G.add_edge(2, 1)
        G.remove_edge(1, 2)
        assert not G.contains_edge(1, 2)
        assert G.contains_edge(2, 1)

    def test_remove_missing_edge_is_noop(self):
        """Test removing an edge that does not exist."""
        G = ListGraph(directed=True)
        G.add_edge(1, 2)
        G.remove_edge(2, 1)
        G.remove_edge(5, 6)
        assert G.contains_edge(1, 2)

    def test_contains_never_raises(self):
        """Test that predicates return False for unknown nodes."""
        G = ListGraph()
        assert not G.contains_node("X")
        assert not G.contains_edge("X", "Y")

    def test_adjacent_nodes_missing_node(self):
        """Test that querying neighbors of a missing node raises NodeNotFoundError."""
        G = ListGraph()
        with pytest.raises(NodeNotFoundError) as excinfo:
            G.adjacent_nodes("A")
        assert excinfo.value.node == "A"
        assert isinstance(excinfo.value, KeyError)
        assert isinstance(excinfo.value, GraphError)

    def test_adjacent_nodes_returns_copy(self):
        """Test that mutating returned sets does not touch the graph."""
        G = ListGraph(directed=True)
        G.add_edge(1, 2)

        G.adjacent_nodes(1).clear()
        G.nodes().clear()

        assert G.adjacent_nodes(1) == {2}
        assert G.nodes() == {1, 2}

    def test_clear_keeps_directionality(self):
        """Test that clear empties the graph but keeps directed flag."""
        G = ListGraph(directed=True)
        G.add_edge(1, 2)
        G.clear()
        assert len(G) == 0
        assert G.directed is True

    def test_equality(self):
        """Test structural equality."""
        G1 = ListGraph.from_edges([(1, 2), (2, 3)], directed=True)
        G2 = ListGraph(directed=True)
        G2.add_edge(2, 3)
        G2.add_edge(1, 2)
        G3 = ListGraph.from_edges([(1, 2), (2, 3)], directed=False)

        assert G1 == G2
        assert G1 != G3

    def test_equality_with_other_types(self):
        """Test that comparing with a non-graph defers to the other operand."""
        G = ListGraph.from_edges([(1, 2)])
        assert G.__eq__("1-2") is NotImplemented
        assert G.__eq__(WeightedListGraph.from_edges([(1, 2, 1.0)])) is NotImplemented
        assert G != "1-2"
        assert G != {1: {2}, 2: {1}}

    def test_repr(self):
        """Test that repr reports directionality and stored sizes."""
        assert repr(ListGraph()) == "ListGraph(directed=False, nodes=0, edges=0)"
        G = ListGraph.from_edges([(1, 2), (2, 3)], directed=True)
        assert repr(G) == "ListGraph(directed=True, nodes=3, edges=2)"
        # both directions of an undirected edge are stored
        H = ListGraph.from_edges([(1, 2)])
        assert repr(H) == "ListGraph(directed=False, nodes=2, edges=2)"

    def test_unhashable(self):
        """Test that mutable graphs cannot be hashed."""
        with pytest.raises(TypeError):
            hash(ListGraph())

    def test_iteration(self):
        """Test iterating over nodes."""
        G = ListGraph.from_edges([("A", "B")])
        assert set(G) == {"A", "B"}

    def test_tuple_nodes(self):
        """Test that any hashable value works as a node."""
        G = ListGraph(directed=True)
        G.add_edge((0, 0), (0, 1))
        assert G.adjacent_nodes((0, 0)) == {(0, 1)}

    def test_satisfies_protocol(self):
        """Test that ListGraph satisfies Graph but not WeightedGraph."""
        G = ListGraph()
        assert isinstance(G, Graph)
        assert not isinstance(G, WeightedGraph)


class TestWeightedListGraph:
    """Tests for WeightedListGraph class."""

    def test_empty_weighted_graph(self):
        """Test empty weighted graph creation."""
        G = WeightedListGraph()
        assert G.directed is False
        assert G.nodes() == set()

    def test_add_nodes(self):
        """Test that addNodes makes the graph contain the nodes."""
        G = WeightedListGraph(directed=True)
        G.add_nodes(1, 2)
        assert G.contains_node(1)
        assert G.contains_node(2)

    def test_add_edge_adds_nodes(self):
        """Test that adding an edge adds absent nodes."""
        G = WeightedListGraph(directed=True)
        G.add_edge(1, 2, 1.0)
        assert G.contains_node(1)
        assert G.contains_node(2)

    def test_add_nodes_keeps_existing_edges(self):
        """Test that re-adding a node does not overwrite its edges."""
        G = WeightedListGraph(directed=True)
        G.add_edge(1, 2, 1.0)
        G.add_nodes(1)
        assert G.contains_edge(1, 2)
        assert G.edge_weight(1, 2) == 1.0

    def test_add_edge_with_weight(self):
        """Test adding weighted edges."""
        G = WeightedListGraph()
        G.add_edge("A", "B", 1.5)

        assert G.edge_weight("A", "B") == 1.5
        assert G.edge_weight("B", "A") == 1.5
        assert G.adjacent_weights("A") == {"B": 1.5}

    def test_default_weight(self):
        """Test that weight defaults to 1.0."""
        G = WeightedListGraph(directed=True)
        G.add_edge("A", "B")
        assert G.edge_weight("A", "B") == 1.0

    def test_directed_weights_independent(self):
        """Test that both directions of a directed pair keep their own weight."""
        G = WeightedListGraph(directed=True)
        G.add_edge("A", "B", 1.0)
        G.add_edge("B", "A", 2.0)

        assert G.edge_weight("A", "B") == 1.0
        assert G.edge_weight("B", "A") == 2.0

    def test_update_edge_weight(self):
        """Test that adding an existing edge overwrites its weight."""
        G = WeightedListGraph()
        G.add_edge("A", "B", 1.0)
        G.add_edge("B", "A", 2.0)

        assert G.edge_weight("A", "B") == 2.0
        assert G.adjacent_nodes("A") == {"B"}

    def test_negative_and_infinite_weights(self):
        """Test that negative and infinite weights are stored."""
        G = WeightedListGraph(directed=True)
        G.add_edge("A", "B", -1.0)
        G.add_edge("A", "C", float("inf"))
        assert G.edge_weight("A", "B") == -1.0
        assert G.edge_weight("A", "C") == float("inf")

    def test_edge_weight_missing_edge(self):
        """Test that querying a missing edge raises EdgeNotFoundError."""
        G = WeightedListGraph(directed=True)
        G.add_edge(1, 2, 1.0)

        with pytest.raises(EdgeNotFoundError) as excinfo:
            G.edge_weight(2, 1)
        assert excinfo.value.start == 2
        assert excinfo.value.destination == 1

        with pytest.raises(EdgeNotFoundError):
            G.edge_weight(7, 8)

    def test_remove_node_removes_incoming_edge(self):
        """Test that removeNode removes the node and its incoming edge."""
        G = WeightedListGraph(directed=True)
        G.add_nodes(1, 2, 3)
        G.add_edge(1, 2, 1.0)
        G.remove_node(2)
        assert not G.contains_node(2)
        assert not G.contains_edge(1, 2)

    def test_remove_edge_undirected(self):
        """Test removing an undirected weighted edge."""
        G = WeightedListGraph()
        G.add_edge(1, 2, 4.0)
        G.remove_edge(1, 2)
        assert not G.contains_edge(2, 1)
        with pytest.raises(EdgeNotFoundError):
            G.edge_weight(2, 1)

    def test_adjacent_missing_node(self):
        """Test neighbor lookups of a missing node."""
        G = WeightedListGraph()
        with pytest.raises(NodeNotFoundError):
            G.adjacent_nodes(1)
        with pytest.raises(NodeNotFoundError):
            G.adjacent_weights(1)

    def test_adjacent_weights_returns_copy(self):
        """Test that the returned weight map is a copy."""
        G = WeightedListGraph(directed=True)
        G.add_edge(1, 2, 3.0)
        G.adjacent_weights(1)[2] = 99.0
        assert G.edge_weight(1, 2) == 3.0

    def test_clear(self):
        """Test that clear resets to an empty graph with the same directionality."""
        G = WeightedListGraph(directed=True)
        G.add_edge(1, 2, 1.0)
        G.clear()
        assert G.nodes() == set()
        assert G.directed is True

    def test_equality(self):
        """Test that equality compares directionality, adjacency and weights."""
        G1 = WeightedListGraph.from_edges([(1, 2, 1.0)], directed=True)
        G2 = WeightedListGraph.from_edges([(1, 2, 1.0)], directed=True)
        G3 = WeightedListGraph.from_edges([(1, 2, 2.0)], directed=True)

        assert G1 == G2
        assert G1 != G3
        assert G1 != ListGraph.from_edges([(1, 2)], directed=True)

    def test_equality_with_other_types(self):
        """Test that comparing with a non-graph defers to the other operand."""
        G = WeightedListGraph.from_edges([(1, 2, 1.0)], directed=True)
        assert G.__eq__(None) is NotImplemented
        assert G.__eq__(ListGraph.from_edges([(1, 2)], directed=True)) is NotImplemented
        assert G != "1->2"
        assert G != {1: {2: 1.0}, 2: {}}

    def test_repr(self):
        """Test that repr reports directionality and stored sizes."""
        G = WeightedListGraph.from_edges([("A", "B", 2.0)])
        G.add_nodes("Z")
        assert repr(G) == "WeightedListGraph(directed=False, nodes=3, edges=2)"
        G.remove_edge("A", "B")
        assert repr(G) == "WeightedListGraph(directed=False, nodes=3, edges=0)"

    def test_len_contains_iter(self):
        """Test the container protocol over nodes."""
        G = WeightedListGraph(directed=True)
        assert len(G) == 0
        G.add_edge("A", "B", 1.0)
        G.add_nodes("C")

        assert len(G) == 3
        assert "A" in G
        assert "B" in G
        assert "D" not in G
        assert sorted(G) == ["A", "B", "C"]

    def test_iteration_snapshot(self):
        """Test that removing nodes while iterating is safe."""
        G = WeightedListGraph.from_edges([(1, 2, 1.0), (2, 3, 1.0)])
        for node in G:
            G.remove_node(node)
        assert len(G) == 0

    def test_satisfies_protocol(self):
        """Test that WeightedListGraph satisfies WeightedGraph."""
        G = WeightedListGraph()
        assert isinstance(G, Graph)
        assert isinstance(G, WeightedGraph)
