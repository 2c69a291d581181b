"""Invariant checks for graphs and edge weights."""

from __future__ import annotations

import math
from typing import Hashable, List, Tuple

from ..protocol import Graph


def is_valid_weight(weight: float) -> bool:
    """
    Check whether a value can be used as an edge weight or path cost.

    Infinite weights are valid (they never win a relaxation); NaN is not,
    because it compares false against everything and breaks the frontier
    ordering of best-first search.

    Parameters
    ----------
    weight:
        Candidate weight.

    Returns
    -------
    bool
        True if weight is a real number other than NaN.
    """
    try:
        return not math.isnan(weight)
    except TypeError:
        return False


def assert_valid_weight(weight: float, start: Hashable, destination: Hashable) -> None:
    """
    Assert that the weight of edge start -> destination is usable.

    Raises
    ------
    ValueError
        If the weight is NaN or not a real number.
    """
    if not is_valid_weight(weight):
        raise ValueError(
            f"Invalid weight {weight!r} on edge ({start!r}, {destination!r}); "
            "weights must be real numbers and not NaN."
        )


def find_dangling_edges(graph: Graph) -> List[Tuple[Hashable, Hashable]]:
    """Return every edge whose destination is not a node of the graph."""
    dangling = []
    for node in graph.nodes():
        for neighbour in graph.adjacent_nodes(node):
            if not graph.contains_node(neighbour):
                dangling.append((node, neighbour))
    return dangling


def assert_no_dangling_edges(graph: Graph) -> None:
    """
    Assert that every edge endpoint is a node of the graph.

    Raises
    ------
    ValueError
        If at least one edge points at an unknown node.
    """
    dangling = find_dangling_edges(graph)
    if dangling:
        raise ValueError(f"Graph contains edges to unknown nodes: {dangling}")


def is_symmetric(graph: Graph) -> bool:
    """
    Check whether the edge relation of a graph is symmetric.

    Always true for a consistent undirected graph; a directed graph may or
    may not be symmetric.

    Returns
    -------
    bool
        True if for every edge (a, b) the edge (b, a) exists too.
    """
    for node in graph.nodes():
        for neighbour in graph.adjacent_nodes(node):
            if not graph.contains_edge(neighbour, node):
                return False
    return True


def assert_symmetric(graph: Graph) -> None:
    """
    Assert that an undirected graph stores both directions of every edge.

    Directed graphs are accepted as-is.

    Raises
    ------
    ValueError
        If the graph is undirected and some edge lacks its mirror.
    """
    if graph.directed:
        return
    if not is_symmetric(graph):
        raise ValueError("Undirected graph has an edge without its mirror.")
