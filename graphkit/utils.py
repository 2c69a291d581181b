"""
Utility functions for graph algorithms.

Provides helpers for path reconstruction, node indexing and dense matrix
export.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .protocol import Graph, WeightedGraph


def reconstruct_path(
    predecessors: Dict[Hashable, Hashable], start: Hashable, end: Hashable
) -> Optional[List[Hashable]]:
    """
    Reconstruct the path from start to end using a predecessor map.

    The map comes from a search where ``predecessors[node]`` is the previous
    node on the best path found to ``node``. The start node has no entry.

    Args:
        predecessors: Dictionary mapping node -> previous node.
        start: First node of the path.
        end: Last node of the path.

    Returns:
        List of nodes from start to end (inclusive), or None if end cannot
        be traced back to start.

    Example:
        >>> reconstruct_path({'B': 'A', 'C': 'B'}, 'A', 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path({'B': 'A'}, 'A', 'D') is None
        True
    """
    path = [end]
    current = end
    while current != start:
        if current not in predecessors:
            return None
        current = predecessors[current]
        # A valid predecessor map is acyclic
        if len(path) > len(predecessors):
            return None
        path.append(current)

    path.reverse()
    return path


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Map nodes to indices 0..n-1 in order of first occurrence.

    Nodes only need to be hashable, so no sorting is applied; pass an
    ordered sequence for a reproducible layout.

    Args:
        nodes: Iterable of hashable nodes, duplicates allowed.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'c', 'b'])
        >>> node_to_idx
        {'c': 0, 'a': 1, 'b': 2}
        >>> idx_to_node
        ['c', 'a', 'b']
    """
    node_to_index: Dict[Hashable, int] = {}
    for node in nodes:
        if node not in node_to_index:
            node_to_index[node] = len(node_to_index)
    return node_to_index, list(node_to_index)


def adjacency_matrix(
    graph: Graph, nodes: Optional[Sequence[Hashable]] = None
) -> np.ndarray:
    """
    Dense adjacency matrix of a graph.

    ``A[i, j]`` is the weight of edge i -> j for weighted graphs, 1.0 for an
    unweighted edge, and 0.0 where there is no edge. Undirected graphs give a
    symmetric matrix because both directions are stored.

    Args:
        graph: Graph to export.
        nodes: Row/column order. Defaults to ``graph.nodes()`` in enumeration
            order; nodes outside the graph get empty rows.

    Returns:
        (n, n) float numpy array in node index order.

    Example:
        >>> G = WeightedListGraph(directed=True)
        >>> G.add_edge('A', 'B', 2.0)
        >>> adjacency_matrix(G, ['A', 'B'])
        array([[0., 2.],
               [0., 0.]])
    """
    if nodes is None:
        nodes = list(graph.nodes())
    node_to_idx, idx_to_node = node_index_map(nodes)
    weighted = isinstance(graph, WeightedGraph)

    matrix = np.zeros((len(idx_to_node), len(idx_to_node)))
    for u in idx_to_node:
        if not graph.contains_node(u):
            continue
        i = node_to_idx[u]
        for v in graph.adjacent_nodes(u):
            j = node_to_idx.get(v)
            if j is None:
                continue
            matrix[i, j] = graph.edge_weight(u, v) if weighted else 1.0

    return matrix
