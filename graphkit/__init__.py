"""
graphkit - generic directed and undirected graphs over hashable nodes.

This package provides:
- Graph protocols (Graph, WeightedGraph) any representation can satisfy
- Hash-map backed representations (ListGraph, WeightedListGraph)
- Traversal algorithms (depth-first, breadth-first with depth/stop bounds)
- Best-first path search (A*, Dijkstra as its zero-heuristic case)
- Structural transforms (node mapping, weight mapping, cloning)

Algorithms are free functions over the protocols, so they run unchanged on
every representation.
"""

__version__ = "0.1.0"

from .core import ListGraph, WeightedListGraph
from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled
from .exceptions import EdgeNotFoundError, GraphError, NodeNotFoundError
from .logging import configure_logging, get_logger, set_log_level
from .protocol import Graph, WeightedGraph
from .search import (
    find_path,
    find_path_to,
    find_weighted_path,
    find_weighted_path_to,
    path_cost,
)
from .transforms import (
    clone_to_list_graph,
    clone_to_weighted_list_graph,
    edges,
    incoming_nodes,
    map_edge_weights,
    map_nodes,
    map_or_remove_edge_weights,
)
from .traversal import traverse_breadth_first, traverse_depth_first
from .utils import adjacency_matrix, node_index_map, reconstruct_path

__all__ = [
    "Graph",
    "WeightedGraph",
    "ListGraph",
    "WeightedListGraph",
    "GraphError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
    "traverse_depth_first",
    "traverse_breadth_first",
    "find_path",
    "find_path_to",
    "find_weighted_path",
    "find_weighted_path_to",
    "path_cost",
    "edges",
    "incoming_nodes",
    "map_nodes",
    "map_edge_weights",
    "map_or_remove_edge_weights",
    "clone_to_list_graph",
    "clone_to_weighted_list_graph",
    "reconstruct_path",
    "node_index_map",
    "adjacency_matrix",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "get_logger",
    "set_log_level",
    "configure_logging",
]

# Example usage:
# from graphkit import WeightedListGraph, find_weighted_path_to
#
# G = WeightedListGraph(directed=True)
# G.add_edge(1, 2, 10.0)
# G.add_edge(1, 3, 2.0)
# G.add_edge(3, 2, 3.0)
# find_weighted_path_to(G, 1, 2)  # [1, 3, 2]
