"""
Derived views and structural transforms.

Everything here reads a graph only through the ``Graph`` / ``WeightedGraph``
protocols and returns new objects; the source graph is never modified.
"""

from typing import Callable, Hashable, Optional, Set, Tuple

from .core import ListGraph, WeightedListGraph
from .logging import get_logger
from .protocol import Graph, WeightedGraph

logger = get_logger(__name__)


def edges(graph: Graph) -> Set[Tuple[Hashable, Hashable]]:
    """
    Return every stored edge as a (start, destination) pair.

    Undirected graphs yield both (a, b) and (b, a).

    Example:
        >>> G = ListGraph()
        >>> G.add_edge('A', 'B')
        >>> sorted(edges(G))
        [('A', 'B'), ('B', 'A')]
    """
    return {(node, neighbour) for node in graph.nodes() for neighbour in graph.adjacent_nodes(node)}


def incoming_nodes(graph: Graph, node: Hashable) -> Set[Hashable]:
    """
    Return the nodes with an edge pointing at node.

    Scans the whole graph, O(V * deg); no reverse index is kept. Only
    membership of edges is queried, so a node outside the graph simply has
    no incoming nodes.
    """
    return {other for other in graph.nodes() if graph.contains_edge(other, node)}


def map_nodes(graph: Graph, transform: Callable[[Hashable], Hashable]):
    """
    Copy a graph with every node replaced by ``transform(node)``.

    The result is a ``WeightedListGraph`` (weights kept) when the source is
    weighted, a ``ListGraph`` otherwise, with the same directionality.
    ``transform`` is called once per node.

    The result is rebuilt by re-adding every edge with translated endpoints.
    If two source nodes map to equal values they become one node whose
    adjacency is the union of both; for weighted graphs a duplicated edge
    keeps the weight that was added last.

    Example:
        >>> G = ListGraph.from_edges([(1, 2), (1, 3)], directed=True)
        >>> H = map_nodes(G, lambda n: str(n * 2))
        >>> sorted(H.adjacent_nodes('2'))
        ['4', '6']
    """
    translated = {node: transform(node) for node in graph.nodes()}
    if len(set(translated.values())) < len(translated):
        logger.debug(
            "map_nodes merged %d nodes into %d",
            len(translated), len(set(translated.values())),
        )

    if isinstance(graph, WeightedGraph):
        weighted_result = WeightedListGraph(graph.directed)
        for node, image in translated.items():
            weighted_result.add_nodes(image)
            for neighbour in graph.adjacent_nodes(node):
                weighted_result.add_edge(
                    image, translated[neighbour], graph.edge_weight(node, neighbour)
                )
        return weighted_result

    result = ListGraph(graph.directed)
    for node, image in translated.items():
        result.add_nodes(image)
        for neighbour in graph.adjacent_nodes(node):
            result.add_edge(image, translated[neighbour])
    return result


def clone_to_list_graph(graph: Graph) -> ListGraph:
    """
    Deep-copy any graph into a ``ListGraph``.

    Nodes, edges and directionality are preserved; weights are dropped.
    """
    result = ListGraph(graph.directed)
    for node in graph.nodes():
        result.add_nodes(node)
        for neighbour in graph.adjacent_nodes(node):
            result.add_edge(node, neighbour)
    return result


def clone_to_weighted_list_graph(graph: WeightedGraph) -> WeightedListGraph:
    """
    Deep-copy a weighted graph into a ``WeightedListGraph``.

    Raises:
        TypeError: If graph has no edge weights.
    """
    if not isinstance(graph, WeightedGraph):
        raise TypeError(
            f"clone_to_weighted_list_graph requires a weighted graph, got {type(graph).__name__}"
        )
    return map_edge_weights(graph, lambda start, destination, weight: weight)


def map_edge_weights(
    graph: WeightedGraph, transform: Callable[[Hashable, Hashable, float], float]
) -> WeightedListGraph:
    """
    Copy a weighted graph with every weight replaced by ``transform(u, v, w)``.

    Each stored direction is mapped on its own. For undirected graphs
    ``transform`` should be symmetric; otherwise the direction re-added last
    decides the weight of the pair.

    Example:
        >>> G = WeightedListGraph.from_edges([(1, 2, 10.0)], directed=True)
        >>> map_edge_weights(G, lambda u, v, w: w * 2).edge_weight(1, 2)
        20.0
    """
    result = WeightedListGraph(graph.directed)
    for node in graph.nodes():
        result.add_nodes(node)
        for neighbour in graph.adjacent_nodes(node):
            result.add_edge(node, neighbour, transform(node, neighbour, graph.edge_weight(node, neighbour)))
    return result


def map_or_remove_edge_weights(
    graph: WeightedGraph,
    transform: Callable[[Hashable, Hashable, float], Optional[float]],
) -> WeightedListGraph:
    """
    Like ``map_edge_weights``, but an edge is dropped when transform returns None.

    All nodes are kept, including those left without edges. For an
    undirected graph a pair is dropped only if ``transform`` returns None
    for the direction that is processed last.
    """
    result = WeightedListGraph(graph.directed)
    dropped = 0
    for node in graph.nodes():
        result.add_nodes(node)
        for neighbour in graph.adjacent_nodes(node):
            weight = transform(node, neighbour, graph.edge_weight(node, neighbour))
            if weight is None:
                result.remove_edge(node, neighbour)
                dropped += 1
            else:
                result.add_edge(node, neighbour, weight)

    if dropped:
        logger.debug("map_or_remove_edge_weights dropped %d edges", dropped)
    return result
