"""
Best-first path search: A* and Dijkstra.

``find_path`` is a generic A* over any ``Graph``: the caller supplies the
step cost and an optional heuristic. The weighted variants bind the step
cost to ``edge_weight``, which gives Dijkstra's algorithm for the zero
heuristic and A* otherwise. Admissibility of the heuristic is the caller's
responsibility; it is not checked.

The frontier is a binary heap with lazy deletion. Relaxing a node pushes a
new entry without removing the older ones; an entry whose cost is higher
than the node's best known cost is stale and is discarded when popped.
This is deliberate: it replaces a decrease-key operation with no change in
the paths found.

References:
    - Hart, Nilsson, Raphael. "A Formal Basis for the Heuristic Determination
      of Minimum Cost Paths" (1968).
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import heapq
import itertools
from typing import Callable, Dict, Hashable, List, Optional, Sequence, Set, Tuple

from .diagnostics import assert_valid_weight, is_debug_enabled, is_valid_weight
from .exceptions import NodeNotFoundError
from .logging import get_logger
from .protocol import Graph, WeightedGraph
from .utils import reconstruct_path

logger = get_logger(__name__)

CostFunction = Callable[[Hashable, Hashable], float]
Heuristic = Callable[[Hashable], float]


def _unit_cost(start: Hashable, destination: Hashable) -> float:
    return 1.0


def _zero_heuristic(node: Hashable) -> float:
    return 0.0


def find_path(
    graph: Graph,
    start: Hashable,
    matcher: Callable[[Hashable], bool],
    cost: Optional[CostFunction] = None,
    heuristic: Optional[Heuristic] = None,
) -> Optional[List[Hashable]]:
    """
    A* search from start to the cheapest node satisfying matcher.

    Args:
        graph: Graph to search.
        start: Node to start from.
        matcher: Predicate identifying goal nodes. Checked when a node is
            popped from the frontier, so ``start`` itself may match.
        cost: Step cost ``cost(u, v)`` of the edge u -> v. Defaults to 1.0
            per edge (fewest hops).
        heuristic: Estimate of the remaining cost from a node to the goal.
            Defaults to 0, which makes the search Dijkstra's algorithm.

    Returns:
        List of nodes from start to the matched node (inclusive), or None if
        no reachable node satisfies matcher.

    Raises:
        NodeNotFoundError: If start is not in graph.
        ValueError: If debug mode is enabled and a step cost or heuristic
            value is NaN.

    Complexity: O(E log E) with non-negative costs and a consistent heuristic.

    Example:
        >>> G = WeightedListGraph(directed=True)
        >>> G.add_edge(1, 2, 10.0)
        >>> G.add_edge(1, 3, 2.0)
        >>> G.add_edge(3, 2, 3.0)
        >>> find_path(G, 1, lambda n: n == 2, G.edge_weight)
        [1, 3, 2]
    """
    if not graph.contains_node(start):
        raise NodeNotFoundError(start)

    if cost is None:
        cost = _unit_cost
    if heuristic is None:
        heuristic = _zero_heuristic
    debug = is_debug_enabled()

    costs: Dict[Hashable, float] = {start: 0.0}
    predecessors: Dict[Hashable, Hashable] = {}
    visited: Set[Hashable] = set()

    # (priority, tie counter, cost at push time, node); the counter keeps
    # nodes from ever being compared
    counter = itertools.count()
    frontier: List[Tuple[float, int, float, Hashable]] = []
    heapq.heappush(frontier, (_priority(0.0, start, heuristic, debug), next(counter), 0.0, start))

    while frontier:
        _, _, pushed_cost, current = heapq.heappop(frontier)

        if pushed_cost > costs[current]:
            continue

        if matcher(current):
            path = reconstruct_path(predecessors, start, current)
            logger.debug(
                "Path found from %r to %r: %d hops, cost %s, %d nodes expanded",
                start, current, len(path) - 1, costs[current], len(visited),
            )
            return path

        visited.add(current)
        current_cost = costs[current]

        for neighbour in graph.adjacent_nodes(current):
            step = cost(current, neighbour)
            if debug:
                assert_valid_weight(step, current, neighbour)

            candidate = current_cost + step
            known = costs.get(neighbour)
            if known is None or candidate < known:
                costs[neighbour] = candidate
                predecessors[neighbour] = current
                heapq.heappush(
                    frontier,
                    (_priority(candidate, neighbour, heuristic, debug), next(counter), candidate, neighbour),
                )

    logger.debug("No path from %r: %d nodes expanded", start, len(visited))
    return None


def _priority(node_cost: float, node: Hashable, heuristic: Heuristic, debug: bool) -> float:
    estimate = heuristic(node)
    if debug and not is_valid_weight(estimate):
        raise ValueError(f"Heuristic returned NaN for node {node!r}")
    return node_cost + estimate


def find_path_to(
    graph: Graph,
    start: Hashable,
    target: Hashable,
    cost: Optional[CostFunction] = None,
    heuristic: Optional[Heuristic] = None,
) -> Optional[List[Hashable]]:
    """
    A* search from start to a single target node.

    Same as ``find_path`` with a matcher testing equality against target.
    """
    return find_path(graph, start, lambda node: node == target, cost, heuristic)


def find_weighted_path(
    graph: WeightedGraph,
    start: Hashable,
    matcher: Callable[[Hashable], bool],
    heuristic: Optional[Heuristic] = None,
) -> Optional[List[Hashable]]:
    """
    Cheapest path by edge weight from start to a node satisfying matcher.

    Dijkstra's algorithm when heuristic is None, A* otherwise. Infinite
    edge weights are allowed and are only used when nothing cheaper exists.

    Raises:
        NodeNotFoundError: If start is not in graph.
    """
    return find_path(graph, start, matcher, graph.edge_weight, heuristic)


def find_weighted_path_to(
    graph: WeightedGraph,
    start: Hashable,
    target: Hashable,
    heuristic: Optional[Heuristic] = None,
) -> Optional[List[Hashable]]:
    """
    Cheapest path by edge weight from start to target.

    Example:
        >>> G = WeightedListGraph(directed=True)
        >>> G.add_edge(1, 2, float("inf"))
        >>> G.add_edge(1, 3, 2.0)
        >>> G.add_edge(3, 2, 3.0)
        >>> find_weighted_path_to(G, 1, 2)
        [1, 3, 2]
    """
    return find_path(graph, start, lambda node: node == target, graph.edge_weight, heuristic)


def path_cost(graph: WeightedGraph, path: Sequence[Hashable]) -> float:
    """
    Sum of edge weights along a path.

    Args:
        graph: Weighted graph the path runs through.
        path: Sequence of nodes; consecutive nodes must be joined by an edge.

    Returns:
        Total weight (0.0 for paths with fewer than two nodes).

    Raises:
        EdgeNotFoundError: If two consecutive nodes are not joined by an edge.
    """
    total = 0.0
    for start, destination in zip(path, path[1:]):
        total += graph.edge_weight(start, destination)
    return total
