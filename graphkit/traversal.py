"""
Graph traversal algorithms: BFS and DFS.

Both work on any object satisfying the ``Graph`` protocol. Neighbors are
visited in the representation's enumeration order, which is unspecified;
only the set of visited nodes and the depth ordering of BFS are guaranteed.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Callable, Deque, Dict, Hashable, List, Optional, Set

from .exceptions import NodeNotFoundError
from .protocol import Graph


def traverse_depth_first(graph: Graph, start: Hashable) -> List[Hashable]:
    """
    Depth-first traversal from a start node.

    Returns nodes in pre-order. Each reachable node appears exactly once.
    Uses an explicit stack so deep graphs do not hit the recursion limit;
    the order is the same as the recursive formulation.

    Args:
        graph: Graph to traverse.
        start: Node to start from.

    Returns:
        List of nodes in visitation order, starting with ``start``.

    Raises:
        NodeNotFoundError: If start is not in graph.

    Complexity: O(V + E) over the part reachable from start.

    Example:
        >>> G = ListGraph.from_edges([(1, 2), (2, 3), (3, 4)], directed=True)
        >>> traverse_depth_first(G, 1)
        [1, 2, 3, 4]
    """
    if not graph.contains_node(start):
        raise NodeNotFoundError(start)

    visited: List[Hashable] = []
    seen: Set[Hashable] = set()
    stack: List[Hashable] = [start]

    while stack:
        node = stack.pop()
        if node in seen:
            continue
        seen.add(node)
        visited.append(node)

        # Push in reverse so the first enumerated neighbor is visited first
        neighbours = list(graph.adjacent_nodes(node))
        for neighbour in reversed(neighbours):
            if neighbour not in seen:
                stack.append(neighbour)

    return visited


def traverse_breadth_first(
    graph: Graph,
    start: Hashable,
    max_depth: Optional[int] = None,
    stop: Optional[Callable[[Hashable], bool]] = None,
) -> List[Hashable]:
    """
    Breadth-first traversal from a start node.

    A node is expanded only when its depth is below ``max_depth`` and
    ``stop(node)`` is false. Nodes failing either check are still part of
    the result; only their neighbors are skipped. A node is never enqueued
    twice.

    Args:
        graph: Graph to traverse.
        start: Node to start from (depth 0).
        max_depth: Deepest level to emit, or None for no bound.
        stop: Predicate marking nodes whose neighbors must not be explored.

    Returns:
        List of nodes in dequeue order (non-decreasing depth).

    Raises:
        NodeNotFoundError: If start is not in graph.
        ValueError: If max_depth is negative.

    Complexity: O(V + E) over the part reachable from start.

    Example:
        >>> G = ListGraph.from_edges([(1, 2), (2, 3), (3, 4)], directed=True)
        >>> traverse_breadth_first(G, 1, stop=lambda n: n == 2)
        [1, 2]
    """
    if max_depth is not None and max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")
    if not graph.contains_node(start):
        raise NodeNotFoundError(start)

    visited: List[Hashable] = []
    depth: Dict[Hashable, int] = {start: 0}
    queue: Deque[Hashable] = deque([start])

    while queue:
        node = queue.popleft()
        visited.append(node)

        current_depth = depth[node]
        if max_depth is not None and current_depth >= max_depth:
            continue
        if stop is not None and stop(node):
            continue

        # depth holds every node ever enqueued, visited or not
        for neighbour in graph.adjacent_nodes(node):
            if neighbour not in depth:
                depth[neighbour] = current_depth + 1
                queue.append(neighbour)

    return visited
