"""Example: Route planning with graphkit

Builds a small road network, finds cheapest routes with Dijkstra and A*,
and explores the neighbourhood of a city with bounded breadth-first search.
"""

import math

from graphkit import (
    WeightedListGraph,
    find_weighted_path_to,
    incoming_nodes,
    map_or_remove_edge_weights,
    path_cost,
    traverse_breadth_first,
)

# City -> (x, y) in kilometres, used for the straight-line heuristic
POSITIONS = {
    "Aston": (0.0, 0.0),
    "Brent": (4.0, 1.0),
    "Corby": (3.0, 5.0),
    "Derby": (8.0, 2.0),
    "Ewell": (9.0, 6.0),
    "Frome": (13.0, 4.0),
}

ROADS = [
    ("Aston", "Brent", 4.5),
    ("Aston", "Corby", 6.0),
    ("Brent", "Derby", 4.2),
    ("Corby", "Ewell", 6.2),
    ("Brent", "Corby", 4.2),
    ("Derby", "Ewell", 4.2),
    ("Derby", "Frome", 5.4),
    ("Ewell", "Frome", 4.5),
]


def straight_line_to(target):
    tx, ty = POSITIONS[target]

    def estimate(city):
        x, y = POSITIONS[city]
        return math.hypot(tx - x, ty - y)

    return estimate


def main():
    roads = WeightedListGraph.from_edges(ROADS, directed=False)

    print("=" * 60)
    print("Cheapest routes")
    print("=" * 60)

    route = find_weighted_path_to(roads, "Aston", "Frome")
    print(f"Dijkstra: {' -> '.join(route)} ({path_cost(roads, route):.1f} km)")

    route = find_weighted_path_to(roads, "Aston", "Frome", straight_line_to("Frome"))
    print(f"A*:       {' -> '.join(route)} ({path_cost(roads, route):.1f} km)")

    # Close every road longer than 5 km and plan again
    short_roads = map_or_remove_edge_weights(roads, lambda u, v, km: km if km <= 5.0 else None)
    route = find_weighted_path_to(short_roads, "Aston", "Frome")
    print(f"Short roads only: {' -> '.join(route)} ({path_cost(short_roads, route):.1f} km)")

    print("=" * 60)
    print("Neighbourhood of Aston")
    print("=" * 60)
    print(f"Within two hops: {sorted(traverse_breadth_first(roads, 'Aston', max_depth=2))}")
    print(f"Roads into Derby: {sorted(incoming_nodes(roads, 'Derby'))}")


if __name__ == "__main__":
    main()
