"""Built-in example graphs.

``EXAMPLE_MST_EDGES`` is the 10-node undirected Prim example; its minimum
spanning tree costs 14. ``EXAMPLE_FLOW_EDGES`` is the classic 6-node flow
network with a maximum 0 -> 5 flow of 23.
"""

from __future__ import annotations

from typing import List, Tuple

from flowspan.graph.build import Adjacency, add_undirected_edge, create_empty_adjacency

EXAMPLE_MST_NODES = 10
EXAMPLE_MST_COST = 14

EXAMPLE_MST_EDGES: List[Tuple[int, int, int]] = [
    (0, 1, 5),
    (1, 2, 4),
    (2, 9, 2),
    (0, 4, 1),
    (0, 3, 4),
    (1, 3, 2),
    (2, 7, 4),
    (2, 8, 1),
    (9, 8, 0),
    (4, 5, 1),
    (5, 6, 7),
    (6, 8, 4),
    (4, 3, 2),
    (5, 3, 5),
    (3, 6, 11),
    (6, 7, 1),
    (3, 7, 2),
    (7, 8, 6),
]

EXAMPLE_FLOW_NODES = 6
EXAMPLE_FLOW_SOURCE = 0
EXAMPLE_FLOW_SINK = 5
EXAMPLE_FLOW_VALUE = 23

EXAMPLE_FLOW_EDGES: List[Tuple[int, int, int]] = [
    (0, 1, 16),
    (0, 2, 13),
    (1, 2, 10),
    (2, 1, 4),
    (1, 3, 12),
    (3, 2, 9),
    (2, 4, 14),
    (4, 3, 7),
    (3, 5, 20),
    (4, 5, 4),
]


def example_mst_adjacency() -> Adjacency:
    """Return the 10-node example as an undirected adjacency list."""
    graph = create_empty_adjacency(EXAMPLE_MST_NODES)
    for a, b, cost in EXAMPLE_MST_EDGES:
        add_undirected_edge(graph, a, b, cost)
    return graph
