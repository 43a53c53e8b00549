"""Sample graphs shared by the algorithm tests."""

import pytest

from flowspan.graph.samples import (
    EXAMPLE_FLOW_EDGES,
    EXAMPLE_FLOW_NODES,
    EXAMPLE_MST_EDGES,
    EXAMPLE_MST_NODES,
)


@pytest.fixture
def line3():
    # Capacity:
    #     [3]     [5]
    #  0 ────► 1 ────► 2
    return 3, [(0, 1, 3), (1, 2, 5)]


@pytest.fixture
def diamond4():
    # Capacity:
    #        [1000]      [1000]
    #     0 ───────► 1 ───────► 3
    #     │          │[1]       ▲
    #     │          ▼          │
    #     └────────► 2 ─────────┘
    #        [1000]      [1000]
    return 4, [
        (0, 1, 1000),
        (0, 2, 1000),
        (1, 2, 1),
        (1, 3, 1000),
        (2, 3, 1000),
    ]


@pytest.fixture
def clrs6():
    # Classic 6-node network, max flow 0 -> 5 is 23.
    return EXAMPLE_FLOW_NODES, list(EXAMPLE_FLOW_EDGES)


@pytest.fixture
def split4():
    # Two components: {0, 1} and {2, 3}.
    return 4, [(0, 1, 5), (2, 3, 5)]


@pytest.fixture
def example10():
    # Undirected 10-node Prim example, MST cost 14.
    return EXAMPLE_MST_NODES, list(EXAMPLE_MST_EDGES)
