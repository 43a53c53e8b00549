import pytest

from flowspan.algorithms.residual import ResidualGraph
from flowspan.graph.build import build_capacity_graph


def test_residual_is_independent_copy():
    capacity = build_capacity_graph(3, [(0, 1, 4), (1, 2, 2)])
    residual = ResidualGraph(capacity, 3)

    residual.push_flow(0, 1, 3)

    assert capacity == {0: {1: 4}, 1: {2: 2}, 2: {}}
    assert residual.capacity(0, 1) == 1


def test_every_declared_node_has_an_entry():
    residual = ResidualGraph({0: {1: 1}}, 4)
    assert list(residual.neighbors(3)) == []
    assert residual.capacity(3, 0) == 0


def test_push_flow_creates_reverse_lazily():
    residual = ResidualGraph({0: {1: 5}}, 2)
    assert not residual.has_edge(1, 0)

    forward, reverse = residual.push_flow(0, 1, 2)
    assert (forward, reverse) == (3, 2)
    assert residual.has_edge(1, 0)

    forward, reverse = residual.push_flow(0, 1, 3)
    assert (forward, reverse) == (0, 5)
    assert residual.capacity(1, 0) == 5


def test_push_flow_on_existing_antiparallel_edge():
    residual = ResidualGraph({0: {1: 5}, 1: {0: 2}}, 2)
    residual.push_flow(0, 1, 4)
    assert residual.capacity(0, 1) == 1
    assert residual.capacity(1, 0) == 6


def test_push_flow_beyond_residual_raises():
    residual = ResidualGraph({0: {1: 1}}, 2)
    with pytest.raises(ValueError, match="Cannot push"):
        residual.push_flow(0, 1, 2)


def test_neighbors_sorted_by_default():
    capacity = {0: {3: 1, 1: 2, 2: 3}}
    residual = ResidualGraph(capacity, 4)
    assert list(residual.neighbors(0)) == [(1, 2), (2, 3), (3, 1)]


def test_neighbors_insertion_order_when_unsorted():
    capacity = {0: {3: 1, 1: 2, 2: 3}}
    residual = ResidualGraph(capacity, 4, sorted_neighbors=False)
    assert [v for v, _ in residual.neighbors(0)] == [3, 1, 2]


def test_edges_and_to_dict():
    residual = ResidualGraph({0: {1: 2}, 1: {2: 1}}, 3)
    residual.push_flow(0, 1, 1)

    assert sorted(residual.edges()) == [(0, 1, 1), (1, 0, 1), (1, 2, 1)]
    snapshot = residual.to_dict()
    assert snapshot == {0: {1: 1}, 1: {2: 1, 0: 1}, 2: {}}

    snapshot[0][1] = 99
    assert residual.capacity(0, 1) == 1
