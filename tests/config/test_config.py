"""Tests for `flowspan.config` focusing on behavior and correctness."""

from flowspan.algorithms.max_flow import calc_max_flow
from flowspan.algorithms.mst import calc_mst
from flowspan.config import FLOW_CONFIG, MST_CONFIG, FlowConfig, MstConfig
from flowspan.graph.samples import (
    EXAMPLE_FLOW_EDGES,
    EXAMPLE_FLOW_NODES,
    EXAMPLE_FLOW_VALUE,
    EXAMPLE_MST_EDGES,
    EXAMPLE_MST_NODES,
)


def test_defaults() -> None:
    """Default configs visit neighbours in sorted order and start Prim at node 0."""
    assert FlowConfig().sorted_neighbors is True
    assert FlowConfig().log_residual_updates is False
    assert MstConfig().start_node == 0
    assert FLOW_CONFIG == FlowConfig()
    assert MST_CONFIG == MstConfig()


def test_flow_value_does_not_depend_on_neighbour_order() -> None:
    for sorted_neighbors in (True, False):
        config = FlowConfig(sorted_neighbors=sorted_neighbors)
        flow = calc_max_flow(
            EXAMPLE_FLOW_NODES, EXAMPLE_FLOW_EDGES, 0, 5, config=config
        )
        assert flow == EXAMPLE_FLOW_VALUE


def test_explicit_start_overrides_config() -> None:
    config = MstConfig(start_node=9)
    result = calc_mst(
        EXAMPLE_MST_NODES, EXAMPLE_MST_EDGES, start=2, undirected=True, config=config
    )
    assert result.edges[0].src == 2


def test_global_config_is_used_by_default(monkeypatch) -> None:
    monkeypatch.setattr(MST_CONFIG, "start_node", 5)
    result = calc_mst(EXAMPLE_MST_NODES, EXAMPLE_MST_EDGES, undirected=True)
    assert result.edges[0].src == 5
