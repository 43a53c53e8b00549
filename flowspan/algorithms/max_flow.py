"""Maximum-flow computation via the Ford-Fulkerson method.

Augmenting paths are found with a depth-first search over the residual graph
(see :mod:`flowspan.algorithms.dfs`). With integral capacities each iteration
raises the flow by at least one unit and the flow is bounded by the capacity
leaving the source, so the loop terminates.
"""

from __future__ import annotations

from typing import Iterable, List, Literal, Optional, Set, Tuple, Union, overload

from flowspan.algorithms.base import NO_PARENT, CapacityGraph, EdgeTuple, NodeID
from flowspan.algorithms.dfs import find_augmenting_path, path_from_parents
from flowspan.algorithms.observers import (
    CompositeFlowObserver,
    FlowObserver,
    RecordingFlowObserver,
)
from flowspan.algorithms.residual import ResidualGraph
from flowspan.algorithms.types import AugmentationRecord, EdgeKey, FlowSummary
from flowspan.config import FLOW_CONFIG, FlowConfig
from flowspan.graph.build import (
    build_capacity_graph,
    validate_node,
    validate_node_count,
)


def ford_fulkerson(
    capacity_graph: CapacityGraph,
    src_node: NodeID,
    dst_node: NodeID,
    num_nodes: int,
    *,
    observer: Optional[FlowObserver] = None,
    sorted_neighbors: bool = True,
) -> Tuple[int, ResidualGraph]:
    """Run the augmentation loop on an already validated capacity graph.

    Args:
        capacity_graph: Node -> neighbour -> capacity. Left unmodified.
        src_node: Source node.
        dst_node: Sink node.
        num_nodes: Vertex count; every node id must be below it.
        observer: Optional event sink for paths and residual updates.
        sorted_neighbors: Visit residual neighbours in ascending id order.

    Returns:
        ``(max_flow, residual_graph)`` where the residual graph reflects the
        final state.

    Raises:
        InvalidNodeError: If the source, sink or a graph node is out of range.
    """
    validate_node_count(num_nodes)
    validate_node(src_node, num_nodes, "source")
    validate_node(dst_node, num_nodes, "sink")
    for u, nbrs in capacity_graph.items():
        validate_node(u, num_nodes, "edge")
        for v in nbrs:
            validate_node(v, num_nodes, "edge")

    residual = ResidualGraph(capacity_graph, num_nodes, sorted_neighbors)
    parent: List[NodeID] = [NO_PARENT] * num_nodes
    max_flow = 0
    iteration = 0

    while find_augmenting_path(residual, src_node, dst_node, parent):
        iteration += 1

        # Bottleneck along the parent chain
        path_flow = None
        v = dst_node
        while v != src_node:
            u = parent[v]
            cap = residual.capacity(u, v)
            path_flow = cap if path_flow is None else min(path_flow, cap)
            v = u

        if observer is not None:
            observer.on_path_found(
                AugmentationRecord(
                    iteration=iteration,
                    path=tuple(path_from_parents(parent, src_node, dst_node)),
                    bottleneck=path_flow,
                )
            )

        v = dst_node
        while v != src_node:
            u = parent[v]
            forward, reverse = residual.push_flow(u, v, path_flow)
            if observer is not None:
                observer.on_residual_update(u, v, forward, reverse)
            v = u

        max_flow += path_flow

    if observer is not None:
        observer.on_complete(max_flow)

    return max_flow, residual


@overload
def calc_max_flow(
    num_nodes: int,
    edges: Iterable[EdgeTuple],
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[False] = False,
    observer: Optional[FlowObserver] = None,
    config: Optional[FlowConfig] = None,
) -> int: ...


@overload
def calc_max_flow(
    num_nodes: int,
    edges: Iterable[EdgeTuple],
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[True],
    observer: Optional[FlowObserver] = None,
    config: Optional[FlowConfig] = None,
) -> Tuple[int, FlowSummary]: ...


def calc_max_flow(
    num_nodes: int,
    edges: Iterable[EdgeTuple],
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: bool = False,
    observer: Optional[FlowObserver] = None,
    config: Optional[FlowConfig] = None,
) -> Union[int, Tuple[int, FlowSummary]]:
    """Compute the maximum flow from ``src_node`` to ``dst_node``.

    Args:
        num_nodes: Vertex count. Node ids are integers in ``[0, num_nodes)``.
        edges: Directed ``(u, v, capacity)`` triples with non-negative integer
            capacities. A repeated ``(u, v)`` pair overwrites the earlier one.
        src_node: Source node.
        dst_node: Sink node.
        return_summary: If True, also return a :class:`FlowSummary` with the
            per-iteration records and the min cut.
        observer: Optional :class:`FlowObserver` notified at each event.
        config: Solver configuration; defaults to ``FLOW_CONFIG``.

    Returns:
        ``int`` max flow, or ``(int, FlowSummary)`` when ``return_summary``.

    Raises:
        InvalidNodeError: If the source, sink or an edge endpoint is out of range.
        ValueError: If a capacity is negative or not an integer.

    Examples:
        >>> calc_max_flow(3, [(0, 1, 3), (1, 2, 5)], 0, 2)
        3
    """
    config = config or FLOW_CONFIG
    capacity_graph = build_capacity_graph(num_nodes, edges)
    validate_node(src_node, num_nodes, "source")
    validate_node(dst_node, num_nodes, "sink")

    recorder = RecordingFlowObserver() if return_summary else None
    if recorder is not None and observer is not None:
        active: Optional[FlowObserver] = CompositeFlowObserver([recorder, observer])
    else:
        active = recorder or observer

    max_flow, residual = ford_fulkerson(
        capacity_graph,
        src_node,
        dst_node,
        num_nodes,
        observer=active,
        sorted_neighbors=config.sorted_neighbors,
    )

    if not return_summary:
        return max_flow

    return max_flow, _build_flow_summary(
        max_flow, capacity_graph, residual, src_node, recorder.records
    )


def residual_reachable(residual: ResidualGraph, src_node: NodeID) -> Set[NodeID]:
    """Return the nodes reachable from ``src_node`` over positive residual edges."""
    reachable = {src_node}
    stack = [src_node]
    while stack:
        u = stack.pop()
        for v, cap in residual.neighbors(u):
            if cap > 0 and v not in reachable:
                reachable.add(v)
                stack.append(v)
    return reachable


def _build_flow_summary(
    total_flow: int,
    capacity_graph: CapacityGraph,
    residual: ResidualGraph,
    src_node: NodeID,
    records: List[AugmentationRecord],
) -> FlowSummary:
    """Construct a ``FlowSummary`` from the final residual state."""
    edge_flow = {}
    for u, neighbors in capacity_graph.items():
        for v, cap in neighbors.items():
            # With antiparallel input edges the residual holds net flow, so a
            # negative difference means the flow runs the other way.
            edge_flow[(u, v)] = max(0, cap - residual.capacity(u, v))

    residual_cap = {(u, v): cap for u, v, cap in residual.edges()}
    reachable = residual_reachable(residual, src_node)

    min_cut: List[EdgeKey] = [
        (u, v)
        for u, neighbors in capacity_graph.items()
        if u in reachable
        for v, cap in neighbors.items()
        if v not in reachable and cap > 0
    ]

    return FlowSummary(
        total_flow=total_flow,
        iterations=list(records),
        edge_flow=edge_flow,
        residual_cap=residual_cap,
        reachable=reachable,
        min_cut=min_cut,
    )
