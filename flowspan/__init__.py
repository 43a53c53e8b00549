"""flowspan: maximum flow and minimum spanning tree kernels.

Primary API:
    calc_max_flow() - Ford-Fulkerson maximum flow with DFS augmenting paths
    calc_mst() - Prim's minimum spanning tree over a binary-heap frontier
    PrimSolver - One-shot Prim solver over an adjacency list
    MinHeap - Array-backed binary min-heap

Example:
    from flowspan import calc_max_flow, calc_mst

    calc_max_flow(3, [(0, 1, 3), (1, 2, 5)], 0, 2)  # 3

    result = calc_mst(3, [(0, 1, 2), (1, 2, 1), (0, 2, 5)], undirected=True)
    result.cost  # 3
"""

from __future__ import annotations

from flowspan import cli, logging
from flowspan._version import __version__
from flowspan.algorithms.base import EmptyQueueError, InvalidNodeError, NO_MST_COST
from flowspan.algorithms.heap import MinHeap
from flowspan.algorithms.max_flow import calc_max_flow, ford_fulkerson
from flowspan.algorithms.mst import PrimSolver, SolverState, calc_mst
from flowspan.algorithms.observers import (
    FlowObserver,
    LoggingFlowObserver,
    LoggingMstObserver,
    MstObserver,
)
from flowspan.algorithms.residual import ResidualGraph
from flowspan.algorithms.types import (
    AugmentationRecord,
    FlowSummary,
    MstResult,
    WeightedEdge,
)
from flowspan.config import FLOW_CONFIG, MST_CONFIG, FlowConfig, MstConfig
from flowspan.graph.build import (
    add_directed_edge,
    add_undirected_edge,
    build_adjacency,
    build_capacity_graph,
    create_empty_adjacency,
)

__all__ = [
    # Version
    "__version__",
    # Engines
    "calc_max_flow",
    "ford_fulkerson",
    "calc_mst",
    "PrimSolver",
    "SolverState",
    # Data structures
    "MinHeap",
    "ResidualGraph",
    # Types
    "WeightedEdge",
    "AugmentationRecord",
    "FlowSummary",
    "MstResult",
    "NO_MST_COST",
    # Errors
    "EmptyQueueError",
    "InvalidNodeError",
    # Observers
    "FlowObserver",
    "MstObserver",
    "LoggingFlowObserver",
    "LoggingMstObserver",
    # Configuration
    "FlowConfig",
    "MstConfig",
    "FLOW_CONFIG",
    "MST_CONFIG",
    # Graph construction
    "build_capacity_graph",
    "build_adjacency",
    "create_empty_adjacency",
    "add_directed_edge",
    "add_undirected_edge",
    # Utilities
    "cli",
    "logging",
]
