"""Types and data structures for algorithm inputs and outputs.

Defines immutable edge and result containers shared by the flow and
spanning-tree engines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from flowspan.algorithms.base import NO_MST_COST, Capacity, Cost, NodeID

# Directed edge identifier: (source_node, destination_node)
EdgeKey = Tuple[NodeID, NodeID]


@dataclass(frozen=True)
class WeightedEdge:
    """Directed weighted edge consumed by the spanning-tree engine.

    Attributes:
        src: Tail node.
        dst: Head node.
        cost: Edge cost; lower cost has priority in the frontier heap.
    """

    src: NodeID
    dst: NodeID
    cost: Cost

    def as_tuple(self) -> Tuple[NodeID, NodeID, Cost]:
        return (self.src, self.dst, self.cost)


@dataclass(frozen=True)
class AugmentationRecord:
    """One Ford-Fulkerson iteration.

    Attributes:
        iteration: 1-based iteration index.
        path: Augmenting path as a node sequence from source to sink.
        bottleneck: Flow pushed along ``path`` in this iteration.
    """

    iteration: int
    path: Tuple[NodeID, ...]
    bottleneck: Capacity


@dataclass(frozen=True)
class FlowSummary:
    """Summary of max-flow computation results.

    Attributes:
        total_flow: Maximum flow value achieved.
        iterations: Augmentation records in the order they were applied.
        edge_flow: Net flow per original edge, indexed by ``(u, v)``.
        residual_cap: Final residual capacity per residual edge.
        reachable: Nodes reachable from the source in the final residual graph.
        min_cut: Original edges crossing from ``reachable`` to the rest.
    """

    total_flow: int
    iterations: List[AugmentationRecord]
    edge_flow: Dict[EdgeKey, int]
    residual_cap: Dict[EdgeKey, int]
    reachable: Set[NodeID]
    min_cut: List[EdgeKey]


@dataclass(frozen=True)
class MstResult:
    """Minimum spanning tree outcome.

    ``cost`` is ``NO_MST_COST`` (-1) and ``edges`` is empty when the start node
    does not reach every node. Edges are listed in acceptance order.
    """

    cost: Cost
    edges: List[WeightedEdge] = field(default_factory=list)

    @property
    def exists(self) -> bool:
        # A tree whose costs sum to -1 still lists its edges
        return self.cost != NO_MST_COST or bool(self.edges)
