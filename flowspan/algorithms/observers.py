"""Observer hooks for the flow and spanning-tree engines.

Engines call observers at well-defined events and never log on their own.
Subclass :class:`FlowObserver` or :class:`MstObserver` and override the hooks
of interest; the base implementations do nothing.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from flowspan.algorithms.base import Capacity, Cost, NodeID
from flowspan.algorithms.types import AugmentationRecord, WeightedEdge
from flowspan.logging import get_logger

logger = get_logger(__name__)


class FlowObserver:
    """Receives Ford-Fulkerson events."""

    def on_path_found(self, record: AugmentationRecord) -> None:
        """Called once per augmenting path, before residuals are updated."""

    def on_residual_update(
        self, u: NodeID, v: NodeID, forward: Capacity, reverse: Capacity
    ) -> None:
        """Called after ``u -> v`` and ``v -> u`` residuals change."""

    def on_complete(self, total_flow: Capacity) -> None:
        """Called once when no augmenting path remains."""


class MstObserver:
    """Receives Prim events."""

    def on_edge_accepted(self, edge: WeightedEdge, total_cost: Cost) -> None:
        """Called when ``edge`` joins the tree; ``total_cost`` includes it."""


class RecordingFlowObserver(FlowObserver):
    """Collects augmentation records in order."""

    def __init__(self) -> None:
        self.records: List[AugmentationRecord] = []

    def on_path_found(self, record: AugmentationRecord) -> None:
        self.records.append(record)


class CompositeFlowObserver(FlowObserver):
    """Fans every event out to several observers."""

    def __init__(self, observers: Sequence[Optional[FlowObserver]]) -> None:
        self.observers = [obs for obs in observers if obs is not None]

    def on_path_found(self, record: AugmentationRecord) -> None:
        for obs in self.observers:
            obs.on_path_found(record)

    def on_residual_update(
        self, u: NodeID, v: NodeID, forward: Capacity, reverse: Capacity
    ) -> None:
        for obs in self.observers:
            obs.on_residual_update(u, v, forward, reverse)

    def on_complete(self, total_flow: Capacity) -> None:
        for obs in self.observers:
            obs.on_complete(total_flow)


class LoggingFlowObserver(FlowObserver):
    """Logs augmenting paths and, optionally, residual updates."""

    def __init__(
        self,
        log: Optional[logging.Logger] = None,
        level: int = logging.INFO,
        log_residual_updates: bool = False,
    ) -> None:
        self.log = log or logger
        self.level = level
        self.log_residual_updates = log_residual_updates
        self._cumulative = 0

    def on_path_found(self, record: AugmentationRecord) -> None:
        self._cumulative += record.bottleneck
        self.log.log(
            self.level,
            "Iteration %d: augmenting path %s, bottleneck %d, cumulative flow %d",
            record.iteration,
            " -> ".join(str(n) for n in record.path),
            record.bottleneck,
            self._cumulative,
        )

    def on_residual_update(
        self, u: NodeID, v: NodeID, forward: Capacity, reverse: Capacity
    ) -> None:
        if self.log_residual_updates:
            self.log.debug(
                "Residual %d -> %d : %d, %d -> %d : %d", u, v, forward, v, u, reverse
            )

    def on_complete(self, total_flow: Capacity) -> None:
        self.log.log(self.level, "Maximum flow: %d", total_flow)


class LoggingMstObserver(MstObserver):
    """Logs each accepted spanning-tree edge."""

    def __init__(
        self, log: Optional[logging.Logger] = None, level: int = logging.DEBUG
    ) -> None:
        self.log = log or logger
        self.level = level

    def on_edge_accepted(self, edge: WeightedEdge, total_cost: Cost) -> None:
        self.log.log(
            self.level,
            "Accepted edge %d -> %d (cost %d), tree cost %d",
            edge.src,
            edge.dst,
            edge.cost,
            total_cost,
        )
