"""Configuration classes for flowspan solvers."""

from dataclasses import dataclass


@dataclass
class FlowConfig:
    """Configuration for the Ford-Fulkerson engine."""

    # Visit residual neighbours in ascending node id order. When False the
    # insertion order of the residual adjacency is used.
    sorted_neighbors: bool = True

    # Emit a DEBUG record per residual edge update from LoggingFlowObserver.
    log_residual_updates: bool = False


@dataclass
class MstConfig:
    """Configuration for the Prim engine."""

    # Node the spanning tree is grown from when no explicit start is given.
    start_node: int = 0


# Global configuration instances
FLOW_CONFIG = FlowConfig()
MST_CONFIG = MstConfig()
