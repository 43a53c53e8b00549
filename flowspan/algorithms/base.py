from __future__ import annotations

from typing import Dict, Tuple

#: Node identifier. Nodes are contiguous integers in ``[0, num_nodes)``.
NodeID = int

#: Non-negative integral edge capacity.
Capacity = int

#: Integral edge cost used by the spanning-tree engine.
Cost = int

#: Directed capacity graph: node -> neighbour -> capacity.
CapacityGraph = Dict[NodeID, Dict[NodeID, Capacity]]

#: Directed edge given as ``(u, v, value)``.
EdgeTuple = Tuple[NodeID, NodeID, int]

#: Cost reported when the start node does not reach every node.
NO_MST_COST: Cost = -1

#: Parent entry recorded for the DFS root.
NO_PARENT: NodeID = -1


class EmptyQueueError(IndexError):
    """Raised when peeking or popping an empty priority queue."""


class InvalidNodeError(ValueError):
    """Raised when a node id is not an integer in ``[0, num_nodes)``."""
