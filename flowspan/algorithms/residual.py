"""Residual-capacity graph used by the Ford-Fulkerson engine.

The residual graph starts as a copy of the capacity graph and gains reverse
entries ``v -> u`` (initialised to 0) the first time flow passes ``u -> v``.
After every augmentation ``residual(u, v) + flow(u, v) == capacity(u, v)`` and
``residual(v, u) == flow(u, v)`` for each original edge.
"""

from __future__ import annotations

from typing import Dict, Iterator, Tuple

from flowspan.algorithms.base import Capacity, CapacityGraph, NodeID


class ResidualGraph:
    """Mutable residual capacities keyed by node and neighbour.

    Every declared node owns an adjacency entry, so nodes without outgoing
    edges can still be expanded by the path finder.
    """

    def __init__(
        self,
        capacity_graph: CapacityGraph,
        num_nodes: int,
        sorted_neighbors: bool = True,
    ) -> None:
        self.num_nodes = num_nodes
        self.sorted_neighbors = sorted_neighbors
        self._adj: Dict[NodeID, Dict[NodeID, Capacity]] = {
            node: {} for node in range(num_nodes)
        }
        for u, neighbors in capacity_graph.items():
            self._adj[u].update(neighbors)

    def capacity(self, u: NodeID, v: NodeID) -> Capacity:
        """Return the residual capacity of ``u -> v`` (0 when absent)."""
        return self._adj[u].get(v, 0)

    def has_edge(self, u: NodeID, v: NodeID) -> bool:
        return v in self._adj[u]

    def neighbors(self, u: NodeID) -> Iterator[Tuple[NodeID, Capacity]]:
        """Yield ``(neighbour, residual_capacity)`` pairs for ``u``."""
        neighbors = self._adj[u]
        keys = sorted(neighbors) if self.sorted_neighbors else list(neighbors)
        for v in keys:
            yield v, neighbors[v]

    def push_flow(self, u: NodeID, v: NodeID, amount: Capacity) -> Tuple[Capacity, Capacity]:
        """Move ``amount`` units of residual capacity from ``u -> v`` to ``v -> u``.

        The reverse entry is created with capacity 0 if it does not exist yet.

        Returns:
            The new ``(forward, reverse)`` residual capacities.

        Raises:
            ValueError: If ``amount`` exceeds the forward residual capacity.
        """
        forward = self._adj[u].get(v, 0)
        if amount > forward:
            raise ValueError(
                f"Cannot push {amount} units over {u}->{v} with residual {forward}"
            )
        self._adj[u][v] = forward - amount
        reverse = self._adj[v].setdefault(u, 0) + amount
        self._adj[v][u] = reverse
        return forward - amount, reverse

    def edges(self) -> Iterator[Tuple[NodeID, NodeID, Capacity]]:
        """Yield every residual entry as ``(u, v, capacity)``."""
        for u in range(self.num_nodes):
            for v, cap in self.neighbors(u):
                yield u, v, cap

    def to_dict(self) -> CapacityGraph:
        """Return a deep copy of the residual adjacency."""
        return {u: dict(neighbors) for u, neighbors in self._adj.items()}
