"""Minimum spanning tree via Prim's algorithm.

The tree grows from a fixed start node. Frontier edges live in a
:class:`~flowspan.algorithms.heap.MinHeap`; edges whose destination joined the
tree after they were pushed are discarded on extraction (lazy deletion), so
the total running time is O(E log E).
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, List, Optional, Sequence

from flowspan.algorithms.base import NO_MST_COST, Cost, NodeID
from flowspan.algorithms.heap import MinHeap
from flowspan.algorithms.observers import MstObserver
from flowspan.algorithms.types import MstResult, WeightedEdge
from flowspan.config import MST_CONFIG, MstConfig
from flowspan.graph.build import Adjacency, build_adjacency, validate_node


class SolverState(IntEnum):
    """Lifecycle of a :class:`PrimSolver`."""

    UNSOLVED = 1
    SOLVED = 2


class PrimSolver:
    """One-shot Prim solver over an adjacency list.

    The first query computes the tree and caches the result; later queries
    return the cached :class:`MstResult` without recomputation. Instances are
    not thread-safe and are meant to be used from a single thread.

    Args:
        graph: Adjacency list; ``graph[n]`` holds the outgoing edges of ``n``.
            Undirected edges must appear in both directions.
        start: Node the tree is grown from.
        observer: Optional :class:`MstObserver` notified of accepted edges.

    Raises:
        InvalidNodeError: If ``start`` or an edge endpoint is out of range.
    """

    def __init__(
        self,
        graph: Sequence[Sequence[WeightedEdge]],
        start: NodeID = 0,
        observer: Optional[MstObserver] = None,
    ) -> None:
        self.n = len(graph)
        for edges in graph:
            for edge in edges:
                validate_node(edge.src, self.n, "edge")
                validate_node(edge.dst, self.n, "edge")
        self.start = validate_node(start, self.n, "start")
        self.graph = graph
        self.observer = observer

        self.state = SolverState.UNSOLVED
        self._result: Optional[MstResult] = None

    def solve(self) -> MstResult:
        """Return the spanning tree, computing it on the first call only."""
        if self.state is SolverState.SOLVED:
            return self._result  # type: ignore[return-value]

        self._result = self._grow_tree()
        self.state = SolverState.SOLVED
        return self._result

    def mst_cost(self) -> Cost:
        """Total tree cost, or ``NO_MST_COST`` if no spanning tree exists."""
        return self.solve().cost

    def mst_edges(self) -> List[WeightedEdge]:
        """Accepted edges in acceptance order; empty if no spanning tree exists."""
        return list(self.solve().edges)

    def _grow_tree(self) -> MstResult:
        target = self.n - 1
        visited = [False] * self.n
        pq: MinHeap[WeightedEdge] = MinHeap(key_func=lambda e: e.cost)
        accepted: List[WeightedEdge] = []
        total: Cost = 0

        def add_edges(node: NodeID) -> None:
            visited[node] = True
            for edge in self.graph[node]:
                if not visited[edge.dst]:
                    pq.push(edge)

        add_edges(self.start)

        while pq and len(accepted) < target:
            edge = pq.pop_min()
            if visited[edge.dst]:
                continue

            accepted.append(edge)
            total += edge.cost
            if self.observer is not None:
                self.observer.on_edge_accepted(edge, total)

            add_edges(edge.dst)

        if len(accepted) != target:
            return MstResult(cost=NO_MST_COST, edges=[])
        return MstResult(cost=total, edges=accepted)


def calc_mst(
    num_nodes: int,
    edges: Iterable[Sequence[int]],
    *,
    start: Optional[NodeID] = None,
    undirected: bool = False,
    observer: Optional[MstObserver] = None,
    config: Optional[MstConfig] = None,
) -> MstResult:
    """Compute a minimum spanning tree grown from ``start``.

    Args:
        num_nodes: Vertex count. Node ids are integers in ``[0, num_nodes)``.
        edges: Directed ``(src, dst, cost)`` triples or ``WeightedEdge``
            instances. Supply undirected edges in both directions, or pass
            ``undirected=True``.
        start: Start node; defaults to ``config.start_node``.
        undirected: Add the reverse of every supplied edge.
        observer: Optional :class:`MstObserver`.
        config: Solver configuration; defaults to ``MST_CONFIG``.

    Returns:
        :class:`MstResult`. ``cost == -1`` and no edges when ``start`` does not
        reach every node.

    Examples:
        >>> calc_mst(3, [(0, 1, 2), (1, 2, 1), (0, 2, 5)], undirected=True).cost
        3
    """
    config = config or MST_CONFIG
    graph: Adjacency = build_adjacency(num_nodes, edges, undirected=undirected)
    start_node = config.start_node if start is None else start
    return PrimSolver(graph, start=start_node, observer=observer).solve()
