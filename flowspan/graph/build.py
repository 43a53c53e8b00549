"""Graph construction and boundary validation.

Turns caller-supplied edge lists into the structures the engines consume:
a capacity mapping for max flow and an adjacency list of
:class:`~flowspan.algorithms.types.WeightedEdge` for the spanning tree. All
node ids are checked against the declared vertex count here so the engines
never see an out-of-range id.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence

from flowspan.algorithms.base import CapacityGraph, EdgeTuple, InvalidNodeError, NodeID
from flowspan.algorithms.types import WeightedEdge

Adjacency = List[List[WeightedEdge]]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_node_count(num_nodes: Any) -> int:
    """Return ``num_nodes`` if it is a non-negative integer.

    Raises:
        ValueError: If the count is negative or not an integer.
    """
    if not _is_int(num_nodes) or num_nodes < 0:
        raise ValueError(f"Vertex count must be a non-negative integer, got {num_nodes!r}")
    return num_nodes


def validate_node(node: Any, num_nodes: int, role: str = "node") -> NodeID:
    """Return ``node`` if it is an integer in ``[0, num_nodes)``.

    Args:
        node: Candidate node id.
        num_nodes: Declared vertex count.
        role: Name used in the error message (``source``, ``sink``, ...).

    Raises:
        InvalidNodeError: If the id is not an integer or is out of range.
    """
    if not _is_int(node) or not 0 <= node < num_nodes:
        raise InvalidNodeError(
            f"Invalid {role} node {node!r}: expected an integer in [0, {num_nodes})"
        )
    return node


def build_capacity_graph(num_nodes: int, edges: Iterable[EdgeTuple]) -> CapacityGraph:
    """Build a directed capacity graph from ``(u, v, capacity)`` triples.

    Every node in ``[0, num_nodes)`` gets an entry. A later edge for the same
    ordered pair overwrites the earlier capacity.

    Raises:
        InvalidNodeError: If an endpoint is out of range.
        ValueError: If a capacity is negative or not an integer.
    """
    validate_node_count(num_nodes)
    graph: CapacityGraph = {node: {} for node in range(num_nodes)}
    for u, v, capacity in edges:
        validate_node(u, num_nodes, "edge")
        validate_node(v, num_nodes, "edge")
        if not _is_int(capacity) or capacity < 0:
            raise ValueError(
                f"Capacity of edge {u}->{v} must be a non-negative integer, got {capacity!r}"
            )
        graph[u][v] = capacity
    return graph


def create_empty_adjacency(num_nodes: int) -> Adjacency:
    """Return an adjacency list with no edges for ``num_nodes`` nodes."""
    validate_node_count(num_nodes)
    return [[] for _ in range(num_nodes)]


def add_directed_edge(graph: Adjacency, src: NodeID, dst: NodeID, cost: int) -> None:
    """Append ``src -> dst`` with ``cost`` to ``graph``."""
    num_nodes = len(graph)
    validate_node(src, num_nodes, "edge")
    validate_node(dst, num_nodes, "edge")
    if not _is_int(cost):
        raise ValueError(f"Cost of edge {src}->{dst} must be an integer, got {cost!r}")
    graph[src].append(WeightedEdge(src, dst, cost))


def add_undirected_edge(graph: Adjacency, a: NodeID, b: NodeID, cost: int) -> None:
    """Append ``a -> b`` and ``b -> a`` with the same cost."""
    add_directed_edge(graph, a, b, cost)
    add_directed_edge(graph, b, a, cost)


def build_adjacency(
    num_nodes: int,
    edges: Iterable[Sequence[int]],
    undirected: bool = False,
) -> Adjacency:
    """Build an adjacency list from ``(src, dst, cost)`` triples.

    Args:
        num_nodes: Declared vertex count.
        edges: Edge triples or :class:`WeightedEdge` instances.
        undirected: If True, each triple also adds the reverse edge.
    """
    graph = create_empty_adjacency(num_nodes)
    add = add_undirected_edge if undirected else add_directed_edge
    for edge in edges:
        if isinstance(edge, WeightedEdge):
            add(graph, edge.src, edge.dst, edge.cost)
        else:
            src, dst, cost = edge
            add(graph, src, dst, cost)
    return graph
