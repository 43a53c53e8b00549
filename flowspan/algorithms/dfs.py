"""Depth-first augmenting-path search over a residual graph."""

from __future__ import annotations

from typing import List

from flowspan.algorithms.base import NO_PARENT, NodeID
from flowspan.algorithms.residual import ResidualGraph


def find_augmenting_path(
    residual: ResidualGraph,
    src_node: NodeID,
    dst_node: NodeID,
    parent: List[NodeID],
) -> bool:
    """Search for a source-to-sink path with strictly positive residual capacity.

    Uses an explicit stack. Nodes are marked visited when pushed; for each
    popped node, its residual neighbours are examined in the residual graph's
    iteration order and every unvisited neighbour with capacity > 0 gets its
    parent recorded before being pushed. The search stops as soon as the
    destination is discovered.

    Args:
        residual: Residual graph to search.
        src_node: Source node.
        dst_node: Sink node.
        parent: Output list sized to the vertex count. On success the chain
            ``dst_node -> parent[dst_node] -> ... -> src_node`` is valid and
            ``parent[src_node] == NO_PARENT``. Entries for nodes not reached in
            this call are meaningless.

    Returns:
        True if the sink was reached, False if no augmenting path remains.
    """
    visited = [False] * len(parent)
    stack = [src_node]
    visited[src_node] = True
    parent[src_node] = NO_PARENT

    while stack:
        u = stack.pop()
        for v, cap in residual.neighbors(u):
            if visited[v] or cap <= 0:
                continue
            parent[v] = u
            visited[v] = True
            stack.append(v)
            if v == dst_node:
                return True

    return False


def path_from_parents(
    parent: List[NodeID], src_node: NodeID, dst_node: NodeID
) -> List[NodeID]:
    """Return the node sequence from ``src_node`` to ``dst_node`` via ``parent``."""
    path = [dst_node]
    node = dst_node
    while node != src_node:
        node = parent[node]
        path.append(node)
    path.reverse()
    return path
