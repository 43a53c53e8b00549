"""NetworkX graph conversion utilities.

Maps arbitrary hashable NetworkX node names onto the contiguous integer ids
the engines require and extracts edge lists ready for
:func:`~flowspan.algorithms.max_flow.calc_max_flow` and
:func:`~flowspan.algorithms.mst.calc_mst`.

Example:
    >>> import networkx as nx
    >>> G = nx.DiGraph()
    >>> G.add_edge("s", "a", capacity=3)
    >>> G.add_edge("a", "t", capacity=5)
    >>> num_nodes, edges, node_map = capacity_edges_from_networkx(G)
    >>> calc_max_flow(num_nodes, edges, node_map.to_index["s"], node_map.to_index["t"])
    3
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Tuple

import networkx as nx

from flowspan.algorithms.base import EdgeTuple
from flowspan.algorithms.types import MstResult

NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Attributes:
        to_index: Maps original node names to integer indices.
        to_name: Maps integer indices back to original node names.
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)


def _check_graph(G: NxGraph) -> NodeMap:
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )
    # Sorted for deterministic ordering
    return NodeMap.from_names(sorted(G.nodes(), key=str))


def _directed_pairs(G: NxGraph, attr: str, default: int):
    """Yield ``(u, v, value)`` for every directed edge, both ways if undirected."""
    for u, v, data in G.edges(data=True):
        value = data.get(attr, default)
        yield u, v, value
        if not G.is_directed() and u != v:
            yield v, u, value


def capacity_edges_from_networkx(
    G: NxGraph,
    *,
    capacity_attr: str = "capacity",
    default_capacity: int = 1,
) -> Tuple[int, List[EdgeTuple], NodeMap]:
    """Convert a NetworkX graph into ``(num_nodes, edges, node_map)`` for max flow.

    Undirected graphs yield both directions per edge. Capacities of parallel
    edges in multigraphs are summed, since the capacity graph keeps one entry
    per ordered pair.

    Raises:
        TypeError: If ``G`` is not a NetworkX graph.
    """
    node_map = _check_graph(G)
    merged: Dict[Tuple[int, int], int] = {}
    for u, v, cap in _directed_pairs(G, capacity_attr, default_capacity):
        key = (node_map.to_index[u], node_map.to_index[v])
        merged[key] = merged.get(key, 0) + cap
    edges = [(u, v, cap) for (u, v), cap in merged.items()]
    return len(node_map), edges, node_map


def weighted_edges_from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: int = 1,
) -> Tuple[int, List[EdgeTuple], NodeMap]:
    """Convert a NetworkX graph into ``(num_nodes, edges, node_map)`` for Prim.

    Undirected edges are emitted as two directed entries.

    Raises:
        TypeError: If ``G`` is not a NetworkX graph.
    """
    node_map = _check_graph(G)
    edges = [
        (node_map.to_index[u], node_map.to_index[v], w)
        for u, v, w in _directed_pairs(G, weight_attr, default_weight)
    ]
    return len(node_map), edges, node_map


def mst_to_networkx(
    result: MstResult, node_map: NodeMap, *, weight_attr: str = "weight"
) -> nx.Graph:
    """Return the accepted tree edges as an undirected NetworkX graph.

    All mapped nodes are included; the graph has no edges when no spanning
    tree exists.
    """
    tree = nx.Graph()
    tree.add_nodes_from(node_map.to_index)
    for edge in result.edges:
        tree.add_edge(
            node_map.to_name[edge.src],
            node_map.to_name[edge.dst],
            **{weight_attr: edge.cost},
        )
    return tree
