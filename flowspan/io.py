"""YAML/JSON graph documents for the command-line interface.

A document declares a vertex count and an edge list, plus optional
``source``/``sink`` (max flow) and ``start`` (spanning tree) nodes::

    nodes: 4
    source: 0
    sink: 3
    undirected: false
    edges:
      - [0, 1, 3]
      - {from: 1, to: 3, capacity: 5}

Edges are ``[u, v, value]`` triples or mappings with ``from``, ``to`` and one
of ``capacity``, ``cost`` or ``weight``. JSON input works unchanged because
JSON is valid YAML.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml

from flowspan.algorithms.base import EdgeTuple
from flowspan.logging import get_logger

logger = get_logger(__name__)

_VALUE_KEYS = ("capacity", "cost", "weight")


@dataclass
class GraphDocument:
    """Parsed graph document.

    Attributes:
        num_nodes: Declared vertex count.
        edges: Directed ``(u, v, value)`` triples in document order.
        source: Max-flow source node, if given.
        sink: Max-flow sink node, if given.
        start: Spanning-tree start node, if given.
        undirected: Whether each edge should also be added in reverse.
    """

    num_nodes: int
    edges: List[EdgeTuple] = field(default_factory=list)
    source: Optional[int] = None
    sink: Optional[int] = None
    start: Optional[int] = None
    undirected: bool = False

    def directed_edges(self) -> List[EdgeTuple]:
        """Return the edge list with reverse entries added when undirected."""
        if not self.undirected:
            return list(self.edges)
        result: List[EdgeTuple] = []
        for u, v, value in self.edges:
            result.append((u, v, value))
            result.append((v, u, value))
        return result


def _parse_edge(index: int, entry: Any) -> EdgeTuple:
    if isinstance(entry, (list, tuple)):
        if len(entry) != 3:
            raise ValueError(f"Edge #{index} must have exactly 3 items, got {len(entry)}")
        u, v, value = entry
        return (u, v, value)

    if isinstance(entry, dict):
        if "from" not in entry or "to" not in entry:
            raise ValueError(f"Edge #{index} must include 'from' and 'to'")
        present = [key for key in _VALUE_KEYS if key in entry]
        if len(present) != 1:
            raise ValueError(
                f"Edge #{index} must include exactly one of {', '.join(_VALUE_KEYS)}"
            )
        return (entry["from"], entry["to"], entry[present[0]])

    raise ValueError(f"Edge #{index} must be a list or a mapping, got {type(entry).__name__}")


def load_graph_document(text: str) -> GraphDocument:
    """Parse a YAML or JSON graph document.

    Node ids and values are passed through unchanged; range and sign checks
    happen when the engines build their graphs.

    Raises:
        ValueError: If the document does not have the expected shape.
    """
    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError("The graph document must map to a dictionary at top-level.")

    if "nodes" not in data:
        raise ValueError("The graph document must declare 'nodes'")
    num_nodes = data["nodes"]
    if isinstance(num_nodes, bool) or not isinstance(num_nodes, int):
        raise ValueError(f"'nodes' must be an integer, got {num_nodes!r}")

    raw_edges = data.get("edges") or []
    if not isinstance(raw_edges, list):
        raise ValueError("'edges' must be a list")

    undirected = data.get("undirected", False)
    if not isinstance(undirected, bool):
        raise ValueError(f"'undirected' must be true or false, got {undirected!r}")

    unknown = set(data) - {"nodes", "edges", "source", "sink", "start", "undirected"}
    if unknown:
        raise ValueError(f"Unknown keys in graph document: {', '.join(sorted(map(str, unknown)))}")

    doc = GraphDocument(
        num_nodes=num_nodes,
        edges=[_parse_edge(i, entry) for i, entry in enumerate(raw_edges)],
        source=data.get("source"),
        sink=data.get("sink"),
        start=data.get("start"),
        undirected=undirected,
    )
    logger.debug(
        "Loaded graph document: %d nodes, %d edges (undirected=%s)",
        doc.num_nodes,
        len(doc.edges),
        doc.undirected,
    )
    return doc


def load_graph_file(path: Union[str, Path]) -> GraphDocument:
    """Read and parse a graph document from ``path``."""
    return load_graph_document(Path(path).read_text(encoding="utf-8"))
