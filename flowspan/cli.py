"""Command-line interface for flowspan."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from flowspan.algorithms.max_flow import calc_max_flow
from flowspan.algorithms.mst import PrimSolver, calc_mst
from flowspan.algorithms.observers import LoggingFlowObserver, LoggingMstObserver
from flowspan.algorithms.types import FlowSummary, MstResult
from flowspan.config import FLOW_CONFIG
from flowspan.graph.samples import example_mst_adjacency
from flowspan.io import load_graph_file
from flowspan.logging import get_logger, level_from_flags, set_global_log_level

logger = get_logger(__name__)


def _format_mst(result: MstResult) -> List[str]:
    if not result.exists:
        return ["No MST exists"]
    lines = [f"MST cost: {result.cost}"]
    for edge in result.edges:
        lines.append(f"from: {edge.src}, to: {edge.dst}, cost: {edge.cost}")
    return lines


def _mst_to_json(result: MstResult) -> Dict[str, Any]:
    return {
        "cost": result.cost,
        "edges": [list(edge.as_tuple()) for edge in result.edges],
    }


def _flow_to_json(summary: FlowSummary) -> Dict[str, Any]:
    return {
        "max_flow": summary.total_flow,
        "iterations": [
            {
                "iteration": rec.iteration,
                "path": list(rec.path),
                "bottleneck": rec.bottleneck,
            }
            for rec in summary.iterations
        ],
        "min_cut": [list(edge) for edge in summary.min_cut],
        "source_side": sorted(summary.reachable),
    }


def _run_maxflow(path: Path, trace: bool, as_json: bool) -> None:
    doc = load_graph_file(path)
    if doc.source is None or doc.sink is None:
        raise ValueError(f"{path}: max flow requires 'source' and 'sink'")

    observer = None
    if trace:
        observer = LoggingFlowObserver(
            log_residual_updates=FLOW_CONFIG.log_residual_updates
        )

    max_flow, summary = calc_max_flow(
        doc.num_nodes,
        doc.directed_edges(),
        doc.source,
        doc.sink,
        return_summary=True,
        observer=observer,
    )
    if as_json:
        print(json.dumps(_flow_to_json(summary), indent=2))
    else:
        print(f"The maximum possible flow is: {max_flow}")


def _run_mst(path: Path, start: Optional[int], as_json: bool) -> None:
    doc = load_graph_file(path)
    if start is None:
        start = doc.start

    result = calc_mst(
        doc.num_nodes,
        doc.directed_edges(),
        start=start,
        observer=LoggingMstObserver(),
    )
    if as_json:
        print(json.dumps(_mst_to_json(result), indent=2))
    else:
        print("\n".join(_format_mst(result)))


def _run_example(as_json: bool) -> None:
    solver = PrimSolver(example_mst_adjacency(), observer=LoggingMstObserver())
    result = solver.solve()
    if as_json:
        print(json.dumps(_mst_to_json(result), indent=2))
    else:
        print("\n".join(_format_mst(result)))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``flowspan`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="flowspan",
        description="Compute maximum flows and minimum spanning trees.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{maxflow,mst,example}",
        help="Available commands",
    )

    flow_parser = subparsers.add_parser(
        "maxflow", help="Compute the maximum flow of a graph document"
    )
    flow_parser.add_argument("graph", type=Path, help="Path to graph YAML/JSON")
    flow_parser.add_argument(
        "--trace",
        "-t",
        action="store_true",
        help="Log every augmenting path and its bottleneck",
    )

    mst_parser = subparsers.add_parser(
        "mst", help="Compute the minimum spanning tree of a graph document"
    )
    mst_parser.add_argument("graph", type=Path, help="Path to graph YAML/JSON")
    mst_parser.add_argument(
        "--start", "-s", type=int, default=None, help="Start node (default: 0)"
    )

    example_parser = subparsers.add_parser(
        "example", help="Run Prim's algorithm on the built-in 10-node graph"
    )

    for p in (flow_parser, mst_parser, example_parser):
        p.add_argument(
            "--json", action="store_true", help="Print the result as JSON"
        )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_from_flags(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    try:
        if args.command == "maxflow":
            _run_maxflow(args.graph, args.trace, args.json)
        elif args.command == "mst":
            _run_mst(args.graph, args.start, args.json)
        elif args.command == "example":
            _run_example(args.json)
    except FileNotFoundError as exc:
        logger.error("Graph file not found: %s", exc.filename)
        raise SystemExit(1) from exc
    except (ValueError, IndexError, yaml.YAMLError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
