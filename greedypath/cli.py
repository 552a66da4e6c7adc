"""Command-line interface for greedypath."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

import networkx as nx

from greedypath.io import (
    FORMATS,
    Problem,
    detect_format,
    format_result,
    load_problem,
    result_to_dict,
)
from greedypath.logging import configure_cli_logging, get_logger

logger = get_logger(__name__)


def _read_input(source: Optional[Path], fmt: Optional[str]) -> Problem:
    """Load a problem from ``source``, or from stdin when it is None or ``-``."""
    if source is None or str(source) == "-":
        logger.debug("Reading problem from stdin")
        return load_problem(sys.stdin.read(), fmt or "text")
    logger.debug(f"Reading problem from: {source}")
    return load_problem(source.read_text(), fmt or detect_format(source))


def _graph_summary(problem: Problem) -> Dict[str, Any]:
    graph = problem.graph
    degrees = [degree for _, degree in graph.degree()]
    components = list(nx.connected_components(graph)) if graph.node_count else []
    return {
        "nodes": graph.node_count,
        "edges": graph.number_of_edges(),
        "target_length": problem.target_length,
        "isolated_nodes": sorted(nx.isolates(graph)),
        "min_degree": min(degrees, default=0),
        "max_degree": max(degrees, default=0),
        "components": len(components),
        "largest_component": max((len(c) for c in components), default=0),
    }


def _solve(
    source: Optional[Path],
    fmt: Optional[str],
    workers: Optional[int],
    as_json: bool,
) -> None:
    """Solve a problem and print the best path (nothing when none exists)."""
    start_time = perf_counter()
    try:
        problem = _read_input(source, fmt)
        result = problem.solve(parallelism=workers)
    except FileNotFoundError:
        logger.error(f"Input file not found: {source}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to solve problem: {type(e).__name__}: {e}")
        sys.exit(1)

    logger.debug(f"Search completed in {perf_counter() - start_time:.3f}s")

    if as_json:
        print(json.dumps(result_to_dict(result, problem.target_length), indent=2))
    elif result is not None:
        print(format_result(result, problem.target_length))
    else:
        logger.debug("No path found from any start node")


def _inspect(source: Optional[Path], fmt: Optional[str]) -> None:
    """Print a summary of the problem graph."""
    try:
        problem = _read_input(source, fmt)
    except FileNotFoundError:
        logger.error(f"Input file not found: {source}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to inspect problem: {type(e).__name__}: {e}")
        sys.exit(1)

    summary = _graph_summary(problem)
    width = max(len(key) for key in summary)
    for key, value in summary.items():
        print(f"{key.replace('_', ' '):<{width}}  {value}")

    if summary["largest_component"] < problem.target_length:
        logger.warning(
            f"Largest component has {summary['largest_component']} nodes; "
            f"no path of {problem.target_length} nodes can exist"
        )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``greedypath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="greedypath",
        description="Find a low-cost fixed-length path with a greedy heuristic.",
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
        metavar="{solve,inspect}",
        help="Available commands",
    )

    solve_parser = subparsers.add_parser(
        "solve", help="Print the cheapest greedy path over all start nodes"
    )
    solve_parser.add_argument(
        "--workers",
        "-w",
        type=int,
        default=None,
        help="Worker threads for the per-start searches (default: 1)",
    )
    solve_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Summarize the input graph"
    )

    for p in (solve_parser, inspect_parser):
        p.add_argument(
            "input",
            type=Path,
            nargs="?",
            default=None,
            help="Problem file; reads stdin when omitted or '-'",
        )
        p.add_argument(
            "--format",
            "-f",
            choices=FORMATS,
            default=None,
            help="Input format (default: from file suffix, text for stdin)",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if configure_cli_logging(args.verbose, args.quiet) == logging.DEBUG:
        logger.debug("Debug logging enabled")

    if args.command == "solve":
        _solve(args.input, args.format, args.workers, args.json)
    elif args.command == "inspect":
        _inspect(args.input, args.format)


if __name__ == "__main__":
    main()
