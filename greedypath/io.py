"""Problem loading and result formatting.

Two input formats are supported:

Text (whitespace separated)::

    <node_count> <edge_count> <target_length>
    <node_a> <node_b> <cost>
    ...

YAML::

    nodes: 4
    target_length: 3
    edges:
      - [0, 1, 1.5]
      - [1, 2, 2.0]

Both produce a `Problem`, whose graph is validated edge by edge through
`WeightedGraph.add_edge`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from greedypath.algorithms.selector import select_best
from greedypath.errors import InvalidEdgeError
from greedypath.graph.weighted_graph import WeightedGraph
from greedypath.logging import get_logger
from greedypath.path import PathResult
from greedypath.types import Cost

logger = get_logger(__name__)

TEXT_FORMAT = "text"
YAML_FORMAT = "yaml"
FORMATS = (TEXT_FORMAT, YAML_FORMAT)

_YAML_KEYS = {"nodes", "target_length", "edges"}


class ProblemFormatError(ValueError):
    """Raised when problem input cannot be parsed."""


@dataclass
class Problem:
    """A graph together with the requested path length.

    Attributes:
        graph: The loaded graph.
        target_length: Requested number of nodes per path. Validated when
            solving, not when loading.
    """

    graph: WeightedGraph
    target_length: int

    def solve(self, parallelism: Optional[int] = None) -> Optional[PathResult]:
        """Return the best greedy path for this problem, or None."""
        return select_best(self.graph, self.target_length, parallelism=parallelism)


def _parse_int(token: str, line_no: int, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ProblemFormatError(
            f"Line {line_no}: {what} must be an integer, got {token!r}."
        ) from None


def _parse_cost(token: str, line_no: int) -> float:
    try:
        return float(token)
    except ValueError:
        raise ProblemFormatError(
            f"Line {line_no}: edge cost must be a number, got {token!r}."
        ) from None


def _add_edge(graph: WeightedGraph, a: int, b: int, cost: Cost, where: str) -> None:
    try:
        graph.add_edge(a, b, cost)
    except InvalidEdgeError as e:
        raise InvalidEdgeError(f"{where}: {e}") from e


def parse_text(text: str) -> Problem:
    """Parse the whitespace-separated text format.

    Blank lines are skipped. Lines after the declared number of edges are
    ignored with a warning.

    Raises:
        ProblemFormatError: If the header or an edge line is malformed, or
            fewer edges than declared are present.
        InvalidEdgeError: If an edge is a self-loop or references an unknown node.
    """
    lines: List[Tuple[int, List[str]]] = [
        (line_no, line.split())
        for line_no, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]
    if not lines:
        raise ProblemFormatError("Input is empty.")

    header_no, header = lines[0]
    if len(header) != 3:
        raise ProblemFormatError(
            f"Line {header_no}: expected '<nodes> <edges> <target_length>', "
            f"got {len(header)} fields."
        )
    node_count = _parse_int(header[0], header_no, "node count")
    edge_count = _parse_int(header[1], header_no, "edge count")
    target_length = _parse_int(header[2], header_no, "target length")
    if edge_count < 0:
        raise ProblemFormatError(
            f"Line {header_no}: edge count must not be negative, got {edge_count}."
        )

    edge_lines = lines[1:]
    if len(edge_lines) < edge_count:
        raise ProblemFormatError(
            f"Expected {edge_count} edges, found {len(edge_lines)}."
        )
    if len(edge_lines) > edge_count:
        logger.warning(
            f"Ignoring {len(edge_lines) - edge_count} lines after the "
            f"{edge_count} declared edges"
        )

    graph = WeightedGraph(node_count)
    for line_no, fields in edge_lines[:edge_count]:
        if len(fields) != 3:
            raise ProblemFormatError(
                f"Line {line_no}: expected '<node_a> <node_b> <cost>', "
                f"got {len(fields)} fields."
            )
        a = _parse_int(fields[0], line_no, "node")
        b = _parse_int(fields[1], line_no, "node")
        cost = _parse_cost(fields[2], line_no)
        _add_edge(graph, a, b, cost, f"Line {line_no}")

    logger.debug(
        f"Parsed text problem: {node_count} nodes, {edge_count} edges, "
        f"target length {target_length}"
    )
    return Problem(graph=graph, target_length=target_length)


def parse_yaml(text: str) -> Problem:
    """Parse the YAML format.

    Raises:
        ProblemFormatError: On invalid YAML, unknown or missing keys, or
            malformed edges.
        InvalidEdgeError: If an edge is a self-loop or references an unknown node.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ProblemFormatError(f"Invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ProblemFormatError("YAML problem must be a mapping.")

    unknown = set(map(str, data)) - _YAML_KEYS
    if unknown:
        raise ProblemFormatError(f"Unknown keys in YAML problem: {sorted(unknown)}.")
    for key in ("nodes", "target_length"):
        if key not in data:
            raise ProblemFormatError(f"YAML problem is missing '{key}'.")
        if not isinstance(data[key], int) or isinstance(data[key], bool):
            raise ProblemFormatError(f"'{key}' must be an integer, got {data[key]!r}.")

    edges: Any = data.get("edges") or []
    if not isinstance(edges, list):
        raise ProblemFormatError("'edges' must be a list of [node_a, node_b, cost].")

    graph = WeightedGraph(data["nodes"])
    for idx, edge in enumerate(edges):
        if not isinstance(edge, (list, tuple)) or len(edge) != 3:
            raise ProblemFormatError(
                f"edges[{idx}]: expected [node_a, node_b, cost], got {edge!r}."
            )
        _add_edge(graph, edge[0], edge[1], edge[2], f"edges[{idx}]")

    logger.debug(
        f"Parsed YAML problem: {data['nodes']} nodes, {len(edges)} edges, "
        f"target length {data['target_length']}"
    )
    return Problem(graph=graph, target_length=data["target_length"])


def load_problem(text: str, fmt: str = TEXT_FORMAT) -> Problem:
    """Parse ``text`` in the given format (``"text"`` or ``"yaml"``)."""
    if fmt == TEXT_FORMAT:
        return parse_text(text)
    if fmt == YAML_FORMAT:
        return parse_yaml(text)
    raise ProblemFormatError(f"Unknown format {fmt!r}; expected one of {FORMATS}.")


def detect_format(path: Path) -> str:
    """Return ``"yaml"`` for ``.yaml``/``.yml`` files and ``"text"`` otherwise."""
    return YAML_FORMAT if path.suffix.lower() in (".yaml", ".yml") else TEXT_FORMAT


def read_problem(path: Path, fmt: Optional[str] = None) -> Problem:
    """Load a problem from ``path``; the format defaults to the file suffix."""
    path = Path(path)
    return load_problem(path.read_text(), fmt or detect_format(path))


def format_cost(cost: Cost) -> str:
    """Render a cost in plain decimal notation with the shortest exact digits.

    Integral values drop the fractional part and exponents are expanded, so
    ``2.0`` prints as ``2``, ``-0.0`` as ``-0`` and ``1e-07`` as
    ``0.0000001``. Infinities print as ``inf`` and ``-inf``.
    """
    value = float(cost)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_result(result: Optional[PathResult], target_length: int) -> str:
    """Render a result for printing.

    Returns an empty string when there is no result.
    """
    if result is None:
        return ""
    lines = [
        f"The best path with {target_length} nodes cost {format_cost(result.cost)}.",
        "The path consists of the following nodes in order:",
    ]
    lines.extend(str(node) for node in result.path)
    return "\n".join(lines)


def result_to_dict(result: Optional[PathResult], target_length: int) -> Dict[str, Any]:
    """Return a JSON-serializable summary; ``result`` is None when nothing was found."""
    return {
        "target_length": target_length,
        "result": result.to_dict() if result is not None else None,
    }
