"""Command-line interface for flexalgo."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, List, Optional

from flexalgo.algorithms.dijkstra import ShortestPathSolver
from flexalgo.logging import get_logger, set_global_log_level
from flexalgo.types.base import Cost

logger = get_logger(__name__)


def _parse_weight(text: str) -> Cost:
    """Parse an edge weight, keeping integers integral."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid weight: {text!r}") from None


def _format_cost(value: Cost) -> str:
    """Return cost with up to three decimals and trailing zeros trimmed.

    Examples:
        14 -> "14"; 2.5 -> "2.5"; 1.23456 -> "1.235".
    """
    if isinstance(value, int):
        return str(value)
    s = f"{value:.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _format_path(path: List[int]) -> str:
    return " -> ".join(str(node) for node in path)


def _format_table(headers: List[str], rows: List[List[Any]], min_width: int = 6) -> str:
    """Format rows as a plain ASCII table."""
    if not rows:
        return ""
    all_rows = [headers] + [[str(item) for item in row] for row in rows]
    widths = [
        max(min_width, max(len(row[col]) for row in all_rows))
        for col in range(len(headers))
    ]

    def format_row(row: List[str]) -> str:
        return "   " + " | ".join(f"{item:<{widths[i]}}" for i, item in enumerate(row))

    lines = [format_row(all_rows[0])]
    lines.append("   " + "-+-".join("-" * width for width in widths))
    lines.extend(format_row(row) for row in all_rows[1:])
    return "\n".join(lines)


def _run_spf(
    nodes: int,
    edges: List[List[Cost]],
    source: int,
    target: Optional[int],
) -> None:
    """Solve and print a shortest-path query."""
    try:
        solver = ShortestPathSolver(nodes, [(u, v, w) for u, v, w in edges])
        if target is not None:
            result = solver.shortest_path(source, target)
            if result is None:
                logger.info(f"Node {target} is unreachable from {source}")
                print(f"Node {target} is unreachable from {source}")
                return
            cost, path = result
            print(f"Cost: {_format_cost(cost)}")
            print(f"Path: {_format_path(path)}")
            return

        tree = solver.solve(source)
        rows: List[List[Any]] = []
        for node in range(nodes):
            found = tree.path_to(node)
            if found is None:
                rows.append([node, "unreachable", "-"])
            else:
                rows.append([node, _format_cost(found[0]), _format_path(found[1])])
        print(f"Shortest paths from node {source}:")
        print(_format_table(["Node", "Cost", "Path"], rows))
    except ValueError as e:
        logger.error(f"Failed to solve: {type(e).__name__}: {e}")
        print(f"ERROR: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``flexalgo`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="flexalgo",
        description="Run flexalgo algorithms from the command line.",
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
        metavar="{spf}",
        help="Available commands",
    )

    spf_parser = subparsers.add_parser(
        "spf", help="Shortest paths over a directed weighted graph (nodes numbered from 0)"
    )
    spf_parser.add_argument(
        "--nodes", "-n", type=int, required=True, help="Number of nodes"
    )
    spf_parser.add_argument(
        "--edge",
        "-e",
        nargs=3,
        action="append",
        default=[],
        type=_parse_weight,
        metavar=("SOURCE", "TARGET", "WEIGHT"),
        help="Directed edge; repeat for each edge",
    )
    spf_parser.add_argument(
        "--source", "-s", type=int, required=True, help="Start node"
    )
    spf_parser.add_argument(
        "--target",
        "-t",
        type=int,
        default=None,
        help="Destination node (default: report every node)",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "spf":
        _run_spf(args.nodes, args.edge, args.source, args.target)


if __name__ == "__main__":
    main()
