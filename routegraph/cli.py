"""Command-line interface for routegraph."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from routegraph.algorithms import solve
from routegraph.config import DEMO_CONFIG, POLYGON_CONFIG
from routegraph.generate import polygon_graph
from routegraph.lib.nx import connected_components
from routegraph.logging import get_logger, set_global_log_level
from routegraph.model.graph import Graph
from routegraph.render import export_graph_image
from routegraph.types.base import Algorithm
from routegraph.types.dto import Found, InternalError, InvalidEndpoints, NotFound
from routegraph.utils.output_paths import NICE_TIMESTAMP_FORMAT, image_path_for_route

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
    max_col_width: Optional[int] = None,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width
        max_col_width: Optional maximum cell width; longer cells are clipped

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    def clip(val: Any) -> str:
        s = str(val)
        if max_col_width is not None and len(s) > max_col_width:
            return s[: max_col_width - 3] + "..."
        return s

    clipped_headers = [clip(h) for h in headers]
    clipped_rows = [[clip(item) for item in row] for row in rows]

    all_data = [clipped_headers] + clipped_rows
    col_widths = []
    for col_idx in range(len(clipped_headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(clipped_headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in clipped_rows:
        lines.append(format_row(row))

    return "\n".join(lines)


def _format_cost(value: Any) -> str:
    """Return cost formatted with up to three decimals.

    Uses thousands separators, trims trailing zeros and the decimal point when
    not needed. Falls back to ``str(value)`` if the input cannot be parsed as a
    float.

    Examples:
        0.1 -> "0.1"; 10.0 -> "10"; 1234.567 -> "1,234.567".
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return str(value)

    s = f"{v:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _graph_info(graph: Graph) -> str:
    """Return the compact ``<n>n;<e>e::`` prefix drawn on exported images."""
    return f"{len(graph.nodes)}n;{len(graph.edges)}e::"


def _run_route(
    sides: int,
    source: str,
    target: str,
    spikes: bool,
    radius: float,
    algorithm: Algorithm,
    output_dir: Optional[Path],
    image_override: Optional[Path],
    no_image: bool,
) -> None:
    """Build a polygon graph, compute a shortest route and export an image.

    Exits with status 1 unless a route is found.
    """
    logger.info(
        f"Computing {algorithm.name.lower()} shortest route {source} -> {target} "
        f"on a {sides}-sided polygon (spikes={spikes})"
    )
    _start_time = perf_counter()

    try:
        graph = polygon_graph(sides, radius, spikes)
    except ValueError as e:
        logger.error(f"Graph generation failed: {e}")
        print(f"ERROR: Graph generation failed: {e}")
        sys.exit(1)

    result = solve(graph, source, target, algorithm)
    logger.debug(f"Query result: {result!r}")

    if isinstance(result, NotFound):
        print(f"No route exists between {source} and {target}")
        sys.exit(1)
    if isinstance(result, InvalidEndpoints):
        print(f"Invalid source/target: {', '.join(result.missing)}")
        sys.exit(1)
    if isinstance(result, InternalError):
        logger.error(f"Shortest route error: {result.message}")
        print(f"ERROR: Shortest route error: {result.message}")
        sys.exit(1)

    if not isinstance(result, Found):
        logger.error(f"Unexpected query result: {result!r}")
        print(f"ERROR: Unexpected query result: {result!r}")
        sys.exit(1)

    print(f"Shortest route: {result.describe()}")
    print(f"Distance: {result.distance:f}")

    if not no_image:
        image_path = image_path_for_route(
            sides,
            source,
            target,
            output_dir=output_dir,
            image_override=image_override,
            default_dir=Path(DEMO_CONFIG.image_dir),
        )
        size = int(radius * 2)
        stamp = datetime.now().astimezone().strftime(NICE_TIMESTAMP_FORMAT)
        try:
            export_graph_image(
                graph,
                image_path,
                width=size + DEMO_CONFIG.xoffset,
                height=size + DEMO_CONFIG.yoffset,
                upper_left=stamp,
                lower_left=_graph_info(graph) + result.describe("->"),
                xoffset=DEMO_CONFIG.xoffset,
                yoffset=DEMO_CONFIG.yoffset,
                zoom=DEMO_CONFIG.zoom,
                route=result.route,
            )
        except (OSError, ValueError) as e:
            logger.error(f"Failed to export image: {type(e).__name__}: {e}")
            print(f"ERROR: Failed to export image: {type(e).__name__}: {e}")
            sys.exit(1)
        print(f"Exported graph image: '{image_path}'")

    _elapsed = perf_counter() - _start_time
    logger.info(f"Route computed in {_format_duration(_elapsed)}")


def _inspect_graph(sides: int, spikes: bool, radius: float, detail: bool) -> None:
    """Print a structural summary of a generated polygon graph."""
    try:
        graph = polygon_graph(sides, radius, spikes)
    except ValueError as e:
        logger.error(f"Graph generation failed: {e}")
        print(f"ERROR: Graph generation failed: {e}")
        sys.exit(1)

    n_nodes = len(graph.nodes)
    n_edges = len(graph.edges)
    components = connected_components(graph)
    print(
        f"Graph: {n_nodes} {_plural(n_nodes, 'node')},"
        f" {n_edges} {_plural(n_edges, 'edge')}"
    )
    print(f"Connected components: {len(components)}")
    isolated = [nid for nid, nbrs in graph.net.items() if not nbrs]
    if isolated:
        print(f"Isolated nodes: {', '.join(isolated)}")

    if detail:
        rows = []
        for node in graph.nodes.values():
            neighbors = graph.neighbors(node.id)
            rows.append(
                [
                    node.id,
                    _format_cost(node.x),
                    _format_cost(node.y),
                    str(len(neighbors)),
                    ", ".join(neighbors),
                ]
            )
        print()
        print(
            _format_table(
                ["Node", "X", "Y", "Degree", "Neighbors"], rows, max_col_width=40
            )
        )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``routegraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="routegraph",
        description="Compute shortest routes on generated polygon graphs.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress console output (logs only)"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{route,inspect}",
        help="Available commands",
    )

    route_parser = subparsers.add_parser(
        "route", help="Compute the shortest route between two nodes"
    )
    route_parser.add_argument(
        "--source", "-s", default=DEMO_CONFIG.source, help="Source node id"
    )
    route_parser.add_argument(
        "--target", "-t", default=DEMO_CONFIG.target, help="Target node id"
    )
    route_parser.add_argument(
        "--algorithm",
        "-a",
        choices=[a.name.lower() for a in Algorithm],
        default=Algorithm.ITERATIVE.name.lower(),
        help="Shortest-path implementation to use",
    )
    route_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help=(
            "Output directory for exported images"
            f" (default: {DEMO_CONFIG.image_dir})"
        ),
    )
    route_parser.add_argument(
        "--image",
        type=Path,
        default=None,
        help="Explicit image path; the suffix selects the format (.png, .jpg)",
    )
    route_parser.add_argument(
        "--no-image", action="store_true", help="Disable image export"
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Inspect a generated polygon graph"
    )
    inspect_parser.add_argument(
        "--detail",
        "-d",
        action="store_true",
        help="Show a table of nodes with coordinates and neighbors",
    )

    for p in (route_parser, inspect_parser):
        p.add_argument(
            "--nodes",
            "-n",
            type=int,
            default=DEMO_CONFIG.sides,
            help="Number of polygon nodes",
        )
        p.add_argument(
            "--spikes",
            action="store_true",
            help="Attach two spike nodes (<id>a, <id>b) to every polygon node",
        )
        p.add_argument(
            "--radius",
            type=float,
            default=POLYGON_CONFIG.radius,
            help="Radius of the polygon's circle",
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

    if args.command == "route":
        _run_route(
            sides=args.nodes,
            source=args.source,
            target=args.target,
            spikes=args.spikes,
            radius=args.radius,
            algorithm=Algorithm.from_string(args.algorithm),
            output_dir=args.output,
            image_override=args.image,
            no_image=args.no_image,
        )
    elif args.command == "inspect":
        _inspect_graph(args.nodes, args.spikes, args.radius, args.detail)


if __name__ == "__main__":
    main()
