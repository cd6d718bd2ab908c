#!/usr/bin/env python3
"""
labelgraph command line interface.

Builds a graph from command line arguments and prints its adjacency list
together with the BFS and DFS orders from a start vertex.

Usage:
    labelgraph --sample
    labelgraph -e A-B -e A-C -e 'B>D' --start A
    labelgraph -v Lonely -e X-Y --directed --layout circle
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..core.labelgraph import pylabelgraph, DEFAULT_START
from ..classes.graph_builders import GraphBuilders
from ..operations.layout import LayoutConfig, ensure_positions

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="labelgraph",
        description="Build a small unweighted graph and print BFS/DFS traversals.",
    )
    parser.add_argument("-v", "--vertex", action="append", default=[], metavar="LABEL",
                        help="add a vertex (repeatable)")
    parser.add_argument("-e", "--edge", action="append", default=[], metavar="SPEC",
                        help="add an edge: A-B (undirected) or A>B (directed); repeatable")
    parser.add_argument("--directed", action="store_true",
                        help="treat A-B edge specs as directed too")
    parser.add_argument("--sample", action="store_true",
                        help="start from the five-vertex sample graph")
    parser.add_argument("-s", "--start", default=None, metavar="LABEL",
                        help="traversal start vertex (default: A, or the first vertex)")
    parser.add_argument("--layout", choices=["none", "circle", "random"], default="none",
                        help="also print vertex positions")
    parser.add_argument("--width", type=float, default=800, help="canvas width for --layout")
    parser.add_argument("--height", type=float, default=600, help="canvas height for --layout")
    parser.add_argument("--seed", type=int, default=None, help="random seed for vertex placement")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser


def _pick_start(session: pylabelgraph, requested: Optional[str]) -> Optional[str]:
    if requested is not None:
        return requested.strip()
    candidates = session.start_candidates()
    if DEFAULT_START in candidates:
        return DEFAULT_START
    return candidates[0] if candidates else None


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = LayoutConfig(width=args.width, height=args.height, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    session = pylabelgraph(config)
    builders = GraphBuilders(session.graph)

    if args.sample:
        builders.load_sample()
    for label in args.vertex:
        session.graph.add_vertex(label)
    rejected = builders.add_edge_specs(args.edge, force_directed=args.directed)
    if rejected:
        parser.error(f"malformed edge spec(s): {', '.join(rejected)} (expected A-B or A>B)")

    session.print_header()
    session.print_adjacency()

    start = _pick_start(session, args.start)
    if start:
        session.print_traversals(start)
    else:
        session.append_line("No start vertex.")

    if args.layout != "none":
        if args.layout == "circle":
            session.auto_layout()
        else:
            session.positions.clear()
            ensure_positions(session.graph, session.positions, config)
        session.append_line("Positions:")
        for label in session.graph.vertices():
            x, y = session.positions[label]
            session.append_line(f"{label}: ({x:.1f}, {y:.1f})")

    print(session.output())
    return 0


if __name__ == "__main__":
    sys.exit(main())
