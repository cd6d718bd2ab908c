"""
Session facade for interactive graph editing.

This module provides the pylabelgraph class, which plays the part of the
editor window: it owns a LabelGraph, a separate position map and a text
output panel, and turns form-style input into graph calls.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Optional

from .graph import LabelGraph
from ..analysis.detection import EdgeAnalyzer, Edge
from ..analysis.traversal import GraphTraversal
from ..classes.graph_builders import GraphBuilders
from ..classes.utils import normalize_label
from ..operations.layout import (
    LayoutConfig, Point, circle_layout, ensure_positions, clamp_all, hit_test,
)

logger = logging.getLogger(__name__)

DEFAULT_START = "A"

DIFF_LINES = (
    "BFS vs DFS:",
    "\u2022 BFS walks level by level using a queue; it finds shortest routes in unweighted graphs.",
    "\u2022 DFS goes deep before backtracking (stack/recursion); useful for cycles, components and backtracking.",
)


class pylabelgraph:
    """
    Main facade class for an editing session.

    Delegates graph semantics to LabelGraph and keeps everything the editor
    shows (positions, output lines, status messages) out of the graph.
    """

    def __init__(self, layout_config: Optional[LayoutConfig] = None):
        """
        Initialize an empty session.

        Args:
            layout_config: Canvas geometry; defaults to LayoutConfig()
        """
        self.graph = LabelGraph()
        self.layout_config = replace(layout_config) if layout_config else LayoutConfig()
        self.positions: Dict[str, Point] = {}
        self.lines: List[str] = []

        self._rng = self.layout_config.make_rng()
        self._traversal = GraphTraversal(self.graph)
        self._analyzer = EdgeAnalyzer(self.graph)
        self._builders = GraphBuilders(self.graph)

    # ========================================================================
    # EDITING
    # ========================================================================

    def add_vertex(self, label: Optional[str]) -> str:
        """
        Add a vertex from the node form field.

        Returns:
            Status message for the user
        """
        label = normalize_label(label)
        if not label:
            return "Enter a node name."

        self.graph.add_vertex(label)
        ensure_positions(self.graph, self.positions, self.layout_config, self._rng)
        self.show_adjacency()
        return f"Node added: {label}"

    def add_edge(self, from_label: Optional[str], to_label: Optional[str], undirected: bool = True) -> str:
        """
        Add an edge from the edge form fields.

        Returns:
            Status message for the user
        """
        from_label = normalize_label(from_label)
        to_label = normalize_label(to_label)
        if not from_label or not to_label:
            return "Fill in both 'From' and 'To'."

        self.graph.add_edge(from_label, to_label, undirected)
        ensure_positions(self.graph, self.positions, self.layout_config, self._rng)
        self.show_adjacency()
        arrow = "-" if undirected else "->"
        return f"Edge added: {from_label} {arrow} {to_label}"

    def reset(self) -> None:
        """Clear graph, positions and output, then print a fresh header."""
        self.graph.clear()
        self.positions.clear()
        self.print_header()
        logger.info("Session reset")

    def load_sample(self) -> None:
        """Load the sample graph and print its adjacency and traversals."""
        self._builders.load_sample()
        self.auto_layout()
        self.print_header()
        self.print_adjacency()
        self.print_traversals(DEFAULT_START)
        self.print_diff()

    def start_candidates(self) -> List[str]:
        """Vertices offered as traversal start, in ascending order."""
        return list(self.graph.vertices())

    # ========================================================================
    # LAYOUT
    # ========================================================================

    def auto_layout(self) -> Dict[str, Point]:
        """Replace all positions with an evenly spaced circle."""
        self.positions.clear()
        self.positions.update(circle_layout(self.graph.vertices(), self.layout_config))
        return self.positions

    def resize(self, width: float, height: float) -> None:
        """Change the canvas size and pull positions back inside it."""
        self.layout_config.width = max(1, width)
        self.layout_config.height = max(1, height)
        clamp_all(self.positions, self.layout_config)

    def vertex_at(self, point: Point) -> Optional[str]:
        """Vertex drawn under a canvas point, if any."""
        return hit_test(point, self.graph, self.positions, self.layout_config)

    def edges(self) -> List[Edge]:
        """Edges as they are drawn: mirrored pairs once, one-way pairs as arrows."""
        return self._analyzer.find_edges()

    # ========================================================================
    # OUTPUT PANEL
    # ========================================================================

    def append_line(self, text: str) -> None:
        self.lines.append(text)

    def print_header(self) -> None:
        """Clear the output and write the title and a timestamp."""
        self.lines.clear()
        self.append_line("== Graph (unweighted) ==")
        self.append_line(datetime.now().strftime("%H:%M:%S"))
        self.append_line("")

    def print_adjacency(self) -> None:
        self.append_line("Adjacency list:")
        self.append_line(self.graph.format_adjacency())

    def print_traversals(self, start: str) -> None:
        """Write the BFS and DFS orders from a start vertex."""
        bfs = self._traversal.bfs(start)
        dfs = self._traversal.dfs(start)
        self.append_line(f"BFS from {start}: {', '.join(bfs)}")
        self.append_line(f"DFS from {start}: {', '.join(dfs)}")
        self.append_line("")

    def print_diff(self) -> None:
        """Write the short BFS vs DFS explanation."""
        for line in DIFF_LINES:
            self.append_line(line)

    def show_adjacency(self) -> None:
        """Refresh the panel with a fresh header and the adjacency list."""
        self.print_header()
        self.print_adjacency()

    def print_bfs(self, start: Optional[str]) -> str:
        """
        Refresh the panel with the BFS order from a start vertex.

        Returns:
            Warning message if no start was given, else an empty string
        """
        return self._print_single("BFS", self._traversal.bfs, start)

    def print_dfs(self, start: Optional[str]) -> str:
        """
        Refresh the panel with the DFS order from a start vertex.

        Returns:
            Warning message if no start was given, else an empty string
        """
        return self._print_single("DFS", self._traversal.dfs, start)

    def _print_single(self, name, traverse, start: Optional[str]) -> str:
        start = normalize_label(start)
        if not start:
            return "Select a start node."
        order = traverse(start)
        self.print_header()
        self.append_line(f"{name} from {start}: {', '.join(order)}")
        self.print_diff()
        return ""

    def output(self) -> str:
        """The output panel content as one string."""
        return "\n".join(self.lines)
