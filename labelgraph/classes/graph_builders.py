"""
Graph builders module for labelgraph.

This module contains helpers that populate a LabelGraph from canned sample
data or from textual edge specifications.
"""

import logging
from typing import Iterable, List, Optional

from .utils import parse_edge_spec

logger = logging.getLogger(__name__)

SAMPLE_VERTICES = ("A", "B", "C", "D", "E")
SAMPLE_EDGES = (("A", "B"), ("A", "C"), ("B", "D"), ("C", "E"), ("D", "E"))


class GraphBuilders:
    """
    Graph construction utilities.

    This class provides methods for loading the sample graph and for
    building graphs from edge specifications such as ``A-B`` or ``X>Y``.
    """

    def __init__(self, graph):
        """
        Initialize graph builders with reference to the graph.

        Args:
            graph: The LabelGraph instance to populate
        """
        self.graph = graph

    def load_sample(self) -> None:
        """Replace the graph content with the five-vertex sample graph."""
        self.graph.clear()
        for label in SAMPLE_VERTICES:
            self.graph.add_vertex(label)
        for from_label, to_label in SAMPLE_EDGES:
            self.graph.add_edge(from_label, to_label)
        logger.debug("Loaded sample graph")

    def add_edge_specs(self, specs: Iterable[str], force_directed: bool = False) -> List[str]:
        """
        Add edges described by specification strings.

        Args:
            specs: Edge specifications (``A-B`` undirected, ``A>B`` directed)
            force_directed: Treat ``A-B`` specs as directed as well

        Returns:
            The specifications that could not be parsed
        """
        rejected = []
        for spec in specs:
            parsed = parse_edge_spec(spec)
            if parsed is None:
                logger.warning(f"Skipping malformed edge spec {spec!r}")
                rejected.append(spec)
                continue
            from_label, to_label, undirected = parsed
            self.graph.add_edge(from_label, to_label, undirected and not force_directed)
        return rejected

    def from_edge_specs(self, specs: Iterable[str], vertices: Optional[Iterable[str]] = None,
                        force_directed: bool = False) -> List[str]:
        """
        Rebuild the graph from scratch out of vertices and edge specifications.

        Args:
            specs: Edge specifications
            vertices: Extra vertex labels, including isolated ones
            force_directed: Treat ``A-B`` specs as directed as well

        Returns:
            The specifications that could not be parsed
        """
        self.graph.clear()
        for label in vertices or ():
            self.graph.add_vertex(label)
        return self.add_edge_specs(specs, force_directed)
