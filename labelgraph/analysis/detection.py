"""
Edge classification for label graphs.

This module tells apart directed and undirected edges the way a renderer
needs them: mirrored pairs are drawn once as plain lines, one-way pairs as
arrows.
"""

import logging
from typing import List, NamedTuple

from ..classes.utils import normalize_pair

logger = logging.getLogger(__name__)


class Edge(NamedTuple):
    """A drawable edge. Undirected edges have their endpoints in ascending order."""
    source: str
    target: str
    directed: bool


class EdgeAnalyzer:
    """
    Classifies the stored adjacency entries of a LabelGraph into edges.

    This class provides methods for:
    - Checking whether a vertex pair is connected in both directions
    - Listing every edge once, undirected pairs collapsed
    - Counting directed and undirected edges
    """

    def __init__(self, graph):
        """
        Initialize the edge analyzer.

        Args:
            graph: LabelGraph instance to analyze
        """
        self.graph = graph

    def is_undirected_pair(self, a: str, b: str) -> bool:
        """Check whether ``a`` and ``b`` are adjacent in both directions."""
        adjacency = self.graph.adjacency_list
        return b in adjacency.get(a, ()) and a in adjacency.get(b, ())

    def find_edges(self) -> List[Edge]:
        """
        List every edge of the graph once.

        Returns:
            Edges ordered by source then target label. A pair stored in both
            directions yields one undirected edge; a self-loop is undirected.
        """
        edges = []
        seen = set()

        for source in self.graph.vertices():
            for target in self.graph.neighbors(source):
                if self.is_undirected_pair(source, target):
                    key = normalize_pair(source, target)
                    if key in seen:
                        continue
                    seen.add(key)
                    edges.append(Edge(key[0], key[1], False))
                else:
                    edges.append(Edge(source, target, True))

        logger.debug(f"Found {len(edges)} edges ({len(seen)} undirected)")
        return edges

    def count_edges(self):
        """
        Count edges by kind.

        Returns:
            Tuple of (directed_count, undirected_count)
        """
        edges = self.find_edges()
        directed = sum(1 for edge in edges if edge.directed)
        return directed, len(edges) - directed
