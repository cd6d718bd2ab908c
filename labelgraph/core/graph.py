"""
Core graph data structure for labelled, unweighted graphs.

This module provides the fundamental graph structure: vertex and edge
insertion, deterministic enumeration and the traversal entry points.
Positions, rendering and other presentation state live elsewhere.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Set, Tuple

from ..classes.utils import normalize_label, format_adjacency
from ..analysis.traversal import GraphTraversal

logger = logging.getLogger(__name__)


class LabelGraph:
    """
    Adjacency-set graph keyed by text labels.

    This class manages the fundamental graph representation. It provides:
    - Vertex insertion (labels are trimmed; blank labels are ignored)
    - Directed and undirected edge insertion with set semantics
    - Enumeration in ascending ordinal label order
    - Breadth-first and depth-first traversal

    Malformed input never raises: blank labels are a no-op and traversals
    from an unknown start return an empty list.
    """

    def __init__(self):
        """Initialize an empty graph."""
        self.adjacency_list: Dict[str, Set[str]] = {}

    def __len__(self) -> int:
        return len(self.adjacency_list)

    def __contains__(self, label) -> bool:
        return isinstance(label, str) and label in self.adjacency_list

    def __repr__(self) -> str:
        return f"LabelGraph(vertices={self.get_vertex_count()}, edges={self.get_edge_count()})"

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_vertex(self, label: Optional[str]) -> None:
        """
        Add a vertex if it is not already present.

        Args:
            label: Vertex label; surrounding whitespace is removed
        """
        label = normalize_label(label)
        if not label:
            logger.debug("Ignoring blank vertex label")
            return
        if label not in self.adjacency_list:
            self.adjacency_list[label] = set()
            logger.debug(f"Added vertex {label!r}")

    def add_edge(self, from_label: Optional[str], to_label: Optional[str], undirected: bool = True) -> None:
        """
        Add an edge, creating missing endpoints.

        Args:
            from_label: Source vertex label
            to_label: Target vertex label
            undirected: Also add the reverse edge (skipped for self-loops)
        """
        from_label = normalize_label(from_label)
        to_label = normalize_label(to_label)
        if not from_label or not to_label:
            logger.debug("Ignoring edge with a blank endpoint")
            return

        self.add_vertex(from_label)
        self.add_vertex(to_label)
        self.adjacency_list[from_label].add(to_label)
        if undirected and from_label != to_label:
            self.adjacency_list[to_label].add(from_label)

        logger.debug(f"Added edge {from_label!r} {'-' if undirected else '->'} {to_label!r}")

    def clear(self) -> None:
        """Remove all vertices and edges."""
        self.adjacency_list.clear()
        logger.debug("Cleared graph")

    # ========================================================================
    # QUERIES
    # ========================================================================

    def vertices(self) -> Iterator[str]:
        """
        Iterate over vertex labels in ascending ordinal order.

        Each call returns a fresh iterator over a sorted snapshot.
        """
        return iter(sorted(self.adjacency_list))

    def has_vertex(self, label: Optional[str]) -> bool:
        """Check whether a (trimmed) label is a known vertex."""
        label = normalize_label(label)
        return bool(label) and label in self.adjacency_list

    def neighbors(self, label: str) -> Tuple[str, ...]:
        """
        Get the neighbors of a vertex in ascending order.

        Args:
            label: Vertex label

        Returns:
            Tuple of neighbor labels, empty if the vertex is unknown
        """
        return tuple(sorted(self.adjacency_list.get(label, ())))

    def adjacency(self) -> Mapping[str, Tuple[str, ...]]:
        """
        Get a read-only view of the adjacency relation.

        Returns:
            Mapping of vertex label -> ordered tuple of neighbor labels, with
            keys in ascending order. The view is a snapshot; it neither
            changes with the graph nor allows changing it.
        """
        snapshot = {label: self.neighbors(label) for label in self.vertices()}
        return MappingProxyType(snapshot)

    def get_vertex_count(self) -> int:
        """Get the number of vertices."""
        return len(self.adjacency_list)

    def get_edge_count(self) -> int:
        """
        Get the number of stored directed adjacency entries.

        An undirected edge between two distinct vertices counts twice.
        """
        return sum(len(neighbors) for neighbors in self.adjacency_list.values())

    # ========================================================================
    # TRAVERSAL AND DISPLAY
    # ========================================================================

    def bfs(self, start: Optional[str]) -> List[str]:
        """Breadth-first visitation order from ``start``."""
        return GraphTraversal(self).bfs(start)

    def dfs(self, start: Optional[str]) -> List[str]:
        """Depth-first (pre-order) visitation order from ``start``."""
        return GraphTraversal(self).dfs(start)

    def format_adjacency(self) -> str:
        """Format the adjacency list as ``label: n1, n2`` lines."""
        return format_adjacency(self.adjacency_list)
