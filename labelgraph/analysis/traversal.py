"""
Breadth-first and depth-first traversal for label graphs.

This module provides the traversal algorithms used by LabelGraph.
"""

import logging
from typing import Dict, List, Optional
from collections import deque

logger = logging.getLogger(__name__)


class GraphTraversal:
    """
    Traversal algorithms over a LabelGraph.

    This class provides methods for:
    - Breadth-first visitation order
    - Depth-first (pre-order) visitation order
    - BFS distance of every reachable vertex

    Neighbors are always expanded in ascending label order, so every result
    is deterministic. Results are new lists that share no state with the graph.
    """

    def __init__(self, graph):
        """
        Initialize the traversal.

        Args:
            graph: LabelGraph instance to traverse
        """
        self.graph = graph

    def _is_valid_start(self, start: Optional[str]) -> bool:
        if start is None or not start.strip():
            return False
        if start not in self.graph.adjacency_list:
            logger.debug(f"Traversal start {start!r} is not a vertex")
            return False
        return True

    def bfs(self, start: Optional[str]) -> List[str]:
        """
        Breadth-first traversal from a start vertex.

        Args:
            start: Start vertex label

        Returns:
            Vertices in visitation order, empty if start is blank or unknown
        """
        order: List[str] = []
        if not self._is_valid_start(start):
            return order

        visited = {start}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbor in self.graph.neighbors(current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        logger.debug(f"BFS from {start!r} visited {len(order)} vertices")
        return order

    def dfs(self, start: Optional[str]) -> List[str]:
        """
        Depth-first traversal from a start vertex.

        Uses an explicit stack; neighbors are pushed in reverse order so the
        result matches recursive pre-order with ascending sibling order.

        Args:
            start: Start vertex label

        Returns:
            Vertices in pre-order, empty if start is blank or unknown
        """
        order: List[str] = []
        if not self._is_valid_start(start):
            return order

        visited = set()
        stack = [start]

        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            order.append(current)
            for neighbor in reversed(self.graph.neighbors(current)):
                if neighbor not in visited:
                    stack.append(neighbor)

        logger.debug(f"DFS from {start!r} visited {len(order)} vertices")
        return order

    def bfs_levels(self, start: Optional[str]) -> Dict[str, int]:
        """
        Compute the BFS distance of every vertex reachable from start.

        Args:
            start: Start vertex label

        Returns:
            Dictionary mapping label -> number of edges from start, in BFS
            visitation order. Empty if start is blank or unknown.
        """
        levels: Dict[str, int] = {}
        if not self._is_valid_start(start):
            return levels

        levels[start] = 0
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for neighbor in self.graph.neighbors(current):
                if neighbor not in levels:
                    levels[neighbor] = levels[current] + 1
                    queue.append(neighbor)

        return levels
