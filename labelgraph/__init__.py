"""
labelgraph - Small Unweighted Graph Editing and Traversal Library

A Python library for building small labelled graphs (directed or undirected
edges), listing their adjacency and running breadth-first and depth-first
traversals with deterministic, label-ordered results.

Main Classes:
    LabelGraph: Adjacency-set graph with BFS/DFS
    pylabelgraph: Editing session facade (graph, positions, output panel)
    GraphTraversal: Traversal algorithms
    EdgeAnalyzer: Directed/undirected edge classification
    LayoutConfig: Canvas geometry for vertex placement

Example:
    >>> from labelgraph import LabelGraph
    >>> graph = LabelGraph()
    >>> graph.add_edge("A", "B")
    >>> graph.bfs("A")
    ['A', 'B']
"""

__version__ = "0.1.0"

from labelgraph.core.graph import LabelGraph
from labelgraph.core.labelgraph import pylabelgraph
from labelgraph.analysis.traversal import GraphTraversal
from labelgraph.analysis.detection import EdgeAnalyzer, Edge
from labelgraph.operations.layout import LayoutConfig

__all__ = [
    'LabelGraph',
    'pylabelgraph',
    'GraphTraversal',
    'EdgeAnalyzer',
    'Edge',
    'LayoutConfig',
]
