"""
Graph analysis modules.

This module contains classes for traversal and edge classification.
"""

from .traversal import GraphTraversal
from .detection import EdgeAnalyzer, Edge

__all__ = ['GraphTraversal', 'EdgeAnalyzer', 'Edge']
