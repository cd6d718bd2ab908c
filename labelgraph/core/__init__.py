"""
Core graph data structures and session management.

This module contains the fundamental graph representation and the editing
session facade built on top of it.
"""

from .graph import LabelGraph
from .labelgraph import pylabelgraph

__all__ = ['LabelGraph', 'pylabelgraph']
