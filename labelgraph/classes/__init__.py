"""
Helper classes and functions shared across labelgraph.

This module contains label utilities and graph builders.
"""

from .graph_builders import GraphBuilders

__all__ = ['GraphBuilders']
