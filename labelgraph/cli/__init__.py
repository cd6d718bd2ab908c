"""
Command line interface for labelgraph.

This module contains the ``labelgraph`` console script.
"""
