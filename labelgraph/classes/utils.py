"""
Utility functions for labelgraph.

This module provides shared helpers used across the labelgraph package:
label normalization, edge specification parsing and adjacency formatting.
"""

import logging
from typing import Iterable, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

UNDIRECTED_SEPARATOR = "-"
DIRECTED_SEPARATOR = ">"


def normalize_label(label: Optional[str]) -> str:
    """
    Normalize a vertex label.

    Args:
        label: Raw label text, possibly None

    Returns:
        The label with surrounding whitespace removed, or an empty string
    """
    if label is None:
        return ""
    return label.strip()


def normalize_pair(a: str, b: str) -> Tuple[str, str]:
    """Return the two labels in ascending ordinal order."""
    return (a, b) if a <= b else (b, a)


def parse_edge_spec(spec: Optional[str]) -> Optional[Tuple[str, str, bool]]:
    """
    Parse an edge specification such as ``A-B`` or ``A>B``.

    ``-`` denotes an undirected edge and ``>`` a directed one. Whichever
    separator occurs first splits the text.

    Args:
        spec: Edge specification text

    Returns:
        Tuple of (from_label, to_label, undirected), or None if the text
        holds no separator
    """
    if spec is None:
        return None

    positions = [
        (spec.find(sep), sep)
        for sep in (UNDIRECTED_SEPARATOR, DIRECTED_SEPARATOR)
        if spec.find(sep) >= 0
    ]
    if not positions:
        logger.debug(f"Edge spec without separator: {spec!r}")
        return None

    index, sep = min(positions)
    from_label = normalize_label(spec[:index])
    to_label = normalize_label(spec[index + 1:])
    return from_label, to_label, sep == UNDIRECTED_SEPARATOR


def format_adjacency(adjacency: Mapping[str, Iterable[str]]) -> str:
    """
    Format an adjacency mapping as text, one line per vertex.

    Each line reads ``label: n1, n2`` with vertices and neighbors in
    ascending order. Every line, including the last, ends with a newline.

    Args:
        adjacency: Mapping of vertex label -> neighbor labels

    Returns:
        The formatted listing, empty for an empty mapping
    """
    lines = []
    for label in sorted(adjacency):
        neighbors = ", ".join(sorted(adjacency[label]))
        lines.append(f"{label}: {neighbors}\n")
    return "".join(lines)
