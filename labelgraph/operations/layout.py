"""
Vertex placement for drawing label graphs.

Positions are kept in a plain ``label -> (x, y)`` dictionary owned by the
caller; the graph itself never stores coordinates.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


@dataclass
class LayoutConfig:
    """
    Canvas geometry used by the layout functions.

    Attributes:
        width: Canvas width in pixels (at least 1)
        height: Canvas height in pixels (at least 1)
        node_radius: Radius of a drawn vertex circle
        padding: Margin between a randomly placed circle and the canvas border
        clamp_padding: Margin kept when pulling a circle back inside the canvas
        radius_ratio: Circle layout radius as a fraction of the shorter side
        seed: Seed for random placement, None for a fresh generator
    """
    width: float = 800
    height: float = 600
    node_radius: float = 22.0
    padding: float = 8.0
    clamp_padding: float = 6.0
    radius_ratio: float = 0.35
    seed: Optional[int] = None

    def __post_init__(self):
        self.width = max(1, self.width)
        self.height = max(1, self.height)
        if self.node_radius <= 0:
            raise ValueError(f"node_radius must be positive, got {self.node_radius}")
        if not 0 < self.radius_ratio <= 1:
            raise ValueError(f"radius_ratio must be in (0, 1], got {self.radius_ratio}")

    @property
    def pad(self) -> float:
        return self.node_radius + self.padding

    @property
    def clamp_pad(self) -> float:
        return self.node_radius + self.clamp_padding

    def make_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)


def circle_layout(vertices: Iterable[str], config: LayoutConfig) -> Dict[str, Point]:
    """
    Place vertices evenly on a circle centred on the canvas.

    Args:
        vertices: Labels in placement order (vertex i sits at angle 2*pi*i/n)
        config: Canvas geometry

    Returns:
        Dictionary mapping label -> (x, y)
    """
    labels = list(vertices)
    if not labels:
        return {}

    cx = config.width / 2.0
    cy = config.height / 2.0
    radius = min(config.width, config.height) * config.radius_ratio

    angles = np.arange(len(labels)) * (2 * np.pi / len(labels))
    xs = cx + radius * np.cos(angles)
    ys = cy + radius * np.sin(angles)

    logger.debug(f"Circle layout for {len(labels)} vertices, radius {radius:.1f}")
    return {label: (float(x), float(y)) for label, x, y in zip(labels, xs, ys)}


def random_position(config: LayoutConfig, rng: Optional[np.random.Generator] = None) -> Point:
    """
    Draw a uniformly random position inside the padded canvas.

    Args:
        config: Canvas geometry
        rng: Random generator; one is created from config.seed if omitted

    Returns:
        (x, y) position
    """
    if rng is None:
        rng = config.make_rng()
    pad = config.pad
    usable = np.maximum(1.0, np.array([config.width, config.height]) - 2 * pad)
    x, y = pad + rng.random(2) * usable
    return float(x), float(y)


def ensure_positions(graph, positions: Dict[str, Point], config: LayoutConfig,
                     rng: Optional[np.random.Generator] = None) -> List[str]:
    """
    Give every vertex without a position a random one.

    Args:
        graph: LabelGraph whose vertices must be placed
        positions: Position map, updated in place
        config: Canvas geometry
        rng: Random generator; one is created from config.seed if omitted

    Returns:
        Labels that received a new position, in ascending order
    """
    if rng is None:
        rng = config.make_rng()

    placed = []
    for label in graph.vertices():
        if label not in positions:
            positions[label] = random_position(config, rng)
            placed.append(label)

    if placed:
        logger.debug(f"Placed {len(placed)} new vertices at random")
    return placed


def clamp_to_bounds(point: Point, config: LayoutConfig) -> Point:
    """
    Keep a circle centre inside the padded canvas.

    On an axis shorter than two pads the point is pinned to the pad.
    """
    pad = config.clamp_pad
    high = np.maximum(pad, np.array([config.width, config.height]) - pad)
    x, y = np.minimum(high, np.maximum(pad, np.asarray(point, dtype=float)))
    return float(x), float(y)


def clamp_all(positions: Dict[str, Point], config: LayoutConfig) -> None:
    """Clamp every position in place, e.g. after the canvas shrank."""
    for label in list(positions):
        positions[label] = clamp_to_bounds(positions[label], config)


def hit_test(point: Point, graph, positions: Dict[str, Point], config: LayoutConfig) -> Optional[str]:
    """
    Find the vertex drawn under a point.

    Args:
        point: (x, y) position, e.g. of the mouse
        graph: LabelGraph being drawn
        positions: Position map
        config: Canvas geometry

    Returns:
        First label in ascending order whose circle contains the point
        (border inclusive), or None
    """
    px, py = point
    limit = config.node_radius * config.node_radius
    for label in graph.vertices():
        centre = positions.get(label)
        if centre is None:
            continue
        dx = px - centre[0]
        dy = py - centre[1]
        if dx * dx + dy * dy <= limit:
            return label
    return None
