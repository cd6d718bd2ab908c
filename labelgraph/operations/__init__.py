"""
Layout operations for placing graph vertices on a canvas.
"""

from .layout import LayoutConfig, circle_layout, ensure_positions

__all__ = ['LayoutConfig', 'circle_layout', 'ensure_positions']
