"""
Layout implementation for the rendering engine.
This package builds the layout box tree and solves block layout over it.
"""

from .box_metrics import Rect, EdgeSizes, Dimensions
from .layout import BoxType, LayoutBox, build_layout_tree, layout_tree, format_layout_tree

__all__ = [
    'Rect', 'EdgeSizes', 'Dimensions',
    'BoxType', 'LayoutBox', 'build_layout_tree', 'layout_tree', 'format_layout_tree',
]
