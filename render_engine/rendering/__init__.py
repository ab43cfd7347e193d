"""
Rendering for the rendering engine.
This package turns a laid-out box tree into paint commands and pixels.
"""

from .display_list import FillRect, DisplayCommand, DisplayList, build_display_list, format_display_list
from .canvas import Canvas, paint, rasterize

__all__ = [
    'FillRect', 'DisplayCommand', 'DisplayList', 'build_display_list', 'format_display_list',
    'Canvas', 'paint', 'rasterize',
]
