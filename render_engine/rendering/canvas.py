"""
Canvas: rasterizes a display list into an RGBA8 pixel buffer.
"""

import logging

from PIL import Image

from ..css.values import WHITE, Color
from ..layout import LayoutBox, Rect
from .display_list import DisplayList, FillRect, build_display_list

logger = logging.getLogger(__name__)


class Canvas:
    """A fixed-size RGBA8 pixel buffer, initially opaque white."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = bytearray(bytes(WHITE.to_rgba()) * (width * height))

    def paint_item(self, item: FillRect) -> None:
        """Apply one paint command, clipped to the canvas."""
        if not isinstance(item, FillRect):
            raise TypeError(f"Unsupported display command: {type(item).__name__}")

        rect = item.rect
        x0 = int(_clamp(rect.x, 0.0, self.width))
        y0 = int(_clamp(rect.y, 0.0, self.height))
        x1 = int(_clamp(rect.x + rect.width, 0.0, self.width))
        y1 = int(_clamp(rect.y + rect.height, 0.0, self.height))

        if x1 <= x0:
            return

        # No alpha compositing: the command's color replaces the pixel
        row = bytes(item.color.to_rgba()) * (x1 - x0)
        for y in range(y0, y1):
            start = (y * self.width + x0) * 4
            self.pixels[start:start + len(row)] = row

    def pixel(self, x: int, y: int) -> Color:
        """Return the color of the pixel at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        start = (y * self.width + x) * 4
        return Color(*self.pixels[start:start + 4])

    def to_image(self) -> Image.Image:
        """Convert the canvas into a Pillow image."""
        return Image.frombytes('RGBA', (self.width, self.height), bytes(self.pixels))


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(value, upper))


def rasterize(display_list: DisplayList, width: int, height: int) -> Canvas:
    """Paint every command of a display list, in order, onto a new canvas."""
    canvas = Canvas(width, height)
    for item in display_list:
        canvas.paint_item(item)
    logger.debug(f"Painted {len(display_list)} display commands onto {width}x{height} canvas")
    return canvas


def paint(layout_root: LayoutBox, bounds: Rect) -> Canvas:
    """
    Paint a tree of layout boxes to a canvas.

    Args:
        layout_root: Root of the laid-out tree
        bounds: Area to paint; its width and height size the canvas

    Returns:
        The painted canvas
    """
    return rasterize(build_display_list(layout_root), int(bounds.width), int(bounds.height))
