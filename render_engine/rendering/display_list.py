"""
Display list construction.

Walks a laid-out box tree and flattens it into paint commands in painter's
order: each box's background and borders come before its descendants.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..css.values import Color
from ..layout import BoxType, LayoutBox, Rect


@dataclass(frozen=True)
class FillRect:
    """Fill a rectangle with a solid color."""
    color: Color
    rect: Rect


# Paint command variants; solid fills are the only kind so far.
DisplayCommand = FillRect
DisplayList = List[DisplayCommand]


def build_display_list(layout_root: LayoutBox) -> DisplayList:
    """
    Build the display list for a laid-out box tree.

    Args:
        layout_root: Root of the laid-out tree

    Returns:
        Paint commands in the order they must be applied
    """
    display_list: DisplayList = []
    render_layout_box(display_list, layout_root)
    return display_list


def render_layout_box(display_list: DisplayList, layout_box: LayoutBox) -> None:
    render_background(display_list, layout_box)
    render_borders(display_list, layout_box)

    for child in layout_box.children:
        render_layout_box(display_list, child)


def render_background(display_list: DisplayList, layout_box: LayoutBox) -> None:
    color = get_color(layout_box, 'background')
    if color is not None:
        display_list.append(FillRect(color, layout_box.dimensions.border_box()))


def render_borders(display_list: DisplayList, layout_box: LayoutBox) -> None:
    color = get_color(layout_box, 'border-color')
    if color is None:
        return

    d = layout_box.dimensions
    border_box = d.border_box()

    # Left border
    display_list.append(FillRect(color, Rect(
        x=border_box.x,
        y=border_box.y,
        width=d.border.left,
        height=border_box.height,
    )))

    # Right border
    display_list.append(FillRect(color, Rect(
        x=border_box.x + border_box.width - d.border.right,
        y=border_box.y,
        width=d.border.right,
        height=border_box.height,
    )))

    # Top border
    display_list.append(FillRect(color, Rect(
        x=border_box.x,
        y=border_box.y,
        width=border_box.width,
        height=d.border.top,
    )))

    # Bottom border
    display_list.append(FillRect(color, Rect(
        x=border_box.x,
        y=border_box.y + border_box.height - d.border.bottom,
        width=border_box.width,
        height=d.border.bottom,
    )))


def get_color(layout_box: LayoutBox, name: str) -> Optional[Color]:
    """Return the color specified for property ``name``, or None."""
    if layout_box.box_type is BoxType.ANONYMOUS:
        return None
    value = layout_box.get_style_node().value(name)
    if isinstance(value, Color):
        return value
    return None


def format_display_list(display_list: DisplayList) -> str:
    """Render a display list as text, one command per line."""
    lines = []
    for command in display_list:
        r = command.rect
        lines.append(f"fill rgba{command.color.to_rgba()} "
                     f"x={r.x:g} y={r.y:g} w={r.width:g} h={r.height:g}")
    return "\n".join(lines)
