"""
Block layout.

Builds the tree of layout boxes from a styled tree and solves the CSS box
model for block boxes: widths flow down from the containing block, heights
flow back up from the children. Inline formatting is not implemented, so
inline and anonymous boxes keep zero geometry.
"""

import copy
import logging
from enum import Enum
from typing import List, Optional

from ..css.style import Display, StyledNode
from ..css.values import AUTO, ZERO, Length, Unit, Value
from ..errors import InternalInvariantViolation, NoRenderableRoot
from .box_metrics import Dimensions

logger = logging.getLogger(__name__)


class BoxType(Enum):
    """Kinds of layout box."""
    BLOCK = "block"
    INLINE = "inline"
    ANONYMOUS = "anonymous"


class LayoutBox:
    """
    A box in the layout tree.

    Block and inline boxes refer to the styled node they were generated from;
    anonymous boxes only group inline siblings and have no style.
    """

    def __init__(self, box_type: BoxType, style_node: Optional[StyledNode] = None):
        """
        Initialize a layout box.

        Args:
            box_type: The kind of box
            style_node: The styled node, required unless the box is anonymous
        """
        if (box_type is BoxType.ANONYMOUS) != (style_node is None):
            raise InternalInvariantViolation(
                f"A {box_type.value} box must have a style node unless it is anonymous")

        self.box_type = box_type
        self.style_node = style_node
        self.dimensions = Dimensions()
        self.children: List['LayoutBox'] = []

    def __repr__(self):
        return f"LayoutBox({self.box_type.value}, {len(self.children)} children)"

    def get_style_node(self) -> StyledNode:
        """Return the styled node of a block or inline box."""
        if self.box_type is BoxType.ANONYMOUS:
            raise InternalInvariantViolation("Anonymous block box has no style node")
        return self.style_node

    def get_inline_container(self) -> 'LayoutBox':
        """
        Return the box a new inline child should be added to.

        Inline and anonymous boxes take inline children directly. A block box
        wraps each run of inline children in one anonymous box, reusing the
        last child if it is already an anonymous box.
        """
        if self.box_type in (BoxType.INLINE, BoxType.ANONYMOUS):
            return self

        if not self.children or self.children[-1].box_type is not BoxType.ANONYMOUS:
            self.children.append(LayoutBox(BoxType.ANONYMOUS))
        return self.children[-1]

    def layout(self, containing_block: Dimensions) -> None:
        """
        Lay out this box and its descendants.

        Args:
            containing_block: Dimensions of the parent box
        """
        if self.box_type is BoxType.BLOCK:
            self.layout_block(containing_block)
        # Inline and anonymous boxes are not laid out yet

    def layout_block(self, containing_block: Dimensions) -> None:
        # Child width can depend on parent width, so this box's width is
        # calculated before its children are laid out.
        self.calculate_block_width(containing_block)

        self.calculate_block_position(containing_block)

        self.layout_block_children()

        # Parent height can depend on child height, so the height is
        # calculated after the children are laid out.
        self.calculate_block_height()

    def calculate_block_width(self, containing_block: Dimensions) -> None:
        """
        Calculate the used width and horizontal margin, border and padding.

        Solves ``margin-left + border-left + padding-left + width +
        padding-right + border-right + margin-right == containing width``
        by adjusting whichever values are ``auto``. Afterward every value is
        an absolute length.
        """
        style = self.get_style_node()

        # width has initial value auto; margin, border and padding have initial value 0
        width = style.value('width')
        if width is None:
            width = AUTO

        margin_left = style.lookup('margin-left', 'margin', ZERO)
        margin_right = style.lookup('margin-right', 'margin', ZERO)

        border_left = style.lookup('border-left-width', 'border-width', ZERO)
        border_right = style.lookup('border-right-width', 'border-width', ZERO)

        padding_left = style.lookup('padding-left', 'padding', ZERO)
        padding_right = style.lookup('padding-right', 'padding', ZERO)

        total = sum(value.to_px() for value in (
            margin_left, margin_right,
            border_left, border_right,
            padding_left, padding_right,
            width,
        ))

        # An over-wide box with a fixed width treats auto margins as 0
        if width != AUTO and total > containing_block.content.width:
            if margin_left == AUTO:
                margin_left = ZERO
            if margin_right == AUTO:
                margin_right = ZERO

        # Each branch below grows the total by exactly this amount
        underflow = containing_block.content.width - total

        width_auto = width == AUTO
        margin_left_auto = margin_left == AUTO
        margin_right_auto = margin_right == AUTO

        if not width_auto and not margin_left_auto and not margin_right_auto:
            # Over-constrained: margin-right absorbs the difference
            margin_right = _px(margin_right.to_px() + underflow)
        elif not width_auto and not margin_left_auto and margin_right_auto:
            margin_right = _px(underflow)
        elif not width_auto and margin_left_auto and not margin_right_auto:
            margin_left = _px(underflow)
        elif width_auto:
            if margin_left_auto:
                margin_left = ZERO
            if margin_right_auto:
                margin_right = ZERO

            if underflow >= 0.0:
                width = _px(underflow)
            else:
                # Width can't be negative, so the right margin goes negative instead
                width = ZERO
                margin_right = _px(margin_right.to_px() + underflow)
        else:
            # Both margins auto: center the box
            margin_left = _px(underflow / 2.0)
            margin_right = _px(underflow / 2.0)

        d = self.dimensions
        d.content.width = width.to_px()

        d.padding.left = padding_left.to_px()
        d.padding.right = padding_right.to_px()

        d.border.left = border_left.to_px()
        d.border.right = border_right.to_px()

        d.margin.left = margin_left.to_px()
        d.margin.right = margin_right.to_px()

    def calculate_block_position(self, containing_block: Dimensions) -> None:
        """
        Place the box below any boxes already in the containing block.

        Vertical margin, border and padding take no part in the width
        equation, so ``auto`` simply resolves to 0 here.
        """
        style = self.get_style_node()
        d = self.dimensions

        d.margin.top = style.lookup('margin-top', 'margin', ZERO).to_px()
        d.margin.bottom = style.lookup('margin-bottom', 'margin', ZERO).to_px()

        d.border.top = style.lookup('border-top-width', 'border-width', ZERO).to_px()
        d.border.bottom = style.lookup('border-bottom-width', 'border-width', ZERO).to_px()

        d.padding.top = style.lookup('padding-top', 'padding', ZERO).to_px()
        d.padding.bottom = style.lookup('padding-bottom', 'padding', ZERO).to_px()

        d.content.x = containing_block.content.x + d.margin.left + d.border.left + d.padding.left

        # Position the box below all the previous boxes in the container
        d.content.y = (containing_block.content.height + containing_block.content.y
                       + d.margin.top + d.border.top + d.padding.top)

    def layout_block_children(self) -> None:
        """Lay out each child and stack it below the previous ones."""
        d = self.dimensions
        d.content.height = 0.0
        for child in self.children:
            child.layout(d)
            # Track the height so each child is laid out below the previous one
            d.content.height = d.content.height + child.dimensions.margin_box().height

    def calculate_block_height(self) -> None:
        """Use an explicit ``height`` if set, otherwise keep the children's total."""
        height = self.get_style_node().value('height')
        if isinstance(height, Length) and height.unit is Unit.PX:
            self.dimensions.content.height = height.value


def _px(value: float) -> Value:
    return Length(value, Unit.PX)


def build_layout_tree(style_node: StyledNode) -> LayoutBox:
    """
    Build the tree of layout boxes without performing any layout.

    Args:
        style_node: Root of the styled tree

    Returns:
        Root layout box

    Raises:
        NoRenderableRoot: If the root has ``display: none``
    """
    display = style_node.display()
    if display is Display.BLOCK:
        root = LayoutBox(BoxType.BLOCK, style_node)
    elif display is Display.INLINE:
        root = LayoutBox(BoxType.INLINE, style_node)
    else:
        raise NoRenderableRoot("Root node has display: none")

    for child in style_node.children:
        child_display = child.display()
        if child_display is Display.BLOCK:
            root.children.append(build_layout_tree(child))
        elif child_display is Display.INLINE:
            root.get_inline_container().children.append(build_layout_tree(child))
        # display: none nodes and their subtrees generate no boxes

    return root


def layout_tree(style_node: StyledNode, containing_block: Dimensions) -> LayoutBox:
    """
    Build the layout tree for a styled tree and lay it out.

    The containing block is copied with its height reset to 0, since block
    layout stacks children below the container's current content height.

    Args:
        style_node: Root of the styled tree
        containing_block: Typically the viewport

    Returns:
        The laid-out root box
    """
    initial_block = copy.deepcopy(containing_block)
    initial_block.content.height = 0.0

    root_box = build_layout_tree(style_node)
    root_box.layout(initial_block)
    logger.debug(f"Laid out root box at {root_box.dimensions.content}")
    return root_box


def format_layout_tree(layout_box: LayoutBox, indent: int = 0) -> str:
    """Render a layout tree as indented text, one box per line."""
    d = layout_box.dimensions
    if layout_box.box_type is BoxType.ANONYMOUS:
        label = "anonymous"
    else:
        node = layout_box.style_node.node
        label = f"{layout_box.box_type.value} <{getattr(node, 'tag_name', '#text')}>"
    line = (f"{'  ' * indent}{label} x={d.content.x:g} y={d.content.y:g} "
            f"w={d.content.width:g} h={d.content.height:g}")
    lines = [line]
    lines.extend(format_layout_tree(child, indent + 1) for child in layout_box.children)
    return "\n".join(lines)
