"""Tests for display list construction and rasterization."""
import pytest

from render_engine.css import Color
from render_engine.css.values import WHITE
from render_engine.layout import Dimensions, Rect, layout_tree
from render_engine.rendering import (
    Canvas,
    FillRect,
    build_display_list,
    format_display_list,
    paint,
    rasterize,
)

from support import px

RED = Color(255, 0, 0)
GREEN = Color(0, 128, 0)
BLUE = Color(0, 0, 255)


def lay_out(root, width=800.0):
    return layout_tree(root, Dimensions(content=Rect(0.0, 0.0, width, 0.0)))


class TestDisplayList:
    def test_background_then_four_border_strips(self, block) -> None:
        box = lay_out(block({
            "width": px(100),
            "height": px(50),
            "border-width": px(2),
            "background": RED,
            "border-color": BLUE,
        }))

        assert build_display_list(box) == [
            FillRect(RED, Rect(0, 0, 104, 54)),
            FillRect(BLUE, Rect(0, 0, 2, 54)),
            FillRect(BLUE, Rect(102, 0, 2, 54)),
            FillRect(BLUE, Rect(0, 0, 104, 2)),
            FillRect(BLUE, Rect(0, 52, 104, 2)),
        ]

    def test_no_colors_no_commands(self, block) -> None:
        box = lay_out(block({"height": px(10), "border-width": px(1)}))
        assert build_display_list(box) == []

    def test_non_color_background_is_ignored(self, block) -> None:
        from render_engine.css import Keyword

        box = lay_out(block({"height": px(10), "background": Keyword("none")}))
        assert build_display_list(box) == []

    def test_parents_paint_before_children(self, block) -> None:
        root = block({"background": RED}, children=[
            block({"height": px(10), "background": GREEN}),
            block({"height": px(10), "background": BLUE}),
        ])

        colors = [command.color for command in build_display_list(lay_out(root))]

        assert colors == [RED, GREEN, BLUE]

    def test_anonymous_boxes_paint_nothing(self, block, styled) -> None:
        root = block({"height": px(10)}, children=[styled({"background": RED})])
        box = lay_out(root)
        # The inline child carries a background but has zero geometry
        assert build_display_list(box) == [FillRect(RED, Rect(0, 0, 0, 0))]

    def test_format_display_list(self, block) -> None:
        box = lay_out(block({"width": px(10), "height": px(5), "background": RED}))
        assert format_display_list(build_display_list(box)) == "fill rgba(255, 0, 0, 255) x=0 y=0 w=10 h=5"


class TestCanvas:
    def test_starts_white(self) -> None:
        canvas = Canvas(3, 2)
        assert all(canvas.pixel(x, y) == WHITE for x in range(3) for y in range(2))
        assert len(canvas.pixels) == 3 * 2 * 4

    def test_fill_rect_is_clipped(self) -> None:
        canvas = Canvas(4, 3)
        canvas.paint_item(FillRect(RED, Rect(-5, -5, 7, 6)))

        assert canvas.pixel(0, 0) == RED
        assert canvas.pixel(1, 0) == RED
        assert canvas.pixel(2, 0) == WHITE
        assert canvas.pixel(0, 1) == WHITE

    def test_fill_rect_outside_canvas_is_a_no_op(self) -> None:
        canvas = Canvas(4, 3)
        canvas.paint_item(FillRect(RED, Rect(10, 10, 5, 5)))
        canvas.paint_item(FillRect(RED, Rect(-10, 0, 5, 5)))
        assert bytes(canvas.pixels) == bytes(Canvas(4, 3).pixels)

    def test_later_commands_overwrite_earlier_ones(self) -> None:
        canvas = rasterize([
            FillRect(RED, Rect(0, 0, 4, 4)),
            FillRect(BLUE, Rect(1, 1, 2, 2)),
        ], 4, 4)

        assert canvas.pixel(0, 0) == RED
        assert canvas.pixel(1, 1) == BLUE
        assert canvas.pixel(2, 2) == BLUE
        assert canvas.pixel(3, 3) == RED

    def test_alpha_is_copied_not_blended(self) -> None:
        translucent = Color(0, 0, 0, 0)
        canvas = rasterize([FillRect(translucent, Rect(0, 0, 1, 1))], 2, 1)
        assert canvas.pixel(0, 0) == translucent
        assert canvas.pixel(1, 0) == WHITE

    def test_pixel_out_of_range(self) -> None:
        with pytest.raises(IndexError):
            Canvas(2, 2).pixel(2, 0)

    def test_unknown_command_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            Canvas(2, 2).paint_item("fill")  # type: ignore[arg-type]

    def test_to_image(self) -> None:
        canvas = rasterize([FillRect(GREEN, Rect(1, 0, 1, 1))], 3, 2)
        image = canvas.to_image()
        assert image.size == (3, 2)
        assert image.mode == "RGBA"
        assert image.getpixel((1, 0)) == (0, 128, 0, 255)
        assert image.getpixel((0, 0)) == (255, 255, 255, 255)


class TestPaint:
    def test_paint_layout_tree(self, block) -> None:
        root = block({"background": RED}, children=[
            block({"height": px(2), "margin-left": px(1), "background": BLUE}),
        ])
        box = lay_out(root, width=4)

        canvas = paint(box, Rect(0, 0, 4, 3))

        assert (canvas.width, canvas.height) == (4, 3)
        assert canvas.pixel(0, 0) == RED
        assert canvas.pixel(1, 0) == BLUE
        assert canvas.pixel(3, 1) == BLUE
        assert canvas.pixel(0, 2) == WHITE
