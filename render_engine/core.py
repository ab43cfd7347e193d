"""
Core rendering engine.

This module provides the RenderEngine class that ties together HTML parsing,
CSS parsing, the cascade, layout and painting into one pipeline.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from .css import Stylesheet, StyledNode, parse_css, resolve
from .dom import Node
from .layout import Dimensions, LayoutBox, Rect, layout_tree
from .parser import parse_html
from .rendering import Canvas, DisplayList, build_display_list, rasterize
from .utils.config import Config
from .utils.logging import StageTimer

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Every intermediate product of one pipeline run."""
    document: Node
    stylesheet: Stylesheet
    styled_tree: StyledNode
    layout_root: LayoutBox
    display_list: DisplayList
    canvas: Canvas
    timings: Dict[str, float] = field(default_factory=dict)


class RenderEngine:
    """
    Rendering engine integrating parsing, styling, layout and painting.

    Each stage produces a new tree from the previous one; only the layout
    stage mutates, and only the box tree it has just built.
    """

    def __init__(self, config: Optional[Config] = None,
                 viewport_width: Optional[int] = None,
                 viewport_height: Optional[int] = None):
        """
        Initialize the rendering engine.

        Args:
            config: Configuration; viewport size and HTML parser are read from it
            viewport_width: Optional viewport width override
            viewport_height: Optional viewport height override
        """
        self.config = config
        if viewport_width is None:
            viewport_width = self._setting('viewport.width', 800)
        if viewport_height is None:
            viewport_height = self._setting('viewport.height', 600)
        self.viewport_width = int(viewport_width)
        self.viewport_height = int(viewport_height)
        self.html_parser = self._setting('parser.html', 'html.parser')
        self.timer = StageTimer(logger)

        logger.debug(f"Render engine initialized ({self.viewport_width}x{self.viewport_height}, "
                     f"html parser: {self.html_parser})")

    def _setting(self, key: str, default):
        if self.config is None:
            return default
        return self.config.get(key, default)

    @property
    def viewport(self) -> Rect:
        return Rect(0.0, 0.0, float(self.viewport_width), float(self.viewport_height))

    def parse_html(self, html_content: str) -> Node:
        return self._run_stage("parse_html", parse_html, html_content, self.html_parser)

    def parse_css(self, css_content: str) -> Stylesheet:
        return self._run_stage("parse_css", parse_css, css_content)

    def style(self, document: Node, stylesheet: Stylesheet) -> StyledNode:
        return self._run_stage("style", resolve, document, stylesheet)

    def layout(self, styled_tree: StyledNode) -> LayoutBox:
        containing_block = Dimensions(content=self.viewport)
        return self._run_stage("layout", layout_tree, styled_tree, containing_block)

    def paint(self, display_list: DisplayList) -> Canvas:
        return self._run_stage("paint", rasterize, display_list, self.viewport_width, self.viewport_height)

    def render(self, html_content: str, css_content: str = "") -> RenderResult:
        """
        Run the whole pipeline.

        Args:
            html_content: Markup to render
            css_content: Stylesheet text

        Returns:
            RenderResult with every intermediate tree and the painted canvas

        Raises:
            RenderError: If a stage fails; it is raised unlogged for the caller
                to report
        """
        self.timer.reset()
        document = self.parse_html(html_content)
        stylesheet = self.parse_css(css_content)
        styled_tree = self.style(document, stylesheet)
        layout_root = self.layout(styled_tree)
        display_list = self._run_stage("display_list", build_display_list, layout_root)
        canvas = self.paint(display_list)

        logger.info(f"Rendered document: {len(stylesheet)} rules, "
                    f"{len(display_list)} display commands")
        return RenderResult(document, stylesheet, styled_tree, layout_root, display_list, canvas,
                            timings=dict(self.timer.durations))

    def _run_stage(self, name: str, func, *args):
        with self.timer.stage(name):
            return func(*args)
