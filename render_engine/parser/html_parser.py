"""
HTML parser implementation.
This module parses markup with BeautifulSoup and converts the result into the
engine's immutable document tree.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from ..dom import Element, Node, Text

logger = logging.getLogger(__name__)

SUPPORTED_PARSERS = ('html.parser', 'html5lib')


class HTMLParser:
    """HTML parser using BeautifulSoup with a selectable tree builder."""

    def __init__(self, parser: str = 'html.parser'):
        """
        Initialize the HTML parser.

        Args:
            parser: BeautifulSoup tree builder; ``html5lib`` adds the implied
                ``html``, ``head`` and ``body`` elements, ``html.parser`` keeps
                the markup's own structure
        """
        if parser not in SUPPORTED_PARSERS:
            raise ValueError(f"Unsupported HTML parser {parser!r}, expected one of {SUPPORTED_PARSERS}")
        self.parser = parser
        logger.debug(f"HTML parser initialized with {parser}")

    def parse(self, html_content: str) -> Element:
        """
        Parse HTML content into a document tree.

        Args:
            html_content: HTML content to parse

        Returns:
            Element: The root element. Markup with several top-level nodes is
            wrapped in an ``html`` element.
        """
        # Keep class and other multi-valued attributes as plain strings
        soup = BeautifulSoup(html_content, self.parser, multi_valued_attributes=None)

        nodes = self._convert_children(soup)
        if len(nodes) == 1 and isinstance(nodes[0], Element):
            return nodes[0]

        logger.debug(f"Wrapping {len(nodes)} top-level nodes in an html element")
        return Element('html', {}, tuple(nodes))

    def _convert_children(self, tag: Tag) -> List[Node]:
        nodes = []
        for child in tag.children:
            node = self._convert(child)
            if node is not None:
                nodes.append(node)
        return nodes

    def _convert(self, soup_node) -> Optional[Node]:
        if isinstance(soup_node, Tag):
            attributes = {name: self._attribute_text(value) for name, value in soup_node.attrs.items()}
            return Element(soup_node.name, attributes, tuple(self._convert_children(soup_node)))

        # Comments, doctypes, CDATA and processing instructions carry no content
        if isinstance(soup_node, PreformattedString):
            return None

        if isinstance(soup_node, NavigableString):
            data = str(soup_node)
            if not data.strip():
                return None
            return Text(data)

        return None

    @staticmethod
    def _attribute_text(value) -> str:
        if isinstance(value, (list, tuple)):
            return ' '.join(value)
        return str(value)


def parse_html(html_content: str, parser: str = 'html.parser') -> Element:
    """Parse markup into a document tree."""
    return HTMLParser(parser).parse(html_content)
