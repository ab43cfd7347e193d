"""
CSS parser.

This module turns stylesheet text into the Stylesheet model. Tokenizing and
block structure are handled by tinycss2; selector lists and declaration values
are interpreted here. Selector lists are strict: anything beyond comma
separated simple selectors aborts the parse with SelectorSyntaxError.
"""

import logging
from typing import List, Optional

import tinycss2
import tinycss2.color3

from ..errors import SelectorSyntaxError
from .selector import SimpleSelector
from .stylesheet import Declaration, Rule, Stylesheet
from .values import Color, Keyword, Length, Unit, Value

logger = logging.getLogger(__name__)


class CSSParser:
    """
    CSS Parser.

    This class handles parsing stylesheets, selectors and declaration values.
    """

    def parse(self, css_content: str) -> Stylesheet:
        """
        Parse CSS content into a stylesheet.

        Args:
            css_content: CSS content to parse

        Returns:
            Parsed Stylesheet

        Raises:
            SelectorSyntaxError: If any rule has a malformed selector list
        """
        rules = []
        nodes = tinycss2.parse_stylesheet(css_content, skip_comments=True, skip_whitespace=True)

        for node in nodes:
            if node.type == 'qualified-rule':
                rules.append(Rule(self.parse_selectors(node.prelude), self.parse_declarations(node.content)))
            elif node.type == 'error':
                raise SelectorSyntaxError(node.message, node.source_line, node.source_column)
            elif node.type == 'at-rule':
                logger.warning(f"Skipping unsupported at-rule @{node.at_keyword} "
                               f"at line {node.source_line}")

        logger.debug(f"Parsed stylesheet with {len(rules)} rules")
        return Stylesheet(tuple(rules))

    def parse_selectors(self, prelude: list) -> List[SimpleSelector]:
        """
        Parse a comma-separated selector list.

        Args:
            prelude: tinycss2 component values preceding the rule's block

        Returns:
            Selectors in source order
        """
        selectors = []
        current: List = []

        for token in prelude + [None]:
            if token is None or (token.type == 'literal' and token.value == ','):
                selectors.append(self._parse_simple_selector(current, token, prelude))
                current = []
            else:
                current.append(token)

        return selectors

    def _parse_simple_selector(self, tokens: list, end_token, prelude: list) -> SimpleSelector:
        """Parse one compound selector such as ``type#id.class1.class2``."""
        # Whitespace may surround a selector but may not appear inside one
        while tokens and tokens[0].type == 'whitespace':
            tokens = tokens[1:]
        while tokens and tokens[-1].type == 'whitespace':
            tokens = tokens[:-1]

        if not tokens:
            anchor = end_token if end_token is not None else (prelude[-1] if prelude else None)
            raise SelectorSyntaxError("Empty selector in selector list",
                                      *self._position(anchor))

        tag_name: Optional[str] = None
        element_id: Optional[str] = None
        class_names: List[str] = []

        index = 0
        while index < len(tokens):
            token = tokens[index]
            if token.type == 'ident' and index == 0:
                tag_name = token.lower_value
            elif token.type == 'literal' and token.value == '*' and index == 0:
                pass  # universal selector
            elif token.type == 'hash' and token.is_identifier:
                element_id = token.value
            elif (token.type == 'literal' and token.value == '.'
                  and index + 1 < len(tokens) and tokens[index + 1].type == 'ident'):
                index += 1
                class_names.append(tokens[index].value)
            else:
                raise SelectorSyntaxError(
                    f"Unexpected {token.serialize()!r} in selector list",
                    *self._position(token))
            index += 1

        return SimpleSelector(tag_name, element_id, tuple(class_names))

    def parse_declarations(self, content: list) -> List[Declaration]:
        """
        Parse the declarations inside a rule's block.

        Malformed declarations are skipped; they never abort the stylesheet.

        Args:
            content: tinycss2 component values of the block

        Returns:
            Declarations in source order
        """
        declarations = []
        items = tinycss2.parse_declaration_list(content or [], skip_comments=True, skip_whitespace=True)

        for item in items:
            if item.type == 'declaration':
                value = self.parse_value(item.value)
                if value is None:
                    logger.warning(f"Skipping empty value for property {item.lower_name!r}")
                    continue
                declarations.append(Declaration(item.lower_name, value))
            elif item.type == 'error':
                logger.warning(f"Skipping invalid declaration at line {item.source_line}: {item.message}")
            elif item.type == 'at-rule':
                logger.warning(f"Skipping at-rule @{item.at_keyword} inside declaration block")

        return declarations

    def parse_value(self, tokens: list) -> Optional[Value]:
        """
        Parse a declaration value.

        Only the first component is used; shorthand expansion is not
        supported.

        Args:
            tokens: tinycss2 component values of the declaration

        Returns:
            The parsed Value, or None if the value is empty
        """
        components = [token for token in tokens if token.type not in ('whitespace', 'comment')]
        if not components:
            return None
        if len(components) > 1:
            logger.debug(f"Using first component of multi-part value {tinycss2.serialize(tokens).strip()!r}")

        token = components[0]

        if token.type == 'dimension':
            if token.lower_unit == Unit.PX.value:
                return Length(float(token.value), Unit.PX)
            logger.debug(f"Unsupported unit {token.unit!r}, keeping value as keyword")
            return Keyword(token.serialize())

        if token.type == 'number':
            # Unitless numbers are treated as pixels
            return Length(float(token.value), Unit.PX)

        if token.type in ('ident', 'hash', 'function'):
            color = self.parse_color(token)
            if color is not None:
                return color
            if token.type == 'ident':
                return Keyword(token.lower_value)

        return Keyword(token.serialize())

    def parse_color(self, token) -> Optional[Color]:
        """
        Parse a color token (hex, named color, ``rgb()`` or ``rgba()``).

        Returns:
            Color, or None if the token is not a color
        """
        rgba = tinycss2.color3.parse_color(token)
        if rgba is None or isinstance(rgba, str):
            # None for non-colors, the string 'currentColor' for currentcolor
            return None
        return Color(*(self._channel(channel) for channel in rgba))

    @staticmethod
    def _channel(value: float) -> int:
        return max(0, min(255, int(round(value * 255))))

    @staticmethod
    def _position(token):
        if token is None:
            return (None, None)
        return (token.source_line, token.source_column)


def parse_css(css_content: str) -> Stylesheet:
    """Parse stylesheet text into a Stylesheet."""
    return CSSParser().parse(css_content)
