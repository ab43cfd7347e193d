"""
Cascade engine.

Matches stylesheet rules against every element of a document tree and builds a
parallel tree of styled nodes holding the winning declarations.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from ..dom import Element, Node, Text
from .selector import Specificity, matches
from .stylesheet import Rule, Stylesheet
from .values import Keyword, Value

logger = logging.getLogger(__name__)

PropertyMap = Mapping[str, Value]
MatchedRule = Tuple[Specificity, Rule]


class Display(Enum):
    """How a styled node takes part in layout."""
    INLINE = "inline"
    BLOCK = "block"
    NONE = "none"


@dataclass(frozen=True)
class StyledNode:
    """
    A document node together with its specified values.

    ``node`` refers back into the document tree, which must outlive the
    styled tree. ``children`` mirror ``node.children`` one to one.
    """

    node: Node
    specified_values: PropertyMap = field(default_factory=dict)
    children: Tuple['StyledNode', ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'specified_values', MappingProxyType(dict(self.specified_values)))
        object.__setattr__(self, 'children', tuple(self.children))

    def value(self, name: str) -> Optional[Value]:
        """Return the specified value of a property, or None."""
        return self.specified_values.get(name)

    def lookup(self, name: str, fallback_name: str, default: Value) -> Value:
        """
        Return the value of ``name``, else of ``fallback_name``, else ``default``.

        Used to let longhand properties fall back to their shorthand, e.g.
        ``margin-left`` to ``margin``.
        """
        value = self.value(name)
        if value is None:
            value = self.value(fallback_name)
        if value is None:
            value = default
        return value

    def display(self) -> Display:
        """The value of the ``display`` property, defaulting to inline."""
        value = self.value('display')
        if isinstance(value, Keyword):
            if value.name == 'block':
                return Display.BLOCK
            if value.name == 'none':
                return Display.NONE
        return Display.INLINE


def style_tree(root: Node, stylesheet: Stylesheet) -> StyledNode:
    """
    Apply a stylesheet to an entire document tree.

    Args:
        root: Root of the document tree
        stylesheet: Stylesheet to apply

    Returns:
        Root of the styled tree
    """
    if isinstance(root, Element):
        values = specified_values(root, stylesheet)
    elif isinstance(root, Text):
        values = {}
    else:
        raise TypeError(f"Unsupported node type: {type(root).__name__}")

    return StyledNode(
        node=root,
        specified_values=values,
        children=tuple(style_tree(child, stylesheet) for child in root.children),
    )


def resolve(document: Node, stylesheet: Stylesheet) -> StyledNode:
    """Resolve the cascade for a whole document."""
    styled = style_tree(document, stylesheet)
    logger.debug(f"Resolved styles against {len(stylesheet)} rules")
    return styled


def specified_values(element: Element, stylesheet: Stylesheet) -> Dict[str, Value]:
    """
    Apply styles to a single element.

    Rules are applied from lowest to highest specificity, and within a rule in
    declaration order, so later writes win. Rules of equal specificity keep
    their stylesheet order.
    """
    values: Dict[str, Value] = {}
    rules = sorted(matching_rules(element, stylesheet), key=lambda matched: matched[0])

    for _, matched_rule in rules:
        for declaration in matched_rule.declarations:
            values[declaration.name] = declaration.value

    return values


def matching_rules(element: Element, stylesheet: Stylesheet) -> List[MatchedRule]:
    """Find all rules that match the given element."""
    matched = []
    for candidate in stylesheet.rules:
        result = match_rule(element, candidate)
        if result is not None:
            matched.append(result)
    return matched


def match_rule(element: Element, candidate: Rule) -> Optional[MatchedRule]:
    """
    Match a rule against an element.

    The rule's selectors are sorted by descending specificity, so the first
    matching selector decides the specificity the rule is applied with.
    """
    for selector in candidate.selectors:
        if matches(element, selector):
            return (selector.specificity, candidate)
    return None
