"""
CSS selectors.

Only simple selectors are supported: an optional tag name, an optional id and
any number of classes, e.g. ``div#main.note.wide``. A selector with none of
these parts is the universal selector.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..dom import Element

Specificity = Tuple[int, int, int]


@dataclass(frozen=True)
class SimpleSelector:
    """A compound of tag, id and class conditions, all of which must hold."""

    tag_name: Optional[str] = None
    id: Optional[str] = None
    class_names: Tuple[str, ...] = ()

    @property
    def specificity(self) -> Specificity:
        """(id count, class count, tag count), compared lexicographically."""
        a = 1 if self.id is not None else 0
        b = len(self.class_names)
        c = 1 if self.tag_name is not None else 0
        return (a, b, c)

    def __str__(self) -> str:
        text = self.tag_name or ''
        if self.id is not None:
            text += f"#{self.id}"
        text += ''.join(f".{name}" for name in self.class_names)
        return text or '*'


# Selector variants; simple selectors are the only kind so far.
Selector = SimpleSelector


def matches(element: Element, selector: Selector) -> bool:
    """
    Check if an element matches a selector.

    Args:
        element: The element to check
        selector: The selector to match against

    Returns:
        True if the element matches the selector, False otherwise
    """
    if isinstance(selector, SimpleSelector):
        return matches_simple_selector(element, selector)
    raise TypeError(f"Unsupported selector type: {type(selector).__name__}")


def matches_simple_selector(element: Element, selector: SimpleSelector) -> bool:
    if selector.tag_name is not None and element.tag_name != selector.tag_name:
        return False

    if selector.id is not None and element.id != selector.id:
        return False

    element_classes = element.class_list
    if any(name not in element_classes for name in selector.class_names):
        return False

    return True
