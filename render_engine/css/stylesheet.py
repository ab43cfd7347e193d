"""
Stylesheet model: rules made of selectors and declarations.
"""

from dataclasses import dataclass
from typing import Tuple

from .selector import Selector
from .values import Value


@dataclass(frozen=True)
class Declaration:
    """A single ``name: value`` pair."""
    name: str
    value: Value


@dataclass(frozen=True)
class Rule:
    """
    A rule set: ``<selectors> { <declarations> }``.

    Selectors are kept sorted by descending specificity, so the first selector
    that matches an element is also the most specific matching one. Selectors
    of equal specificity keep their source order.
    """

    selectors: Tuple[Selector, ...]
    declarations: Tuple[Declaration, ...] = ()

    def __post_init__(self):
        ordered = sorted(self.selectors, key=lambda selector: selector.specificity, reverse=True)
        object.__setattr__(self, 'selectors', tuple(ordered))
        object.__setattr__(self, 'declarations', tuple(self.declarations))


@dataclass(frozen=True)
class Stylesheet:
    """An ordered list of rules."""
    rules: Tuple[Rule, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'rules', tuple(self.rules))

    def __iter__(self):
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)
