"""
CSS implementation for the rendering engine.
This package provides the value model, selectors, stylesheet parsing and the cascade.
"""

from .values import Unit, Keyword, Length, Color, Value, AUTO, ZERO
from .selector import SimpleSelector, Selector, Specificity, matches
from .stylesheet import Declaration, Rule, Stylesheet
from .parser import CSSParser, parse_css
from .style import Display, StyledNode, style_tree, resolve

__all__ = [
    'Unit', 'Keyword', 'Length', 'Color', 'Value', 'AUTO', 'ZERO',
    'SimpleSelector', 'Selector', 'Specificity', 'matches',
    'Declaration', 'Rule', 'Stylesheet',
    'CSSParser', 'parse_css',
    'Display', 'StyledNode', 'style_tree', 'resolve',
]
