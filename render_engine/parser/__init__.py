"""
Markup parsing for the rendering engine.
"""

from .html_parser import HTMLParser, parse_html

__all__ = ['HTMLParser', 'parse_html']
