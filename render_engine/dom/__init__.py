"""
Document tree for the rendering engine.
"""

from .node import Node, NodeType, Element, Text, elem, text

__all__ = [
    'Node', 'NodeType', 'Element', 'Text', 'elem', 'text'
]
