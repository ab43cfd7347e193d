"""
Document tree for the rendering engine.

Nodes are immutable once built: a node owns its children outright and the
attribute mapping is exposed read-only. Later stages only ever hold
references into the tree.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Optional, Tuple, Union


class NodeType(IntEnum):
    """Node types, numbered as in the DOM specification."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3


@dataclass(frozen=True)
class Text:
    """A run of character data."""

    data: str
    children: Tuple['Node', ...] = field(default=(), init=False)

    @property
    def node_type(self) -> NodeType:
        return NodeType.TEXT_NODE


@dataclass(frozen=True)
class Element:
    """An element with a tag name, attributes and child nodes."""

    tag_name: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: Tuple['Node', ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'attributes', MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, 'children', tuple(self.children))

    @property
    def node_type(self) -> NodeType:
        return NodeType.ELEMENT_NODE

    @property
    def id(self) -> Optional[str]:
        """The ``id`` attribute, or None if the element has none."""
        return self.attributes.get('id')

    @property
    def class_list(self) -> FrozenSet[str]:
        """The set of classes named by the ``class`` attribute."""
        class_attr = self.attributes.get('class')
        if not class_attr:
            return frozenset()
        return frozenset(class_attr.split())

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)


Node = Union[Text, Element]


def text(data: str) -> Text:
    """Create a text node."""
    return Text(data)


def elem(tag_name: str, attributes: Optional[Mapping[str, str]] = None,
         children: Iterable[Node] = ()) -> Element:
    """Create an element node."""
    return Element(tag_name, attributes or {}, tuple(children))
