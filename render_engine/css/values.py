"""
CSS value model.

A declaration value is exactly one of Keyword, Length or Color. Values are
frozen, so they can be shared freely between rules, styled nodes and layout
boxes, and compare by structure.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Unit(Enum):
    """Length units understood by the layout solver."""
    PX = "px"


@dataclass(frozen=True)
class Keyword:
    """An identifier such as ``auto`` or ``block``."""
    name: str

    def to_px(self) -> float:
        return 0.0


@dataclass(frozen=True)
class Length:
    """A length with its unit."""
    value: float
    unit: Unit = Unit.PX

    def to_px(self) -> float:
        return self.value


@dataclass(frozen=True)
class Color:
    """An RGBA color with 8-bit channels."""
    r: int
    g: int
    b: int
    a: int = 255

    def to_px(self) -> float:
        return 0.0

    def to_rgba(self):
        return (self.r, self.g, self.b, self.a)


Value = Union[Keyword, Length, Color]

AUTO = Keyword("auto")
ZERO = Length(0.0, Unit.PX)
WHITE = Color(255, 255, 255, 255)
