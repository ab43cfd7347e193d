"""Builders shared by the test modules."""
from typing import Dict, Iterable, Optional

from render_engine.css import Length, StyledNode, Value
from render_engine.dom import elem


def px(value: float) -> Length:
    return Length(float(value))


def make_styled(values: Optional[Dict[str, Value]] = None,
                children: Iterable[StyledNode] = (),
                tag: str = "div") -> StyledNode:
    """Build a styled node directly, bypassing parsing and the cascade."""
    return StyledNode(node=elem(tag), specified_values=values or {}, children=tuple(children))
