"""Shared fixtures for the render_engine test suite."""
import logging
from typing import Dict, Iterable, Optional

import pytest

from render_engine.css import Keyword, StyledNode, Value
from render_engine.layout import Dimensions, Rect
from render_engine.utils.logging import ROOT_LOGGER_NAME

from support import make_styled


@pytest.fixture
def styled():
    """Factory for styled nodes: ``styled({"width": px(10)}, [children])``."""
    return make_styled


@pytest.fixture
def block():
    """Factory for styled nodes with ``display: block`` already set."""
    def factory(values: Optional[Dict[str, Value]] = None, children: Iterable[StyledNode] = ()):
        merged = {"display": Keyword("block")}
        merged.update(values or {})
        return make_styled(merged, children)
    return factory


@pytest.fixture
def viewport():
    """Factory for a containing block of the given width at the origin."""
    def factory(width: float = 800.0) -> Dimensions:
        return Dimensions(content=Rect(0.0, 0.0, float(width), 0.0))
    return factory


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers the CLI attaches to the package logger."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
