"""
Render Engine - a minimal browser-style rendering pipeline in Python.

Markup and a stylesheet go in; a styled tree, a laid-out box tree, a display
list and finally an RGBA pixel buffer come out.
"""

from render_engine.core import RenderEngine, RenderResult
from render_engine.errors import (
    RenderError,
    SelectorSyntaxError,
    NoRenderableRoot,
    InternalInvariantViolation,
)

# Package information
__version__ = "0.1.0"
__description__ = "A minimal browser-style rendering pipeline in Python"

__all__ = [
    'RenderEngine',
    'RenderResult',
    'RenderError',
    'SelectorSyntaxError',
    'NoRenderableRoot',
    'InternalInvariantViolation',
]
