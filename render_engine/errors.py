"""
Error types raised by the rendering pipeline.

Each stage assumes its input was produced by the previous stage, so the only
failures are the few conditions below. They are raised, never swallowed.
"""

from typing import Optional


class RenderError(Exception):
    """Base class for all rendering pipeline errors."""


class SelectorSyntaxError(RenderError, ValueError):
    """Raised when a stylesheet contains a selector list that cannot be parsed."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class NoRenderableRoot(RenderError):
    """Raised when the root of the styled tree has ``display: none``."""


class InternalInvariantViolation(RenderError):
    """Raised when an internal invariant of the box tree is broken."""
