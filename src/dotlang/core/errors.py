"""Exceptions raised by dotlang."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A builder call was structurally invalid.

    Raised synchronously while a graph is being built, before any statement
    is appended to the container.
    """


class RenderError(RuntimeError):
    """Graphviz failed to turn DOT source into an image."""

    def __init__(self, message: str, dot_source: str | None = None):
        super().__init__(message)
        self.dot_source = dot_source
