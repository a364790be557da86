"""Exception types raised by nodesandedges.

Every error derives from :class:`GraphError` and from the builtin exception
that best matches it, so callers can catch either the package-specific or the
generic type.
"""

from __future__ import annotations

from typing import Optional


class GraphError(Exception):
    """Base class for all nodesandedges errors."""


class OutOfRangeError(GraphError, ValueError):
    """A vertex argument lies outside ``[0, V)``."""

    def __init__(self, vertex: object, vertex_count: int):
        super().__init__(
            f"vertex {vertex!r} is not between 0 and {vertex_count - 1}"
        )
        self.vertex = vertex
        self.vertex_count = vertex_count


class InvalidFormatError(GraphError, ValueError):
    """Graph text input is malformed or incomplete."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class InvalidOperandError(GraphError, ValueError):
    """An operation received an argument it cannot apply to, e.g. a vertex
    that is not an endpoint of the edge being queried."""


class ResourceUnavailableError(GraphError, OSError):
    """A graph source (file) could not be opened for reading or writing."""


__all__ = [
    "GraphError",
    "OutOfRangeError",
    "InvalidFormatError",
    "InvalidOperandError",
    "ResourceUnavailableError",
]
