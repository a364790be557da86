"""Vertex and count validation shared by every graph variant.

Any integral value is accepted (Python ints, numpy integers, anything with
``__index__``) and normalized to a plain ``int``; ``bool`` is rejected.
"""

from __future__ import annotations

import operator
from typing import Optional

from .errors import OutOfRangeError


def _as_index(value: object) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def is_valid_vertex(v: object, vertex_count: int) -> bool:
    """Return True if ``v`` is an integer vertex in ``[0, vertex_count)``."""
    index = _as_index(v)
    return index is not None and 0 <= index < vertex_count


def validate_vertex(v: object, vertex_count: int) -> int:
    """
    Check that ``v`` names a vertex of a graph with ``vertex_count`` vertices.

    Args:
        v: Candidate vertex.
        vertex_count: Number of vertices V of the graph.

    Returns:
        ``v`` as a plain ``int``.

    Raises:
        OutOfRangeError: Unless ``0 <= v < vertex_count``.
    """
    index = _as_index(v)
    if index is None or not 0 <= index < vertex_count:
        raise OutOfRangeError(v, vertex_count)
    return index


def check_count(value: object, what: str) -> int:
    """Return ``value`` as an int if it is non-negative, else raise ValueError."""
    count = _as_index(value)
    if count is None:
        raise ValueError(f"number of {what} must be an integer, got {value!r}")
    if count < 0:
        raise ValueError(f"number of {what} must be non-negative, got {count}")
    return count


__all__ = ["is_valid_vertex", "validate_vertex", "check_count"]
