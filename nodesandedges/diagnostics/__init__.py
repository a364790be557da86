"""Diagnostics and debugging utilities for nodesandedges."""

from .core import (
    assert_degree_bookkeeping,
    assert_edge_count,
    assert_unique_edges,
    assert_valid_path,
    is_valid_path,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_edge_count",
    "assert_degree_bookkeeping",
    "assert_unique_edges",
    "is_valid_path",
    "assert_valid_path",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
