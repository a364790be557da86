"""Switch for the invariant checks run inside graph operations.

With the switch on, parsed graphs, reversed digraphs and random weighted
graphs have their edge bookkeeping verified, and every path returned by
``BreadthFirstPaths.path_to`` is checked against the graph. The checks cost
O(V + E) per call, so the switch is off unless ``NODESANDEDGES_DEBUG`` is set
to ``1``/``true``/``yes``/``on`` at import time.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from nodesandedges.config import DEBUG_ENV_VAR, env_flag

_checks_on: bool = env_flag(DEBUG_ENV_VAR)


def is_debug_enabled() -> bool:
    """Return True while graph invariant checks are switched on."""
    return _checks_on


def set_debug_enabled(enabled: bool) -> None:
    """Switch graph invariant checks on or off for the whole process."""
    global _checks_on
    _checks_on = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Run a block with invariant checks switched to ``enabled``.

    The previous setting comes back when the block exits, also on error.

    Example
    -------
    >>> with debug_context():
    ...     paths = BreadthFirstPaths(Digraph.from_string("2\\n1\\n0 1\\n"), 0)
    ...     paths.path_to(1)  # the returned path is verified against the graph
    [0, 1]
    """
    previous = is_debug_enabled()
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)
