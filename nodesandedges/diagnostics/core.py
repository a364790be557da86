"""Invariant checks for graphs and traversal results.

The checks only rely on the public graph interface, so they work for any
object satisfying :class:`nodesandedges.graphs.GraphLike`.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from nodesandedges.validation import is_valid_vertex


def assert_edge_count(graph: Any) -> None:
    """
    Assert that the adjacency storage agrees with ``edge_count()``.

    A directed graph stores each arc once; an undirected graph stores each
    edge in two adjacency slots (twice in the same list for a self-loop).

    Raises
    ------
    ValueError
        If the number of adjacency entries does not match the edge count.
    """
    entries = sum(len(graph.adjacent(v)) for v in range(graph.vertex_count()))
    expected = graph.edge_count() if graph.directed else 2 * graph.edge_count()
    if entries != expected:
        raise ValueError(
            f"adjacency holds {entries} entries but edge_count() is "
            f"{graph.edge_count()} (expected {expected} entries)"
        )


def assert_degree_bookkeeping(digraph: Any) -> None:
    """
    Assert that every stored in-degree matches the arcs pointing at it.

    Parameters
    ----------
    digraph:
        A directed graph exposing ``in_degree`` and ``out_degree``.

    Raises
    ------
    ValueError
        If any in-degree or out-degree disagrees with the adjacency lists.
    """
    n = digraph.vertex_count()
    counted = [0] * n
    for v in range(n):
        targets = digraph.adjacent(v)
        if digraph.out_degree(v) != len(targets):
            raise ValueError(f"out_degree({v}) does not match its adjacency list")
        for w in targets:
            counted[w] += 1
    for v in range(n):
        if digraph.in_degree(v) != counted[v]:
            raise ValueError(
                f"in_degree({v}) is {digraph.in_degree(v)} but {counted[v]} arcs point at it"
            )
    assert_edge_count(digraph)


def assert_unique_edges(graph: Any) -> None:
    """
    Assert that ``all_edges()`` reports every undirected edge exactly once.

    Raises
    ------
    ValueError
        If the listing length differs from ``edge_count()``.
    """
    listed = graph.all_edges()
    if len(listed) != graph.edge_count():
        raise ValueError(
            f"all_edges() returned {len(listed)} edges, edge_count() is {graph.edge_count()}"
        )
    assert_edge_count(graph)


def is_valid_path(graph: Any, path: Sequence[int]) -> bool:
    """Return True if consecutive vertices of ``path`` are joined by an edge."""
    if len(path) == 0:
        return False
    n = graph.vertex_count()
    if not all(is_valid_vertex(v, n) for v in path):
        return False
    return all(b in graph.neighbors(a) for a, b in zip(path, path[1:]))


def assert_valid_path(
    graph: Any,
    path: Sequence[int],
    source: Optional[int] = None,
    target: Optional[int] = None,
    length: Optional[int] = None,
) -> None:
    """
    Assert that ``path`` is a walk in ``graph`` with the given end points.

    Parameters
    ----------
    graph:
        Graph the path should live in.
    path:
        Sequence of vertices.
    source, target:
        Expected first and last vertex, if given.
    length:
        Expected number of edges, if given.

    Raises
    ------
    ValueError
        If any of the conditions does not hold.
    """
    if not is_valid_path(graph, path):
        raise ValueError(f"{list(path)} is not a path in the graph")
    if source is not None and path[0] != source:
        raise ValueError(f"path starts at {path[0]}, expected {source}")
    if target is not None and path[-1] != target:
        raise ValueError(f"path ends at {path[-1]}, expected {target}")
    if length is not None and len(path) - 1 != length:
        raise ValueError(f"path has {len(path) - 1} edges, expected {length}")
