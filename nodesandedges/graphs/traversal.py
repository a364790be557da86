"""
Graph traversal algorithms: BFS and DFS.

Provides breadth-first and depth-first search engines over any GraphLike
graph, and the query objects built on them: BreadthFirstPaths (shortest paths
by edge count from one source) and DepthFirstSearch (vertices reachable from
one source). Neighbors are visited in adjacency (insertion) order, so results
are deterministic for a given graph. Per-vertex state lives in numpy arrays
sized once to V; the graph is never modified.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
    - Sedgewick, Wayne. "Algorithms", 4th ed. Section 4.1.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator, List, Tuple

import numpy as np

from nodesandedges.diagnostics import assert_valid_path, is_debug_enabled
from nodesandedges.logging import get_logger
from nodesandedges.validation import validate_vertex

from .core import GraphLike
from .utils import UNREACHABLE, reconstruct_path

logger = get_logger(__name__)


def bfs(graph: GraphLike, source: int) -> Tuple[List[int], np.ndarray, np.ndarray]:
    """
    Breadth-first search from a source vertex.

    Returns vertices in BFS visitation order, distances from source, and the
    parent array for path reconstruction.

    Args:
        graph: Graph to traverse.
        source: Source vertex.

    Returns:
        Tuple of:
        - order: List of vertices in BFS visitation order
        - distance: int array, edge count from source or UNREACHABLE
        - parent: int array, previous vertex on a shortest path or
          UNREACHABLE (also for the source)

    Raises:
        OutOfRangeError: If ``source`` is not a vertex of ``graph``.

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = Graph(3)
        >>> G.add_edge(0, 1)
        >>> G.add_edge(1, 2)
        >>> order, dist, parent = bfs(G, 0)
        >>> order
        [0, 1, 2]
        >>> int(dist[2])
        2
    """
    n = graph.vertex_count()
    source = validate_vertex(source, n)

    order: List[int] = []
    distance = np.full(n, UNREACHABLE, dtype=np.int64)
    parent = np.full(n, UNREACHABLE, dtype=np.int64)

    distance[source] = 0
    queue = deque([source])

    while queue:
        u = queue.popleft()
        order.append(u)

        for v in graph.neighbors(u):
            if distance[v] == UNREACHABLE:
                distance[v] = distance[u] + 1
                parent[v] = u
                queue.append(v)

    return order, distance, parent


def dfs_recursive(
    graph: GraphLike, source: int
) -> Tuple[List[int], List[int], np.ndarray]:
    """
    Depth-first search (recursive implementation).

    Returns pre-order and post-order visitation lists, plus the parent array.
    Recursion depth grows with the longest DFS path, so prefer
    :func:`dfs_iterative` for large graphs.

    Args:
        graph: Graph to traverse.
        source: Source vertex.

    Returns:
        Tuple of:
        - preorder: Vertices in the order they were first discovered
        - postorder: Vertices in the order they were finished
        - parent: int array, discovering vertex or UNREACHABLE

    Raises:
        OutOfRangeError: If ``source`` is not a vertex of ``graph``.

    Complexity: O(V + E) where V is vertices and E is edges.
    """
    n = graph.vertex_count()
    source = validate_vertex(source, n)

    preorder: List[int] = []
    postorder: List[int] = []
    parent = np.full(n, UNREACHABLE, dtype=np.int64)
    visited = np.zeros(n, dtype=bool)

    def dfs_visit(u: int) -> None:
        visited[u] = True
        preorder.append(u)

        for v in graph.neighbors(u):
            if not visited[v]:
                parent[v] = u
                dfs_visit(v)

        postorder.append(u)

    dfs_visit(source)

    return preorder, postorder, parent


def dfs_iterative(
    graph: GraphLike, source: int
) -> Tuple[List[int], List[int], np.ndarray]:
    """
    Depth-first search (iterative implementation using a stack).

    Keeps one neighbor iterator per open vertex, so discovery and finishing
    order match :func:`dfs_recursive` exactly without using the call stack.

    Args:
        graph: Graph to traverse.
        source: Source vertex.

    Returns:
        Same as :func:`dfs_recursive`.

    Raises:
        OutOfRangeError: If ``source`` is not a vertex of ``graph``.

    Complexity: O(V + E) where V is vertices and E is edges.
    """
    n = graph.vertex_count()
    source = validate_vertex(source, n)

    preorder: List[int] = [source]
    postorder: List[int] = []
    parent = np.full(n, UNREACHABLE, dtype=np.int64)
    visited = np.zeros(n, dtype=bool)
    visited[source] = True
    stack: List[Tuple[int, Iterator[int]]] = [(source, iter(graph.neighbors(source)))]

    while stack:
        u, pending = stack[-1]
        for v in pending:
            if not visited[v]:
                visited[v] = True
                parent[v] = u
                preorder.append(v)
                stack.append((v, iter(graph.neighbors(v))))
                break
        else:
            stack.pop()
            postorder.append(u)

    return preorder, postorder, parent


class BreadthFirstPaths:
    """
    Shortest paths, by number of edges, from a single source vertex.

    The search runs once in the constructor; queries are O(1) except
    ``path_to`` which is O(length of the path).

    Example:
        >>> g = Digraph.from_string("4\\n2\\n0 1\\n1 2\\n")
        >>> paths = BreadthFirstPaths(g, 0)
        >>> paths.dist_to(2), paths.path_to(2), paths.has_path_to(3)
        (2, [0, 1, 2], False)
    """

    def __init__(self, graph: GraphLike, source: int):
        self._graph = graph
        self._source = validate_vertex(source, graph.vertex_count())
        self._order, self._dist_to, self._edge_to = bfs(graph, self._source)
        logger.debug("bfs from %d reached %d of %d vertices",
                     self._source, len(self._order), graph.vertex_count())

    @property
    def source(self) -> int:
        return self._source

    def has_path_to(self, v: int) -> bool:
        """Return True if there is a path from the source to ``v``."""
        validate_vertex(v, self._graph.vertex_count())
        return bool(self._dist_to[v] != UNREACHABLE)

    def dist_to(self, v: int) -> int:
        """Return the number of edges on a shortest path to ``v``, or UNREACHABLE."""
        validate_vertex(v, self._graph.vertex_count())
        return int(self._dist_to[v])

    def path_to(self, v: int) -> List[int]:
        """Return a shortest path from the source to ``v`` inclusive, or []."""
        if not self.has_path_to(v):
            return []
        path = reconstruct_path(self._edge_to, v)
        if is_debug_enabled():
            assert_valid_path(self._graph, path, self._source, v, self.dist_to(v))
        return path

    def visit_order(self) -> List[int]:
        """Return the reached vertices in the order BFS dequeued them."""
        return list(self._order)


class DepthFirstSearch:
    """
    Vertices reachable from a source vertex, found by depth-first search.

    Works on any GraphLike graph: on a Digraph only outgoing arcs are
    followed, on undirected graphs every incident edge is.
    """

    def __init__(self, graph: GraphLike, source: int):
        self._graph = graph
        self._source = validate_vertex(source, graph.vertex_count())
        preorder, _, _ = dfs_iterative(graph, self._source)
        self._marked = np.zeros(graph.vertex_count(), dtype=bool)
        self._marked[preorder] = True
        self._count = len(preorder)
        logger.debug("dfs from %d marked %d of %d vertices",
                     self._source, self._count, graph.vertex_count())

    @property
    def source(self) -> int:
        return self._source

    def marked(self, v: int) -> bool:
        """Return True if ``v`` is reachable from the source."""
        validate_vertex(v, self._graph.vertex_count())
        return bool(self._marked[v])

    def count(self) -> int:
        """Return the number of vertices reachable from the source, itself included."""
        return self._count

    def reachable(self) -> List[int]:
        """Return the reachable vertices in increasing order."""
        return [int(v) for v in np.flatnonzero(self._marked)]

    def is_connected(self) -> bool:
        """Return True if every vertex of the graph was reached."""
        return self._count == self._graph.vertex_count()


def reachable_from(graph: GraphLike, source: int) -> List[int]:
    """Return the vertices reachable from ``source`` in increasing order."""
    return DepthFirstSearch(graph, source).reachable()


def is_connected(graph: GraphLike) -> bool:
    """
    Return True if every vertex is reachable from vertex 0.

    For undirected graphs this means the graph has a single component. The
    graph with no vertices counts as connected.
    """
    if graph.vertex_count() == 0:
        return True
    return DepthFirstSearch(graph, 0).is_connected()


class DirectedDepthFirstSearch(DepthFirstSearch):
    """DepthFirstSearch restricted to directed graphs."""

    def __init__(self, graph: GraphLike, source: int):
        if not graph.directed:
            raise TypeError(f"{type(self).__name__} needs a directed graph, got {type(graph).__name__}")
        super().__init__(graph, source)


class UndirectedDepthFirstSearch(DepthFirstSearch):
    """DepthFirstSearch restricted to undirected graphs."""

    def __init__(self, graph: GraphLike, source: int):
        if graph.directed:
            raise TypeError(f"{type(self).__name__} needs an undirected graph, got {type(graph).__name__}")
        super().__init__(graph, source)
