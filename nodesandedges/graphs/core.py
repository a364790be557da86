"""
Core graph data structures.

Provides the GraphLike protocol consumed by the traversal algorithms, plus the
unweighted Graph (undirected) and Digraph (directed) classes. Vertices are the
dense integers 0..V-1 fixed at construction; adjacency is a list indexed by
vertex and neighbors keep their insertion order.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, Sequence, Tuple, runtime_checkable

from nodesandedges.diagnostics import assert_degree_bookkeeping, is_debug_enabled
from nodesandedges.io.text import TextFormatMixin
from nodesandedges.validation import check_count, validate_vertex

from .utils import insertion_order


@runtime_checkable
class GraphLike(Protocol):
    """
    Protocol for graphs the traversal algorithms can walk.

    Adjacency entries may be bare vertices or edge objects; ``neighbors``
    always yields the vertices reachable over one edge, in adjacency order.
    """

    directed: bool

    def vertex_count(self) -> int:
        """Return the number of vertices V."""
        ...

    def edge_count(self) -> int:
        """Return the number of edges E."""
        ...

    def adjacent(self, v: int) -> Sequence[Any]:
        """Return the adjacency entries of vertex v in insertion order."""
        ...

    def neighbors(self, v: int) -> Sequence[int]:
        """Return the vertices one edge away from v in adjacency order."""
        ...

    def validate_vertex(self, v: int) -> int:
        """Return v as an int, or raise OutOfRangeError unless 0 <= v < V."""
        ...


def _copy_vertex_adjacency(
    adjacency: Sequence[Sequence[int]], vertices: int
) -> List[List[int]]:
    """Validate a pre-populated adjacency of bare vertices and copy it."""
    if len(adjacency) != vertices:
        raise ValueError(
            f"adjacency has {len(adjacency)} lists but the graph has {vertices} vertices"
        )
    copied = []
    for targets in adjacency:
        copied.append([validate_vertex(w, vertices) for w in targets])
    return copied


def _format_adjacency(graph: Any) -> str:
    lines = [f"{graph.vertex_count()} vertices, {graph.edge_count()} edges"]
    for v in range(graph.vertex_count()):
        entries = " ".join(str(x) for x in graph.adjacent(v))
        lines.append(f"{v}: {entries}".rstrip())
    return "\n".join(lines)


class Graph(TextFormatMixin):
    """
    Undirected, unweighted graph with adjacency-list representation.

    Each edge v-w is recorded in both adjacency lists; a self-loop v-v is
    recorded twice in the list of v. Parallel edges are allowed.

    Attributes:
        directed: Always False.

    Complexity:
        - add_edge: O(1) amortized
        - adjacent / neighbors: O(deg(v)) (a copy is returned)
        - edges: O(E)
    """

    directed = False

    def __init__(
        self, vertices: int, adjacency: Optional[Sequence[Sequence[int]]] = None
    ):
        """
        Initialize a graph with ``vertices`` vertices and no edges.

        Args:
            vertices: Number of vertices V (non-negative).
            adjacency: Optional adjacency lists to copy, one per vertex. Every
                edge must appear in the lists of both endpoints, and the lists
                must be what some sequence of add_edge calls would build;
                edges() then reports that sequence.

        Raises:
            ValueError: If ``vertices`` is negative or ``adjacency`` is
                inconsistent.
            OutOfRangeError: If ``adjacency`` references an invalid vertex.
        """
        self._vertices = check_count(vertices, "vertices")
        self._edges = 0
        self._adj: List[List[int]] = [[] for _ in range(self._vertices)]
        self._insertion_order: List[Tuple[int, int]] = []

        if adjacency is not None:
            self._adj = _copy_vertex_adjacency(adjacency, self._vertices)
            order = insertion_order(self._adj, lambda v, w: w)
            self._insertion_order = [(v, self._adj[v][i]) for v, i, _ in order]
            self._edges = len(order)

    def vertex_count(self) -> int:
        return self._vertices

    def edge_count(self) -> int:
        return self._edges

    def validate_vertex(self, v: int) -> int:
        return validate_vertex(v, self._vertices)

    def add_edge(self, v: int, w: int) -> None:
        """
        Add the undirected edge v-w.

        Args:
            v: One endpoint.
            w: The other endpoint.

        Raises:
            OutOfRangeError: If either endpoint is invalid; the graph is
                left unchanged.
        """
        v = validate_vertex(v, self._vertices)
        w = validate_vertex(w, self._vertices)
        self._adj[v].append(w)
        self._adj[w].append(v)
        self._insertion_order.append((v, w))
        self._edges += 1

    def adjacent(self, v: int) -> Tuple[int, ...]:
        """Return the neighbors of ``v`` in insertion order."""
        validate_vertex(v, self._vertices)
        return tuple(self._adj[v])

    neighbors = adjacent

    def degree(self, v: int) -> int:
        """Return the number of edge endpoints at ``v`` (a self-loop counts twice)."""
        validate_vertex(v, self._vertices)
        return len(self._adj[v])

    def edges(self) -> List[Tuple[int, int]]:
        """Return every edge once, as (v, w) pairs in insertion order."""
        return list(self._insertion_order)

    @classmethod
    def from_graph(cls, g: "Graph") -> "Graph":
        """Return a deep copy of ``g`` that shares no storage with it."""
        if g is None:
            raise ValueError("graph argument is None")
        copy = cls(g.vertex_count())
        copy._adj = [list(targets) for targets in g._adj]
        copy._edges = g._edges
        copy._insertion_order = list(g._insertion_order)
        return copy

    def _insert_parsed(self, v: int, w: int, weight: Optional[float]) -> None:
        self.add_edge(v, w)

    def __str__(self) -> str:
        return _format_adjacency(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self._vertices}, edges={self._edges})"


class Digraph(TextFormatMixin):
    """
    Directed, unweighted graph with adjacency-list representation.

    Adding the arc v->w appends w to the list of v only. In-degrees are
    tracked alongside, so both degree queries are O(1).

    Attributes:
        directed: Always True.
    """

    directed = True

    def __init__(
        self, vertices: int, adjacency: Optional[Sequence[Sequence[int]]] = None
    ):
        """
        Initialize a digraph with ``vertices`` vertices and no arcs.

        Args:
            vertices: Number of vertices V (non-negative).
            adjacency: Optional out-adjacency lists to copy, one per vertex.
                In-degrees and the arc count are recomputed from them.

        Raises:
            ValueError: If ``vertices`` is negative or ``adjacency`` has the
                wrong length.
            OutOfRangeError: If ``adjacency`` references an invalid vertex.
        """
        self._vertices = check_count(vertices, "vertices")
        self._edges = 0
        self._adj: List[List[int]] = [[] for _ in range(self._vertices)]
        self._in_degree: List[int] = [0] * self._vertices

        if adjacency is not None:
            self._adj = _copy_vertex_adjacency(adjacency, self._vertices)
            for targets in self._adj:
                for w in targets:
                    self._in_degree[w] += 1
                self._edges += len(targets)

    def vertex_count(self) -> int:
        return self._vertices

    def edge_count(self) -> int:
        return self._edges

    def validate_vertex(self, v: int) -> int:
        return validate_vertex(v, self._vertices)

    def add_edge(self, v: int, w: int) -> None:
        """
        Add the directed arc v->w.

        Raises:
            OutOfRangeError: If either endpoint is invalid; the digraph is
                left unchanged.
        """
        v = validate_vertex(v, self._vertices)
        w = validate_vertex(w, self._vertices)
        self._adj[v].append(w)
        self._in_degree[w] += 1
        self._edges += 1

    def adjacent(self, v: int) -> Tuple[int, ...]:
        """Return the heads of the arcs leaving ``v`` in insertion order."""
        validate_vertex(v, self._vertices)
        return tuple(self._adj[v])

    neighbors = adjacent

    def out_degree(self, v: int) -> int:
        """Return the number of arcs leaving ``v``."""
        validate_vertex(v, self._vertices)
        return len(self._adj[v])

    def in_degree(self, v: int) -> int:
        """Return the number of arcs entering ``v``."""
        validate_vertex(v, self._vertices)
        return self._in_degree[v]

    def edges(self) -> List[Tuple[int, int]]:
        """Return every arc as (v, w), grouped by tail in adjacency order."""
        return [(v, w) for v in range(self._vertices) for w in self._adj[v]]

    def reverse(self) -> "Digraph":
        """
        Return a new digraph with every arc flipped.

        The reverse is built by inserting w->v for each arc v->w, visiting
        tails in increasing order; this digraph is not modified.
        """
        reverse = type(self)(self._vertices)
        for v in range(self._vertices):
            for w in self._adj[v]:
                reverse.add_edge(w, v)
        if is_debug_enabled():
            assert_degree_bookkeeping(reverse)
        return reverse

    @classmethod
    def from_graph(cls, g: "Digraph") -> "Digraph":
        """Return a deep copy of ``g`` that shares no storage with it."""
        if g is None:
            raise ValueError("graph argument is None")
        return cls(g.vertex_count(), [g.adjacent(v) for v in range(g.vertex_count())])

    def _insert_parsed(self, v: int, w: int, weight: Optional[float]) -> None:
        self.add_edge(v, w)

    def __str__(self) -> str:
        return _format_adjacency(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self._vertices}, edges={self._edges})"
