"""
Edge-weighted undirected graphs.

Provides the immutable Edge value and EdgeWeightedGraph, whose adjacency
lists hold Edge objects instead of bare vertices. Each edge is stored once per
endpoint but counted once.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from nodesandedges.config import DEFAULT_WEIGHT_RANGE, WEIGHT_DISPLAY_PRECISION
from nodesandedges.diagnostics import assert_unique_edges, is_debug_enabled
from nodesandedges.errors import InvalidOperandError
from nodesandedges.io.text import TextFormatMixin
from nodesandedges.logging import get_logger
from nodesandedges.validation import check_count, validate_vertex

from .utils import insertion_order

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class Edge:
    """Immutable undirected edge between two vertices, with a weight.

    Parameters
    ----------
    v:
        One endpoint (non-negative).
    w:
        The other endpoint (non-negative); may equal ``v`` for a self-loop.
    weight:
        Finite real edge weight; NaN and infinities are rejected.

    Equality and hashing ignore endpoint order, so ``Edge(1, 2, 0.5)`` and
    ``Edge(2, 1, 0.5)`` are interchangeable. Comparisons (``<`` etc.) order
    edges by weight only.
    """

    v: int
    w: int
    weight: float = 1.0

    def __post_init__(self) -> None:
        for field in ("v", "w"):
            end = getattr(self, field)
            if isinstance(end, bool):
                raise TypeError(f"edge endpoints must be integers, got {end!r}")
            try:
                end = operator.index(end)
            except TypeError:
                raise TypeError(f"edge endpoints must be integers, got {end!r}") from None
            if end < 0:
                raise ValueError(f"edge endpoints must be non-negative, got {end}")
            object.__setattr__(self, field, end)
        weight = float(self.weight)
        if not math.isfinite(weight):
            raise ValueError(f"edge weight must be finite, got {weight}")
        object.__setattr__(self, "weight", weight)

    def either(self) -> int:
        """Return one endpoint of this edge."""
        return self.v

    def other(self, vertex: int) -> int:
        """
        Return the endpoint of this edge that is not ``vertex``.

        Raises
        ------
        InvalidOperandError
            If ``vertex`` is neither endpoint.
        """
        if vertex == self.v:
            return self.w
        if vertex == self.w:
            return self.v
        raise InvalidOperandError(f"vertex {vertex!r} is not an endpoint of edge {self}")

    def _key(self) -> Tuple[int, int, float]:
        return (min(self.v, self.w), max(self.v, self.w), self.weight)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight < other.weight

    def __le__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight <= other.weight

    def __gt__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight > other.weight

    def __ge__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight >= other.weight

    def __str__(self) -> str:
        return f"{self.v}-{self.w} {self.weight:.{WEIGHT_DISPLAY_PRECISION}f}"


class EdgeWeightedGraph(TextFormatMixin):
    """
    Undirected graph whose adjacency lists hold weighted Edge objects.

    Adding an edge appends the same Edge object to the lists of both
    endpoints (twice to one list for a self-loop) and increments the edge
    count once.

    Attributes:
        directed: Always False.
        weighted: Always True; the text format carries a weight column.
    """

    directed = False
    weighted = True

    def __init__(
        self, vertices: int, adjacency: Optional[Sequence[Sequence[Edge]]] = None
    ):
        """
        Initialize an edge-weighted graph with ``vertices`` vertices.

        Args:
            vertices: Number of vertices V (non-negative).
            adjacency: Optional incident-edge lists, one per vertex. Every edge
                must be incident to the vertex whose list holds it and appear
                at both endpoints, and the lists must be what some sequence of
                add_edge calls would build. The lists are copied; the Edge
                objects, being immutable, are kept, and the two entries of
                one edge end up as the same object.

        Raises:
            ValueError: If ``vertices`` is negative or ``adjacency`` is
                inconsistent.
            OutOfRangeError: If an edge references an invalid vertex.
        """
        self._vertices = check_count(vertices, "vertices")
        self._edges = 0
        self._adj: List[List[Edge]] = [[] for _ in range(self._vertices)]
        self._insertion_order: List[Edge] = []

        if adjacency is not None:
            self._load_adjacency(adjacency)

    def _load_adjacency(self, adjacency: Sequence[Sequence[Edge]]) -> None:
        if len(adjacency) != self._vertices:
            raise ValueError(
                f"adjacency has {len(adjacency)} lists but the graph has "
                f"{self._vertices} vertices"
            )
        for v, incident in enumerate(adjacency):
            for e in incident:
                if not isinstance(e, Edge):
                    raise TypeError(f"adjacency entries must be Edge objects, got {e!r}")
                validate_vertex(e.v, self._vertices)
                validate_vertex(e.w, self._vertices)
                if v not in (e.v, e.w):
                    raise ValueError(f"edge {e} is stored at vertex {v} but is not incident to it")
            self._adj[v] = list(incident)

        order = insertion_order(self._adj, lambda v, e: e.other(v), lambda e: e.weight)
        for v, i, j in order:
            e = self._adj[v][i]
            # both endpoints hold the same object, as after add_edge
            self._adj[e.other(v)][j] = e
            self._insertion_order.append(e)
        self._edges = len(order)

    def vertex_count(self) -> int:
        return self._vertices

    def edge_count(self) -> int:
        return self._edges

    def validate_vertex(self, v: int) -> int:
        return validate_vertex(v, self._vertices)

    def add_edge(self, e: Edge) -> None:
        """
        Add the undirected weighted edge ``e``.

        Raises:
            TypeError: If ``e`` is not an Edge.
            OutOfRangeError: If an endpoint is invalid; the graph is left
                unchanged.
        """
        if not isinstance(e, Edge):
            raise TypeError(f"expected an Edge, got {e!r}")
        v = e.either()
        w = e.other(v)
        validate_vertex(v, self._vertices)
        validate_vertex(w, self._vertices)
        self._adj[v].append(e)
        self._adj[w].append(e)
        self._insertion_order.append(e)
        self._edges += 1

    def adjacent(self, v: int) -> Tuple[Edge, ...]:
        """Return the edges incident to ``v`` in insertion order."""
        validate_vertex(v, self._vertices)
        return tuple(self._adj[v])

    def neighbors(self, v: int) -> Tuple[int, ...]:
        """Return the far endpoint of each edge incident to ``v``."""
        validate_vertex(v, self._vertices)
        return tuple(e.other(v) for e in self._adj[v])

    def degree(self, v: int) -> int:
        """Return the number of edge endpoints at ``v`` (a self-loop counts twice)."""
        validate_vertex(v, self._vertices)
        return len(self._adj[v])

    def all_edges(self) -> List[Edge]:
        """
        Return every edge exactly once.

        Vertices are scanned in increasing order and an incident edge is kept
        when its other endpoint is greater; a self-loop, stored twice in the
        same list, is kept on every other sighting.
        """
        edges = []
        for v in range(self._vertices):
            self_loops = 0
            for e in self._adj[v]:
                w = e.other(v)
                if w > v:
                    edges.append(e)
                elif w == v:
                    if self_loops % 2 == 0:
                        edges.append(e)
                    self_loops += 1
        return edges

    def edges(self) -> List[Edge]:
        """Return every edge once, in insertion order."""
        return list(self._insertion_order)

    def total_weight(self) -> float:
        """Return the sum of all edge weights."""
        return math.fsum(e.weight for e in self._insertion_order)

    @classmethod
    def from_graph(cls, g: "EdgeWeightedGraph") -> "EdgeWeightedGraph":
        """
        Return a deep copy of ``g``.

        Every Edge is freshly allocated with the same (v, w, weight); the two
        adjacency slots of one source edge share one new Edge.
        """
        if g is None:
            raise ValueError("graph argument is None")
        fresh: Dict[int, Edge] = {}

        def copy_edge(e: Edge) -> Edge:
            if id(e) not in fresh:
                fresh[id(e)] = Edge(e.v, e.w, e.weight)
            return fresh[id(e)]

        adjacency = [[copy_edge(e) for e in g._adj[v]] for v in range(g.vertex_count())]
        copy = cls(g.vertex_count(), adjacency)
        copy._insertion_order = [copy_edge(e) for e in g._insertion_order]
        return copy

    @classmethod
    def from_random(
        cls,
        vertices: int,
        edges: int,
        rng: Optional[Union[int, np.random.Generator]] = None,
        weight_range: Tuple[float, float] = DEFAULT_WEIGHT_RANGE,
        allow_self_loops: bool = False,
        allow_parallel_edges: bool = False,
    ) -> "EdgeWeightedGraph":
        """
        Build a random edge-weighted graph with exactly ``edges`` edges.

        Endpoints are drawn uniformly from [0, V) and weights uniformly from
        ``weight_range``. Draws producing a self-loop or repeating an existing
        vertex pair are rejected unless the matching ``allow_*`` flag is set.

        Args:
            vertices: Number of vertices V.
            edges: Number of edges E to generate.
            rng: Random number generator or integer seed. If None, uses
                default_rng(0).
            weight_range: (low, high) bounds for weights, low <= high.
            allow_self_loops: Accept edges v-v.
            allow_parallel_edges: Accept repeated vertex pairs.

        Returns:
            The generated graph.

        Raises:
            ValueError: If a count is negative, the weight range is inverted,
                or the requested edges cannot exist under the chosen policy.
        """
        check_count(vertices, "vertices")
        check_count(edges, "edges")
        low, high = (float(x) for x in weight_range)
        if low > high:
            raise ValueError(f"weight_range must satisfy low <= high, got {weight_range}")

        if allow_parallel_edges:
            usable = vertices > 0 if allow_self_loops else vertices > 1
            if edges > 0 and not usable:
                raise ValueError(f"cannot place {edges} edges on {vertices} vertices")
        else:
            capacity = vertices * (vertices - 1) // 2
            if allow_self_loops:
                capacity += vertices
            if edges > capacity:
                raise ValueError(
                    f"a graph with {vertices} vertices has room for at most "
                    f"{capacity} distinct edges, {edges} requested"
                )

        if rng is None or isinstance(rng, int):
            rng = np.random.default_rng(0 if rng is None else rng)

        graph = cls(vertices)
        taken = set()
        while graph.edge_count() < edges:
            v = int(rng.integers(vertices))
            w = int(rng.integers(vertices))
            if v == w and not allow_self_loops:
                continue
            if not allow_parallel_edges:
                pair = (min(v, w), max(v, w))
                if pair in taken:
                    continue
                taken.add(pair)
            graph.add_edge(Edge(v, w, float(rng.uniform(low, high))))

        logger.debug("generated random graph with %d vertices and %d edges", vertices, edges)
        if is_debug_enabled():
            assert_unique_edges(graph)
        return graph

    def _insert_parsed(self, v: int, w: int, weight: Optional[float]) -> None:
        self.add_edge(Edge(v, w, weight))

    def __str__(self) -> str:
        lines = [f"{self._vertices} vertices, {self._edges} edges"]
        for v in range(self._vertices):
            entries = "  ".join(str(e) for e in self._adj[v])
            lines.append(f"{v}: {entries}".rstrip())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self._vertices}, edges={self._edges})"
