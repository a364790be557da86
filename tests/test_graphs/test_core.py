"""Tests for core graph data structures."""

from collections import Counter

import numpy as np
import pytest

from nodesandedges.errors import OutOfRangeError
from nodesandedges.graphs import Digraph, Graph, GraphLike


class TestGraph:
    """Tests for the undirected Graph class."""

    def test_empty_graph(self):
        """Test empty graph creation."""
        G = Graph(4)
        assert G.directed is False
        assert G.vertex_count() == 4
        assert G.edge_count() == 0
        assert G.edges() == []
        assert all(G.adjacent(v) == () for v in range(4))

    def test_zero_vertices(self):
        G = Graph(0)
        assert G.vertex_count() == 0
        with pytest.raises(OutOfRangeError):
            G.adjacent(0)

    def test_negative_vertices(self):
        with pytest.raises(ValueError):
            Graph(-1)

    def test_add_edge_symmetric(self):
        """Test that an edge is recorded at both endpoints."""
        G = Graph(3)
        G.add_edge(0, 1)
        G.add_edge(1, 2)

        assert G.edge_count() == 2
        assert G.adjacent(0) == (1,)
        assert G.adjacent(1) == (0, 2)
        assert G.adjacent(2) == (1,)
        assert G.degree(1) == 2

    def test_insertion_order_preserved(self):
        """Test that neighbors keep insertion order (not sorted)."""
        G = Graph(4)
        G.add_edge(0, 3)
        G.add_edge(0, 1)
        G.add_edge(0, 2)
        assert G.adjacent(0) == (3, 1, 2)
        assert G.neighbors(0) == G.adjacent(0)
        assert G.edges() == [(0, 3), (0, 1), (0, 2)]

    def test_self_loop_and_parallel_edges(self):
        G = Graph(2)
        G.add_edge(1, 1)
        G.add_edge(0, 1)
        G.add_edge(0, 1)
        assert G.edge_count() == 3
        assert G.adjacent(1) == (1, 1, 0, 0)
        assert G.degree(1) == 4

    def test_invalid_vertex_leaves_graph_unchanged(self):
        G = Graph(3)
        G.add_edge(0, 1)
        with pytest.raises(OutOfRangeError):
            G.add_edge(0, 3)
        with pytest.raises(OutOfRangeError):
            G.add_edge(-1, 0)
        assert G.edge_count() == 1
        assert G.adjacent(0) == (1,)

    def test_adjacent_is_read_only_copy(self):
        G = Graph(2)
        G.add_edge(0, 1)
        adj = G.adjacent(0)
        assert isinstance(adj, tuple)
        G.add_edge(0, 0)
        assert adj == (1,)

    def test_from_adjacency(self):
        G = Graph(3, [[1, 2], [0], [0]])
        assert G.edge_count() == 2
        assert G.edges() == [(0, 1), (0, 2)]

    def test_from_adjacency_rejects_bad_input(self):
        with pytest.raises(ValueError):
            Graph(3, [[1], [0]])  # wrong length
        with pytest.raises(ValueError):
            Graph(2, [[1], []])  # edge listed at one end only
        with pytest.raises(OutOfRangeError):
            Graph(2, [[5], [0]])

    def test_from_adjacency_requires_both_endpoints(self):
        """Every entry needs a matching entry at the other endpoint."""
        with pytest.raises(ValueError):
            Graph(2, [[1, 1], []])
        with pytest.raises(ValueError):
            Graph(3, [[1, 2], [0], [1]])

    def test_from_adjacency_rejects_unbuildable_order(self):
        # the three lists order the three edges cyclically
        with pytest.raises(ValueError):
            Graph(3, [[1, 2], [2, 0], [0, 1]])
        # a self-loop is added as two consecutive entries
        with pytest.raises(ValueError):
            Graph(2, [[0, 1, 0], [0]])

    def test_from_adjacency_round_trips(self):
        G = Graph(3, [[1], [2, 0], [1]])
        assert G.edges() == [(1, 2), (0, 1)]

        H = Graph.from_string(G.to_string())
        assert [H.adjacent(v) for v in range(3)] == [(1,), (2, 0), (1,)]

    def test_from_adjacency_self_loops_and_parallel_edges(self):
        G = Graph(2, [[0, 0, 1, 1], [0, 0]])
        assert G.edge_count() == 3
        assert G.edges() == [(0, 0), (0, 1), (0, 1)]
        H = Graph.from_string(G.to_string())
        assert H.adjacent(0) == (0, 0, 1, 1)

    def test_numpy_integer_vertices(self):
        G = Graph(3)
        G.add_edge(np.int64(0), np.int32(2))
        assert G.adjacent(0) == (2,)
        assert type(G.adjacent(2)[0]) is int
        assert G.edges() == [(0, 2)]
        assert all(type(x) is int for x in G.edges()[0])

    def test_from_graph_deep_copy(self):
        G = Graph(3)
        G.add_edge(2, 1)
        G.add_edge(0, 1)
        H = Graph.from_graph(G)

        assert H.vertex_count() == 3
        assert H.edge_count() == 2
        assert H.adjacent(1) == G.adjacent(1)
        assert H.edges() == G.edges()

        H.add_edge(0, 2)
        assert G.edge_count() == 2
        assert G.adjacent(0) == (1,)
        assert H._adj[1] is not G._adj[1]

    def test_str(self):
        G = Graph(3)
        G.add_edge(0, 1)
        text = str(G)
        assert text.splitlines() == ["3 vertices, 1 edges", "0: 1", "1: 0", "2:"]

    def test_satisfies_protocol(self):
        assert isinstance(Graph(1), GraphLike)


class TestDigraph:
    """Tests for the Digraph class."""

    def test_add_edge_directed(self):
        """Test that arcs are recorded at their tail only."""
        G = Digraph(3)
        G.add_edge(0, 1)
        G.add_edge(1, 2)

        assert G.directed is True
        assert G.adjacent(0) == (1,)
        assert G.adjacent(1) == (2,)
        assert G.adjacent(2) == ()
        assert G.edges() == [(0, 1), (1, 2)]

    def test_degrees_scenario(self):
        """Four vertices, arcs 0->1 and 1->2."""
        G = Digraph(4)
        G.add_edge(0, 1)
        G.add_edge(1, 2)

        assert G.out_degree(0) == 1
        assert G.out_degree(1) == 1
        assert G.in_degree(1) == 1
        assert G.in_degree(2) == 1
        assert G.in_degree(0) == 0
        assert G.out_degree(3) == 0 and G.in_degree(3) == 0

    def test_degree_queries_validate(self):
        G = Digraph(2)
        with pytest.raises(OutOfRangeError):
            G.in_degree(2)
        with pytest.raises(OutOfRangeError):
            G.out_degree(-1)

    def test_in_degree_matches_arcs(self, tiny_dg_text):
        G = Digraph.from_string(tiny_dg_text)
        heads = Counter(w for _, w in G.edges())
        for v in range(G.vertex_count()):
            assert G.in_degree(v) == heads[v]
            assert G.out_degree(v) == len(G.adjacent(v))
        assert sum(G.in_degree(v) for v in range(G.vertex_count())) == G.edge_count()

    def test_invalid_arc_leaves_digraph_unchanged(self):
        G = Digraph(2)
        with pytest.raises(OutOfRangeError):
            G.add_edge(0, 2)
        assert G.edge_count() == 0
        assert G.in_degree(0) == 0
        assert G.adjacent(0) == ()

    def test_reverse(self):
        G = Digraph(3)
        G.add_edge(0, 1)
        G.add_edge(0, 2)
        G.add_edge(1, 2)
        R = G.reverse()

        assert R is not G
        assert R.vertex_count() == 3
        assert R.edge_count() == 3
        assert R.adjacent(2) == (0, 1)
        assert R.adjacent(1) == (0,)
        assert R.in_degree(0) == 2
        # receiver untouched
        assert G.adjacent(0) == (1, 2)
        assert G.in_degree(2) == 2

    def test_reverse_twice_round_trips(self, tiny_dg_text):
        G = Digraph.from_string(tiny_dg_text)
        RR = G.reverse().reverse()
        assert RR.vertex_count() == G.vertex_count()
        assert Counter(RR.edges()) == Counter(G.edges())

    def test_from_adjacency_recomputes_degrees(self):
        G = Digraph(3, [[1, 2], [2], []])
        assert G.edge_count() == 3
        assert G.in_degree(2) == 2
        assert G.out_degree(0) == 2

    def test_from_graph_deep_copy(self, tiny_dg_text):
        G = Digraph.from_string(tiny_dg_text)
        H = Digraph.from_graph(G)

        assert H.edges() == G.edges()
        assert all(H.in_degree(v) == G.in_degree(v) for v in range(G.vertex_count()))

        H.add_edge(1, 0)
        assert G.adjacent(1) == ()
        assert G.edge_count() == 22
        assert H.edge_count() == 23

    def test_numpy_integer_vertices(self):
        G = Digraph(3)
        G.add_edge(np.int64(0), np.int64(1))
        assert G.adjacent(0) == (1,)
        assert type(G.adjacent(0)[0]) is int
        assert G.in_degree(np.int64(1)) == 1
        assert G.to_string() == "3\n1\n0 1\n"

    def test_from_graph_none(self):
        with pytest.raises(ValueError):
            Digraph.from_graph(None)

    def test_repr(self):
        assert repr(Digraph(2)) == "Digraph(vertices=2, edges=0)"
