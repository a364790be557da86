"""Integration tests for the graphs package within nodesandedges."""

import io

import pytest


def test_graphs_import_from_main():
    """Test that graphs can be imported from the main package."""
    from nodesandedges import BreadthFirstPaths, DepthFirstSearch, Digraph, EdgeWeightedGraph, Graph

    assert Graph is not None
    assert Digraph is not None
    assert EdgeWeightedGraph is not None
    assert BreadthFirstPaths is not None
    assert DepthFirstSearch is not None


def test_graphs_in_all_exports():
    """Test that graph exports are in __all__."""
    import nodesandedges

    graph_exports = {
        "Graph", "Digraph", "Edge", "EdgeWeightedGraph", "GraphLike",
        "bfs", "dfs_recursive", "dfs_iterative",
        "BreadthFirstPaths", "DepthFirstSearch",
        "DirectedDepthFirstSearch", "UndirectedDepthFirstSearch",
        "is_connected", "reachable_from", "reconstruct_path", "UNREACHABLE",
    }

    all_exports = set(nodesandedges.__all__)
    assert graph_exports.issubset(all_exports), "Graph exports missing from __all__"
    for name in nodesandedges.__all__:
        assert hasattr(nodesandedges, name), name


def test_graphs_no_circular_imports():
    """Importing the text format first must not break the graph classes."""
    from nodesandedges.io import parse_graph_string
    from nodesandedges.graphs import Graph

    g = parse_graph_string("2\n1\n0 1\n", Graph)
    assert g.adjacent(0) == (1,)


def test_end_to_end_read_search_write(tmp_path, tiny_dg_text):
    """Read a digraph three ways, search it, and write it back."""
    from nodesandedges import BreadthFirstPaths, Digraph, DirectedDepthFirstSearch, write_graph_file

    from_string = Digraph.from_string(tiny_dg_text)
    from_stream = Digraph.from_stream(io.StringIO(tiny_dg_text))
    path = tmp_path / "tinyDG.txt"
    path.write_text(tiny_dg_text)
    from_file = Digraph.from_file(path)

    for g in (from_stream, from_file):
        assert g.edges() == from_string.edges()

    paths = BreadthFirstPaths(from_file, 6)
    assert paths.dist_to(6) == 0
    assert paths.path_to(12) == [6, 9, 10, 12]
    assert DirectedDepthFirstSearch(from_file, 7).count() == 13

    out = tmp_path / "copy.txt"
    write_graph_file(from_file, out)
    reread = Digraph.from_file(out)
    assert reread.edges() == from_file.edges()
    assert BreadthFirstPaths(reread, 6).path_to(12) == [6, 9, 10, 12]


@pytest.mark.parametrize("text", ["", "\n\n"])
def test_empty_input_reports_missing_header(text):
    from nodesandedges import Graph, InvalidFormatError

    with pytest.raises(InvalidFormatError, match="missing number of vertices"):
        Graph.from_string(text)
