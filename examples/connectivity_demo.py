"""Connectivity example: shortest paths and reachability on small graphs.

This example reads an undirected graph and a digraph from the plain-text
format, prints the BFS shortest path from a source to every vertex, and lists
the vertices a depth-first search can reach.
"""

from __future__ import annotations

from nodesandedges import (
    BreadthFirstPaths,
    Digraph,
    DirectedDepthFirstSearch,
    Graph,
    UndirectedDepthFirstSearch,
)

# Three components: {0..6}, {7, 8}, {9..12}
TINY_G = """\
13
13
0 5
4 3
0 1
9 12
6 4
5 4
0 2
11 12
9 10
0 6
7 8
9 11
5 3
"""

TINY_DG = """\
13
22
4 2
2 3
3 2
6 0
0 1
2 0
11 12
12 9
9 10
9 11
7 9
10 12
11 4
4 3
3 5
6 8
8 6
5 4
0 5
6 4
6 9
7 6
"""


def print_paths(graph: Graph, source: int) -> None:
    """Print a shortest path from ``source`` to each vertex, or 'not connected'."""
    paths = BreadthFirstPaths(graph, source)
    for v in range(graph.vertex_count()):
        if paths.has_path_to(v):
            route = "-".join(str(x) for x in paths.path_to(v))
            print(f"{source} to {v} ({paths.dist_to(v)}):  {route}")
        else:
            print(f"{source} to {v} (-):  not connected")


def print_reachable(search) -> None:
    """Print the marked vertices, then whether the search reached all of them."""
    print(" ".join(str(v) for v in search.reachable()))
    print("connected" if search.is_connected() else "NOT connected")


def main() -> None:
    """Run the breadth-first and depth-first searches on the sample graphs."""
    graph = Graph.from_string(TINY_G)
    digraph = Digraph.from_string(TINY_DG)

    print(f"Undirected graph: {graph!r}")
    print_paths(graph, 0)
    print()

    print("Depth-first search from 0 (undirected):")
    print_reachable(UndirectedDepthFirstSearch(graph, 0))
    print()

    print(f"Directed graph: {digraph!r}")
    for source in (1, 2, 6):
        print(f"Depth-first search from {source} (directed):")
        print_reachable(DirectedDepthFirstSearch(digraph, source))


if __name__ == "__main__":
    main()
