"""
Graph algorithms package for nodesandedges.

This package provides:
- Graph data structures over vertices 0..V-1 (Graph, Digraph,
  EdgeWeightedGraph with its Edge value)
- Traversal engines (BFS, recursive and iterative DFS)
- Query objects: BreadthFirstPaths, DepthFirstSearch and its directed and
  undirected variants

Neighbors are visited in insertion order, so every result is deterministic
for a given sequence of add_edge calls.
"""

from .core import Digraph, Graph, GraphLike
from .traversal import (
    BreadthFirstPaths,
    DepthFirstSearch,
    DirectedDepthFirstSearch,
    UndirectedDepthFirstSearch,
    bfs,
    dfs_iterative,
    dfs_recursive,
    is_connected,
    reachable_from,
)
from .utils import UNREACHABLE, reconstruct_path
from .weighted import Edge, EdgeWeightedGraph

__all__ = [
    "GraphLike",
    "Graph",
    "Digraph",
    "Edge",
    "EdgeWeightedGraph",
    "bfs",
    "dfs_recursive",
    "dfs_iterative",
    "BreadthFirstPaths",
    "DepthFirstSearch",
    "DirectedDepthFirstSearch",
    "UndirectedDepthFirstSearch",
    "is_connected",
    "reachable_from",
    "reconstruct_path",
    "UNREACHABLE",
]

# Example usage:
# from nodesandedges.graphs import Digraph, BreadthFirstPaths
#
# G = Digraph.from_string("4\n2\n0 1\n1 2\n")
# paths = BreadthFirstPaths(G, 0)
# paths.path_to(2)  # [0, 1, 2]
