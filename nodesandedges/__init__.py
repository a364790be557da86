"""nodesandedges - graph representations, traversals and a plain-text graph format."""

__version__ = "0.1.0"

from .diagnostics import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from .errors import (
    GraphError,
    InvalidFormatError,
    InvalidOperandError,
    OutOfRangeError,
    ResourceUnavailableError,
)
from .graphs import (
    UNREACHABLE,
    BreadthFirstPaths,
    DepthFirstSearch,
    Digraph,
    DirectedDepthFirstSearch,
    Edge,
    EdgeWeightedGraph,
    Graph,
    GraphLike,
    UndirectedDepthFirstSearch,
    bfs,
    dfs_iterative,
    dfs_recursive,
    is_connected,
    reachable_from,
    reconstruct_path,
)
from .io import (
    graph_to_string,
    parse_graph_file,
    parse_graph_stream,
    parse_graph_string,
    read_graph,
    write_graph_file,
)
from .validation import is_valid_vertex, validate_vertex

__all__ = [
    "__version__",
    # Graphs
    "GraphLike",
    "Graph",
    "Digraph",
    "Edge",
    "EdgeWeightedGraph",
    # Traversals
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
    # Text format
    "read_graph",
    "parse_graph_string",
    "parse_graph_stream",
    "parse_graph_file",
    "graph_to_string",
    "write_graph_file",
    # Validation and errors
    "is_valid_vertex",
    "validate_vertex",
    "GraphError",
    "OutOfRangeError",
    "InvalidFormatError",
    "InvalidOperandError",
    "ResourceUnavailableError",
    # Diagnostics
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
