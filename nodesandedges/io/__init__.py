"""I/O modules for the plain-text graph format."""

from .text import (
    TextFormatMixin,
    graph_to_string,
    parse_edge_tokens,
    parse_graph_file,
    parse_graph_stream,
    parse_graph_string,
    read_graph,
    write_graph_file,
)
from .utils import format_weight, parse_int_token, parse_weight_token, split_tokens

__all__ = [
    "TextFormatMixin",
    "read_graph",
    "parse_edge_tokens",
    "parse_graph_string",
    "parse_graph_stream",
    "parse_graph_file",
    "graph_to_string",
    "write_graph_file",
    "split_tokens",
    "parse_int_token",
    "parse_weight_token",
    "format_weight",
]
