"""Plain-text reader and writer for graphs.

The same format is used for undirected, directed and edge-weighted graphs:

    <V>
    <E>
    <v_1> <w_1> [<weight_1>]
    ...
    <v_E> <w_E> [<weight_E>]

Rules:
    - Blank lines are skipped; the first two non-empty lines hold the vertex
      count and the edge count, one non-negative integer each.
    - Each of the next E non-empty lines holds two vertex indices separated
      by any run of whitespace. Weighted graphs require a third token, the
      weight; unweighted graphs ignore it if present.
    - Every vertex is validated against [0, V) before its edge is inserted.
    - Anything after the E-th edge line is ignored.

A malformed line aborts the whole parse; no partially built graph is ever
returned.
"""

from __future__ import annotations

import os
from typing import IO, Any, ClassVar, Iterable, Iterator, Optional, Tuple, Type, TypeVar, Union

from nodesandedges.config import DEFAULT_ENCODING
from nodesandedges.diagnostics import (
    assert_degree_bookkeeping,
    assert_edge_count,
    assert_unique_edges,
    is_debug_enabled,
)
from nodesandedges.errors import InvalidFormatError, ResourceUnavailableError
from nodesandedges.logging import get_logger
from nodesandedges.validation import validate_vertex

from .utils import format_weight, parse_int_token, parse_weight_token, split_tokens

logger = get_logger(__name__)

G = TypeVar("G", bound="TextFormatMixin")

PathLike = Union[str, "os.PathLike[str]"]


class TextFormatMixin:
    """
    Adds text-format constructors and serialization to a graph class.

    Subclasses set ``weighted`` and implement ``_insert_parsed`` to turn a
    parsed ``(v, w, weight)`` tuple into a call of their own ``add_edge``.
    """

    weighted: ClassVar[bool] = False

    @classmethod
    def from_string(cls: Type[G], text: str) -> G:
        """Build a graph from the text format held in a string."""
        return parse_graph_string(text, cls)

    @classmethod
    def from_stream(cls: Type[G], handle: IO[Any]) -> G:
        """
        Build a graph from a readable text or binary stream.

        Reading starts at the current position, and a seekable stream is put
        back to that same position afterwards (not to offset 0).
        """
        return parse_graph_stream(handle, cls)

    @classmethod
    def from_file(cls: Type[G], path: PathLike) -> G:
        """Build a graph from a file in the text format."""
        return parse_graph_file(path, cls)

    def to_string(self) -> str:
        """Serialize this graph to the text format."""
        return graph_to_string(self)

    def _insert_parsed(self, v: int, w: int, weight: Optional[float]) -> None:
        raise NotImplementedError


def _content_rows(lines: Iterable[Union[str, bytes]]) -> Iterator[Tuple[int, list]]:
    """Yield (line_number, tokens) for every non-blank line."""
    source = iter(lines)
    line_number = 0
    while True:
        line_number += 1
        try:
            raw = next(source)
            if isinstance(raw, bytes):
                raw = raw.decode(DEFAULT_ENCODING)
        except StopIteration:
            return
        except UnicodeDecodeError as e:
            raise InvalidFormatError(
                f"line is not valid {DEFAULT_ENCODING} text: {e.reason}", line_number
            ) from e
        tokens = split_tokens(raw)
        if tokens:
            yield line_number, tokens


def _read_count(rows: Iterator[Tuple[int, list]], what: str) -> int:
    try:
        line_number, tokens = next(rows)
    except StopIteration:
        raise InvalidFormatError(f"missing number of {what}")
    if len(tokens) != 1:
        raise InvalidFormatError(
            f"expected a single number of {what}, got {' '.join(tokens)!r}", line_number
        )
    count = parse_int_token(tokens[0], f"number of {what}", line_number)
    if count < 0:
        raise InvalidFormatError(f"number of {what} must be non-negative", line_number)
    return count


def parse_edge_tokens(
    tokens: list,
    vertex_count: int,
    weighted: bool,
    line_number: Optional[int] = None,
) -> Tuple[int, int, Optional[float]]:
    """
    Parse the tokens of one edge line.

    Parameters
    ----------
    tokens : list of str
        Non-empty tokens of the line.
    vertex_count : int
        Number of vertices V; both endpoints must lie in [0, V).
    weighted : bool
        Whether a weight token is required.
    line_number : int, optional
        Line number used in error messages.

    Returns
    -------
    tuple
        ``(v, w, weight)``; ``weight`` is None for unweighted graphs.

    Raises
    ------
    InvalidFormatError
        On a missing or extra token, or a token that does not parse.
    OutOfRangeError
        If an endpoint is outside [0, V).
    """
    if len(tokens) < 2:
        raise InvalidFormatError(
            f"edge line needs two vertices, got {' '.join(tokens)!r}", line_number
        )
    if len(tokens) > 3:
        raise InvalidFormatError(
            f"edge line has too many tokens: {' '.join(tokens)!r}", line_number
        )
    v = parse_int_token(tokens[0], "vertex", line_number)
    w = parse_int_token(tokens[1], "vertex", line_number)
    validate_vertex(v, vertex_count)
    validate_vertex(w, vertex_count)

    weight = None
    if weighted:
        if len(tokens) != 3:
            raise InvalidFormatError(
                f"weighted edge line needs a weight, got {' '.join(tokens)!r}", line_number
            )
        weight = parse_weight_token(tokens[2], line_number)
    return v, w, weight


def read_graph(lines: Iterable[Union[str, bytes]], graph_cls: Type[G]) -> G:
    """
    Build a graph of type ``graph_cls`` from lines in the text format.

    This is the shared core behind the string, stream and file readers.

    Parameters
    ----------
    lines : iterable of str or bytes
        Input lines; consumed only up to the last edge line.
    graph_cls : type
        Graph class taking the vertex count as its only required argument.

    Returns
    -------
    graph_cls
        The fully built graph.

    Raises
    ------
    InvalidFormatError
        If the header or an edge line is malformed, or edge lines are missing.
    OutOfRangeError
        If an edge references a vertex outside [0, V).
    """
    rows = _content_rows(lines)
    vertices = _read_count(rows, "vertices")
    edges = _read_count(rows, "edges")
    logger.debug("reading %s with %d vertices and %d edges", graph_cls.__name__, vertices, edges)

    graph = graph_cls(vertices)
    for i in range(edges):
        try:
            line_number, tokens = next(rows)
        except StopIteration:
            raise InvalidFormatError(f"expected {edges} edge lines, found {i}")
        v, w, weight = parse_edge_tokens(tokens, vertices, graph_cls.weighted, line_number)
        graph._insert_parsed(v, w, weight)

    if is_debug_enabled():
        if graph.directed:
            assert_degree_bookkeeping(graph)
        elif graph_cls.weighted:
            assert_unique_edges(graph)
        else:
            assert_edge_count(graph)

    logger.debug("built %s: %d vertices, %d edges", graph_cls.__name__, vertices, edges)
    return graph


def _iter_stream_lines(handle: IO[Any]) -> Iterator[Union[str, bytes]]:
    # readline keeps tell()/seek() usable on text streams, unlike iteration
    while True:
        line = handle.readline()
        if not line:
            return
        yield line


def parse_graph_string(text: str, graph_cls: Type[G]) -> G:
    """
    Parse a graph from an in-memory string.

    Parameters
    ----------
    text : str
        Graph in the text format.
    graph_cls : type
        Graph class to build.

    Returns
    -------
    graph_cls
        Parsed graph.
    """
    return read_graph(text.splitlines(), graph_cls)


def parse_graph_stream(handle: IO[Any], graph_cls: Type[G]) -> G:
    """
    Parse a graph from a readable text or binary stream.

    The stream is read from its current position, not rewound to offset 0
    first. After a successful parse a seekable stream is returned to the
    position it started at (offset 0 for a freshly opened stream), so the call
    does not consume input from the caller's point of view. A non-seekable
    stream is left just after the last edge line. Binary streams are decoded
    as UTF-8.

    Raises
    ------
    ValueError
        If ``handle`` is None.
    InvalidFormatError, OutOfRangeError
        As for :func:`read_graph`; the stream position is then unspecified.
    """
    if handle is None:
        raise ValueError("stream argument is None")

    start = handle.tell() if handle.seekable() else None
    graph = read_graph(_iter_stream_lines(handle), graph_cls)
    if start is not None:
        handle.seek(start)
    return graph


def parse_graph_file(path: PathLike, graph_cls: Type[G]) -> G:
    """
    Parse a graph from a file; the file is always closed.

    The file is read as bytes and decoded line by line, so an undecodable
    line is reported with its line number.

    Raises
    ------
    ResourceUnavailableError
        If the file cannot be opened.
    InvalidFormatError, OutOfRangeError
        As for :func:`read_graph`.
    """
    try:
        handle = open(path, "rb")
    except OSError as e:
        raise ResourceUnavailableError(f"could not open graph file {path}: {e}") from e

    with handle:
        return read_graph(_iter_stream_lines(handle), graph_cls)


def graph_to_string(graph: Any) -> str:
    """
    Serialize a graph to the text format.

    Edges are written in the order reported by ``graph.edges()``, which for
    every graph class reproduces the same adjacency ordering when read back.

    Parameters
    ----------
    graph : Graph, Digraph or EdgeWeightedGraph
        Graph to serialize.

    Returns
    -------
    str
        Text ending with a newline.
    """
    lines = [str(graph.vertex_count()), str(graph.edge_count())]
    if getattr(graph, "weighted", False):
        for e in graph.edges():
            lines.append(f"{e.v} {e.w} {format_weight(e.weight)}")
    else:
        for v, w in graph.edges():
            lines.append(f"{v} {w}")
    return "\n".join(lines) + "\n"


def write_graph_file(graph: Any, path: PathLike) -> None:
    """
    Write a graph to ``path`` in the text format.

    Raises
    ------
    ResourceUnavailableError
        If the file cannot be opened for writing.
    """
    text = graph_to_string(graph)
    try:
        handle = open(path, "w", encoding=DEFAULT_ENCODING)
    except OSError as e:
        raise ResourceUnavailableError(f"could not open graph file {path}: {e}") from e

    with handle:
        handle.write(text)
    logger.debug("wrote %d edges to %s", graph.edge_count(), path)


__all__ = [
    "TextFormatMixin",
    "read_graph",
    "parse_edge_tokens",
    "parse_graph_string",
    "parse_graph_stream",
    "parse_graph_file",
    "graph_to_string",
    "write_graph_file",
]
