"""Token helpers for the plain-text graph format.

This module provides helper functions for splitting lines into tokens,
parsing vertex/count integers and edge weights, and formatting weights so
that they survive a write/read cycle unchanged.
"""

from __future__ import annotations

import math
import re
from typing import List, Optional

from nodesandedges.errors import InvalidFormatError

_INT_TOKEN = re.compile(r"^[+-]?[0-9]+$")


def split_tokens(line: str) -> List[str]:
    """
    Split a line on runs of whitespace, discarding empty tokens.

    Parameters
    ----------
    line : str
        Raw input line (leading/trailing whitespace allowed).

    Returns
    -------
    List[str]
        Non-empty tokens in order.
    """
    return line.split()


def parse_int_token(
    token: str, what: str, line_number: Optional[int] = None
) -> int:
    """
    Parse a decimal integer token.

    Only an optional sign followed by digits is accepted; ``"3.0"``,
    ``"0x3"`` or ``"1_000"`` are rejected.

    Parameters
    ----------
    token : str
        Token to parse.
    what : str
        Name of the value, used in the error message.
    line_number : int, optional
        1-based line number for the error message.

    Returns
    -------
    int
        Parsed value.

    Raises
    ------
    InvalidFormatError
        If the token is not an integer.
    """
    if not _INT_TOKEN.match(token):
        raise InvalidFormatError(f"{what} must be an integer, got {token!r}", line_number)
    return int(token)


def parse_weight_token(token: str, line_number: Optional[int] = None) -> float:
    """
    Parse an edge weight token as a finite float.

    Raises
    ------
    InvalidFormatError
        If the token is not a number, or is NaN or infinite.
    """
    try:
        weight = float(token)
    except ValueError:
        raise InvalidFormatError(f"edge weight must be a number, got {token!r}", line_number)
    if not math.isfinite(weight):
        raise InvalidFormatError(f"edge weight must be finite, got {token!r}", line_number)
    return weight


def format_weight(weight: float) -> str:
    """
    Format a weight for the text format.

    Uses the shortest representation that parses back to the same float,
    so serialized graphs round-trip exactly.
    """
    return repr(float(weight))


__all__ = [
    "split_tokens",
    "parse_int_token",
    "parse_weight_token",
    "format_weight",
]
