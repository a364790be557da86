"""Tests for text-format token helpers."""

from __future__ import annotations

import pytest

from nodesandedges.errors import InvalidFormatError, OutOfRangeError
from nodesandedges.io.text import parse_edge_tokens
from nodesandedges.io.utils import format_weight, parse_int_token, parse_weight_token, split_tokens


class TestSplitTokens:
    def test_mixed_whitespace(self):
        assert split_tokens("  4 \t 2\r\n") == ["4", "2"]

    def test_blank_line(self):
        assert split_tokens("   \t\n") == []


class TestParseIntToken:
    """Tests for integer token parsing."""

    def test_signed_integers(self):
        assert parse_int_token("12", "vertex") == 12
        assert parse_int_token("+3", "vertex") == 3
        assert parse_int_token("-4", "vertex") == -4

    @pytest.mark.parametrize("token", ["3.0", "0x3", "1_000", "1e3", "", "seven"])
    def test_rejects_non_integers(self, token):
        with pytest.raises(InvalidFormatError, match="vertex must be an integer"):
            parse_int_token(token, "vertex", 2)


class TestParseWeightToken:
    def test_numbers(self):
        assert parse_weight_token("0.35") == 0.35
        assert parse_weight_token("1e-3") == 0.001
        assert parse_weight_token("-2") == -2.0

    @pytest.mark.parametrize("token", ["nan", "inf", "-inf", "x"])
    def test_rejects(self, token):
        with pytest.raises(InvalidFormatError, match="edge weight"):
            parse_weight_token(token)


class TestFormatWeight:
    def test_shortest_repr(self):
        assert format_weight(0.1) == "0.1"
        assert format_weight(2) == "2.0"
        assert float(format_weight(0.1 + 0.2)) == 0.1 + 0.2


class TestParseEdgeTokens:
    """Tests for parsing one edge line."""

    def test_unweighted(self):
        assert parse_edge_tokens(["0", "2"], 3, False) == (0, 2, None)
        assert parse_edge_tokens(["0", "2", "9.5"], 3, False) == (0, 2, None)

    def test_weighted(self):
        assert parse_edge_tokens(["1", "0", "0.5"], 2, True) == (1, 0, 0.5)

    def test_vertex_checked_before_weight(self):
        with pytest.raises(OutOfRangeError):
            parse_edge_tokens(["0", "5"], 3, True)
