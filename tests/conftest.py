"""Pytest configuration and shared fixtures for nodesandedges tests.

This module provides:
- Deterministic RNG fixtures for numpy
- Sample graphs in the plain-text format
- Debug-mode isolation between tests
"""

import os

import numpy as np
import pytest

from nodesandedges.diagnostics import is_debug_enabled, set_debug_enabled

# 13 vertices, 3 components
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

# 13 vertices, 22 arcs
TINY_DG = """\
13
22
 4  2
 2  3
 3  2
 6  0
 0  1
 2  0
11 12
12  9
 9 10
 9 11
 7  9
10 12
11  4
 4  3
 3  5
 6  8
 8  6
 5  4
 0  5
 6  4
 6  9
 7  6
"""

# 8 vertices, 16 weighted edges
TINY_EWG = """\
8
16
4 5 0.35
4 7 0.37
5 7 0.28
0 7 0.16
1 5 0.32
0 4 0.38
2 3 0.17
1 7 0.19
0 2 0.26
1 2 0.36
1 3 0.29
2 7 0.34
6 2 0.40
3 6 0.52
6 0 0.58
6 4 0.93
"""


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Auto-use fixture that undoes any debug-mode change made by a test."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)


@pytest.fixture
def tiny_g_text() -> str:
    return TINY_G


@pytest.fixture
def tiny_dg_text() -> str:
    return TINY_DG


@pytest.fixture
def tiny_ewg_text() -> str:
    return TINY_EWG
