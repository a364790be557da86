"""
Configuration constants for nodesandedges.

Settings that can be overridden from the environment are read once at
import time; everything else is a plain module-level default.
"""

import os

# =============================================================================
# Environment
# =============================================================================

# Set to 1/true/yes/on to run invariant checks after construction and queries
DEBUG_ENV_VAR = "NODESANDEDGES_DEBUG"

# Log level name (DEBUG, INFO, WARNING, ERROR) for package loggers
LOG_LEVEL_ENV_VAR = "NODESANDEDGES_LOG_LEVEL"

DEFAULT_LOG_LEVEL = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING")

# =============================================================================
# Text format
# =============================================================================

# Encoding used when reading and writing graph files
DEFAULT_ENCODING = "utf-8"

# Decimals shown when an edge weight is rendered for humans (not for files)
WEIGHT_DISPLAY_PRECISION = 5

# =============================================================================
# Random graphs
# =============================================================================

# Half-open [low, high) range for sampled edge weights
DEFAULT_WEIGHT_RANGE = (0.0, 100.0)


def env_flag(name: str, default: str = "0") -> bool:
    """Interpret an environment variable as a boolean switch."""
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")
