"""
Configuration constants for pathsearch.

Benchmark tunables can be overridden with environment variables;
command-line flags override both.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

# =============================================================================
# Benchmark Configuration
# =============================================================================

# Number of timed runs per algorithm; the median is reported
REPEATS = int(os.getenv("PATHSEARCH_REPEATS", "5"))

# Where run_all writes results.json and plot_results writes charts
RESULTS_DIR = Path(os.getenv("PATHSEARCH_RESULTS_DIR", Path.cwd() / "results"))
RESULTS_JSON = RESULTS_DIR / "results.json"

# Problems the benchmark runner knows how to build
PROBLEMS = ("romania", "grid", "diamond")
DEFAULT_PROBLEM = "romania"

# =============================================================================
# Plot Configuration
# =============================================================================

PLOT_DPI = 160
PLOT_FIGSIZE = (6, 4)

# =============================================================================
# Logging Configuration
# =============================================================================

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Log level, one of LOG_LEVELS
LOG_LEVEL = os.getenv("PATHSEARCH_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for command-line entry points."""
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
