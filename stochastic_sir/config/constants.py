"""Centralized default constants for simulation runs.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

GRID_WIDTH = 20
"""Default grid width in cells."""

GRID_HEIGHT = 20
"""Default grid height in cells."""

NUM_SUSCEPTIBLE = 90
"""Default number of initially susceptible agents."""

NUM_INFECTIOUS = 10
"""Default number of initially infectious agents."""

NUM_TICKS = 50
"""Default number of simulation ticks."""

RECOVERY_PROBABILITY = 0.1
"""Default per-tick probability that an infectious agent recovers."""

MAX_WAITING_TICKS = 1_000
"""Default upper bound on a single waiting-time sample."""

NUM_RUNS = 10
"""Default number of replicate runs in a batch."""

FLUSH_THRESHOLD = 8_192
"""Flush agent log rows to Parquet once this in-memory row count is reached."""

MAX_BATCH_WORK_UNITS = 100_000_000
"""Safety cap on total agent-ticks across all runs of a batch."""
