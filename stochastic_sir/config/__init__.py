"""Configuration layer: constants and typed config dataclasses."""

from stochastic_sir.config.constants import (
    FLUSH_THRESHOLD,
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_BATCH_WORK_UNITS,
    MAX_WAITING_TICKS,
    NUM_INFECTIOUS,
    NUM_RUNS,
    NUM_SUSCEPTIBLE,
    NUM_TICKS,
    RECOVERY_PROBABILITY,
)
from stochastic_sir.config.types import (
    BatchConfig,
    BoundaryPolicy,
    GridConfig,
    SimulationConfig,
    validate_probability,
)

__all__ = [
    "BatchConfig",
    "BoundaryPolicy",
    "FLUSH_THRESHOLD",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "GridConfig",
    "MAX_BATCH_WORK_UNITS",
    "MAX_WAITING_TICKS",
    "NUM_INFECTIOUS",
    "NUM_RUNS",
    "NUM_SUSCEPTIBLE",
    "NUM_TICKS",
    "RECOVERY_PROBABILITY",
    "SimulationConfig",
    "validate_probability",
]
