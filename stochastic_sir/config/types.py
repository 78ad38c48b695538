"""Configuration dataclasses for single runs and replicate batches.

All configs are frozen and validate themselves in ``__post_init__`` so an
invalid parameter fails at construction rather than mid-run.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from numbers import Real
from pathlib import Path

from stochastic_sir.config.constants import (
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_BATCH_WORK_UNITS,
    NUM_INFECTIOUS,
    NUM_RUNS,
    NUM_SUSCEPTIBLE,
    NUM_TICKS,
    RECOVERY_PROBABILITY,
)
from stochastic_sir.errors import InvalidArgumentError

__all__ = [
    "BatchConfig",
    "BoundaryPolicy",
    "GridConfig",
    "SimulationConfig",
    "validate_probability",
]


def validate_probability(p: float, name: str = "p") -> float:
    """Return ``p`` as a float, raising if it is not a probability in [0, 1]."""
    if isinstance(p, bool) or not isinstance(p, Real):
        raise InvalidArgumentError(f"{name} must be a real number, got {p!r}")
    value = float(p)
    # NaN fails both comparisons
    if not 0.0 <= value <= 1.0:
        raise InvalidArgumentError(f"{name} must be in [0.0, 1.0], got {p!r}")
    return value


class BoundaryPolicy(Enum):
    """How a random walk treats moves that would leave the grid."""

    WRAP = "wrap"
    CLAMP = "clamp"
    REFLECT = "reflect"


@dataclass(frozen=True)
class GridConfig:
    """Grid extent and edge handling for random-walk movement."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    boundary: BoundaryPolicy = BoundaryPolicy.WRAP

    def __post_init__(self) -> None:
        if self.width < 1:
            raise InvalidArgumentError("width must be >= 1")
        if self.height < 1:
            raise InvalidArgumentError("height must be >= 1")

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters for one simulation run."""

    n_susceptible: int = NUM_SUSCEPTIBLE
    n_infectious: int = NUM_INFECTIOUS
    recovery_probability: float = RECOVERY_PROBABILITY
    ticks: int = NUM_TICKS
    seed: int | None = None
    grid: GridConfig | None = None
    record_snapshots: bool = False

    def __post_init__(self) -> None:
        if self.n_susceptible < 0:
            raise InvalidArgumentError("n_susceptible must be >= 0")
        if self.n_infectious < 0:
            raise InvalidArgumentError("n_infectious must be >= 0")
        if self.population_size < 1:
            raise InvalidArgumentError("population must contain at least one agent")
        if self.ticks < 0:
            raise InvalidArgumentError("ticks must be >= 0")
        validate_probability(self.recovery_probability, "recovery_probability")
        if self.grid is not None and self.population_size > self.grid.width * self.grid.height:
            raise InvalidArgumentError("population does not fit on the grid")

    @property
    def population_size(self) -> int:
        return self.n_susceptible + self.n_infectious


@dataclass(frozen=True)
class BatchConfig:
    """Replicate-batch parameters: one simulation config run under many seeds."""

    simulation: SimulationConfig = SimulationConfig()
    n_runs: int = NUM_RUNS
    base_seed: int = 0
    out_dir: Path = Path("data")

    def __post_init__(self) -> None:
        if self.n_runs < 1:
            raise InvalidArgumentError("n_runs must be >= 1")
        work_units = self.n_runs * self.simulation.ticks * self.simulation.population_size
        if work_units > MAX_BATCH_WORK_UNITS:
            raise InvalidArgumentError(
                f"batch workload {work_units} exceeds limit {MAX_BATCH_WORK_UNITS}"
            )
