"""Summary statistics over trial outcomes, waiting times and run results."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from stochastic_sir.config.types import validate_probability
from stochastic_sir.errors import InvalidArgumentError
from stochastic_sir.simulation.result import SimulationResult, TickCounts


def empirical_rate(outcomes: Sequence[bool]) -> float:
    """Return the fraction of successful trials."""
    if len(outcomes) == 0:
        raise InvalidArgumentError("outcomes must not be empty")
    return float(np.mean(np.asarray(outcomes, dtype=float)))


def waiting_time_histogram(samples: Sequence[int], max_ticks: int) -> np.ndarray:
    """Count samples per tick; index ``k`` holds the count for tick ``k + 1``."""
    if max_ticks < 1:
        raise InvalidArgumentError("max_ticks must be >= 1")
    arr = np.asarray(samples, dtype=int)
    if arr.size == 0:
        return np.zeros(max_ticks, dtype=int)
    if arr.min() < 1 or arr.max() > max_ticks:
        raise InvalidArgumentError(f"samples must lie in [1, {max_ticks}]")
    return np.bincount(arr - 1, minlength=max_ticks)


def expected_decay_curve(n_infectious: int, p: float, ticks: int) -> np.ndarray:
    """Expected infectious count after each tick: ``n0 * (1 - p) ** t``."""
    p = validate_probability(p)
    if n_infectious < 0:
        raise InvalidArgumentError("n_infectious must be >= 0")
    if ticks < 0:
        raise InvalidArgumentError("ticks must be >= 0")
    t = np.arange(1, ticks + 1)
    return n_infectious * (1.0 - p) ** t


def counts_array(result: SimulationResult) -> np.ndarray:
    """Return counts as an integer array of shape ``(ticks, 3)``."""
    return np.asarray(result.counts, dtype=int).reshape(len(result.counts), 3)


@dataclass(frozen=True)
class ResultStats:
    """Headline numbers for one run.

    ``peak_tick`` is the first tick at which the infectious count peaks, or 0
    for a run with no ticks.
    """

    peak_infectious: int
    peak_tick: int
    final_counts: TickCounts
    mean_recovery_tick: float | None


def summarize_result(result: SimulationResult) -> ResultStats:
    """Peak infectious load, final compartments and mean recovery tick."""
    arr = counts_array(result)
    if arr.shape[0] == 0:
        peak_infectious, peak_tick = 0, 0
        final = TickCounts(0, 0, 0)
    else:
        peak_idx = int(np.argmax(arr[:, 1]))
        peak_infectious = int(arr[peak_idx, 1])
        peak_tick = peak_idx + 1
        final = TickCounts(*(int(v) for v in arr[-1]))
    recovery = [tick for _, tick in result.recovery_ticks]
    return ResultStats(
        peak_infectious=peak_infectious,
        peak_tick=peak_tick,
        final_counts=final,
        mean_recovery_tick=float(np.mean(recovery)) if recovery else None,
    )


def ensemble_mean(results: Sequence[SimulationResult]) -> np.ndarray:
    """Mean per-tick counts across replicate runs of equal length."""
    if not results:
        raise InvalidArgumentError("results must not be empty")
    lengths = {len(r) for r in results}
    if len(lengths) != 1:
        raise InvalidArgumentError("results must all have the same number of ticks")
    stacked = np.stack([counts_array(r) for r in results])
    return stacked.mean(axis=0)
