"""Analysis helpers built on numpy."""

from stochastic_sir.analysis.stats import (
    ResultStats,
    counts_array,
    empirical_rate,
    ensemble_mean,
    expected_decay_curve,
    summarize_result,
    waiting_time_histogram,
)

__all__ = [
    "ResultStats",
    "counts_array",
    "empirical_rate",
    "ensemble_mean",
    "expected_decay_curve",
    "summarize_result",
    "waiting_time_histogram",
]
