"""Matplotlib renderers for count series and waiting-time distributions."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from stochastic_sir.analysis.stats import (
    ensemble_mean,
    expected_decay_curve,
    waiting_time_histogram,
)
from stochastic_sir.io.paths import resolve_within_base
from stochastic_sir.simulation.result import SimulationResult
from stochastic_sir.viz.theme import DEFAULT_THEME, Theme

COMPARTMENTS = ("susceptible", "infectious", "recovered")


def _prepare_output(output_path: Path, base_dir: Path | None) -> Path:
    output_path = Path(output_path)
    if base_dir is not None:
        output_path = resolve_within_base(output_path, Path(base_dir))
    output_path.parent.mkdir(parents=True, exist_ok=True)
    return output_path


def _save(fig: plt.Figure, output_path: Path, theme: Theme) -> None:
    fig.tight_layout()
    fig.savefig(output_path, dpi=theme.dpi)
    plt.close(fig)


def render_sir_curves(
    result: SimulationResult,
    output_path: Path,
    title: str | None = None,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Plot S, I and R counts against tick for one run."""
    output_path = _prepare_output(output_path, base_dir)
    ticks = np.arange(1, len(result) + 1)
    series = {
        "susceptible": result.susceptible,
        "infectious": result.infectious,
        "recovered": result.recovered,
    }

    fig, ax = plt.subplots(figsize=(7, 4))
    for name in COMPARTMENTS:
        ax.plot(
            ticks,
            series[name],
            color=theme.state_colors[name],
            label=theme.state_labels[name],
            linewidth=1.8,
        )
    ax.set_xlabel("Tick")
    ax.set_ylabel("Agents")
    ax.set_ylim(0, result.population_size)
    ax.set_title(title or f"SIR counts (N={result.population_size})")
    ax.legend(loc="best")
    ax.grid(True, alpha=0.3)
    _save(fig, output_path, theme)
    return output_path


def render_ensemble(
    results: Sequence[SimulationResult],
    output_path: Path,
    recovery_probability: float | None = None,
    initial_infectious: int | None = None,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Overlay replicate infectious curves with their mean.

    When both ``recovery_probability`` and ``initial_infectious`` are given,
    the expected decay curve is drawn for comparison.
    """
    output_path = _prepare_output(output_path, base_dir)
    mean = ensemble_mean(results)
    ticks = np.arange(1, mean.shape[0] + 1)
    color = theme.state_colors["infectious"]

    fig, ax = plt.subplots(figsize=(7, 4))
    for result in results:
        ax.plot(ticks, result.infectious, color=color, alpha=0.25, linewidth=1.0)
    ax.plot(ticks, mean[:, 1], color=color, linewidth=2.2, label="Mean infectious")
    if recovery_probability is not None and initial_infectious is not None:
        expected = expected_decay_curve(initial_infectious, recovery_probability, len(ticks))
        ax.plot(
            ticks,
            expected,
            color=theme.expected_color,
            linestyle="--",
            linewidth=1.5,
            label=f"Expected n0(1-p)^t, p={recovery_probability:g}",
        )
    ax.set_xlabel("Tick")
    ax.set_ylabel("Infectious agents")
    ax.set_title(f"Infectious curves over {len(results)} runs")
    ax.legend(loc="best")
    ax.grid(True, alpha=0.3)
    _save(fig, output_path, theme)
    return output_path


def render_waiting_time_histogram(
    samples: Sequence[int],
    max_ticks: int,
    output_path: Path,
    recovery_probability: float | None = None,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Bar chart of waiting-time frequencies, ticks 1..max_ticks.

    With ``recovery_probability`` set, overlays the geometric expectation
    ``n * p * (1 - p) ** (k - 1)``.
    """
    output_path = _prepare_output(output_path, base_dir)
    hist = waiting_time_histogram(samples, max_ticks)
    ticks = np.arange(1, max_ticks + 1)

    fig, ax = plt.subplots(figsize=(7, 4))
    ax.bar(ticks, hist, color=theme.histogram_color, width=0.9, label="Observed")
    if recovery_probability is not None and len(samples) > 0:
        p = recovery_probability
        expected = len(samples) * p * (1.0 - p) ** (ticks - 1)
        ax.plot(ticks, expected, color=theme.expected_color, linestyle="--", label="Geometric")
    ax.set_xlabel("Waiting time (ticks)")
    ax.set_ylabel("Count")
    ax.set_title(f"Waiting times (n={len(samples)})")
    ax.legend(loc="best")
    ax.grid(True, axis="y", alpha=0.3)
    _save(fig, output_path, theme)
    return output_path
