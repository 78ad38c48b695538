"""Tests for stochastic_sir.viz.render module."""

from __future__ import annotations

from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

from stochastic_sir.config.types import SimulationConfig  # noqa: E402
from stochastic_sir.domain.random_source import RandomSource  # noqa: E402
from stochastic_sir.domain.trials import sample_waiting_times  # noqa: E402
from stochastic_sir.simulation.engine import run_simulation  # noqa: E402
from stochastic_sir.viz.render import (  # noqa: E402
    render_ensemble,
    render_sir_curves,
    render_waiting_time_histogram,
)
from stochastic_sir.viz.theme import PAPER_THEME, get_theme  # noqa: E402


def _config(seed: int) -> SimulationConfig:
    return SimulationConfig(
        n_susceptible=10, n_infectious=20, recovery_probability=0.2, ticks=15, seed=seed
    )


def test_render_sir_curves_creates_png(tmp_path: Path) -> None:
    output = render_sir_curves(run_simulation(_config(0)), tmp_path / "figs" / "sir.png")
    assert output.exists()
    assert output.stat().st_size > 0


def test_render_sir_curves_rejects_paths_outside_base_dir(tmp_path: Path) -> None:
    base = tmp_path / "base"
    base.mkdir()
    with pytest.raises(ValueError):
        render_sir_curves(
            run_simulation(_config(0)),
            tmp_path / "outside.png",
            base_dir=base,
        )


def test_render_ensemble_with_expected_curve(tmp_path: Path) -> None:
    results = [run_simulation(_config(seed)) for seed in range(4)]
    output = render_ensemble(
        results,
        tmp_path / "ensemble.png",
        recovery_probability=0.2,
        initial_infectious=20,
        theme=PAPER_THEME,
    )
    assert output.exists()


def test_render_waiting_time_histogram(tmp_path: Path) -> None:
    samples = sample_waiting_times(0.3, 20, 200, RandomSource(0))
    output = render_waiting_time_histogram(
        samples, 20, tmp_path / "hist.png", recovery_probability=0.3
    )
    assert output.exists()


def test_get_theme_unknown_raises() -> None:
    assert get_theme("paper") is PAPER_THEME
    with pytest.raises(ValueError):
        get_theme("neon")
