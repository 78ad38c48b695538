"""Tests for stochastic_sir.analysis.stats module."""

from __future__ import annotations

import numpy as np
import pytest

from stochastic_sir.analysis.stats import (
    counts_array,
    empirical_rate,
    ensemble_mean,
    expected_decay_curve,
    summarize_result,
    waiting_time_histogram,
)
from stochastic_sir.domain.agent import Agent, AgentState
from stochastic_sir.errors import InvalidArgumentError
from stochastic_sir.simulation.engine import PopulationSimulator
from stochastic_sir.simulation.result import SimulationResult, TickCounts


class TestEmpiricalRate:
    def test_fraction_of_successes(self) -> None:
        assert empirical_rate([True, False, True, True]) == pytest.approx(0.75)

    def test_empty_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            empirical_rate([])


class TestWaitingTimeHistogram:
    def test_counts_per_tick(self) -> None:
        hist = waiting_time_histogram([1, 1, 3, 5], max_ticks=5)
        assert hist.tolist() == [2, 0, 1, 0, 1]

    def test_empty_samples(self) -> None:
        assert waiting_time_histogram([], max_ticks=3).tolist() == [0, 0, 0]

    def test_out_of_range_sample_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            waiting_time_histogram([0, 2], max_ticks=3)
        with pytest.raises(InvalidArgumentError):
            waiting_time_histogram([4], max_ticks=3)

    def test_invalid_bound_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            waiting_time_histogram([1], max_ticks=0)


class TestExpectedDecayCurve:
    def test_geometric_decay(self) -> None:
        curve = expected_decay_curve(100, 0.5, 3)
        np.testing.assert_allclose(curve, [50.0, 25.0, 12.5])

    def test_extremes(self) -> None:
        np.testing.assert_allclose(expected_decay_curve(10, 0.0, 4), [10.0] * 4)
        np.testing.assert_allclose(expected_decay_curve(10, 1.0, 2), [0.0, 0.0])

    def test_zero_ticks(self) -> None:
        assert expected_decay_curve(10, 0.3, 0).shape == (0,)

    def test_invalid_inputs_raise(self) -> None:
        with pytest.raises(InvalidArgumentError):
            expected_decay_curve(10, 1.5, 3)
        with pytest.raises(InvalidArgumentError):
            expected_decay_curve(-1, 0.5, 3)
        with pytest.raises(InvalidArgumentError):
            expected_decay_curve(10, 0.5, -1)

    def test_matches_simulated_mean(self) -> None:
        agents = [Agent(agent_id=i, state=AgentState.INFECTIOUS) for i in range(10_000)]
        result = PopulationSimulator(seed=0).run(agents, p=0.2, ticks=5)
        expected = expected_decay_curve(10_000, 0.2, 5)
        np.testing.assert_allclose(result.infectious, expected, rtol=0.05)


class TestSummarizeResult:
    def test_peak_and_final(self) -> None:
        result = SimulationResult(
            counts=(TickCounts(1, 3, 0), TickCounts(1, 4, 0), TickCounts(1, 2, 2)),
            population_size=5,
            recovery_ticks=((0, 3), (1, 3)),
        )
        stats = summarize_result(result)
        assert stats.peak_infectious == 4
        assert stats.peak_tick == 2
        assert stats.final_counts == (1, 2, 2)
        assert stats.mean_recovery_tick == pytest.approx(3.0)

    def test_empty_result(self) -> None:
        stats = summarize_result(SimulationResult(counts=(), population_size=4))
        assert stats.peak_infectious == 0
        assert stats.peak_tick == 0
        assert stats.mean_recovery_tick is None

    def test_counts_array_shape(self) -> None:
        result = SimulationResult(counts=(TickCounts(1, 2, 3),) * 4, population_size=6)
        assert counts_array(result).shape == (4, 3)
        assert counts_array(SimulationResult(counts=(), population_size=1)).shape == (0, 3)


class TestEnsembleMean:
    def test_mean_of_runs(self) -> None:
        a = SimulationResult(counts=(TickCounts(0, 2, 0), TickCounts(0, 0, 2)), population_size=2)
        b = SimulationResult(counts=(TickCounts(0, 2, 0), TickCounts(0, 2, 0)), population_size=2)
        np.testing.assert_allclose(ensemble_mean([a, b]), [[0, 2, 0], [0, 1, 1]])

    def test_length_mismatch_raises(self) -> None:
        a = SimulationResult(counts=(TickCounts(0, 1, 0),), population_size=1)
        b = SimulationResult(counts=(), population_size=1)
        with pytest.raises(InvalidArgumentError):
            ensemble_mean([a, b])

    def test_empty_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            ensemble_mean([])
