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


def test_grid_dimensions_are_positive_ints() -> None:
    assert isinstance(GRID_WIDTH, int) and GRID_WIDTH > 0
    assert isinstance(GRID_HEIGHT, int) and GRID_HEIGHT > 0


def test_default_population_fits_in_grid() -> None:
    assert NUM_SUSCEPTIBLE >= 0 and NUM_INFECTIOUS > 0
    assert NUM_SUSCEPTIBLE + NUM_INFECTIOUS <= GRID_WIDTH * GRID_HEIGHT


def test_recovery_probability_is_a_probability() -> None:
    assert 0.0 <= RECOVERY_PROBABILITY <= 1.0


def test_bounds_are_positive() -> None:
    assert NUM_TICKS > 0
    assert NUM_RUNS > 0
    assert MAX_WAITING_TICKS > 0
    assert FLUSH_THRESHOLD > 0


def test_default_batch_within_work_cap() -> None:
    assert NUM_RUNS * NUM_TICKS * (NUM_SUSCEPTIBLE + NUM_INFECTIOUS) < MAX_BATCH_WORK_UNITS
