"""Bernoulli trials and waiting-time sampling."""

from __future__ import annotations

from stochastic_sir.config.types import validate_probability
from stochastic_sir.domain.random_source import RandomSource
from stochastic_sir.errors import InvalidArgumentError


def bernoulli(p: float, source: RandomSource) -> bool:
    """Return True with probability ``p``.

    Draws once from ``source`` and succeeds iff the draw is strictly below
    ``p``, so ``p == 0`` never succeeds and ``p == 1`` always does.
    """
    p = validate_probability(p)
    return source.draw() < p


def waiting_time(p: float, max_ticks: int, source: RandomSource) -> int:
    """Return the tick of the first successful trial, capped at ``max_ticks``.

    Ticks are counted from 1 and every tick consumes exactly one draw.
    ``max_ticks == 0`` returns 0 without drawing.
    """
    p = validate_probability(p)
    if max_ticks < 0:
        raise InvalidArgumentError(f"max_ticks must be >= 0, got {max_ticks}")
    if max_ticks == 0:
        return 0
    tick = 1
    while not bernoulli(p, source) and tick < max_ticks:
        tick += 1
    return tick


def sample_waiting_times(p: float, max_ticks: int, n: int, source: RandomSource) -> list[int]:
    """Draw ``n`` independent waiting times from the same source."""
    if n < 0:
        raise InvalidArgumentError(f"n must be >= 0, got {n}")
    p = validate_probability(p)
    if max_ticks < 0:
        raise InvalidArgumentError(f"max_ticks must be >= 0, got {max_ticks}")
    return [waiting_time(p, max_ticks, source) for _ in range(n)]
