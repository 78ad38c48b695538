"""Explicit pseudo-random source passed to every stochastic operation."""

from __future__ import annotations

from collections.abc import Sequence
from random import Random
from typing import TypeVar

T = TypeVar("T")


class RandomSource:
    """Seedable uniform random stream.

    Every draw advances the internal state, so two sources built with the
    same seed yield the same sequence of draws.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = Random(seed)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed!r})"

    def reseed(self, seed: int | None) -> None:
        """Restart the stream from ``seed``."""
        self.seed = seed
        self._rng.seed(seed)

    def draw(self) -> float:
        """Return a uniform float in [0.0, 1.0)."""
        return self._rng.random()

    def choice(self, options: Sequence[T]) -> T:
        """Return one element of ``options`` chosen uniformly."""
        return self._rng.choice(options)

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        """Return ``k`` distinct elements of ``population``."""
        return self._rng.sample(population, k)
