"""Immutable result containers produced by a simulation run."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple

from stochastic_sir.domain.agent import Agent, AgentState


class TickCounts(NamedTuple):
    """Aggregate compartment counts after one tick."""

    susceptible: int
    infectious: int
    recovered: int

    @property
    def total(self) -> int:
        return self.susceptible + self.infectious + self.recovered


@dataclass(frozen=True)
class AgentSnapshot:
    """Immutable view of a single agent after one tick."""

    agent_id: int
    x: int | None
    y: int | None
    state: AgentState

    @classmethod
    def of(cls, agent: Agent) -> AgentSnapshot:
        return cls(agent_id=agent.agent_id, x=agent.x, y=agent.y, state=agent.state)


Snapshot = tuple[AgentSnapshot, ...]
"""All agents in id order at one tick."""


def count_states(agents: Iterable[Agent]) -> TickCounts:
    """Tally agents per compartment."""
    s = i = r = 0
    for agent in agents:
        if agent.state is AgentState.SUSCEPTIBLE:
            s += 1
        elif agent.state is AgentState.INFECTIOUS:
            i += 1
        else:
            r += 1
    return TickCounts(s, i, r)


@dataclass(frozen=True)
class SimulationResult:
    """Per-tick S/I/R counts for one run.

    ``counts[t]`` holds the aggregates after tick ``t + 1``; every entry sums
    to ``population_size``. ``recovery_ticks`` pairs each agent that
    recovered during the run with the tick it recovered at.
    """

    counts: tuple[TickCounts, ...]
    population_size: int
    recovery_ticks: tuple[tuple[int, int], ...] = ()
    snapshots: tuple[Snapshot, ...] | None = None
    seed: int | None = None

    def __iter__(self) -> Iterator[TickCounts]:
        return iter(self.counts)

    def __len__(self) -> int:
        return len(self.counts)

    def __getitem__(self, index: int) -> TickCounts:
        return self.counts[index]

    @property
    def ticks(self) -> int:
        return len(self.counts)

    @property
    def susceptible(self) -> list[int]:
        return [c.susceptible for c in self.counts]

    @property
    def infectious(self) -> list[int]:
        return [c.infectious for c in self.counts]

    @property
    def recovered(self) -> list[int]:
        return [c.recovered for c in self.counts]


@dataclass(frozen=True)
class RunSummary:
    """Top-level record for one replicate of a batch."""

    run_id: str
    seed: int
    population_size: int
    ticks: int
    peak_infectious: int
    peak_tick: int
    final_counts: TickCounts
    mean_recovery_tick: float | None
