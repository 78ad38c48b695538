"""Domain layer: random source, trials, agent state machine and grid walk."""

from stochastic_sir.domain.agent import Agent, AgentState, step
from stochastic_sir.domain.grid import DIRECTIONS, neighbor_cells, random_positions, random_walk
from stochastic_sir.domain.random_source import RandomSource
from stochastic_sir.domain.trials import bernoulli, sample_waiting_times, waiting_time

__all__ = [
    "Agent",
    "AgentState",
    "DIRECTIONS",
    "RandomSource",
    "bernoulli",
    "neighbor_cells",
    "random_positions",
    "random_walk",
    "sample_waiting_times",
    "step",
    "waiting_time",
]
