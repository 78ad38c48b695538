"""Discrete-time stochastic SIR agent simulation."""

from stochastic_sir.domain.agent import Agent, AgentState, step
from stochastic_sir.domain.random_source import RandomSource
from stochastic_sir.domain.trials import bernoulli, waiting_time
from stochastic_sir.errors import InvalidArgumentError
from stochastic_sir.simulation.engine import PopulationSimulator, SimulationResult, TickCounts

__all__ = [
    "Agent",
    "AgentState",
    "InvalidArgumentError",
    "PopulationSimulator",
    "RandomSource",
    "SimulationResult",
    "TickCounts",
    "bernoulli",
    "step",
    "waiting_time",
]
