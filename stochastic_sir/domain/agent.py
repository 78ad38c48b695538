"""Per-agent epidemic status and its tick transition.

Allowed transitions: INFECTIOUS -> RECOVERED. RECOVERED is terminal and
SUSCEPTIBLE agents are never infected here; transmission is not modelled.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from stochastic_sir.domain.random_source import RandomSource
from stochastic_sir.domain.trials import bernoulli
from stochastic_sir.errors import InvalidArgumentError


class AgentState(Enum):
    """Epidemic compartment of a single agent."""

    SUSCEPTIBLE = "S"
    INFECTIOUS = "I"
    RECOVERED = "R"


@dataclass
class Agent:
    """One individual, optionally positioned on the grid."""

    agent_id: int
    state: AgentState = AgentState.SUSCEPTIBLE
    x: int | None = None
    y: int | None = None

    def __post_init__(self) -> None:
        if (self.x is None) != (self.y is None):
            raise InvalidArgumentError("x and y must both be set or both be None")

    @property
    def is_positioned(self) -> bool:
        return self.x is not None


def step(agent: Agent, p: float, source: RandomSource) -> AgentState:
    """Advance ``agent`` by one tick and return its new state.

    Only infectious agents draw from ``source``; they recover with
    probability ``p``. Every other state is left untouched.
    """
    if agent.state is AgentState.INFECTIOUS and bernoulli(p, source):
        agent.state = AgentState.RECOVERED
    return agent.state
