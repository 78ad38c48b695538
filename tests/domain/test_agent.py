"""Tests for stochastic_sir.domain.agent module."""

from __future__ import annotations

import pytest

from stochastic_sir.domain.agent import Agent, AgentState, step
from stochastic_sir.domain.random_source import RandomSource
from stochastic_sir.errors import InvalidArgumentError


class TestAgent:
    def test_defaults_to_susceptible_without_position(self) -> None:
        agent = Agent(agent_id=0)
        assert agent.state is AgentState.SUSCEPTIBLE
        assert not agent.is_positioned

    def test_positioned_agent(self) -> None:
        agent = Agent(agent_id=1, state=AgentState.INFECTIOUS, x=2, y=3)
        assert agent.is_positioned

    def test_half_position_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Agent(agent_id=0, x=1)


class TestStep:
    def test_infectious_recovers_when_p_is_one(self) -> None:
        agent = Agent(agent_id=0, state=AgentState.INFECTIOUS)
        assert step(agent, 1.0, RandomSource(0)) is AgentState.RECOVERED
        assert agent.state is AgentState.RECOVERED

    def test_infectious_stays_when_p_is_zero(self) -> None:
        agent = Agent(agent_id=0, state=AgentState.INFECTIOUS)
        source = RandomSource(0)
        for _ in range(100):
            step(agent, 0.0, source)
        assert agent.state is AgentState.INFECTIOUS

    @pytest.mark.parametrize("p", [0.0, 0.3, 1.0])
    def test_recovered_is_idempotent(self, p: float) -> None:
        agent = Agent(agent_id=0, state=AgentState.RECOVERED)
        source = RandomSource(0)
        for _ in range(50):
            assert step(agent, p, source) is AgentState.RECOVERED

    @pytest.mark.parametrize("p", [0.0, 0.5, 1.0])
    def test_susceptible_never_changes(self, p: float) -> None:
        agent = Agent(agent_id=0, state=AgentState.SUSCEPTIBLE)
        source = RandomSource(0)
        for _ in range(50):
            assert step(agent, p, source) is AgentState.SUSCEPTIBLE

    def test_non_infectious_agents_do_not_draw(self) -> None:
        source, mirror = RandomSource(6), RandomSource(6)
        step(Agent(agent_id=0, state=AgentState.SUSCEPTIBLE), 0.5, source)
        step(Agent(agent_id=1, state=AgentState.RECOVERED), 0.5, source)
        assert source.draw() == mirror.draw()

    def test_recovery_happens_at_most_once(self) -> None:
        agent = Agent(agent_id=0, state=AgentState.INFECTIOUS)
        source = RandomSource(1)
        transitions = 0
        for _ in range(200):
            before = agent.state
            if step(agent, 0.2, source) is not before:
                transitions += 1
        assert transitions == 1
        assert agent.state is AgentState.RECOVERED

    def test_invalid_probability_raises_for_infectious(self) -> None:
        with pytest.raises(InvalidArgumentError):
            step(Agent(agent_id=0, state=AgentState.INFECTIOUS), 1.5, RandomSource(0))
