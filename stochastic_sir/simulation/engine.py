"""Population simulator and seeded replicate batches."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from stochastic_sir.analysis.stats import summarize_result
from stochastic_sir.config.constants import FLUSH_THRESHOLD
from stochastic_sir.config.types import (
    BatchConfig,
    GridConfig,
    SimulationConfig,
    validate_probability,
)
from stochastic_sir.domain.agent import Agent, AgentState, step
from stochastic_sir.domain.grid import random_positions, random_walk
from stochastic_sir.domain.random_source import RandomSource
from stochastic_sir.errors import InvalidArgumentError
from stochastic_sir.io.paths import (
    agent_log_path,
    counts_path,
    logs_dir,
    run_summary_path,
    runs_dir,
)
from stochastic_sir.io.schemas import COUNTS_SCHEMA, RUN_PAYLOAD_SCHEMA_VERSION, RUN_SUMMARY_SCHEMA
from stochastic_sir.simulation.persistence import counts_table, flush_agent_columns
from stochastic_sir.simulation.result import (
    AgentSnapshot,
    RunSummary,
    SimulationResult,
    TickCounts,
    count_states,
)

logger = logging.getLogger(__name__)


class PopulationSimulator:
    """Advance a population of agents tick by tick and record S/I/R counts.

    Each ``run`` draws from a fresh ``RandomSource(seed)`` unless a source is
    passed in, so repeated runs with the same seed and inputs are identical.
    The caller's agents are copied and never mutated.
    """

    def __init__(
        self,
        seed: int | None = None,
        grid: GridConfig | None = None,
        record_snapshots: bool = False,
    ) -> None:
        self.seed = seed
        self.grid = grid
        self.record_snapshots = record_snapshots

    def populate(
        self,
        n_susceptible: int,
        n_infectious: int,
        source: RandomSource | None = None,
    ) -> list[Agent]:
        """Build an initial population with ids ``0..n-1``, infectious first.

        Agents are placed on distinct random cells when a grid is configured.
        """
        if n_susceptible < 0 or n_infectious < 0:
            raise InvalidArgumentError("agent counts must be >= 0")
        n = n_susceptible + n_infectious
        states = [AgentState.INFECTIOUS] * n_infectious + [AgentState.SUSCEPTIBLE] * n_susceptible
        agents = [Agent(agent_id=i, state=state) for i, state in enumerate(states)]
        if self.grid is not None:
            source = source if source is not None else RandomSource(self.seed)
            for agent, (x, y) in zip(agents, random_positions(n, self.grid, source), strict=True):
                agent.x, agent.y = x, y
        return agents

    def _validate(self, agents: Sequence[Agent], p: float, ticks: int) -> float:
        if ticks < 0:
            raise InvalidArgumentError(f"ticks must be >= 0, got {ticks}")
        p = validate_probability(p)
        if len(agents) == 0:
            raise InvalidArgumentError("initial_agents must not be empty")
        ids = [agent.agent_id for agent in agents]
        if len(set(ids)) != len(ids):
            raise InvalidArgumentError("agent ids must be unique")
        if self.grid is not None:
            for agent in agents:
                if agent.x is None or agent.y is None:
                    raise InvalidArgumentError(f"agent {agent.agent_id} has no grid position")
                if not self.grid.contains(agent.x, agent.y):
                    raise InvalidArgumentError(
                        f"agent {agent.agent_id} at ({agent.x}, {agent.y}) is outside the grid"
                    )
        return p

    def run(
        self,
        initial_agents: Sequence[Agent],
        p: float,
        ticks: int,
        source: RandomSource | None = None,
    ) -> SimulationResult:
        """Run ``ticks`` ticks with per-tick recovery probability ``p``.

        Within a tick every agent is stepped in id order, then every agent
        walks when a grid is configured; counts are recorded after both.
        """
        p = self._validate(initial_agents, p, ticks)
        if source is None:
            source = RandomSource(self.seed)
        agents = sorted((replace(agent) for agent in initial_agents), key=lambda a: a.agent_id)

        counts: list[TickCounts] = []
        recovery_ticks: list[tuple[int, int]] = []
        snapshots: list[tuple[AgentSnapshot, ...]] | None = [] if self.record_snapshots else None

        for tick in range(1, ticks + 1):
            for agent in agents:
                before = agent.state
                if step(agent, p, source) is not before:
                    recovery_ticks.append((agent.agent_id, tick))
            if self.grid is not None:
                for agent in agents:
                    random_walk(agent, self.grid, source)
            counts.append(count_states(agents))
            if snapshots is not None:
                snapshots.append(tuple(AgentSnapshot.of(agent) for agent in agents))

        logger.debug(
            "run finished: seed=%s agents=%d ticks=%d recovered=%d",
            source.seed,
            len(agents),
            ticks,
            len(recovery_ticks),
        )
        return SimulationResult(
            counts=tuple(counts),
            population_size=len(agents),
            recovery_ticks=tuple(recovery_ticks),
            snapshots=tuple(snapshots) if snapshots is not None else None,
            seed=source.seed,
        )


def run_simulation(
    config: SimulationConfig, source: RandomSource | None = None
) -> SimulationResult:
    """Populate and run one simulation from a config.

    Placement and the run share one source, so a seeded config is fully
    reproducible.
    """
    simulator = PopulationSimulator(
        seed=config.seed,
        grid=config.grid,
        record_snapshots=config.record_snapshots,
    )
    if source is None:
        source = RandomSource(config.seed)
    agents = simulator.populate(config.n_susceptible, config.n_infectious, source=source)
    return simulator.run(agents, config.recovery_probability, config.ticks, source=source)


def _deterministic_run_id(index: int, seed: int) -> str:
    """Build reproducible run ID stable across batches for identical seeds."""
    return f"run{index}_seed{seed}"


def run_batch(config: BatchConfig) -> list[RunSummary]:
    """Run seeded replicates and persist JSON/Parquet outputs.

    Replicate ``i`` uses seed ``base_seed + i``. Outputs land under
    ``config.out_dir``: ``logs/counts.parquet``, ``logs/run_summary.parquet``,
    ``logs/agent_log.parquet`` when snapshots are recorded, and one
    ``runs/<run_id>.json`` per replicate.
    """
    sim_cfg = config.simulation
    out_dir = Path(config.out_dir)
    runs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    counts_writer: pq.ParquetWriter | None = None
    agent_writer: pq.ParquetWriter | None = None
    summaries: list[RunSummary] = []
    agent_columns: dict[str, list[int | str | None]] = {
        "run_id": [],
        "tick": [],
        "agent_id": [],
        "x": [],
        "y": [],
        "state": [],
    }

    logger.info(
        "starting batch: n_runs=%d base_seed=%d out_dir=%s",
        config.n_runs,
        config.base_seed,
        out_dir,
    )
    try:
        for i in range(config.n_runs):
            seed = config.base_seed + i
            run_id = _deterministic_run_id(i, seed)
            result = run_simulation(replace(sim_cfg, seed=seed))

            table = counts_table(run_id, result)
            if counts_writer is None:
                counts_writer = pq.ParquetWriter(counts_path(out_dir), COUNTS_SCHEMA)
            counts_writer.write_table(table)

            if result.snapshots is not None:
                for tick, snapshot in enumerate(result.snapshots, start=1):
                    for agent in snapshot:
                        agent_columns["run_id"].append(run_id)
                        agent_columns["tick"].append(tick)
                        agent_columns["agent_id"].append(agent.agent_id)
                        agent_columns["x"].append(agent.x)
                        agent_columns["y"].append(agent.y)
                        agent_columns["state"].append(agent.state.value)
                    if len(agent_columns["run_id"]) >= FLUSH_THRESHOLD:
                        agent_writer = flush_agent_columns(
                            agent_columns=agent_columns,
                            agent_log_path=agent_log_path(out_dir),
                            agent_writer=agent_writer,
                        )

            stats = summarize_result(result)
            summary = RunSummary(
                run_id=run_id,
                seed=seed,
                population_size=result.population_size,
                ticks=result.ticks,
                peak_infectious=stats.peak_infectious,
                peak_tick=stats.peak_tick,
                final_counts=stats.final_counts,
                mean_recovery_tick=stats.mean_recovery_tick,
            )
            summaries.append(summary)

            run_payload = {
                "run_id": run_id,
                "summary": {
                    "peak_infectious": summary.peak_infectious,
                    "peak_tick": summary.peak_tick,
                    "final_counts": summary.final_counts._asdict(),
                    "mean_recovery_tick": summary.mean_recovery_tick,
                },
                "metadata": {
                    "seed": seed,
                    "n_susceptible": sim_cfg.n_susceptible,
                    "n_infectious": sim_cfg.n_infectious,
                    "recovery_probability": sim_cfg.recovery_probability,
                    "ticks": sim_cfg.ticks,
                    "grid_width": sim_cfg.grid.width if sim_cfg.grid else None,
                    "grid_height": sim_cfg.grid.height if sim_cfg.grid else None,
                    "boundary": sim_cfg.grid.boundary.value if sim_cfg.grid else None,
                    "schema_version": RUN_PAYLOAD_SCHEMA_VERSION,
                },
            }
            (runs_dir(out_dir) / f"{run_id}.json").write_text(
                json.dumps(run_payload, ensure_ascii=False, indent=2)
            )
            logger.debug("wrote run %s", run_id)

        agent_writer = flush_agent_columns(
            agent_columns=agent_columns,
            agent_log_path=agent_log_path(out_dir),
            agent_writer=agent_writer,
        )
    finally:
        if counts_writer is not None:
            counts_writer.close()
        if agent_writer is not None:
            agent_writer.close()

    summary_table = pa.Table.from_pylist(
        [
            {
                "run_id": s.run_id,
                "seed": s.seed,
                "population_size": s.population_size,
                "ticks": s.ticks,
                "peak_infectious": s.peak_infectious,
                "peak_tick": s.peak_tick,
                "final_susceptible": s.final_counts.susceptible,
                "final_infectious": s.final_counts.infectious,
                "final_recovered": s.final_counts.recovered,
                "mean_recovery_tick": s.mean_recovery_tick,
            }
            for s in summaries
        ],
        schema=RUN_SUMMARY_SCHEMA,
    )
    pq.write_table(summary_table, run_summary_path(out_dir))
    logger.info("batch finished: %d runs written to %s", len(summaries), out_dir)
    return summaries
