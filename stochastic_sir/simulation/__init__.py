"""Simulation engine: population runs, replicate batches and Parquet persistence."""

from stochastic_sir.simulation.engine import PopulationSimulator, run_batch, run_simulation
from stochastic_sir.simulation.persistence import (
    counts_table,
    flush_agent_columns,
    read_counts,
    read_results,
    write_counts,
)
from stochastic_sir.simulation.result import (
    AgentSnapshot,
    RunSummary,
    SimulationResult,
    Snapshot,
    TickCounts,
    count_states,
)

__all__ = [
    "AgentSnapshot",
    "PopulationSimulator",
    "RunSummary",
    "SimulationResult",
    "Snapshot",
    "TickCounts",
    "count_states",
    "counts_table",
    "flush_agent_columns",
    "read_counts",
    "read_results",
    "run_batch",
    "run_simulation",
    "write_counts",
]
