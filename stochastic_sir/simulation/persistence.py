"""Parquet persistence helpers for count series and agent logs."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from stochastic_sir.io.schemas import AGENT_LOG_SCHEMA, COUNTS_SCHEMA
from stochastic_sir.simulation.result import SimulationResult, TickCounts


def flush_agent_columns(
    agent_columns: dict[str, list[int | str | None]],
    agent_log_path: Path,
    agent_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated agent rows to Parquet and clear in-memory buffers."""
    if not agent_columns["run_id"]:
        return agent_writer
    table = pa.Table.from_pydict(agent_columns, schema=AGENT_LOG_SCHEMA)
    if agent_writer is None:
        agent_writer = pq.ParquetWriter(agent_log_path, AGENT_LOG_SCHEMA)
    agent_writer.write_table(table)
    for values in agent_columns.values():
        values.clear()
    return agent_writer


def counts_table(run_id: str, result: SimulationResult) -> pa.Table:
    """Build the counts table for one run, ticks numbered from 1."""
    return pa.Table.from_pydict(
        {
            "run_id": [run_id] * len(result),
            "tick": list(range(1, len(result) + 1)),
            "susceptible": result.susceptible,
            "infectious": result.infectious,
            "recovered": result.recovered,
        },
        schema=COUNTS_SCHEMA,
    )


def write_counts(result: SimulationResult, path: Path, run_id: str = "run0") -> Path:
    """Write a single run's count series to its own Parquet file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(counts_table(run_id, result), path)
    return path


def read_counts(path: Path, run_id: str | None = None) -> list[dict[str, object]]:
    """Read count rows back, optionally restricted to one run, ordered by tick."""
    filters = [("run_id", "=", run_id)] if run_id is not None else None
    rows = pq.read_table(path, filters=filters).to_pylist()
    return sorted(rows, key=lambda r: (r["run_id"], int(r["tick"])))


def read_results(path: Path, population_size: int) -> dict[str, SimulationResult]:
    """Rebuild per-run count series from a batch counts file, keyed by run id."""
    series: dict[str, list[TickCounts]] = {}
    for row in read_counts(path):
        series.setdefault(str(row["run_id"]), []).append(
            TickCounts(int(row["susceptible"]), int(row["infectious"]), int(row["recovered"]))
        )
    return {
        run_id: SimulationResult(counts=tuple(counts), population_size=population_size)
        for run_id, counts in series.items()
    }
