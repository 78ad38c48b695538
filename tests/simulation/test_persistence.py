"""Tests for stochastic_sir.simulation.persistence module."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from stochastic_sir.io.schemas import COUNTS_SCHEMA
from stochastic_sir.simulation.persistence import (
    counts_table,
    flush_agent_columns,
    read_counts,
    read_results,
    write_counts,
)
from stochastic_sir.simulation.result import SimulationResult, TickCounts


def _result() -> SimulationResult:
    return SimulationResult(
        counts=(TickCounts(2, 1, 0), TickCounts(2, 0, 1)),
        population_size=3,
        recovery_ticks=((0, 2),),
    )


def test_counts_table_numbers_ticks_from_one() -> None:
    table = counts_table("r", _result())
    assert table.schema.equals(COUNTS_SCHEMA)
    assert table.column("tick").to_pylist() == [1, 2]
    assert table.column("infectious").to_pylist() == [1, 0]


def test_write_and_read_counts(tmp_path: Path) -> None:
    path = write_counts(_result(), tmp_path / "nested" / "counts.parquet", run_id="abc")
    rows = read_counts(path)
    assert [(r["susceptible"], r["infectious"], r["recovered"]) for r in rows] == [
        (2, 1, 0),
        (2, 0, 1),
    ]
    assert read_counts(path, run_id="missing") == []


def test_flush_agent_columns_clears_buffers(tmp_path: Path) -> None:
    columns: dict[str, list[int | str | None]] = {
        "run_id": ["r", "r"],
        "tick": [1, 1],
        "agent_id": [0, 1],
        "x": [None, 2],
        "y": [None, 3],
        "state": ["I", "S"],
    }
    path = tmp_path / "agents.parquet"
    writer = flush_agent_columns(columns, path, None)
    assert writer is not None
    assert all(len(v) == 0 for v in columns.values())
    # empty buffers are a no-op
    assert flush_agent_columns(columns, path, writer) is writer
    writer.close()
    table = pq.read_table(path)
    assert table.num_rows == 2
    assert table.column("x").to_pylist() == [None, 2]


def test_flush_empty_without_writer_returns_none(tmp_path: Path) -> None:
    columns: dict[str, list[int | str | None]] = {
        key: [] for key in ("run_id", "tick", "agent_id", "x", "y", "state")
    }
    assert flush_agent_columns(columns, tmp_path / "unused.parquet", None) is None
    assert not (tmp_path / "unused.parquet").exists()


def test_read_results_groups_runs(tmp_path: Path) -> None:
    path = tmp_path / "counts.parquet"
    other = SimulationResult(counts=(TickCounts(0, 3, 0), TickCounts(0, 1, 2)), population_size=3)
    pq.write_table(
        pa.concat_tables([counts_table("a", _result()), counts_table("b", other)]), path
    )
    results = read_results(path, population_size=3)
    assert sorted(results) == ["a", "b"]
    assert results["a"].infectious == [1, 0]
    assert results["b"].recovered == [0, 2]
    assert results["b"].population_size == 3
