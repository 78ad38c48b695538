"""Parquet schema definitions for simulation artifacts.

Every module that reads or writes run outputs works against these column
contracts.
"""

from __future__ import annotations

import pyarrow as pa

RUN_PAYLOAD_SCHEMA_VERSION = 1

COUNTS_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("tick", pa.int64()),
        ("susceptible", pa.int64()),
        ("infectious", pa.int64()),
        ("recovered", pa.int64()),
    ]
)

# x/y are null for agents without a grid position
AGENT_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("tick", pa.int64()),
        ("agent_id", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("state", pa.string()),
    ]
)

RUN_SUMMARY_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("seed", pa.int64()),
        ("population_size", pa.int64()),
        ("ticks", pa.int64()),
        ("peak_infectious", pa.int64()),
        ("peak_tick", pa.int64()),
        ("final_susceptible", pa.int64()),
        ("final_infectious", pa.int64()),
        ("final_recovered", pa.int64()),
        ("mean_recovery_tick", pa.float64()),
    ]
)
