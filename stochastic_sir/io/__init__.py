"""Output layout and Arrow schemas."""

from stochastic_sir.io.paths import (
    agent_log_path,
    counts_path,
    logs_dir,
    resolve_within_base,
    run_summary_path,
    runs_dir,
)
from stochastic_sir.io.schemas import (
    AGENT_LOG_SCHEMA,
    COUNTS_SCHEMA,
    RUN_PAYLOAD_SCHEMA_VERSION,
    RUN_SUMMARY_SCHEMA,
)

__all__ = [
    "AGENT_LOG_SCHEMA",
    "COUNTS_SCHEMA",
    "RUN_PAYLOAD_SCHEMA_VERSION",
    "RUN_SUMMARY_SCHEMA",
    "agent_log_path",
    "counts_path",
    "logs_dir",
    "resolve_within_base",
    "run_summary_path",
    "runs_dir",
]
