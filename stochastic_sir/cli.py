"""CLI entrypoint for single runs, replicate batches and waiting-time sampling.

Supports ``--config path/to/config.json`` for reproducibility. CLI arguments
override config-file values; config-file values override built-in defaults.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from stochastic_sir.analysis.stats import summarize_result, waiting_time_histogram
from stochastic_sir.config.constants import (
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_WAITING_TICKS,
    NUM_INFECTIOUS,
    NUM_RUNS,
    NUM_SUSCEPTIBLE,
    NUM_TICKS,
    RECOVERY_PROBABILITY,
)
from stochastic_sir.config.types import BatchConfig, BoundaryPolicy, GridConfig, SimulationConfig
from stochastic_sir.domain.random_source import RandomSource
from stochastic_sir.domain.trials import sample_waiting_times
from stochastic_sir.io.paths import counts_path
from stochastic_sir.simulation.engine import run_batch, run_simulation
from stochastic_sir.simulation.persistence import read_results
from stochastic_sir.viz.render import (
    render_ensemble,
    render_sir_curves,
    render_waiting_time_histogram,
)
from stochastic_sir.viz.theme import REGISTERED_THEMES, get_theme

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_grid_size(raw_grid: str) -> tuple[int, int]:
    """Parse a grid size formatted as `WxH`."""
    tokens = raw_grid.strip().lower().split("x")
    if len(tokens) != 2:
        raise ValueError("grid must use WxH format")
    try:
        width, height = int(tokens[0]), int(tokens[1])
    except ValueError as exc:
        raise ValueError("grid must use integer WxH values") from exc
    if width < 1 or height < 1:
        raise ValueError("grid must be >= 1x1")
    return width, height


def _parse_boundary(raw_boundary: str) -> BoundaryPolicy:
    """Parse grid boundary policy from CLI/config."""
    try:
        return BoundaryPolicy(raw_boundary)
    except ValueError as exc:
        valid = ", ".join(policy.value for policy in BoundaryPolicy)
        raise ValueError(f"boundary must be one of {valid}") from exc


_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


def _coerce_bool(raw: object, key: str) -> bool:
    """Accept a JSON/CLI boolean or one of the usual on/off words."""
    if isinstance(raw, str):
        word = raw.strip().lower()
        if word in _TRUE_WORDS | _FALSE_WORDS:
            return word in _TRUE_WORDS
    elif isinstance(raw, bool):
        return raw
    raise ValueError(f"{key} must be true or false, got {raw!r}")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_optional_int(raw: object, key: str) -> int | None:
    if raw is None:
        return None
    return _coerce_int(raw, key)


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        try:
            return float(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be a float value, got {raw!r}") from exc
    raise ValueError(f"{key} must be a float value")


def _coerce_str(raw: object, key: str) -> str:
    """Accept text or a path; numbers and booleans are not names."""
    if not isinstance(raw, (str, Path)):
        raise ValueError(f"{key} must be a string, got {raw!r}")
    return str(raw)


def _setting(file_cfg: dict[str, object], key: str, cli_val: object, default: object) -> object:
    """Pick a flag value over the config file entry, and either over ``default``."""
    return file_cfg.get(key, default) if cli_val is None else cli_val


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run stochastic SIR agent simulations")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--susceptible", type=int, default=None)
    parser.add_argument("--infectious", type=int, default=None)
    parser.add_argument(
        "--recovery-probability",
        type=float,
        default=None,
        help="Per-tick probability that an infectious agent recovers",
    )
    parser.add_argument("--ticks", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--grid",
        type=str,
        default=None,
        help=f"Enable random-walk movement on a WxH grid, e.g. {GRID_WIDTH}x{GRID_HEIGHT}",
    )
    parser.add_argument(
        "--boundary",
        type=str,
        choices=[policy.value for policy in BoundaryPolicy],
        default=None,
    )
    parser.add_argument(
        "--record-snapshots", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--plot", type=Path, default=None, help="Write a PNG figure here")
    parser.add_argument("--theme", type=str, choices=sorted(REGISTERED_THEMES), default=None)
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--batch",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Run seeded replicates and write Parquet/JSON outputs under --out-dir",
    )
    mode_group.add_argument(
        "--waiting-times",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Sample waiting times instead of running a population",
    )
    parser.add_argument("--runs", type=int, default=None)
    parser.add_argument("--samples", type=int, default=None)
    parser.add_argument("--max-ticks", type=int, default=None)
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint; prints a JSON summary of the selected mode."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must hold a JSON object: {args.config}")

    try:
        n_susceptible = _coerce_int(
            _setting(file_cfg, "susceptible", args.susceptible, NUM_SUSCEPTIBLE), "susceptible"
        )
        n_infectious = _coerce_int(
            _setting(file_cfg, "infectious", args.infectious, NUM_INFECTIOUS), "infectious"
        )
        recovery_probability = _coerce_float(
            _setting(
                file_cfg, "recovery_probability", args.recovery_probability, RECOVERY_PROBABILITY
            ),
            "recovery_probability",
        )
        ticks = _coerce_int(_setting(file_cfg, "ticks", args.ticks, NUM_TICKS), "ticks")
        seed = _coerce_optional_int(_setting(file_cfg, "seed", args.seed, None), "seed")
        grid_raw = _setting(file_cfg, "grid", args.grid, None)
        boundary = _parse_boundary(
            _coerce_str(
                _setting(file_cfg, "boundary", args.boundary, BoundaryPolicy.WRAP.value),
                "boundary",
            )
        )
        record_snapshots = _coerce_bool(
            _setting(file_cfg, "record_snapshots", args.record_snapshots, False),
            "record_snapshots",
        )
        out_dir = Path(_coerce_str(_setting(file_cfg, "out_dir", args.out_dir, "data"), "out_dir"))
        is_batch = _coerce_bool(_setting(file_cfg, "batch", args.batch, False), "batch")
        is_waiting = _coerce_bool(
            _setting(file_cfg, "waiting_times", args.waiting_times, False), "waiting_times"
        )
        n_runs = _coerce_int(_setting(file_cfg, "runs", args.runs, NUM_RUNS), "runs")
        n_samples = _coerce_int(_setting(file_cfg, "samples", args.samples, 1_000), "samples")
        max_ticks = _coerce_int(
            _setting(file_cfg, "max_ticks", args.max_ticks, MAX_WAITING_TICKS), "max_ticks"
        )
        theme = get_theme(_coerce_str(_setting(file_cfg, "theme", args.theme, "default"), "theme"))

        grid: GridConfig | None = None
        if grid_raw is not None:
            width, height = _parse_grid_size(_coerce_str(grid_raw, "grid"))
            grid = GridConfig(width=width, height=height, boundary=boundary)

        if is_batch and is_waiting:
            parser.error("--batch and --waiting-times cannot both be enabled")

        if is_waiting:
            source = RandomSource(seed)
            samples = sample_waiting_times(recovery_probability, max_ticks, n_samples, source)
            hist = waiting_time_histogram(samples, max_ticks) if max_ticks > 0 else []
            summary: dict[str, object] = {
                "mode": "waiting_times",
                "recovery_probability": recovery_probability,
                "max_ticks": max_ticks,
                "samples": n_samples,
                "mean": sum(samples) / len(samples) if samples else None,
                "capped": sum(1 for s in samples if s == max_ticks),
                "histogram": [int(v) for v in hist],
            }
            if args.plot is not None and max_ticks > 0:
                render_waiting_time_histogram(
                    samples,
                    max_ticks,
                    args.plot,
                    recovery_probability=recovery_probability,
                    theme=theme,
                )
        else:
            sim_config = SimulationConfig(
                n_susceptible=n_susceptible,
                n_infectious=n_infectious,
                recovery_probability=recovery_probability,
                ticks=ticks,
                seed=seed,
                grid=grid,
                record_snapshots=record_snapshots,
            )
            if is_batch:
                batch_config = BatchConfig(
                    simulation=sim_config,
                    n_runs=n_runs,
                    base_seed=seed if seed is not None else 0,
                    out_dir=out_dir,
                )
                summaries = run_batch(batch_config)
                summary = {
                    "mode": "batch",
                    "runs": len(summaries),
                    "out_dir": str(out_dir),
                    "mean_peak_infectious": sum(s.peak_infectious for s in summaries)
                    / len(summaries),
                    "all_recovered": sum(1 for s in summaries if s.final_counts.infectious == 0),
                }
                if args.plot is not None and ticks > 0:
                    results = read_results(counts_path(out_dir), sim_config.population_size)
                    render_ensemble(
                        list(results.values()),
                        args.plot,
                        recovery_probability=recovery_probability,
                        initial_infectious=n_infectious,
                        theme=theme,
                    )

            else:
                result = run_simulation(sim_config)
                stats = summarize_result(result)
                summary = {
                    "mode": "single",
                    "seed": seed,
                    "population_size": result.population_size,
                    "ticks": result.ticks,
                    "peak_infectious": stats.peak_infectious,
                    "peak_tick": stats.peak_tick,
                    "final_counts": stats.final_counts._asdict(),
                    "mean_recovery_tick": stats.mean_recovery_tick,
                }
                if args.plot is not None:
                    render_sir_curves(result, args.plot, theme=theme)
    except ValueError as exc:
        parser.error(str(exc))

    logger.info("finished %s mode", summary["mode"])
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
