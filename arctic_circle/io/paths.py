"""Path construction helpers for simulation output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def iteration_log_path(out_dir: Path) -> Path:
    """Return path to the per-iteration summary Parquet file."""
    return logs_dir(out_dir) / "iteration_log.parquet"


def tile_log_path(out_dir: Path) -> Path:
    """Return path to the tile snapshot Parquet file."""
    return logs_dir(out_dir) / "tile_log.parquet"


def run_summary_path(out_dir: Path) -> Path:
    """Return path to the run summary JSON file."""
    return logs_dir(out_dir) / "run_summary.json"
