"""I/O layer: Parquet schemas and output path helpers."""

from arctic_circle.io.paths import (
    iteration_log_path,
    logs_dir,
    run_summary_path,
    tile_log_path,
)
from arctic_circle.io.schemas import ITERATION_LOG_SCHEMA, LOG_SCHEMA_VERSION, TILE_LOG_SCHEMA

__all__ = [
    "ITERATION_LOG_SCHEMA",
    "LOG_SCHEMA_VERSION",
    "TILE_LOG_SCHEMA",
    "iteration_log_path",
    "logs_dir",
    "run_summary_path",
    "tile_log_path",
]
