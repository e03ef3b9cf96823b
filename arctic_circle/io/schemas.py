"""Parquet schema definitions for simulation run artifacts.

All Arrow schemas used for persisting iteration summaries and tile snapshots
are centralised here so that every module works against the same column
contracts.
"""

from __future__ import annotations

import pyarrow as pa

LOG_SCHEMA_VERSION = 1

ITERATION_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("iteration", pa.int64()),
        ("phase", pa.float64()),
        ("n_grid_cells", pa.int64()),
        ("n_tiles", pa.int64()),
        ("tiles_added", pa.int64()),
        ("tiles_removed", pa.int64()),
        ("n_up", pa.int64()),
        ("n_down", pa.int64()),
        ("n_left", pa.int64()),
        ("n_right", pa.int64()),
        ("frozen_fraction", pa.float64()),
    ]
)

TILE_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("iteration", pa.int64()),
        ("x", pa.float64()),
        ("y", pa.float64()),
        ("direction", pa.string()),
    ]
)
