"""Headless batch runner: play a simulation to completion and log it to Parquet."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pyarrow.parquet as pq

from arctic_circle.config.constants import FLUSH_THRESHOLD, ITERATION_PHASE_DURATION
from arctic_circle.config.types import RunConfig
from arctic_circle.domain.geometry import TileDirection
from arctic_circle.domain.tile import Tile
from arctic_circle.io.paths import iteration_log_path, logs_dir, run_summary_path, tile_log_path
from arctic_circle.io.schemas import ITERATION_LOG_SCHEMA, LOG_SCHEMA_VERSION, TILE_LOG_SCHEMA
from arctic_circle.metrics.arctic import direction_counts, frozen_fraction
from arctic_circle.simulation.clock import PhaseClock
from arctic_circle.simulation.engine import Simulator
from arctic_circle.simulation.events import SimEvent
from arctic_circle.simulation.persistence import empty_columns, flush_columns

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    """Summary of one completed run."""

    run_id: str
    iterations: int
    ticks: int
    final_phase: float
    n_tiles: int
    frozen_fraction: float
    iteration_log_path: Path
    tile_log_path: Path | None

    def to_summary(self) -> dict[str, object]:
        """JSON-safe view; an undefined frozen fraction becomes ``None``."""
        return {
            "run_id": self.run_id,
            "iterations": self.iterations,
            "ticks": self.ticks,
            "final_phase": self.final_phase,
            "n_tiles": self.n_tiles,
            "frozen_fraction": (
                None if math.isnan(self.frozen_fraction) else self.frozen_fraction
            ),
            "iteration_log": str(self.iteration_log_path),
            "tile_log": None if self.tile_log_path is None else str(self.tile_log_path),
        }


def _deterministic_run_id(config: RunConfig) -> str:
    """Build reproducible run ID stable across runs for identical settings."""
    return f"seed{config.random_seed}_bias{config.random_bias_coef:g}_it{config.max_iterations}"


def _tick_budget(config: RunConfig) -> int:
    phase_per_tick = config.speed * config.step_interval
    return math.ceil(config.max_iterations * ITERATION_PHASE_DURATION / phase_per_tick) + 2


class _IterationRecorder:
    """Listener collecting one summary row (and tile rows) per iteration."""

    def __init__(self, simulator: Simulator, run_id: str, out_dir: Path, record_tiles: bool):
        self.simulator = simulator
        self.run_id = run_id
        self.out_dir = out_dir
        self.record_tiles = record_tiles
        self.iteration_columns = empty_columns(ITERATION_LOG_SCHEMA)
        self.tile_columns = empty_columns(TILE_LOG_SCHEMA)
        self.iteration_writer: pq.ParquetWriter | None = None
        self.tile_writer: pq.ParquetWriter | None = None
        self.tiles_removed = 0
        self.last_frozen_fraction = float("nan")

    def on_tiles_removed(self, removed: list[Tile]) -> None:
        self.tiles_removed = len(removed)

    def on_tiles_added(self, added: list[Tile]) -> None:
        sim = self.simulator
        tiles = sim.get_tiles()
        iteration = sim.iteration_index
        counts = direction_counts(tiles)
        self.last_frozen_fraction = frozen_fraction(tiles, iteration)

        row: dict[str, Any] = {
            "run_id": self.run_id,
            "iteration": iteration,
            "phase": sim.phase,
            "n_grid_cells": len(sim.get_grid_cells()),
            "n_tiles": len(tiles),
            "tiles_added": len(added),
            "tiles_removed": self.tiles_removed,
            "n_up": counts[TileDirection.UP],
            "n_down": counts[TileDirection.DOWN],
            "n_left": counts[TileDirection.LEFT],
            "n_right": counts[TileDirection.RIGHT],
            "frozen_fraction": self.last_frozen_fraction,
        }
        for key, value in row.items():
            self.iteration_columns[key].append(value)
        self.tiles_removed = 0

        if self.record_tiles:
            for tile in tiles:
                self.tile_columns["run_id"].append(self.run_id)
                self.tile_columns["iteration"].append(iteration)
                self.tile_columns["x"].append(tile.center_pos.x)
                self.tile_columns["y"].append(tile.center_pos.y)
                self.tile_columns["direction"].append(tile.direction.value)
            if len(self.tile_columns["run_id"]) >= FLUSH_THRESHOLD:
                self._flush_tiles()

    def flush(self) -> None:
        self.iteration_writer = flush_columns(
            self.iteration_columns,
            ITERATION_LOG_SCHEMA,
            iteration_log_path(self.out_dir),
            self.iteration_writer,
        )
        if self.record_tiles:
            self._flush_tiles()

    def _flush_tiles(self) -> None:
        self.tile_writer = flush_columns(
            self.tile_columns,
            TILE_LOG_SCHEMA,
            tile_log_path(self.out_dir),
            self.tile_writer,
        )

    def close(self) -> None:
        if self.iteration_writer is not None:
            self.iteration_writer.close()
        if self.tile_writer is not None:
            self.tile_writer.close()


def run_simulation(config: RunConfig) -> RunResult:
    """Run one seeded simulation until ``max_iterations`` and persist its logs."""
    out_dir = Path(config.out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    run_id = _deterministic_run_id(config)

    simulator = Simulator(config.simulation_params())
    clock = PhaseClock(simulator, config.clock_config())
    recorder = _IterationRecorder(simulator, run_id, out_dir, config.record_tiles)
    simulator.events.subscribe(SimEvent.TILES_REMOVED, recorder.on_tiles_removed)
    simulator.events.subscribe(SimEvent.TILES_ADDED, recorder.on_tiles_added)

    logger.info("Starting run %s", run_id)
    try:
        ticks = clock.run_until_stopped(_tick_budget(config))
        recorder.flush()
    finally:
        recorder.close()

    result = RunResult(
        run_id=run_id,
        iterations=simulator.iteration_index,
        ticks=ticks,
        final_phase=simulator.phase,
        n_tiles=len(simulator.get_tiles()),
        frozen_fraction=recorder.last_frozen_fraction,
        iteration_log_path=iteration_log_path(out_dir),
        tile_log_path=tile_log_path(out_dir) if config.record_tiles else None,
    )
    summary = {
        "schema_version": LOG_SCHEMA_VERSION,
        "max_iterations": config.max_iterations,
        "random_seed": config.random_seed,
        "random_bias_coef": config.random_bias_coef,
        "speed": config.speed,
        **result.to_summary(),
    }
    run_summary_path(out_dir).write_text(
        json.dumps(summary, ensure_ascii=False, indent=2, allow_nan=False)
    )
    logger.info(
        "Finished run %s: %d iterations, %d tiles", run_id, result.iterations, result.n_tiles
    )
    return result
