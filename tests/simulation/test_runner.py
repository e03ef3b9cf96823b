"""Tests for the headless batch runner and its Parquet logs."""

from __future__ import annotations

import json
import math
from pathlib import Path

import pyarrow.parquet as pq

from arctic_circle.config.types import RunConfig
from arctic_circle.io.schemas import ITERATION_LOG_SCHEMA, LOG_SCHEMA_VERSION, TILE_LOG_SCHEMA
from arctic_circle.simulation.runner import run_simulation


class TestRunSimulation:
    def test_writes_iteration_log(self, tmp_path: Path) -> None:
        result = run_simulation(RunConfig(max_iterations=3, random_seed=4, out_dir=tmp_path))
        assert result.iteration_log_path == tmp_path / "logs" / "iteration_log.parquet"
        table = pq.read_table(result.iteration_log_path)
        assert set(table.column_names) == {f.name for f in ITERATION_LOG_SCHEMA}
        assert table.column("iteration").to_pylist() == [1, 2, 3]
        assert table.column("n_tiles").to_pylist() == [2, 6, 12]
        assert table.column("n_grid_cells").to_pylist() == [4, 12, 24]

    def test_direction_counts_sum_to_tiles(self, tmp_path: Path) -> None:
        result = run_simulation(RunConfig(max_iterations=4, random_seed=9, out_dir=tmp_path))
        rows = pq.read_table(result.iteration_log_path).to_pylist()
        for row in rows:
            total = row["n_up"] + row["n_down"] + row["n_left"] + row["n_right"]
            assert total == row["n_tiles"]
            assert row["n_up"] == row["n_down"]
            assert row["n_left"] == row["n_right"]

    def test_tile_balance_per_iteration(self, tmp_path: Path) -> None:
        result = run_simulation(RunConfig(max_iterations=5, random_seed=1, out_dir=tmp_path))
        rows = pq.read_table(result.iteration_log_path).to_pylist()
        previous = 0
        for row in rows:
            assert previous - row["tiles_removed"] + row["tiles_added"] == row["n_tiles"]
            previous = row["n_tiles"]

    def test_writes_tile_snapshots(self, tmp_path: Path) -> None:
        result = run_simulation(RunConfig(max_iterations=3, random_seed=4, out_dir=tmp_path))
        assert result.tile_log_path is not None
        table = pq.read_table(result.tile_log_path)
        assert set(table.column_names) == {f.name for f in TILE_LOG_SCHEMA}
        assert table.num_rows == 2 + 6 + 12
        directions = set(table.column("direction").to_pylist())
        assert directions <= {"up", "down", "left", "right"}

    def test_snapshot_can_be_disabled(self, tmp_path: Path) -> None:
        config = RunConfig(max_iterations=2, out_dir=tmp_path, record_tiles=False)
        result = run_simulation(config)
        assert result.tile_log_path is None
        assert not (tmp_path / "logs" / "tile_log.parquet").exists()

    def test_result_and_summary(self, tmp_path: Path) -> None:
        result = run_simulation(RunConfig(max_iterations=3, random_seed=4, out_dir=tmp_path))
        assert result.run_id == "seed4_bias0.5_it3"
        assert result.iterations == 3
        assert result.n_tiles == 12
        assert result.final_phase >= 18.0
        summary = json.loads((tmp_path / "logs" / "run_summary.json").read_text())
        assert summary["schema_version"] == LOG_SCHEMA_VERSION
        assert summary["run_id"] == result.run_id
        assert summary["n_tiles"] == 12
        assert summary["ticks"] == result.ticks

    def test_same_config_same_tiles(self, tmp_path: Path) -> None:
        first = run_simulation(RunConfig(max_iterations=4, random_seed=77, out_dir=tmp_path / "a"))
        second = run_simulation(
            RunConfig(max_iterations=4, random_seed=77, out_dir=tmp_path / "b")
        )
        assert first.tile_log_path is not None and second.tile_log_path is not None
        assert pq.read_table(first.tile_log_path).equals(pq.read_table(second.tile_log_path))

    def test_frozen_fraction_recorded(self, tmp_path: Path) -> None:
        result = run_simulation(RunConfig(max_iterations=4, random_seed=2, out_dir=tmp_path))
        assert math.isnan(result.frozen_fraction) or 0.0 <= result.frozen_fraction <= 1.0

    def test_undefined_frozen_fraction_written_as_null(self, tmp_path: Path) -> None:
        result = run_simulation(RunConfig(max_iterations=1, out_dir=tmp_path))
        assert math.isnan(result.frozen_fraction)
        text = (tmp_path / "logs" / "run_summary.json").read_text()

        def reject_constant(name: str) -> None:
            raise AssertionError(f"non-standard JSON constant {name}")

        summary = json.loads(text, parse_constant=reject_constant)
        assert summary["frozen_fraction"] is None
        assert result.to_summary()["frozen_fraction"] is None
