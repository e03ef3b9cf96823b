"""Tests for config dataclass validation."""

from __future__ import annotations

from pathlib import Path
from random import Random

import pytest

from arctic_circle.config.constants import MAX_RANDOM_SEED, MAX_SIM_SPEED, MIN_SIM_SPEED
from arctic_circle.config.types import (
    ClockConfig,
    DisplayMode,
    RunConfig,
    SimulationParams,
    random_seed,
)


class TestSimulationParams:
    def test_defaults(self) -> None:
        params = SimulationParams()
        assert params.max_iterations == 100
        assert params.random_seed == 0
        assert params.random_bias_coef == 0.5
        assert params.is_arctic_circle_active is False
        assert params.display_mode is DisplayMode.COLORS

    @pytest.mark.parametrize("value", [0, -3, 2.5, True, "10"])
    def test_rejects_invalid_max_iterations(self, value: object) -> None:
        with pytest.raises(ValueError, match="max_iterations"):
            SimulationParams(max_iterations=value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [-0.01, 1.01, float("nan")])
    def test_rejects_bias_outside_unit_interval(self, value: float) -> None:
        with pytest.raises(ValueError, match="random_bias_coef"):
            SimulationParams(random_bias_coef=value)

    @pytest.mark.parametrize("value", [0, 0.0, 1, 1.0])
    def test_accepts_bias_bounds(self, value: float) -> None:
        assert SimulationParams(random_bias_coef=value).random_bias_coef == value

    def test_rejects_non_integer_seed(self) -> None:
        with pytest.raises(ValueError, match="random_seed"):
            SimulationParams(random_seed=1.5)  # type: ignore[arg-type]

    def test_rejects_unknown_display_mode(self) -> None:
        with pytest.raises(ValueError, match="display_mode"):
            SimulationParams(display_mode="arrows")  # type: ignore[arg-type]


class TestClockConfig:
    def test_defaults_to_thirty_ticks_per_second(self) -> None:
        config = ClockConfig()
        assert config.speed == 2.0
        assert config.step_interval == pytest.approx(1 / 30)

    @pytest.mark.parametrize("speed", [MIN_SIM_SPEED - 0.1, MAX_SIM_SPEED + 0.1])
    def test_rejects_speed_out_of_bounds(self, speed: float) -> None:
        with pytest.raises(ValueError, match="speed"):
            ClockConfig(speed=speed)

    def test_rejects_non_positive_step(self) -> None:
        with pytest.raises(ValueError, match="step_interval"):
            ClockConfig(step_interval=0.0)


class TestRunConfig:
    def test_builds_nested_configs(self) -> None:
        config = RunConfig(max_iterations=4, random_seed=9, random_bias_coef=0.25, speed=3.0)
        params = config.simulation_params()
        assert params.max_iterations == 4
        assert params.random_seed == 9
        assert params.random_bias_coef == 0.25
        assert config.clock_config().speed == 3.0
        assert config.out_dir == Path("data")

    def test_validates_on_construction(self) -> None:
        with pytest.raises(ValueError):
            RunConfig(max_iterations=0)
        with pytest.raises(ValueError):
            RunConfig(speed=10.0)


class TestRandomSeed:
    def test_in_range(self) -> None:
        rng = Random(1)
        for _ in range(100):
            assert 0 <= random_seed(rng) < MAX_RANDOM_SEED

    def test_reproducible_with_seeded_rng(self) -> None:
        assert random_seed(Random(42)) == random_seed(Random(42))
