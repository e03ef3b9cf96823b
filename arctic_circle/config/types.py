"""Configuration dataclasses for simulations, clocks and batch runs.

All parameter validation happens in ``__post_init__`` so an invalid value is
rejected before any engine state changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from random import Random

from arctic_circle.config.constants import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_RANDOM_BIAS_COEF,
    DEFAULT_SIM_SPEED,
    FRAMES_PER_SEC,
    MAX_RANDOM_SEED,
    MAX_SIM_SPEED,
    MIN_SIM_SPEED,
)

__all__ = [
    "ClockConfig",
    "DisplayMode",
    "RunConfig",
    "SimulationParams",
    "random_seed",
]


class DisplayMode(Enum):
    """How a renderer should draw tiles."""

    COLORS = "colors"
    ARROWS = "arrows"


def validate_max_iterations(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"max_iterations must be an integer, got {value!r}")
    if value < 1:
        raise ValueError(f"max_iterations must be >= 1, got {value}")


def validate_random_seed(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"random_seed must be an integer, got {value!r}")


def validate_random_bias_coef(value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"random_bias_coef must be a number, got {value!r}")
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"random_bias_coef must be in [0.0, 1.0], got {value}")


def validate_sim_speed(value: float) -> None:
    if not MIN_SIM_SPEED <= value <= MAX_SIM_SPEED:
        raise ValueError(f"speed must be in [{MIN_SIM_SPEED}, {MAX_SIM_SPEED}], got {value}")


def random_seed(rng: Random | None = None) -> int:
    """Draw a fresh seed in ``[0, MAX_RANDOM_SEED)``."""
    return (rng or Random()).randrange(MAX_RANDOM_SEED)


@dataclass(frozen=True)
class SimulationParams:
    """User-tunable simulation parameters.

    ``random_bias_coef`` is the probability of inserting a horizontal
    (left/right) tile pair; 0.5 gives a uniformly random tiling.
    """

    max_iterations: int = DEFAULT_MAX_ITERATIONS
    random_seed: int = 0
    random_bias_coef: float = DEFAULT_RANDOM_BIAS_COEF
    is_arctic_circle_active: bool = False
    display_mode: DisplayMode = DisplayMode.COLORS

    def __post_init__(self) -> None:
        validate_max_iterations(self.max_iterations)
        validate_random_seed(self.random_seed)
        validate_random_bias_coef(self.random_bias_coef)
        if not isinstance(self.display_mode, DisplayMode):
            raise ValueError(f"display_mode must be a DisplayMode, got {self.display_mode!r}")


@dataclass(frozen=True)
class ClockConfig:
    """Phase clock pacing: phase per simulated second and tick length."""

    speed: float = DEFAULT_SIM_SPEED
    step_interval: float = 1.0 / FRAMES_PER_SEC
    """Simulated seconds per tick."""

    def __post_init__(self) -> None:
        validate_sim_speed(self.speed)
        if self.step_interval <= 0.0:
            raise ValueError("step_interval must be > 0")


@dataclass(frozen=True)
class RunConfig:
    """Headless batch run settings."""

    max_iterations: int = 20
    random_seed: int = 0
    random_bias_coef: float = DEFAULT_RANDOM_BIAS_COEF
    speed: float = DEFAULT_SIM_SPEED
    step_interval: float = 1.0 / FRAMES_PER_SEC
    out_dir: Path = Path("data")
    record_tiles: bool = True
    """Write a tile snapshot row per tile at the end of every iteration."""

    def __post_init__(self) -> None:
        self.simulation_params()
        self.clock_config()

    def simulation_params(self) -> SimulationParams:
        return SimulationParams(
            max_iterations=self.max_iterations,
            random_seed=self.random_seed,
            random_bias_coef=self.random_bias_coef,
        )

    def clock_config(self) -> ClockConfig:
        return ClockConfig(speed=self.speed, step_interval=self.step_interval)
