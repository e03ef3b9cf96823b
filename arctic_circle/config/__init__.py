"""Configuration layer: constants and typed config dataclasses."""

from arctic_circle.config.constants import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_RANDOM_BIAS_COEF,
    DEFAULT_SIM_SPEED,
    FLUSH_THRESHOLD,
    FRAMES_PER_SEC,
    ITERATION_PHASE_DURATION,
    MAX_RANDOM_SEED,
    MAX_SIM_SPEED,
    MIN_SIM_SPEED,
    SIM_PHASE_STATE_DURATIONS,
    SIM_PHASE_STATES,
)
from arctic_circle.config.types import (
    ClockConfig,
    DisplayMode,
    RunConfig,
    SimulationParams,
    random_seed,
)

__all__ = [
    "ClockConfig",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_RANDOM_BIAS_COEF",
    "DEFAULT_SIM_SPEED",
    "DisplayMode",
    "FLUSH_THRESHOLD",
    "FRAMES_PER_SEC",
    "ITERATION_PHASE_DURATION",
    "MAX_RANDOM_SEED",
    "MAX_SIM_SPEED",
    "MIN_SIM_SPEED",
    "RunConfig",
    "SIM_PHASE_STATES",
    "SIM_PHASE_STATE_DURATIONS",
    "SimulationParams",
    "random_seed",
]
