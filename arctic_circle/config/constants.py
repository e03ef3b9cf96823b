"""Centralized constants for the domino-shuffling simulation.

Phase-state durations, default simulation parameters and clock bounds are
defined here. Consuming modules should import from this module rather than
defining their own inline literals.
"""

from __future__ import annotations

from arctic_circle.domain.phase import SimPhaseState

SIM_PHASE_STATE_DURATIONS: dict[SimPhaseState, float] = {
    SimPhaseState.ADDING_GRID_CELLS: 1.0,
    SimPhaseState.REMOVING_TILES: 1.0,
    SimPhaseState.TRANSITIONING_TILES: 2.0,
    SimPhaseState.SHOWING_PLACEHOLDERS: 1.0,
    SimPhaseState.ADDING_TILES: 1.0,
}
"""Phase duration of each state. Key order is the state sequence order."""

SIM_PHASE_STATES: tuple[SimPhaseState, ...] = tuple(SIM_PHASE_STATE_DURATIONS)
"""Phase states in cyclic sequence order."""

ITERATION_PHASE_DURATION = sum(SIM_PHASE_STATE_DURATIONS.values())
"""Total phase spanned by one growth iteration."""

DEFAULT_MAX_ITERATIONS = 100
"""Default iteration cap."""

DEFAULT_RANDOM_BIAS_COEF = 0.5
"""Fair coin: horizontal and vertical tile pairs are equally likely."""

MAX_RANDOM_SEED = 2**31 - 1
"""Exclusive upper bound for freshly drawn random seeds."""

FRAMES_PER_SEC = 30
"""Clock ticks per second of simulated wall time."""

MIN_SIM_SPEED = 0.5
"""Minimum phase advanced per second by the phase clock."""

MAX_SIM_SPEED = 5.0
"""Maximum phase advanced per second by the phase clock."""

DEFAULT_SIM_SPEED = 2.0
"""Default phase advanced per second by the phase clock."""

FLUSH_THRESHOLD = 8_192
"""Flush tile log rows to Parquet once this in-memory row count is reached."""
