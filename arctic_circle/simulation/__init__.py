"""Simulation layer: phase-driven engine, event channel, clock and batch runner."""

from arctic_circle.simulation.clock import PhaseClock
from arctic_circle.simulation.engine import Simulator, ring_grid_cells
from arctic_circle.simulation.events import EventChannel, ReentrantUpdateError, SimEvent
from arctic_circle.simulation.persistence import flush_columns
from arctic_circle.simulation.phase_state import SimPhaseStateHandler
from arctic_circle.simulation.runner import RunResult, run_simulation

__all__ = [
    "EventChannel",
    "PhaseClock",
    "ReentrantUpdateError",
    "RunResult",
    "SimEvent",
    "SimPhaseStateHandler",
    "Simulator",
    "flush_columns",
    "ring_grid_cells",
    "run_simulation",
]
