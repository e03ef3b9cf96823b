"""Motion laws for a tile sliding one cell along its direction.

A displacement of one cell corresponds to a transition phase of
``TRANSITION_PHASE_DURATION``. Concrete laws only decide how the tile moves
between the start and destination positions; clamping and completion are
shared by the base class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from arctic_circle.domain.geometry import TileDirection, Vector2

TRANSITION_PHASE_DURATION = 1.0
"""Phase needed by a tile to slide one cell."""


class TileTransition(ABC):
    """Capability interface: ``start`` then query ``position_at``."""

    def __init__(self) -> None:
        self._start_pos: Vector2 | None = None
        self._versor = Vector2(0.0, 0.0)
        self._start_phase = 0.0

    def start(self, origin: Vector2, direction: TileDirection, phase: float) -> Vector2:
        """Start the transition and return the destination position."""
        self._start_pos = origin
        self._versor = Vector2.from_direction(direction)
        self._start_phase = phase
        return origin + self._versor

    def progress(self, phase: float) -> float:
        """Transition phase elapsed since start, normalized and clamped to [0, 1]."""
        elapsed = (phase - self._start_phase) / TRANSITION_PHASE_DURATION
        return min(max(elapsed, 0.0), 1.0)

    def is_finished(self, phase: float) -> bool:
        return self.progress(phase) >= 1.0

    def position_at(self, phase: float) -> Vector2:
        if self._start_pos is None:
            raise RuntimeError("transition has not been started")
        progress = self.progress(phase)
        if progress >= 1.0:
            # Exact landing keeps grid coordinates integral
            return self._start_pos + self._versor
        return self._start_pos + self._versor * self._displacement(progress)

    @abstractmethod
    def _displacement(self, progress: float) -> float:
        """Fraction of the cell covered at ``progress``; 0 at 0 and 1 at 1."""


class LinearTileTransition(TileTransition):
    """Constant-speed slide."""

    def _displacement(self, progress: float) -> float:
        return progress


class EaseInOutTileTransition(TileTransition):
    """Smoothstep slide: accelerates from rest and decelerates to rest."""

    def _displacement(self, progress: float) -> float:
        return progress * progress * (3.0 - 2.0 * progress)
