"""Domino tile: a 1x2 piece sliding one cell per iteration.

Occupancy invariant: a tile always covers the two cells on either side of its
destination centre, along the axis perpendicular to its direction. The
destination equals the current centre while the tile is still, so the matrix
can be rebuilt mid-slide without seeing stale geometry.
"""

from __future__ import annotations

import math
from enum import Enum

from arctic_circle.domain.geometry import TileDirection, Vector2
from arctic_circle.domain.transition import TileTransition

_ROTATION_RADS = {
    TileDirection.UP: 0.0,
    TileDirection.LEFT: math.pi / 2,
    TileDirection.DOWN: math.pi,
    TileDirection.RIGHT: 3 * math.pi / 2,
}


class TileState(Enum):
    """Motion state of a tile."""

    STILL = "still"
    TRANSITIONING = "transitioning"


class Tile:
    """A domino with a direction, a centre and a destination centre."""

    def __init__(self, center_pos: Vector2, direction: TileDirection, phase: float) -> None:
        self.center_pos = center_pos
        self.dest_center_pos = center_pos
        self.direction = direction
        self.direction_versor = Vector2.from_direction(direction)
        self.state = TileState.STILL
        self.phase_at_creation = phase
        self._phase = phase
        self._transition: TileTransition | None = None

    def __repr__(self) -> str:
        return (
            f"Tile(center_pos=({self.center_pos.x}, {self.center_pos.y}), "
            f"direction={self.direction.value}, state={self.state.value})"
        )

    @property
    def rotation_angle_rads(self) -> float:
        """Counter-clockwise rotation from the upward orientation."""
        return _ROTATION_RADS[self.direction]

    def occupied_cells(self) -> tuple[Vector2, Vector2]:
        """Centres of the two cells covered at the destination position."""
        half_offset = self.direction_versor.right_perpendicular() * 0.5
        return (
            self.dest_center_pos + half_offset,
            self.dest_center_pos - half_offset,
        )

    def start_transition(self, transition: TileTransition) -> None:
        self.state = TileState.TRANSITIONING
        self._transition = transition
        self.dest_center_pos = transition.start(self.center_pos, self.direction, self._phase)

    def update(self, phase: float) -> None:
        self._phase = phase
        if self.state is not TileState.TRANSITIONING or self._transition is None:
            return
        self.center_pos = self._transition.position_at(phase)
        if self._transition.is_finished(phase):
            self.state = TileState.STILL
            self._transition = None
