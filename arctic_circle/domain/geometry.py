"""Continuous 2-D coordinates and the four cardinal tile directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TileDirection(Enum):
    """Direction a tile points to, and slides along."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> TileDirection:
        return _OPPOSITES[self]


_OPPOSITES = {
    TileDirection.UP: TileDirection.DOWN,
    TileDirection.DOWN: TileDirection.UP,
    TileDirection.LEFT: TileDirection.RIGHT,
    TileDirection.RIGHT: TileDirection.LEFT,
}


def are_directions_opposite(d1: TileDirection, d2: TileDirection) -> bool:
    """True for (up, down) and (left, right) pairs, in either order."""
    return _OPPOSITES[d1] is d2


@dataclass(frozen=True)
class Vector2:
    """Immutable pair of real coordinates."""

    x: float
    y: float

    @classmethod
    def from_direction(cls, direction: TileDirection) -> Vector2:
        """Unit displacement for a tile direction."""
        if direction is TileDirection.UP:
            return cls(0.0, 1.0)
        if direction is TileDirection.DOWN:
            return cls(0.0, -1.0)
        if direction is TileDirection.LEFT:
            return cls(-1.0, 0.0)
        return cls(1.0, 0.0)

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def midpoint(self, other: Vector2) -> Vector2:
        return Vector2((self.x + other.x) / 2, (self.y + other.y) / 2)

    def right_perpendicular(self) -> Vector2:
        """Vector rotated a quarter turn clockwise."""
        return Vector2(self.y, -self.x)
