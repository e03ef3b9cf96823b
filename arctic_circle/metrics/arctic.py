"""Arctic-circle metrics over a tiling snapshot.

For a diamond of order ``n`` (``|x| + |y| <= n``) the limiting boundary
between the frozen corners and the disordered centre of a uniform tiling is
the inscribed circle of radius ``n / sqrt(2)``. Outside it, tiles in each of
the four polar regions all point away from the centre: up in the north, down
in the south, right in the east and left in the west.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from arctic_circle.domain.geometry import TileDirection
from arctic_circle.domain.tile import Tile


def tile_positions_array(tiles: Sequence[Tile]) -> np.ndarray:
    """Tile centres as an ``(n, 2)`` float array."""
    if not tiles:
        return np.zeros((0, 2), dtype=float)
    return np.array([(t.center_pos.x, t.center_pos.y) for t in tiles], dtype=float)


def direction_counts(tiles: Sequence[Tile]) -> dict[TileDirection, int]:
    """Number of tiles pointing in each direction (all four keys present)."""
    counts = {direction: 0 for direction in TileDirection}
    for tile in tiles:
        counts[tile.direction] += 1
    return counts


def arctic_circle_radius(order: int) -> float:
    """Radius of the circle inscribed in an order-``order`` diamond."""
    if order < 0:
        raise ValueError("order must be >= 0")
    return order / math.sqrt(2.0)


def polar_directions(positions: np.ndarray) -> list[TileDirection]:
    """Outward direction of the polar region each position falls in.

    Diagonal ties go to the vertical regions.
    """
    result: list[TileDirection] = []
    for x, y in positions:
        if abs(y) >= abs(x):
            result.append(TileDirection.UP if y > 0 else TileDirection.DOWN)
        else:
            result.append(TileDirection.RIGHT if x > 0 else TileDirection.LEFT)
    return result


def frozen_fraction(tiles: Sequence[Tile], order: int) -> float:
    """Fraction of tiles outside the arctic circle pointing outward.

    Returns NaN when no tile lies outside the circle.
    """
    positions = tile_positions_array(tiles)
    if positions.shape[0] == 0:
        return float("nan")
    radius = arctic_circle_radius(order)
    outside = np.hypot(positions[:, 0], positions[:, 1]) > radius
    if not outside.any():
        return float("nan")
    outside_indices = np.flatnonzero(outside)
    expected = polar_directions(positions[outside_indices])
    frozen = sum(
        1
        for index, direction in zip(outside_indices, expected, strict=True)
        if tiles[int(index)].direction is direction
    )
    return frozen / len(outside_indices)
