"""Square occupancy grid covering the current Aztec diamond.

Matrix coordinates are named ``(u, v)`` with ``u`` along x and ``v`` along y;
the origin is the lower-left corner. The matrix side is derived from the
number of grid cells, since iteration ``n`` has added ``2n(n+1)`` cells:

    iteration | grid cells (N)
        0     |  0
        1     |  4
        2     |  4 + 8 = 12
        n     |  4 * (1 + ... + n) = 2n(n+1)

so ``n = (sqrt(1 + 2N) - 1) / 2`` and the side is ``2n``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from arctic_circle.domain.errors import InconsistentGeometryError
from arctic_circle.domain.geometry import Vector2
from arctic_circle.domain.grid_cell import GridCell
from arctic_circle.domain.tile import Tile


class GridCoords(NamedTuple):
    """Integer matrix coordinates."""

    u: int
    v: int


@dataclass(frozen=True)
class MatrixCell:
    """Read-only view of one matrix cell."""

    has_grid_cell: bool
    has_tile: bool
    tile: Tile | None = None


_OUTSIDE_CELL = MatrixCell(has_grid_cell=False, has_tile=False)


def ring_count(n_grid_cells: int) -> int:
    """Number of completed diamond rings for ``n_grid_cells`` grid cells.

    Raises :exc:`InconsistentGeometryError` when the count is not of the form
    ``2n(n+1)``.
    """
    if n_grid_cells < 0:
        raise InconsistentGeometryError(f"negative grid cell count: {n_grid_cells}")
    discriminant = 1 + 2 * n_grid_cells
    root = math.isqrt(discriminant)
    if root * root != discriminant or (root - 1) % 2 != 0:
        raise InconsistentGeometryError(
            f"{n_grid_cells} grid cells do not form a whole number of diamond rings"
        )
    return (root - 1) // 2


class Matrix:
    """Occupancy flags for every cell, rebuilt once per iteration."""

    def __init__(self, tiles: Iterable[Tile], grid_cells: Iterable[GridCell]) -> None:
        grid_cells = list(grid_cells)
        self.size = 2 * ring_count(len(grid_cells))
        self._has_grid_cell = np.zeros((self.size, self.size), dtype=bool)
        self._has_tile = np.zeros((self.size, self.size), dtype=bool)
        self._tiles = np.full((self.size, self.size), None, dtype=object)

        for grid_cell in grid_cells:
            coords = self.pos_to_grid_coords(grid_cell.center_pos)
            if not self.in_bounds(coords):
                raise InconsistentGeometryError(
                    f"grid cell at {grid_cell.center_pos} lies outside "
                    f"a {self.size}x{self.size} matrix"
                )
            self._has_grid_cell[coords] = True

        for tile in tiles:
            self.add_tile(tile)

    def in_bounds(self, coords: GridCoords) -> bool:
        return 0 <= coords.u < self.size and 0 <= coords.v < self.size

    def pos_to_grid_coords(self, pos: Vector2) -> GridCoords:
        half = self.size / 2
        return GridCoords(math.floor(pos.x + half), math.floor(pos.y + half))

    def grid_coords_to_pos(self, coords: GridCoords) -> Vector2:
        half = self.size / 2
        return Vector2(coords.u - half + 0.5, coords.v - half + 0.5)

    def cell_at(self, coords: GridCoords) -> MatrixCell:
        """Cell at ``coords``; a non-grid, unoccupied cell outside the bounds."""
        if not self.in_bounds(coords):
            return _OUTSIDE_CELL
        return MatrixCell(
            has_grid_cell=bool(self._has_grid_cell[coords]),
            has_tile=bool(self._has_tile[coords]),
            tile=self._tiles[coords],
        )

    def cell_at_pos(self, pos: Vector2) -> MatrixCell:
        return self.cell_at(self.pos_to_grid_coords(pos))

    def add_tile(self, tile: Tile) -> None:
        for cell_pos in tile.occupied_cells():
            coords = self._checked_coords(cell_pos, tile)
            self._has_tile[coords] = True
            self._tiles[coords] = tile

    def remove_tile(self, tile: Tile) -> None:
        for cell_pos in tile.occupied_cells():
            coords = self._checked_coords(cell_pos, tile)
            self._has_tile[coords] = False
            self._tiles[coords] = None

    def mark_occupied(self, coords: GridCoords) -> None:
        """Provisionally occupy a cell, without binding a tile to it."""
        self._has_grid_cell[coords] = True
        self._has_tile[coords] = True
        self._tiles[coords] = None

    def is_cell_empty(self, coords: GridCoords) -> bool:
        """Inside the diamond and not covered by a tile."""
        cell = self.cell_at(coords)
        return cell.has_grid_cell and not cell.has_tile

    def is_cell_unusable(self, coords: GridCoords) -> bool:
        """Outside the diamond or covered by a tile."""
        cell = self.cell_at(coords)
        return not cell.has_grid_cell or cell.has_tile

    def empty_cells_coords(self) -> list[GridCoords]:
        """Coordinates of every empty cell, ordered by ``u`` then ``v``."""
        empty = self._has_grid_cell & ~self._has_tile
        return [GridCoords(int(u), int(v)) for u, v in np.argwhere(empty)]

    def grid_cell_count(self) -> int:
        return int(self._has_grid_cell.sum())

    def tile_cell_count(self) -> int:
        return int(self._has_tile.sum())

    def _checked_coords(self, pos: Vector2, tile: Tile) -> GridCoords:
        coords = self.pos_to_grid_coords(pos)
        if not self.in_bounds(coords):
            raise InconsistentGeometryError(f"{tile!r} covers a cell outside the matrix")
        return coords
