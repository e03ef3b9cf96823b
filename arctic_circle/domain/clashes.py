"""Detection of tile pairs that would collide during the next slide."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from arctic_circle.domain.geometry import TileDirection, Vector2, are_directions_opposite
from arctic_circle.domain.matrix import GridCoords, Matrix
from arctic_circle.domain.tile import Tile


@dataclass(frozen=True)
class ClashingTilePair:
    """Two facing tiles annihilated before sliding."""

    tile1: Tile
    tile2: Tile
    clashing_center_pos: Vector2


class ClashingTilesDetector:
    """Finds facing tile pairs using the current matrix.

    Only tiles pointing up or right are scanned: every clash pairs one of them
    with a tile pointing down or left, so the other half would report each
    clash twice.
    """

    def __init__(self, tiles: Sequence[Tile], matrix: Matrix) -> None:
        self.tiles = tiles
        self.matrix = matrix

    def find_clashing_tile_pairs(self) -> list[ClashingTilePair]:
        clashes: list[ClashingTilePair] = []
        for tile in self.tiles:
            if tile.direction not in (TileDirection.UP, TileDirection.RIGHT):
                continue
            other = self._facing_tile(tile)
            if other is None:
                continue
            clashes.append(
                ClashingTilePair(
                    tile1=tile,
                    tile2=other,
                    clashing_center_pos=tile.dest_center_pos.midpoint(other.dest_center_pos),
                )
            )
        return clashes

    def _facing_tile(self, tile: Tile) -> Tile | None:
        """Tile in the cell ahead of ``tile`` pointing the opposite way."""
        first_cell, _ = tile.occupied_cells()
        coords = self.matrix.pos_to_grid_coords(first_cell)
        ahead = GridCoords(
            coords.u + int(tile.direction_versor.x),
            coords.v + int(tile.direction_versor.y),
        )
        other = self.matrix.cell_at(ahead).tile
        if other is not None and are_directions_opposite(tile.direction, other.direction):
            return other
        return None
