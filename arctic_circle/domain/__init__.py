"""Domain layer: geometry, tiles, occupancy matrix, placement and clashes."""

from arctic_circle.domain.phase import SimPhaseState
from arctic_circle.domain.geometry import TileDirection, Vector2, are_directions_opposite
from arctic_circle.domain.errors import InconsistentGeometryError
from arctic_circle.domain.grid_cell import GridCell
from arctic_circle.domain.transition import (
    EaseInOutTileTransition,
    LinearTileTransition,
    TileTransition,
)
from arctic_circle.domain.tile import Tile, TileState
from arctic_circle.domain.matrix import GridCoords, Matrix, MatrixCell, ring_count
from arctic_circle.domain.allocator import TileAllocator
from arctic_circle.domain.clashes import ClashingTilePair, ClashingTilesDetector

__all__ = [
    "ClashingTilePair",
    "ClashingTilesDetector",
    "EaseInOutTileTransition",
    "GridCell",
    "GridCoords",
    "InconsistentGeometryError",
    "LinearTileTransition",
    "Matrix",
    "MatrixCell",
    "SimPhaseState",
    "Tile",
    "TileAllocator",
    "TileDirection",
    "TileState",
    "TileTransition",
    "Vector2",
    "are_directions_opposite",
    "ring_count",
]
