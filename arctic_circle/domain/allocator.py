"""Insertion points for new tile pairs (domino shuffling placement).

Algorithm, repeated until the empty region is covered:

1. List every 2x2 block of empty cells (blocks may overlap).
2. Keep the blocks with at least one corner whose two outside neighbours are
   both unusable. No other block could cover that corner cell, so these
   blocks are forced.
3. Mark the kept blocks as occupied and record their centres.

Each round consumes at least one block of four cells, so the loop runs at
most ``ceil(initial_empty_cells / 4)`` rounds. A round that finds blocks but
none of them forced, overlapping forced blocks, or empty cells left over
without any 2x2 block all mean the grid growth rule has been broken; these
raise :exc:`InconsistentGeometryError`.
"""

from __future__ import annotations

import math

from arctic_circle.domain.errors import InconsistentGeometryError
from arctic_circle.domain.geometry import Vector2
from arctic_circle.domain.matrix import GridCoords, Matrix

# For each block corner (offset from the lower-left cell), the two neighbours
# of that corner cell lying outside the block.
_CORNER_NEIGHBOUR_OFFSETS: tuple[tuple[tuple[int, int], tuple[int, int]], ...] = (
    ((-1, 0), (0, -1)),  # lower-left
    ((2, 0), (1, -1)),  # lower-right
    ((-1, 1), (0, 2)),  # upper-left
    ((2, 1), (1, 2)),  # upper-right
)

_BLOCK_OFFSETS = ((0, 0), (1, 0), (0, 1), (1, 1))


def block_cells(lower_left: GridCoords) -> list[GridCoords]:
    """The four cells of the 2x2 block anchored at ``lower_left``."""
    return [GridCoords(lower_left.u + du, lower_left.v + dv) for du, dv in _BLOCK_OFFSETS]


class TileAllocator:
    """Finds every 2x2 insertion point for the current iteration.

    The matrix passed in is mutated: selected blocks are left provisionally
    occupied.
    """

    def __init__(self, matrix: Matrix) -> None:
        self.matrix = matrix
        self.rounds = 0

    def find_insertion_points(self) -> list[Vector2]:
        """Centres of the 2x2 blocks tiling the whole empty region."""
        n_empty = len(self.matrix.empty_cells_coords())
        found: list[GridCoords] = []

        for _ in range(math.ceil(n_empty / 4)):
            candidates = self._find_empty_blocks()
            if not candidates:
                break
            forced = self._find_forced_blocks(candidates)
            if not forced:
                raise InconsistentGeometryError(
                    f"{len(candidates)} empty 2x2 blocks remain but none is forced"
                )
            self._mark_occupied(forced)
            found.extend(forced)
            self.rounds += 1

        leftover = len(self.matrix.empty_cells_coords())
        if leftover:
            raise InconsistentGeometryError(
                f"{leftover} empty cells cannot be covered by 2x2 blocks"
            )

        offset = Vector2(0.5, 0.5)
        return [self.matrix.grid_coords_to_pos(coords) + offset for coords in found]

    def _find_empty_blocks(self) -> list[GridCoords]:
        """Lower-left cells of every 2x2 empty block, in row-major order."""
        return [
            coords
            for coords in self.matrix.empty_cells_coords()
            if all(self.matrix.is_cell_empty(cell) for cell in block_cells(coords))
        ]

    def _find_forced_blocks(self, candidates: list[GridCoords]) -> list[GridCoords]:
        result: list[GridCoords] = []
        for block in candidates:
            for first, second in _CORNER_NEIGHBOUR_OFFSETS:
                if self.matrix.is_cell_unusable(
                    GridCoords(block.u + first[0], block.v + first[1])
                ) and self.matrix.is_cell_unusable(
                    GridCoords(block.u + second[0], block.v + second[1])
                ):
                    result.append(block)
                    break
        return result

    def _mark_occupied(self, blocks: list[GridCoords]) -> None:
        claimed: set[GridCoords] = set()
        for block in blocks:
            cells = block_cells(block)
            if claimed.intersection(cells):
                raise InconsistentGeometryError(f"forced blocks overlap at {block}")
            claimed.update(cells)
        for cell in claimed:
            self.matrix.mark_occupied(cell)
