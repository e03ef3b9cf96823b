"""Phase states of one growth iteration."""

from __future__ import annotations

from enum import Enum


class SimPhaseState(Enum):
    """Engine operation gated by the phase-state machine."""

    ADDING_GRID_CELLS = "addingGridCells"
    REMOVING_TILES = "removingTiles"
    TRANSITIONING_TILES = "transitioningTiles"
    SHOWING_PLACEHOLDERS = "showingPlaceholders"
    ADDING_TILES = "addingTiles"
