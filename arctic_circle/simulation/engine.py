"""Simulation engine: drives domino shuffling on a growing Aztec diamond.

One growth iteration runs five phase states in order:

1. adding grid cells    - the diamond grows by one ring;
2. removing tiles       - facing tile pairs are annihilated;
3. transitioning tiles  - every surviving tile slides one cell;
4. showing placeholders - the empty region is split into 2x2 blocks;
5. adding tiles         - each block receives a random tile pair.

The engine is step-driven: it only advances when :meth:`Simulator.update` is
called with a new phase, and every state handler runs to completion before
``update`` returns.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from random import Random

from arctic_circle.config.types import (
    DisplayMode,
    SimulationParams,
    validate_max_iterations,
    validate_random_bias_coef,
    validate_random_seed,
)
from arctic_circle.domain.allocator import TileAllocator
from arctic_circle.domain.clashes import ClashingTilePair, ClashingTilesDetector
from arctic_circle.domain.errors import InconsistentGeometryError
from arctic_circle.domain.geometry import TileDirection, Vector2
from arctic_circle.domain.grid_cell import GridCell
from arctic_circle.domain.matrix import Matrix
from arctic_circle.domain.phase import SimPhaseState
from arctic_circle.domain.tile import Tile, TileState
from arctic_circle.domain.transition import LinearTileTransition, TileTransition
from arctic_circle.simulation.events import EventChannel, ReentrantUpdateError, SimEvent
from arctic_circle.simulation.phase_state import SimPhaseStateHandler

logger = logging.getLogger(__name__)

TransitionFactory = Callable[[], TileTransition]

# Quadrant q: offset unit vector and per-cell step of the new boundary cells.
_QUADRANT_OFFSETS = ((1, 0), (0, 1), (-1, 0), (0, -1))
_QUADRANT_DELTAS = ((-1, 1), (-1, -1), (1, -1), (1, 1))


def ring_grid_cells(iteration_index: int) -> list[GridCell]:
    """Boundary cells extending a diamond of ``iteration_index`` rings by one.

    Each quadrant receives ``1 + iteration_index`` cells, walking diagonally
    from an axis point at distance ``1 + iteration_index`` from the origin.
    """
    n_per_quadrant = 1 + iteration_index
    offset_length = 1 + iteration_index
    cells: list[GridCell] = []
    for (ux, uy), (dx, dy) in zip(_QUADRANT_OFFSETS, _QUADRANT_DELTAS, strict=True):
        for i in range(n_per_quadrant):
            cells.append(
                GridCell(
                    Vector2(
                        offset_length * ux + (i + 0.5) * dx,
                        offset_length * uy + (i + 0.5) * dy,
                    )
                )
            )
    return cells


class Simulator:
    """Owns tiles, grid cells, the matrix and the pseudo-random source."""

    def __init__(
        self,
        params: SimulationParams | None = None,
        transition_factory: TransitionFactory = LinearTileTransition,
        events: EventChannel | None = None,
    ) -> None:
        self._params = params if params is not None else SimulationParams()
        self._transition_factory = transition_factory
        self.events = events if events is not None else EventChannel()

        self._rng = Random(self._params.random_seed)
        self._phase = 0.0
        self._iteration_index = 0
        self._is_running = False

        self._tiles: list[Tile] = []
        self._grid_cells: list[GridCell] = []
        self._matrix = Matrix(self._tiles, self._grid_cells)
        self._insertion_points: list[Vector2] = []
        self._last_clashes: list[ClashingTilePair] = []

        self._phase_state: SimPhaseState | None = None
        self._state_phase = self._phase
        self._phase_state_handler = SimPhaseStateHandler(self._phase)
        self._phase_state_handler.subscribe(self._on_phase_state_change)

        self._set_running_state(True)

    # ------------------------------------------------------------------
    # Read-only queries
    # ------------------------------------------------------------------

    @property
    def phase(self) -> float:
        return self._phase

    @property
    def iteration_index(self) -> int:
        return self._iteration_index

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def phase_state(self) -> SimPhaseState | None:
        return self._phase_state

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    @property
    def insertion_points(self) -> list[Vector2]:
        return list(self._insertion_points)

    @property
    def last_clashes(self) -> list[ClashingTilePair]:
        """Clashes resolved by the most recent removing-tiles state."""
        return list(self._last_clashes)

    def get_params(self) -> SimulationParams:
        return dataclasses.replace(self._params)

    def get_tiles(self) -> list[Tile]:
        return list(self._tiles)

    def get_grid_cells(self) -> list[GridCell]:
        return list(self._grid_cells)

    # ------------------------------------------------------------------
    # Parameter setters
    # ------------------------------------------------------------------

    def set_max_iterations(self, max_iterations: int) -> None:
        self._ensure_not_reentrant("set_max_iterations")
        validate_max_iterations(max_iterations)
        self._params = dataclasses.replace(self._params, max_iterations=max_iterations)
        self.events.publish(SimEvent.MAX_ITERATIONS_CHANGED, max_iterations)

    def set_random_seed(self, seed: int) -> None:
        self._ensure_not_reentrant("set_random_seed")
        validate_random_seed(seed)
        self._params = dataclasses.replace(self._params, random_seed=seed)
        self._rng = Random(seed)
        self.events.publish(SimEvent.RANDOM_SEED_CHANGED, seed)

    def set_random_bias_coef(self, random_bias_coef: float) -> None:
        self._ensure_not_reentrant("set_random_bias_coef")
        validate_random_bias_coef(random_bias_coef)
        self._params = dataclasses.replace(self._params, random_bias_coef=random_bias_coef)
        self.events.publish(SimEvent.RANDOM_BIAS_COEF_CHANGED, random_bias_coef)

    def set_arctic_circle_active(self, is_active: bool) -> None:
        self._ensure_not_reentrant("set_arctic_circle_active")
        self._params = dataclasses.replace(self._params, is_arctic_circle_active=is_active)
        self.events.publish(SimEvent.ARCTIC_CIRCLE_ACTIVE_CHANGED, is_active)

    def set_display_mode(self, mode: DisplayMode) -> None:
        self._ensure_not_reentrant("set_display_mode")
        if not isinstance(mode, DisplayMode):
            raise ValueError(f"display_mode must be a DisplayMode, got {mode!r}")
        self._params = dataclasses.replace(self._params, display_mode=mode)
        self.events.publish(SimEvent.DISPLAY_MODE_CHANGED, mode)

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def update(self, phase: float) -> None:
        """Let the phase states catch up with ``phase``, then advance tiles to it.

        Each state entered on the way runs against tiles brought up to that
        state's own boundary phase, so one large step and many small steps
        produce the same tiling.
        """
        self._ensure_not_reentrant("update")
        if not self._is_running:
            return
        if phase < self._phase:
            raise ValueError(f"phase must be non-decreasing: {phase} < {self._phase}")

        self._phase = phase
        try:
            self._phase_state_handler.update(phase)
        except InconsistentGeometryError:
            logger.error(
                "Aborting run at iteration %d (phase %.3f): inconsistent geometry",
                self._iteration_index,
                phase,
            )
            self._set_running_state(False)
            raise
        self._update_tiles(phase)

    def _update_tiles(self, phase: float) -> None:
        for tile in self._tiles:
            tile.update(phase)

    def _ensure_not_reentrant(self, operation: str) -> None:
        if self.events.is_publishing:
            raise ReentrantUpdateError(f"{operation} called from an event listener")

    def _set_running_state(self, value: bool) -> None:
        self._is_running = value
        self.events.publish(SimEvent.RUNNING_STATE_CHANGED, value)

    def _on_phase_state_change(self, state: SimPhaseState) -> None:
        if not self._is_running:
            return
        self._phase_state = state
        self._state_phase = self._phase_state_handler.last_transition_phase
        self._update_tiles(self._state_phase)
        self.events.publish(SimEvent.PHASE_STATE_CHANGED, state)

        match state:
            case SimPhaseState.ADDING_GRID_CELLS:
                self._add_grid_cells()
            case SimPhaseState.REMOVING_TILES:
                self._remove_tiles()
            case SimPhaseState.TRANSITIONING_TILES:
                self._transition_tiles()
            case SimPhaseState.SHOWING_PLACEHOLDERS:
                self._show_placeholders()
            case SimPhaseState.ADDING_TILES:
                self._add_tiles()

        if state is SimPhaseState.ADDING_GRID_CELLS:
            # First state of the sequence
            self._iteration_index += 1
            logger.info(
                "Iteration %d started at phase %.3f", self._iteration_index, self._state_phase
            )
            self.events.publish(SimEvent.ITERATION_STARTED, self._iteration_index)

    # ------------------------------------------------------------------
    # Phase state handlers
    # ------------------------------------------------------------------

    def _add_grid_cells(self) -> None:
        added = ring_grid_cells(self._iteration_index)
        self._grid_cells.extend(added)
        self.events.publish(SimEvent.GRID_CELLS_ADDED, list(added))

    def _remove_tiles(self) -> None:
        detector = ClashingTilesDetector(self._tiles, self._matrix)
        clashes = detector.find_clashing_tile_pairs()
        removed = [tile for clash in clashes for tile in (clash.tile1, clash.tile2)]
        removed_ids = {id(tile) for tile in removed}
        if len(removed_ids) != len(removed):
            raise InconsistentGeometryError("a tile takes part in more than one clash")

        self._tiles = [tile for tile in self._tiles if id(tile) not in removed_ids]
        for tile in removed:
            self._matrix.remove_tile(tile)
        self._last_clashes = clashes

        logger.debug("Removed %d clashing tile pairs", len(clashes))
        self.events.publish(SimEvent.TILES_REMOVED, removed)

    def _transition_tiles(self) -> None:
        for tile in self._tiles:
            if tile.state is TileState.STILL:
                tile.start_transition(self._transition_factory())

    def _show_placeholders(self) -> None:
        self._matrix = Matrix(self._tiles, self._grid_cells)
        allocator = TileAllocator(self._matrix)
        self._insertion_points = allocator.find_insertion_points()
        logger.debug(
            "Found %d insertion points in %d rounds",
            len(self._insertion_points),
            allocator.rounds,
        )
        self.events.publish(SimEvent.PLACEHOLDERS_ADDED, list(self._insertion_points))

    def _add_tiles(self) -> None:
        added: list[Tile] = []
        for point in self._insertion_points:
            if self._rng.random() > self._params.random_bias_coef:
                pair = (
                    Tile(point + Vector2(0.0, 0.5), TileDirection.UP, self._state_phase),
                    Tile(point - Vector2(0.0, 0.5), TileDirection.DOWN, self._state_phase),
                )
            else:
                pair = (
                    Tile(point + Vector2(0.5, 0.0), TileDirection.RIGHT, self._state_phase),
                    Tile(point - Vector2(0.5, 0.0), TileDirection.LEFT, self._state_phase),
                )
            added.extend(pair)

        self._tiles.extend(added)
        for tile in added:
            self._matrix.add_tile(tile)
        self.events.publish(SimEvent.TILES_ADDED, list(added))

        if self._iteration_index >= self._params.max_iterations:
            logger.info("Reached max iterations (%d); stopping", self._params.max_iterations)
            self._set_running_state(False)
