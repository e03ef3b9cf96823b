"""Metrics layer: arctic-circle statistics over tiling snapshots."""

from arctic_circle.metrics.arctic import (
    arctic_circle_radius,
    direction_counts,
    frozen_fraction,
    polar_directions,
    tile_positions_array,
)

__all__ = [
    "arctic_circle_radius",
    "direction_counts",
    "frozen_fraction",
    "polar_directions",
    "tile_positions_array",
]
