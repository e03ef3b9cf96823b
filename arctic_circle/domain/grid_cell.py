"""Boundary cell of the growing Aztec diamond."""

from __future__ import annotations

from dataclasses import dataclass

from arctic_circle.domain.geometry import Vector2


@dataclass(frozen=True)
class GridCell:
    """A single cell added when the diamond grows by one ring."""

    center_pos: Vector2
