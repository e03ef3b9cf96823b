from __future__ import annotations

import pytest

from arctic_circle.domain.geometry import TileDirection, Vector2
from arctic_circle.domain.transition import (
    EaseInOutTileTransition,
    LinearTileTransition,
    TileTransition,
)


class TestLinearTileTransition:
    def test_start_returns_destination(self) -> None:
        transition = LinearTileTransition()
        dest = transition.start(Vector2(0.0, 0.5), TileDirection.UP, 3.0)
        assert dest == Vector2(0.0, 1.5)

    def test_moves_at_constant_speed(self) -> None:
        transition = LinearTileTransition()
        transition.start(Vector2(0.0, 0.0), TileDirection.RIGHT, 2.0)
        assert transition.position_at(2.25) == Vector2(0.25, 0.0)
        assert transition.position_at(2.5) == Vector2(0.5, 0.0)

    def test_lands_exactly_and_clamps(self) -> None:
        transition = LinearTileTransition()
        transition.start(Vector2(0.5, 0.0), TileDirection.LEFT, 0.0)
        assert transition.position_at(1.0) == Vector2(-0.5, 0.0)
        assert transition.position_at(7.0) == Vector2(-0.5, 0.0)
        assert transition.is_finished(1.0)
        assert not transition.is_finished(0.99)

    def test_before_start_phase_stays_at_origin(self) -> None:
        transition = LinearTileTransition()
        transition.start(Vector2(0.0, 0.0), TileDirection.DOWN, 5.0)
        assert transition.position_at(4.0) == Vector2(0.0, 0.0)

    def test_position_requires_start(self) -> None:
        with pytest.raises(RuntimeError, match="not been started"):
            LinearTileTransition().position_at(1.0)


class TestEaseInOutTileTransition:
    def test_is_symmetric_about_midpoint(self) -> None:
        transition = EaseInOutTileTransition()
        transition.start(Vector2(0.0, 0.0), TileDirection.UP, 0.0)
        assert transition.position_at(0.5).y == pytest.approx(0.5)
        assert transition.position_at(0.25).y < 0.25
        assert transition.position_at(0.75).y > 0.75

    def test_same_destination_as_linear(self) -> None:
        ease = EaseInOutTileTransition()
        linear = LinearTileTransition()
        origin = Vector2(1.5, -0.5)
        assert ease.start(origin, TileDirection.DOWN, 0.0) == linear.start(
            origin, TileDirection.DOWN, 0.0
        )


def test_base_class_is_abstract() -> None:
    with pytest.raises(TypeError):
        TileTransition()  # type: ignore[abstract]
