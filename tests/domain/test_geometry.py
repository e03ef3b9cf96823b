from __future__ import annotations

import pytest

from arctic_circle.domain.geometry import TileDirection, Vector2, are_directions_opposite


class TestTileDirection:
    @pytest.mark.parametrize(
        ("d1", "d2"),
        [
            (TileDirection.UP, TileDirection.DOWN),
            (TileDirection.DOWN, TileDirection.UP),
            (TileDirection.LEFT, TileDirection.RIGHT),
            (TileDirection.RIGHT, TileDirection.LEFT),
        ],
    )
    def test_opposite_pairs(self, d1: TileDirection, d2: TileDirection) -> None:
        assert are_directions_opposite(d1, d2)
        assert d1.opposite is d2

    @pytest.mark.parametrize(
        ("d1", "d2"),
        [
            (TileDirection.UP, TileDirection.UP),
            (TileDirection.UP, TileDirection.LEFT),
            (TileDirection.RIGHT, TileDirection.DOWN),
        ],
    )
    def test_non_opposite_pairs(self, d1: TileDirection, d2: TileDirection) -> None:
        assert not are_directions_opposite(d1, d2)


class TestVector2:
    def test_from_direction(self) -> None:
        assert Vector2.from_direction(TileDirection.UP) == Vector2(0, 1)
        assert Vector2.from_direction(TileDirection.DOWN) == Vector2(0, -1)
        assert Vector2.from_direction(TileDirection.LEFT) == Vector2(-1, 0)
        assert Vector2.from_direction(TileDirection.RIGHT) == Vector2(1, 0)

    def test_arithmetic(self) -> None:
        a = Vector2(1.0, 2.0)
        b = Vector2(0.5, -1.0)
        assert a + b == Vector2(1.5, 1.0)
        assert a - b == Vector2(0.5, 3.0)
        assert a * 2 == Vector2(2.0, 4.0)
        assert 0.5 * a == Vector2(0.5, 1.0)

    def test_midpoint(self) -> None:
        assert Vector2(0.0, 0.5).midpoint(Vector2(0.0, -0.5)) == Vector2(0.0, 0.0)

    def test_right_perpendicular_turns_clockwise(self) -> None:
        assert Vector2(0, 1).right_perpendicular() == Vector2(1, 0)
        assert Vector2(1, 0).right_perpendicular() == Vector2(0, -1)

    def test_is_immutable(self) -> None:
        v = Vector2(1.0, 1.0)
        with pytest.raises(AttributeError):
            v.x = 2.0  # type: ignore[misc]
