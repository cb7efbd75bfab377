"""Tests for Scope alignment and ray casting."""
from __future__ import annotations

import pytest

from tick_snake.scope import Scope, ScopeConfig
from tick_snake.types import Bounds, Direction, Vec2

BOUNDS = Bounds(20, 20)
ORIGIN = Vec2(5, 5)


def aligned(direction: Direction, target: Vec2) -> bool:
    scope = Scope()
    scope.update(ORIGIN, direction, target, BOUNDS)
    return scope.is_aligned()


class TestDefaults:
    def test_new_scope(self) -> None:
        scope = Scope()
        assert not scope.is_aligned()
        assert scope.target is None
        assert scope.direction is Direction.RIGHT
        assert scope.distance_to_target() is None

    def test_default_config(self) -> None:
        config = Scope().config
        assert config.dot_spacing == 2
        assert config.aligned_color == (0, 255, 0)
        assert config.unaligned_color == (255, 255, 255)

    def test_empty_ray_before_update(self) -> None:
        assert list(Scope().ray_cast()) == []


class TestAlignment:
    def test_aligned_right(self) -> None:
        assert aligned(Direction.RIGHT, Vec2(10, 5))

    def test_off_axis_right(self) -> None:
        assert not aligned(Direction.RIGHT, Vec2(10, 7))

    def test_behind_right(self) -> None:
        assert not aligned(Direction.RIGHT, Vec2(2, 5))

    def test_target_at_origin_is_never_aligned(self) -> None:
        for direction in Direction:
            assert not aligned(direction, ORIGIN)

    @pytest.mark.parametrize(
        "direction, ahead, behind",
        [
            (Direction.UP, Vec2(5, 1), Vec2(5, 9)),
            (Direction.DOWN, Vec2(5, 9), Vec2(5, 1)),
            (Direction.LEFT, Vec2(1, 5), Vec2(9, 5)),
            (Direction.RIGHT, Vec2(9, 5), Vec2(1, 5)),
        ],
    )
    def test_each_direction(self, direction: Direction, ahead: Vec2, behind: Vec2) -> None:
        assert aligned(direction, ahead)
        assert not aligned(direction, behind)

    def test_update_recomputes(self) -> None:
        scope = Scope()
        scope.update(ORIGIN, Direction.RIGHT, Vec2(10, 5), BOUNDS)
        assert scope.is_aligned()
        scope.update(ORIGIN, Direction.UP, Vec2(10, 5), BOUNDS)
        assert not scope.is_aligned()


class TestRayCast:
    def test_starts_one_step_ahead(self) -> None:
        scope = Scope()
        scope.update(ORIGIN, Direction.RIGHT, Vec2(10, 5), Bounds(10, 10))
        assert list(scope.ray_cast()) == [Vec2(x, 5) for x in range(6, 10)]

    def test_stops_at_bounds(self) -> None:
        scope = Scope()
        scope.update(Vec2(2, 2), Direction.UP, Vec2(0, 0), BOUNDS)
        assert list(scope.ray_cast()) == [Vec2(2, 1), Vec2(2, 0)]

    def test_empty_at_edge(self) -> None:
        scope = Scope()
        scope.update(Vec2(0, 3), Direction.LEFT, Vec2(0, 0), BOUNDS)
        assert list(scope.ray_cast()) == []

    def test_fresh_iterator_per_call(self) -> None:
        scope = Scope()
        scope.update(ORIGIN, Direction.DOWN, Vec2(0, 0), BOUNDS)
        first = list(scope.ray_cast())
        assert list(scope.ray_cast()) == first
        assert len(first) == 14

    def test_exhausted_iterator_stays_exhausted(self) -> None:
        scope = Scope()
        scope.update(Vec2(1, 1), Direction.LEFT, Vec2(0, 0), BOUNDS)
        ray = scope.ray_cast()
        assert list(ray) == [Vec2(0, 1)]
        assert list(ray) == []

    def test_hits_target(self) -> None:
        scope = Scope()
        scope.update(ORIGIN, Direction.RIGHT, Vec2(0, 0), BOUNDS)
        assert scope.ray_cast().hits_target(Vec2(12, 5))
        assert not scope.ray_cast().hits_target(Vec2(12, 6))


class TestDistance:
    def test_squared_distance(self) -> None:
        scope = Scope(ScopeConfig(dot_spacing=3))
        scope.update(Vec2(1, 1), Direction.RIGHT, Vec2(4, 5), BOUNDS)
        assert scope.distance_to_target() == 25
