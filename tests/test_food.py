"""Tests for Food spawning, motion, and activation."""
from __future__ import annotations

import random

import pytest

from tick_snake.food import Food, FoodConfig
from tick_snake.types import EDGES, Bounds, Edge, Vec2


@pytest.fixture
def bounds() -> Bounds:
    return Bounds(20, 15)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)


def on_edge(pos: Vec2, bounds: Bounds) -> bool:
    return (
        pos.x in (0, bounds.width - 1)
        or pos.y in (0, bounds.height - 1)
    )


class TestConstruction:
    def test_new_at_position(self) -> None:
        food = Food(Vec2(5, 5))
        assert food.position == Vec2(5, 5)
        assert food.is_active()

    def test_default_is_stationary_at_origin(self) -> None:
        food = Food()
        assert food.position == Vec2.zero()
        assert food.velocity == Vec2.zero()

    def test_default_config(self) -> None:
        config = Food().config
        assert config.speed_multiplier == 1
        assert config.color == (138, 43, 226)


class TestSpawnAtEdge:
    def test_top(self, bounds: Bounds, rng: random.Random) -> None:
        food = Food.spawn_at_edge(Edge.TOP, bounds, rng=rng)
        assert food.position.y == 0
        assert 0 <= food.position.x < bounds.width
        assert food.velocity == Vec2(0, 1)

    def test_bottom(self, bounds: Bounds, rng: random.Random) -> None:
        food = Food.spawn_at_edge(Edge.BOTTOM, bounds, rng=rng)
        assert food.position.y == bounds.height - 1
        assert food.velocity == Vec2(0, -1)

    def test_left(self, bounds: Bounds, rng: random.Random) -> None:
        food = Food.spawn_at_edge(Edge.LEFT, bounds, rng=rng)
        assert food.position.x == 0
        assert 0 <= food.position.y < bounds.height
        assert food.velocity == Vec2(1, 0)

    def test_right(self, bounds: Bounds, rng: random.Random) -> None:
        food = Food.spawn_at_edge(Edge.RIGHT, bounds, rng=rng)
        assert food.position.x == bounds.width - 1
        assert food.velocity == Vec2(-1, 0)

    def test_speed_multiplier_scales_velocity(self, bounds: Bounds, rng: random.Random) -> None:
        food = Food.spawn_at_edge(Edge.LEFT, bounds, FoodConfig(speed_multiplier=3), rng)
        assert food.velocity == Vec2(3, 0)

    def test_random_edge(self, bounds: Bounds, rng: random.Random) -> None:
        for _ in range(50):
            food = Food.spawn_at_random_edge(bounds, rng=rng)
            assert bounds.contains(food.position)
            assert on_edge(food.position, bounds)
            assert food.velocity.magnitude_squared() == 1

    def test_every_edge_gets_picked(self, bounds: Bounds, rng: random.Random) -> None:
        food = Food(rng=rng)
        seen = set()
        for _ in range(200):
            food.respawn_from_random_edge(bounds)
            seen.add(food.velocity)
        assert seen == {edge.to_direction().to_vec2() for edge in EDGES}


class TestTick:
    def test_stationary_food_stays(self, bounds: Bounds) -> None:
        food = Food(Vec2(5, 5))
        food.tick(bounds)
        assert food.position == Vec2(5, 5)

    def test_moves_by_velocity(self, bounds: Bounds) -> None:
        food = Food(Vec2(5, 5))
        food.set_velocity(Vec2(1, 0))
        food.tick(bounds)
        assert food.position == Vec2(6, 5)

    def test_leaving_bounds_respawns_on_an_edge(self, bounds: Bounds, rng: random.Random) -> None:
        food = Food(Vec2(0, 5), rng=rng)
        food.set_velocity(Vec2(-1, 0))
        food.tick(bounds)
        assert bounds.contains(food.position)
        assert on_edge(food.position, bounds)
        assert food.is_active()

    def test_always_in_bounds_after_tick(self, bounds: Bounds, rng: random.Random) -> None:
        food = Food.spawn_at_random_edge(bounds, FoodConfig(speed_multiplier=4), rng)
        for _ in range(300):
            food.tick(bounds)
            assert not food.is_out_of_bounds(bounds)

    def test_inactive_food_does_not_move(self, bounds: Bounds) -> None:
        food = Food(Vec2(5, 5))
        food.set_velocity(Vec2(1, 0))
        food.deactivate()
        food.tick(bounds)
        assert food.position == Vec2(5, 5)


class TestActivation:
    def test_is_valid_target_when_active(self) -> None:
        assert Food(Vec2(5, 5)).is_valid_target()

    def test_deactivate_makes_invalid_target(self) -> None:
        food = Food(Vec2(5, 5))
        food.deactivate()
        assert not food.is_active()
        assert not food.is_valid_target()

    def test_set_position_reactivates(self) -> None:
        food = Food(Vec2(5, 5))
        food.deactivate()
        food.set_position(Vec2(3, 3))
        assert food.is_active()
        assert food.position == Vec2(3, 3)

    def test_respawn_reactivates(self, bounds: Bounds, rng: random.Random) -> None:
        food = Food(Vec2(5, 5), rng=rng)
        food.deactivate()
        food.respawn_from_random_edge(bounds)
        assert food.is_active()
        assert on_edge(food.position, bounds)

    def test_out_of_bounds(self, bounds: Bounds) -> None:
        assert Food(Vec2(20, 0)).is_out_of_bounds(bounds)
        assert not Food(Vec2(19, 14)).is_out_of_bounds(bounds)
