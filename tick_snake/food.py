"""Food - a single mobile target that enters from the playfield edges."""
from __future__ import annotations

import random
from dataclasses import dataclass

from tick_snake.types import EDGES, Bounds, Edge, Vec2

Color = tuple[int, int, int]


@dataclass(frozen=True)
class FoodConfig:
    speed_multiplier: int = 1
    color: Color = (138, 43, 226)


class Food:
    def __init__(
        self,
        position: Vec2 | None = None,
        config: FoodConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._position = position if position is not None else Vec2.zero()
        self._velocity = Vec2.zero()
        self._active = True
        self._config = config if config is not None else FoodConfig()
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def spawn_at_edge(
        cls,
        edge: Edge,
        bounds: Bounds,
        config: FoodConfig | None = None,
        rng: random.Random | None = None,
    ) -> Food:
        """Place food on a random cell of ``edge``, heading inward."""
        food = cls(config=config, rng=rng)
        food._enter_from(edge, bounds)
        return food

    @classmethod
    def spawn_at_random_edge(
        cls,
        bounds: Bounds,
        config: FoodConfig | None = None,
        rng: random.Random | None = None,
    ) -> Food:
        food = cls(config=config, rng=rng)
        food.respawn_from_random_edge(bounds)
        return food

    @property
    def position(self) -> Vec2:
        return self._position

    def set_position(self, pos: Vec2) -> None:
        self._position = pos
        self._active = True

    @property
    def velocity(self) -> Vec2:
        return self._velocity

    def set_velocity(self, vel: Vec2) -> None:
        self._velocity = vel

    @property
    def config(self) -> FoodConfig:
        return self._config

    def is_active(self) -> bool:
        return self._active

    def deactivate(self) -> None:
        self._active = False

    def is_valid_target(self) -> bool:
        return self._active

    def is_out_of_bounds(self, bounds: Bounds) -> bool:
        return not bounds.contains(self._position)

    def respawn_from_random_edge(self, bounds: Bounds) -> None:
        self._enter_from(self._rng.choice(EDGES), bounds)

    def tick(self, bounds: Bounds) -> None:
        if not self._active:
            return
        self._position = self._position + self._velocity
        if self.is_out_of_bounds(bounds):
            self.respawn_from_random_edge(bounds)

    def _enter_from(self, edge: Edge, bounds: Bounds) -> None:
        self._position = _edge_cell(edge, bounds, self._rng)
        self._velocity = edge.to_direction().to_vec2() * self._config.speed_multiplier
        self._active = True


def _edge_cell(edge: Edge, bounds: Bounds, rng: random.Random) -> Vec2:
    if edge is Edge.TOP:
        return Vec2(rng.randrange(bounds.width), 0)
    if edge is Edge.BOTTOM:
        return Vec2(rng.randrange(bounds.width), bounds.height - 1)
    if edge is Edge.LEFT:
        return Vec2(0, rng.randrange(bounds.height))
    return Vec2(bounds.width - 1, rng.randrange(bounds.height))
