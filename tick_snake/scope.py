"""Scope - aim feedback along the snake's facing direction."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from tick_snake.types import Bounds, Direction, Vec2

Color = tuple[int, int, int]


@dataclass(frozen=True)
class ScopeConfig:
    aligned_color: Color = (0, 255, 0)
    unaligned_color: Color = (255, 255, 255)
    dot_spacing: int = 2  # draw every n-th ray point


class RayCast:
    """Cells ahead of ``origin`` in ``direction``, stopping at the bounds."""

    def __init__(self, origin: Vec2, direction: Direction, bounds: Bounds) -> None:
        self._current = origin
        self._step = direction.to_vec2()
        self._bounds = bounds
        self._done = False

    def __iter__(self) -> RayCast:
        return self

    def __next__(self) -> Vec2:
        if self._done:
            raise StopIteration
        self._current = self._current + self._step
        if not self._bounds.contains(self._current):
            self._done = True
            raise StopIteration
        return self._current

    def hits_target(self, target: Vec2) -> bool:
        return any(pos == target for pos in self)


class Scope:
    def __init__(self, config: ScopeConfig | None = None) -> None:
        self._origin = Vec2.zero()
        self._direction = Direction.RIGHT
        self._target: Vec2 | None = None
        self._bounds = Bounds(0, 0)
        self._is_aligned = False
        self._config = config if config is not None else ScopeConfig()

    @property
    def origin(self) -> Vec2:
        return self._origin

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def target(self) -> Vec2 | None:
        return self._target

    @property
    def config(self) -> ScopeConfig:
        return self._config

    def update(
        self, origin: Vec2, direction: Direction, target: Vec2, bounds: Bounds
    ) -> None:
        self._origin = origin
        self._direction = direction
        self._target = target
        self._bounds = bounds
        self._is_aligned = self._check_alignment()

    def _check_alignment(self) -> bool:
        # Same row/column as the origin and strictly in front of it.
        target = self._target
        if target is None:
            return False
        origin = self._origin
        if self._direction is Direction.UP:
            return origin.x == target.x and target.y < origin.y
        if self._direction is Direction.DOWN:
            return origin.x == target.x and target.y > origin.y
        if self._direction is Direction.LEFT:
            return origin.y == target.y and target.x < origin.x
        return origin.y == target.y and target.x > origin.x

    def is_aligned(self) -> bool:
        return self._is_aligned

    def ray_cast(self) -> RayCast:
        return RayCast(self._origin, self._direction, self._bounds)

    def distance_to_target(self) -> int | None:
        """Squared distance from origin to target."""
        if self._target is None:
            return None
        return (self._target - self._origin).magnitude_squared()
