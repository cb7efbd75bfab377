"""Bullet - a short-lived projectile fired from the snake's head."""
from __future__ import annotations

from dataclasses import dataclass

from tick_snake.types import Bounds, Direction, Vec2


@dataclass(frozen=True)
class BulletConfig:
    max_lifetime: int = 50  # ticks
    speed: int = 2  # cells per tick


class Bullet:
    def __init__(
        self,
        position: Vec2,
        direction: Direction,
        config: BulletConfig | None = None,
    ) -> None:
        if config is None:
            config = BulletConfig()
        self._position = position
        self._velocity = direction.to_vec2() * config.speed
        self._active = True
        self._lifetime = config.max_lifetime
        self._max_lifetime = config.max_lifetime

    @property
    def position(self) -> Vec2:
        return self._position

    def set_position(self, pos: Vec2) -> None:
        self._position = pos

    @property
    def velocity(self) -> Vec2:
        return self._velocity

    def set_velocity(self, vel: Vec2) -> None:
        self._velocity = vel

    @property
    def lifetime(self) -> int:
        return self._lifetime

    @property
    def max_lifetime(self) -> int:
        return self._max_lifetime

    def lifetime_fraction(self) -> float:
        """Remaining life in [0.0, 1.0], used to fade the bullet out."""
        if self._max_lifetime == 0:
            return 0.0
        return self._lifetime / self._max_lifetime

    def is_active(self) -> bool:
        return self._active and self._lifetime > 0

    def deactivate(self) -> None:
        self._active = False

    def tick(self, bounds: Bounds) -> None:
        if not self.is_active():
            return
        self._lifetime = max(0, self._lifetime - 1)
        nxt = self._position + self._velocity
        if not bounds.contains(nxt):
            self._active = False
            return
        self._position = nxt
