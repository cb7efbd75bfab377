"""BulletPool - live bullets and their swept collision tests."""
from __future__ import annotations

import sys
from typing import Iterator

from tick_snake.bullet import Bullet, BulletConfig
from tick_snake.types import Bounds, Direction, Vec2

DEFAULT_CAPACITY = 16


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


class BulletPool:
    """Unordered collection of bullets.

    ``capacity`` is recorded but not enforced: ``spawn`` always succeeds and
    ``available`` reports an unlimited number of free slots.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        config: BulletConfig | None = None,
    ) -> None:
        self._bullets: list[Bullet] = []
        self._capacity = capacity
        self._config = config if config is not None else BulletConfig()

    def spawn(self, position: Vec2, direction: Direction) -> bool:
        self._cleanup()
        self._bullets.append(Bullet(position, direction, self._config))
        return True

    def tick(self, bounds: Bounds) -> None:
        for bullet in self._bullets:
            bullet.tick(bounds)
        self._cleanup()

    def check_collision_before_tick(self, target: Vec2, bounds: Bounds) -> bool:
        """Does any bullet sit on, or sweep through, ``target`` on its next step?

        Samples every cell between the bullet's current position and where
        its velocity will take it, so fast bullets cannot tunnel past the
        target. The first bullet that hits is deactivated.
        """
        for bullet in self._bullets:
            if not bullet.is_active():
                continue

            current = bullet.position
            if current == target:
                bullet.deactivate()
                return True

            vel = bullet.velocity
            step = Vec2(_sign(vel.x), _sign(vel.y))
            for i in range(1, max(abs(vel.x), abs(vel.y)) + 1):
                sample = current + step * i
                if not bounds.contains(sample):
                    break
                if sample == target:
                    bullet.deactivate()
                    return True
        return False

    def check_collision(self, target: Vec2) -> bool:
        """Alternate test: sweep backward over the step the bullet just took.

        Looks from ``position - velocity`` up to (not including) the current
        cell, for use after the pool has ticked.
        """
        for bullet in self._bullets:
            if not bullet.is_active():
                continue

            if bullet.position == target:
                bullet.deactivate()
                return True

            vel = bullet.velocity
            speed = max(abs(vel.x), abs(vel.y))
            if speed > 1:
                step = Vec2(_sign(vel.x), _sign(vel.y))
                prev = bullet.position - vel
                for i in range(speed):
                    if prev + step * i == target:
                        bullet.deactivate()
                        return True
        return False

    def _cleanup(self) -> None:
        self._bullets = [b for b in self._bullets if b.is_active()]

    def __iter__(self) -> Iterator[Bullet]:
        return (b for b in self._bullets if b.is_active())

    def __len__(self) -> int:
        return self.active_count()

    def active_count(self) -> int:
        return sum(1 for b in self._bullets if b.is_active())

    def capacity(self) -> int:
        return self._capacity

    def available(self) -> int:
        return sys.maxsize
