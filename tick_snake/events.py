"""Gameplay events and the fixed-size ring that carries them to the UI."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Union

from tick_snake.types import Direction, Vec2

DEFAULT_CAPACITY = 32


class DeathCause(Enum):
    HIT_WALL = "hit_wall"
    HIT_SELF = "hit_self"


@dataclass(frozen=True)
class FoodCollected:
    position: Vec2
    by_bullet: bool


@dataclass(frozen=True)
class BulletFired:
    position: Vec2
    direction: Direction


@dataclass(frozen=True)
class SnakeDied:
    cause: DeathCause


@dataclass(frozen=True)
class SnakeDamaged:
    position: Vec2
    segments_lost: int


@dataclass(frozen=True)
class GamePaused:
    pass


@dataclass(frozen=True)
class GameResumed:
    pass


@dataclass(frozen=True)
class GameRestarted:
    pass


GameEvent = Union[
    FoodCollected,
    BulletFired,
    SnakeDied,
    SnakeDamaged,
    GamePaused,
    GameResumed,
    GameRestarted,
]


class EventQueue:
    """Ring buffer of events with separate read and write cursors.

    ``push`` never fails: once the ring is full the oldest unread event is
    overwritten. Emptiness is decided by slot content, since the cursors
    are also equal when the ring has wrapped full.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[GameEvent | None] = [None] * capacity
        self._write = 0
        self._read = 0
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, event: GameEvent) -> None:
        overwriting = self._slots[self._write] is not None
        self._slots[self._write] = event
        self._write = (self._write + 1) % self._capacity
        if overwriting:
            # Full ring: the slot just replaced was the oldest unread one.
            self._read = self._write

    def pop(self) -> GameEvent | None:
        if self.is_empty():
            return None
        event = self._slots[self._read]
        self._slots[self._read] = None
        if event is not None:
            self._read = (self._read + 1) % self._capacity
        return event

    def peek(self) -> GameEvent | None:
        return self._slots[self._read]

    def clear(self) -> None:
        self._slots = [None] * self._capacity
        self._write = 0
        self._read = 0

    def is_empty(self) -> bool:
        return self._read == self._write and self._slots[self._read] is None

    def __len__(self) -> int:
        return sum(1 for slot in self._slots if slot is not None)

    def drain(self) -> Iterator[GameEvent]:
        while True:
            event = self.pop()
            if event is None:
                return
            yield event
