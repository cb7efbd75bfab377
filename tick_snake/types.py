"""Grid primitives, game state, and entity capability protocols."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Protocol


@dataclass(frozen=True, slots=True)
class Vec2:
    x: int
    y: int

    @staticmethod
    def zero() -> Vec2:
        return Vec2(0, 0)

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: int) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def magnitude_squared(self) -> int:
        return self.x * self.x + self.y * self.y

    def dot(self, other: Vec2) -> int:
        return self.x * other.x + self.y * other.y

    def in_bounds(self, bounds: Bounds) -> bool:
        return bounds.contains(self)

    def to_screen(self, offset: Vec2) -> tuple[int, int]:
        """Map a grid cell to terminal-style coordinates (two columns per cell)."""
        return (offset.x + self.x * 2, offset.y + self.y)


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def to_vec2(self) -> Vec2:
        return _DIRECTION_VECTORS[self]

    def opposite(self) -> Direction:
        return _OPPOSITE_DIRECTIONS[self]

    def is_opposite(self, other: Direction) -> bool:
        return self.opposite() is other

    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)


_DIRECTION_VECTORS = {
    Direction.UP: Vec2(0, -1),
    Direction.DOWN: Vec2(0, 1),
    Direction.LEFT: Vec2(-1, 0),
    Direction.RIGHT: Vec2(1, 0),
}

_OPPOSITE_DIRECTIONS = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Axis(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def perpendicular(self) -> Axis:
        if self is Axis.HORIZONTAL:
            return Axis.VERTICAL
        return Axis.HORIZONTAL

    @classmethod
    def of(cls, direction: Direction) -> Axis:
        if direction.is_horizontal():
            return cls.HORIZONTAL
        return cls.VERTICAL


class Edge(Enum):
    """A side of the playfield. Things spawned on an edge travel inward."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    def opposite(self) -> Edge:
        return _OPPOSITE_EDGES[self]

    def to_direction(self) -> Direction:
        return _INWARD_DIRECTIONS[self]

    def is_horizontal(self) -> bool:
        return self in (Edge.LEFT, Edge.RIGHT)

    def is_vertical(self) -> bool:
        return self in (Edge.TOP, Edge.BOTTOM)

    def axis(self) -> Axis:
        if self.is_vertical():
            return Axis.VERTICAL
        return Axis.HORIZONTAL


EDGES: tuple[Edge, ...] = (Edge.TOP, Edge.BOTTOM, Edge.LEFT, Edge.RIGHT)

_OPPOSITE_EDGES = {
    Edge.TOP: Edge.BOTTOM,
    Edge.BOTTOM: Edge.TOP,
    Edge.LEFT: Edge.RIGHT,
    Edge.RIGHT: Edge.LEFT,
}

_INWARD_DIRECTIONS = {
    Edge.TOP: Direction.DOWN,
    Edge.BOTTOM: Direction.UP,
    Edge.LEFT: Direction.RIGHT,
    Edge.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True, slots=True)
class Bounds:
    width: int
    height: int

    @classmethod
    def of(cls, size: tuple[int, int]) -> Bounds:
        width, height = size
        return cls(width, height)

    def contains(self, pos: Vec2) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def center(self) -> Vec2:
        return Vec2(self.width // 2, self.height // 2)

    def to_vec2(self) -> Vec2:
        return Vec2(self.width, self.height)


class GameState(Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    DEAD = "dead"

    def is_active(self) -> bool:
        return self is GameState.PLAYING

    def is_dead(self) -> bool:
        return self is GameState.DEAD


# --- Capabilities ---


class Positioned(Protocol):
    @property
    def position(self) -> Vec2: ...
    def set_position(self, pos: Vec2) -> None: ...


class Moveable(Positioned, Protocol):
    @property
    def velocity(self) -> Vec2: ...
    def set_velocity(self, vel: Vec2) -> None: ...


class Active(Protocol):
    def is_active(self) -> bool: ...
    def deactivate(self) -> None: ...


class Segmented(Positioned, Protocol):
    def segment_count(self) -> int: ...
    def segment_at(self, index: int) -> Vec2 | None: ...
    def contains(self, pos: Vec2) -> bool: ...


def apply_movement(entity: Moveable) -> None:
    entity.set_position(entity.position + entity.velocity)


def collides_with(a: Positioned, b: Positioned) -> bool:
    return a.position == b.position


def find_segment(entity: Segmented, pos: Vec2) -> int | None:
    """Index of the first segment at ``pos``, or None."""
    for index in range(entity.segment_count()):
        if entity.segment_at(index) == pos:
            return index
    return None
