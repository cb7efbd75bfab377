"""Snake - segment body with buffered turning, growth, and partial damage."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum

from tick_snake.types import Bounds, Direction, Vec2, find_segment


class MoveOutcome(Enum):
    MOVED = "moved"
    HIT_WALL = "hit_wall"
    HIT_SELF = "hit_self"


@dataclass(frozen=True)
class MoveResult:
    outcome: MoveOutcome
    position: Vec2 | None = None  # new head, set only when MOVED

    @classmethod
    def moved(cls, position: Vec2) -> MoveResult:
        return cls(MoveOutcome.MOVED, position)

    @property
    def is_fatal(self) -> bool:
        return self.outcome is not MoveOutcome.MOVED

    @property
    def new_position(self) -> Vec2 | None:
        return self.position


HIT_WALL = MoveResult(MoveOutcome.HIT_WALL)
HIT_SELF = MoveResult(MoveOutcome.HIT_SELF)


@dataclass(frozen=True)
class DamageResult:
    segments_lost: int

    @property
    def is_significant(self) -> bool:
        return self.segments_lost > 0


class Snake:
    """Ordered body cells, head first.

    ``direction`` is the direction of the last move. Turns are buffered in
    ``pending_direction`` and committed at the start of the next ``tick``;
    a turn is refused only when it reverses the committed direction, so
    two quick 90 degree turns within one frame resolve to the last one.

    Self-collision is tested against the body *before* the tail retracts,
    so the head may not enter the cell the tail is about to leave.
    """

    def __init__(self, position: Vec2) -> None:
        self._segments: deque[Vec2] = deque([position])
        self._direction = Direction.RIGHT
        self._pending_direction = Direction.RIGHT
        self._grow_pending = 0

    @property
    def head(self) -> Vec2:
        return self._segments[0]

    @property
    def position(self) -> Vec2:
        return self.head

    def set_position(self, pos: Vec2) -> None:
        self._segments[0] = pos

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def pending_direction(self) -> Direction:
        return self._pending_direction

    @property
    def grow_pending(self) -> int:
        return self._grow_pending

    @property
    def segments(self) -> tuple[Vec2, ...]:
        return tuple(self._segments)

    @property
    def length(self) -> int:
        return len(self._segments)

    def center(self) -> Vec2:
        return self._segments[len(self._segments) // 2]

    def set_direction(self, direction: Direction) -> None:
        if not self._direction.is_opposite(direction):
            self._pending_direction = direction

    def grow(self) -> None:
        self._grow_pending += 1

    def tick(self, bounds: Bounds) -> MoveResult:
        self._direction = self._pending_direction
        new_head = self.head + self._direction.to_vec2()

        if not bounds.contains(new_head):
            return HIT_WALL
        if new_head in self._segments:
            return HIT_SELF

        self._segments.appendleft(new_head)
        if self._grow_pending > 0:
            self._grow_pending -= 1
        else:
            self._segments.pop()
        return MoveResult.moved(new_head)

    # --- Segment queries ---

    def segment_count(self) -> int:
        return len(self._segments)

    def segment_at(self, index: int) -> Vec2 | None:
        if 0 <= index < len(self._segments):
            return self._segments[index]
        return None

    def contains(self, pos: Vec2) -> bool:
        return pos in self._segments

    def find_segment(self, pos: Vec2) -> int | None:
        return find_segment(self, pos)

    def body_contains(self, pos: Vec2) -> bool:
        index = self.find_segment(pos)
        return index is not None and index > 0

    # --- Damage ---

    def damage_at(self, index: int) -> DamageResult:
        """Cut the body after ``index``.

        The head cannot be damaged, so ``index <= 0`` changes nothing.
        """
        if index <= 0:
            return DamageResult(segments_lost=0)
        keep = index + 1
        lost = max(0, len(self._segments) - keep)
        while len(self._segments) > keep:
            self._segments.pop()
        self._grow_pending = 0
        return DamageResult(segments_lost=lost)

    def damage_at_position(self, pos: Vec2) -> DamageResult | None:
        index = self.find_segment(pos)
        if index is None:
            return None
        return self.damage_at(index)
