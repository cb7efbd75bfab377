"""Key names to game actions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union

from tick_snake.types import Direction


@dataclass(frozen=True)
class Move:
    direction: Direction


@dataclass(frozen=True)
class Fire:
    pass


@dataclass(frozen=True)
class Pause:
    pass


@dataclass(frozen=True)
class Restart:
    pass


@dataclass(frozen=True)
class Quit:
    pass


GameAction = Union[Move, Fire, Pause, Restart, Quit]


class InputMapper(Protocol):
    def map(self, key: str) -> GameAction | None: ...


class DefaultInputMapper:
    """Arrows, WASD, and vi keys to move; f/x fire; space/enter pause.

    Key names are spelled the way ``pygame.key.name`` reports them.
    """

    BINDINGS: dict[str, GameAction] = {
        "q": Quit(),
        "escape": Quit(),
        "space": Pause(),
        "return": Pause(),
        "f": Fire(),
        "x": Fire(),
        "r": Restart(),
        "up": Move(Direction.UP),
        "w": Move(Direction.UP),
        "k": Move(Direction.UP),
        "down": Move(Direction.DOWN),
        "s": Move(Direction.DOWN),
        "j": Move(Direction.DOWN),
        "left": Move(Direction.LEFT),
        "a": Move(Direction.LEFT),
        "h": Move(Direction.LEFT),
        "right": Move(Direction.RIGHT),
        "d": Move(Direction.RIGHT),
        "l": Move(Direction.RIGHT),
    }

    def map(self, key: str) -> GameAction | None:
        return self.BINDINGS.get(key.lower())
