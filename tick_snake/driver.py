"""Driver - fixed-cadence loop that feeds input and ticks into a Game."""
from __future__ import annotations

import logging
import time
from typing import Callable

from tick_snake.game import Game
from tick_snake.input import (
    DefaultInputMapper,
    Fire,
    GameAction,
    InputMapper,
    Move,
    Pause,
    Quit,
    Restart,
)

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL = 0.07  # seconds

# poll(timeout) -> key name, or None when the timeout passed without input.
Poll = Callable[[float], str | None]
Render = Callable[[Game], None]


class Driver:
    """Paces the simulation and routes actions to the game.

    Each tick boundary runs ``Game.tick`` followed by ``Game.move_snake``.
    Between boundaries the driver waits for input for at most the time
    left until the next boundary.
    """

    def __init__(
        self,
        game: Game,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        mapper: InputMapper | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if tick_interval <= 0:
            raise ValueError("tick_interval must be positive")
        self._game = game
        self._tick_interval = tick_interval
        self._mapper = mapper if mapper is not None else DefaultInputMapper()
        self._clock = clock
        self._last_tick = clock()
        self._ticks = 0

    @property
    def game(self) -> Game:
        return self._game

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def tick_interval(self) -> float:
        return self._tick_interval

    def time_until_tick(self) -> float:
        elapsed = self._clock() - self._last_tick
        return max(0.0, self._tick_interval - elapsed)

    def dispatch(self, action: GameAction) -> bool:
        """Apply one action. Returns False when the loop should stop."""
        game = self._game
        if isinstance(action, Quit):
            logger.info("quit requested after %d ticks", self._ticks)
            return False
        if isinstance(action, Move):
            game.set_direction(action.direction)
        elif isinstance(action, Fire):
            game.fire()
        elif isinstance(action, Pause):
            # Resuming a finished game starts a new one.
            if game.state().is_dead():
                game.restart()
            else:
                game.toggle_pause()
        elif isinstance(action, Restart):
            game.restart()
        return True

    def handle_key(self, key: str) -> bool:
        action = self._mapper.map(key)
        if action is None:
            return True
        return self.dispatch(action)

    def advance(self) -> bool:
        """Run one tick if the interval has elapsed. Returns True if it did."""
        now = self._clock()
        if now - self._last_tick < self._tick_interval:
            return False
        self._game.tick()
        self._game.move_snake()
        self._last_tick = now
        self._ticks += 1
        return True

    def resize(self, width: int, height: int) -> bool:
        """Rebuild the game for a new playfield size. Returns True if rebuilt."""
        if self._game.bounds() == (width, height):
            return False
        self._game = self._game.resized(width, height)
        logger.info("playfield resized to %dx%d, game rebuilt", width, height)
        return True

    def run(self, poll: Poll, render: Render) -> None:
        running = True
        while running:
            render(self._game)
            key = poll(self.time_until_tick())
            if key is not None:
                running = self.handle_key(key)
            if running:
                self.advance()
