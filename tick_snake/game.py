"""Game - one simulation instance: entities, state machine, and score."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace

from tick_snake.bullet_pool import DEFAULT_CAPACITY as DEFAULT_BULLET_CAPACITY
from tick_snake.bullet_pool import BulletPool
from tick_snake.events import DEFAULT_CAPACITY as DEFAULT_EVENT_CAPACITY
from tick_snake.events import (
    BulletFired,
    DeathCause,
    EventQueue,
    FoodCollected,
    GamePaused,
    GameRestarted,
    GameResumed,
    SnakeDamaged,
    SnakeDied,
)
from tick_snake.food import Food
from tick_snake.scope import Scope
from tick_snake.snake import MoveOutcome, Snake
from tick_snake.types import EDGES, Bounds, Direction, GameState, collides_with

logger = logging.getLogger(__name__)

DEFAULT_BULLET_COOLDOWN = 3

# Edge spawns retried while they land on the snake before one is accepted anyway.
_MAX_SPAWN_ATTEMPTS = 64


@dataclass(frozen=True)
class GameConfig:
    bounds: Bounds
    bullet_pool_capacity: int = DEFAULT_BULLET_CAPACITY
    event_queue_capacity: int = DEFAULT_EVENT_CAPACITY
    bullet_cooldown_ticks: int = DEFAULT_BULLET_COOLDOWN

    def validate(self) -> None:
        if self.bounds.width <= 0 or self.bounds.height <= 0:
            raise ValueError(
                f"bounds must be positive, got {self.bounds.width}x{self.bounds.height}"
            )
        if self.bullet_pool_capacity < 1:
            raise ValueError("bullet_pool_capacity must be at least 1")
        if self.event_queue_capacity < 1:
            raise ValueError("event_queue_capacity must be at least 1")
        if self.bullet_cooldown_ticks < 0:
            raise ValueError("bullet_cooldown_ticks must not be negative")


class GameBuilder:
    """Collects overrides on top of :class:`GameConfig` defaults.

    ``with_bounds`` is required; ``build`` raises ``ValueError`` without it.
    """

    def __init__(self) -> None:
        self._bounds: Bounds | None = None
        self._overrides: dict[str, int] = {}
        self._seed: int | None = None

    def with_bounds(self, width: int, height: int) -> GameBuilder:
        self._bounds = Bounds(width, height)
        return self

    def with_bullet_capacity(self, capacity: int) -> GameBuilder:
        self._overrides["bullet_pool_capacity"] = capacity
        return self

    def with_event_capacity(self, capacity: int) -> GameBuilder:
        self._overrides["event_queue_capacity"] = capacity
        return self

    def with_bullet_cooldown(self, ticks: int) -> GameBuilder:
        self._overrides["bullet_cooldown_ticks"] = ticks
        return self

    def with_seed(self, seed: int) -> GameBuilder:
        self._seed = seed
        return self

    def config(self) -> GameConfig:
        if self._bounds is None:
            raise ValueError("GameBuilder needs with_bounds() before build()")
        return GameConfig(bounds=self._bounds, **self._overrides)

    def build(self) -> Game:
        rng = random.Random(self._seed) if self._seed is not None else None
        return Game(self.config(), rng=rng)


class Game:
    """Owns the snake, food, bullets, scope, and event queue.

    ``tick`` advances food and bullets and resolves their collisions;
    ``move_snake`` advances the snake. The driver calls both on its own
    cadence. Neither does anything outside the Playing state.
    """

    def __init__(
        self, config: GameConfig, rng: random.Random | None = None
    ) -> None:
        config.validate()
        self._config = config
        self._rng = rng if rng is not None else random.Random()
        self._reset()

    @classmethod
    def new(
        cls, width: int, height: int, rng: random.Random | None = None
    ) -> Game:
        """A game with default settings on a ``width`` x ``height`` board."""
        return cls(GameConfig(bounds=Bounds(width, height)), rng)

    def resized(self, width: int, height: int) -> Game:
        """A fresh game on a new board, same settings and random stream."""
        config = replace(self._config, bounds=Bounds(width, height))
        return Game(config, self._rng)

    def _reset(self) -> None:
        config = self._config
        self._bounds = config.bounds
        self._snake = Snake(config.bounds.center())
        self._food = Food(rng=self._rng)
        self._bullets = BulletPool(config.bullet_pool_capacity)
        self._scope = Scope()
        self._events = EventQueue(config.event_queue_capacity)
        self._state = GameState.PLAYING
        self._score = 0
        self._bullet_cooldown = 0
        self._bullet_cooldown_max = config.bullet_cooldown_ticks

        self._spawn_food()
        self._update_scope()

    # --- Snapshot ---

    @property
    def config(self) -> GameConfig:
        return self._config

    def bounds(self) -> tuple[int, int]:
        return (self._bounds.width, self._bounds.height)

    def state(self) -> GameState:
        return self._state

    def score(self) -> int:
        return self._score

    def snake(self) -> Snake:
        return self._snake

    def food(self) -> Food:
        return self._food

    def bullets(self) -> BulletPool:
        return self._bullets

    def scope(self) -> Scope:
        return self._scope

    def events(self) -> EventQueue:
        return self._events

    def is_scope_aligned(self) -> bool:
        return self._scope.is_aligned()

    @property
    def bullet_cooldown(self) -> int:
        return self._bullet_cooldown

    # --- Simulation ---

    def tick(self) -> None:
        if not self._state.is_active():
            return

        self._bullet_cooldown = max(0, self._bullet_cooldown - 1)

        self._food.tick(self._bounds)
        self._check_food_snake_collision()
        self._check_bullet_food_collision()
        self._bullets.tick(self._bounds)
        self._update_scope()

    def move_snake(self) -> None:
        if not self._state.is_active():
            return

        result = self._snake.tick(self._bounds)
        if result.outcome is MoveOutcome.MOVED:
            if result.position == self._food.position:
                self._collect_food(by_bullet=False)
        elif result.outcome is MoveOutcome.HIT_WALL:
            self._die(DeathCause.HIT_WALL)
        else:
            self._die(DeathCause.HIT_SELF)

        self._update_scope()

    def set_direction(self, direction: Direction) -> None:
        self._snake.set_direction(direction)

    def can_fire(self) -> bool:
        return self._state.is_active() and self._bullet_cooldown == 0

    def fire(self) -> bool:
        if not self.can_fire():
            return False

        direction = self._snake.direction
        spawn = self._snake.head + direction.to_vec2()
        if not self._bounds.contains(spawn):
            return False

        if not self._bullets.spawn(spawn, direction):
            return False
        self._bullet_cooldown = self._bullet_cooldown_max
        self._events.push(BulletFired(position=spawn, direction=direction))
        logger.debug("bullet fired from %s heading %s", spawn, direction.value)
        return True

    def toggle_pause(self) -> None:
        if self._state is GameState.PLAYING:
            self._state = GameState.PAUSED
            self._events.push(GamePaused())
            logger.info("game paused")
        elif self._state is GameState.PAUSED:
            self._state = GameState.PLAYING
            self._events.push(GameResumed())
            logger.info("game resumed")

    def restart(self) -> None:
        """Start over with a fresh world and the same configuration."""
        self._reset()
        self._events.push(GameRestarted())
        logger.info("game restarted on %dx%d", self._bounds.width, self._bounds.height)

    # --- Internals ---

    def _die(self, cause: DeathCause) -> None:
        self._state = GameState.DEAD
        self._events.push(SnakeDied(cause=cause))
        logger.info("snake died (%s) with score %d", cause.value, self._score)

    def _check_food_snake_collision(self) -> None:
        food_pos = self._food.position
        if collides_with(self._food, self._snake):
            self._collect_food(by_bullet=False)
            return

        damage = self._snake.damage_at_position(food_pos)
        if damage is None:
            return
        if damage.is_significant:
            self._events.push(
                SnakeDamaged(position=food_pos, segments_lost=damage.segments_lost)
            )
            logger.debug("food hit the body at %s, %d segments lost",
                         food_pos, damage.segments_lost)
        self._spawn_food()

    def _check_bullet_food_collision(self) -> None:
        if self._bullets.check_collision_before_tick(self._food.position, self._bounds):
            self._collect_food(by_bullet=True)

    def _collect_food(self, by_bullet: bool) -> None:
        self._score += 1
        self._snake.grow()
        self._events.push(FoodCollected(position=self._food.position, by_bullet=by_bullet))
        logger.debug("food collected at %s (bullet=%s), score %d",
                     self._food.position, by_bullet, self._score)
        self._spawn_food()

    def _spawn_food(self) -> None:
        for _ in range(_MAX_SPAWN_ATTEMPTS):
            food = Food.spawn_at_edge(self._rng.choice(EDGES), self._bounds, rng=self._rng)
            if not self._snake.contains(food.position):
                break
        else:
            logger.warning("no free edge cell found for food, placing it on the snake")
        self._food = food

    def _update_scope(self) -> None:
        self._scope.update(
            self._snake.head,
            self._snake.direction,
            self._food.position,
            self._bounds,
        )
