"""tick-snake - Tick-driven snake arcade simulation with bullets and aim feedback."""
from __future__ import annotations

from tick_snake.bullet import Bullet, BulletConfig
from tick_snake.bullet_pool import BulletPool
from tick_snake.driver import Driver
from tick_snake.events import (
    BulletFired,
    DeathCause,
    EventQueue,
    FoodCollected,
    GameEvent,
    GamePaused,
    GameRestarted,
    GameResumed,
    SnakeDamaged,
    SnakeDied,
)
from tick_snake.food import Food, FoodConfig
from tick_snake.game import Game, GameBuilder, GameConfig
from tick_snake.input import DefaultInputMapper, GameAction, InputMapper
from tick_snake.render import Frame, GameRenderer, MinimalRenderer, RenderConfig, render_text
from tick_snake.scope import Scope, ScopeConfig
from tick_snake.snake import DamageResult, MoveOutcome, MoveResult, Snake
from tick_snake.types import Axis, Bounds, Direction, Edge, GameState, Vec2

__all__ = [
    "Axis",
    "Bounds",
    "Bullet",
    "BulletConfig",
    "BulletFired",
    "BulletPool",
    "DamageResult",
    "DeathCause",
    "DefaultInputMapper",
    "Direction",
    "Driver",
    "Edge",
    "EventQueue",
    "Food",
    "FoodCollected",
    "FoodConfig",
    "Frame",
    "Game",
    "GameAction",
    "GameBuilder",
    "GameConfig",
    "GameEvent",
    "GamePaused",
    "GameRenderer",
    "GameRestarted",
    "GameResumed",
    "GameState",
    "InputMapper",
    "MinimalRenderer",
    "MoveOutcome",
    "MoveResult",
    "RenderConfig",
    "Scope",
    "ScopeConfig",
    "Snake",
    "SnakeDamaged",
    "SnakeDied",
    "Vec2",
    "render_text",
]
