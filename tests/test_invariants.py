"""Seeded random play-throughs checking world invariants after every step."""
from __future__ import annotations

import random

import pytest

from tick_snake.game import Game
from tick_snake.types import Bounds, Direction, GameState


def check_world(game: Game) -> None:
    bounds = Bounds(*game.bounds())
    segments = game.snake().segments
    assert len(segments) >= 1
    assert len(set(segments)) == len(segments)
    assert all(bounds.contains(s) for s in segments)
    if game.state() is not GameState.DEAD:
        assert bounds.contains(game.food().position)
    for bullet in game.bullets():
        assert bounds.contains(bullet.position)
    assert 0 <= game.bullet_cooldown <= game.config.bullet_cooldown_ticks
    assert len(game.events()) <= game.events().capacity


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_random_play(seed):
    rng = random.Random(seed)
    game = Game.new(12, 9, rng=random.Random(seed))
    directions = list(Direction)
    deaths = 0

    for _ in range(600):
        roll = rng.random()
        if roll < 0.2:
            game.set_direction(rng.choice(directions))
        elif roll < 0.3:
            game.fire()

        score_before = game.score()
        game.tick()
        game.move_snake()
        assert game.score() >= score_before
        check_world(game)

        if game.state() is GameState.DEAD:
            deaths += 1
            game.restart()
            assert game.score() == 0
            assert game.snake().length == 1
            check_world(game)

    assert deaths > 0


def test_paused_world_is_frozen():
    game = Game.new(12, 9, rng=random.Random(9))
    game.toggle_pause()
    before = (game.snake().segments, game.food().position, game.score())
    for _ in range(20):
        game.tick()
        game.move_snake()
    assert (game.snake().segments, game.food().position, game.score()) == before
