"""Tests for DefaultInputMapper."""
from __future__ import annotations

import pytest

from tick_snake.input import DefaultInputMapper, Fire, Move, Pause, Quit, Restart
from tick_snake.types import Direction


@pytest.fixture
def mapper() -> DefaultInputMapper:
    return DefaultInputMapper()


@pytest.mark.parametrize("key", ["q", "escape"])
def test_quit(mapper, key):
    assert mapper.map(key) == Quit()


@pytest.mark.parametrize("key", ["space", "return"])
def test_pause(mapper, key):
    assert mapper.map(key) == Pause()


@pytest.mark.parametrize("key", ["f", "x"])
def test_fire(mapper, key):
    assert mapper.map(key) == Fire()


def test_restart(mapper):
    assert mapper.map("r") == Restart()


@pytest.mark.parametrize(
    "keys, direction",
    [
        (["up", "w", "k"], Direction.UP),
        (["down", "s", "j"], Direction.DOWN),
        (["left", "a", "h"], Direction.LEFT),
        (["right", "d", "l"], Direction.RIGHT),
    ],
)
def test_movement_keys(mapper, keys, direction):
    for key in keys:
        assert mapper.map(key) == Move(direction)


def test_case_insensitive(mapper):
    assert mapper.map("W") == Move(Direction.UP)
    assert mapper.map("Escape") == Quit()


@pytest.mark.parametrize("key", ["z", "1", "left shift", ""])
def test_unknown_returns_none(mapper, key):
    assert mapper.map(key) is None
