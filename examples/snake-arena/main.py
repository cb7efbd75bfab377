"""
Snake Arena
Pygame front-end for tick-snake: steer, shoot the drifting food, don't bite yourself.

Controls: arrows / WASD / hjkl to turn, f or x to fire, space to pause
(or restart after dying), r to restart, q or Esc to quit.
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_snake import Driver, GameBuilder, GameRenderer

from ui.board import Board
from ui.constants import (
    DEFAULT_GRID_H,
    DEFAULT_GRID_W,
    DEFAULT_TICK_MS,
    screen_size,
)

TITLE = "Snake Arena"

logger = logging.getLogger("snake_arena")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Snake Arena - tick-snake visual demo")
    p.add_argument("--width", type=int, default=DEFAULT_GRID_W,
                   help=f"Grid width in cells (8-80, default: {DEFAULT_GRID_W})")
    p.add_argument("--height", type=int, default=DEFAULT_GRID_H,
                   help=f"Grid height in cells (8-60, default: {DEFAULT_GRID_H})")
    p.add_argument("--tick-ms", type=int, default=DEFAULT_TICK_MS,
                   help=f"Milliseconds per tick (default: {DEFAULT_TICK_MS})")
    p.add_argument("--cooldown", type=int, default=3,
                   help="Ticks between shots (default: 3)")
    p.add_argument("--bullets", type=int, default=16,
                   help="Bullet pool capacity (default: 16)")
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: WARNING)")
    args = p.parse_args()
    args.width = max(8, min(80, args.width))
    args.height = max(8, min(60, args.height))
    args.tick_ms = max(10, args.tick_ms)
    args.cooldown = max(0, args.cooldown)
    args.bullets = max(1, args.bullets)
    return args


def make_poll():
    """Wait for the next key press, at most ``timeout`` seconds."""

    def poll(timeout: float) -> str | None:
        event = pygame.event.wait(max(1, int(timeout * 1000)))
        if event.type == pygame.QUIT:
            return "escape"
        if event.type == pygame.KEYDOWN:
            return pygame.key.name(event.key)
        return None

    return poll


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    builder = (
        GameBuilder()
        .with_bounds(args.width, args.height)
        .with_bullet_capacity(args.bullets)
        .with_bullet_cooldown(args.cooldown)
    )
    if args.seed is not None:
        builder = builder.with_seed(args.seed)

    pygame.init()
    screen = pygame.display.set_mode(screen_size(args.width, args.height))
    pygame.display.set_caption(TITLE)
    board = Board()

    def render(game) -> None:
        board.draw(screen, GameRenderer(game).frame())
        pygame.display.flip()

    driver = Driver(builder.build(), tick_interval=args.tick_ms / 1000.0)
    logger.info("starting %dx%d at %d ms/tick", args.width, args.height, args.tick_ms)
    try:
        driver.run(make_poll(), render)
    finally:
        logger.info("final score %d", driver.game.score())
        pygame.quit()
    sys.exit(0)


if __name__ == "__main__":
    main()
