"""Layout, color, and rendering constants."""
from __future__ import annotations

# Grid defaults (overridden by CLI --width/--height)
DEFAULT_GRID_W = 30
DEFAULT_GRID_H = 20
TILE_SIZE = 24
BORDER = 2

# Tick cadence (overridden by CLI --tick-ms)
DEFAULT_TICK_MS = 70

# UI colors
COLOR_BG = (12, 12, 20)
COLOR_GRID_LINE = (24, 24, 34)
COLOR_OVERLAY_BG = (0, 0, 0, 160)

FONT_NAME = "monospace"
FONT_SIZE = 18


def screen_size(grid_w: int, grid_h: int) -> tuple[int, int]:
    return (grid_w * TILE_SIZE + 2 * BORDER, grid_h * TILE_SIZE + 2 * BORDER)
