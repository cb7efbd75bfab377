"""Draws a tick_snake Frame onto a pygame surface."""
from __future__ import annotations

import pygame

from tick_snake.render import Frame, Overlay

from ui.constants import (
    BORDER,
    COLOR_BG,
    COLOR_GRID_LINE,
    COLOR_OVERLAY_BG,
    FONT_NAME,
    FONT_SIZE,
    TILE_SIZE,
)


class Board:
    def __init__(self) -> None:
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(FONT_NAME, FONT_SIZE, bold=True)
        return self._font

    def draw(self, surface: pygame.Surface, frame: Frame) -> None:
        surface.fill(COLOR_BG)
        grid_w = frame.width * TILE_SIZE
        grid_h = frame.height * TILE_SIZE

        for x in range(frame.width + 1):
            px = BORDER + x * TILE_SIZE
            pygame.draw.line(surface, COLOR_GRID_LINE, (px, BORDER), (px, BORDER + grid_h))
        for y in range(frame.height + 1):
            py = BORDER + y * TILE_SIZE
            pygame.draw.line(surface, COLOR_GRID_LINE, (BORDER, py), (BORDER + grid_w, py))

        outline = pygame.Rect(0, 0, grid_w + 2 * BORDER, grid_h + 2 * BORDER)
        pygame.draw.rect(surface, frame.border_color, outline, BORDER)

        for cell in frame.cells:
            rect = pygame.Rect(
                BORDER + cell.x * TILE_SIZE,
                BORDER + cell.y * TILE_SIZE,
                TILE_SIZE,
                TILE_SIZE,
            )
            if cell.kind == "scope":
                pygame.draw.circle(surface, cell.color, rect.center, TILE_SIZE // 8)
            else:
                pygame.draw.rect(surface, cell.color, rect.inflate(-2, -2))

        for overlay in frame.overlays:
            self._draw_overlay(surface, overlay)

    def _draw_overlay(self, surface: pygame.Surface, overlay: Overlay) -> None:
        font = self._get_font()
        text = font.render(overlay.text, True, overlay.color)
        if overlay.anchor == "hud":
            surface.blit(text, (BORDER + 8, BORDER + 4 + overlay.line * font.get_linesize()))
            return

        w, h = surface.get_size()
        x = (w - text.get_width()) // 2
        y = h // 2 + overlay.line * font.get_linesize() - text.get_height() // 2
        backdrop = pygame.Surface((text.get_width() + 16, text.get_height() + 8), pygame.SRCALPHA)
        backdrop.fill(COLOR_OVERLAY_BG)
        surface.blit(backdrop, (x - 8, y - 4))
        surface.blit(text, (x, y))
