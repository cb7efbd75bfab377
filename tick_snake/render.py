"""View model - turns a game snapshot into coloured cells and overlay text.

Nothing here touches the simulation. Front-ends draw a :class:`Frame`
however they like; :func:`render_text` draws it as plain text.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from tick_snake.game import Game
from tick_snake.types import GameState, Vec2

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
HEAD_COLOR: Color = (200, 255, 200)

RESTART_PROMPT = "PRESS SPACE TO RESTART"


@dataclass(frozen=True)
class RenderConfig:
    border_color: Color = (85, 85, 85)
    text_color: Color = WHITE
    hud_color: Color = (0, 255, 255)


@dataclass(frozen=True)
class Cell:
    x: int
    y: int
    kind: str  # "scope", "head", "body", "food", "bullet"
    color: Color


@dataclass(frozen=True)
class Overlay:
    text: str
    anchor: str  # "hud" (top border, left) or "center"
    line: int  # rows relative to the anchor
    color: Color


@dataclass
class Frame:
    width: int
    height: int
    border_color: Color
    cells: list[Cell] = field(default_factory=list)
    overlays: list[Overlay] = field(default_factory=list)


class GameRenderer:
    def __init__(self, game: Game, config: RenderConfig | None = None) -> None:
        self._game = game
        self._config = config if config is not None else RenderConfig()

    def frame(self) -> Frame:
        width, height = self._game.bounds()
        frame = Frame(width=width, height=height, border_color=self._config.border_color)
        self._entities(frame)

        state = self._game.state()
        if state is GameState.PAUSED:
            frame.overlays.append(Overlay("PAUSED", "center", 0, self._config.text_color))
        elif state is GameState.DEAD:
            frame.overlays.append(
                Overlay(f"SCORE: {self._game.score()}", "center", -1, self._config.text_color)
            )
            frame.overlays.append(Overlay(RESTART_PROMPT, "center", 1, self._config.text_color))
        else:
            aligned = "AIM" if self._game.is_scope_aligned() else "   "
            hud = f" {aligned} | SCORE: {self._game.score()} "
            frame.overlays.append(Overlay(hud, "hud", 0, self._config.hud_color))
        return frame

    def _entities(self, frame: Frame) -> None:
        scope = self._game.scope()
        color = scope.config.unaligned_color
        if scope.is_aligned():
            color = scope.config.aligned_color
        for i, point in enumerate(scope.ray_cast()):
            if i % scope.config.dot_spacing == 0:
                frame.cells.append(Cell(point.x, point.y, "scope", color))

        _snake_cells(self._game, frame)

        if not self._game.state().is_dead():
            _food_cell(self._game, frame)

        for bullet in self._game.bullets():
            intensity = int(bullet.lifetime_fraction() * 255)
            pos = bullet.position
            frame.cells.append(Cell(pos.x, pos.y, "bullet", (255, intensity, 0)))


class MinimalRenderer:
    """Snake and food only."""

    def __init__(self, game: Game) -> None:
        self._game = game

    def frame(self) -> Frame:
        width, height = self._game.bounds()
        frame = Frame(width=width, height=height, border_color=RenderConfig().border_color)
        _snake_cells(self._game, frame)
        if not self._game.state().is_dead():
            _food_cell(self._game, frame)
        return frame


def _snake_cells(game: Game, frame: Frame) -> None:
    for i, segment in enumerate(game.snake().segments):
        if i == 0:
            frame.cells.append(Cell(segment.x, segment.y, "head", HEAD_COLOR))
        else:
            frame.cells.append(Cell(segment.x, segment.y, "body", WHITE))


def _food_cell(game: Game, frame: Frame) -> None:
    food = game.food()
    if food.is_active():
        pos = food.position
        frame.cells.append(Cell(pos.x, pos.y, "food", food.config.color))


# --- Plain text ---

GLYPHS = {
    "scope": "::",
    "head": "@@",
    "body": "[]",
    "food": "<>",
    "bullet": "==",
}


def render_text(game: Game, renderer: GameRenderer | None = None) -> str:
    """Draw a frame as bordered text, two characters per cell."""
    frame = (renderer or GameRenderer(game)).frame()
    cols = frame.width * 2 + 2
    rows = frame.height + 2
    canvas = [[" "] * cols for _ in range(rows)]

    for x in range(cols):
        canvas[0][x] = "-"
        canvas[rows - 1][x] = "-"
    for y in range(rows):
        canvas[y][0] = "|"
        canvas[y][cols - 1] = "|"
    for x, y in ((0, 0), (cols - 1, 0), (0, rows - 1), (cols - 1, rows - 1)):
        canvas[y][x] = "+"

    offset = Vec2(1, 1)
    for cell in frame.cells:
        sx, sy = Vec2(cell.x, cell.y).to_screen(offset)
        glyph = GLYPHS[cell.kind]
        for i, ch in enumerate(glyph):
            if 0 <= sx + i < cols and 0 <= sy < rows:
                canvas[sy][sx + i] = ch

    for overlay in frame.overlays:
        if overlay.anchor == "hud":
            sx, sy = 2, overlay.line
        else:
            sx = max(0, (cols - len(overlay.text)) // 2)
            sy = rows // 2 + overlay.line
        if not 0 <= sy < rows:
            continue
        for i, ch in enumerate(overlay.text):
            if sx + i < cols:
                canvas[sy][sx + i] = ch

    return "\n".join("".join(row) for row in canvas)
