"""
Rendering for the Tetris project.

- Cells are shaded with a diagonal gradient (light top-left, dark bottom-right)
  and a darker 1px border; one sprite per colour is built once and blitted.
- The grid and side panel frame are pre-rendered into a static background.
- HUD text surfaces are cached by their string.
"""
from __future__ import annotations
import pygame
from typing import Dict, Tuple
from tetris_layout import Dims
from tetris_piece import COLS, ROWS
from tetris_game import Presenter

RGB = Tuple[int, int, int]

WHITE = pygame.Color(255, 255, 255)
BLACK = pygame.Color(0, 0, 0)

# gradient stops: lightened colour at 0, base colour at BASE_STOP, darkened at 1
SHADE = 0.25
BASE_STOP = 0.4
BORDER_SHADE = 0.4


def _rgb(c: pygame.Color) -> RGB:
    return (c.r, c.g, c.b)


def _clamp(amount: float) -> float:
    return min(1.0, max(0.0, amount))


def lighten(color, amount: float) -> RGB:
    """Mix `amount` (0..1) of white into the colour."""
    return _rgb(pygame.Color(color).lerp(WHITE, _clamp(amount)))


def darken(color, amount: float) -> RGB:
    """Mix `amount` (0..1) of black into the colour."""
    return _rgb(pygame.Color(color).lerp(BLACK, _clamp(amount)))


def gradient_color(color, t: float) -> RGB:
    """Colour at position t (0..1) along a cell's diagonal gradient."""
    t = _clamp(t)
    base = pygame.Color(color)
    if t <= BASE_STOP:
        light = pygame.Color(*lighten(base, SHADE))
        return _rgb(light.lerp(base, t / BASE_STOP))
    dark = pygame.Color(*darken(base, SHADE))
    return _rgb(base.lerp(dark, (t - BASE_STOP) / (1 - BASE_STOP)))


def shaded_cell(color, size: int) -> pygame.Surface:
    surf = pygame.Surface((size, size))
    span = max(1, 2 * (size - 1))
    # one anti-diagonal per step; draw.line clips the parts outside the surface
    for d in range(2 * size - 1):
        pygame.draw.line(surf, gradient_color(color, d / span), (d, 0), (0, d))
    pygame.draw.rect(surf, darken(color, BORDER_SHADE), surf.get_rect(), 1)
    return surf


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._cells: Dict[str, pygame.Surface] = {}
        self._ghosts: Dict[str, pygame.Surface] = {}
        self._text: Dict[Tuple[str, RGB, int], pygame.Surface] = {}
        self._make_static()

    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    def cell(self, color: str) -> pygame.Surface:
        if color not in self._cells:
            self._cells[color] = shaded_cell(color, self.dims.cell)
        return self._cells[color]

    def ghost(self, color: str) -> pygame.Surface:
        if color not in self._ghosts:
            c = self.dims.cell
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, pygame.Color(color), (0,0,c-8,c-8), 2)
            self._ghosts[color] = g
        return self._ghosts[color]

    def text(self, s: str, color: RGB = (200,210,240), font: pygame.font.Font = None) -> pygame.Surface:
        font = font or self.font
        key = (s, color, id(font))
        if key not in self._text:
            self._text[key] = font.render(s, True, color)
        return self._text[key]

    def cell_pos(self, bx: int, by: int) -> Tuple[int, int]:
        return (self.dims.board_x + bx*self.dims.cell, self.dims.board_y + by*self.dims.cell)


CONTROLS = (
    "Controls:",
    "←/→ or A/D  Move",
    "↑ or W  Rotate",
    "↓ or S  Soft drop",
    "Space  Hard drop",
    "R / Enter  Restart",
)


class PygamePresenter(Presenter):
    """Draws the session onto the window and flips it on every redraw."""
    def __init__(self, screen: pygame.Surface, assets: RenderAssets, big_font: pygame.font.Font):
        self.screen = screen
        self.assets = assets
        self.big_font = big_font
        self.score = 0
        self.lines = 0
        self.final = None

    def reset(self):
        self.final = None

    def update_stats(self, score, lines):
        self.score, self.lines = score, lines

    def show_game_over(self, score, lines):
        self.final = (score, lines)

    def redraw(self, session):
        a, screen = self.assets, self.screen
        screen.blit(a.bg, (0, 0))
        for y, row in enumerate(session.board):
            for x, color in enumerate(row):
                if color:
                    screen.blit(a.cell(color), a.cell_pos(x, y))
        if not session.game_over:
            color = session.piece.color
            for x, y in session.ghost_cells():
                if y >= 0:
                    px, py = a.cell_pos(x, y)
                    screen.blit(a.ghost(color), (px + 4, py + 4))
            for x, y in session.piece_cells():
                if y >= 0:
                    screen.blit(a.cell(color), a.cell_pos(x, y))
        self._draw_panel()
        if self.final is not None:
            self._draw_game_over()
        pygame.display.flip()

    def _draw_panel(self):
        d, a = self.assets.dims, self.assets
        x = d.panel_x + 12
        self.screen.blit(a.text("Tetris", (197,202,233)), (x, d.panel_y + 12))
        self.screen.blit(a.text(f"Score: {self.score}"), (x, d.panel_y + 44))
        self.screen.blit(a.text(f"Lines: {self.lines}"), (x, d.panel_y + 68))
        y = d.panel_y + 120
        for line in CONTROLS:
            self.screen.blit(a.text(line, (165,175,215)), (x, y)); y += 20

    def _draw_game_over(self):
        d, a = self.assets.dims, self.assets
        shade = pygame.Surface((d.board_w, d.board_h), pygame.SRCALPHA)
        shade.fill((10, 13, 34, 200))
        self.screen.blit(shade, (d.board_x, d.board_y))
        score, lines = self.final
        cx = d.board_x + d.board_w // 2
        cy = d.board_y + d.board_h // 2
        rows = [
            a.text("Game Over", (255,220,220), self.big_font),
            a.text(f"Score: {score}", (255,220,220)),
            a.text(f"Lines: {lines}", (255,220,220)),
            a.text("Press R or Enter to play again", (200,210,240)),
        ]
        y = cy - sum(s.get_height() + 6 for s in rows) // 2
        for surf in rows:
            self.screen.blit(surf, surf.get_rect(midtop=(cx, y)))
            y += surf.get_height() + 6
