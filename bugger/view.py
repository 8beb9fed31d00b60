"""
view.py — View layer.

Draws the board and every entity from a GameModel snapshot.  All model
positions are native pixels; everything here goes through the grid's
scale before touching the screen.

Sprites are drawn with plain shapes placed where the original tile art
puts its visible pixels, so the drawing lines up with the hitboxes.

Public API:
    GameView(screen)    — bind to a pygame surface
    view.bind(screen)   — rebind after the window is re-created
    view.render(model)  — draw the current frame
"""

from typing import Optional

import pygame

from .config import (
    TILE_TOP, TILE_BOTTOM,
    BG, WATER_COL, WATER_HI, STONE_COL, STONE_EDGE, GRASS_COL, GRASS_EDGE,
    BUG_COL, BUG_DIM, PLAYER_COL, PLAYER_DIM,
    TEXT_COL, TEXT_EDGE, HUD_COL,
    STATE_PAUSED,
)
from .grid import GridConfig
from .model import Entity, GameModel, Obstacle, Player, StatsDisplay


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _tile_color(row: int, grid: GridConfig) -> tuple[tuple, tuple]:
    """Goal row is water, lanes are stone, the last two rows are grass."""
    if row == 0:
        return WATER_COL, WATER_HI
    if row <= grid.num_lanes:
        return STONE_COL, STONE_EDGE
    return GRASS_COL, GRASS_EDGE


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a GameModel snapshot."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._fonts: dict[tuple, pygame.font.Font] = {}
        self._grid: Optional[GridConfig] = None

    def bind(self, screen: pygame.Surface) -> None:
        self.screen = screen

    # ── Main entry ───────────────────────────────────────────────
    def render(self, model: GameModel) -> None:
        self._grid = model.grid
        self.screen.fill(BG)
        self._draw_board(model.grid)
        for entity in model.entities():
            entity.render(self._draw_entity)
        self._draw_hud(model)
        if model.state == STATE_PAUSED:
            self._draw_paused_overlay()
        pygame.display.flip()

    # ── Board ────────────────────────────────────────────────────
    def _draw_board(self, grid: GridConfig) -> None:
        cw, rh = grid.col_width, grid.row_height
        top = grid.to_scaled(TILE_TOP)
        for row in range(grid.num_rows):
            face, edge = _tile_color(row, grid)
            y = round(top + row * rh)
            for col in range(grid.num_cols):
                tile = pygame.Rect(round(col * cw), y, round(cw) + 1, round(rh) + 1)
                pygame.draw.rect(self.screen, face, tile)
                pygame.draw.rect(self.screen, edge, tile, 1)

        # Front face of the bottom row, the only one not covered by a row below
        bottom = top + grid.num_rows * rh
        pygame.draw.rect(
            self.screen, _lerp_color(GRASS_EDGE, BG, 0.4),
            pygame.Rect(0, round(bottom), round(grid.canvas_width), round(grid.to_scaled(TILE_BOTTOM))),
        )

    # ── Entities ─────────────────────────────────────────────────
    def _draw_entity(self, entity: Entity) -> None:
        if isinstance(entity, Obstacle):
            self._draw_bug(entity)
        elif isinstance(entity, Player):
            self._draw_player(entity)
        elif isinstance(entity, StatsDisplay):
            self._draw_stats(entity)

    def _rect(self, entity: Entity, dx: float, dy: float, w: float, h: float) -> pygame.Rect:
        """Rect in screen space from native offsets relative to an entity."""
        s = self._grid.scale
        x, y = entity.scaled_position(self._grid)
        return pygame.Rect(round(x + dx * s), round(y + dy * s),
                           max(1, round(w * s)), max(1, round(h * s)))

    def _draw_bug(self, bug: Obstacle) -> None:
        body = self._rect(bug, 6, 88, 82, 52)
        pygame.draw.ellipse(self.screen, BUG_DIM, body.inflate(4, 4))
        pygame.draw.ellipse(self.screen, BUG_COL, body)
        head = self._rect(bug, 76, 98, 22, 32)
        pygame.draw.ellipse(self.screen, BUG_DIM, head)
        eye = self._rect(bug, 88, 106, 6, 6)
        pygame.draw.ellipse(self.screen, TEXT_COL, eye)

    def _draw_player(self, player: Player) -> None:
        body = self._rect(player, 32, 100, 37, 50)
        pygame.draw.rect(self.screen, PLAYER_DIM, body, border_radius=max(1, body.w // 4))
        head = self._rect(player, 30, 62, 41, 40)
        pygame.draw.ellipse(self.screen, PLAYER_COL, head)
        for ex in (40, 55):
            pygame.draw.ellipse(self.screen, TEXT_EDGE, self._rect(player, ex, 76, 6, 8))

    def _draw_stats(self, stats: StatsDisplay) -> None:
        font = self._font("impact", round(self._grid.to_scaled(48)))
        x, y = stats.scaled_position(self._grid)
        self._draw_outlined_text(stats.text, font, (round(x), round(y)))

    def _draw_outlined_text(self, text: str, font: pygame.font.Font, bottomleft: tuple) -> None:
        edge = font.render(text, True, TEXT_EDGE)
        rect = edge.get_rect(bottomleft=bottomleft)
        w = max(1, round(self._grid.to_scaled(3)))
        for ox, oy in ((-w, 0), (w, 0), (0, -w), (0, w)):
            self.screen.blit(edge, rect.move(ox, oy))
        self.screen.blit(font.render(text, True, TEXT_COL), rect)

    # ── HUD ──────────────────────────────────────────────────────
    def _draw_hud(self, model: GameModel) -> None:
        grid, score = model.grid, model.scoreboard
        font = self._font("courier", max(9, round(grid.to_scaled(14))), bold=True)
        left = (f"LANES {grid.num_lanes}  COLS {grid.num_cols}  "
                f"BUGS {grid.num_enemies}  DIFF {grid.difficulty}  x{grid.scale:.2f}")
        right = f"WINS {score.wins}  DEATHS {score.deaths}"
        pad = round(grid.to_scaled(6))
        self.screen.blit(font.render(left, True, HUD_COL), (pad, pad))
        surf = font.render(right, True, HUD_COL)
        self.screen.blit(surf, surf.get_rect(topright=(round(grid.canvas_width) - pad, pad)))

    def _draw_paused_overlay(self) -> None:
        w, h = self.screen.get_size()
        shade = pygame.Surface((w, h), pygame.SRCALPHA)
        shade.fill((5, 5, 12, 170))
        self.screen.blit(shade, (0, 0))
        font = self._font("courier", max(12, round(self._grid.to_scaled(36))), bold=True)
        surf = font.render("PAUSED", True, TEXT_COL)
        self.screen.blit(surf, surf.get_rect(center=(w // 2, h // 2)))

    # ── Font cache ────────────────────────────────────────────────
    def _font(self, name: str, size: int, bold: bool = False) -> pygame.font.Font:
        key = (name, size, bold)
        if key not in self._fonts:
            try:
                self._fonts[key] = pygame.font.SysFont(name, size, bold=bold)
            except Exception:
                self._fonts[key] = pygame.font.SysFont(None, size)
        return self._fonts[key]
