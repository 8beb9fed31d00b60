"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate raw keyboard events into model commands.
  - Drive the game loop: tick the model, ask the view to render.
  - Keep the window sized to the scaled canvas (grid changes, resizes).
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

Keys:
  Arrows    move            P        pause / resume
  R         restart         Q / Esc  quit
  [ ]       lanes - / +     ; '      columns - / +
  , .       bugs - / +      - =      difficulty - / +
  9 0       scale - / +

The controller is the only layer that imports pygame directly for events.
"""

import math
from typing import Optional

import pygame

from .config import FPS, WINDOW_TITLE, SCALE_STEP, SCALE_MIN
from .grid import GridConfig
from .model import Direction, GameModel
from .view import GameView

DIRECTION_KEYS = {
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP:    Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
}

ADJUST_KEYS = {
    pygame.K_LEFTBRACKET:  "lanes-",
    pygame.K_RIGHTBRACKET: "lanes+",
    pygame.K_SEMICOLON:    "cols-",
    pygame.K_QUOTE:        "cols+",
    pygame.K_COMMA:        "enemies-",
    pygame.K_PERIOD:       "enemies+",
    pygame.K_MINUS:        "difficulty-",
    pygame.K_EQUALS:       "difficulty+",
}

SCALE_KEYS = {
    pygame.K_9: -SCALE_STEP,
    pygame.K_0: +SCALE_STEP,
}


def direction_for_key(key: int) -> Optional[Direction]:
    """Arrow key -> Direction; anything else -> None."""
    return DIRECTION_KEYS.get(key)


def window_size(grid: GridConfig) -> tuple[int, int]:
    return math.ceil(grid.canvas_width), math.ceil(grid.canvas_height)


def fit_scale(grid: GridConfig, width: int, height: int) -> float:
    """
    Largest scale, in hundredths, at which the whole native canvas fits
    the window.  Rounding down keeps the re-created window from feeding
    a slightly larger scale back through the next resize event.
    """
    fit = min(width / grid.native_canvas_width, height / grid.native_canvas_height)
    return max(SCALE_MIN, math.floor(fit * 100) / 100)


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(self, model: Optional[GameModel] = None):
        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock   = pygame.time.Clock()
        self.model   = model if model is not None else GameModel()
        self._size   = window_size(self.model.grid)
        self.screen  = pygame.display.set_mode(self._size, pygame.RESIZABLE)
        self.view    = GameView(self.screen)
        self.running = False

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        self.running = True
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            self._handle_events()
            if not self.running:
                break
            self.model.update(dt)
            self._sync_window()
            self.view.render(self.model)
        pygame.quit()

    # ── Window helpers ────────────────────────────────────────────
    def _sync_window(self) -> None:
        """Re-create the window if the scaled canvas changed size."""
        size = window_size(self.model.grid)
        if size != self._size:
            self._size = size
            self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
            self.view.bind(self.screen)

    def _set_scale(self, scale: float) -> None:
        if scale == self.model.grid.scale:
            return
        if self.model.set_scale(scale) is not None:
            print(f"[settings] scale -> {scale:.2f}")
            self._sync_window()

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.VIDEORESIZE:
                self._set_scale(fit_scale(self.model.grid, event.w, event.h))
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

    def _handle_keydown(self, key: int) -> None:
        if key in (pygame.K_q, pygame.K_ESCAPE):
            self._quit()
        elif key in DIRECTION_KEYS:
            self.model.handle_input(direction_for_key(key))
        elif key == pygame.K_p:
            self.model.toggle_pause()
        elif key == pygame.K_r:
            self.model.restart()
        elif key in ADJUST_KEYS:
            self._handle_adjust(ADJUST_KEYS[key])
        elif key in SCALE_KEYS:
            self._set_scale(max(SCALE_MIN, self.model.grid.scale + SCALE_KEYS[key]))

    def _handle_adjust(self, command: str) -> None:
        value = self.model.adjust(command)
        if value is not None:
            print(f"[settings] {command[:-1]} -> {value}")
            self._sync_window()

    # ── Utilities ─────────────────────────────────────────────────
    def _quit(self) -> None:
        self.running = False
