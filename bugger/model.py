"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Exposes a clean API for the Controller to read/write.

Positions are native pixels; see grid.py for the scaled frame.

Classes:
    Direction     — immutable (x, y) unit step
    Entity        — position + update/render interface
    Obstacle      — a bug crossing its lane left to right
    Player        — the user-controlled character
    Scoreboard    — streak, wins, deaths
    StatsDisplay  — streak text anchored to the canvas corner
    GameModel     — top-level model; owns grid, player, obstacles, scores
"""

import random
from typing import Callable, Optional

from .config import (
    COL_WIDTH, ROW_HEIGHT, DY, SPEED_STEP, STATS_OFFSET,
    STATE_PLAYING, STATE_PAUSED,
)
from .grid import GridConfig


def random_int(lo: int, hi: int) -> int:
    """Random integer in [lo, hi); lo when the range is empty."""
    if hi <= lo:
        return lo
    return random.randrange(lo, hi)


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None

    def __init__(self, name: str, x: int, y: int):
        self.name = name
        self.x = x
        self.y = y

    @classmethod
    def from_name(cls, name) -> Optional["Direction"]:
        return _BY_NAME.get(name)

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction.{self.name.upper()}"


Direction.LEFT  = Direction("left",  -1,  0)
Direction.RIGHT = Direction("right",  1,  0)
Direction.UP    = Direction("up",     0, -1)
Direction.DOWN  = Direction("down",   0,  1)
ALL_DIRS = [Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN]
_BY_NAME = {d.name: d for d in ALL_DIRS}


# ──────────────────────────── Entity ─────────────────────────────
class Entity:
    """Anything with a position that the view can draw."""

    sprite: Optional[str] = None

    def __init__(self, x: float = 0, y: float = 0):
        self.x = x
        self.y = y

    def update(self, dt: float) -> None:
        pass

    def render(self, draw: Callable[["Entity"], None]) -> None:
        draw(self)

    def scaled_position(self, grid: GridConfig) -> tuple[float, float]:
        return grid.to_scaled(self.x), grid.to_scaled(self.y)


# ─────────────────────────── Obstacle ────────────────────────────
class Obstacle(Entity):
    """
    Moves right at a fixed speed; once past the right edge it re-rolls
    a new lane, a new off-screen start and a new speed.
    """

    sprite = "enemy-bug"

    def __init__(self, grid: GridConfig):
        super().__init__()
        self.grid = grid
        self.speed: float = 0.0
        self.reroll()

    def reroll(self) -> None:
        grid = self.grid
        # Variable distance off-screen so respawns are less predictable
        self.x = -COL_WIDTH * random_int(1, grid.num_cols)
        self.y = ROW_HEIGHT * random_int(1, grid.num_lanes + 1) + DY
        # Quantised speeds: each difficulty step adds one more possible
        # speed and raises the top speed by SPEED_STEP
        self.speed = grid.base_enemy_speed + SPEED_STEP * random_int(1, grid.difficulty + 1)

    def update(self, dt: float) -> None:
        if self.x < COL_WIDTH * self.grid.num_cols:
            self.x += dt * self.speed
        else:
            self.reroll()

    @property
    def lane(self) -> int:
        return round((self.y - DY) / ROW_HEIGHT)


# ──────────────────────────── Player ─────────────────────────────
class Player(Entity):
    """
    Moves one tile per input; moves that would leave the grid are
    dropped rather than clamped.
    """

    sprite = "char-boy"

    def __init__(self, grid: GridConfig, scoreboard: "Scoreboard"):
        super().__init__()
        self.grid = grid
        self.scoreboard = scoreboard
        self.reset()

    # ── Accessors ────────────────────────────────────────────────
    @property
    def col(self) -> int:
        return round(self.x / COL_WIDTH)

    @property
    def row(self) -> int:
        return round((self.y - DY) / ROW_HEIGHT)

    # ── Commands ─────────────────────────────────────────────────
    def reset(self) -> None:
        self.x = self.grid.player_start_col * COL_WIDTH
        self.y = self.grid.player_start_row * ROW_HEIGHT + DY

    def handle_input(self, direction: Optional[Direction]) -> None:
        if not isinstance(direction, Direction):
            return
        col, row = self.col + direction.x, self.row + direction.y
        if not (0 <= col < self.grid.num_cols and 0 <= row < self.grid.num_rows):
            return
        self.x += direction.x * COL_WIDTH
        self.y += direction.y * ROW_HEIGHT

    def update(self, dt: float) -> None:
        if self.row < 1:
            self.win()

    def win(self) -> None:
        self.scoreboard.record_win()
        self.reset()

    def die(self) -> None:
        self.scoreboard.record_death()
        self.reset()


# ────────────────────────── Scoreboard ───────────────────────────
class Scoreboard:
    def __init__(self):
        self.streak: int = 0
        self.wins: int = 0
        self.deaths: int = 0

    def record_win(self) -> None:
        self.streak += 1
        self.wins += 1

    def record_death(self) -> None:
        self.streak = 0
        self.deaths += 1

    def reset(self) -> None:
        self.streak = 0
        self.wins = 0
        self.deaths = 0


class StatsDisplay(Entity):
    """Current streak, drawn as text near the bottom-right of the canvas."""

    # Position is derived from the canvas size, never stored
    def __init__(self, grid: GridConfig, scoreboard: Scoreboard):
        self.grid = grid
        self.scoreboard = scoreboard

    @property
    def x(self) -> float:
        return self.grid.native_canvas_width - STATS_OFFSET

    @property
    def y(self) -> float:
        return self.grid.native_canvas_height - STATS_OFFSET

    @property
    def text(self) -> str:
        return str(self.scoreboard.streak)


# ─────────────────────────── GameModel ───────────────────────────
_COMMANDS = {
    "lanes+":      GridConfig.increment_lanes,
    "lanes-":      GridConfig.decrement_lanes,
    "cols+":       GridConfig.increment_cols,
    "cols-":       GridConfig.decrement_cols,
    "enemies+":    GridConfig.increment_enemies,
    "enemies-":    GridConfig.decrement_enemies,
    "difficulty+": GridConfig.increment_difficulty,
    "difficulty-": GridConfig.decrement_difficulty,
}
COMMANDS = tuple(_COMMANDS)


class GameModel:
    """
    Top-level model.  Owns all game state.
    The controller calls update() once per frame.
    """

    def __init__(self, grid: Optional[GridConfig] = None):
        self.grid: GridConfig = grid if grid is not None else GridConfig()
        self.state: str = STATE_PLAYING
        self.tick: int = 0
        self.scoreboard = Scoreboard()
        self.player = Player(self.grid, self.scoreboard)
        self.stats_display = StatsDisplay(self.grid, self.scoreboard)
        self.obstacles: list[Obstacle] = []
        self._reset_pending: bool = False
        self._reset_entities()

    # ── Public API ───────────────────────────────────────────────
    @property
    def reset_pending(self) -> bool:
        return self._reset_pending

    def pause(self) -> None:
        if self.state == STATE_PLAYING:
            self.state = STATE_PAUSED

    def resume(self) -> None:
        if self.state == STATE_PAUSED:
            self.state = STATE_PLAYING

    def toggle_pause(self) -> None:
        if self.state == STATE_PLAYING:
            self.pause()
        else:
            self.resume()

    def restart(self) -> None:
        self._reset_entities()
        self.state = STATE_PLAYING

    def adjust(self, command: str):
        """
        Apply a named grid adjustment such as "lanes+" or "difficulty-".

        Returns the new value if the grid changed, in which case every
        game object is rebuilt before the next tick.  Unknown commands
        and out-of-range requests return None and change nothing.
        """
        setter = _COMMANDS.get(command)
        if setter is None:
            return None
        result = setter(self.grid)
        if result is not None:
            self._reset_pending = True
        return result

    def set_scale(self, scale):
        """Display-only change: positions stay native, nothing resets."""
        return self.grid.set_scale(scale)

    def handle_input(self, direction: Optional[Direction]) -> None:
        if self.state == STATE_PLAYING:
            self.player.handle_input(direction)

    def update(self, dt: float) -> None:
        """Advance game logic by dt seconds. Called every frame."""
        from .collision import check_collisions  # local import to avoid circular

        self.tick += 1
        if self._reset_pending:
            self._reset_entities()
        if self.state != STATE_PLAYING:
            return

        for obstacle in self.obstacles:
            obstacle.update(dt)
        self.player.update(dt)
        check_collisions(self.obstacles, self.player)

    def entities(self) -> list[Entity]:
        """Draw order: obstacles, player, then stats on top."""
        return [*self.obstacles, self.player, self.stats_display]

    # ── Private helpers ──────────────────────────────────────────
    def _reset_entities(self) -> None:
        self.obstacles = [Obstacle(self.grid) for _ in range(self.grid.num_enemies)]
        self.player.reset()
        self.scoreboard.reset()
        self.tick = 0
        self._reset_pending = False
