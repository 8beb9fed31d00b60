"""
grid.py — Grid configuration.

Holds the tunable game parameters and derives everything else from them
on every read: row count, canvas size, player start tile.  Two coordinate
frames are exposed:

    native  — design-time pixels of the tileset
    scaled  — native × scale, what actually lands on screen

Entities live in native space; only the view multiplies by scale.

Adjustment setters never raise.  They return the new value when the
change applied, or None (and leave state untouched) when it would leave
the allowed range.
"""

from numbers import Real

from .config import (
    COL_WIDTH, ROW_HEIGHT, TILE_TOP, TILE_BOTTOM, DY,
    LANES_MIN, LANES_MAX, COLS_MIN, COLS_MAX,
    ENEMIES_MIN, ENEMIES_MAX, DIFFICULTY_MIN, DIFFICULTY_MAX,
    DEFAULT_LANES, DEFAULT_COLS, DEFAULT_ENEMIES,
    DEFAULT_BASE_SPEED, DEFAULT_DIFFICULTY, DEFAULT_SCALE,
)


class GridConfig:
    """Tunable game settings plus live-derived geometry."""

    def __init__(
        self,
        num_lanes: int = DEFAULT_LANES,
        num_cols: int = DEFAULT_COLS,
        num_enemies: int = DEFAULT_ENEMIES,
        base_enemy_speed: float = DEFAULT_BASE_SPEED,
        difficulty: int = DEFAULT_DIFFICULTY,
        scale: float = DEFAULT_SCALE,
    ):
        if num_lanes < 1:
            raise ValueError(f"num_lanes must be >= 1, got {num_lanes}")
        if num_cols < 1:
            raise ValueError(f"num_cols must be >= 1, got {num_cols}")
        if num_enemies < 0:
            raise ValueError(f"num_enemies must be >= 0, got {num_enemies}")
        if difficulty < 1:
            raise ValueError(f"difficulty must be >= 1, got {difficulty}")
        if not _is_positive(scale):
            raise ValueError(f"scale must be a positive number, got {scale!r}")

        self._num_lanes = num_lanes
        self._num_cols = num_cols
        self._num_enemies = num_enemies
        self._base_enemy_speed = base_enemy_speed
        self._difficulty = difficulty
        self._scale = scale

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in self.snapshot().items())
        return f"GridConfig({fields})"

    # ── Tunables ─────────────────────────────────────────────────
    @property
    def num_lanes(self) -> int:
        return self._num_lanes

    @property
    def num_cols(self) -> int:
        return self._num_cols

    @property
    def num_enemies(self) -> int:
        return self._num_enemies

    @property
    def base_enemy_speed(self) -> float:
        return self._base_enemy_speed

    @property
    def difficulty(self) -> int:
        return self._difficulty

    @property
    def scale(self) -> float:
        return self._scale

    def snapshot(self) -> dict:
        return {
            "num_lanes": self._num_lanes,
            "num_cols": self._num_cols,
            "num_enemies": self._num_enemies,
            "base_enemy_speed": self._base_enemy_speed,
            "difficulty": self._difficulty,
            "scale": self._scale,
        }

    # ── Derived layout ───────────────────────────────────────────
    @property
    def num_rows(self) -> int:
        """Goal row + lanes + two safe rows at the bottom."""
        return self._num_lanes + 3

    @property
    def player_start_col(self) -> int:
        return self._num_cols // 2

    @property
    def player_start_row(self) -> int:
        return self.num_rows - 1

    @property
    def native_col_width(self) -> int:
        return COL_WIDTH

    @property
    def native_row_height(self) -> int:
        return ROW_HEIGHT

    @property
    def native_dy(self) -> int:
        return DY

    @property
    def native_canvas_width(self) -> int:
        return self._num_cols * COL_WIDTH

    @property
    def native_canvas_height(self) -> int:
        return self.num_rows * ROW_HEIGHT + TILE_TOP + TILE_BOTTOM

    @property
    def col_width(self) -> float:
        return self.to_scaled(COL_WIDTH)

    @property
    def row_height(self) -> float:
        return self.to_scaled(ROW_HEIGHT)

    @property
    def dy(self) -> float:
        return self.to_scaled(DY)

    @property
    def canvas_width(self) -> float:
        return self.to_scaled(self.native_canvas_width)

    @property
    def canvas_height(self) -> float:
        return self.to_scaled(self.native_canvas_height)

    # ── Frame conversion ─────────────────────────────────────────
    def to_scaled(self, value: float) -> float:
        return value * self._scale

    def to_native(self, value: float) -> float:
        return value / self._scale

    # ── Adjustment commands ──────────────────────────────────────
    def increment_lanes(self):
        if self._num_lanes < LANES_MAX:
            self._num_lanes += 1
            return self._num_lanes
        return None

    def decrement_lanes(self):
        if self._num_lanes > LANES_MIN:
            self._num_lanes -= 1
            return self._num_lanes
        return None

    def increment_cols(self):
        if self._num_cols < COLS_MAX:
            self._num_cols += 1
            return self._num_cols
        return None

    def decrement_cols(self):
        if self._num_cols > COLS_MIN:
            self._num_cols -= 1
            return self._num_cols
        return None

    def increment_enemies(self):
        if self._num_enemies < ENEMIES_MAX:
            self._num_enemies += 1
            return self._num_enemies
        return None

    def decrement_enemies(self):
        if self._num_enemies > ENEMIES_MIN:
            self._num_enemies -= 1
            return self._num_enemies
        return None

    def increment_difficulty(self):
        if self._difficulty < DIFFICULTY_MAX:
            self._difficulty += 1
            return self._difficulty
        return None

    def decrement_difficulty(self):
        if self._difficulty > DIFFICULTY_MIN:
            self._difficulty -= 1
            return self._difficulty
        return None

    def set_scale(self, scale):
        """Change the display scale. Non-positive values are ignored."""
        if not _is_positive(scale):
            return None
        self._scale = scale
        return self._scale


def _is_positive(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and value > 0
