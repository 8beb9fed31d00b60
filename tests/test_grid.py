"""
Tests for grid configuration: derived layout, scaling and adjustment bounds.
"""
import pytest

from bugger.config import (
    COL_WIDTH, ROW_HEIGHT, TILE_TOP, TILE_BOTTOM, DY,
    LANES_MAX, COLS_MIN, COLS_MAX, ENEMIES_MIN, ENEMIES_MAX,
    DIFFICULTY_MIN, DIFFICULTY_MAX,
)
from bugger.grid import GridConfig


class TestDerivedLayout:
    """Derived values always follow the current settings."""

    def test_defaults_match_original_game(self):
        """Default grid is 4 lanes, 7 columns, 10 bugs, speed 200, difficulty 4."""
        grid = GridConfig()
        assert grid.num_lanes == 4
        assert grid.num_cols == 7
        assert grid.num_enemies == 10
        assert grid.base_enemy_speed == 200
        assert grid.difficulty == 4
        assert grid.scale == 1.0

    def test_example_layout(self, grid):
        """4 lanes x 7 columns gives 7 rows and a start tile of (3, 6)."""
        assert grid.num_rows == 7
        assert grid.player_start_col == 3
        assert grid.player_start_row == 6

    def test_canvas_size(self, grid):
        """Canvas is columns x tile width by rows x row height plus margins."""
        assert grid.native_canvas_width == 7 * COL_WIDTH
        assert grid.native_canvas_height == 7 * ROW_HEIGHT + TILE_TOP + TILE_BOTTOM
        assert grid.canvas_width == 707
        assert grid.canvas_height == 669

    def test_rows_follow_lane_changes(self, grid):
        """Rows and height recompute after every lane adjustment."""
        for _ in range(LANES_MAX):
            grid.increment_lanes()
            assert grid.num_rows == grid.num_lanes + 3
            assert grid.player_start_row == grid.num_rows - 1
            assert grid.native_canvas_height == (
                grid.num_rows * ROW_HEIGHT + TILE_TOP + TILE_BOTTOM
            )

    def test_width_follows_column_changes(self, grid):
        """Width and start column recompute after every column adjustment."""
        grid.decrement_cols()
        assert grid.num_cols == 6
        assert grid.canvas_width == 6 * COL_WIDTH
        assert grid.player_start_col == 3
        grid.decrement_cols()
        assert grid.player_start_col == 2

    def test_snapshot(self, grid):
        """Snapshot exposes the tunables as a plain dict."""
        snap = grid.snapshot()
        assert snap["num_lanes"] == 4
        assert snap["num_cols"] == 7
        assert snap["scale"] == 1.0
        assert "GridConfig(" in repr(grid)


class TestScaling:
    """Scaled getters multiply by scale; native getters never do."""

    def test_scaled_geometry(self, grid):
        """Tile geometry and canvas scale together."""
        grid.set_scale(2)
        assert grid.col_width == 2 * COL_WIDTH
        assert grid.row_height == 2 * ROW_HEIGHT
        assert grid.dy == 2 * DY
        assert grid.canvas_width == 2 * grid.native_canvas_width
        assert grid.canvas_height == 2 * grid.native_canvas_height

    def test_native_geometry_ignores_scale(self, grid):
        """Native variants are unchanged by scale."""
        grid.set_scale(0.5)
        assert grid.native_col_width == COL_WIDTH
        assert grid.native_row_height == ROW_HEIGHT
        assert grid.native_dy == DY
        assert grid.native_canvas_width == 7 * COL_WIDTH

    def test_round_trip(self, grid):
        """Native -> scaled -> native returns the original value."""
        for scale in (0.25, 0.75, 1.5, 3):
            grid.set_scale(scale)
            assert grid.to_native(grid.to_scaled(303)) == pytest.approx(303)

    def test_set_scale_returns_new_value(self, grid):
        """Accepted scale is returned."""
        assert grid.set_scale(1.25) == 1.25
        assert grid.scale == 1.25

    @pytest.mark.parametrize("bad", [0, -1, -0.5, "2", None, True])
    def test_invalid_scale_is_ignored(self, grid, bad):
        """Non-positive or non-numeric scales leave the grid untouched."""
        grid.set_scale(1.5)
        assert grid.set_scale(bad) is None
        assert grid.scale == 1.5


class TestAdjustmentBounds:
    """Setters clamp to the canonical bounds and report rejection with None."""

    def test_increment_returns_new_value(self, grid):
        """An applied change returns the updated value."""
        assert grid.increment_lanes() == 5
        assert grid.increment_cols() == 8
        assert grid.increment_enemies() == 11
        assert grid.increment_difficulty() == 5

    def test_decrement_returns_new_value(self, grid):
        assert grid.decrement_lanes() == 3
        assert grid.decrement_cols() == 6
        assert grid.decrement_enemies() == 9
        assert grid.decrement_difficulty() == 3

    def test_lanes_upper_bound(self):
        """Lanes stop at the maximum."""
        grid = GridConfig(num_lanes=LANES_MAX)
        assert grid.increment_lanes() is None
        assert grid.num_lanes == LANES_MAX

    def test_lanes_lower_bound(self):
        """At least one lane always remains."""
        grid = GridConfig(num_lanes=1)
        assert grid.decrement_lanes() is None
        assert grid.num_lanes == 1

    def test_cols_bounds(self):
        grid = GridConfig(num_cols=COLS_MAX)
        assert grid.increment_cols() is None
        grid = GridConfig(num_cols=COLS_MIN)
        assert grid.decrement_cols() is None
        assert grid.num_cols == COLS_MIN

    def test_enemies_bounds(self):
        grid = GridConfig(num_enemies=ENEMIES_MAX)
        assert grid.increment_enemies() is None
        grid = GridConfig(num_enemies=ENEMIES_MIN)
        assert grid.decrement_enemies() is None
        assert grid.num_enemies == ENEMIES_MIN

    def test_difficulty_bounds(self):
        grid = GridConfig(difficulty=DIFFICULTY_MAX)
        assert grid.increment_difficulty() is None
        assert grid.difficulty == DIFFICULTY_MAX
        grid = GridConfig(difficulty=DIFFICULTY_MIN)
        assert grid.decrement_difficulty() is None
        assert grid.difficulty == DIFFICULTY_MIN

    def test_rejection_has_no_side_effects(self):
        """A rejected change leaves every derived value as it was."""
        grid = GridConfig(num_lanes=LANES_MAX, num_cols=COLS_MAX)
        before = (grid.snapshot(), grid.num_rows, grid.canvas_width, grid.canvas_height)
        grid.increment_lanes()
        grid.increment_cols()
        after = (grid.snapshot(), grid.num_rows, grid.canvas_width, grid.canvas_height)
        assert before == after


class TestConstruction:
    """Constructor arguments must describe a playable grid."""

    @pytest.mark.parametrize("kwargs", [
        {"num_lanes": 0},
        {"num_cols": 0},
        {"num_enemies": -1},
        {"difficulty": 0},
        {"scale": 0},
        {"scale": -2.0},
    ])
    def test_invalid_arguments_raise(self, kwargs):
        with pytest.raises(ValueError):
            GridConfig(**kwargs)

    def test_zero_enemies_allowed(self):
        """An empty road is a valid (if easy) game."""
        assert GridConfig(num_enemies=0).num_enemies == 0
