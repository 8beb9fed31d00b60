"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

# ── Window ────────────────────────────────────────────────────────
FPS             = 60
WINDOW_TITLE    = "BUGGER — Cross the Road"

# ── Tileset geometry (native pixels) ──────────────────────────────
# Calibrated against the original tile images; update together if the
# tileset ever changes.
TILE_HEIGHT     = 171
TILE_TOP        = 51     # mostly transparent strip above each tile
TILE_BOTTOM     = 37     # strip hidden by the row below, except the last row
ROW_HEIGHT      = TILE_HEIGHT - TILE_TOP - TILE_BOTTOM
COL_WIDTH       = 101
DY              = -26    # centres sprites vertically inside a row

# ── Hitbox insets (native pixels, per entity type) ────────────────
OBSTACLE_INSET_TOP    = 65
OBSTACLE_INSET_BOTTOM = 30
PLAYER_INSET_SIDE     = 30
PLAYER_INSET_TOP      = 45

# ── Obstacle speeds ───────────────────────────────────────────────
SPEED_STEP      = 50     # px/s added per difficulty step

# ── Default settings ──────────────────────────────────────────────
DEFAULT_LANES       = 4
DEFAULT_COLS        = 7
DEFAULT_ENEMIES     = 10
DEFAULT_BASE_SPEED  = 200
DEFAULT_DIFFICULTY  = 4
DEFAULT_SCALE       = 1.0

# ── Adjustment bounds (inclusive) ─────────────────────────────────
LANES_MIN,      LANES_MAX      = 1, 5
COLS_MIN,       COLS_MAX       = 2, 11
ENEMIES_MIN,    ENEMIES_MAX    = 2, 20
DIFFICULTY_MIN, DIFFICULTY_MAX = 2, 9

SCALE_STEP      = 0.25
SCALE_MIN       = 0.25

# ── Stats text ────────────────────────────────────────────────────
STATS_OFFSET    = 70     # streak text sits this far from bottom-right corner

# ── Colors ────────────────────────────────────────────────────────
BG           = (18,  18,  24)
WATER_COL    = (64,  140, 220)
WATER_HI     = (120, 190, 250)
STONE_COL    = (140, 140, 150)
STONE_EDGE   = (100, 100, 112)
GRASS_COL    = (96,  190, 96)
GRASS_EDGE   = (70,  150, 70)
BUG_COL      = (220, 50,  60)
BUG_DIM      = (120, 20,  30)
PLAYER_COL   = (250, 220, 120)
PLAYER_DIM   = (170, 120, 60)
TEXT_COL     = (255, 255, 255)
TEXT_EDGE    = (0,   0,   0)
HUD_COL      = (230, 230, 240)

# ── Game States ───────────────────────────────────────────────────
STATE_PLAYING = "playing"
STATE_PAUSED  = "paused"
