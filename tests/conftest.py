"""
Shared fixtures.  Pygame runs headless so controller tests need no screen.
"""
import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from bugger.grid import GridConfig
from bugger.model import GameModel


@pytest.fixture(autouse=True)
def seeded_random():
    random.seed(1234)


@pytest.fixture
def grid():
    """The original game's layout: 4 lanes, 7 columns."""
    return GridConfig(num_lanes=4, num_cols=7, num_enemies=10,
                      base_enemy_speed=200, difficulty=4)


@pytest.fixture
def model(grid):
    return GameModel(grid)
