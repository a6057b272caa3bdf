"""
Constants for Pong Arena.

Everything gameplay related is expressed in percentages of the arena, so the
simulation does not care about the window resolution.
"""

from __future__ import annotations

import math
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent
ASSETS_ROOT = PACKAGE_ROOT / "assets"

# Window
WINDOW_SIZE = (960, 600)
FPS = 60

# Arena (percent of the playfield)
ARENA_MIN = 0.0
ARENA_MAX = 100.0
ARENA_CENTER = 50.0

# Simulation time unit is the millisecond, speeds are in percent per second.
MS_PER_SECOND = 1000.0
MIN_TRAJECTORY_DURATION = 1.0
FULL_TURN = 2 * math.pi

# Ball
BALL_SPEED = 25.0
BALL_RADIUS = 1.0

# Paddles
PADDLE_SIZE = (0.5, 10.0)
PLAYER_PADDLE_SPEED = 100.0
BOT_CENTER_DURATION = 500.0

# Colors
WHITE = (255, 255, 255)
DIM = (140, 140, 140)
HIGHLIGHT = (255, 210, 90)
BACKGROUND = (20, 20, 24)
BUTTON_FILL = (40, 40, 48, 1.0)
BUTTON_BORDER = (90, 90, 100, 1.0)
