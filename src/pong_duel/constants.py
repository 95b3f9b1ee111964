"""
Shared constants for Pong Duel.
"""

from __future__ import annotations

from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent
ASSETS_ROOT = PACKAGE_ROOT / "assets"

FPS = 60
WINDOW_SIZE = (800, 600)

PADDLE_SIZE = (15, 100)
PADDLE_MARGIN = 10  # gap between a paddle and its side wall
BALL_RADIUS = 10

BALL_SPEED = 5.0
SERVE_DY = 4.0
RESET_DY_RANGE = (2.0, 6.0)
PLAYER_PADDLE_STEP = 7.0

CPU_DEAD_ZONE = 35.0
CPU_STEP = 5.0

WINNING_SCORE = 10
HISTORY_LIMIT = 10

PLAYER_LABEL = "Player 1"
AI_LABEL = "Player 2 (AI)"

HISTORY_DB_PATH = Path.home() / ".pong_duel" / "history.db"

# Colors
BACKGROUND = (0, 0, 0)
WHITE = (255, 255, 255)
DIM = (170, 170, 170)
HIGHLIGHT = (51, 153, 255)
BUTTON_FILL = (30, 30, 30)
BUTTON_BORDER = (85, 85, 85)

PLAYER_COLOR = (51, 153, 255)
AI_COLOR = (255, 51, 51)
BALL_COLOR = WHITE
NET_COLOR = (85, 85, 85)
