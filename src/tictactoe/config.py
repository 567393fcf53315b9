# src/tictactoe/config.py

from __future__ import annotations

import os

from tictactoe.types import Player

ROWS = 3
COLS = 3
CELLS = ROWS * COLS
CENTER = CELLS // 2

HUMAN: Player = "X"
COMPUTER: Player = "O"

# UI toggles
USE_COLOR = os.name != "nt" and "NO_COLOR" not in os.environ
CLEAR_SCREEN = False

# Pause before the computer moves
AI_THINK_DELAY_SEC = 0.5

# Seed for the computer's random fallback move
DEFAULT_SEED = 0
