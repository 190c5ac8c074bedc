# src/connect4/config.py

from __future__ import annotations

# Board shape is fixed for the whole game
ROWS = 6
COLS = 7
CONNECT_N = 4

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “Computer thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 1  # short pause so computer moves aren’t instant
