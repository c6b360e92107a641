# src/dropfour/config.py

from __future__ import annotations

import os

ROWS = 6
COLS = 7
CONNECT_N = 4

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.6  # presentation only, the engine never sleeps

# Hard AI search
HARD_SEARCH_DEPTH = 3
TERMINAL_SCORE = 10_000

# Window weights for the static evaluator
WINDOW_FOUR = 100_000
WINDOW_THREE = 100
WINDOW_TWO = 10
WINDOW_BLOCK_THREE = 90
WINDOW_BLOCK_TWO = 5
CENTER_WEIGHT = 3

# Logging
LOG_LEVEL = os.environ.get("DROPFOUR_LOG_LEVEL", "WARNING").upper()
