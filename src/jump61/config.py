# src/jump61/config.py

from __future__ import annotations

import os

DEFAULT_SIZE = 6

# Search
SEARCH_DEPTH = 3
RED_WIN = 10_000_000
BLUE_WIN = -RED_WIN

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 1

# Headless games stop after this many moves and count as a draw
MAX_HEADLESS_MOVES = 400

LOG_LEVEL = os.environ.get("JUMP61_LOG_LEVEL", "WARNING").upper()
