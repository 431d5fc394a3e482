from __future__ import annotations
from jump61.config import USE_COLOR
from jump61.types import Owner

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

FG_RED = "\033[31m"
FG_BLUE = "\033[34m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

SIDE_COLORS = {"red": FG_RED, "blue": FG_BLUE}


def c(s: str, code: str) -> str:
    if not USE_COLOR:
        return s
    return f"{code}{s}{RESET}"


def side_color(owner: Owner) -> str:
    """Color for a square's owner; unowned squares are gray."""
    return SIDE_COLORS.get(owner, FG_GRAY)
