# src/jump61/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType, Tuple

Player = Literal["red", "blue"]
Owner = Optional[Player]      # None == unowned square
Move = NewType("Move", int)   # linear square index 0..size*size-1
Coord = Tuple[int, int]       # (row, col), 1-based
