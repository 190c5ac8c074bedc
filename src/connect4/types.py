# src/connect4/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType, Tuple

Player = Literal["H", "C"]
Cell = Optional[Player]
Move = NewType("Move", int)   # column index 0..6

# None while the game is still undecided, "D" for a draw
Outcome = Optional[Literal["H", "C", "D"]]

Coord = Tuple[int, int]   # (column, row), row 0 is the bottom

DRAW = "D"
