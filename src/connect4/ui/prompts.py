from __future__ import annotations
from typing import Optional

from connect4.types import Move


def parse_move(raw: str, cols: int) -> Optional[Move]:
    """1-based column number -> Move. None means the player wants to quit."""
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None
    if not s.isdigit():
        raise ValueError("Only enter single digits!")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Enter a number from 1 up to {cols} only.")
    return Move(col)
