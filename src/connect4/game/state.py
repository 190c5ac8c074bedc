from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from connect4.core.board import Board
from connect4.types import Coord, Outcome, Player


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current: Player = "H"
    outcome: Outcome = None
    last_move: Optional[Coord] = None
    last_status: str = "Human starts."

    @property
    def is_over(self) -> bool:
        return self.outcome is not None
