from __future__ import annotations
from typing import Optional, List

from connect4.core.rules import winning_line
from connect4.game.state import GameState
from connect4.types import Coord, Outcome


MESSAGES = {
    "H": "Human wins!",
    "C": "Computer wins!",
    "D": "Draw, no further moves possible!",
}


def outcome_message(outcome: Outcome) -> str:
    if outcome is None:
        return ""
    return MESSAGES[outcome]


def highlight_for(state: GameState) -> Optional[List[Coord]]:
    if state.outcome in (None, "D") or state.last_move is None:
        return None
    col, row = state.last_move
    return winning_line(state.board, col, row)
