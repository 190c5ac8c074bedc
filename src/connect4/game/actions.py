from __future__ import annotations
from typing import Optional

from connect4.core.rules import evaluate
from connect4.game.state import GameState
from connect4.types import Player, Move


def other(player: Player) -> Player:
    return "C" if player == "H" else "H"


def play_move(state: GameState, move: Move) -> Optional[int]:
    """
    Drop the current player's piece into a column and evaluate the result.

    Returns the row the piece landed in, or None if the column is full
    (state untouched, caller picks another column).
    """
    if state.is_over:
        raise RuntimeError("Game is already over.")

    col = int(move)
    row = state.board.lowest_empty_row(col)
    if row is None:
        return None

    state.board.drop(Move(col), state.current)
    state.last_move = (col, row)
    state.outcome = evaluate(state.board, col, row)
    if state.outcome is None:
        state.current = other(state.current)
    return row
