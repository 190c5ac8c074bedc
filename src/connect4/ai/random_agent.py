from __future__ import annotations
import random
from typing import Optional

from connect4.game.state import GameState
from connect4.types import Move


class RandomAgent:
    """
    Picks uniformly among the columns that still have room.

    The generator is owned by the agent; pass `rng` (or `seed`) to make
    its choices reproducible.
    """
    name = "Random AI"

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)

    def choose_move(self, state: GameState) -> Move:
        moves = state.board.valid_moves()
        if not moves:
            raise ValueError("No valid moves.")
        return self.rng.choice(moves)
