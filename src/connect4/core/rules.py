# src/connect4/core/rules.py

from __future__ import annotations
from typing import List, Optional, Sequence

from connect4.config import CONNECT_N
from connect4.core.board import Board
from connect4.types import Cell, Coord, Outcome, Player, DRAW

# Four consecutive set bits at every offset of an 8-bit field.
WIN_MASKS = (15, 30, 60, 120, 240)

DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


def line_mask(cells: Sequence[Cell], player: Player) -> int:
    """
    Encode a line as bits: index 0 is the most significant position.
    The lowest bit is never set (weights are 2 << k).
    """
    n = len(cells)
    mask = 0
    for i, cell in enumerate(cells):
        if cell == player:
            mask += 2 << (n - i - 1)
    return mask


def has_four(mask: int) -> bool:
    return any(mask & k == k for k in WIN_MASKS)


def is_draw(board: Board) -> bool:
    return all(cell is not None for cell in board.row_cells(board.rows - 1))


def evaluate(board: Board, col: int, row: int) -> Outcome:
    """
    Outcome of the move that just placed a piece at (col, row).

    Returns the mover ("H" / "C") on a four-in-a-row through that cell,
    "D" when the board is full, otherwise None.
    """
    player = board.cell_at(col, row)
    if player is None:
        raise RuntimeError(f"No piece at ({col}, {row}) to evaluate.")

    lines = (
        board.column_cells(col),
        board.row_cells(row),
        board.rising_diagonal_cells(col, row),
        board.falling_diagonal_cells(col, row),
    )
    for cells in lines:
        if has_four(line_mask(cells, player)):
            return player

    if is_draw(board):
        return DRAW
    return None


def winning_line(board: Board, col: int, row: int) -> Optional[List[Coord]]:
    """
    Coordinates of the run through (col, row) that won the game, if any.
    Only used for highlighting.
    """
    player = board.cell_at(col, row)
    if player is None:
        return None

    for dc, dr in DIRECTIONS:
        run: List[Coord] = [(col, row)]
        for sign in (1, -1):
            c, r = col + sign * dc, row + sign * dr
            while 0 <= c < board.cols and 0 <= r < board.rows and board.grid[r][c] == player:
                run.append((c, r))
                c += sign * dc
                r += sign * dr
        if len(run) >= CONNECT_N:
            return sorted(run)
    return None
