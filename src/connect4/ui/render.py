from __future__ import annotations
from typing import Optional, Iterable, Set

from connect4 import config
from connect4.core.board import Board
from connect4.types import Cell, Coord
from connect4.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_YELLOW, RESET, REVERSE


def _piece(cell: Cell) -> str:
    if cell is None:
        return c("·", FG_GRAY)
    if cell == "H":
        return c("H", FG_RED)
    return c("C", FG_YELLOW)


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> list[str]:
    """Text rows of the board, top row first, ending with the column legend."""
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = []
    for r in range(board.rows - 1, -1, -1):
        parts = []
        for col in range(board.cols):
            p = _piece(board.cell_at(col, r))
            if (col, r) in hl and config.USE_COLOR:
                p = f"{REVERSE}{p}{RESET}"
            parts.append(p)
        lines.append(f"{r + 1} | " + " ".join(parts) + " |")

    lines.append(c("  " + "—" * (2 * board.cols + 3), DIM))
    lines.append(c("    " + " ".join(str(i + 1) for i in range(board.cols)), DIM))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("CONNECT 4", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for line in board_lines(board, highlight):
        print(line)

    print(c(f"   Enter 1-{board.cols} to drop. Enter q to quit.", DIM))
