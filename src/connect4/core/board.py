
# src/connect4/core/board.py

from __future__ import annotations
import operator
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from connect4.config import ROWS, COLS
from connect4.types import Cell, Player, Move


@dataclass(slots=True)
class Board:
    """
    Fixed ROWS x COLS grid addressed as (col, row), row 0 at the bottom.

    grid[row][col] holds the cell. The only mutation is drop(), so every
    column is filled contiguously from row 0 upwards.
    """
    rows: int = field(default=ROWS, init=False)
    cols: int = field(default=COLS, init=False)
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]
        elif len(self.grid) != self.rows or any(len(row) != self.cols for row in self.grid):
            raise ValueError(f"Grid must be {self.rows} rows of {self.cols} cells.")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Board":
        """
        Build a board from a picture: rows listed top to bottom,
        cells left to right (the way the board is printed).
        """
        b = cls()
        if len(rows) != b.rows:
            raise ValueError(f"Expected {b.rows} rows, got {len(rows)}.")
        for r, cells in enumerate(reversed(rows)):
            if len(cells) != b.cols:
                raise ValueError(f"Expected {b.cols} cells in row {r}, got {len(cells)}.")
            b.grid[r] = list(cells)
        return b

    def copy(self) -> "Board":
        return Board(grid=[row[:] for row in self.grid])

    def _check_col(self, col: int) -> int:
        c = operator.index(col)
        if c < 0 or c >= self.cols:
            raise IndexError(f"Column {c} out of range 0..{self.cols - 1}.")
        return c

    def _check_row(self, row: int) -> int:
        r = operator.index(row)
        if r < 0 or r >= self.rows:
            raise IndexError(f"Row {r} out of range 0..{self.rows - 1}.")
        return r

    def cell_at(self, col: int, row: int) -> Cell:
        return self.grid[self._check_row(row)][self._check_col(col)]

    def lowest_empty_row(self, col: int) -> Optional[int]:
        """Lowest empty row in the column, or None when it is full."""
        for r, cell in enumerate(self.column_cells(col)):
            if cell is None:
                return r
        return None

    def drop(self, col: Move, player: Player) -> int:
        """
        Place a piece in the lowest empty row of the column and return that row.

        Dropping into a full column is a caller bug: check lowest_empty_row first.
        """
        if player not in ("H", "C"):
            raise RuntimeError(f"Cannot drop {player!r}: pieces are 'H' or 'C'.")
        c = self._check_col(col)
        r = self.lowest_empty_row(c)
        if r is None:
            raise RuntimeError(f"Column {c} is full.")
        self.grid[r][c] = player
        return r

    def valid_moves(self) -> List[Move]:
        top = self.rows - 1
        return [Move(c) for c in range(self.cols) if self.grid[top][c] is None]

    def is_full(self) -> bool:
        return not self.valid_moves()

    # --- line extraction ---

    def column_cells(self, col: int) -> List[Cell]:
        c = self._check_col(col)
        return [self.grid[r][c] for r in range(self.rows)]

    def row_cells(self, row: int) -> List[Cell]:
        r = self._check_row(row)
        return list(self.grid[r])

    def rising_diagonal_cells(self, col: int, row: int) -> List[Cell]:
        c, r = self._check_col(col), self._check_row(row)
        offset = min(c, r)
        c, r = c - offset, r - offset

        cells: List[Cell] = []
        while c < self.cols and r < self.rows:
            cells.append(self.grid[r][c])
            c += 1
            r += 1
        return cells

    def falling_diagonal_cells(self, col: int, row: int) -> List[Cell]:
        c, r = self._check_col(col), self._check_row(row)
        offset = min(c, self.rows - r - 1)
        c, r = c - offset, r + offset

        cells: List[Cell] = []
        while True:
            cells.append(self.grid[r][c])
            if c == self.cols - 1 or r == 0:
                break
            c += 1
            r -= 1
        return cells
