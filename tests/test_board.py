"""Tests for the Board grid."""

import pytest

from connect4.config import ROWS, COLS
from connect4.core.board import Board
from connect4.types import Move


def test_new_board_is_empty():
    """Every cell starts empty and every column drops to row 0."""
    board = Board()
    assert board.rows == ROWS
    assert board.cols == COLS
    for col in range(COLS):
        assert board.lowest_empty_row(col) == 0
        for row in range(ROWS):
            assert board.cell_at(col, row) is None


def test_drop_stacks_from_bottom():
    """Pieces land on top of each other."""
    board = Board()
    assert board.drop(Move(2), "H") == 0
    assert board.drop(Move(2), "C") == 1
    assert board.cell_at(2, 0) == "H"
    assert board.cell_at(2, 1) == "C"
    assert board.lowest_empty_row(2) == 2
    assert board.lowest_empty_row(3) == 0


def test_full_column():
    """After ROWS drops the column reports no empty row and refuses more drops."""
    board = Board()
    for i in range(ROWS):
        assert board.lowest_empty_row(4) == i
        board.drop(Move(4), "H" if i % 2 else "C")

    assert board.lowest_empty_row(4) is None
    assert Move(4) not in board.valid_moves()
    with pytest.raises(RuntimeError):
        board.drop(Move(4), "H")


def test_from_rows(staircase):
    """Rows are given top to bottom."""
    assert staircase.cell_at(0, 0) is None
    assert staircase.cell_at(0, 5) is None
    assert staircase.cell_at(6, 0) == "C"
    assert staircase.cell_at(6, 5) == "H"


def test_from_rows_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Board.from_rows([[None] * COLS] * (ROWS - 1))
    with pytest.raises(ValueError):
        Board.from_rows([[None] * (COLS + 1)] * ROWS)


def test_lowest_empty_row_staircase(staircase):
    """Columns 0-5 have 0-5 pieces, column 6 is full."""
    for col in range(6):
        assert staircase.lowest_empty_row(col) == col
    assert staircase.lowest_empty_row(6) is None
    assert staircase.valid_moves() == [0, 1, 2, 3, 4, 5]


@pytest.mark.parametrize("col,row", [(-1, 0), (COLS, 0), (0, -1), (0, ROWS)])
def test_cell_at_out_of_bounds(col, row):
    with pytest.raises(IndexError):
        Board().cell_at(col, row)


def test_out_of_bounds_column_operations():
    board = Board()
    with pytest.raises(IndexError):
        board.lowest_empty_row(COLS)
    with pytest.raises(IndexError):
        board.drop(Move(-1), "H")
    with pytest.raises(IndexError):
        board.row_cells(ROWS)


def test_line_lengths():
    board = Board()
    for col in range(COLS):
        assert len(board.column_cells(col)) == ROWS
    for row in range(ROWS):
        assert len(board.row_cells(row)) == COLS


def test_column_and_row_order(staircase):
    """Columns read bottom to top, rows read left to right."""
    assert staircase.column_cells(3) == ["C", "H", "C", None, None, None]
    assert staircase.row_cells(1) == [None, None, "H", "H", "H", "H", "H"]


@pytest.mark.parametrize("col,row,length", [
    (0, 0, 6),
    (3, 3, 6),
    (6, 0, 1),
    (0, 5, 1),
    (3, 0, 4),
    (6, 5, 6),
    (2, 0, 5),
])
def test_rising_diagonal_length(col, row, length):
    assert len(Board().rising_diagonal_cells(col, row)) == length


@pytest.mark.parametrize("col,row,length", [
    (0, 0, 1),
    (0, 5, 6),
    (6, 5, 1),
    (3, 3, 6),
    (6, 0, 6),
    (3, 0, 4),
    (0, 3, 4),
])
def test_falling_diagonal_length(col, row, length):
    assert len(Board().falling_diagonal_cells(col, row)) == length


def test_rising_diagonal_cells(staircase):
    """Starts at the lowest end of the diagonal, whichever cell is asked for."""
    expected = ["C", "H", "C", "H", "C", "H"]
    assert staircase.rising_diagonal_cells(1, 0) == expected
    assert staircase.rising_diagonal_cells(4, 3) == expected


def test_falling_diagonal_cells(staircase):
    """Starts at the top-left end and walks down to the right."""
    expected = [None, None, None, "C", "H", "C"]
    assert staircase.falling_diagonal_cells(6, 0) == expected
    assert staircase.falling_diagonal_cells(2, 4) == expected


def test_reads_do_not_mutate(staircase):
    before = [row[:] for row in staircase.grid]

    for col in range(COLS):
        staircase.column_cells(col)
        staircase.lowest_empty_row(col)
        for row in range(ROWS):
            staircase.cell_at(col, row)
            staircase.rising_diagonal_cells(col, row)
            staircase.falling_diagonal_cells(col, row)
    for row in range(ROWS):
        staircase.row_cells(row)

    assert staircase.grid == before


def test_copy_is_independent(staircase):
    dup = staircase.copy()
    dup.drop(Move(0), "H")
    assert dup.cell_at(0, 0) == "H"
    assert staircase.cell_at(0, 0) is None


def test_is_full(drawn_board):
    assert not Board().is_full()
    assert drawn_board.is_full()
    assert drawn_board.valid_moves() == []


def test_dimensions_are_fixed():
    """rows/cols are not constructor arguments."""
    with pytest.raises(TypeError):
        Board(rows=6, cols=10)

    board = Board()
    assert (board.rows, board.cols) == (ROWS, COLS)
    assert board.copy().cols == COLS


def test_grid_of_wrong_shape_rejected():
    with pytest.raises(ValueError):
        Board(grid=[[None] * 10 for _ in range(ROWS)])
    with pytest.raises(ValueError):
        Board(grid=[[None] * COLS for _ in range(ROWS + 1)])


@pytest.mark.parametrize("piece", [None, "X", "h"])
def test_drop_rejects_unknown_piece(piece):
    board = Board()
    with pytest.raises(RuntimeError):
        board.drop(Move(0), piece)
    assert board.lowest_empty_row(0) == 0


@pytest.mark.parametrize("col", [0.9, "3", None])
def test_coordinates_must_be_integers(col):
    board = Board()
    board.drop(Move(0), "H")
    with pytest.raises(TypeError):
        board.cell_at(col, 0)
    with pytest.raises(TypeError):
        board.lowest_empty_row(col)
