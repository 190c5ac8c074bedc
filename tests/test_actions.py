"""Tests for the game state machine."""

import pytest

from connect4.config import ROWS
from connect4.game.actions import other, play_move
from connect4.game.results import highlight_for, outcome_message
from connect4.game.state import GameState
from connect4.types import Move


def test_other():
    assert other("H") == "C"
    assert other("C") == "H"


def test_initial_state():
    state = GameState()
    assert state.current == "H"
    assert state.outcome is None
    assert not state.is_over
    assert state.board.valid_moves() == list(range(7))


def test_play_move_switches_player():
    state = GameState()
    assert play_move(state, Move(3)) == 0
    assert state.board.cell_at(3, 0) == "H"
    assert state.last_move == (3, 0)
    assert state.current == "C"

    assert play_move(state, Move(3)) == 1
    assert state.board.cell_at(3, 1) == "C"
    assert state.current == "H"


def test_full_column_is_recoverable():
    """A full column leaves the state untouched."""
    state = GameState()
    for _ in range(ROWS):
        play_move(state, Move(0))
    before = [row[:] for row in state.board.grid]
    current = state.current

    assert play_move(state, Move(0)) is None
    assert state.board.grid == before
    assert state.current == current
    assert not state.is_over


def test_vertical_win_ends_game():
    state = GameState()
    for move in [0, 1, 0, 1, 0, 1]:
        play_move(state, Move(move))
        assert state.outcome is None

    play_move(state, Move(0))
    assert state.outcome == "H"
    assert state.is_over
    # the winner stays current
    assert state.current == "H"
    assert highlight_for(state) == [(0, 0), (0, 1), (0, 2), (0, 3)]
    assert outcome_message(state.outcome) == "Human wins!"


def test_no_moves_after_terminal():
    state = GameState()
    for move in [0, 1, 0, 1, 0, 1, 0]:
        play_move(state, Move(move))

    with pytest.raises(RuntimeError):
        play_move(state, Move(5))


def test_outcome_messages():
    assert outcome_message(None) == ""
    assert outcome_message("C") == "Computer wins!"
    assert outcome_message("D") == "Draw, no further moves possible!"
