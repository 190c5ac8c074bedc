"""Shared fixtures."""

import pytest

from connect4 import config
from connect4.core.board import Board

H, C, E = "H", "C", None


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch):
    """No colours, no screen clearing, no thinking pause."""
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)
    monkeypatch.setattr(config, "AI_THINK_DELAY_SEC", 0)


@pytest.fixture
def staircase():
    """Each column one piece taller than the one to its left; column 6 is full."""
    return Board.from_rows([
        [E, E, E, E, E, E, H],
        [E, E, E, E, E, C, C],
        [E, E, E, E, H, H, H],
        [E, E, E, C, C, C, C],
        [E, E, H, H, H, H, H],
        [E, C, C, C, C, C, C],
    ])


@pytest.fixture
def drawn_board():
    """Full board with no four-in-a-row anywhere."""
    a = [H, H, C, C, H, H, C]
    b = [C, C, H, H, C, C, H]
    return Board.from_rows([b, a, b, a, b, a])
