"""Tests for the text board renderer."""

from connect4.ui.render import board_lines, render


def test_board_lines_top_row_first(staircase):
    lines = board_lines(staircase)
    assert lines[0] == "6 | · · · · · · H |"
    assert lines[5] == "1 | · C C C C C C |"
    assert lines[-1].split() == ["1", "2", "3", "4", "5", "6", "7"]


def test_render_prints_status(staircase, capsys):
    render(staircase, "Computer wins!", highlight=[(c, 0) for c in range(1, 7)])
    out = capsys.readouterr().out
    assert "CONNECT 4" in out
    assert "Computer wins!" in out
    assert "Enter 1-7 to drop." in out
