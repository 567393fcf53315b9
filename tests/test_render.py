from tictactoe.core.board import Board
from tictactoe.ui.colors import FG_CYAN, FG_RED, REVERSE
from tictactoe.ui.render import format_board, render

EMPTY = "\n".join([
    " ┌1┬2┬3┐",
    "1  │ │ ",
    " ├─┼─┼─┤",
    "2  │ │ ",
    " ├─┼─┼─┤",
    "3  │ │ ",
    " └ ┴ ┴ ┘",
])


def test_empty_board():
    assert format_board(Board(), color=False) == EMPTY


def test_marks_plain(make_board):
    text = format_board(make_board("X.O.X...O"), color=False)
    rows = text.splitlines()
    assert rows[1] == "1 X│ │O"
    assert rows[3] == "2  │X│ "
    assert rows[5] == "3  │ │O"


def test_marks_colored(make_board):
    text = format_board(make_board("X.O......"), color=True)
    assert f"{FG_CYAN}X" in text
    assert f"{FG_RED}O" in text


def test_highlight_needs_color(make_board):
    b = make_board("XXXOO....")
    assert REVERSE in format_board(b, color=True, highlight=(0, 1, 2))
    assert REVERSE not in format_board(b, color=False, highlight=(0, 1, 2))


def test_render_does_not_touch_board(make_board, capsys):
    b = make_board("X...O....")
    before = b.cells[:]
    render(b, "You chose 1 1")
    out = capsys.readouterr().out
    assert out.startswith("You chose 1 1\n")
    assert "1 X│ │ " in out
    assert b.cells == before
