from __future__ import annotations
from typing import Optional, Iterable, Set

from tictactoe import config
from tictactoe.core.board import Board
from tictactoe.types import Cell
from tictactoe.ui.colors import c, BOLD, FG_CYAN, FG_RED, REVERSE

TOP_ROW = " ┌1┬2┬3┐"
MID_ROW = " ├─┼─┼─┤"
BTM_ROW = " └ ┴ ┴ ┘"
SEP = "│"


def _piece(cell: Cell, color: bool, highlighted: bool = False) -> str:
    if cell is None:
        return " "
    code = FG_CYAN if cell == config.HUMAN else FG_RED
    if highlighted:
        code = REVERSE + code
    return c(cell, code, color)


def format_board(
    board: Board,
    color: Optional[bool] = None,
    highlight: Optional[Iterable[int]] = None,
) -> str:
    if color is None:
        color = config.USE_COLOR
    hl: Set[int] = set(highlight) if highlight else set()

    lines = [TOP_ROW]
    for r in range(config.ROWS):
        parts = []
        for col in range(config.COLS):
            i = board.index_of(r, col)
            parts.append(_piece(board[i], color, i in hl))
        lines.append(f"{r + 1} " + SEP.join(parts))
        if r < config.ROWS - 1:
            lines.append(MID_ROW)
    lines.append(BTM_ROW)
    return "\n".join(lines)


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(board: Board, status: str = "", highlight: Optional[Iterable[int]] = None) -> None:
    clear_screen()
    if status:
        print(c(status, BOLD))
    print(format_board(board, highlight=highlight))
