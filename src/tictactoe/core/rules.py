from __future__ import annotations
from enum import Enum
from typing import Optional, List, Tuple

from tictactoe.config import CELLS, COLS, HUMAN
from tictactoe.types import Player, Move
from tictactoe.core.board import Board

Line = Tuple[int, int, int]

MAIN_DIAGONAL: Line = (0, 4, 8)
ANTI_DIAGONAL: Line = (2, 4, 6)


class GameOutcome(Enum):
    IN_PROGRESS = "in_progress"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"


def lines_through(index: int) -> List[Line]:
    """
    The lines a mark at `index` can complete: its row, its column and
    whichever diagonals it sits on.
    """
    row, col = divmod(index, COLS)
    start = row * COLS
    lines: List[Line] = [
        (start, start + 1, start + 2),
        (col, col + COLS, col + 2 * COLS),
    ]
    if index % 4 == 0:
        lines.append(MAIN_DIAGONAL)
    if index in ANTI_DIAGONAL:
        lines.append(ANTI_DIAGONAL)
    return lines


def is_valid_move(board: Board, index: int) -> bool:
    # Only plain ints address a cell.
    if not isinstance(index, int) or isinstance(index, bool):
        return False
    return 0 <= index < CELLS and board[index] is None


def apply_move(board: Board, index: Move, player: Player) -> None:
    if not is_valid_move(board, index):
        raise ValueError(f"Illegal move {index} for player {player}.")
    board.place(index, player)


def _completed_line(board: Board, index: int, player: Player) -> Optional[Line]:
    # `index` is read as holding `player`; the board itself is left alone.
    for line in lines_through(index):
        if all(i == index or board[i] == player for i in line):
            return line
    return None


def completes_line(board: Board, index: int, player: Player) -> bool:
    """Would `player` make three in a row by taking `index`?"""
    if index < 0 or index >= CELLS:
        raise ValueError("Cell index out of range.")
    return _completed_line(board, index, player) is not None


def _occupant(board: Board, index: int) -> Player:
    if index < 0 or index >= CELLS:
        raise ValueError("Cell index out of range.")
    p = board[index]
    if p is None:
        raise ValueError(f"Cannot check an empty cell ({index}) for a win.")
    return p


def is_winning_move(board: Board, index: int) -> bool:
    p = _occupant(board, index)
    return _completed_line(board, index, p) is not None


def winning_line(board: Board, index: int) -> Optional[Line]:
    p = _occupant(board, index)
    return _completed_line(board, index, p)


def is_board_full(board: Board) -> bool:
    return board.is_full()


def outcome(board: Board, last_index: int) -> GameOutcome:
    if is_winning_move(board, last_index):
        return GameOutcome.X_WINS if board[last_index] == HUMAN else GameOutcome.O_WINS
    if is_board_full(board):
        return GameOutcome.DRAW
    return GameOutcome.IN_PROGRESS
