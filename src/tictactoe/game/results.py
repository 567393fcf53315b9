from __future__ import annotations
from typing import Optional

from tictactoe.core.board import Board
from tictactoe.core.rules import GameOutcome, Line, outcome, winning_line
from tictactoe.game.state import Phase

FINAL_MESSAGES = {
    Phase.HUMAN_WON: "YOU WIN!",
    Phase.COMPUTER_WON: "You lost.",
    Phase.DRAW: "It was a tie.",
    Phase.QUIT: "Game quit.",
}

_PHASE_FOR_OUTCOME = {
    GameOutcome.X_WINS: Phase.HUMAN_WON,
    GameOutcome.O_WINS: Phase.COMPUTER_WON,
    GameOutcome.DRAW: Phase.DRAW,
}


def phase_after(board: Board, last_index: int, next_phase: Phase) -> Phase:
    """Terminal phase reached by the move at `last_index`, else `next_phase`."""
    return _PHASE_FOR_OUTCOME.get(outcome(board, last_index), next_phase)


def final_message(phase: Phase) -> str:
    if not phase.is_terminal:
        raise ValueError(f"Game is still running ({phase.value}).")
    return FINAL_MESSAGES[phase]


def line_for(board: Board, last_index: Optional[int]) -> Optional[Line]:
    if last_index is None or board[last_index] is None:
        return None
    return winning_line(board, last_index)
