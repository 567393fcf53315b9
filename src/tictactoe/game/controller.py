from __future__ import annotations

import logging
from typing import Callable, Optional

from tictactoe.ai.base import Agent
from tictactoe.config import COLS, COMPUTER, HUMAN
from tictactoe.core.rules import apply_move, is_valid_move
from tictactoe.game.results import final_message, line_for, phase_after
from tictactoe.game.state import GameState, Phase
from tictactoe.types import Move
from tictactoe.ui.effects import ai_thinking
from tictactoe.ui.human import HumanPlayer
from tictactoe.ui.render import render

logger = logging.getLogger(__name__)

# Supplies the human's next move; None means quit.
MoveSource = Callable[[], Optional[Move]]


def _label(index: int) -> str:
    row, col = divmod(int(index), COLS)
    return f"{row + 1} {col + 1}"


def _expect(state: GameState, phase: Phase) -> None:
    if state.phase.is_terminal:
        raise ValueError(f"Game is over ({state.phase.value}).")
    if state.phase is not phase:
        raise ValueError(f"Not the expected turn: {state.phase.value}.")


def human_turn(state: GameState, move: Optional[Move]) -> Phase:
    """
    Apply one human move. An invalid move leaves the phase unchanged so the
    caller asks again; None quits the game.
    """
    _expect(state, Phase.AWAITING_HUMAN)

    if move is None:
        state.phase = Phase.QUIT
        state.last_status = "Game quit."
        return state.phase

    if not is_valid_move(state.board, move):
        state.last_status = "Invalid move"
        logger.debug("rejected human move %r", move)
        return state.phase

    apply_move(state.board, move, HUMAN)
    state.last_move = move
    state.last_status = f"You chose {_label(move)}"
    state.phase = phase_after(state.board, move, Phase.AWAITING_COMPUTER)
    logger.debug("human took %d -> %s", move, state.phase.value)
    return state.phase


def computer_turn(state: GameState, agent: Agent) -> Phase:
    _expect(state, Phase.AWAITING_COMPUTER)

    move = agent.choose_move(state)
    apply_move(state.board, move, COMPUTER)
    state.last_move = move
    state.last_status = f"{state.last_status} | {agent.name} chose {_label(move)}"
    # A full board after the computer's move cannot happen when X moves first,
    # but it is still a draw rather than another human turn.
    state.phase = phase_after(state.board, move, Phase.AWAITING_HUMAN)
    logger.debug("%s took %d -> %s", agent.name, move, state.phase.value)
    return state.phase


def run_game(
    agent: Agent,
    read_move: Optional[MoveSource] = None,
    show_thinking: bool = True,
) -> GameState:
    if read_move is None:
        read_move = HumanPlayer().read_move

    state = GameState()

    while not state.phase.is_terminal:
        if state.phase is Phase.AWAITING_HUMAN:
            render(state.board, state.last_status)
            human_turn(state, read_move())
        else:
            if show_thinking:
                ai_thinking(f"{agent.name} is thinking")
            computer_turn(state, agent)

    print("Game over!")
    print("Final game board:")
    render(state.board, highlight=line_for(state.board, state.last_move))
    print(final_message(state.phase))
    return state
