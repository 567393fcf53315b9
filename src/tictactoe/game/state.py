from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
from enum import Enum

from tictactoe.core.board import Board
from tictactoe.types import Move


class Phase(Enum):
    AWAITING_HUMAN = "awaiting_human"
    AWAITING_COMPUTER = "awaiting_computer"
    HUMAN_WON = "human_won"
    COMPUTER_WON = "computer_won"
    DRAW = "draw"
    QUIT = "quit"

    @property
    def is_terminal(self) -> bool:
        return self not in (Phase.AWAITING_HUMAN, Phase.AWAITING_COMPUTER)


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    phase: Phase = Phase.AWAITING_HUMAN
    last_status: str = "You are X. You move first."
    last_move: Optional[Move] = None
