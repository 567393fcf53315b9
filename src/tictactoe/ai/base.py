from __future__ import annotations
from typing import Protocol

from tictactoe.game.state import GameState
from tictactoe.types import Move


class Agent(Protocol):
    """
    Something that plays O. The controller only calls `choose_move` while
    the board still has an empty cell, and applies the returned index
    itself; an agent must not mark the board.
    """
    name: str

    def choose_move(self, state: GameState) -> Move:
        ...
