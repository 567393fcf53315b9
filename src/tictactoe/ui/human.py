from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional

from tictactoe.types import Move
from tictactoe.ui.prompts import PROMPT, parse_move


@dataclass
class HumanPlayer:
    """Reads moves from the terminal, re-asking until the text parses."""
    name: str = "Human"
    read: Optional[Callable[[str], str]] = None   # defaults to input()
    say: Optional[Callable[[str], None]] = None   # defaults to print()

    def read_move(self) -> Optional[Move]:
        read = self.read or input
        say = self.say or print
        while True:
            raw = read(PROMPT)
            try:
                return parse_move(raw)
            except ValueError as e:
                say(str(e))
