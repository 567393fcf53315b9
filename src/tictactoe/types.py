"""
Value types shared by the board, the rules and the players.

A cell holds "X" (the human), "O" (the computer) or None when empty.
Moves are flat row-major indices: 0 1 2 / 3 4 5 / 6 7 8.
"""

from __future__ import annotations
from typing import Literal, Optional, NewType

Player = Literal["X", "O"]
Cell = Optional[Player]
Move = NewType("Move", int)
