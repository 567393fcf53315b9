from __future__ import annotations
from typing import Optional

from tictactoe.config import ROWS, COLS
from tictactoe.types import Move

PROMPT = "Enter a row and col separated by a space (i.e. 1 1): "


def parse_move(raw: str) -> Optional[Move]:
    """
    Turn "row col" (both 1-indexed) into a flat cell index.
    Returns None when the player asks to quit.
    """
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None
    parts = s.replace(",", " ").split()
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError("Invalid input. Enter a row and col (i.e. 1 1) or q.")
    row, col = int(parts[0]), int(parts[1])
    if not (1 <= row <= ROWS and 1 <= col <= COLS):
        raise ValueError(f"Row and col must be between 1 and {ROWS}.")
    return Move((row - 1) * COLS + (col - 1))
