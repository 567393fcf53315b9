
# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from tictactoe.config import CELLS, COLS, COMPUTER, HUMAN, ROWS
from tictactoe.types import Cell, Player, Move

MARKS = (HUMAN, COMPUTER)


@dataclass(slots=True)
class Board:
    """Fixed 3x3 grid stored row-major; index = row * 3 + col."""
    cells: List[Cell] = field(default_factory=list)
    moves: int = 0  # number of marks placed so far

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [None] * CELLS
        if len(self.cells) != CELLS:
            raise ValueError(f"Board needs exactly {CELLS} cells.")
        for p in self.cells:
            if p is not None and p not in MARKS:
                raise ValueError(f"Unknown mark {p!r}.")
        # A board built from an existing layout counts its marks once.
        self.moves = sum(1 for p in self.cells if p is not None)

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def copy(self) -> "Board":
        return Board(self.cells[:])

    def index_of(self, row: int, col: int) -> Move:
        if row < 0 or row >= ROWS:
            raise ValueError("Row index out of range.")
        if col < 0 or col >= COLS:
            raise ValueError("Column index out of range.")
        return Move(row * COLS + col)

    def cell_at(self, row: int, col: int) -> Cell:
        return self.cells[self.index_of(row, col)]

    def empty_cells(self) -> List[Move]:
        return [Move(i) for i, p in enumerate(self.cells) if p is None]

    def is_full(self) -> bool:
        return all(p is not None for p in self.cells)

    def place(self, index: Move, player: Player) -> None:
        if player not in MARKS:
            raise ValueError(f"Unknown mark {player!r}.")
        i = int(index)
        if i < 0 or i >= CELLS:
            raise ValueError("Cell index out of range.")
        if self.cells[i] is not None:
            raise ValueError("Cell is already taken.")
        self.cells[i] = player
        self.moves += 1
