from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Optional, Tuple

from tictactoe.config import CELLS, CENTER, COMPUTER, DEFAULT_SEED, HUMAN
from tictactoe.core.board import Board
from tictactoe.core.rules import completes_line
from tictactoe.game.state import GameState
from tictactoe.types import Move

logger = logging.getLogger(__name__)


def _pick(board: Board, rng: random.Random) -> Tuple[Move, str]:
    moves = board.empty_cells()
    if not moves:
        raise ValueError("No valid moves.")

    # 1) block-or-win, one row-major pass. The block test runs first for each
    # cell, so an earlier block beats a later win.
    for i in range(CELLS):
        if board[i] is not None:
            continue
        if completes_line(board, i, HUMAN):
            return Move(i), "block"
        if completes_line(board, i, COMPUTER):
            return Move(i), "win"

    # 2) center
    if board[CENTER] is None:
        return Move(CENTER), "center"

    # 3) random fallback
    return rng.choice(moves), "random"


def select_computer_move(board: Board, rng: Optional[random.Random] = None) -> Move:
    """
    Heuristic move for the computer (O):
      1) first empty cell (row-major) where X would win or O would win
      2) the center, if free
      3) a uniformly random empty cell

    Not perfect play: a block found at a lower index is taken even when a
    winning cell exists further along.
    """
    move, _ = _pick(board, rng if rng is not None else random.Random(DEFAULT_SEED))
    return move


@dataclass(slots=True)
class BlockOrWinAgent:
    name: str = "Computer"
    seed: Optional[int] = DEFAULT_SEED
    rng: random.Random = field(init=False)

    last_info: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def choose_move(self, state: GameState) -> Move:
        t0 = time.perf_counter()
        move, reason = _pick(state.board, self.rng)
        self.last_info = {
            "move": int(move),
            "reason": reason,
            "time_ms": max(1, int((time.perf_counter() - t0) * 1000)),
        }
        logger.debug("%s picked cell %d (%s)", self.name, move, reason)
        return move
