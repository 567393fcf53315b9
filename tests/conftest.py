from __future__ import annotations

import pytest

from tictactoe import config
from tictactoe.core.board import Board


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch):
    # Tests compare plain text and must not sleep.
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)
    monkeypatch.setattr(config, "AI_THINK_DELAY_SEC", 0)


def board_from(layout: str) -> Board:
    """Build a board from a 9-char string of 'X', 'O' and '.'."""
    assert len(layout) == 9
    return Board(cells=[None if ch == "." else ch for ch in layout])


@pytest.fixture
def make_board():
    return board_from
