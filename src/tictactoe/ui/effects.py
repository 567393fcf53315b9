from __future__ import annotations
import sys
import time
from typing import Callable, Optional, TextIO

from tictactoe import config


def ai_thinking(
    label: str = "Computer is thinking",
    delay: Optional[float] = None,
    sleep: Optional[Callable[[float], None]] = None,
    out: Optional[TextIO] = None,
) -> None:
    """Show `label...` for a moment, then wipe the line before the computer plays."""
    if delay is None:
        delay = config.AI_THINK_DELAY_SEC
    if delay <= 0:
        return
    out = out or sys.stdout
    text = f"{label}..."
    out.write(text)
    out.flush()
    (sleep or time.sleep)(delay)
    out.write("\r" + " " * len(text) + "\r")
    out.flush()
