from __future__ import annotations

import argparse
import logging
import sys

from tictactoe import config
from tictactoe.ai.block_or_win_agent import BlockOrWinAgent
from tictactoe.game.controller import run_game


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tictactoe",
        description="Play tic-tac-toe against the computer. You are X and move first.",
    )
    ap.add_argument("--seed", type=int, default=config.DEFAULT_SEED,
                    help="Seed for the computer's random moves (default: %(default)s).")
    ap.add_argument("--no-color", action="store_true", help="Plain text board, no ANSI colors.")
    ap.add_argument("--clear", action="store_true", help="Clear the screen before each board.")
    ap.add_argument("--no-delay", action="store_true", help="Skip the computer 'thinking' pause.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr.")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config.USE_COLOR = config.USE_COLOR and not args.no_color and sys.stdout.isatty()
    config.CLEAR_SCREEN = args.clear

    try:
        run_game(BlockOrWinAgent(seed=args.seed), show_thinking=not args.no_delay)
    except (EOFError, KeyboardInterrupt):
        print("\nInput closed, leaving the game.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
