from __future__ import annotations

import argparse

from connect4 import config
from connect4.ai.random_agent import RandomAgent
from connect4.game.controller import run_game
from connect4.ui.human import HumanAgent


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connect4", description="Play Connect 4 against the computer.")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the computer's moves (default: random)")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between moves")
    ap.add_argument("--no-thinking", action="store_true", help="Skip the 'computer is thinking' pause")
    ap.add_argument("--delay", type=float, default=None, help="Thinking pause in seconds")
    return ap


def apply_ui_options(args: argparse.Namespace) -> None:
    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False
    if args.delay is not None:
        config.AI_THINK_DELAY_SEC = args.delay


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    apply_ui_options(args)

    human = HumanAgent()
    computer = RandomAgent(seed=args.seed)
    run_game(human, computer, show_thinking=not args.no_thinking)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
