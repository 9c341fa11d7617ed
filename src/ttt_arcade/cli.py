from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
from colorama import just_fix_windows_console

from .console import ConsoleDisplay, ConsoleInput
from .controller import TurnController
from .game_basics import Cell, count_moves, deserialize_board, find_winner, serialize_board
from .high_scores import HighScoreStore
from .solver import minimax


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe against the computer")
    p.add_argument("--play", "-p", action="store_true", help="Start a new game")
    p.add_argument("--high-scores", "-s", action="store_true", help="View high scores")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--seed", type=int, default=None, help="Seed for the coin flip and random computer moves")
    p.add_argument(
        "--scores-file",
        type=Path,
        default=None,
        help="High-score file (default: $TTT_HIGH_SCORES or ./high-scores.json)",
    )
    p.add_argument("--no-color", action="store_true", help="Disable colored output")
    p.add_argument(
        "--solve",
        metavar="BOARD",
        default=None,
        help="Show the computer's search move for a board (9 digits, 0=empty,1=player,2=computer)",
    )
    return p


def _solve(raw: str, display: ConsoleDisplay) -> None:
    try:
        board = deserialize_board(raw)
    except ValueError as exc:
        logging.error("%s", exc)
        return
    if find_winner(board) is not None:
        logging.error("Board already has a winner.")
        return
    res = minimax(None, Cell.PLAYER, board, 0)
    display.show_board(board)
    logging.info(
        "board=%s moves_made=%d move=%s score=%d",
        serialize_board(board),
        count_moves(board),
        res.move.human() if res.move is not None else None,
        res.score,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if ns.version:
        try:
            from importlib.metadata import version as _ver

            print(_ver("ttt-arcade"))
        except Exception:
            print("unknown")
        return 0

    if not (ns.play or ns.high_scores or ns.solve):
        parser.print_help()
        return 0

    just_fix_windows_console()
    display = ConsoleDisplay(color=sys.stdout.isatty() and not ns.no_color)
    store = HighScoreStore(ns.scores_file)

    if ns.solve:
        _solve(ns.solve, display)

    if ns.high_scores:
        display.show_high_scores(store.sorted_records())

    if ns.play:
        controller = TurnController(
            ConsoleInput(),
            display,
            store,
            rng=np.random.default_rng(ns.seed),
        )
        try:
            games = controller.run()
            logging.debug("played %d game(s)", len(games))
        except (KeyboardInterrupt, EOFError):
            print("\nGame interrupted.")
        print("Goodbye!")

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
