"""
Console collaborators: prompts for the player's input and text rendering.

Both take injectable ``input_fn``/``print_fn`` so they can be scripted in tests.
"""
from __future__ import annotations

import math
from typing import Callable, List, Optional, Sequence

from colorama import Fore, Style

from .controller import Outcome
from .game_basics import Board, Cell, Move
from .high_scores import NAME_LENGTH, ScoreRecord, format_table

AVATARS = {Cell.EMPTY: " ", Cell.PLAYER: "X", Cell.COMPUTER: "O"}
NAMES = {Cell.PLAYER: "Player", Cell.COMPUTER: "Computer"}
COLORS = {Cell.EMPTY: "", Cell.PLAYER: Fore.GREEN, Cell.COMPUTER: Fore.RED}


def to_zero_based(text: str) -> Optional[int]:
    """Parse a 1-based answer like ``"2"`` or ``"1.5"`` into a 0-based index."""
    try:
        return math.floor(float(text) - 1)
    except (ValueError, OverflowError):
        return None


def parse_yes_no(text: str) -> Optional[bool]:
    normalized = text.strip().lower()
    if normalized[:1] == "y":
        return True
    if normalized[:1] == "n":
        return False
    return None


class ConsoleInput:
    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        print_fn: Callable[[str], None] = print,
    ):
        self.input_fn = input_fn
        self.print_fn = print_fn

    def choose_move(self, legal: Sequence[Move]) -> Move:
        rows = {m.row for m in legal}
        while True:
            row = to_zero_based(self.input_fn("Enter Row: "))
            if row in rows:
                break
            self.print_fn("Invalid Row given. Try again.")
        while True:
            col = to_zero_based(self.input_fn("Enter Column: "))
            if col is not None and Move(row, col) in legal:
                return Move(row, col)
            self.print_fn("Invalid Row Column combination given. Try again.")

    def confirm(self, question: str) -> bool:
        while True:
            answer = parse_yes_no(self.input_fn(f"{question} "))
            if answer is not None:
                return answer
            self.print_fn("Invalid response!")

    def ask_name(self) -> str:
        while True:
            name = self.input_fn("Your 3 letter arcade name: ").strip().upper()
            if len(name) == NAME_LENGTH:
                return name
            self.print_fn("Invalid Name Given. Please provide only 3 letter/numbers/symbols.")


class ConsoleDisplay:
    def __init__(self, print_fn: Callable[[str], None] = print, color: bool = True):
        self.print_fn = print_fn
        self.color = color

    def _paint(self, text: str, *codes: str) -> str:
        if not self.color or not any(codes):
            return text
        return "".join(codes) + text + Style.RESET_ALL

    def render_board(self, board: Board) -> str:
        rule = self._paint("---+---+---", Fore.CYAN)
        bar = self._paint("|", Fore.CYAN)
        lines = []
        for i, row in enumerate(board):
            cells = [self._paint(AVATARS[c], COLORS[c]) for c in row]
            lines.append(" " + f" {bar} ".join(cells))
            if i < len(board) - 1:
                lines.append(rule)
        return "\n".join(lines)

    def show_board(self, board: Board, last_move: Optional[Move] = None, mover: Optional[Cell] = None) -> None:
        self.print_fn("")
        self.print_fn(self.render_board(board))
        self.print_fn("")
        if last_move is not None and mover is not None:
            where = self._paint(last_move.human(), Fore.MAGENTA)
            self.print_fn(f"{NAMES[mover]} placed {AVATARS[mover]} at position {where}")

    def announce_first(self, player: Cell) -> None:
        self.print_fn(f"{self._paint(NAMES[player], COLORS[player])} goes first!")

    def announce_turn(self, player: Cell) -> None:
        whose = self._paint(f"{NAMES[player]}'s", COLORS[player], Style.BRIGHT)
        self.print_fn(f"{whose} turn!")

    def announce_outcome(self, outcome: Outcome) -> None:
        if outcome == Outcome.PLAYER_WON:
            self.print_fn(self._paint("Player Wins!", Fore.GREEN))
        elif outcome == Outcome.COMPUTER_WON:
            self.print_fn(self._paint("Computer Wins!", Fore.RED))
        elif outcome == Outcome.DRAW:
            self.print_fn(self._paint("Game is a Draw.", Fore.MAGENTA))

    def show_score(self, score: int) -> None:
        self.print_fn(self._paint(f"You scored {score}", Fore.GREEN))

    def show_high_scores(self, records: List[ScoreRecord]) -> None:
        self.print_fn(format_table(records, header=lambda text: self._paint(text, Fore.CYAN)))
