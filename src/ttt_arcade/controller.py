"""
Turn controller: drives one game (and the replay loop) from first move to
win or draw.

Game flow:
1. A coin flip picks who moves first.
2. The computer plays either a random legal move or its minimax move (50/50).
3. The player's move comes from the input collaborator, already validated.
4. After every move the board is shown, then win and draw are checked.
5. A player win is scored and may be saved; then a replay is offered.

State is threaded explicitly: ``step`` takes a GameState and returns the next
one. Nothing is kept between games except the collaborators.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

import numpy as np

from .game_basics import (
    Board,
    Cell,
    Move,
    apply_move,
    check_draw,
    check_win,
    legal_moves,
    new_board,
)
from .high_scores import ScoreRecord
from .scoring import calculate_score
from .solver import minimax


class Outcome(IntEnum):
    IN_PROGRESS = 0
    PLAYER_WON = 1
    COMPUTER_WON = 2
    DRAW = 3

    @classmethod
    def won_by(cls, player: Cell) -> "Outcome":
        return cls.PLAYER_WON if player == Cell.PLAYER else cls.COMPUTER_WON

    @property
    def is_terminal(self) -> bool:
        return self != Outcome.IN_PROGRESS


@dataclass(frozen=True)
class GameState:
    board: Board
    turn_owner: Cell
    moves_made: int
    start_time: int


class MoveInput(Protocol):
    def choose_move(self, legal: Sequence[Move]) -> Move: ...

    def confirm(self, question: str) -> bool: ...

    def ask_name(self) -> str: ...


class Display(Protocol):
    def show_board(self, board: Board, last_move: Optional[Move] = None, mover: Optional[Cell] = None) -> None: ...

    def announce_first(self, player: Cell) -> None: ...

    def announce_turn(self, player: Cell) -> None: ...

    def announce_outcome(self, outcome: Outcome) -> None: ...

    def show_score(self, score: int) -> None: ...

    def show_high_scores(self, records: List[ScoreRecord]) -> None: ...


class ScoreStore(Protocol):
    def append(self, record: ScoreRecord) -> bool: ...

    def sorted_records(self) -> List[ScoreRecord]: ...


class TurnController:
    """
    Runs games between the player and the computer.

    Args:
        move_input: Supplies the player's moves and yes/no answers.
        display: Renders boards and announcements.
        store: Receives saved high scores.
        rng: numpy Generator for the coin flip and the computer's random moves.
        clock: Returns the current time in seconds.
    """

    MISTAKE_RATE = 0.5

    def __init__(
        self,
        move_input: MoveInput,
        display: Display,
        store: ScoreStore,
        rng: Optional[np.random.Generator] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.move_input = move_input
        self.display = display
        self.store = store
        self.rng = rng if rng is not None else np.random.default_rng()
        self.clock = clock

    def new_game(self) -> GameState:
        first = Cell.PLAYER if self.rng.integers(0, 2) == 0 else Cell.COMPUTER
        return GameState(
            board=new_board(),
            turn_owner=first,
            moves_made=0,
            start_time=int(self.clock()),
        )

    def computer_move(self, board: Board) -> Move:
        moves = legal_moves(board)
        if self.rng.random() < self.MISTAKE_RATE:
            move = moves[int(self.rng.integers(0, len(moves)))]
            logging.debug("computer plays random move %s", move)
            return move
        res = minimax(None, Cell.PLAYER, board, 0)
        logging.debug("computer plays minimax move %s (score %d)", res.move, res.score)
        return res.move

    def step(self, state: GameState) -> Tuple[GameState, Outcome]:
        """Play one move for ``state.turn_owner`` and report where that leaves the game."""
        legal = legal_moves(state.board)
        if not legal:
            raise RuntimeError("no legal moves left in a game that has not ended")

        mover = state.turn_owner
        if mover == Cell.COMPUTER:
            move = self.computer_move(state.board)
        else:
            move = self.move_input.choose_move(legal)

        state = replace(
            state,
            board=apply_move(state.board, move, mover),
            moves_made=state.moves_made + 1,
        )
        self.display.show_board(state.board, move, mover)

        if check_win(state.board, move, mover):
            return state, Outcome.won_by(mover)
        if check_draw(state.moves_made):
            return state, Outcome.DRAW

        state = replace(state, turn_owner=mover.opponent())
        self.display.announce_turn(state.turn_owner)
        return state, Outcome.IN_PROGRESS

    def play_game(self) -> Tuple[GameState, Outcome]:
        state = self.new_game()
        self.display.show_board(state.board)
        self.display.announce_first(state.turn_owner)

        outcome = Outcome.IN_PROGRESS
        while not outcome.is_terminal:
            state, outcome = self.step(state)

        logging.debug("game over outcome=%s moves=%d", outcome.name, state.moves_made)
        self.display.announce_outcome(outcome)
        return state, outcome

    def finish(self, state: GameState, outcome: Outcome) -> Optional[int]:
        """Score a player win and offer to save it. Returns the score, if any."""
        if outcome != Outcome.PLAYER_WON:
            return None
        elapsed = int(self.clock()) - state.start_time
        score = calculate_score(state.moves_made, elapsed)
        self.display.show_score(score)
        if self.move_input.confirm("Save Score (Y/N)?"):
            name = self.move_input.ask_name()
            if self.store.append(ScoreRecord(name=name, score=score)):
                self.display.show_high_scores(self.store.sorted_records())
        return score

    def run(self) -> List[Outcome]:
        """Play games until the player declines a replay."""
        outcomes: List[Outcome] = []
        while True:
            state, outcome = self.play_game()
            outcomes.append(outcome)
            self.finish(state, outcome)
            if not self.move_input.confirm("Play Again (Y/N)?"):
                return outcomes
