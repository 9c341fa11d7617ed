"""
Exhaustive game-tree search (minimax) for the computer opponent.
Scoring policy:
- A computer win scores +(10 + depth), a player win -(10 + depth), a draw 0.
- Nodes reached by a player move keep the lowest child score, nodes reached
  by a computer move the highest. Ties keep the first child in move order.
- The chosen child's result travels up unchanged, move included.
Results are memoized per (last move, mover, board, depth); boards are
immutable tuples so they are safe cache keys.
"""
import logging
from functools import lru_cache
from typing import NamedTuple, Optional

from .game_basics import Board, Cell, Move, check_draw, check_win, apply_move, legal_moves


class SearchResult(NamedTuple):
    move: Optional[Move]
    score: int


@lru_cache(maxsize=None)
def _search(last_move: Optional[Move], just_moved: Cell, board: Board, depth: int) -> SearchResult:
    if last_move is not None and check_win(board, last_move, just_moved):
        if just_moved == Cell.PLAYER:
            return SearchResult(last_move, -10 - depth)
        return SearchResult(last_move, 10 + depth)

    moves = legal_moves(board)
    if check_draw(9 - len(moves)):
        return SearchResult(last_move, 0)

    to_move = just_moved.opponent()
    best: Optional[SearchResult] = None
    for mv in moves:
        child = _search(mv, to_move, apply_move(board, mv, to_move), depth + 1)
        if best is None:
            best = child
        elif just_moved == Cell.PLAYER and child.score < best.score:
            best = child
        elif just_moved == Cell.COMPUTER and child.score > best.score:
            best = child
    assert best is not None
    return best


def minimax(last_move: Optional[Move], just_moved: Cell, board: Board, depth: int = 0) -> SearchResult:
    """Search ``board`` after ``just_moved`` played ``last_move``.

    The computer's own decision is ``minimax(None, Cell.PLAYER, board, 0)``.
    """
    if just_moved == Cell.EMPTY:
        raise ValueError("just_moved must be PLAYER or COMPUTER")
    return _search(last_move, just_moved, board, depth)


def best_move(board: Board, player: Cell = Cell.COMPUTER) -> Optional[Move]:
    """Root search for ``player`` to move; None when the board is full."""
    res = minimax(None, player.opponent(), board, 0)
    logging.debug("search player=%s move=%s score=%d", player.name, res.move, res.score)
    return res.move
