"""ttt_arcade package.

Terminal tic-tac-toe against a minimax opponent that sometimes blunders,
with a persistent high-score table.

Convenience imports are exposed for common workflows.
"""

from .controller import GameState, Outcome, TurnController
from .game_basics import Cell, Move, apply_move, check_draw, check_win, legal_moves, new_board
from .scoring import calculate_score
from .solver import SearchResult, minimax

__all__ = [
    "Cell",
    "Move",
    "new_board",
    "legal_moves",
    "apply_move",
    "check_win",
    "check_draw",
    "minimax",
    "SearchResult",
    "calculate_score",
    "GameState",
    "Outcome",
    "TurnController",
]
