"""Score for a player win: fewer moves and a shorter game score higher."""
import math

MOVE_POINTS = 100
TIME_POINTS = 20000
WIN_BONUS = 1000


def calculate_score(moves_made: int, elapsed_seconds: float) -> int:
    # Games decided within the first second count as one second long.
    elapsed = max(elapsed_seconds, 1)
    raw = (9 - moves_made) * MOVE_POINTS + TIME_POINTS / elapsed + WIN_BONUS
    # Half-up rounding, not Python's round-half-even.
    return int(math.floor(raw + 0.5))
