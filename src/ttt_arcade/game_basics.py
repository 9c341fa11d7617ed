"""
Game basics: board representation, rules, win/draw checks, serialization.
Notes:
- A board is a 3x3 tuple of tuples of Cell, row-major. Boards are values:
  every rule returns a new tuple and never mutates its input.
- Moves are enumerated column by column (columns outer, rows inner). The
  search breaks ties by taking the first move in that order.
"""
from enum import IntEnum
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

SIZE = 3
CELLS = SIZE * SIZE


class Cell(IntEnum):
    EMPTY = 0
    PLAYER = 1
    COMPUTER = 2

    def opponent(self) -> "Cell":
        if self == Cell.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Cell.COMPUTER if self == Cell.PLAYER else Cell.PLAYER


class Move(NamedTuple):
    row: int
    col: int

    def human(self) -> str:
        """1-based (row, col) label used in console messages."""
        return f"({self.row + 1}, {self.col + 1})"


Board = Tuple[Tuple[Cell, ...], ...]


def new_board() -> Board:
    return tuple(tuple(Cell.EMPTY for _ in range(SIZE)) for _ in range(SIZE))


def board_from_rows(rows: Iterable[Iterable[int]]) -> Board:
    board = tuple(tuple(Cell(v) for v in row) for row in rows)
    if len(board) != SIZE or any(len(row) != SIZE for row in board):
        raise ValueError("board must be 3x3")
    return board


def serialize_board(board: Board) -> str:
    return ''.join(str(int(cell)) for row in board for cell in row)


def deserialize_board(board_str: str) -> Board:
    raw = board_str.strip()
    if len(raw) != CELLS or any(c not in "012" for c in raw):
        raise ValueError("Invalid board string. Must be 9 chars of 0/1/2.")
    cells = [int(c) for c in raw]
    return board_from_rows(cells[i:i + SIZE] for i in range(0, CELLS, SIZE))


def count_moves(board: Board) -> int:
    return sum(1 for row in board for cell in row if cell != Cell.EMPTY)


def legal_moves(board: Board) -> List[Move]:
    return [
        Move(row, col)
        for col in range(SIZE)
        for row in range(SIZE)
        if board[row][col] == Cell.EMPTY
    ]


def apply_move(board: Board, move: Move, player: Cell) -> Board:
    """Place ``player`` at ``move``. An occupied target leaves the board as is."""
    if board[move.row][move.col] != Cell.EMPTY:
        return board
    rows = [list(row) for row in board]
    rows[move.row][move.col] = player
    return tuple(tuple(row) for row in rows)


def _line_owned(cells: Sequence[Cell], player: Cell) -> bool:
    return all(c == player for c in cells)


def check_win(board: Board, last_move: Move, player: Cell) -> bool:
    """True if ``player`` owns a full line through ``last_move``.

    Only lines through the last move are inspected: a move can complete at
    most the lines it sits on.
    """
    row, col = last_move
    if _line_owned([board[i][col] for i in range(SIZE)], player):
        return True
    if _line_owned(board[row], player):
        return True
    if row == col and _line_owned([board[i][i] for i in range(SIZE)], player):
        return True
    if row + col == SIZE - 1 and _line_owned(
        [board[i][SIZE - 1 - i] for i in range(SIZE)], player
    ):
        return True
    return False


def find_winner(board: Board) -> Optional[Cell]:
    """Full-board scan for a completed line, for boards with no move history."""
    for row in range(SIZE):
        for col in range(SIZE):
            cell = board[row][col]
            if cell != Cell.EMPTY and check_win(board, Move(row, col), cell):
                return cell
    return None


def check_draw(moves_made: int) -> bool:
    # Does not look at wins; check_win must run first.
    return moves_made == CELLS
