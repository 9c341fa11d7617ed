import pytest

from ttt_arcade.game_basics import (
    Cell,
    Move,
    apply_move,
    board_from_rows,
    check_draw,
    check_win,
    new_board,
)
from ttt_arcade.solver import SearchResult, best_move, minimax


@pytest.mark.parametrize(
    "rows, move, score",
    [
        ([[2, 2, 0], [0, 0, 0], [0, 0, 0]], Move(0, 2), 11),
        ([[2, 0, 0], [0, 2, 0], [0, 0, 0]], Move(2, 2), 11),
        ([[2, 0, 0], [0, 2, 1], [0, 0, 1]], Move(0, 2), 0),
    ],
)
def test_minimax_known_positions(rows, move, score):
    res = minimax(None, Cell.PLAYER, board_from_rows(rows), 0)
    assert res == SearchResult(move, score)


def test_computer_blocks_open_row():
    b = board_from_rows([[1, 1, 0], [0, 2, 0], [0, 0, 0]])
    res = minimax(None, Cell.PLAYER, b, 0)
    assert res.move == Move(0, 2)
    assert res.score == -12


def test_empty_board_search():
    res = minimax(None, Cell.PLAYER, new_board(), 0)
    assert res == SearchResult(Move(2, 0), 0)


def test_terminal_win_scores_include_depth():
    b = board_from_rows([[2, 2, 2], [1, 1, 0], [0, 0, 0]])
    assert minimax(Move(0, 2), Cell.COMPUTER, b, 3) == SearchResult(Move(0, 2), 13)
    b = board_from_rows([[1, 1, 1], [2, 2, 0], [0, 0, 0]])
    assert minimax(Move(0, 1), Cell.PLAYER, b, 3) == SearchResult(Move(0, 1), -13)


def test_terminal_draw_keeps_last_move():
    b = board_from_rows([[1, 2, 1], [1, 2, 2], [2, 1, 1]])
    assert minimax(Move(2, 2), Cell.PLAYER, b, 4) == SearchResult(Move(2, 2), 0)


def test_full_board_has_no_move():
    b = board_from_rows([[1, 2, 1], [1, 2, 2], [2, 1, 1]])
    assert best_move(b) is None


def test_minimax_rejects_empty_mover():
    with pytest.raises(ValueError):
        minimax(None, Cell.EMPTY, new_board(), 0)


def test_search_does_not_mutate_board():
    b = board_from_rows([[2, 0, 0], [0, 2, 1], [0, 0, 1]])
    snapshot = tuple(tuple(row) for row in b)
    minimax(None, Cell.PLAYER, b, 0)
    assert b == snapshot


@pytest.mark.parametrize("first", [Cell.PLAYER, Cell.COMPUTER])
def test_search_vs_search_is_draw(first):
    board = new_board()
    mover = first
    moves_made = 0
    while True:
        mv = best_move(board, mover)
        assert mv is not None
        board = apply_move(board, mv, mover)
        moves_made += 1
        assert not check_win(board, mv, mover)
        if check_draw(moves_made):
            break
        mover = mover.opponent()
    assert moves_made == 9
