"""Tests for four-in-a-row detection."""

import itertools

import numpy as np
import pytest

from connectfour.game.board import Board
from connectfour.game.win import Direction, check_win, line_through
from connectfour.utils import Player


def flagged(board):
    return set(board.winning_cells())


def test_empty_cell_is_not_a_win():
    board = Board()
    assert not check_win(board, 5, 3)
    assert not board.winning.any()


def test_horizontal_win(make_board):
    board = make_board(
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "OXXXXOO",
    )
    assert check_win(board, 5, 2)
    assert flagged(board) == {(5, 1), (5, 2), (5, 3), (5, 4)}


def test_vertical_win(make_board):
    board = make_board(
        ".......",
        ".......",
        "...O...",
        "...O...",
        "...O...",
        "..XOX..",
    )
    assert check_win(board, 2, 3)
    assert flagged(board) == {(2, 3), (3, 3), (4, 3), (5, 3)}


def test_anti_diagonal_win(make_board):
    board = make_board(
        ".......",
        ".......",
        "X......",
        "OX.....",
        "OOX....",
        "XOOX...",
    )
    assert check_win(board, 2, 0)
    assert flagged(board) == {(2, 0), (3, 1), (4, 2), (5, 3)}


def test_diagonal_win(make_board):
    board = make_board(
        ".......",
        ".......",
        "......O",
        ".....OX",
        "....OXX",
        "...OXXO",
    )
    assert check_win(board, 5, 3)
    assert flagged(board) == {(2, 6), (3, 5), (4, 4), (5, 3)}


def test_three_is_not_enough(make_board):
    board = make_board(
        ".......",
        ".......",
        ".......",
        ".......",
        "...O...",
        "XXX.OXX",
    )
    assert not check_win(board, 5, 2)
    assert not check_win(board, 5, 5)
    assert not board.winning.any()


def test_run_broken_by_other_owner(make_board):
    board = make_board(
        ".....",
        "XXOXX",
    )
    assert not check_win(board, 1, 4)
    assert not check_win(board, 1, 0)


def test_run_of_five_flags_first_four(make_board):
    board = make_board(
        ".......",
        "OXXXXXO",
    )
    assert check_win(board, 1, 5)
    assert flagged(board) == {(1, 1), (1, 2), (1, 3), (1, 4)}


def test_only_first_direction_is_flagged(make_board):
    # (2, 3) completes both a horizontal and a vertical line
    board = make_board(
        ".......",
        ".......",
        "OOOO...",
        "...OX..",
        "...OX..",
        "...OXX.",
    )
    assert check_win(board, 2, 3)
    assert flagged(board) == {(2, 0), (2, 1), (2, 2), (2, 3)}


def test_only_placed_owner_counts(make_board):
    board = make_board(
        ".......",
        "XXXXO..",
    )
    assert not check_win(board, 1, 4)
    assert not board.winning.any()


def test_check_win_is_idempotent(make_board):
    board = make_board(
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        ".XXXX..",
    )
    first = check_win(board, 5, 4)
    first_flags = board.winning.copy()
    second = check_win(board, 5, 4)
    assert first and second
    assert np.array_equal(first_flags, board.winning)


@pytest.mark.parametrize("direction,expected", [
    (Direction.HORIZONTAL, [(3, c) for c in range(7)]),
    (Direction.VERTICAL, [(r, 2) for r in range(6)]),
    (Direction.ANTI_DIAGONAL, [(1, 0), (2, 1), (3, 2), (4, 3), (5, 4)]),
    (Direction.DIAGONAL, [(0, 5), (1, 4), (2, 3), (3, 2), (4, 1), (5, 0)]),
])
def test_line_through(direction, expected):
    board = Board()
    line = line_through(board, 3, 2, direction)
    assert line == expected
    assert (3, 2) in line


def _has_run_through(board, row, col):
    """Reference check: any four-cell window of the owner on a line through the cell."""
    owner = board.grid[row, col]
    if owner == Player.EMPTY.value:
        return False
    for direction in Direction:
        values = [board.grid[r, c] for r, c in line_through(board, row, col, direction)]
        for start in range(len(values) - 3):
            if all(v == owner for v in values[start:start + 4]):
                return True
    return False


def test_check_win_matches_reference_on_random_boards():
    rng = np.random.default_rng(7)
    for _ in range(200):
        board = Board()
        owner = Player.HUMAN
        for _ in range(int(rng.integers(1, 30))):
            col = int(rng.choice(board.available_columns()))
            board.place(board.lowest_empty_row(col), col, owner)
            owner = owner.other()

        for row, col in itertools.product(range(board.rows), range(board.cols)):
            board.clear_winning()
            expected = _has_run_through(board, row, col)
            assert check_win(board, row, col) == expected
            if expected:
                cells = board.winning_cells()
                assert len(cells) == 4
                assert all(board.grid[r, c] == board.grid[row, col] for r, c in cells)
            else:
                assert not board.winning.any()
