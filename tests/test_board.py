"""Tests for the Board class."""

import numpy as np
import pytest

from connectfour.game.board import Board, Cell
from connectfour.utils import Player


def test_board_initialization():
    board = Board()
    assert board.rows == 6
    assert board.cols == 7
    assert np.all(board.grid == Player.EMPTY.value)
    assert not board.winning.any()
    assert board.available_columns() == list(range(7))


def test_lowest_empty_row_fills_bottom_up():
    board = Board()
    assert board.lowest_empty_row(3) == 5
    board.place(5, 3, Player.HUMAN)
    assert board.lowest_empty_row(3) == 4
    board.place(4, 3, Player.COMPUTER)
    assert board.lowest_empty_row(3) == 3
    assert board.lowest_empty_row(2) == 5


def test_lowest_empty_row_full_column():
    board = Board()
    owner = Player.HUMAN
    for row in range(5, -1, -1):
        board.place(row, 0, owner)
        owner = owner.other()
    assert board.lowest_empty_row(0) is None
    assert board.is_column_full(0)
    assert 0 not in board.available_columns()


def test_place_rejects_occupied_cell():
    board = Board()
    board.place(5, 1, Player.HUMAN)
    with pytest.raises(ValueError):
        board.place(5, 1, Player.COMPUTER)
    assert board.owner(5, 1) == Player.HUMAN


def test_place_rejects_floating_disc():
    board = Board()
    with pytest.raises(ValueError):
        board.place(3, 2, Player.HUMAN)
    assert board.owner(3, 2) is None


def test_place_rejects_empty_owner():
    board = Board()
    with pytest.raises(ValueError):
        board.place(5, 0, Player.EMPTY)


@pytest.mark.parametrize("col", [-1, 7, 100])
def test_out_of_range_column_fails_fast(col):
    board = Board()
    with pytest.raises(IndexError):
        board.lowest_empty_row(col)
    with pytest.raises(IndexError):
        board.place(5, col, Player.HUMAN)


def test_gravity_holds_after_random_placements(rng):
    board = Board()
    owner = Player.HUMAN
    for _ in range(30):
        col = int(rng.choice(board.available_columns()))
        board.place(board.lowest_empty_row(col), col, owner)
        owner = owner.other()

    occupied = board.grid != Player.EMPTY.value
    for row in range(board.rows - 1):
        for col in range(board.cols):
            if occupied[row, col]:
                assert occupied[row + 1:, col].all()


def test_is_full_and_reset(make_board):
    board = make_board(
        "XO",
        "OX",
    )
    board.winning[0, 0] = True
    assert board.is_full()

    board.reset()
    assert not board.is_full()
    assert np.all(board.grid == Player.EMPTY.value)
    assert not board.winning.any()
    assert (board.rows, board.cols) == (2, 2)


def test_copy_is_independent():
    board = Board()
    board.place(5, 0, Player.HUMAN)
    clone = board.copy()
    clone.place(4, 0, Player.COMPUTER)
    clone.winning[5, 0] = True

    assert board.owner(4, 0) is None
    assert not board.is_winning(5, 0)
    assert clone.owner(5, 0) == Player.HUMAN


def test_tentative_rolls_back_owner_and_flags():
    board = Board()
    board.winning[5, 6] = True
    with board.tentative(5, 2, Player.COMPUTER):
        assert board.owner(5, 2) == Player.COMPUTER
        board.winning[5, 2] = True
        board.winning[5, 6] = False
    assert board.owner(5, 2) is None
    assert not board.is_winning(5, 2)
    assert board.is_winning(5, 6)


def test_tentative_restores_flags_in_place():
    board = Board()
    flags = board.winning
    with board.tentative(5, 3, Player.HUMAN):
        board.winning[5, 3] = True
    assert board.winning is flags
    assert not flags.any()

    flags[5, 0] = True
    assert board.is_winning(5, 0)


def test_tentative_rolls_back_on_error():
    board = Board()
    with pytest.raises(RuntimeError):
        with board.tentative(5, 4, Player.HUMAN):
            raise RuntimeError("boom")
    assert board.owner(5, 4) is None


def test_snapshot_reports_owner_and_winning():
    board = Board(2, 3)
    board.place(1, 1, Player.HUMAN)
    board.winning[1, 1] = True

    snapshot = board.snapshot()
    assert len(snapshot) == 2
    assert len(snapshot[0]) == 3
    assert snapshot[1][1] == Cell(1, 1, Player.HUMAN, True)
    assert snapshot[0][0] == Cell(0, 0, None, False)


def test_render_marks_discs():
    board = Board()
    board.place(5, 0, Player.HUMAN)
    board.place(5, 1, Player.COMPUTER)
    lines = board.render().splitlines()
    assert lines[-3] == "|X O          |"
    assert lines[-1] == "|0 1 2 3 4 5 6|"
