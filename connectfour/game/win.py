"""
win.py - Four-in-a-row detection for Connect Four

Only the four lines through the most recent disc are examined, so a
check costs O(rows + cols) rather than a scan of the whole board.
"""

from enum import Enum
from typing import List, Tuple

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.utils import CONNECT_N, Player


class Direction(Enum):
    """Lines through a cell, in the order they are checked."""
    ANTI_DIAGONAL = "anti-diagonal"  # constant row - col, top-left to bottom-right
    DIAGONAL = "diagonal"  # constant row + col, top-right to bottom-left
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def line_through(board: Board, row: int, col: int, direction: Direction) -> List[Tuple[int, int]]:
    """
    Positions on the line through (row, col), ordered by increasing row
    and then increasing column.
    """
    if direction == Direction.HORIZONTAL:
        return [(row, c) for c in range(board.cols)]
    if direction == Direction.VERTICAL:
        return [(r, col) for r in range(board.rows)]

    positions = []
    for r in range(board.rows):
        if direction == Direction.ANTI_DIAGONAL:
            c = r - (row - col)
        else:
            c = (row + col) - r
        if 0 <= c < board.cols:
            positions.append((r, c))
    return positions


def find_run(board: Board, positions: List[Tuple[int, int]], owner: Player) -> List[Tuple[int, int]]:
    """
    First run of CONNECT_N consecutive ``owner`` discs along ``positions``.

    Empty cells reset the count to zero and any change of owner starts a
    new run; the scan stops as soon as a run reaches CONNECT_N.

    Returns:
        The CONNECT_N positions of the run, or an empty list
    """
    count = 0
    last_owner = Player.EMPTY.value
    run: List[Tuple[int, int]] = []

    for r, c in positions:
        value = board.grid[r, c]
        if value == Player.EMPTY.value:
            count = 0
            run = []
        elif value == last_owner:
            count += 1
            run.append((r, c))
        else:
            count = 1
            run = [(r, c)]
        last_owner = value

        if count == CONNECT_N and value == owner.value:
            return run

    return []


def check_win(board: Board, row: int, col: int) -> bool:
    """
    Check whether the disc at (row, col) completes four in a row.

    The anti-diagonal, diagonal, horizontal and vertical lines are tried
    in that order. The first run found has its four cells flagged as
    winning on the board and ends the check.

    Returns:
        True if a line through the cell holds four of its owner's discs
    """
    owner = board.owner(row, col)
    if owner is None:
        return False

    for direction in Direction:
        run = find_run(board, line_through(board, row, col, direction), owner)
        if run:
            for r, c in run:
                board.winning[r, c] = True
            debug.debug(f"{owner.name} completes a {direction.value} line through "
                        f"({row}, {col}): {run}", "win")
            return True

    return False
