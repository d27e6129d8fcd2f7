"""
board.py - Board state for Connect Four

The Board owns the grid of cell owners and the per-cell winning flags.
Row 0 is the top row; discs fall towards the highest row index.
"""

from contextlib import contextmanager
from typing import Iterator, List, NamedTuple, Optional, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.utils import ROWS, COLS, Player, render_board_ascii


class Cell(NamedTuple):
    """Read-only view of one grid position."""
    row: int
    col: int
    owner: Optional[Player]
    is_winning: bool


class Board:
    """
    Grid of cells with gravity.

    Ownership changes only through ``place`` (and the ``tentative``
    context manager built on it); a cell may be occupied only when every
    cell below it in the same column is occupied.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        if rows < 1 or cols < 1:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.grid = np.zeros((rows, cols), dtype=np.int8)
        self.winning = np.zeros((rows, cols), dtype=bool)

    def reset(self):
        """Clear every owner and winning flag."""
        debug.debug("Resetting board", "board")
        self.grid.fill(Player.EMPTY.value)
        self.winning.fill(False)

    def copy(self) -> 'Board':
        """Independent copy with the same owners and flags."""
        debug.trace("Creating board copy", "board")
        new_board = Board(self.rows, self.cols)
        new_board.grid = self.grid.copy()
        new_board.winning = self.winning.copy()
        return new_board

    def _check_column(self, col: int):
        if not 0 <= col < self.cols:
            raise IndexError(f"Column {col} out of range 0..{self.cols - 1}")

    def _check_position(self, row: int, col: int):
        self._check_column(col)
        if not 0 <= row < self.rows:
            raise IndexError(f"Row {row} out of range 0..{self.rows - 1}")

    def owner(self, row: int, col: int) -> Optional[Player]:
        self._check_position(row, col)
        return Player.from_value(self.grid[row, col])

    def is_winning(self, row: int, col: int) -> bool:
        self._check_position(row, col)
        return bool(self.winning[row, col])

    def lowest_empty_row(self, col: int) -> Optional[int]:
        """
        Find where a disc dropped into ``col`` would land.

        Returns:
            The row index, or None when the column is full
        """
        self._check_column(col)
        for row in range(self.rows - 1, -1, -1):
            if self.grid[row, col] == Player.EMPTY.value:
                return row
        return None

    def is_column_full(self, col: int) -> bool:
        return self.lowest_empty_row(col) is None

    def available_columns(self) -> List[int]:
        """Columns that can still take a disc, left to right."""
        return [col for col in range(self.cols)
                if self.grid[0, col] == Player.EMPTY.value]

    def is_full(self) -> bool:
        return bool(np.all(self.grid != Player.EMPTY.value))

    def place(self, row: int, col: int, owner: Player):
        """
        Give the cell at (row, col) to ``owner``.

        Raises:
            IndexError: position outside the board
            ValueError: the cell is taken, not supported from below,
                or ``owner`` is not a player
        """
        self._check_position(row, col)
        if owner == Player.EMPTY:
            raise ValueError("Cannot place an empty owner")
        if self.grid[row, col] != Player.EMPTY.value:
            raise ValueError(f"Cell ({row}, {col}) is already owned")
        if row < self.rows - 1 and self.grid[row + 1, col] == Player.EMPTY.value:
            raise ValueError(f"Cell ({row}, {col}) has no disc below it")

        debug.trace(f"Placing {owner.name} at ({row}, {col})", "board")
        self.grid[row, col] = owner.value

    @contextmanager
    def tentative(self, row: int, col: int, owner: Player) -> Iterator['Board']:
        """
        Place a disc for the duration of the block.

        On exit the cell is emptied again and the winning flags are put
        back to what they were on entry, whether or not the block raised.
        """
        flags = self.winning.copy()
        self.place(row, col, owner)
        try:
            yield self
        finally:
            self.grid[row, col] = Player.EMPTY.value
            np.copyto(self.winning, flags)

    def clear_winning(self):
        self.winning.fill(False)

    def winning_cells(self) -> List[Tuple[int, int]]:
        """Flagged positions in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.winning)]

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Read-only copy of every cell, row by row, for renderers."""
        return tuple(
            tuple(Cell(row, col,
                       Player.from_value(self.grid[row, col]),
                       bool(self.winning[row, col]))
                  for col in range(self.cols))
            for row in range(self.rows)
        )

    def get_state(self) -> np.ndarray:
        """Copy of the owner grid as stored values."""
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid, self.winning)

    def __str__(self) -> str:
        return self.render()
