"""
driver.py - Turn driver between a human and the computer

Front-ends feed the driver clicks, pointer movement and elapsed time.
The computer's column is chosen as soon as its turn starts, but the disc
is only dropped after ``delay`` seconds of ticks; human input is ignored
while that move is pending.
"""

from typing import Optional, Tuple

import numpy as np

from connectfour.ai.heuristic import compute_opponent_move
from connectfour.debug import debug
from connectfour.game.board import Cell
from connectfour.game.rules import GameState, MoveResult
from connectfour.interfaces.layout import Layout
from connectfour.utils import (ROWS, COLS, DELAY_COMP, MARGIN, Player, Phase,
                               COLOR_BACKGROUND, COLOR_COMPUTER, COLOR_COMPUTER_DARK,
                               COLOR_PLAYER, COLOR_PLAYER_DARK, COLOR_TIE, COLOR_TIE_DARK,
                               COLOR_WIN, TEXT_COMPUTER, TEXT_PLAYER, TEXT_TIE, TEXT_WIN)


def cell_color(cell: Cell) -> str:
    """Disc colour for a cell, the background colour when it is empty."""
    if cell.owner == Player.HUMAN:
        return COLOR_PLAYER
    if cell.owner == Player.COMPUTER:
        return COLOR_COMPUTER
    return COLOR_BACKGROUND


def ring_color(cell: Cell, highlight: Optional[Player] = None) -> Optional[str]:
    """
    Colour of the ring drawn around a cell, or None for no ring.

    Winning cells take precedence over a highlight.
    """
    if cell.is_winning:
        return COLOR_WIN
    if highlight == Player.HUMAN:
        return COLOR_PLAYER
    if highlight == Player.COMPUTER:
        return COLOR_COMPUTER
    return None


class TurnDriver:
    """
    Alternates between the human and the heuristic opponent.

    Args:
        rows: Number of board rows
        cols: Number of board columns
        delay: Seconds between choosing and dropping the computer's disc
        rng: Random source for the starting turn and the opponent
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS,
                 delay: float = DELAY_COMP,
                 rng: Optional[np.random.Generator] = None):
        if delay < 0:
            raise ValueError("delay must not be negative")
        self.rng = rng if rng is not None else np.random.default_rng()
        self.delay = delay
        self.game = GameState(rows, cols, rng=self.rng)
        self.pending_cell: Optional[Tuple[int, int]] = None
        self.hover_cell: Optional[Tuple[int, int]] = None
        self._time_left = 0.0
        self.layout: Optional[Layout] = None

    @property
    def board(self):
        return self.game.board

    @property
    def humans_turn(self) -> bool:
        return (self.game.phase == Phase.IN_PROGRESS
                and self.game.turn == Player.HUMAN
                and self.pending_cell is None)

    def new_game(self, first: Optional[Player] = None):
        self.game.reset(first)
        self.pending_cell = None
        self.hover_cell = None
        if self.game.turn == Player.COMPUTER:
            self._schedule_computer()

    def _schedule_computer(self):
        column = compute_opponent_move(self.board, Player.HUMAN, Player.COMPUTER, self.rng)
        self.pending_cell = (self.board.lowest_empty_row(column), column)
        self._time_left = self.delay
        debug.debug(f"Computer will play column {column} in {self.delay:.2f}s", "driver")

    def click(self, column: Optional[int]) -> Optional[MoveResult]:
        """
        Handle a click on ``column`` (None for a click outside the grid).

        A click after the game has ended starts a new one. Otherwise the
        human's disc is dropped if it is their turn.
        """
        if self.game.phase != Phase.IN_PROGRESS:
            self.new_game()
            return None

        if not self.humans_turn or column is None:
            return None

        result = self.game.attempt_move(column)
        if result.accepted:
            self.hover_cell = None
            if self.game.phase == Phase.IN_PROGRESS:
                self._schedule_computer()
        return result

    def hover(self, column: Optional[int]) -> Optional[Tuple[int, int]]:
        """Preview where the human's disc would land in ``column``."""
        self.hover_cell = None
        if column is not None and self.humans_turn:
            row = self.board.lowest_empty_row(column)
            if row is not None:
                self.hover_cell = (row, column)
        return self.hover_cell

    def tick(self, delta: float) -> Optional[MoveResult]:
        """
        Advance the clock by ``delta`` seconds.

        Returns:
            The computer's move if it was dropped during this tick
        """
        if self.pending_cell is None:
            return None

        self._time_left -= delta
        if self._time_left > 0:
            return None

        _, column = self.pending_cell
        self.pending_cell = None
        return self.game.attempt_move(column)

    def status_text(self) -> Optional[str]:
        """Result banner once the game is over, else None."""
        if self.game.phase == Phase.DRAWN:
            return TEXT_TIE
        if self.game.phase == Phase.WON:
            name = TEXT_PLAYER if self.game.winner == Player.HUMAN else TEXT_COMPUTER
            return f"{name} {TEXT_WIN}"
        return None

    def status_colors(self) -> Optional[Tuple[str, str]]:
        """(fill, outline) colours for the result banner, None while playing."""
        if self.game.phase == Phase.DRAWN:
            return COLOR_TIE, COLOR_TIE_DARK
        if self.game.phase == Phase.WON:
            if self.game.winner == Player.HUMAN:
                return COLOR_PLAYER, COLOR_PLAYER_DARK
            return COLOR_COMPUTER, COLOR_COMPUTER_DARK
        return None

    def highlight_at(self, row: int, col: int) -> Optional[Player]:
        """Whose preview ring, if any, is shown on (row, col)."""
        if self.pending_cell == (row, col):
            return Player.COMPUTER
        if self.hover_cell == (row, col):
            return Player.HUMAN
        return None

    def resize(self, width: float, height: float, margin_fraction: float = MARGIN) -> Layout:
        """Fit the grid to a new surface size; a resize starts a new game."""
        self.layout = Layout(width, height, self.board.rows, self.board.cols, margin_fraction)
        debug.debug(f"Surface resized to {width}x{height}, cell size {self.layout.cell_size:.1f}",
                    "driver")
        self.new_game()
        return self.layout

    def _column_at(self, x: float, y: float) -> Optional[int]:
        if self.layout is None:
            raise RuntimeError("resize() must be called before pointer input")
        return self.layout.column_at(x, y)

    def click_at(self, x: float, y: float) -> Optional[MoveResult]:
        """Handle a click at surface coordinates."""
        return self.click(self._column_at(x, y))

    def hover_at(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """Handle pointer movement at surface coordinates."""
        return self.hover(self._column_at(x, y))
