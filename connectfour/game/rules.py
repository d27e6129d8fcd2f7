"""
rules.py - Turn resolution for Connect Four

GameState owns the board for one game, applies placements for whoever
has the turn, and moves through NOT_STARTED -> IN_PROGRESS -> WON/DRAWN.
"""

from typing import NamedTuple, Optional, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.game.win import check_win
from connectfour.utils import ROWS, COLS, Player, Phase


class MoveResult(NamedTuple):
    """Outcome of one attempted placement."""
    accepted: bool
    column: int
    row: Optional[int]
    outcome: Phase
    winner: Optional[Player] = None


class GameState:
    """
    A single game between the human and the computer.

    Args:
        rows: Number of board rows
        cols: Number of board columns
        rng: Source of randomness for the starting turn
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS,
                 rng: Optional[np.random.Generator] = None):
        self.board = Board(rows, cols)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.turn = Player.HUMAN
        self.phase = Phase.NOT_STARTED
        self.winner: Optional[Player] = None
        self.last_move: Optional[Tuple[int, int]] = None
        self.moves_made = 0

    def reset(self, first: Optional[Player] = None):
        """
        Start a new game on an empty board.

        Args:
            first: Player to move first; chosen uniformly at random if None
        """
        self.board.reset()
        if first is None:
            first = Player.HUMAN if self.rng.random() < 0.5 else Player.COMPUTER
        elif first == Player.EMPTY:
            raise ValueError("The first player must be HUMAN or COMPUTER")
        self.turn = first
        self.phase = Phase.IN_PROGRESS
        self.winner = None
        self.last_move = None
        self.moves_made = 0
        debug.info(f"New {self.board.rows}x{self.board.cols} game, {first.name} moves first", "game")

    @property
    def is_over(self) -> bool:
        return self.phase.is_terminal()

    def _rejected(self, column: int) -> MoveResult:
        return MoveResult(False, column, None, self.phase, self.winner)

    def attempt_move(self, column: int) -> MoveResult:
        """
        Drop a disc for the player whose turn it is.

        The move is rejected without any change when the game is not in
        progress or the column is full. A column outside the board raises
        IndexError.
        """
        row = self.board.lowest_empty_row(column)

        if self.phase != Phase.IN_PROGRESS:
            debug.debug(f"Rejected column {column}: game is {self.phase.name}", "game")
            return self._rejected(column)

        if row is None:
            debug.debug(f"Rejected column {column}: column is full", "game")
            return self._rejected(column)

        mover = self.turn
        self.board.place(row, column, mover)
        self.last_move = (row, column)
        self.moves_made += 1
        debug.debug(f"{mover.name} plays column {column} (row {row})", "game")

        if check_win(self.board, row, column):
            self.phase = Phase.WON
            self.winner = mover
            debug.info(f"{mover.name} wins after move at {self.last_move}", "game")
        elif self.board.is_full():
            self.phase = Phase.DRAWN
            debug.info("Game ends in a draw", "game")
        else:
            self.turn = mover.other()

        return MoveResult(True, column, row, self.phase, self.winner)

    def render(self) -> str:
        return self.board.render()


def new_game(rows: int = ROWS, cols: int = COLS,
             rng: Optional[np.random.Generator] = None,
             first: Optional[Player] = None) -> GameState:
    """Create a game that is ready for its first move."""
    state = GameState(rows, cols, rng)
    state.reset(first)
    return state
