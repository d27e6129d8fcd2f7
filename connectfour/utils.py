"""
utils.py - Constants and shared enumerations for Connect Four

Game dimensions, timing and drawing parameters, the player and phase
enums, and the ASCII board renderer used by the terminal front-end.
"""

from enum import Enum, auto
from typing import Optional

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of discs in a row to win

# Seconds the computer "thinks" before its disc is dropped
DELAY_COMP = 0.5

# Drawing parameters
GRID_CIRCLE = 0.7  # disc diameter as a fraction of the cell size
MARGIN = 0.02  # margin as a fraction of the shortest surface dimension

COLOR_BACKGROUND = "white"
COLOR_COMPUTER = "red"
COLOR_COMPUTER_DARK = "darkred"
COLOR_FRAME = "dodgerblue"
COLOR_FRAME_BUTT = "royalblue"
COLOR_PLAYER = "yellow"
COLOR_PLAYER_DARK = "green"
COLOR_TIE = "darkgrey"
COLOR_TIE_DARK = "black"
COLOR_WIN = "black"

TEXT_COMPUTER = "Computer"
TEXT_PLAYER = "Player"
TEXT_TIE = "Draw"
TEXT_WIN = "Wins"


class Player(Enum):
    """Cell owners. EMPTY is the stored value of an unowned cell."""
    EMPTY = 0
    HUMAN = 1
    COMPUTER = 2

    def other(self) -> 'Player':
        """Get the opposing player."""
        if self == Player.HUMAN:
            return Player.COMPUTER
        elif self == Player.COMPUTER:
            return Player.HUMAN
        return Player.EMPTY

    @classmethod
    def from_value(cls, value) -> Optional['Player']:
        """Map a stored grid value to an owner, None for an empty cell."""
        player = cls(int(value))
        return None if player == cls.EMPTY else player

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.HUMAN:
            return "X"
        else:
            return "O"


class Phase(Enum):
    """Lifecycle of a single game."""
    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    WON = auto()
    DRAWN = auto()

    def is_terminal(self) -> bool:
        return self in (Phase.WON, Phase.DRAWN)


def render_board_ascii(grid: np.ndarray, winning: Optional[np.ndarray] = None) -> str:
    """
    Render an owner grid as ASCII art.

    Winning cells are drawn as ``#`` when a winning mask is supplied.

    Args:
        grid: 2D array of stored owner values, row 0 at the top
        winning: Optional boolean mask of winning cells

    Returns:
        Multi-line string with column numbers underneath
    """
    rows, cols = grid.shape
    border = "|" + "-" * (cols * 2 - 1) + "|"
    lines = [border]

    for row in range(rows):
        symbols = []
        for col in range(cols):
            if winning is not None and winning[row, col]:
                symbols.append("#")
            else:
                symbols.append(str(Player(int(grid[row, col]))))
        lines.append("|" + " ".join(symbols) + "|")

    lines.append(border)
    lines.append("|" + " ".join(str(i % 10) for i in range(cols)) + "|")
    return "\n".join(lines)
