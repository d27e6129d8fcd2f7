"""Shared fixtures for the Connect Four tests."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add the project root to the path so the package imports without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

from connectfour.game.board import Board  # noqa: E402
from connectfour.utils import Player  # noqa: E402

SYMBOLS = {'.': Player.EMPTY, 'X': Player.HUMAN, 'O': Player.COMPUTER}


def board_from_rows(*rows: str) -> Board:
    """Build a board from row strings, top row first ('.', 'X' human, 'O' computer)."""
    board = Board(len(rows), len(rows[0]))
    board.grid = np.array([[SYMBOLS[ch].value for ch in row] for row in rows], dtype=np.int8)
    return board


@pytest.fixture
def make_board():
    return board_from_rows


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
