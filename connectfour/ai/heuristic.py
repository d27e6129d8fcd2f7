"""
heuristic.py - Rule based computer opponent for Connect Four

Every open column is sorted into one of four tiers and the move is drawn
at random from the best non-empty tier:

1. WIN            - the computer connects four by playing here
2. BLOCK          - the human would connect four here next turn
3. NEUTRAL        - nothing immediate either way
4. SELF_DEFEATING - playing here lets the human win on the cell above

All hypothetical discs go on a private copy of the board, so the board
passed in (owners and winning flags) is never touched.
"""

from enum import IntEnum
from typing import Dict, List, Optional

import numpy as np

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.game.win import check_win
from connectfour.utils import Player


class Tier(IntEnum):
    """Move priority, lower value is preferred."""
    WIN = 1
    BLOCK = 2
    NEUTRAL = 3
    SELF_DEFEATING = 4


def classify_column(board: Board, col: int, opponent: Player, me: Player) -> Optional[Tier]:
    """
    Tier of dropping a disc for ``me`` into ``col``.

    ``board`` is modified while the column is examined and restored
    before returning; use a copy if that matters to the caller.

    Returns:
        The tier, or None if the column is full
    """
    row = board.lowest_empty_row(col)
    if row is None:
        return None

    with board.tentative(row, col, me):
        if check_win(board, row, col):
            return Tier.WIN

    with board.tentative(row, col, opponent):
        if check_win(board, row, col):
            return Tier.BLOCK

    if row == 0:
        return Tier.NEUTRAL

    with board.tentative(row, col, me):
        with board.tentative(row - 1, col, opponent):
            if check_win(board, row - 1, col):
                return Tier.SELF_DEFEATING

    return Tier.NEUTRAL


def rank_columns(board: Board, opponent: Player, me: Player) -> Dict[Tier, List[int]]:
    """Group every open column by tier, evaluated on a copy of ``board``."""
    scratch = board.copy()
    scratch.clear_winning()

    tiers: Dict[Tier, List[int]] = {tier: [] for tier in Tier}
    for col in range(scratch.cols):
        tier = classify_column(scratch, col, opponent, me)
        if tier is not None:
            tiers[tier].append(col)
            debug.trace(f"Column {col}: {tier.name}", "ai")
    return tiers


def choose_column(board: Board, opponent: Player, me: Player,
                  rng: np.random.Generator) -> int:
    """
    Pick the computer's column.

    Raises:
        ValueError: every column is full
    """
    debug.start_timer("heuristic")
    tiers = rank_columns(board, opponent, me)
    debug.end_timer("heuristic", "ai")

    for tier in Tier:
        candidates = tiers[tier]
        if candidates:
            column = int(rng.choice(candidates))
            debug.debug(f"{me.name} picks column {column} ({tier.name}) from {candidates}", "ai")
            return column

    raise ValueError("No open column to play")


def compute_opponent_move(board: Board, opponent: Player, me: Player,
                          rng: Optional[np.random.Generator] = None) -> int:
    """Column for ``me`` to play against ``opponent``; ``board`` is left untouched."""
    if rng is None:
        rng = np.random.default_rng()
    return choose_column(board, opponent, me, rng)


class HeuristicPlayer:
    """
    The tiered heuristic as a player object.

    Args:
        seed: Seed for tie-breaking between columns of the same tier
        rng: Generator to use instead of seeding a new one
    """

    def __init__(self, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def get_move(self, board: Board, me: Player = Player.COMPUTER) -> int:
        return choose_column(board, me.other(), me, self.rng)
