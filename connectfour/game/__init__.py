"""
connectfour.game - Core game mechanics for Connect Four

Board state, four-in-a-row detection and turn resolution.
"""

from connectfour.game.board import Board, Cell
from connectfour.game.win import check_win
from connectfour.game.rules import GameState, MoveResult, new_game

__all__ = ['Board', 'Cell', 'check_win', 'GameState', 'MoveResult', 'new_game']
