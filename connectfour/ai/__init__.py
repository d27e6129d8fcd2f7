"""
connectfour.ai - Computer opponent for Connect Four
"""

from connectfour.ai.heuristic import (Tier, HeuristicPlayer, classify_column,
                                      choose_column, compute_opponent_move)

__all__ = ['Tier', 'HeuristicPlayer', 'classify_column', 'choose_column',
           'compute_opponent_move']
