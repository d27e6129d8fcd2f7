"""
connectfour - Connect Four against a heuristic computer opponent

This package provides the board and win detection, turn resolution,
the tiered heuristic opponent, and terminal and Gymnasium front-ends.
"""

# Version number
__version__ = '0.1.0'
