"""
connectfour.interfaces - Front-ends for Connect Four

The turn driver, surface layout, and the command-line interface.
"""

# Don't import anything here to avoid circular imports
__all__ = []
