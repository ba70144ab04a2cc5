"""
Display module for TicTacToe.
Draws the board image shown by the window UI.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
