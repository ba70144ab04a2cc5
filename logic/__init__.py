"""
Logic module for TicTacToe.
Handles game state, rules, and the AI opponent.
"""

__version__ = "1.0.0"

from .game_state import GameStatus, Mark, Mode, MoveLogEntry, Outcome
from .errors import IllegalSelectorInvocation, InvalidMove
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import WINNING_LINES, find_winning_line
from .ai_player import AIPlayer, ScoredMove, best_move
from .session import GameSession, new_game
