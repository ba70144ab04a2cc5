"""
Game configuration for TicTacToe.
Marks, scores and timing used by the game logic and the drivers.
"""

from .game_state import Mark, Mode


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== PLAYERS ====================
    # X always moves first. Against the computer the human is X.
    HUMAN_MARK = Mark.X
    COMPUTER_MARK = Mark.O

    DEFAULT_MODE = Mode.HUMAN_VS_COMPUTER

    # ==================== MINIMAX SCORES ====================
    # Fixed scores, no depth term
    WIN_SCORE = 10       # Computer has a line
    LOSS_SCORE = -10     # Human has a line
    DRAW_SCORE = 0       # Board full, nobody won

    # ==================== TIMING ====================
    # Pause before the computer answers (milliseconds, UI only)
    COMPUTER_DELAY_MS = 300

    # ==================== DEBUG SETTINGS ====================
    VERBOSE = False
