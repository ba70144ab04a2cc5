"""
Display configuration for TicTacToe.
All the settings for drawing the board image.
"""

import cv2


class DisplayConfig:
    """
    Configuration class for board drawing.
    Colors are BGR, as OpenCV expects.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Output size for the board image (pixels)
    BOARD_OUTPUT_SIZE = 360
    CELL_OUTPUT_SIZE = BOARD_OUTPUT_SIZE // BOARD_SIZE  # 120 pixels per cell

    # ==================== COLORS ====================
    BACKGROUND_COLOR = (62, 33, 22)      # Dark navy
    GRID_COLOR = (200, 200, 200)
    X_COLOR = (113, 113, 248)            # Red
    O_COLOR = (129, 185, 16)             # Green
    WIN_LINE_COLOR = (0, 215, 255)       # Gold
    LABEL_COLOR = (100, 100, 100)

    # ==================== LINES ====================
    GRID_THICKNESS = 3
    MARK_THICKNESS = 8
    WIN_LINE_THICKNESS = 10

    # Gap between a mark and its cell border
    MARK_MARGIN = CELL_OUTPUT_SIZE // 5

    # Small cell numbers (1-9) in empty cells
    SHOW_CELL_NUMBERS = True
    FONT = cv2.FONT_HERSHEY_SIMPLEX

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
