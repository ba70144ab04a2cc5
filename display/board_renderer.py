"""
Board renderer for TicTacToe.
Draws the board, the marks and the winning line with OpenCV.
"""

import cv2
import numpy as np
from typing import Optional, Sequence, Tuple

from logic.game_state import BOARD_CELLS, Mark
from .config import DisplayConfig


class BoardRenderer:
    """
    Turns a board into a BGR image, and clicks back into cells.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses defaults if None.
        """
        self.config = config or DisplayConfig()

    def render(
        self,
        board: Sequence[Mark],
        winning_line: Optional[Sequence[int]] = None
    ) -> np.ndarray:
        """
        Draw the board.

        Args:
            board: 9 marks, row-major.
            winning_line: Cells to strike through, if the game is won.

        Returns:
            BGR image of size BOARD_OUTPUT_SIZE x BOARD_OUTPUT_SIZE.
        """
        if len(board) != BOARD_CELLS:
            raise ValueError(f"Board must have {BOARD_CELLS} cells, got {len(board)}")

        cfg = self.config
        size = cfg.BOARD_OUTPUT_SIZE
        cell_size = cfg.CELL_OUTPUT_SIZE

        image = np.zeros((size, size, 3), dtype=np.uint8)
        image[:] = cfg.BACKGROUND_COLOR

        # Draw grid lines
        for i in range(1, cfg.BOARD_SIZE):
            # Vertical lines
            cv2.line(image, (i * cell_size, 0), (i * cell_size, size),
                     cfg.GRID_COLOR, cfg.GRID_THICKNESS)
            # Horizontal lines
            cv2.line(image, (0, i * cell_size), (size, i * cell_size),
                     cfg.GRID_COLOR, cfg.GRID_THICKNESS)

        for index, mark in enumerate(board):
            if mark is Mark.X:
                self._draw_x(image, index)
            elif mark is Mark.O:
                self._draw_o(image, index)
            elif cfg.SHOW_CELL_NUMBERS:
                self._draw_cell_number(image, index)

        if winning_line is not None:
            self._draw_win_line(image, winning_line)

        return image

    def _draw_x(self, image: np.ndarray, index: int):
        cx, cy = self.cell_center(index)
        half = self.config.CELL_OUTPUT_SIZE // 2 - self.config.MARK_MARGIN
        color = self.config.X_COLOR
        thickness = self.config.MARK_THICKNESS
        cv2.line(image, (cx - half, cy - half), (cx + half, cy + half),
                 color, thickness)
        cv2.line(image, (cx + half, cy - half), (cx - half, cy + half),
                 color, thickness)

    def _draw_o(self, image: np.ndarray, index: int):
        radius = self.config.CELL_OUTPUT_SIZE // 2 - self.config.MARK_MARGIN
        cv2.circle(image, self.cell_center(index), radius,
                   self.config.O_COLOR, self.config.MARK_THICKNESS)

    def _draw_cell_number(self, image: np.ndarray, index: int):
        row, col = divmod(index, self.config.BOARD_SIZE)
        cell_size = self.config.CELL_OUTPUT_SIZE
        cv2.putText(image, str(index + 1),
                    (col * cell_size + 8, row * cell_size + 24),
                    self.config.FONT, 0.6, self.config.LABEL_COLOR, 1)

    def _draw_win_line(self, image: np.ndarray, line: Sequence[int]):
        """Strike through the winning line, from its first cell to its last."""
        start = self.cell_center(line[0])
        end = self.cell_center(line[-1])
        cv2.line(image, start, end, self.config.WIN_LINE_COLOR,
                 self.config.WIN_LINE_THICKNESS)

    def cell_center(self, index: int) -> Tuple[int, int]:
        """
        Pixel center of a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            (x, y) in image coordinates.
        """
        if not 0 <= index < BOARD_CELLS:
            raise ValueError(f"Invalid cell {index}. Must be 0-{BOARD_CELLS - 1}.")
        row, col = divmod(index, self.config.BOARD_SIZE)
        cell_size = self.config.CELL_OUTPUT_SIZE
        return col * cell_size + cell_size // 2, row * cell_size + cell_size // 2

    def cell_at(self, x: int, y: int) -> Optional[int]:
        """
        Convert a point on the board image to a cell.

        Args:
            x: X coordinate in the image.
            y: Y coordinate in the image.

        Returns:
            Cell index, or None if the point is off the board.
        """
        size = self.config.BOARD_OUTPUT_SIZE
        if not (0 <= x < size and 0 <= y < size):
            return None

        cell_size = self.config.CELL_OUTPUT_SIZE
        col = min(int(x) // cell_size, self.config.BOARD_SIZE - 1)
        row = min(int(y) // cell_size, self.config.BOARD_SIZE - 1)
        return row * self.config.BOARD_SIZE + col

    def to_rgb(self, image: np.ndarray) -> np.ndarray:
        """Convert a rendered BGR image for display libraries that want RGB."""
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
