"""
Win checker for TicTacToe.
Finds completed lines and full boards.
"""

from typing import Optional, Tuple

from .game_state import GameStatus, Line, Mark


# All possible winning lines, in the order they are checked
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def find_winning_line(board, mark: Mark) -> Optional[Line]:
    """
    Get the first line fully held by a mark.

    Args:
        board: Any sequence of 9 marks.
        mark: The player mark to look for.

    Returns:
        The winning line, or None.
    """
    if not mark.is_player:
        raise ValueError("Only player marks can hold a line")

    for line in WINNING_LINES:
        a, b, c = line
        if board[a] is mark and board[b] is mark and board[c] is mark:
            return line
    return None


def has_won(board, mark: Mark) -> bool:
    return find_winning_line(board, mark) is not None


def is_full(board) -> bool:
    return all(cell is not Mark.EMPTY for cell in board)


def evaluate(board, last_mark: Mark) -> GameStatus:
    """
    Work out the status after `last_mark` has just moved.

    A win is checked before a full board, so a move that fills the last
    cell and completes a line is a win.
    """
    line = find_winning_line(board, last_mark)
    if line is not None:
        return GameStatus.won(last_mark, line)
    if is_full(board):
        return GameStatus.draw()
    return GameStatus.in_progress()
