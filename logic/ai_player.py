"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from functools import lru_cache
from typing import Optional, TYPE_CHECKING
from dataclasses import dataclass

from .config import GameConfig
from .errors import IllegalSelectorInvocation
from .game_state import BOARD_CELLS, Board, Mark, empty_cells
from .win_checker import has_won, is_full

if TYPE_CHECKING:
    from .session import GameSession


@dataclass(frozen=True)
class ScoredMove:
    """A candidate move and its minimax score (cell is None at a leaf)."""
    cell: Optional[int]
    score: int


def best_move(
    board,
    mark_to_move: Mark,
    computer_mark: Mark = GameConfig.COMPUTER_MARK
) -> ScoredMove:
    """
    Get the optimal move for `mark_to_move`, assuming both sides play
    perfectly from here on.

    Scores are from the computer's point of view: +10 for a computer
    win, -10 for a human win, 0 for a draw, however deep they occur.
    The computer maximizes, the human minimizes, and ties go to the
    lowest cell index.

    Args:
        board: Any sequence of 9 marks. It is copied, never modified.
        mark_to_move: Which mark is placed next.
        computer_mark: The maximizing side.

    Returns:
        ScoredMove with the chosen cell and its score.

    Raises:
        IllegalSelectorInvocation: The board is already won or full.
    """
    board = tuple(board)
    if len(board) != BOARD_CELLS:
        raise ValueError(f"Board must have {BOARD_CELLS} cells, got {len(board)}")
    if not mark_to_move.is_player or not computer_mark.is_player:
        raise ValueError("Marks must be X or O")

    if (has_won(board, computer_mark)
            or has_won(board, computer_mark.opposite())
            or is_full(board)):
        raise IllegalSelectorInvocation("No move to choose: the board is finished")

    return _minimax(board, mark_to_move, computer_mark)


@lru_cache(maxsize=None)
def _minimax(board: Board, mark_to_move: Mark, computer_mark: Mark) -> ScoredMove:
    human_mark = computer_mark.opposite()

    # Terminal states, checked in this order
    if has_won(board, human_mark):
        return ScoredMove(None, GameConfig.LOSS_SCORE)
    if has_won(board, computer_mark):
        return ScoredMove(None, GameConfig.WIN_SCORE)
    cells = empty_cells(board)
    if not cells:
        return ScoredMove(None, GameConfig.DRAW_SCORE)

    candidates = []
    next_mark = mark_to_move.opposite()
    for cell in cells:
        child = board[:cell] + (mark_to_move,) + board[cell + 1:]
        result = _minimax(child, next_mark, computer_mark)
        candidates.append(ScoredMove(cell, result.score))

    # max/min keep the first of equal scores
    if mark_to_move is computer_mark:
        return max(candidates, key=lambda move: move.score)
    return min(candidates, key=lambda move: move.score)


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(self, player: Mark = GameConfig.COMPUTER_MARK, verbose: Optional[bool] = None):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            verbose: Print each decision. Defaults to GameConfig.VERBOSE.
        """
        self.player = player
        self.verbose = GameConfig.VERBOSE if verbose is None else verbose

        # Last decision, for drivers that want to show it
        self.last_move: Optional[ScoredMove] = None

    def get_best_move(self, session: "GameSession") -> Optional[int]:
        """
        Get the best move for the current position.

        Args:
            session: Current game.

        Returns:
            Cell index of the best move, or None if it's not our move.
        """
        if session.status.is_terminal:
            return None

        if session.turn is not self.player:
            if self.verbose:
                print(f"Warning: It's not {self.player.value}'s turn!")
            return None

        move = best_move(session.board, self.player, self.player)
        self.last_move = move

        if self.verbose:
            print(f"AI knows {positions_evaluated()} positions. "
                  f"Best move: cell {move.cell + 1} (score: {move.score})")

        return move.cell


def positions_evaluated() -> int:
    """Number of distinct positions scored so far."""
    return _minimax.cache_info().currsize
