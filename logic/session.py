"""
Game session for TicTacToe.
Owns the board, the turn order and the move log for one game.
"""

from typing import List, Optional, Tuple

from .ai_player import ScoredMove, best_move
from .config import GameConfig
from .errors import InvalidMove
from .game_state import (
    Board,
    GameStatus,
    Mark,
    Mode,
    MoveLogEntry,
    empty_board,
    format_board,
)
from .move_validator import MoveValidator
from .win_checker import evaluate


class GameSession:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 9-cell board
    - Whose turn it is
    - Move log
    - Game status (in progress, won, draw)

    Every move goes through the same transition: validate, place the
    mark, log it, then decide win / draw / next turn. A rejected move
    raises InvalidMove before anything is touched.
    """

    def __init__(self, mode: Mode = GameConfig.DEFAULT_MODE):
        self.validator = MoveValidator()
        self.human_mark = GameConfig.HUMAN_MARK
        self.computer_mark = GameConfig.COMPUTER_MARK
        self.reset(mode)

    def reset(self, mode: Optional[Mode] = None) -> None:
        """
        Start over with an empty board.

        Args:
            mode: Mode for the new game. Keeps the current one if None.
        """
        if mode is not None:
            self._mode = Mode(mode)
        self._board: List[Mark] = empty_board()
        self._turn = Mark.X
        self._status = GameStatus.in_progress()
        self._moves: List[MoveLogEntry] = []

    # ==================== OBSERVERS ====================

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def board(self) -> Board:
        return tuple(self._board)

    @property
    def turn(self) -> Mark:
        return self._turn

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def move_log(self) -> Tuple[MoveLogEntry, ...]:
        return tuple(self._moves)

    @property
    def is_over(self) -> bool:
        return self._status.is_terminal

    @property
    def computer_move_pending(self) -> bool:
        """True while the game is waiting on the computer."""
        return (self._mode is Mode.HUMAN_VS_COMPUTER
                and not self.is_over
                and self._turn is self.computer_mark)

    # ==================== TRANSITIONS ====================

    def submit_move(self, cell: int) -> GameStatus:
        """
        Place the current player's mark.

        Args:
            cell: Cell index (0-8).

        Returns:
            The status after the move.

        Raises:
            InvalidMove: Cell taken or out of range, game over, or it's
                the computer's turn.
        """
        return self._play(cell, by_computer=False)

    def computer_move(self) -> ScoredMove:
        """
        Let the computer pick and play its move.

        Returns:
            The move that was played.

        Raises:
            InvalidMove: Not a computer game, game over, or not the
                computer's turn.
        """
        if self._mode is not Mode.HUMAN_VS_COMPUTER:
            raise InvalidMove("There is no computer player in this mode.")
        if self.is_over:
            raise InvalidMove("Game is already over!")
        if self._turn is not self.computer_mark:
            raise InvalidMove("Not the computer's turn.")

        move = best_move(self.board, self.computer_mark, self.computer_mark)
        self._play(move.cell, by_computer=True)
        return move

    def _play(self, cell: int, by_computer: bool) -> GameStatus:
        result = self.validator.validate_move(self, cell, self._turn, by_computer)
        if not result.is_valid:
            raise InvalidMove(result.error_message)

        mark = self._turn
        self._board[cell] = mark
        self._moves.append(MoveLogEntry(len(self._moves) + 1, mark, cell))

        self._status = evaluate(self._board, mark)
        if not self._status.is_terminal:
            self._turn = mark.opposite()

        return self._status

    # ==================== DISPLAY ====================

    def status_text(self) -> str:
        """One-line description of the game, for status bars."""
        if self._status.winner is not None:
            return f"Player {self._status.winner.value} wins!"
        if self._status.is_terminal:
            return "It's a draw!"
        return f"Player {self._turn.value}'s turn ({self._mode.value.upper()})"

    def print_board(self):
        """Print the board to console."""
        print()
        print(format_board(self._board))
        print(f"\n{self.status_text()}")


def new_game(mode: Mode = GameConfig.DEFAULT_MODE) -> GameSession:
    """Create a fresh game in the given mode."""
    return GameSession(mode)
