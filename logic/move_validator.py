"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, TYPE_CHECKING
from dataclasses import dataclass

from .game_state import BOARD_CELLS, Mark, Mode

if TYPE_CHECKING:
    from .session import GameSession


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Cell index must be 0-8
    3. Can only place on empty cells
    4. Against the computer, only the human's mark may be submitted
    """

    def validate_move(
        self,
        session: "GameSession",
        cell: int,
        mark: Optional[Mark] = None,
        by_computer: bool = False
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            session: Current game.
            cell: Cell to place the mark in (0-8).
            mark: Mark being placed. Defaults to the side to move.
            by_computer: True when the move comes from the move selector.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if mark is None:
            mark = session.turn

        # Check if game is over
        if session.status.is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # bool is an int subclass; True is not a cell
        if not isinstance(cell, int) or isinstance(cell, bool):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {cell!r}. Must be an integer 0-{BOARD_CELLS - 1}."
            )

        if not 0 <= cell < BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {cell}. Must be 0-{BOARD_CELLS - 1}."
            )

        if mark is not session.turn:
            return ValidationResult(
                is_valid=False,
                error_message=f"Not {mark.value}'s turn."
            )

        if (session.mode is Mode.HUMAN_VS_COMPUTER
                and mark is session.computer_mark
                and not by_computer):
            return ValidationResult(
                is_valid=False,
                error_message="Not your turn, the computer is moving."
            )

        # Check if cell is empty
        occupant = session.board[cell]
        if occupant is not Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {cell + 1} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)
