"""
Game state types for TicTacToe.
Marks, modes, game status and the move log.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass


# Board size is fixed: 9 cells, row-major
BOARD_CELLS = 9

# A board handed out to callers (and to the AI) is an immutable copy
Board = Tuple["Mark", ...]

# A winning line is a triple of cell indices
Line = Tuple[int, int, int]


class Mark(Enum):
    """What a cell can hold: one of the two player marks, or nothing."""
    X = "X"
    O = "O"
    EMPTY = ""

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        raise ValueError("EMPTY has no opposite mark")

    @property
    def is_player(self) -> bool:
        return self is not Mark.EMPTY


class Mode(Enum):
    """Who is playing."""
    HUMAN_VS_HUMAN = "pvp"
    HUMAN_VS_COMPUTER = "pve"


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    Where the game stands.

    Exactly one outcome holds at a time. A won status carries the winning
    mark and the line it completed; the other two carry neither.
    """
    outcome: Outcome = Outcome.IN_PROGRESS
    winner: Optional[Mark] = None
    line: Optional[Line] = None

    @classmethod
    def in_progress(cls) -> "GameStatus":
        return cls(Outcome.IN_PROGRESS)

    @classmethod
    def won(cls, mark: Mark, line: Line) -> "GameStatus":
        return cls(Outcome.WON, mark, tuple(line))

    @classmethod
    def draw(cls) -> "GameStatus":
        return cls(Outcome.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS


@dataclass(frozen=True)
class MoveLogEntry:
    """
    One accepted move.
    """
    sequence: int           # 1-based move number
    mark: Mark              # Who moved
    cell: int               # Cell index (0-8)

    def describe(self) -> str:
        """Log line as shown to players (cells are numbered 1-9)."""
        return f"Move {self.sequence}: {self.mark.value} to cell {self.cell + 1}"


def empty_board() -> List[Mark]:
    """A fresh, mutable board with every cell empty."""
    return [Mark.EMPTY] * BOARD_CELLS


def empty_cells(board) -> List[int]:
    """
    Get all empty cells on the board.

    Args:
        board: Any sequence of 9 marks.

    Returns:
        Cell indices in increasing order.
    """
    return [i for i, cell in enumerate(board) if cell is Mark.EMPTY]


def format_board(board) -> str:
    """Render a board as a small text grid, empty cells shown by number."""
    rows = []
    for row in range(3):
        cells = []
        for col in range(3):
            index = row * 3 + col
            mark = board[index]
            cells.append(mark.value if mark.is_player else str(index + 1))
        rows.append(" " + " | ".join(cells))
    return "\n---+---+---\n".join(rows)
