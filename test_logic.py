"""
Tests for the game session: moves, turns, wins, draws and resets.

Usage:
    pytest test_logic.py
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from logic import (
    GameSession,
    GameStatus,
    InvalidMove,
    Mark,
    Mode,
    MoveValidator,
    Outcome,
    WINNING_LINES,
    find_winning_line,
    new_game,
)
from logic.game_state import empty_board, empty_cells, format_board
from logic.win_checker import evaluate, is_full


def play(session: GameSession, cells):
    for cell in cells:
        session.submit_move(cell)
    return session


def snapshot(session: GameSession):
    return (session.board, session.turn, session.status, session.move_log, session.mode)


# ==================== MARKS ====================

def test_marks_have_opposites():
    assert Mark.X.opposite() is Mark.O
    assert Mark.O.opposite() is Mark.X


def test_empty_has_no_opposite():
    with pytest.raises(ValueError):
        Mark.EMPTY.opposite()


# ==================== WIN CHECKER ====================

def test_winning_lines_are_fixed():
    assert WINNING_LINES == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


def test_each_line_is_found():
    for line in WINNING_LINES:
        board = empty_board()
        for cell in line:
            board[cell] = Mark.O
        assert find_winning_line(board, Mark.O) == line
        assert find_winning_line(board, Mark.X) is None


def test_first_line_in_order_is_reported():
    # X holds both the top row and the left column
    board = empty_board()
    for cell in (0, 1, 2, 3, 6):
        board[cell] = Mark.X
    assert find_winning_line(board, Mark.X) == (0, 1, 2)


def test_empty_mark_cannot_win():
    with pytest.raises(ValueError):
        find_winning_line(empty_board(), Mark.EMPTY)


def test_win_beats_full_board():
    board = [Mark.X, Mark.O, Mark.X,
             Mark.O, Mark.O, Mark.X,
             Mark.X, Mark.X, Mark.X]
    assert is_full(board)
    assert evaluate(board, Mark.X) == GameStatus.won(Mark.X, (6, 7, 8))


# ==================== NEW GAME ====================

def test_new_game_is_empty():
    session = new_game(Mode.HUMAN_VS_HUMAN)
    assert session.board == tuple([Mark.EMPTY] * 9)
    assert session.turn is Mark.X
    assert session.status == GameStatus.in_progress()
    assert session.move_log == ()
    assert session.mode is Mode.HUMAN_VS_HUMAN
    assert not session.is_over


def test_mode_accepts_its_value():
    assert GameSession("pvp").mode is Mode.HUMAN_VS_HUMAN


# ==================== MOVES ====================

def test_turn_alternates():
    session = new_game(Mode.HUMAN_VS_HUMAN)
    session.submit_move(4)
    assert session.turn is Mark.O
    session.submit_move(0)
    assert session.turn is Mark.X


def test_move_count_plus_empty_cells_is_nine():
    session = new_game(Mode.HUMAN_VS_HUMAN)
    for cell in (4, 0, 8, 2):
        session.submit_move(cell)
        assert len(session.move_log) + len(empty_cells(session.board)) == 9


def test_move_log_records_each_move():
    session = play(new_game(Mode.HUMAN_VS_HUMAN), [4, 0])
    log = session.move_log
    assert [(e.sequence, e.mark, e.cell) for e in log] == [(1, Mark.X, 4), (2, Mark.O, 0)]
    assert log[0].describe() == "Move 1: X to cell 5"
    assert log[1].describe() == "Move 2: O to cell 1"


def test_board_is_a_copy():
    session = new_game(Mode.HUMAN_VS_HUMAN)
    board = session.board
    session.submit_move(0)
    assert board[0] is Mark.EMPTY
    assert session.board[0] is Mark.X


def test_top_row_win():
    session = play(new_game(Mode.HUMAN_VS_HUMAN), [0, 3, 1, 4, 2])
    assert session.status == GameStatus.won(Mark.X, (0, 1, 2))
    assert session.status.outcome is Outcome.WON
    assert session.is_over
    # Turn stays with the winner
    assert session.turn is Mark.X
    assert session.status_text() == "Player X wins!"


def test_o_can_win():
    session = play(new_game(Mode.HUMAN_VS_HUMAN), [0, 2, 1, 4, 8, 6])
    assert session.status == GameStatus.won(Mark.O, (2, 4, 6))


def test_drawn_game():
    session = play(new_game(Mode.HUMAN_VS_HUMAN), [0, 4, 8, 2, 6, 3, 5, 7, 1])
    assert session.status == GameStatus.draw()
    assert session.status.winner is None
    assert session.status.line is None
    assert session.status_text() == "It's a draw!"


def test_last_move_completing_a_line_is_a_win():
    # X fills the board with 6-7-8 on the ninth move
    session = play(new_game(Mode.HUMAN_VS_HUMAN), [0, 4, 8, 2, 6, 1, 5, 3, 7])
    assert session.status == GameStatus.won(Mark.X, (6, 7, 8))


# ==================== INVALID MOVES ====================

def test_occupied_cell_is_rejected():
    session = play(new_game(Mode.HUMAN_VS_HUMAN), [4])
    before = snapshot(session)

    with pytest.raises(InvalidMove) as exc:
        session.submit_move(4)

    assert "occupied" in exc.value.reason
    assert snapshot(session) == before


@pytest.mark.parametrize("cell", [-1, 9, 100, True, "3", 1.0, None])
def test_bad_cell_is_rejected(cell):
    session = new_game(Mode.HUMAN_VS_HUMAN)
    before = snapshot(session)

    with pytest.raises(InvalidMove):
        session.submit_move(cell)

    assert snapshot(session) == before


def test_finished_game_rejects_moves():
    session = play(new_game(Mode.HUMAN_VS_HUMAN), [0, 3, 1, 4, 2])
    before = snapshot(session)

    with pytest.raises(InvalidMove) as exc:
        session.submit_move(8)

    assert exc.value.reason == "Game is already over!"
    assert snapshot(session) == before


def test_invalid_move_is_a_value_error():
    session = play(new_game(Mode.HUMAN_VS_HUMAN), [0])
    with pytest.raises(ValueError):
        session.submit_move(0)


def test_validator_reports_without_raising():
    session = play(new_game(Mode.HUMAN_VS_HUMAN), [0])
    validator = MoveValidator()

    assert validator.validate_move(session, 1).is_valid
    result = validator.validate_move(session, 0)
    assert not result.is_valid
    assert result.error_message == "Cell 1 is already occupied by X"
    assert not validator.validate_move(session, 1, Mark.X).is_valid


# ==================== COMPUTER MODE ====================

def test_human_cannot_move_for_computer():
    session = new_game(Mode.HUMAN_VS_COMPUTER)
    session.submit_move(0)
    assert session.computer_move_pending
    before = snapshot(session)

    with pytest.raises(InvalidMove):
        session.submit_move(1)

    assert snapshot(session) == before


def test_computer_answers():
    session = new_game(Mode.HUMAN_VS_COMPUTER)
    session.submit_move(0)
    move = session.computer_move()

    # Center is the only reply to a corner that holds the draw
    assert move.cell == 4
    assert move.score == 0
    assert session.board[4] is Mark.O
    assert session.turn is Mark.X
    assert not session.computer_move_pending
    assert session.move_log[-1].mark is Mark.O


def test_computer_move_needs_computer_mode():
    session = new_game(Mode.HUMAN_VS_HUMAN)
    session.submit_move(0)
    with pytest.raises(InvalidMove):
        session.computer_move()


def test_computer_move_needs_computer_turn():
    session = new_game(Mode.HUMAN_VS_COMPUTER)
    with pytest.raises(InvalidMove):
        session.computer_move()


def test_computer_move_rejected_after_game_over():
    session = new_game(Mode.HUMAN_VS_COMPUTER)
    session.submit_move(4)
    while not session.is_over:
        if session.computer_move_pending:
            session.computer_move()
        else:
            session.submit_move(empty_cells(session.board)[0])
    before = snapshot(session)

    with pytest.raises(InvalidMove):
        session.computer_move()

    assert snapshot(session) == before
    assert session.status.winner is not Mark.X


# ==================== RESET ====================

def test_reset_after_win():
    session = play(new_game(Mode.HUMAN_VS_HUMAN), [0, 3, 1, 4, 2])
    session.reset()

    assert session.board == tuple([Mark.EMPTY] * 9)
    assert session.status == GameStatus.in_progress()
    assert session.move_log == ()
    assert session.turn is Mark.X
    assert session.mode is Mode.HUMAN_VS_HUMAN


def test_reset_mid_game_with_new_mode():
    session = play(new_game(Mode.HUMAN_VS_HUMAN), [0, 3])
    session.reset(Mode.HUMAN_VS_COMPUTER)

    assert session.mode is Mode.HUMAN_VS_COMPUTER
    assert session.turn is Mark.X
    assert session.move_log == ()
    assert session.status_text() == "Player X's turn (PVE)"


def test_reset_while_computer_is_pending():
    session = new_game(Mode.HUMAN_VS_COMPUTER)
    session.submit_move(0)
    session.reset()

    assert not session.computer_move_pending
    session.submit_move(4)
    assert session.board[4] is Mark.X


# ==================== DISPLAY HELPERS ====================

def test_format_board():
    board = empty_board()
    board[0] = Mark.X
    board[4] = Mark.O
    assert format_board(board) == (
        " X | 2 | 3\n"
        "---+---+---\n"
        " 4 | O | 6\n"
        "---+---+---\n"
        " 7 | 8 | 9"
    )
