"""
Main script for TicTacToe.

Plays a game in the console:
- Human vs computer (the computer never loses)
- Human vs human on one keyboard

Run with --ui to open the window instead.
"""

from typing import Optional

from logic.ai_player import AIPlayer
from logic.config import GameConfig
from logic.errors import InvalidMove
from logic.game_state import Mode
from logic.session import GameSession


class ConsoleGame:
    """
    Console controller for TicTacToe.

    Game flow:
    1. The player to move types a cell number (1-9)
    2. Against the computer, it answers right away
    3. Repeat until someone wins or it's a draw
    4. 'r' starts over, 'q' quits
    """

    def __init__(self, mode: Mode = GameConfig.DEFAULT_MODE, verbose: bool = False):
        """
        Initialize the game.

        Args:
            mode: Who plays.
            verbose: Print the AI's reasoning.
        """
        self.session = GameSession(mode)
        self.ai = AIPlayer(self.session.computer_mark, verbose=verbose)
        self.is_running = False
        self._logged = 0

        print("\n" + "="*60)
        print("   TicTacToe - Ready!")
        if mode is Mode.HUMAN_VS_COMPUTER:
            print(f"   Human plays: {self.session.human_mark.value}")
            print(f"   Computer plays: {self.session.computer_mark.value}")
        else:
            print("   Two players, X starts")
        print("="*60 + "\n")

    def start(self):
        """Start the game."""
        print("Type 1-9 to play a cell, 'r' to restart, 'q' to quit\n")
        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        self.session.print_board()

        while self.is_running:
            if self.session.is_over:
                self._show_game_result()
                if not self._ask_play_again():
                    return
                continue

            if self.session.computer_move_pending:
                self._computer_move()
                continue

            raw = input(f"\nPlayer {self.session.turn.value} move: ").strip().lower()
            self._handle_input(raw)

    def _handle_input(self, raw: str):
        """
        Apply one line of player input.

        Args:
            raw: What the player typed.
        """
        if raw == 'q':
            print("\nGame quit by user.")
            self.is_running = False
            return
        if raw == 'r':
            self._reset_game()
            return

        cell = self._parse_cell(raw)
        if cell is None:
            print("Please type a cell number from 1 to 9.")
            return

        try:
            self.session.submit_move(cell)
        except InvalidMove as e:
            print(f"Invalid move: {e.reason}")
            return

        self._print_new_log_entries()
        self.session.print_board()

    def _parse_cell(self, raw: str) -> Optional[int]:
        if not raw.isdigit():
            return None
        number = int(raw)
        if not 1 <= number <= 9:
            return None
        return number - 1

    def _computer_move(self):
        """Execute the computer's move."""
        print("\n>>> Computer is thinking...")

        cell = self.ai.get_best_move(self.session)
        if cell is None:
            print("ERROR: AI could not find a move!")
            self.is_running = False
            return

        # Same search, served from the AI's cache
        self.session.computer_move()
        self._print_new_log_entries()
        self.session.print_board()

    def _print_new_log_entries(self):
        for entry in self.session.move_log[self._logged:]:
            print(f">>> {entry.describe()}")
        self._logged = len(self.session.move_log)

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        status = self.session.status
        if status.winner is None:
            print("\nIt's a draw! Good game!")
        elif self.session.mode is Mode.HUMAN_VS_COMPUTER:
            if status.winner is self.session.human_mark:
                print("\nCongratulations! You won!")
            else:
                print("\nComputer wins! Better luck next time!")
        else:
            print(f"\nPlayer {status.winner.value} wins!")

        print("\n" + "="*60)

    def _ask_play_again(self) -> bool:
        raw = input("\nPlay again? [y/N] ").strip().lower()
        if raw == 'y':
            self._reset_game()
            return True
        self.is_running = False
        return False

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.session.reset()
        self._logged = 0
        self.session.print_board()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        default=GameConfig.DEFAULT_MODE.value,
        help="pve: play the computer, pvp: two players"
    )
    parser.add_argument(
        "--ui",
        action="store_true",
        help="Open the window UI instead of the console"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print the AI's reasoning"
    )

    args = parser.parse_args()
    mode = Mode(args.mode)

    if args.ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        TicTacToeUI(mode).run()
        return

    game = ConsoleGame(mode, verbose=args.verbose)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
