"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The board, drawn with OpenCV (marks and winning line)
- Game status and whose turn it is
- Mode selection (vs computer / two players)
- Move log
"""

import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

from display.config import DisplayConfig
from display.board_renderer import BoardRenderer

from logic.config import GameConfig
from logic.errors import InvalidMove
from logic.game_state import Mode
from logic.session import GameSession


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, mode: Mode = GameConfig.DEFAULT_MODE):
        """Initialize the UI."""
        self.session = GameSession(mode)
        self.renderer = BoardRenderer(DisplayConfig())

        # Scheduled computer move (Tk "after" id)
        self.pending_after_id: Optional[str] = None

        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        # Left panel - Board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, padx=(0, 10))

        ttk.Label(left_frame, text="Game Board", style='Title.TLabel').pack(pady=(0, 5))

        size = self.renderer.config.BOARD_OUTPUT_SIZE
        self.board_canvas = tk.Canvas(left_frame, width=size, height=size, bg='#0f0f1a',
                                      highlightthickness=2, highlightbackground='#00d4ff')
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_click)

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=10)

        # Right panel
        right_frame = ttk.Frame(main_frame, width=260)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        # Mode section
        ttk.Label(right_frame, text="Mode", style='Title.TLabel').pack()

        mode_frame = ttk.Frame(right_frame)
        mode_frame.pack(pady=10)

        mode_buttons = [
            ("vs Computer", Mode.HUMAN_VS_COMPUTER, "#f87171"),
            ("2 Players", Mode.HUMAN_VS_HUMAN, "#4ade80"),
        ]

        self.mode_buttons = {}
        for text, mode, color in mode_buttons:
            btn = tk.Button(
                mode_frame,
                text=text,
                font=('Segoe UI', 10, 'bold'),
                width=11,
                activebackground=color,
                command=lambda m=mode: self._set_mode(m)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.mode_buttons[mode] = (btn, color)

        tk.Button(
            right_frame,
            text="Restart",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=24,
            command=self._reset_game
        ).pack(pady=5)

        # Move log section
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(right_frame, text="Move Log", style='Title.TLabel').pack()

        self.log_list = tk.Listbox(right_frame, height=10, bg='#16213e', fg='white',
                                   font=('Segoe UI', 10), borderwidth=0)
        self.log_list.pack(fill=tk.BOTH, expand=True, pady=5)

        tk.Button(
            right_frame,
            text="Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=24,
            command=self._quit
        ).pack(pady=10)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _set_mode(self, mode: Mode):
        """Pick a mode and start a new game in it."""
        print(f"Mode set to: {mode.value}")
        self._cancel_computer_move()
        self.session.reset(mode)
        self._refresh()

    def _on_click(self, event):
        """Handle a click on the board."""
        cell = self.renderer.cell_at(event.x, event.y)
        if cell is None:
            return

        try:
            self.session.submit_move(cell)
        except InvalidMove as e:
            # Board stays as it was; just tell the player
            self.status_label.configure(text=e.reason)
            return

        self._refresh()

        if self.session.computer_move_pending:
            self.status_label.configure(text="Computer is thinking...")
            self.pending_after_id = self.root.after(
                GameConfig.COMPUTER_DELAY_MS, self._computer_move
            )

    def _computer_move(self):
        """Play the computer's move (runs on the UI thread)."""
        self.pending_after_id = None
        if not self.session.computer_move_pending:
            return

        move = self.session.computer_move()
        print(f"Computer plays cell {move.cell + 1} (score: {move.score})")
        self._refresh()

    def _cancel_computer_move(self):
        if self.pending_after_id is not None:
            self.root.after_cancel(self.pending_after_id)
            self.pending_after_id = None

    def _refresh(self):
        """Redraw the board, status, mode buttons and move log."""
        status = self.session.status
        image = self.renderer.render(self.session.board, status.line)
        photo = ImageTk.PhotoImage(Image.fromarray(self.renderer.to_rgb(image)))

        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

        self.status_label.configure(text=self.session.status_text())

        for mode, (btn, color) in self.mode_buttons.items():
            if mode is self.session.mode:
                btn.configure(bg=color, fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

        self.log_list.delete(0, tk.END)
        for entry in self.session.move_log:
            self.log_list.insert(tk.END, entry.describe())

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self._cancel_computer_move()
        self.session.reset()
        self._refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_computer_move()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        default=GameConfig.DEFAULT_MODE.value,
        help="pve: play the computer, pvp: two players"
    )

    args = parser.parse_args()

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI(Mode(args.mode))
    ui.run()


if __name__ == "__main__":
    main()
