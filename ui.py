"""
TicTacToe UI
A graphical interface for the TicTacToe engine using Tkinter.

Shows:
- The 3x3 board (click a cell to play)
- Game status (whose turn, winner, draw)
- Session score
"""

import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from engine.config import GameConfig
from engine.game_engine import GameEngine
from engine.game_state import Mark, Snapshot, cell_to_index


# Cell colors
EMPTY_BG = '#16213e'
X_FG = '#60a5fa'
O_FG = '#f87171'
WIN_BG = '#065f46'
LAST_MOVE_BG = '#1f2b4d'


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    The window owns one engine, forwards clicks to it and redraws from
    each snapshot it publishes.
    """

    def __init__(self, engine: Optional[GameEngine] = None):
        """Initialize the UI."""
        self.engine = engine or GameEngine()
        self.board_cells: List[tk.Button] = []

        self._create_ui()
        self._unsubscribe = self.engine.subscribe(self._render)
        self._render(self.engine.get_snapshot())

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('TButton', font=('Segoe UI', 10, 'bold'))

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=15, pady=15)

        ttk.Label(main_frame, text="TicTacToe", style='Title.TLabel').pack(pady=(0, 5))

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(0, 10))

        # Board grid
        board_frame = ttk.Frame(main_frame)
        board_frame.pack()

        size = GameConfig.BOARD_SIZE
        for row in range(size):
            for col in range(size):
                index = cell_to_index(row, col)
                cell = tk.Button(
                    board_frame,
                    text="",
                    width=4,
                    height=2,
                    font=('Segoe UI', 28, 'bold'),
                    bg=EMPTY_BG,
                    activebackground=LAST_MOVE_BG,
                    relief=tk.FLAT,
                    command=lambda i=index: self._on_cell_click(i)
                )
                cell.grid(row=row, column=col, padx=3, pady=3)
                self.board_cells.append(cell)

        self.score_label = ttk.Label(main_frame, text="")
        self.score_label.pack(pady=(10, 10))

        # Buttons
        button_frame = ttk.Frame(main_frame)
        button_frame.pack()

        ttk.Button(button_frame, text="New Game", command=self.engine.reset_board).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Reset Score", command=self.engine.reset_score).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Quit", command=self._quit).pack(side=tk.LEFT, padx=5)

    def _on_cell_click(self, index: int):
        """Forward a click to the engine. Illegal clicks do nothing."""
        self.engine.apply_move(index)

    def _render(self, snapshot: Snapshot):
        """Redraw everything from a snapshot."""
        for index, cell in enumerate(self.board_cells):
            mark = snapshot.board[index]

            if snapshot.is_winning_cell(index):
                bg_color = WIN_BG
            elif snapshot.is_last_move(index):
                bg_color = LAST_MOVE_BG
            else:
                bg_color = EMPTY_BG

            if mark is None:
                cell.configure(text="", bg=bg_color)
            else:
                fg_color = X_FG if mark is Mark.X else O_FG
                cell.configure(text=mark.value, bg=bg_color, fg=fg_color, disabledforeground=fg_color)

        self.status_label.configure(text=snapshot.status_message())

        score = snapshot.score
        self.score_label.configure(
            text=(
                f"X wins: {score.x_wins}    O wins: {score.o_wins}    Draws: {score.draws}"
                f"    Total games: {score.games_played}"
            )
        )

    def _quit(self):
        """Quit the application."""
        self._unsubscribe()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
