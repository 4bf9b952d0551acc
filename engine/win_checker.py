"""
Win checker for TicTacToe.
Decides whether a board is won, drawn, or still in play.
"""

from typing import Optional, List, Sequence, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Mark, Phase


@dataclass(frozen=True)
class Evaluation:
    """Result of evaluating a board."""
    phase: Phase
    outcome: Optional[Mark] = None
    winning_line: Tuple[int, ...] = ()


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally).

    Every method is pure: it only reads the board it is given.
    """

    # All possible winning lines as board indices
    WINNING_LINES: List[Tuple[int, int, int]] = GameConfig.WINNING_LINES

    def check_winner(self, board: Sequence[Optional[Mark]]) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The 9 cells, row-major.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(
        self,
        board: Sequence[Optional[Mark]]
    ) -> Optional[Tuple[int, int, int]]:
        """
        Get the first completed line, scanning rows, columns, then diagonals.

        Returns:
            The winning triple, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None

    def find_completed_lines(
        self,
        board: Sequence[Optional[Mark]]
    ) -> List[Tuple[int, int, int]]:
        """Get every completed line on the board, in scan order."""
        return [
            line for line in self.WINNING_LINES
            if self._check_line(board, line) is not None
        ]

    def _check_line(
        self,
        board: Sequence[Optional[Mark]],
        line: Tuple[int, int, int]
    ) -> Optional[Mark]:
        """
        Check if a single line has a winner.

        Returns:
            The mark if all 3 cells hold it, None otherwise.
        """
        a, b, c = line
        mark = board[a]
        if mark is None:
            return None  # Empty cell, no winner on this line
        if board[b] == mark and board[c] == mark:
            return mark
        return None

    def is_full(self, board: Sequence[Optional[Mark]]) -> bool:
        return all(cell is not None for cell in board)

    def check_draw(self, board: Sequence[Optional[Mark]]) -> bool:
        """
        Check if the board is a draw.

        A draw needs every cell filled AND no completed line. A move
        that fills the board while completing a line is a win.
        """
        if self.check_winner(board) is not None:
            return False
        return self.is_full(board)

    def evaluate(self, board: Sequence[Optional[Mark]]) -> Evaluation:
        """
        Evaluate a board: win first, then draw, otherwise in progress.

        Args:
            board: The 9 cells, row-major.

        Returns:
            Evaluation with phase, outcome and winning line.
        """
        line = self.get_winning_line(board)
        if line is not None:
            return Evaluation(
                phase=Phase.WON,
                outcome=board[line[0]],
                winning_line=line
            )

        if self.is_full(board):
            return Evaluation(phase=Phase.DRAW)

        return Evaluation(phase=Phase.IN_PROGRESS)
