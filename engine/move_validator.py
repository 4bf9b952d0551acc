"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .game_state import Snapshot, is_valid_index, index_to_cell


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The index must name one of the 9 cells
    2. Can only place on empty cells
    3. Game must not be over
    """

    def validate_move(self, snapshot: Snapshot, index) -> ValidationResult:
        """
        Validate a move.

        Args:
            snapshot: Current game state.
            index: Board index to place the next mark (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if snapshot.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is on the board
        if not is_valid_index(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be 0-8."
            )

        # Check if cell is empty
        occupant = snapshot.board[index]
        if occupant is not None:
            row, col = index_to_cell(index)
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Cell {index} ({row}, {col}) is already occupied by {occupant.value}"
                )
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, snapshot: Snapshot) -> List[int]:
        """
        Get all valid moves for the player on turn.

        Returns:
            List of board indices, empty once the game is over.
        """
        if snapshot.is_game_over:
            return []
        return snapshot.empty_cells()
