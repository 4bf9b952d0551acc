"""
Game state types for TicTacToe.
Marks, game phases, the score tally and the immutable snapshot
handed to whatever is drawing the board.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field, replace

from .config import GameConfig


class Mark(Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X


class Phase(Enum):
    """Lifecycle stage of a single game."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self != Phase.IN_PROGRESS


# A cell is either empty (None) or holds a mark
Cell = Optional[Mark]
Board = Tuple[Cell, ...]

EMPTY_BOARD: Board = (None,) * GameConfig.CELL_COUNT


def is_valid_index(index) -> bool:
    """True if index is an int naming one of the 9 cells."""
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    return 0 <= index < GameConfig.CELL_COUNT


def index_to_cell(index: int) -> Tuple[int, int]:
    """
    Convert a board index to (row, col).

    Args:
        index: Board index (0-8).

    Returns:
        (row, col) tuple, both 0-2.
    """
    if not is_valid_index(index):
        raise ValueError(f"Invalid board index {index!r}. Must be 0-8.")
    return divmod(index, GameConfig.BOARD_SIZE)


def cell_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a row-major board index."""
    size = GameConfig.BOARD_SIZE
    if not (0 <= row < size and 0 <= col < size):
        raise ValueError(f"Invalid position ({row}, {col}). Must be 0-2.")
    return row * size + col


@dataclass(frozen=True)
class ScoreTally:
    """
    Session score across games.

    Counters only ever go up; ``ScoreTally()`` is the explicit reset.
    """
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def wins_for(self, mark: Mark) -> int:
        """Number of games won by ``mark``."""
        if mark is Mark.X:
            return self.x_wins
        return self.o_wins

    def record_win(self, mark: Mark) -> "ScoreTally":
        """Return a tally with one more win for ``mark``."""
        if mark is Mark.X:
            return replace(self, x_wins=self.x_wins + 1)
        return replace(self, o_wins=self.o_wins + 1)

    def record_draw(self) -> "ScoreTally":
        """Return a tally with one more draw."""
        return replace(self, draws=self.draws + 1)

    @property
    def games_played(self) -> int:
        return self.x_wins + self.o_wins + self.draws


@dataclass(frozen=True)
class Snapshot:
    """
    Read-only view of the engine after an operation.

    Front ends render from this and never change it. Every field is
    either immutable or a tuple, so two snapshots of the same state
    compare equal.
    """

    # The 9 cells, row-major - None means empty
    board: Board = EMPTY_BOARD

    # Mark to be placed next (unchanged once the game is over)
    turn: Mark = Mark(GameConfig.FIRST_MARK)

    phase: Phase = Phase.IN_PROGRESS

    # Winning mark, only set when phase is WON
    outcome: Optional[Mark] = None

    # The completed triple, empty unless phase is WON
    winning_line: Tuple[int, ...] = ()

    # Index of the mark placed most recently, for highlighting
    last_move: Optional[int] = None

    score: ScoreTally = field(default_factory=ScoreTally)

    @property
    def is_game_over(self) -> bool:
        return self.phase.is_terminal

    @property
    def move_count(self) -> int:
        """How many marks are on the board."""
        return sum(1 for cell in self.board if cell is not None)

    def cell(self, row: int, col: int) -> Cell:
        """Get the mark at (row, col), or None."""
        return self.board[cell_to_index(row, col)]

    def empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of board indices, ascending.
        """
        return [i for i, cell in enumerate(self.board) if cell is None]

    def is_winning_cell(self, index: int) -> bool:
        return index in self.winning_line

    def is_last_move(self, index: int) -> bool:
        return self.last_move is not None and self.last_move == index

    def status_message(self) -> str:
        """One-line description of the game for a status bar."""
        if self.phase == Phase.WON:
            return f"Player {self.outcome.value} Wins!"
        if self.phase == Phase.DRAW:
            return "It's a Draw!"
        return f"Player {self.turn.value}'s Turn"

    def render(self, show_indices: bool = True) -> str:
        """
        Draw the board as text.

        Args:
            show_indices: Print the cell number in empty cells so a
                console player knows what to type.

        Returns:
            Multi-line string with the grid and the status line.
        """
        size = GameConfig.BOARD_SIZE
        lines = ["┌───┬───┬───┐"]

        for row in range(size):
            row_str = "│"
            for col in range(size):
                index = cell_to_index(row, col)
                mark = self.board[index]
                if mark is not None:
                    symbol = mark.value
                    # Brackets around the winning line, a star on the last move
                    if self.is_winning_cell(index):
                        row_str += f"[{symbol}]│"
                    elif self.is_last_move(index):
                        row_str += f" {symbol}*│"
                    else:
                        row_str += f" {symbol} │"
                elif show_indices:
                    row_str += f" {index} │"
                else:
                    row_str += "   │"
            lines.append(row_str)

            if row < size - 1:
                lines.append("├───┼───┼───┤")

        lines.append("└───┴───┴───┘")
        lines.append(self.status_message())
        return "\n".join(lines)
