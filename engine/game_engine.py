"""
Game engine for TicTacToe.
Owns the board, the turn, the game phase and the session score,
and publishes a new snapshot after every change.
"""

import logging
from dataclasses import replace
from typing import Callable, List, Optional

from .config import GameConfig
from .game_state import Mark, Phase, ScoreTally, Snapshot, EMPTY_BOARD
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

Listener = Callable[[Snapshot], None]


class GameEngine:
    """
    The TicTacToe state machine.

    Game flow:
    1. X places a mark on an empty cell
    2. The board is checked for a completed line, then for a full board
    3. If neither, O is on turn
    4. Repeat until someone wins or it's a draw
    5. ``reset_board()`` starts the next game, the score carries over

    Moves that break the rules (game over, occupied cell, index off the
    board) are ignored and leave the state untouched.

    All calls are expected from a single thread of control.
    """

    def __init__(
        self,
        validator: Optional[MoveValidator] = None,
        win_checker: Optional[WinChecker] = None
    ):
        self.validator = validator or MoveValidator()
        self.win_checker = win_checker or WinChecker()

        self._score = ScoreTally()
        self._listeners: List[Listener] = []
        self._snapshot = Snapshot(score=self._score)

    # ==================== QUERIES ====================

    def get_snapshot(self) -> Snapshot:
        """Get the current state."""
        return self._snapshot

    @property
    def score(self) -> ScoreTally:
        return self._score

    # ==================== OPERATIONS ====================

    def apply_move(self, index: int) -> Snapshot:
        """
        Place the current player's mark at ``index``.

        Args:
            index: Board index (0-8), row-major.

        Returns:
            The snapshot after the move. For a rejected move this is the
            unchanged current snapshot.
        """
        current = self._snapshot

        result = self.validator.validate_move(current, index)
        if not result.is_valid:
            logger.debug(f"Ignoring move {index!r}: {result.error_message}")
            return current

        mark = current.turn
        board = list(current.board)
        board[index] = mark

        evaluation = self.win_checker.evaluate(board)

        if evaluation.phase == Phase.WON:
            self._score = self._score.record_win(evaluation.outcome)
            turn = mark
            logger.info(
                f"{evaluation.outcome.value} wins on line {list(evaluation.winning_line)}"
            )
        elif evaluation.phase == Phase.DRAW:
            self._score = self._score.record_draw()
            turn = mark
            logger.info("Game drawn")
        else:
            turn = mark.opposite()

        self._publish(Snapshot(
            board=tuple(board),
            turn=turn,
            phase=evaluation.phase,
            outcome=evaluation.outcome,
            winning_line=tuple(evaluation.winning_line),
            last_move=index,
            score=self._score
        ))
        return self._snapshot

    def reset_board(self) -> Snapshot:
        """Clear the board for a new game. The score is kept."""
        logger.info("Board reset")
        self._publish(Snapshot(
            board=EMPTY_BOARD,
            turn=Mark(GameConfig.FIRST_MARK),
            phase=Phase.IN_PROGRESS,
            score=self._score
        ))
        return self._snapshot

    def reset_score(self) -> Snapshot:
        """Zero the score. The board is left as it is."""
        logger.info(
            f"Score reset (was X {self._score.x_wins}, "
            f"O {self._score.o_wins}, draws {self._score.draws})"
        )
        self._score = ScoreTally()
        self._publish(replace(self._snapshot, score=self._score))
        return self._snapshot

    # ==================== OBSERVERS ====================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call ``listener`` with every new snapshot.

        Args:
            listener: Callable taking a Snapshot.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, snapshot: Snapshot):
        """Store the new snapshot and tell every listener."""
        self._snapshot = snapshot
        for listener in list(self._listeners):
            listener(snapshot)
