"""Tests for move validation."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from engine.game_state import Mark, Phase, Snapshot
from engine.move_validator import MoveValidator, ValidationResult


@pytest.fixture
def validator():
    return MoveValidator()


class TestValidateMove:
    def test_empty_cell_is_valid(self, validator):
        result = validator.validate_move(Snapshot(), 4)
        assert result == ValidationResult(is_valid=True)
        assert result.error_message is None

    def test_occupied_cell(self, validator):
        board = (None,) * 4 + (Mark.X,) + (None,) * 4
        result = validator.validate_move(Snapshot(board=board, turn=Mark.O), 4)
        assert not result.is_valid
        assert result.error_message == "Cell 4 (1, 1) is already occupied by X"

    @pytest.mark.parametrize("index", [-1, 9, 42, "3", None, 2.0])
    def test_off_board(self, validator, index):
        result = validator.validate_move(Snapshot(), index)
        assert not result.is_valid
        assert "Must be 0-8" in result.error_message

    @pytest.mark.parametrize("phase", [Phase.WON, Phase.DRAW])
    def test_game_over(self, validator, phase):
        result = validator.validate_move(Snapshot(phase=phase), 0)
        assert not result.is_valid
        assert result.error_message == "Game is already over!"


class TestValidMoves:
    def test_all_cells_at_start(self, validator):
        assert validator.get_valid_moves(Snapshot()) == list(range(9))

    def test_skips_occupied(self, validator):
        board = (Mark.X, Mark.O) + (None,) * 7
        assert validator.get_valid_moves(Snapshot(board=board)) == list(range(2, 9))

    def test_none_after_game_over(self, validator):
        assert validator.get_valid_moves(Snapshot(phase=Phase.WON)) == []
