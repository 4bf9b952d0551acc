"""Tests for marks, phases, the score tally and snapshots."""

import dataclasses
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from engine.game_state import (
    Mark, Phase, ScoreTally, Snapshot, EMPTY_BOARD,
    is_valid_index, index_to_cell, cell_to_index
)

X, O = Mark.X, Mark.O


class TestMark:
    def test_opposite(self):
        assert X.opposite() is O
        assert O.opposite() is X

    def test_values(self):
        assert Mark("X") is X
        assert Mark("O") is O


class TestPhase:
    def test_terminal_phases(self):
        assert not Phase.IN_PROGRESS.is_terminal
        assert Phase.WON.is_terminal
        assert Phase.DRAW.is_terminal


class TestBoardIndices:
    @pytest.mark.parametrize("index,cell", [
        (0, (0, 0)), (2, (0, 2)), (3, (1, 0)), (4, (1, 1)), (8, (2, 2)),
    ])
    def test_index_to_cell(self, index, cell):
        assert index_to_cell(index) == cell
        assert cell_to_index(*cell) == index

    @pytest.mark.parametrize("index", [-1, 9, 100, 1.0, "4", None, True])
    def test_invalid_indices(self, index):
        assert not is_valid_index(index)

    def test_all_cells_valid(self):
        assert all(is_valid_index(i) for i in range(9))

    def test_index_to_cell_rejects_off_board(self):
        with pytest.raises(ValueError):
            index_to_cell(9)

    def test_cell_to_index_rejects_off_board(self):
        with pytest.raises(ValueError):
            cell_to_index(3, 0)


class TestScoreTally:
    def test_starts_at_zero(self):
        score = ScoreTally()
        assert (score.x_wins, score.o_wins, score.draws) == (0, 0, 0)
        assert score.games_played == 0

    def test_record_win_per_mark(self):
        score = ScoreTally().record_win(X).record_win(X).record_win(O)
        assert score.x_wins == 2
        assert score.o_wins == 1
        assert score.wins_for(X) == 2
        assert score.wins_for(O) == 1

    def test_record_draw(self):
        score = ScoreTally().record_draw()
        assert score.draws == 1
        assert score.games_played == 1

    def test_records_return_new_tally(self):
        score = ScoreTally()
        score.record_win(X)
        assert score == ScoreTally()

    def test_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ScoreTally().x_wins = 5


class TestSnapshot:
    def test_initial_snapshot(self):
        snapshot = Snapshot()
        assert snapshot.board == EMPTY_BOARD
        assert len(snapshot.board) == 9
        assert snapshot.turn is X
        assert snapshot.phase == Phase.IN_PROGRESS
        assert snapshot.outcome is None
        assert snapshot.winning_line == ()
        assert snapshot.last_move is None
        assert snapshot.score == ScoreTally()
        assert not snapshot.is_game_over
        assert snapshot.move_count == 0

    def test_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Snapshot().turn = O

    def test_empty_cells_and_lookup(self):
        board = (X, None, None, None, O, None, None, None, None)
        snapshot = Snapshot(board=board, turn=X, last_move=4)
        assert snapshot.empty_cells() == [1, 2, 3, 5, 6, 7, 8]
        assert snapshot.cell(0, 0) is X
        assert snapshot.cell(1, 1) is O
        assert snapshot.cell(2, 2) is None
        assert snapshot.move_count == 2
        assert snapshot.is_last_move(4)
        assert not snapshot.is_last_move(0)

    def test_status_messages(self):
        assert Snapshot().status_message() == "Player X's Turn"
        assert Snapshot(turn=O).status_message() == "Player O's Turn"
        won = Snapshot(phase=Phase.WON, outcome=O, winning_line=(0, 4, 8))
        assert won.status_message() == "Player O Wins!"
        assert won.is_winning_cell(4)
        assert not won.is_winning_cell(1)
        assert Snapshot(phase=Phase.DRAW).status_message() == "It's a Draw!"

    def test_render_marks_win_and_last_move(self):
        board = (X, X, X, O, O, None, None, None, None)
        snapshot = Snapshot(
            board=board, phase=Phase.WON, outcome=X,
            winning_line=(0, 1, 2), last_move=2
        )
        text = snapshot.render()
        lines = text.splitlines()
        assert lines[1] == "│[X]│[X]│[X]│"
        assert lines[3] == "│ O │ O │ 5 │"
        assert lines[-1] == "Player X Wins!"

    def test_render_last_move_and_hidden_indices(self):
        board = (None, None, None, None, X, None, None, None, None)
        text = Snapshot(board=board, turn=O, last_move=4).render(show_indices=False)
        lines = text.splitlines()
        assert lines[1] == "│   │   │   │"
        assert lines[3] == "│   │ X*│   │"
