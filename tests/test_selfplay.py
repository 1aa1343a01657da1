"""
Unit Tests for Utilities Module

Tests for the tactical suite and engine-vs-engine self-play.
"""

import pytest
from simtic.board import Mark, Position, generate_moves
from simtic.utils import (
    TACTICAL_POSITIONS,
    GameRecord,
    evaluate_position,
    run_tactics,
    play_game,
    summarize_games,
)


class TestTacticalSuite:
    """Tests for the tactical positions and runner."""

    def test_positions_are_valid(self):
        for tp in TACTICAL_POSITIONS:
            position = Position.from_string(tp.board)
            moves = generate_moves(position)

            assert tp.best_moves, f"{tp.id} has no answer"
            assert all(m in moves for m in tp.best_moves), f"{tp.id} answer is not legal"

    @pytest.mark.parametrize("depth", [1, 3, 9])
    def test_suite_solved(self, depth):
        result = run_tactics(depth=depth, verbose=False)

        assert result['total'] == len(TACTICAL_POSITIONS)
        assert result['score'] == result['total'], [
            (r.position.id, r.found_move) for r in result['results'] if not r.correct
        ]
        assert result['percentage'] == 100.0

    def test_evaluate_position_verbose(self, capsys):
        result = evaluate_position(TACTICAL_POSITIONS[0], depth=1, verbose=True)

        out = capsys.readouterr().out
        assert "TT.01" in out
        assert "CORRECT" in out
        assert result.correct
        assert result.nodes_searched > 0
        assert result.depth == 1


class TestSelfPlay:
    """Tests for play_game() and summarize_games()."""

    def test_perfect_play_draws(self):
        record = play_game(9, 9)

        assert record.winner is None
        assert len(record.moves) == 9
        assert len(record.nodes) == 9

    def test_hard_never_loses_to_easy(self):
        for opening in (0, 1, 4):
            record = play_game(1, 9, opening=opening)
            assert record.winner != Mark.FIRST, record.moves

    def test_forced_opening(self):
        record = play_game(1, 1, opening=4)

        assert record.moves[0] == 4
        assert len(record.nodes) == len(record.moves) - 1
        assert len(set(record.moves)) == len(record.moves)

    def test_summarize(self):
        records = [
            GameRecord(1, 1, moves=[0, 3, 1, 4, 2], winner=Mark.FIRST, nodes=[10, 20, 30, 40, 50]),
            GameRecord(1, 1, moves=list(range(9)), winner=None, nodes=[5] * 9),
            GameRecord(1, 1, moves=[0, 3, 1, 4, 8, 5], winner=Mark.SECOND, nodes=[1, 1, 1, 1, 1, 1]),
        ]

        summary = summarize_games(records)

        assert summary['games'] == 3
        assert summary['first_wins'] == 1
        assert summary['second_wins'] == 1
        assert summary['draws'] == 1
        assert summary['max_nodes'] == 50
        assert summary['mean_nodes'] == pytest.approx((150 + 45 + 6) / 20)
        assert summary['mean_length'] == pytest.approx(20 / 3)

    def test_summarize_empty(self):
        summary = summarize_games([])

        assert summary['games'] == 0
        assert summary['mean_nodes'] == 0.0
