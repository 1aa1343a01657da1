"""
Unit Tests for Evaluation Module

Tests for terminal detection and horizon evaluation, focusing on:
    - Win detection on all 8 lines, only for the side that just moved
    - Draw detection on full boards
    - Threat heuristic from the side to move's perspective
    - Terminal scores from X's perspective
"""

import pytest
from simtic.board import Mark, Position, WINNING_LINES, SQUARES_MAX
from simtic.evaluation import (
    Evaluator,
    ThreatEvaluator,
    WIN_SCORE,
    heuristic,
    is_won,
    is_draw,
    is_full,
)


def position_with_line(line, mark):
    """Board holding only `line` for `mark`, with the other side to move."""
    squares = [Mark.EMPTY] * SQUARES_MAX
    for i in line:
        squares[i] = mark
    return Position(squares, mark.opponent)


class TestTerminalDetection:
    """Tests for is_won(), is_draw() and is_full()."""

    @pytest.mark.parametrize("line", WINNING_LINES)
    def test_every_line_wins_for_x(self, line):
        assert is_won(position_with_line(line, Mark.FIRST))

    @pytest.mark.parametrize("line", WINNING_LINES)
    def test_every_line_wins_for_o(self, line):
        assert is_won(position_with_line(line, Mark.SECOND))

    def test_top_row_wins_regardless_of_o(self):
        position = Position.from_string("XXXOO....")

        assert position.side_to_move == Mark.SECOND
        assert is_won(position)

    def test_only_last_mover_can_have_won(self):
        position = position_with_line((0, 1, 2), Mark.FIRST)
        position.side_to_move = Mark.FIRST

        assert not is_won(position)

    def test_o_wins_middle_row(self):
        position = Position.from_string("XX.OOOX..")
        assert is_won(position)

    def test_no_win_on_empty_board(self):
        assert not is_won(Position())

    def test_two_in_a_row_is_not_a_win(self):
        assert not is_won(Position.from_string("XX.OO.X.."))

    def test_draw(self):
        position = Position.from_string("XOXXOOOXX")

        assert is_full(position)
        assert not is_won(position)
        assert is_draw(position)

    def test_full_board_with_winner_is_not_draw(self):
        position = Position.from_string("XXXOOXOXO")

        assert is_full(position)
        assert is_won(position)
        assert not is_draw(position)

    def test_unfinished_game_is_not_draw(self):
        assert not is_draw(Position.from_string("XOX.O.X.."))


class TestHeuristic:
    """Tests for the threat-counting heuristic."""

    def test_empty_board_scores_zero(self):
        assert heuristic(Position()) == 0

    def test_open_two_scores_plus_one(self):
        # X holds 0 and 4, 8 is still open
        position = Position.from_string("X.O.X.O..")
        assert position.side_to_move == Mark.FIRST
        assert heuristic(position) == 1

    def test_blocked_two_scores_minus_one(self):
        # X holds 0 and 1 but O sits on 2
        position = Position.from_string("XXO..O...")
        assert position.side_to_move == Mark.FIRST
        assert heuristic(position) == -1

    def test_scored_for_side_to_move_only(self):
        # X has an open two, but it is O's turn and O has none
        position = Position.from_string("XX...O...")
        assert position.side_to_move == Mark.SECOND
        assert heuristic(position) == 0

    def test_o_to_move_counts_o_lines(self):
        # O holds 2 and 5 with 8 open; X's open 0-3-6 is ignored
        position = Position.from_string("X.OX.O.X.")
        assert position.side_to_move == Mark.SECOND
        assert heuristic(position) == 1

    def test_three_open_lines(self):
        # X holds 0, 3 and 4: 0-3-6, 3-4-5 and 0-4-8 each need one more
        position = Position.from_string("XOOXX..O.")
        assert position.side_to_move == Mark.FIRST
        assert heuristic(position) == 3

    def test_open_and_blocked_lines_net_out(self):
        # 0-4-8 and 2-4-6 are open, 0-1-2 is blocked by O
        position = Position.from_string("XOXOX..O.")
        assert position.side_to_move == Mark.FIRST
        assert heuristic(position) == 1


class TestEvaluator:
    """Tests for the Evaluator interface."""

    @pytest.fixture
    def evaluator(self):
        return ThreatEvaluator()

    def test_abstract_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            Evaluator()

    def test_evaluate_matches_heuristic(self, evaluator):
        for text in ["XXO..O...", "X.OX.O.X.", "X.O.X.O..", "........."]:
            position = Position.from_string(text)
            assert evaluator.evaluate(position) == heuristic(position)

    def test_terminal_x_win(self, evaluator):
        assert evaluator.evaluate_terminal(Position.from_string("XXXOO....")) == WIN_SCORE

    def test_terminal_o_win(self, evaluator):
        assert evaluator.evaluate_terminal(Position.from_string("XX.OOOX..")) == -WIN_SCORE

    def test_terminal_draw(self, evaluator):
        assert evaluator.evaluate_terminal(Position.from_string("XOXXOOOXX")) == 0

    def test_non_terminal(self, evaluator):
        assert evaluator.evaluate_terminal(Position.from_string("XOX.O.X..")) is None

    def test_repr(self, evaluator):
        assert repr(evaluator) == "ThreatEvaluator()"
