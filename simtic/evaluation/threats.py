"""
Threat Counting Evaluation

Scores a position by how many near-term three-in-a-row threats the side to
move has, net of the opponent's blockers. This is the only evaluation used
at the search horizon, so it decides how the "easy" and "medium" levels play.

For every winning line where the side to move holds at least two squares:
    +1 for each empty square left in the line
    -1 for each square held by the opponent

The score is always from the side to move's perspective; minimax flips the
sign for O so that positive still means good for X.
"""

from simtic.board.position import Mark, Position, WINNING_LINES
from simtic.evaluation.base import Evaluator


def heuristic(position: Position) -> int:
    """Net threat count for the side to move."""
    us = position.side_to_move
    them = us.opponent
    sq = position.squares
    points = 0

    for line in WINNING_LINES:
        ours = sum(1 for i in line if sq[i] == us)
        if ours < 2:
            continue
        for i in line:
            if sq[i] == Mark.EMPTY:
                points += 1
            elif sq[i] == them:
                points -= 1

    return points


class ThreatEvaluator(Evaluator):
    """Default evaluator: counts open lines where we already hold two squares."""

    def evaluate(self, position: Position) -> int:
        return heuristic(position)
