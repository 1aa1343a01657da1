"""
Abstract Evaluator Interface

This module defines terminal detection and the abstract base class for
horizon evaluators. The search only talks to the Evaluator interface, so a
different heuristic can be dropped in without touching minimax.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() scores a position from the SIDE TO MOVE's perspective
    3. Terminal scores are from X's perspective: +WIN_SCORE = X has won
    4. is_won() always runs before anything else, since a won position
       short-circuits all deeper search
"""

from abc import ABC, abstractmethod
from typing import Optional

from simtic.board.position import Mark, Position, WINNING_LINES

# The best possible score for a given position
WIN_SCORE = 100


def is_won(position: Position) -> bool:
    """
    Check if the side that just moved has three in a row.

    The last mover is the opposite of side_to_move, since side_to_move has
    already advanced past it.
    """
    last_mover = position.side_to_move.opponent
    sq = position.squares
    for a, b, c in WINNING_LINES:
        if sq[a] == last_mover and sq[b] == last_mover and sq[c] == last_mover:
            return True
    return False


def is_full(position: Position) -> bool:
    """True if no empty square is left."""
    return Mark.EMPTY not in position.squares


def is_draw(position: Position) -> bool:
    """True if the board is full and nobody has won."""
    return is_full(position) and not is_won(position)


class Evaluator(ABC):
    """
    Abstract base class for horizon evaluation.

    Subclasses implement evaluate(); the terminal helpers are shared.
    """

    @abstractmethod
    def evaluate(self, position: Position) -> int:
        """
        Score a non-terminal position at the search horizon.

        Args:
            position: Position that is neither won nor full

        Returns:
            int: Score from the side to move's perspective
        """
        pass

    def evaluate_terminal(self, position: Position) -> Optional[int]:
        """
        Evaluate terminal positions (win or full board).

        Returns:
            -WIN_SCORE if O just won, +WIN_SCORE if X just won, 0 for a
            draw, None if the game is still going
        """
        if is_won(position):
            # X to move means O made the winning move
            return -WIN_SCORE if position.side_to_move == Mark.FIRST else WIN_SCORE

        if is_full(position):
            return 0

        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
