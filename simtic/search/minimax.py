"""
Minimax Search

This module implements the search for the engine. The game tree is tiny
(at most 9! move sequences), so the search is plain exhaustive minimax with
no pruning and no caching.

Key Concepts:
    - Scores are always from X's perspective: X maximizes, O minimizes
    - Positions are walked with apply_move()/undo_move() rather than copied,
      so every apply is undone before the next sibling is tried
    - depth bounds the horizon: 9 = perfect play, 3 = medium, 1 = easy

References:
    - Minimax: https://www.chessprogramming.org/Minimax
"""

import logging
from typing import Optional, Tuple

from simtic.board.position import Mark, Position, generate_moves, apply_move, undo_move
from simtic.evaluation.base import Evaluator, WIN_SCORE
from simtic.evaluation.threats import ThreatEvaluator

logger = logging.getLogger(__name__)

_default_evaluator = ThreatEvaluator()

# Number of minimax() calls since the last reset; reported to verify the
# difficulty levels.
_nodecount = 0


def node_count() -> int:
    """Nodes searched since the last reset_node_count()."""
    return _nodecount


def reset_node_count() -> None:
    global _nodecount
    _nodecount = 0


def minimax(position: Position, depth: int, evaluator: Optional[Evaluator] = None) -> int:
    """
    Score a position by searching `depth` plies ahead.

    Args:
        position: Position to score (mutated during search, restored on return)
        depth: Remaining plies before falling back to the evaluator
        evaluator: Horizon evaluator (default: ThreatEvaluator)

    Returns:
        int: Score from X's perspective, WIN_SCORE/-WIN_SCORE for a forced
        win/loss within the horizon, 0 for a draw

    Algorithm:
        1. Won or full board → terminal score
        2. depth = 0 → evaluator score, negated when O is to move
        3. Otherwise try every move and keep the max (X) or min (O)
    """
    global _nodecount
    _nodecount += 1

    if evaluator is None:
        evaluator = _default_evaluator

    terminal_score = evaluator.evaluate_terminal(position)
    if terminal_score is not None:
        return terminal_score

    white_to_move = position.side_to_move == Mark.FIRST

    # Horizon reached: the evaluator speaks for the side to move
    if depth == 0:
        score = evaluator.evaluate(position)
        return score if white_to_move else -score

    best = -WIN_SCORE if white_to_move else WIN_SCORE
    for move in generate_moves(position):
        apply_move(position, move)
        score = minimax(position, depth - 1, evaluator)
        undo_move(position, move)

        if white_to_move:
            best = max(best, score)
        else:
            best = min(best, score)

    return best


def pick_move(
    position: Position,
    depth: int,
    evaluator: Optional[Evaluator] = None,
) -> Tuple[int, int]:
    """
    Find the best move for the side to move.

    Every legal move is played and scored with minimax(). Ties keep the
    earliest square, and if no move beats the worst possible score the
    first legal move is returned.

    Args:
        position: Current position (left unchanged on return)
        depth: Search depth below each candidate move
        evaluator: Horizon evaluator (default: ThreatEvaluator)

    Returns:
        Tuple of (move, nodes_searched)

    Raises:
        ValueError: If the board is full or depth is negative
    """
    if depth < 0:
        raise ValueError(f"Search depth must be non-negative, got {depth}")

    moves = generate_moves(position)
    if not moves:
        raise ValueError("No legal moves available")

    if evaluator is None:
        evaluator = _default_evaluator

    reset_node_count()

    maximizing = position.side_to_move == Mark.FIRST
    best_move = moves[0]
    best_score = -WIN_SCORE if maximizing else WIN_SCORE

    logger.debug(f"Possible moves: {' '.join(str(m) for m in moves)}")

    for move in moves:
        apply_move(position, move)
        score = minimax(position, depth, evaluator)
        undo_move(position, move)

        logger.debug(f"Move: {move}, Score: {score}")

        if maximizing:
            if score > best_score:
                best_score = score
                best_move = move
        else:
            if score < best_score:
                best_score = score
                best_move = move

    assert position.squares[best_move] == Mark.EMPTY

    nodes = node_count()
    logger.info(
        f"Search complete: side={position.side_to_move.name}, depth={depth}, "
        f"best_move={best_move}, score={best_score}, nodes={nodes}"
    )
    return best_move, nodes
