"""
Engine Testing and Benchmarking

This module provides a tactical test suite and an engine-vs-engine harness
for checking how each difficulty level plays.

Test Suites:
    1. Tactical positions: small set of positions with a known answer
       - Win in one (complete a line)
       - Forced block (stop the opponent's line)
       - Win by fork

    2. Self-play: two search depths play a full game, optionally from a
       forced opening square. Depth 9 against depth 9 must always draw.

Evaluation Metrics:
    - Correct Moves: Number of positions where the engine found a best move
    - Nodes Searched: minimax() calls per move
    - Results: wins / draws / losses per depth pairing
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from simtic.board.position import Mark, Position, new_position, apply_move
from simtic.evaluation.base import Evaluator, is_won, is_full
from simtic.search.minimax import pick_move


@dataclass
class TacticalPosition:
    """
    A test position with expected best move(s).

    Attributes:
        board: Position in 9-character form ("XX.OO....")
        best_moves: Acceptable answers (square indices)
        description: Human-readable description of the position
        id: Position identifier (e.g., "TT.01")
    """
    board: str
    best_moves: List[int]
    description: str = ""
    id: str = ""


@dataclass
class TacticalResult:
    """
    Result of testing a single position.

    Attributes:
        position: The test position
        found_move: Move the engine found
        correct: Whether the engine found a best move
        time_taken: Time spent searching (seconds)
        nodes_searched: Number of nodes evaluated
        depth: Search depth used
    """
    position: TacticalPosition
    found_move: int
    correct: bool
    time_taken: float
    nodes_searched: int = 0
    depth: int = 0


@dataclass
class GameRecord:
    """
    One engine-vs-engine game.

    Attributes:
        depth_first: Search depth used by X
        depth_second: Search depth used by O
        moves: Squares played, in order
        winner: Mark of the winner, None for a draw
        nodes: Nodes searched for each engine move (forced opening excluded)
    """
    depth_first: int
    depth_second: int
    moves: List[int] = field(default_factory=list)
    winner: Optional[Mark] = None
    nodes: List[int] = field(default_factory=list)


# ============================================================================
# Tactical Test Suite
# ============================================================================

TACTICAL_POSITIONS = [
    TacticalPosition(
        id="TT.01",
        board="XX.OO....",
        best_moves=[2],
        description="X completes the top row before O completes the middle row",
    ),
    TacticalPosition(
        id="TT.02",
        board="XOX.O.X..",
        best_moves=[3, 7],
        description="O wins down the middle column or forks with 3",
    ),
    TacticalPosition(
        id="TT.03",
        board="X...O.OX.",
        best_moves=[2],
        description="X must block the 2-4-6 diagonal",
    ),
    TacticalPosition(
        id="TT.04",
        board="O.X.OX...",
        best_moves=[8],
        description="X wins down the right column instead of blocking",
    ),
]


def evaluate_position(
    position: TacticalPosition,
    depth: int,
    evaluator: Optional[Evaluator] = None,
    verbose: bool = False,
) -> TacticalResult:
    """
    Evaluate a single test position.

    Args:
        position: Test position to evaluate
        depth: Search depth
        evaluator: Horizon evaluator (default: ThreatEvaluator)
        verbose: If True, print detailed output

    Returns:
        TacticalResult with engine's move and whether it was correct
    """
    board = Position.from_string(position.board)

    if verbose:
        print(f"\nTesting {position.id}: {position.description}")
        print(board.render())
        print(f"Expected moves: {position.best_moves}")

    start_time = time.time()
    best_move, nodes = pick_move(board, depth, evaluator)
    time_taken = time.time() - start_time

    correct = best_move in position.best_moves

    if verbose:
        print(f"Engine found: {best_move}")
        print(f"Nodes searched: {nodes:,}")
        print(f"Time: {time_taken:.3f}s")
        print(f"Result: {'CORRECT' if correct else 'WRONG'}")

    return TacticalResult(
        position=position,
        found_move=best_move,
        correct=correct,
        time_taken=time_taken,
        nodes_searched=nodes,
        depth=depth,
    )


def run_tactics(
    depth: int = 9,
    evaluator: Optional[Evaluator] = None,
    verbose: bool = True,
) -> Dict[str, Any]:
    """
    Run the tactical test suite.

    Args:
        depth: Search depth (default: 9)
        evaluator: Horizon evaluator (default: ThreatEvaluator)
        verbose: If True, print detailed results

    Returns:
        Dictionary with test results:
            - score: Number of correct positions
            - total: Total number of positions
            - percentage: Success percentage
            - results: List of TacticalResult objects
            - avg_time: Average time per position
            - total_time: Time for the whole suite
    """
    if verbose:
        print("=" * 70)
        print("TACTICAL TEST SUITE")
        print("=" * 70)

    results = [
        evaluate_position(position, depth, evaluator, verbose=verbose)
        for position in TACTICAL_POSITIONS
    ]
    correct_count = sum(1 for r in results if r.correct)
    total_time = sum(r.time_taken for r in results)

    total = len(TACTICAL_POSITIONS)
    avg_time = total_time / total if total else 0
    percentage = (correct_count / total * 100) if total else 0

    if verbose:
        print("\n" + "=" * 70)
        print("SUMMARY")
        print("=" * 70)
        print(f"Score: {correct_count}/{total} ({percentage:.1f}%)")
        print(f"Average time: {avg_time:.3f}s")

    return {
        'score': correct_count,
        'total': total,
        'percentage': percentage,
        'results': results,
        'avg_time': avg_time,
        'total_time': total_time,
    }


# ============================================================================
# Self-Play
# ============================================================================

def play_game(
    depth_first: int,
    depth_second: int,
    opening: Optional[int] = None,
    evaluator: Optional[Evaluator] = None,
) -> GameRecord:
    """
    Let the engine play itself from the empty board.

    Args:
        depth_first: Search depth for X
        depth_second: Search depth for O
        opening: If given, X's first move is forced to this square
        evaluator: Horizon evaluator for both sides (default: ThreatEvaluator)

    Returns:
        GameRecord with the moves, winner and node counts
    """
    record = GameRecord(depth_first=depth_first, depth_second=depth_second)
    position = new_position()

    if opening is not None:
        apply_move(position, opening)
        record.moves.append(opening)

    while not is_won(position) and not is_full(position):
        depth = depth_first if position.side_to_move == Mark.FIRST else depth_second
        move, nodes = pick_move(position, depth, evaluator)
        apply_move(position, move)
        record.moves.append(move)
        record.nodes.append(nodes)

    if is_won(position):
        record.winner = position.side_to_move.opponent

    return record


def summarize_games(records: Sequence[GameRecord]) -> Dict[str, Any]:
    """
    Aggregate results and search effort over a batch of games.

    Returns:
        Dictionary with:
            - games: Number of games
            - first_wins / second_wins / draws: Result counts
            - mean_nodes / max_nodes: Nodes per engine move
            - mean_length: Average number of plies
    """
    winners = [r.winner for r in records]
    nodes = np.array([n for r in records for n in r.nodes], dtype=np.int64)
    lengths = np.array([len(r.moves) for r in records], dtype=np.float64)

    return {
        'games': len(records),
        'first_wins': winners.count(Mark.FIRST),
        'second_wins': winners.count(Mark.SECOND),
        'draws': winners.count(None),
        'mean_nodes': float(nodes.mean()) if nodes.size else 0.0,
        'max_nodes': int(nodes.max()) if nodes.size else 0,
        'mean_length': float(lengths.mean()) if lengths.size else 0.0,
    }
