"""
Board Module

Position representation and move handling for the 3x3 board.

Key Components:
    - Mark: Square state / player identity (FIRST = X, SECOND = O, EMPTY)
    - Position: Squares plus side to move
    - generate_moves: Empty squares in ascending order
    - apply_move / undo_move: In-place move making, strictly nested

Data Flow:
    Position → generate_moves() → [0..8] → apply_move() → search → undo_move()
"""

from simtic.board.position import (
    Mark,
    Position,
    SQUARES_MAX,
    WINNING_LINES,
    new_position,
    generate_moves,
    apply_move,
    undo_move,
)

__all__ = [
    'Mark',
    'Position',
    'SQUARES_MAX',
    'WINNING_LINES',
    'new_position',
    'generate_moves',
    'apply_move',
    'undo_move',
]
