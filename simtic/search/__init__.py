"""
Search Module

Exhaustive depth-bounded minimax over the tic-tac-toe game tree.

Key Components:
    - minimax: Recursive position scoring
    - pick_move: Root-level move selection, returns (move, nodes_searched)
    - node_count / reset_node_count: Diagnostic node counter
"""

from simtic.search.minimax import minimax, pick_move, node_count, reset_node_count

__all__ = ['minimax', 'pick_move', 'node_count', 'reset_node_count']
