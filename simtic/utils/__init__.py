"""
Utilities Module

This module provides utility functions for testing and benchmarking the
engine.

Key Components:
    - Tactical suite: positions with a known best move
    - Self-play: engine against engine at chosen depths
    - summarize_games: result and node statistics over many games

Success Metrics:
    - Tactical suite: 4/4 at depth 1 and above
    - Self-play: depth 9 against depth 9 always draws
"""

from simtic.utils.testing import (
    TACTICAL_POSITIONS,
    GameRecord,
    evaluate_position,
    run_tactics,
    play_game,
    summarize_games,
)

__all__ = [
    'TACTICAL_POSITIONS',
    'GameRecord',
    'evaluate_position',
    'run_tactics',
    'play_game',
    'summarize_games',
]
