"""
Console Interface

Text front end for playing against the engine. It is a thin shell around
simtic.search: all it does is ask questions, print boards and hand the
position to pick_move() when the engine is to move.

Menu Flow:
    Engine → "Would you like to move first? (y/n)"
    Engine → "Choose difficulty ([h]ard/[m]edium/[e]asy)"
    Human  → "Enter square 0 - 8"
    Engine → "After examining N nodes, best move is: M"
    Engine → "Play again? (y/n)"

Difficulty:
    hard = depth 9 (perfect play), medium = depth 3, easy = depth 1
"""

from simtic.console.config import GameConfig, DIFFICULTY_DEPTHS, depth_for
from simtic.console.interface import ConsoleGame, State, setup_logger

__all__ = ['ConsoleGame', 'State', 'GameConfig', 'DIFFICULTY_DEPTHS', 'depth_for', 'setup_logger']
