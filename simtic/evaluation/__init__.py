"""
Evaluation Module

Terminal detection and horizon evaluation. Evaluators are SWAPPABLE: the
search works with anything implementing the Evaluator interface.

Key Components:
    - is_won / is_draw / is_full: Terminal detection
    - Evaluator (ABC): Horizon evaluation interface
    - ThreatEvaluator: Threat-counting heuristic (default)

Data Flow:
    Position → evaluate_terminal() → ±WIN_SCORE / 0 / None
    Position → evaluate()          → int (side to move's perspective)
"""

from simtic.evaluation.base import Evaluator, WIN_SCORE, is_won, is_draw, is_full
from simtic.evaluation.threats import ThreatEvaluator, heuristic

__all__ = [
    'Evaluator',
    'ThreatEvaluator',
    'WIN_SCORE',
    'heuristic',
    'is_won',
    'is_draw',
    'is_full',
]
