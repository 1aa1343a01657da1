"""
Simtic Tic-Tac-Toe Engine

A tic-tac-toe player that picks its moves with exhaustive minimax search.

## Architecture

The engine is organized into several key modules:

1. **board**: Position representation and move handling
   - 9 squares plus side to move, X moves first
   - Move generation and in-place apply/undo

2. **evaluation**: Position evaluation functions
   - Terminal detection (won / draw)
   - Abstract Evaluator interface (swappable design)
   - ThreatEvaluator: counts open two-in-a-row lines

3. **search**: Search algorithms
   - Depth-bounded minimax without pruning
   - Root move selection with a diagnostic node counter

4. **console**: Text game shell
   - Menu state machine (side, difficulty, play, replay)
   - File-based logging

5. **utils**: Testing and benchmarking utilities
   - Tactical test positions
   - Engine-vs-engine self-play

## Quick Start

```python
from simtic import new_position, apply_move, pick_move

position = new_position()
apply_move(position, 4)

move, nodes = pick_move(position, depth=9)
print(f"Best move: {move} after {nodes} nodes")
```

### As a Console Game

```bash
python -m simtic.console
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "GPL-3.0-or-later"

from simtic.board import (
    Mark,
    Position,
    new_position,
    generate_moves,
    apply_move,
    undo_move,
)
from simtic.evaluation import (
    Evaluator,
    ThreatEvaluator,
    WIN_SCORE,
    heuristic,
    is_won,
    is_draw,
)
from simtic.search import minimax, pick_move

__all__ = [
    'Mark',
    'Position',
    'new_position',
    'generate_moves',
    'apply_move',
    'undo_move',
    'Evaluator',
    'ThreatEvaluator',
    'WIN_SCORE',
    'heuristic',
    'is_won',
    'is_draw',
    'minimax',
    'pick_move',
]
