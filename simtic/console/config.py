"""
Game configuration for the console shell.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Search depth for each difficulty level
DIFFICULTY_DEPTHS = {
    "hard": 9,
    "medium": 3,
    "easy": 1,
}


def resolve_difficulty(difficulty: str) -> str:
    """
    Map a difficulty name or its first letter ("h", "m", "e") to its name.

    Raises:
        ValueError: If the name is not a known difficulty
    """
    key = difficulty.strip().lower()
    for name in DIFFICULTY_DEPTHS:
        if key and name.startswith(key):
            return name
    raise ValueError(
        f"difficulty should be one of {', '.join(DIFFICULTY_DEPTHS)}, got {difficulty!r}"
    )


def depth_for(difficulty: str) -> int:
    """Search depth for a difficulty name or its first letter."""
    return DIFFICULTY_DEPTHS[resolve_difficulty(difficulty)]


@dataclass
class GameConfig:
    """Settings the shell passes to the engine.

    Answers left as None are asked for interactively.
    """

    human_first: Optional[bool] = None
    """True if the human plays X; None to ask"""

    difficulty: Optional[str] = None
    """Difficulty name (hard, medium or easy); None to ask"""

    self_play: bool = False
    """Let the engine play both sides"""

    debug: bool = False
    """Log at DEBUG level instead of INFO"""

    log_dir: Path = field(default_factory=lambda: Path.home() / ".simtic")
    """Directory for engine.log"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.log_dir = Path(self.log_dir)

        if self.difficulty is not None:
            self.difficulty = resolve_difficulty(self.difficulty)

    @property
    def depth(self) -> Optional[int]:
        """Search depth for the configured difficulty."""
        if self.difficulty is None:
            return None
        return DIFFICULTY_DEPTHS[self.difficulty]
