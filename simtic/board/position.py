"""
Board Position and Move Handling

This module holds the tic-tac-toe position and the operations that walk the
game tree: move generation plus a matched apply/undo pair.

Board Layout:
    0 | 1 | 2
    ---------
    3 | 4 | 5
    ---------
    6 | 7 | 8

Conventions:
    - X is the FIRST player and always moves first (like White in chess)
    - A move is the index (0-8) of the empty square to fill
    - apply_move() and undo_move() mutate the position in place and must be
      called in strict nested order; nothing else writes to squares
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List

SQUARES_MAX = 9  # Total number of squares on the board

# All winning three-in-a-row combinations
WINNING_LINES = (
    # rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class Mark(IntEnum):
    """State of a square, or the player that owns a mark."""

    FIRST = 0
    SECOND = 1
    EMPTY = 2

    @property
    def opponent(self) -> "Mark":
        """The other player's mark."""
        if self is Mark.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Mark.SECOND if self is Mark.FIRST else Mark.FIRST

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {Mark.FIRST: "X", Mark.SECOND: "O", Mark.EMPTY: "."}
_PARSE = {"X": Mark.FIRST, "O": Mark.SECOND, ".": Mark.EMPTY}


@dataclass
class Position:
    """
    Board squares plus the side that makes the next move.

    Attributes:
        squares: 9 Marks, indexed 0-8 row by row
        side_to_move: Mark that will be placed next
    """

    squares: List[Mark] = field(default_factory=lambda: [Mark.EMPTY] * SQUARES_MAX)
    side_to_move: Mark = Mark.FIRST

    @classmethod
    def from_string(cls, text: str) -> "Position":
        """
        Build a position from its 9-character form, e.g. "XX.OO....".

        Whitespace and "/" separators are ignored so "XX./OO./..." also
        parses. The side to move is inferred from the mark counts.

        Raises:
            ValueError: If the string is malformed or the counts are not
                reachable with X moving first
        """
        cells = [c for c in text.upper() if not c.isspace() and c != "/"]
        if len(cells) != SQUARES_MAX:
            raise ValueError(f"Expected {SQUARES_MAX} squares, got {len(cells)}: {text!r}")

        try:
            squares = [_PARSE[c] for c in cells]
        except KeyError as e:
            raise ValueError(f"Invalid square character {e.args[0]!r} in {text!r}") from None

        x_count = squares.count(Mark.FIRST)
        o_count = squares.count(Mark.SECOND)
        if x_count == o_count:
            side = Mark.FIRST
        elif x_count == o_count + 1:
            side = Mark.SECOND
        else:
            raise ValueError(
                f"Unreachable position {text!r}: {x_count} X against {o_count} O"
            )

        return cls(squares, side)

    def copy(self) -> "Position":
        """Return an independent copy (squares list is not shared)."""
        return Position(list(self.squares), self.side_to_move)

    def render(self) -> str:
        """Framed ASCII board, one row per line."""
        border = "+---+---+---+"
        lines = [border]
        for row in range(3):
            cells = []
            for sq in self.squares[row * 3:row * 3 + 3]:
                cells.append(" " if sq == Mark.EMPTY else Mark(sq).symbol)
            lines.append("| " + " | ".join(cells) + " |")
            lines.append(border)
        return "\n".join(lines)

    def __str__(self) -> str:
        return "".join(Mark(sq).symbol for sq in self.squares)


def new_position() -> Position:
    """Empty board with X to move."""
    return Position()


def generate_moves(position: Position) -> List[int]:
    """
    Generate all legal moves: the empty squares, in ascending order.

    Args:
        position: Position to generate moves for

    Returns:
        Fresh list of square indices (empty if the board is full)
    """
    return [i for i, sq in enumerate(position.squares) if sq == Mark.EMPTY]


def apply_move(position: Position, move: int) -> None:
    """
    Place the side to move's mark on `move` and pass the turn.

    Raises:
        ValueError: If the square is off the board or already taken
    """
    if not 0 <= move < SQUARES_MAX:
        raise ValueError(f"Square {move} is off the board")
    if position.squares[move] != Mark.EMPTY:
        raise ValueError(f"Square {move} is already taken")

    position.squares[move] = position.side_to_move
    position.side_to_move = position.side_to_move.opponent


def undo_move(position: Position, move: int) -> None:
    """
    Take back `move`, which must be the last move applied.

    Raises:
        ValueError: If `move` does not hold the mark of the side that just
            moved (undo out of order)
    """
    if not 0 <= move < SQUARES_MAX:
        raise ValueError(f"Square {move} is off the board")
    last_mover = position.side_to_move.opponent
    if position.squares[move] != last_mover:
        raise ValueError(f"Square {move} was not the last move played")

    position.squares[move] = Mark.EMPTY
    position.side_to_move = last_mover
