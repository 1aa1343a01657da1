"""
Console Game Shell

This module implements the text front end: it asks who moves first and how
hard the engine should play, runs the game, and offers a replay. All of the
thinking happens in simtic.search; this shell only reads answers, prints
boards and calls pick_move() when it is the engine's turn.

Menu Flow (state machine):
    CHOOSE_SIDE → CHOOSE_DIFFICULTY → PLAY → REPLAY_PROMPT
                        ↑                          │
                        └──────── "y" ─────────────┤
                                                   └─ "n" → EXIT

Answers are read a line at a time; only the first character counts, so
"y", "yes" and "Y" are the same answer. End of input exits cleanly.
"""

import logging
import sys
from enum import Enum, auto
from pathlib import Path
from typing import Callable, Optional

from simtic.board.position import Mark, Position, new_position, generate_moves, apply_move
from simtic.console.config import GameConfig, DIFFICULTY_DEPTHS
from simtic.evaluation.base import is_won, is_full
from simtic.search.minimax import pick_move


def setup_logger(log_dir: Path, debug: bool = False) -> logging.Logger:
    """
    Setup file-based logger for engine debugging.

    Args:
        log_dir: Directory that will hold engine.log
        debug: If True, log at DEBUG level; otherwise INFO level

    Returns:
        Configured logger instance
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "engine.log"

    logger = logging.getLogger("simtic")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


class State(Enum):
    """Menu states of the console shell."""

    CHOOSE_SIDE = auto()
    CHOOSE_DIFFICULTY = auto()
    PLAY = auto()
    REPLAY_PROMPT = auto()
    EXIT = auto()


class ConsoleGame:
    """
    Interactive tic-tac-toe against the engine (or engine against itself).

    Attributes:
        config: Preset answers and logging settings
        human_first: True if the human plays X for the current game
        depth: Engine search depth for the current game
        logger: File logger
    """

    def __init__(self, config: Optional[GameConfig] = None, read: Optional[Callable[[], str]] = None):
        """
        Initialize the shell.

        Args:
            config: Game settings (default: ask everything)
            read: Line reader, raises EOFError at end of input (default: input)
        """
        self.config = config if config else GameConfig()
        self.read = read if read else input

        self.human_first = False
        self.depth = DIFFICULTY_DEPTHS["hard"]

        self.logger = setup_logger(self.config.log_dir, debug=self.config.debug)
        self.logger.info("=== Simtic Started ===")

    def run(self):
        """
        Main menu loop.

        Runs state handlers until one returns State.EXIT or input runs out.
        """
        handlers = {
            State.CHOOSE_SIDE: self.choose_side,
            State.CHOOSE_DIFFICULTY: self.choose_difficulty,
            State.PLAY: self.play,
            State.REPLAY_PROMPT: self.replay_prompt,
        }

        state = State.CHOOSE_SIDE
        print("\nStarting new game...")

        try:
            while state is not State.EXIT:
                self.logger.debug(f"State: {state.name}")
                state = handlers[state]()
        except EOFError:
            self.logger.info("EOF received, shutting down")
        except Exception as e:
            self.logger.error(f"Game error: {e}", exc_info=True)
            print(f"# Error: {e}", file=sys.stderr)
            raise

        print("\nGoodbye!")
        self.logger.info("=== Simtic Stopped ===")

    def ask(self, prompt: str) -> str:
        """Print a prompt and return the first character of the answer, lowercased."""
        print(prompt, end="", flush=True)
        answer = self.read().strip().lower()
        self.logger.debug(f">>> {answer!r}")
        return answer[:1]

    def choose_side(self) -> State:
        if self.config.self_play:
            self.human_first = False
            return State.CHOOSE_DIFFICULTY
        if self.config.human_first is not None:
            self.human_first = self.config.human_first
            return State.CHOOSE_DIFFICULTY

        answer = self.ask("\nWould you like to move first? (y/n) ")
        if answer == "y":
            self.human_first = True
        elif answer == "n":
            self.human_first = False
        else:
            return State.CHOOSE_SIDE
        return State.CHOOSE_DIFFICULTY

    def choose_difficulty(self) -> State:
        if self.config.depth is not None:
            self.depth = self.config.depth
            return State.PLAY

        answer = self.ask("\nChoose difficulty ([h]ard/[m]edium/[e]asy): ")
        for name, depth in DIFFICULTY_DEPTHS.items():
            if answer and name.startswith(answer):
                self.depth = depth
                return State.PLAY
        return State.CHOOSE_DIFFICULTY

    def play(self) -> State:
        self.play_game()
        return State.REPLAY_PROMPT

    def replay_prompt(self) -> State:
        answer = self.ask("\nPlay again? (y/n) ")
        if answer == "y":
            print("\nStarting new game...")
            return State.CHOOSE_SIDE
        if answer == "n":
            return State.EXIT
        return State.REPLAY_PROMPT

    def play_game(self) -> Optional[Mark]:
        """
        Play one game from the empty board.

        Returns:
            Mark of the winner, or None for a draw
        """
        position = new_position()
        human = self.human_first and not self.config.self_play
        winner = None

        self.logger.info(
            f"New game: human_first={self.human_first}, depth={self.depth}, "
            f"self_play={self.config.self_play}"
        )

        # Keep making moves until someone wins or the board fills up
        while not is_full(position):
            if human:
                move = self.human_move(position)
            else:
                move = self.engine_move(position)
            apply_move(position, move)

            if is_won(position):
                winner = position.side_to_move.opponent
                break

            if not self.config.self_play:
                human = not human

        print()
        print(position.render())
        if winner is None:
            print("Draw!")
            self.logger.info(f"Game drawn: {position}")
        else:
            print(f"{'White (X)' if winner == Mark.FIRST else 'Black (O)'} wins!")
            if not self.config.self_play:
                print(f"{'You' if human else 'AI'} won the game!")
            self.logger.info(f"Game won by {winner.symbol}: {position}")

        return winner

    def human_move(self, position: Position) -> int:
        """Prompt until the human names an empty square."""
        print()
        print(position.render())
        while True:
            print("Enter square 0 - 8: ", end="", flush=True)
            text = self.read().strip()
            self.logger.debug(f">>> {text!r}")

            if len(text) != 1 or text not in "012345678":
                continue

            square = int(text)
            if square in generate_moves(position):
                return square
            print("That square is taken.")

    def engine_move(self, position: Position) -> int:
        """Search for the engine's move and report it."""
        moves = generate_moves(position)
        print("Deciding best move... ")
        print(f"Possible moves: {' '.join(str(m) for m in moves)}")

        move, nodes = pick_move(position, self.depth)

        print(f"After examining {nodes} nodes, best move is: {move}")
        print(f"AI chose square {move}")
        return move
