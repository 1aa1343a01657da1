"""
Main entry point for playing Simtic in a terminal.

Usage:
    python -m simtic.console [--difficulty {hard,medium,easy}]
                             [--human-first | --engine-first]
                             [--self-play] [--debug] [--log-dir DIR]
"""

import argparse
from pathlib import Path

from simtic.console.config import GameConfig, DIFFICULTY_DEPTHS
from simtic.console.interface import ConsoleGame


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="simtic",
        description="Play tic-tac-toe against a minimax engine",
    )
    parser.add_argument(
        "--difficulty",
        choices=list(DIFFICULTY_DEPTHS),
        default=None,
        help="Engine strength (asked interactively if omitted)",
    )
    side = parser.add_mutually_exclusive_group()
    side.add_argument(
        "--human-first",
        dest="human_first",
        action="store_const",
        const=True,
        default=None,
        help="Play X and move first",
    )
    side.add_argument(
        "--engine-first",
        dest="human_first",
        action="store_const",
        const=False,
        help="Let the engine play X",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="Let the engine play both sides",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every search candidate",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=Path.home() / ".simtic",
        help="Directory for engine.log (default: ~/.simtic)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    config = GameConfig(
        human_first=args.human_first,
        difficulty=args.difficulty,
        self_play=args.self_play,
        debug=args.debug,
        log_dir=args.log_dir,
    )
    ConsoleGame(config).run()


if __name__ == "__main__":
    main()
