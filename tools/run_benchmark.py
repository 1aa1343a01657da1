#!/usr/bin/env python3
"""
Self-Play and Tactics Benchmark Runner

Plays every pairing of the given depths against each other, once from each
of the 9 opening squares, then runs the tactical suite at every depth. Use it
to confirm that the difficulty levels are ordered and that depth 9 never
loses.

Usage:
    python tools/run_benchmark.py [--depths 1,3,9] [--verbose]
"""

import sys
import argparse
import itertools
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from tqdm import tqdm

from simtic.board.position import SQUARES_MAX
from simtic.utils.testing import play_game, run_tactics, summarize_games


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_benchmark(depths: list[int], verbose: bool = False):
    """
    Run self-play pairings and the tactical suite at multiple depths.

    Args:
        depths: List of depths to test
        verbose: If True, print every game and tactical position
    """
    print("=" * 80)
    print("SELF-PLAY BENCHMARK - Simtic")
    print("=" * 80)
    print(f"Search: Exhaustive minimax, threat-count horizon evaluation")
    print(f"Depths: {depths}")
    print("=" * 80)

    pairings = list(itertools.product(depths, repeat=2))
    all_results = []

    for depth_x, depth_o in tqdm(pairings, desc="Pairings"):
        start_time = time.time()
        records = [
            play_game(depth_x, depth_o, opening=opening)
            for opening in range(SQUARES_MAX)
        ]
        elapsed = time.time() - start_time

        summary = summarize_games(records)
        summary.update({'depth_x': depth_x, 'depth_o': depth_o, 'time': elapsed})
        all_results.append(summary)

        if verbose:
            for record in records:
                result = record.winner.symbol if record.winner is not None else "draw"
                tqdm.write(f"  X@{depth_x} vs O@{depth_o}: {record.moves} -> {result}")

    print("\n" + "=" * 80)
    print("SELF-PLAY TABLE (9 openings per pairing)")
    print("=" * 80)
    print(f"{'X depth':<8} {'O depth':<8} {'X wins':<8} {'O wins':<8} {'Draws':<8} "
          f"{'Mean nodes':<12} {'Max nodes':<10} {'Time':<8}")
    print("-" * 80)
    for r in all_results:
        print(f"{r['depth_x']:<8} {r['depth_o']:<8} {r['first_wins']:<8} {r['second_wins']:<8} "
              f"{r['draws']:<8} {r['mean_nodes']:<12,.0f} {r['max_nodes']:<10,} {format_time(r['time']):<8}")

    print("\n" + "=" * 80)
    print("TACTICAL SUITE")
    print("=" * 80)
    for depth in depths:
        result = run_tactics(depth=depth, verbose=verbose)
        print(f"Depth {depth}: {result['score']}/{result['total']} ({result['percentage']:.1f}%)")

        failed = [r for r in result['results'] if not r.correct]
        for r in failed:
            print(f"    {r.position.id}: Expected {r.position.best_moves}, got {r.found_move}")

    print("\n" + "=" * 80)
    print("Benchmark complete!")
    print("=" * 80)

    return all_results


def main():
    parser = argparse.ArgumentParser(
        description="Run self-play and tactical benchmarks at multiple depths"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="1,3,9",
        help="Comma-separated list of depths to test (default: 1,3,9)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print every game and tactical position"
    )

    args = parser.parse_args()

    try:
        depths = [int(d.strip()) for d in args.depths.split(",")]
    except ValueError:
        print("Error: depths must be comma-separated integers")
        sys.exit(1)

    try:
        run_benchmark(depths, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
