"""
Performance Benchmark
=====================

Measures game throughput.

Usage:
    python -m tools.benchmark_speed [--games N] [--length L]
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import List

import numpy as np

from boxgame.core.config_loader import load_config
from boxgame.core.game import CoreGame, play


def _random_sequences(num_games: int, length: int, seed: int) -> List[List[int]]:
    """Draw weight sequences within the configured bounds."""
    config = load_config()
    rng = np.random.default_rng(seed)
    table = rng.integers(
        config.rng.min_weight,
        config.rng.max_weight + 1,
        size=(num_games, length)
    )
    return table.tolist()


def benchmark_play(
    num_games: int = 1000,
    length: int = 64,
    seed: int = 42
) -> dict:
    """
    Benchmark the play() entry point (fresh game per call).

    Args:
        num_games: Number of games to play.
        length: Turns per game.
        seed: Random seed for the weight sequences.

    Returns:
        Dict with timing results.
    """
    sequences = _random_sequences(num_games, length, seed)

    # Warmup
    for weights in sequences[:10]:
        play(weights)

    start = time.perf_counter()
    for weights in sequences:
        play(weights)
    elapsed = time.perf_counter() - start

    turns = num_games * length
    return {
        "mode": "play",
        "num_games": num_games,
        "turns": turns,
        "elapsed_seconds": elapsed,
        "games_per_second": num_games / elapsed,
        "turns_per_second": turns / elapsed,
    }


def benchmark_core_game(
    num_games: int = 1000,
    length: int = 64,
    seed: int = 42
) -> dict:
    """Benchmark stepwise CoreGame with a snapshot after every turn."""
    sequences = _random_sequences(num_games, length, seed)
    game = CoreGame()

    start = time.perf_counter()
    for weights in sequences:
        game.reset()
        for weight in weights:
            game.step(weight)
            game.snapshot()
    elapsed = time.perf_counter() - start

    turns = num_games * length
    return {
        "mode": "core_game+snapshot",
        "num_games": num_games,
        "turns": turns,
        "elapsed_seconds": elapsed,
        "games_per_second": num_games / elapsed,
        "turns_per_second": turns / elapsed,
    }


def run_all_benchmarks(num_games: int, length: int, seed: int) -> list:
    """Run comprehensive benchmarks."""
    results = []

    print("=" * 60)
    print("BOX GAME PERFORMANCE BENCHMARK")
    print("=" * 60)
    print()

    for bench in (benchmark_play, benchmark_core_game):
        result = bench(num_games=num_games, length=length, seed=seed)
        results.append(result)
        print(f"Benchmarking {result['mode']}...")
        print(f"  Games/sec: {result['games_per_second']:.1f}")
        print(f"  Turns/sec: {result['turns_per_second']:.1f}")
        print()

    print("=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print()
    print(f"{'Mode':<22} {'Games':>8} {'Games/s':>12} {'Turns/s':>12}")
    print("-" * 56)

    for r in results:
        print(f"{r['mode']:<22} {r['num_games']:>8} "
              f"{r['games_per_second']:>12.1f} {r['turns_per_second']:>12.1f}")

    return results


def main():
    parser = argparse.ArgumentParser(description="Benchmark box game performance")
    parser.add_argument("--games", type=int, default=1000, help="Games per benchmark")
    parser.add_argument("--length", type=int, default=64, help="Turns per game")
    parser.add_argument("--seed", type=int, default=42, help="Seed for weight sequences")
    parser.add_argument("--quick", action="store_true", help="Quick benchmark (fewer games)")

    args = parser.parse_args()

    games = 100 if args.quick else args.games

    run_all_benchmarks(num_games=games, length=args.length, seed=args.seed)

    return 0


if __name__ == "__main__":
    sys.exit(main())
