"""
Evaluation Harness
==================

Runs games from explicit weights, named scenarios, or a seed bank of
generated sequences, and reports the final scores.

Usage:
    python -m boxgame.evaluation.run_eval --weights 1 1 2 3
    python -m boxgame.evaluation.run_eval --scenario fibonacci8
    python -m boxgame.evaluation.run_eval --seed-bank --length 32
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np

from boxgame.core.config_loader import GameConfig, load_config
from boxgame.core.game import play_game
from boxgame.core.replay_recorder import generate_replay_filename, record_game
from boxgame.core.rng import generate_weights


@dataclass
class EvalResult:
    """Result for a single seed."""
    seed: int
    num_turns: int
    score_a: float
    score_b: float
    winner: str
    elapsed_time: float


@dataclass
class EvalSummary:
    """Summary of evaluation across all seeds."""
    mean_a: float
    std_a: float
    median_a: float
    mean_b: float
    std_b: float
    median_b: float
    min_score: float
    max_score: float
    wins_a: int
    wins_b: int
    draws: int
    total_time: float
    results: List[EvalResult]


def format_scores(score_a: float, score_b: float) -> str:
    """The one-line score report for a finished game."""
    return f"Scores: player A {score_a:g}, player B {score_b:g}"


def load_seed_bank(path: Optional[str] = None) -> List[int]:
    """
    Load the evaluation seed bank.

    Args:
        path: Path to seed_bank.json. Uses default if None.

    Returns:
        List of seeds.

    Raises:
        ValueError: If the file holds no seeds.
    """
    if path is None:
        path = os.path.join(os.path.dirname(__file__), "seed_bank.json")

    with open(path, "r") as f:
        data = json.load(f)

    seeds = data.get("seeds") if isinstance(data, dict) else None
    if not isinstance(seeds, list) or not seeds:
        raise ValueError(f"Seed bank must hold a non-empty 'seeds' list: {path}")

    return [int(seed) for seed in seeds]


def evaluate_single_seed(
    seed: int,
    length: Optional[int] = None,
    config: Optional[GameConfig] = None,
    record_dir: Optional[str] = None,
    verbose: bool = False
) -> EvalResult:
    """
    Play one generated game.

    Args:
        seed: Seed for the weight sequence.
        length: Sequence length. Uses the config default if None.
        config: Game configuration. Uses default if None.
        record_dir: If set, save a replay of the game into this directory.
        verbose: If True, print the scores.

    Returns:
        EvalResult for this seed.
    """
    weights = generate_weights(seed, length, config)

    start_time = time.perf_counter()
    result = play_game(weights)
    elapsed = time.perf_counter() - start_time

    if record_dir is not None:
        record_game(
            weights,
            seed=seed,
            save_path=generate_replay_filename("eval", seed=seed, directory=record_dir),
            verbose=verbose
        )

    if verbose:
        print(f"  Seed {seed}: {format_scores(result.score_a, result.score_b)} "
              f"(winner: {result.winner})")

    return EvalResult(
        seed=seed,
        num_turns=result.turns,
        score_a=result.score_a,
        score_b=result.score_b,
        winner=result.winner,
        elapsed_time=elapsed
    )


def evaluate_seeds(
    seeds: Optional[Sequence[int]] = None,
    length: Optional[int] = None,
    config: Optional[GameConfig] = None,
    record_dir: Optional[str] = None,
    verbose: bool = True
) -> EvalSummary:
    """
    Play one generated game per seed and aggregate the scores.

    Args:
        seeds: List of seeds. Uses seed_bank.json if None.
        length: Sequence length per game. Uses the config default if None.
        config: Game configuration. Uses default if None.
        record_dir: If set, save one replay per seed into this directory.
        verbose: If True, print progress and a summary.

    Returns:
        EvalSummary with aggregate statistics.
    """
    if seeds is None:
        seeds = load_seed_bank()
    if config is None:
        config = load_config()
    if not seeds:
        raise ValueError("No seeds to evaluate")

    if verbose:
        print(f"Evaluating on {len(seeds)} seeds...")

    results: List[EvalResult] = []
    total_start = time.time()

    for seed in seeds:
        results.append(evaluate_single_seed(
            seed,
            length=length,
            config=config,
            record_dir=record_dir,
            verbose=verbose
        ))

    total_time = time.time() - total_start

    scores_a = np.array([r.score_a for r in results], dtype=np.float64)
    scores_b = np.array([r.score_b for r in results], dtype=np.float64)
    all_scores = np.concatenate([scores_a, scores_b])

    summary = EvalSummary(
        mean_a=float(np.mean(scores_a)),
        std_a=float(np.std(scores_a)),
        median_a=float(np.median(scores_a)),
        mean_b=float(np.mean(scores_b)),
        std_b=float(np.std(scores_b)),
        median_b=float(np.median(scores_b)),
        min_score=float(np.min(all_scores)),
        max_score=float(np.max(all_scores)),
        wins_a=sum(1 for r in results if r.winner == "A"),
        wins_b=sum(1 for r in results if r.winner == "B"),
        draws=sum(1 for r in results if r.winner == "draw"),
        total_time=total_time,
        results=results
    )

    if verbose:
        p = config.display.score_precision
        print()
        print("=" * 50)
        print("EVALUATION SUMMARY")
        print("=" * 50)
        print(f"Seeds evaluated: {len(seeds)}")
        print(f"Player A mean:   {summary.mean_a:.{p}f} (std {summary.std_a:.{p}f}, "
              f"median {summary.median_a:.{p}f})")
        print(f"Player B mean:   {summary.mean_b:.{p}f} (std {summary.std_b:.{p}f}, "
              f"median {summary.median_b:.{p}f})")
        print(f"Score range:     {summary.min_score:.{p}f} .. {summary.max_score:.{p}f}")
        print(f"Wins:            A={summary.wins_a}, B={summary.wins_b}, draws={summary.draws}")
        print(f"Total time:      {total_time:.2f}s")
        print("=" * 50)

    return summary


def save_results(
    summary: EvalSummary,
    output_path: str
) -> None:
    """Save evaluation results to JSON."""
    data = {
        "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
        "mean_a": summary.mean_a,
        "std_a": summary.std_a,
        "median_a": summary.median_a,
        "mean_b": summary.mean_b,
        "std_b": summary.std_b,
        "median_b": summary.median_b,
        "min_score": summary.min_score,
        "max_score": summary.max_score,
        "wins": {"A": summary.wins_a, "B": summary.wins_b, "draw": summary.draws},
        "total_time": summary.total_time,
        "results": [
            {
                "seed": r.seed,
                "num_turns": r.num_turns,
                "score_a": r.score_a,
                "score_b": r.score_b,
                "winner": r.winner
            }
            for r in summary.results
        ]
    }

    with open(output_path, "w") as f:
        json.dump(data, f, indent=2)

    print(f"Results saved to {output_path}")


def run_weights(
    weights: Sequence[int],
    record_path: Optional[str] = None,
    output_path: Optional[str] = None,
    verbose: bool = True
) -> int:
    """Play a single game over explicit weights and print the scores."""
    result = play_game(weights)

    # The score line is the program's output and is printed even when quiet
    print(format_scores(result.score_a, result.score_b))
    if verbose:
        print(f"Turns: {result.turns}, winner: {result.winner}")

    if record_path:
        record_game(weights, save_path=record_path, verbose=verbose)

    if output_path:
        with open(output_path, "w") as f:
            json.dump({
                "weights": list(weights),
                "score_a": result.score_a,
                "score_b": result.score_b,
                "winner": result.winner,
                "turns": [event.to_dict() for event in result.events]
            }, f, indent=2)
        print(f"Results saved to {output_path}")

    return 0


def _non_negative_int(value: str) -> int:
    try:
        weight = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid weight: {value!r}")
    if weight < 0:
        raise argparse.ArgumentTypeError(f"weights must be non-negative, got {weight}")
    return weight


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play the box game and report scores")

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--weights",
        type=_non_negative_int,
        nargs="+",
        help="Input token weights, in turn order"
    )
    source.add_argument(
        "--scenario",
        type=str,
        help="Named weight sequence from game_config.yaml"
    )
    source.add_argument(
        "--seeds",
        type=str,
        default=None,
        help="Path to a seed bank JSON to evaluate generated sequences"
    )
    source.add_argument(
        "--seed-bank",
        action="store_true",
        help="Evaluate generated sequences for the bundled seed bank"
    )

    parser.add_argument(
        "--length",
        type=_non_negative_int,
        default=None,
        help="Generated sequence length (seed bank modes only)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to game_config.yaml (uses default if not specified)"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Path to save results JSON"
    )
    parser.add_argument(
        "--record",
        type=str,
        default=None,
        help="Save a replay (a file for single games, a directory for seed banks)"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce output verbosity"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.length is not None and (args.weights is not None or args.scenario is not None):
        parser.error("--length only applies to --seeds and --seed-bank")

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading config: {e}")
        return 1

    if args.weights is not None:
        return run_weights(args.weights, args.record, args.output, verbose=not args.quiet)

    if args.scenario is not None:
        try:
            weights = config.get_scenario(args.scenario)
        except ValueError as e:
            print(f"Error: {e}")
            return 1
        return run_weights(list(weights), args.record, args.output, verbose=not args.quiet)

    # Seed bank evaluation
    try:
        seeds = load_seed_bank(args.seeds)
    except (OSError, TypeError, ValueError) as e:
        print(f"Error loading seed bank: {e}")
        return 1

    if args.record:
        try:
            Path(args.record).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            print(f"Error creating replay directory: {e}")
            return 1

    summary = evaluate_seeds(
        seeds,
        length=args.length,
        config=config,
        record_dir=args.record,
        verbose=not args.quiet
    )

    if args.output:
        save_results(summary, args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
