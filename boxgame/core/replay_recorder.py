"""
Replay Recorder
===============

Records games turn by turn so they can be saved, reloaded and re-verified.

Usage:
    from boxgame.core import ReplayRecorder

    recorder = ReplayRecorder()
    recorder.reset(seed=42)
    for weight in weights:
        recorder.step(weight)

    recorder.save("my_replay.json")

A saved replay can be checked against the current rules with:
    verify_replay(load_replay("my_replay.json"))
"""

from __future__ import annotations

import hashlib
import json
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from boxgame.core.box_catalog import layout_as_dicts
from boxgame.core.boxes import GREEN_WINDOW_SIZE
from boxgame.core.game import CoreGame, GameResult
from boxgame.core.scoring import ScoreEvent

REPLAY_VERSION = 1


def generate_replay_filename(
    name: str = "replay",
    seed: Optional[int] = None,
    directory: Optional[Union[str, Path]] = None
) -> Path:
    """
    Generate a timestamped replay filename.

    Format: {name}_{YYYYMMDD_HHMMSS}_s{seed}.json

    Args:
        name: Prefix for the file.
        seed: Seed the input weights were generated from (optional).
        directory: Directory for the file. Defaults to current directory.

    Returns:
        Path object for the replay file.
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    if seed is not None:
        filename = f"{name}_{timestamp}_s{seed}.json"
    else:
        filename = f"{name}_{timestamp}.json"

    if directory:
        return Path(directory) / filename
    return Path(filename)


def _compute_rules_hash() -> str:
    """Hash of everything that affects scoring, for replay validation."""
    hash_data = {
        "layout": layout_as_dicts(),
        "green_window": GREEN_WINDOW_SIZE,
    }
    return hashlib.md5(json.dumps(hash_data, sort_keys=True).encode()).hexdigest()[:8]


class ReplayRecorder:
    """
    Wrapper around CoreGame that records every turn.

    Attributes:
        game: The wrapped game.
        name: Label stored in the replay metadata.
    """

    def __init__(self, game: Optional[CoreGame] = None, name: str = "replay"):
        self.game = game if game is not None else CoreGame()
        self.name = name

        self._seed: Optional[int] = None
        self._weights: List[int] = []
        self._rules_hash = _compute_rules_hash()

    @property
    def weights(self) -> List[int]:
        """Weights played since the last reset."""
        return self._weights.copy()

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reset the game and clear the recording.

        Args:
            seed: Seed the upcoming weights were generated from, if any.
        """
        self._seed = seed
        self._weights = []
        self.game.reset()

    def step(self, weight: int) -> ScoreEvent:
        """Play and record one turn."""
        event = self.game.step(weight)
        self._weights.append(weight)
        return event

    def get_replay_data(self) -> Dict[str, Any]:
        """
        Get the current replay data as a dictionary.

        Returns:
            Dictionary containing all replay data.
        """
        result = self.game.result()
        return {
            "version": REPLAY_VERSION,
            "name": self.name,
            "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
            "seed": self._seed,
            "config_hash": self._rules_hash,
            "layout": layout_as_dicts(),
            "weights": self._weights.copy(),
            "turns": [event.to_dict() for event in result.events],
            "final_scores": {"A": result.score_a, "B": result.score_b},
            "winner": result.winner,
        }

    def save(
        self,
        path: Optional[Union[str, Path]] = None,
        overwrite: bool = True,
        directory: Optional[Union[str, Path]] = None,
        verbose: bool = True
    ) -> Path:
        """
        Save the replay to a JSON file.

        Args:
            path: Path to save the replay. If None, auto-generates a timestamped name.
            overwrite: If True, overwrite existing file.
            directory: Directory for auto-generated filename (only used if path is None).
            verbose: If True, print a short summary.

        Returns:
            Path where the replay was saved.
        """
        if path is None:
            path = generate_replay_filename(
                name=self.name,
                seed=self._seed,
                directory=directory
            )
        else:
            path = Path(path)

        if path.exists() and not overwrite:
            raise FileExistsError(f"Replay file already exists: {path}")

        path.parent.mkdir(parents=True, exist_ok=True)

        replay_data = self.get_replay_data()

        with open(path, "w") as f:
            json.dump(replay_data, f, indent=2)

        if verbose:
            print(f"Replay saved: {path}")
            print(f"  Turns: {len(self._weights)}")
            print(f"  Final scores: A={replay_data['final_scores']['A']}, "
                  f"B={replay_data['final_scores']['B']}")

        return path


def load_replay(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a replay from JSON.

    Raises:
        FileNotFoundError: If the replay file doesn't exist.
        ValueError: If the file is not a supported replay.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Replay file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Replay must be a JSON object: {path}")

    version = data.get("version")
    if version != REPLAY_VERSION:
        raise ValueError(f"Unsupported replay version {version!r} (expected {REPLAY_VERSION})")

    for key in ("weights", "turns", "final_scores"):
        if key not in data:
            raise ValueError(f"Replay is missing '{key}': {path}")

    return data


def verify_replay(data: Dict[str, Any]) -> bool:
    """
    Re-run a replay's weights and compare against its recorded outcome.

    Args:
        data: Replay dictionary, as produced by get_replay_data() or load_replay().

    Returns:
        True if the rules hash, every turn, and the final scores match.
    """
    if data.get("config_hash") != _compute_rules_hash():
        return False

    result = replay_result(data)

    recorded = [ScoreEvent.from_dict(turn) for turn in data["turns"]]
    if list(result.events) != recorded:
        return False

    final = data["final_scores"]
    return result.score_a == float(final["A"]) and result.score_b == float(final["B"])


def record_game(
    weights: Iterable[int],
    seed: Optional[int] = None,
    save_path: Optional[Union[str, Path]] = None,
    name: str = "replay",
    verbose: bool = True
) -> Dict[str, Any]:
    """
    Convenience function to record a single game.

    Args:
        weights: Input token weights.
        seed: Seed the weights were generated from, if any.
        save_path: If provided, save replay to this path.
        name: Label stored in the replay.
        verbose: If True, print a summary when saving.

    Returns:
        Replay data dictionary.
    """
    recorder = ReplayRecorder(name=name)
    recorder.reset(seed=seed)

    for weight in weights:
        recorder.step(weight)

    replay_data = recorder.get_replay_data()

    if save_path:
        recorder.save(save_path, verbose=verbose)

    return replay_data


def replay_result(data: Dict[str, Any]) -> GameResult:
    """Re-run a replay's weights and return the fresh result."""
    return CoreGame().run(int(w) for w in data["weights"])
