"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to all parameters.

The box layout itself is part of the game rules (see box_catalog) and is
deliberately absent from the YAML file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml


@dataclass(frozen=True)
class RngConfig:
    """Parameters for generated input sequences."""
    sequence_length: int  # Tokens per generated game
    min_weight: int       # Inclusive lower bound for a token weight
    max_weight: int       # Inclusive upper bound for a token weight


@dataclass(frozen=True)
class DisplayConfig:
    """Console output parameters."""
    score_precision: int


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable to prevent accidental modification during runtime.
    """
    rng: RngConfig
    display: DisplayConfig
    scenarios: Dict[str, Tuple[int, ...]]

    @property
    def scenario_names(self) -> Tuple[str, ...]:
        """Names of all configured scenarios, sorted."""
        return tuple(sorted(self.scenarios))

    def get_scenario(self, name: str) -> Tuple[int, ...]:
        """Get a named input sequence."""
        if name in self.scenarios:
            return self.scenarios[name]
        raise ValueError(
            f"Unknown scenario '{name}', expected one of {list(self.scenario_names)}"
        )


def _parse_weights(name: str, weights_data: List) -> Tuple[int, ...]:
    """Parse a scenario weight list from YAML."""
    if not isinstance(weights_data, list):
        raise ValueError(f"Scenario '{name}' must be a list of weights, got {weights_data!r}")
    weights = []
    for w in weights_data:
        # bool is an int subclass; YAML 'yes' should not become a weight
        if isinstance(w, bool) or not isinstance(w, int):
            raise ValueError(f"Scenario '{name}' weights must be integers, got {w!r}")
        if w < 0:
            raise ValueError(f"Scenario '{name}' weights must be non-negative, got {w}")
        weights.append(w)
    return tuple(weights)


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    rng = config.rng
    if rng.sequence_length < 0:
        raise ValueError(f"rng.sequence_length must be >= 0, got {rng.sequence_length}")

    if rng.min_weight < 0:
        raise ValueError(f"rng.min_weight must be >= 0, got {rng.min_weight}")

    if rng.max_weight < rng.min_weight:
        raise ValueError(
            f"rng.max_weight ({rng.max_weight}) must not be below "
            f"rng.min_weight ({rng.min_weight})"
        )

    if config.display.score_precision < 0:
        raise ValueError(
            f"display.score_precision must be >= 0, got {config.display.score_precision}"
        )


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.

    Args:
        config_path: Path to game_config.yaml. If None, uses default location.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f) or {}

    rng_data = raw.get("rng", {})
    rng = RngConfig(
        sequence_length=int(rng_data.get("sequence_length", 16)),
        min_weight=int(rng_data.get("min_weight", 0)),
        max_weight=int(rng_data.get("max_weight", 100))
    )

    display_data = raw.get("display", {})
    display = DisplayConfig(
        score_precision=int(display_data.get("score_precision", 2))
    )

    # Scenarios are optional
    scenarios_data = raw.get("scenarios") or {}
    scenarios = {
        str(name): _parse_weights(str(name), weights)
        for name, weights in scenarios_data.items()
    }

    config = GameConfig(
        rng=rng,
        display=display,
        scenarios=scenarios
    )

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
