"""
RNG - Weight Sequences
======================

Provides deterministic input token sequences for evaluation and benchmarks.
The game itself never draws random numbers.
"""

from __future__ import annotations

import random
from typing import List, Optional

from boxgame.core.config_loader import GameConfig, get_config


class WeightSequence:
    """
    Seeded generator of token weight sequences.

    The same seed always yields the same sequences, in the same order.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize generator.

        Args:
            config: Game configuration. Uses default if None.
            seed: Random seed for reproducibility. Random if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def next_weight(self) -> int:
        """Draw a single token weight within the configured bounds."""
        return self._rng.randint(self._config.rng.min_weight, self._config.rng.max_weight)

    def generate(self, length: Optional[int] = None) -> List[int]:
        """
        Draw a full input sequence.

        Args:
            length: Number of tokens. Uses rng.sequence_length if None.

        Returns:
            List of token weights.
        """
        if length is None:
            length = self._config.rng.sequence_length
        if length < 0:
            raise ValueError(f"Sequence length must be >= 0, got {length}")
        return [self.next_weight() for _ in range(length)]

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Restart the generator.

        Args:
            seed: New random seed. Keeps current if None.
        """
        if seed is not None:
            self._seed = seed
        self._rng = random.Random(self._seed)


def generate_weights(
    seed: int,
    length: Optional[int] = None,
    config: Optional[GameConfig] = None
) -> List[int]:
    """Generate one input sequence for a seed."""
    return WeightSequence(config, seed).generate(length)
