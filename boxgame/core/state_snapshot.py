"""
State Snapshot
==============

Packs game state into numpy arrays for inspection and serialization.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

import numpy as np

from boxgame.core.boxes import Box


@dataclass
class GameSnapshot:
    """
    Game state between turns.

    Box arrays are indexed by slot, in the standard layout order.
    """
    turn: int
    next_player: str
    score_a: float
    score_b: float

    box_kinds: Tuple[str, ...]
    box_weights: np.ndarray       # (N_BOXES,) float64
    absorbed_counts: np.ndarray   # (N_BOXES,) int64

    @property
    def lightest_box(self) -> int:
        """Slot the next token will go to (first minimum)."""
        return int(np.argmin(self.box_weights))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain Python types."""
        return {
            "turn": self.turn,
            "next_player": self.next_player,
            "score_a": self.score_a,
            "score_b": self.score_b,
            "box_kinds": list(self.box_kinds),
            "box_weights": self.box_weights.tolist(),
            "absorbed_counts": self.absorbed_counts.tolist(),
        }


def build_snapshot(
    boxes: Sequence[Box],
    turn: int,
    next_player: str,
    score_a: float,
    score_b: float
) -> GameSnapshot:
    """
    Build a snapshot from live boxes.

    Args:
        boxes: Box collection in slot order.
        turn: Number of turns played so far.
        next_player: Player to move.
        score_a: Player A's score.
        score_b: Player B's score.

    Returns:
        GameSnapshot with copied arrays.
    """
    return GameSnapshot(
        turn=turn,
        next_player=next_player,
        score_a=score_a,
        score_b=score_b,
        box_kinds=tuple(box.kind.value for box in boxes),
        box_weights=np.array([box.current_weight for box in boxes], dtype=np.float64),
        absorbed_counts=np.array([box.absorbed_count for box in boxes], dtype=np.int64)
    )
