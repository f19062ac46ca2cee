"""
Scoring System
==============

Players and the score events their turns produce.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from boxgame.core.boxes import Box, BoxKind
from boxgame.core.selection import BoxSelector


@dataclass(frozen=True)
class ScoreEvent:
    """Record of a single turn."""
    turn: int
    player: str
    box_index: int
    box_kind: BoxKind
    weight: int
    points: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "turn": self.turn,
            "player": self.player,
            "box_index": self.box_index,
            "box_kind": self.box_kind.value,
            "weight": self.weight,
            "points": self.points,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "ScoreEvent":
        return ScoreEvent(
            turn=int(data["turn"]),
            player=str(data["player"]),
            box_index=int(data["box_index"]),
            box_kind=BoxKind(data["box_kind"]),
            weight=int(data["weight"]),
            points=float(data["points"])
        )

    def __repr__(self) -> str:
        return (
            f"ScoreEvent(turn={self.turn}, player={self.player}, "
            f"{self.box_kind.value}[{self.box_index}]+{self.weight}={self.points})"
        )


class Player:
    """
    A player accumulating score across their own turns.

    A player never holds on to the box collection; it is handed in for each
    turn by the game.
    """

    def __init__(self, name: str):
        """
        Initialize player.

        Args:
            name: Player label, "A" or "B".
        """
        self._name = name
        self._score: float = 0.0
        self._turns: int = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def score(self) -> float:
        """Total score so far."""
        return self._score

    @property
    def turns_taken(self) -> int:
        return self._turns

    def take_turn(
        self,
        weight: int,
        boxes: List[Box],
        selector: BoxSelector,
        turn: int = 0
    ) -> ScoreEvent:
        """
        Feed a token to the lightest box and collect its score.

        Args:
            weight: Token weight for this turn.
            boxes: Shared box collection (mutated).
            selector: Box selection rule.
            turn: Game-wide turn index, recorded on the event.

        Returns:
            ScoreEvent describing the points awarded.
        """
        idx = selector.select_index(boxes)
        box = boxes[idx]
        box.absorb(weight)
        points = box.current_score()

        self._score += points
        self._turns += 1
        return ScoreEvent(
            turn=turn,
            player=self._name,
            box_index=idx,
            box_kind=box.kind,
            weight=weight,
            points=points
        )

    def reset(self) -> None:
        """Reset score to zero."""
        self._score = 0.0
        self._turns = 0

    def __repr__(self) -> str:
        return f"Player({self._name}, score={self._score})"
