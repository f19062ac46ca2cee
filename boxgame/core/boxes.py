"""
Boxes
=====

Scoring containers that absorb token weights.

Every box shares the same absorption logic; only the score formula differs:
- Green (WindowedMeanBox): square of the mean of the 3 most recent tokens
- Blue (MinMaxPairingBox): Cantor pairing of the smallest and largest token
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

# Number of most recent tokens a green box averages over
GREEN_WINDOW_SIZE = 3


class BoxKind(Enum):
    """Box variants, by colour."""
    GREEN = "green"
    BLUE = "blue"


def cantor_pairing(a: float, b: float) -> float:
    """
    Cantor's pairing function.

    pairing(a, b) = (a + b)(a + b + 1) / 2 + b

    Example:
        >>> cantor_pairing(0, 1)
        2.0
    """
    total = float(a) + float(b)
    return total * (total + 1.0) / 2.0 + float(b)


class Box:
    """
    Base box holding weight and absorption history.

    The total weight is only used to order boxes for selection; scores are
    computed from the absorbed history by the subclasses.
    """

    kind: Optional[BoxKind] = None

    def __init__(self, initial_weight: float):
        """
        Initialize box.

        Args:
            initial_weight: Weight the box starts with before any absorption.
        """
        self._initial_weight = float(initial_weight)
        self._weight = float(initial_weight)
        self._history: List[int] = []

    @property
    def initial_weight(self) -> float:
        return self._initial_weight

    @property
    def current_weight(self) -> float:
        """Initial weight plus every absorbed token."""
        return self._weight

    @property
    def history(self) -> Tuple[int, ...]:
        """Absorbed tokens in absorption order."""
        return tuple(self._history)

    @property
    def absorbed_count(self) -> int:
        return len(self._history)

    def absorb(self, weight: int) -> None:
        """
        Absorb a token, adding it to the history and the total weight.

        Args:
            weight: Non-negative token weight.
        """
        self._history.append(weight)
        self._weight += float(weight)

    def current_score(self) -> float:
        """
        Score for the current history.

        Raises:
            RuntimeError: If nothing has been absorbed yet.
        """
        if not self._history:
            raise RuntimeError(f"{self!r} has no absorbed tokens to score")
        return self._score()

    def _score(self) -> float:
        raise NotImplementedError

    def __lt__(self, other: "Box") -> bool:
        return self._weight < other._weight

    def __repr__(self) -> str:
        name = self.kind.value if self.kind is not None else "box"
        return f"{type(self).__name__}({name}, weight={self._weight}, absorbed={len(self._history)})"


class WindowedMeanBox(Box):
    """Green box: square of the mean of the most recent tokens."""

    kind = BoxKind.GREEN

    def _score(self) -> float:
        recent = self._history[-GREEN_WINDOW_SIZE:]
        mean = sum(float(w) for w in recent) / len(recent)
        return mean * mean


class MinMaxPairingBox(Box):
    """
    Blue box: Cantor pairing of the smallest and largest token absorbed so far.

    The pairing is always evaluated as pairing(smallest, largest), regardless
    of which token arrived first. Min and max are tracked on absorption so
    scoring does not rescan the history.
    """

    kind = BoxKind.BLUE

    def __init__(self, initial_weight: float):
        super().__init__(initial_weight)
        self._min: Optional[int] = None
        self._max: Optional[int] = None

    def absorb(self, weight: int) -> None:
        super().absorb(weight)
        if self._min is None or weight < self._min:
            self._min = weight
        if self._max is None or weight > self._max:
            self._max = weight

    def _score(self) -> float:
        return cantor_pairing(self._min, self._max)
