"""
Box Catalog
===========

The fixed starting layout of the game and a factory for fresh box sets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple, Type

from boxgame.core.boxes import Box, BoxKind, MinMaxPairingBox, WindowedMeanBox


_BOX_CLASSES: Dict[BoxKind, Type[Box]] = {
    BoxKind.GREEN: WindowedMeanBox,
    BoxKind.BLUE: MinMaxPairingBox,
}


@dataclass(frozen=True)
class BoxSpec:
    """Kind and starting weight of one box slot."""
    kind: BoxKind
    initial_weight: float

    def build(self) -> Box:
        """Create a fresh, empty box for this slot."""
        return _BOX_CLASSES[self.kind](self.initial_weight)

    def to_dict(self) -> Dict[str, object]:
        return {"kind": self.kind.value, "initial_weight": self.initial_weight}


# Slot order decides selection ties: the first lightest box wins
STANDARD_LAYOUT: Tuple[BoxSpec, ...] = (
    BoxSpec(BoxKind.GREEN, 0.0),
    BoxSpec(BoxKind.GREEN, 0.1),
    BoxSpec(BoxKind.BLUE, 0.2),
    BoxSpec(BoxKind.BLUE, 0.3),
)


def build_boxes() -> List[Box]:
    """
    Build a fresh box collection in the standard layout.

    Returns:
        [Green 0.0, Green 0.1, Blue 0.2, Blue 0.3], all with empty history.
    """
    return [spec.build() for spec in STANDARD_LAYOUT]


def layout_as_dicts() -> List[Dict[str, object]]:
    """Serializable description of the standard layout (for replays)."""
    return [spec.to_dict() for spec in STANDARD_LAYOUT]
