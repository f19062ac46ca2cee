"""
Box Selection
=============

Picks the box a turn's token goes into.
"""

from __future__ import annotations

from typing import Sequence

from boxgame.core.boxes import Box


class BoxSelector:
    """
    Selects the box with the smallest current weight.

    Boxes are scanned in order and the candidate is only replaced on a strict
    improvement, so among equally light boxes the first one wins.
    """

    def select_index(self, boxes: Sequence[Box]) -> int:
        """
        Get the index of the lightest box.

        Args:
            boxes: Box collection in slot order.

        Returns:
            Index of the first box with minimal current weight.

        Raises:
            RuntimeError: If the collection is empty.
        """
        if not boxes:
            raise RuntimeError("Cannot select from an empty box collection")

        best = 0
        for idx in range(1, len(boxes)):
            if boxes[idx] < boxes[best]:
                best = idx
        return best
