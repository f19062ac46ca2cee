"""
Tests for lightest-box selection.
"""

import pytest

from boxgame.core.box_catalog import STANDARD_LAYOUT, build_boxes
from boxgame.core.boxes import BoxKind, MinMaxPairingBox, WindowedMeanBox
from boxgame.core.selection import BoxSelector


@pytest.fixture
def selector():
    return BoxSelector()


class TestStandardLayout:
    """Test the fixed starting layout."""

    def test_layout(self):
        """Green 0.0, Green 0.1, Blue 0.2, Blue 0.3."""
        kinds = [spec.kind for spec in STANDARD_LAYOUT]
        weights = [spec.initial_weight for spec in STANDARD_LAYOUT]

        assert kinds == [BoxKind.GREEN, BoxKind.GREEN, BoxKind.BLUE, BoxKind.BLUE]
        assert weights == [0.0, 0.1, 0.2, 0.3]

    def test_build_boxes_are_fresh(self):
        """Each call builds new, empty boxes."""
        first = build_boxes()
        first[0].absorb(5)
        second = build_boxes()

        assert second[0].absorbed_count == 0
        assert second[0] is not first[0]
        assert isinstance(second[1], WindowedMeanBox)
        assert isinstance(second[3], MinMaxPairingBox)


class TestBoxSelector:
    """Test first-minimum selection."""

    def test_initial_selection(self, selector):
        """The green box at 0.0 is lightest at the start."""
        assert selector.select_index(build_boxes()) == 0

    def test_selects_strict_minimum(self, selector):
        boxes = build_boxes()
        boxes[0].absorb(1)

        assert selector.select_index(boxes) == 1

    def test_tie_goes_to_first(self, selector):
        """Equal weights: the smallest slot index wins."""
        boxes = [WindowedMeanBox(0.5), MinMaxPairingBox(0.2), WindowedMeanBox(0.2), MinMaxPairingBox(0.2)]

        assert selector.select_index(boxes) == 1

    def test_all_equal(self, selector):
        boxes = [WindowedMeanBox(1.0) for _ in range(4)]

        assert selector.select_index(boxes) == 0

    def test_tie_after_absorption(self, selector):
        """Boxes reaching the same weight still resolve to the first."""
        boxes = [WindowedMeanBox(0.0), WindowedMeanBox(1.0), MinMaxPairingBox(5.0)]
        boxes[0].absorb(1)

        assert selector.select_index(boxes) == 0

    def test_selection_has_no_side_effects(self, selector):
        boxes = build_boxes()
        before = [(b.current_weight, b.history) for b in boxes]

        selector.select_index(boxes)

        assert [(b.current_weight, b.history) for b in boxes] == before

    def test_empty_collection(self, selector):
        """Selecting from nothing is a programming error."""
        with pytest.raises(RuntimeError):
            selector.select_index([])
