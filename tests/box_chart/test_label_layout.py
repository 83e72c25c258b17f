"""Unit tests for greedy label collision resolution."""

import numpy as np
import pytest

from boxwhisker.box_chart.algorithms.category_summary import LabelCandidate
from boxwhisker.box_chart.algorithms.label_layout import LABEL_Y_NUDGE, resolve_labels


def identity(v: float) -> float:
    """Pixel y == value, so expected positions are easy to read."""
    return v


def _candidates(values):
    return [LabelCandidate(value=float(v)) for v in values]


def test_clustered_labels_stack_away_from_median():
    """Upper half pushed up, lower half pushed down, in steps of the minimum gap."""
    placed = resolve_labels(_candidates([50, 52, 54, 70, 45, 44, 30]), 50, identity, x=100)
    assert [c.value for c in placed] == [30, 44, 45, 50, 52, 54, 70]
    assert [c.y for c in placed] == pytest.approx([16, 26, 36, 46, 56, 66, 76])
    assert all(c.x == 100 for c in placed)


def test_well_separated_labels_keep_their_position():
    """Gaps >= 10 px: every label sits at its mapped y minus the nudge."""
    placed = resolve_labels(_candidates([10, 50, 90]), 50, identity, x=5)
    assert [c.y for c in placed] == pytest.approx([10 - LABEL_Y_NUDGE, 46, 90 - LABEL_Y_NUDGE])


def test_offset_resets_after_large_gap():
    """After a collision the carried offset drops to zero once a label is far enough away."""
    placed = resolve_labels(_candidates([50, 53, 100]), 50, identity, x=5)
    assert [c.y for c in placed] == pytest.approx([46, 56, 96])


def test_offset_shrinks_only_to_clearance():
    """64 clears 53 once offset, but not on its own: it keeps 6 px of offset, not 0.

    53 is pushed from 49 to 56. 64 maps to 60, only 4 px above 56, so it
    lands at 66 rather than falling back to 60.
    """
    placed = resolve_labels(_candidates([50, 53, 64]), 50, identity, x=5)
    assert [c.y for c in placed] == pytest.approx([46, 56, 66])


def test_lower_half_offset_shrinks_only_to_clearance():
    placed = resolve_labels(_candidates([50, 47, 36]), 50, identity, x=5)
    assert [c.y for c in placed] == pytest.approx([26, 36, 46])


def test_median_anchor_uses_given_pixel():
    """The first label of each half anchors at median_y - 4 even if it differs from the scale."""
    placed = resolve_labels(_candidates([50, 80]), 50, identity, x=5, median_y=60)
    assert placed[0].y == pytest.approx(56)
    assert placed[1].y == pytest.approx(76)


def test_median_label_appears_once():
    placed = resolve_labels(_candidates([40, 50, 60]), 50, identity, x=5)
    assert [c.value for c in placed].count(50) == 1


def test_candidates_mutated_in_place():
    cands = _candidates([50, 51])
    placed = resolve_labels(cands, 50, identity, x=7)
    assert placed[0] is cands[0]
    assert cands[1].x == 7
    assert cands[1].y == pytest.approx(56)


@pytest.mark.parametrize("x", [0.0, -3.0])
def test_off_canvas_labels_dropped(x):
    assert resolve_labels(_candidates([1, 2, 3]), 2, identity, x=x) == []


def test_empty_candidates():
    assert resolve_labels([], 0, identity, x=10) == []


def test_non_positive_gap_raises():
    with pytest.raises(ValueError):
        resolve_labels(_candidates([1]), 1, identity, x=1, min_pixel_gap=0)


def test_custom_gap():
    placed = resolve_labels(_candidates([50, 51, 52]), 51, identity, x=1, min_pixel_gap=20)
    assert [c.y for c in placed] == pytest.approx([27, 47, 67])


def test_minimum_gap_holds_random():
    """Adjacent placed labels are never closer than the minimum gap."""
    rng = np.random.default_rng(99)

    def scale(v: float) -> float:
        return 25 + v * 3.7

    for _ in range(200):
        values = np.unique(np.round(rng.normal(50, 8, size=int(rng.integers(2, 14))), 1))
        median = float(np.median(values))
        values = np.unique(np.append(values, median))
        placed = resolve_labels(_candidates(values), median, scale, x=10)
        ys = [c.y for c in placed]
        assert len(placed) == len(values)
        assert [c.value for c in placed] == sorted(c.value for c in placed)
        assert all(b - a >= 10 - 1e-9 for a, b in zip(ys, ys[1:]))
