"""
Label collision resolution by greedy vertical stacking around the median.

Assumptions (documented):
  1. Pixel y grows with value (the y scale is increasing).
  2. Labels are split into an upper half (value >= median, ascending) and a
     lower half (value <= median, descending). The first label of each half
     is anchored LABEL_Y_NUDGE px below the median's pixel y.
  3. Walking outward, each label sits at its mapped y - LABEL_Y_NUDGE plus a
     running offset. When the gap to the previous label is short, the offset
     grows by the shortfall (upward for the upper half, downward for the
     lower half) and is carried forward. Once the gap is large enough the
     offset shrinks to what still clears the previous label, reaching zero
     when the label's own position does, so adjacent labels in a half are
     never closer than min_pixel_gap.
  4. Single greedy pass, O(n log n) for the sort: labels clustered near the
     median may be pushed far from their value. Placement is deterministic.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from boxwhisker.box_chart.algorithms.category_summary import LabelCandidate

DEFAULT_MIN_PIXEL_GAP = 10.0

# Pixels subtracted from a value's mapped y so the text baseline sits on the value.
LABEL_Y_NUDGE = 4.0


def _stack_half(
    half: list[LabelCandidate],
    y_scale: Callable[[float], float],
    x: float,
    min_pixel_gap: float,
    direction: float,
) -> None:
    """Place half[1:] in place, pushing by direction (+1 up, -1 down) on collisions."""
    offset = 0.0
    for prev, cur in zip(half, half[1:]):
        raw_y = y_scale(cur.value) - LABEL_Y_NUDGE
        cur.x = x
        gap = abs(raw_y + offset - prev.y)
        if gap < min_pixel_gap:
            offset += direction * (min_pixel_gap - gap)
        else:
            # shrink the carried offset to what still clears prev; 0 once raw_y does
            offset = direction * max(0.0, min_pixel_gap - direction * (raw_y - prev.y))
        cur.y = raw_y + offset


def resolve_labels(
    candidates: Sequence[LabelCandidate],
    median_value: float,
    y_scale: Callable[[float], float],
    x: float,
    *,
    median_y: Optional[float] = None,
    min_pixel_gap: float = DEFAULT_MIN_PIXEL_GAP,
) -> list[LabelCandidate]:
    """
    Resolve vertical overlaps between one category's labels.

    The candidates are mutated in place (x and y) during the pass; the
    caller owns them exclusively for its duration.

    Args:
        candidates: Unplaced labels of one category.
        median_value: The category's median.
        y_scale: Maps a value to its pixel y.
        x: Pixel x shared by every label of the category.
        median_y: Pixel y of the median; defaults to y_scale(median_value).
        min_pixel_gap: Minimum distance between adjacent labels of a half.

    Returns:
        Placed labels in ascending value order, excluding labels with x <= 0
        (off canvas). The median-adjacent label appears once.

    Raises:
        ValueError: If min_pixel_gap is not positive.
    """
    if min_pixel_gap <= 0:
        raise ValueError(f"min_pixel_gap must be positive, got {min_pixel_gap!r}")
    if not candidates:
        return []
    if median_y is None:
        median_y = y_scale(median_value)

    upper = sorted((c for c in candidates if c.value >= median_value), key=lambda c: c.value)
    lower = sorted((c for c in candidates if c.value <= median_value), key=lambda c: c.value, reverse=True)

    anchor_y = median_y - LABEL_Y_NUDGE
    for half, direction in ((upper, 1.0), (lower, -1.0)):
        if not half:
            continue
        half[0].x = x
        half[0].y = anchor_y
        _stack_half(half, y_scale, x, min_pixel_gap, direction)

    placed = list(reversed(lower)) + [c for c in upper if c.value > median_value]
    return [c for c in placed if c.x > 0]
