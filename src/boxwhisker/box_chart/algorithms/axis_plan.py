"""
Axis range planning: "nice" bounds and tick step for the value axis.

Steps:
  1. pad_extent: pad the global extent outward by 1% of each bound's magnitude
     plus 1% of the range. A bound of exactly 0 stays 0. A zero-width padded
     extent becomes [0, 1].
  2. Leading-digit fraction f = 10 ** (p - floor(p)) with p = log10(range).
  3. Step multiplier from f: f<=1.2 -> 0.2, f<=2.5 -> 0.2, f<=5 -> 0.5,
     f<=10 -> 1, else 2. tick_step = multiplier * 10 ** floor(p).
  4. Snap min down to a tick_step multiple; snap max to the next multiple
     strictly above the padded max (one extra step of margin).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

# Padding applied to each bound: fraction of its magnitude and of the range.
PAD_FRACTION = 0.01

# Minor gridlines drawn per major tick.
MINOR_TICKS_PER_MAJOR = 5

# (upper bound on leading-digit fraction, step multiplier), checked in order.
STEP_BREAKPOINTS = (
    (1.2, 0.2),
    (2.5, 0.2),
    (5.0, 0.5),
    (10.0, 1.0),
)
STEP_MULTIPLIER_OVERFLOW = 2.0


@dataclass(frozen=True)
class AxisPlan:
    """Snapped value-axis bounds.

    Attributes:
        min: Lower bound, a multiple of tick_step.
        max: Upper bound, a multiple of tick_step.
        tick_step: Distance between ticks, one of {0.2, 0.5, 1, 2} x 10**k.
        tick_count: Number of ticks from min to max inclusive.
    """
    min: float
    max: float
    tick_step: float
    tick_count: int


def pad_extent(global_min: float, global_max: float) -> tuple[float, float]:
    """Padded (min, max) that strictly contains the data unless a bound is 0."""
    if not (math.isfinite(global_min) and math.isfinite(global_max)):
        raise ValueError(f"Axis extent must be finite, got ({global_min!r}, {global_max!r})")
    if global_min > global_max:
        raise ValueError(f"Axis extent is inverted: min={global_min!r} > max={global_max!r}")

    data_range = global_max - global_min
    padded_min = 0.0
    if global_min != 0:
        padded_min = global_min - PAD_FRACTION * abs(global_min) - PAD_FRACTION * data_range
    padded_max = 0.0
    if global_max != 0:
        padded_max = global_max + PAD_FRACTION * abs(global_max) + PAD_FRACTION * data_range

    if padded_max == padded_min:
        return 0.0, 1.0
    return padded_min, padded_max


def step_multiplier(fraction: float) -> float:
    """Nice-number multiplier for a leading-digit fraction in [1, 10)."""
    for upper, multiplier in STEP_BREAKPOINTS:
        if fraction <= upper:
            return multiplier
    return STEP_MULTIPLIER_OVERFLOW


def plan_axis(global_min: float, global_max: float) -> AxisPlan:
    """
    Plan the value axis for a global data extent.

    Args:
        global_min: Smallest value drawn (whisker or outlier) across categories.
        global_max: Largest value drawn across categories.

    Returns:
        AxisPlan with min <= padded min <= padded max < max.

    Raises:
        ValueError: If the extent is non-finite or inverted.
    """
    padded_min, padded_max = pad_extent(global_min, global_max)

    p = math.log10(padded_max - padded_min)
    magnitude = math.floor(p)
    fraction = 10 ** (p - magnitude)

    tick_step = step_multiplier(fraction) * 10 ** magnitude
    snapped_max = tick_step * (math.floor(padded_max / tick_step) + 1)
    snapped_min = tick_step * math.floor(padded_min / tick_step)
    tick_count = int(round((snapped_max - snapped_min) / tick_step)) + 1

    return AxisPlan(
        min=snapped_min,
        max=snapped_max,
        tick_step=tick_step,
        tick_count=tick_count,
    )


def axis_ticks(plan: AxisPlan) -> list[float]:
    """Tick values from plan.min to plan.max inclusive."""
    return [float(v) for v in plan.min + plan.tick_step * np.arange(plan.tick_count)]


def gridline_tick_count(plan: AxisPlan, show_major: bool, show_minor: bool) -> int:
    """Number of horizontal gridlines: 0 without major grid, x5 with minor grid."""
    if not show_major:
        return 0
    if show_minor:
        return plan.tick_count * MINOR_TICKS_PER_MAJOR
    return plan.tick_count


def baseline_value(plan: AxisPlan) -> float:
    """Value where the category axis crosses the value axis.

    0 when the axis spans zero, otherwise the axis minimum.
    """
    if plan.min > 0 or plan.max < 0:
        return plan.min
    return 0.0
