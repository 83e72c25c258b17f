"""Pixel layout for box-and-whisker charts.

Maps values and category ordinals to pixel coordinates so the label layout
pass and the rendering collaborator share one geometry. Does not draw.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from boxwhisker.box_chart.algorithms.axis_plan import AxisPlan
from boxwhisker.box_chart.algorithms.category_summary import CategorySummary

# Space between the plot area and the bottom/top of the value range.
CHART_PADDING = 25.0
# Horizontal gutter reserved for the value axis (each side).
AXIS_SIZE_Y = 40.0
# Vertical space reserved for the category axis.
AXIS_SIZE_X = 0.0
DEFAULT_LEGEND_SIZE = 20.0
LEGEND_PADDING = 5.0

# Label x position, in category widths from the category ordinal.
LABEL_X_OFFSET = 0.77
# Box spans [ordinal + BOX_LEFT, ordinal + BOX_RIGHT] with the whisker at BOX_CENTER.
BOX_LEFT = 0.25
BOX_CENTER = 0.5
BOX_RIGHT = 0.75


@dataclass(frozen=True)
class Viewport:
    """Drawable area in pixels. Negative sizes are clamped to 0."""
    width: float
    height: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", max(0.0, float(self.width)))
        object.__setattr__(self, "height", max(0.0, float(self.height)))


@dataclass(frozen=True)
class LinearScale:
    """Linear map from a value domain onto a pixel range."""
    domain: tuple[float, float]
    range: tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return (r0 + r1) / 2
        return r0 + (value - d0) * (r1 - r0) / (d1 - d0)

    def invert(self, pixel: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if r1 == r0:
            return (d0 + d1) / 2
        return d0 + (pixel - r0) * (d1 - d0) / (r1 - r0)


@dataclass(frozen=True)
class BoxExtents:
    """Values at which the box and whiskers of one category are drawn."""
    whisker_low: float
    box_low: float
    median: float
    box_high: float
    whisker_high: float


def legend_size(show_legend: bool) -> float:
    """Vertical pixels reserved for the legend strip."""
    if show_legend:
        return DEFAULT_LEGEND_SIZE + LEGEND_PADDING
    return LEGEND_PADDING


def make_y_scale(plan: AxisPlan, viewport: Viewport, *, show_legend: bool = True) -> LinearScale:
    """Value scale: [plan.min, plan.max] onto [CHART_PADDING, height - x axis - legend]."""
    top = viewport.height - AXIS_SIZE_X - legend_size(show_legend)
    return LinearScale(domain=(plan.min, plan.max), range=(CHART_PADDING, top))


def make_x_scale(n_categories: int, viewport: Viewport) -> LinearScale:
    """Category scale: ordinals [1, n + 1] onto the width between the axis gutters."""
    return LinearScale(
        domain=(1.0, float(n_categories + 1)),
        range=(AXIS_SIZE_Y, viewport.width - AXIS_SIZE_Y),
    )


def label_x(x_scale: LinearScale, ordinal: int) -> float:
    """Pixel x of the data labels of the category at ordinal."""
    return x_scale(ordinal + LABEL_X_OFFSET)


def box_extents(summary: CategorySummary) -> BoxExtents:
    """Box geometry for one summary.

    With 3 samples or fewer the box collapses onto the whiskers.
    """
    box_low: Optional[float] = summary.quartile1
    box_high: Optional[float] = summary.quartile3
    if summary.count <= 3 or box_low is None or box_high is None:
        box_low = summary.whisker_low
        box_high = summary.whisker_high
    return BoxExtents(
        whisker_low=summary.whisker_low,
        box_low=box_low,
        median=summary.median,
        box_high=box_high,
        whisker_high=summary.whisker_high,
    )
