"""Box-and-whisker chart data for one update cycle.

This module provides the BoxWhiskerChartBuilder class, which turns raw
per-category samples plus ChartOptions into everything a rendering
collaborator needs: category summaries, the axis plan and scales, and
finalized label positions. Nothing is kept between updates.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Union

from boxwhisker.box_chart.algorithms.axis_plan import (
    AxisPlan,
    baseline_value,
    gridline_tick_count,
    plan_axis,
)
from boxwhisker.box_chart.algorithms.category_summary import (
    CategorySummary,
    LabelCandidate,
    prepare_samples,
    summarize_category,
)
from boxwhisker.box_chart.algorithms.label_layout import resolve_labels
from boxwhisker.box_chart.chart_layout import (
    LinearScale,
    Viewport,
    label_x,
    make_x_scale,
    make_y_scale,
)
from boxwhisker.box_chart.chart_state import ChartOptions
from boxwhisker.box_chart.conventions import category_display_label
from boxwhisker.utils.logging import get_logger

logger = get_logger(__name__)

DATASET_INVALID_CODE = "DataSetInvalid"
DATASET_INVALID_MESSAGE = "Dataset is not valid or too small/empty for this visualization."

DEFAULT_VIEWPORT = Viewport(width=600.0, height=400.0)

CategoryInput = Union[Mapping[Any, Iterable[Any]], Iterable[tuple[Any, Iterable[Any]]]]


@dataclass(frozen=True)
class ChartWarning:
    """User-visible warning for the host to display."""
    code: str
    message: str


@dataclass
class BoxWhiskerChartData:
    """Everything the renderer consumes for one update.

    Attributes:
        summaries: One CategorySummary per non-empty category, in input order.
        axis_plan: Value-axis plan, or None when the dataset is invalid.
        y_scale / x_scale: Pixel scales, or None when the dataset is invalid.
        labels: Placed labels per summary (parallel to summaries).
        gridline_count: Number of horizontal gridlines to draw.
        baseline: Value where the category axis crosses, or None.
        warnings: User-visible warnings raised during the update.
    """
    summaries: list[CategorySummary] = field(default_factory=list)
    axis_plan: Optional[AxisPlan] = None
    y_scale: Optional[LinearScale] = None
    x_scale: Optional[LinearScale] = None
    labels: list[list[LabelCandidate]] = field(default_factory=list)
    gridline_count: int = 0
    baseline: Optional[float] = None
    warnings: list[ChartWarning] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.summaries


def global_extent(summaries: Iterable[CategorySummary]) -> tuple[float, float]:
    """(min, max) over every summary's whiskers and outliers.

    Raises:
        ValueError: If summaries is empty.
    """
    extents = [s.extent for s in summaries]
    if not extents:
        raise ValueError("global_extent needs at least one summary")
    return min(lo for lo, _ in extents), max(hi for _, hi in extents)


def _iter_categories(categories: CategoryInput) -> Iterable[tuple[Any, Iterable[Any]]]:
    if isinstance(categories, Mapping):
        return categories.items()
    return categories


class BoxWhiskerChartBuilder:
    """Builds BoxWhiskerChartData from raw category samples.

    Attributes:
        viewport: Drawable area used for the pixel scales.
    """

    def __init__(self, viewport: Optional[Viewport] = None) -> None:
        self.viewport = viewport if viewport is not None else DEFAULT_VIEWPORT

    def summarize(
        self,
        categories: CategoryInput,
        options: ChartOptions,
    ) -> list[CategorySummary]:
        """Summarize each non-empty category; empty ones are skipped with a warning.

        Raises:
            BoundaryUnsatisfiableError: A TUKEY whisker bound matched no sample.
        """
        summaries: list[CategorySummary] = []
        for category, samples in _iter_categories(categories):
            values = prepare_samples(samples)
            if len(values) == 0:
                logger.warning(
                    f"Category {category_display_label(category)!r} has no samples after "
                    "dropping missing values, skipping"
                )
                continue
            summaries.append(
                summarize_category(category, values, options, ordinal=len(summaries) + 1)
            )
        return summaries

    def build(
        self,
        categories: CategoryInput,
        options: Optional[ChartOptions] = None,
        *,
        viewport: Optional[Viewport] = None,
    ) -> BoxWhiskerChartData:
        """
        Run one full update: summaries, axis plan, scales and label layout.

        Args:
            categories: Mapping of category -> samples, or (category, samples) pairs.
            options: ChartOptions; defaults to ChartOptions().
            viewport: Overrides self.viewport for this update.

        Returns:
            BoxWhiskerChartData. Empty with a DataSetInvalid warning when no
            category has samples or every drawn value is identical.

        Raises:
            BoundaryUnsatisfiableError: A TUKEY whisker bound matched no sample.
        """
        if options is None:
            options = ChartOptions()
        if viewport is None:
            viewport = self.viewport

        summaries = self.summarize(categories, options)
        if not summaries:
            logger.warning("No category has samples; nothing to draw")
            return self._invalid_result()

        lo, hi = global_extent(summaries)
        if not (math.isfinite(lo) and math.isfinite(hi)):
            logger.warning(f"Global extent is not finite ({lo}, {hi}); nothing to draw")
            return self._invalid_result()
        if lo == hi:
            logger.warning(f"Every drawn value equals {lo}; axis would be degenerate")
            return self._invalid_result()

        plan = plan_axis(lo, hi)
        y_scale = make_y_scale(plan, viewport, show_legend=options.show_legend)
        x_scale = make_x_scale(len(summaries), viewport)
        logger.info(
            f"Chart update: categories={len(summaries)}, extent=({lo}, {hi}), "
            f"axis=[{plan.min}, {plan.max}] step={plan.tick_step} ticks={plan.tick_count}, "
            f"convention={options.whisker_type.value}"
        )

        labels: list[list[LabelCandidate]] = []
        for summary in summaries:
            if not options.show_data_labels:
                labels.append([])
                continue
            labels.append(
                resolve_labels(
                    summary.label_candidates(),
                    summary.median,
                    y_scale,
                    label_x(x_scale, summary.ordinal),
                    median_y=y_scale(summary.median),
                    min_pixel_gap=options.min_label_gap,
                )
            )

        return BoxWhiskerChartData(
            summaries=summaries,
            axis_plan=plan,
            y_scale=y_scale,
            x_scale=x_scale,
            labels=labels,
            gridline_count=gridline_tick_count(plan, options.show_major_grid, options.show_minor_grid),
            baseline=baseline_value(plan),
        )

    @staticmethod
    def _invalid_result() -> BoxWhiskerChartData:
        return BoxWhiskerChartData(
            warnings=[ChartWarning(code=DATASET_INVALID_CODE, message=DATASET_INVALID_MESSAGE)],
        )


def build_chart(
    categories: CategoryInput,
    options: Optional[ChartOptions] = None,
    *,
    viewport: Optional[Viewport] = None,
) -> BoxWhiskerChartData:
    """Convenience wrapper: BoxWhiskerChartBuilder(viewport).build(categories, options)."""
    return BoxWhiskerChartBuilder(viewport).build(categories, options)
