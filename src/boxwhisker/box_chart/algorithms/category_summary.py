"""
Category summary algorithm — pure numpy, self-contained.

Orchestrates quantile estimation, whisker classification and outlier
detection for one category and assembles an immutable CategorySummary.

Steps:
  1. prepare_samples: drop missing values (None / NaN) and sort ascending.
  2. estimate_quantiles: median, quartile1, quartile3.
  3. classify_whiskers: bounds + labels under the (possibly overridden) convention.
  4. detect_outliers: only when outliers are shown.
  5. mean (plain sum / count) and the label-candidate values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

import numpy as np

from boxwhisker.box_chart.algorithms.outliers import detect_outliers
from boxwhisker.box_chart.algorithms.quantiles import estimate_quantiles
from boxwhisker.box_chart.algorithms.whiskers import classify_whiskers
from boxwhisker.box_chart.chart_state import ChartOptions
from boxwhisker.box_chart.conventions import WhiskerConvention, category_display_label
from boxwhisker.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class LabelCandidate:
    """A numeric annotation anchor: value plus pixel position.

    x and y are placeholders (0) until the label layout pass sets them.
    """
    value: float
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class CategorySummary:
    """Box-and-whisker summary of one category.

    Attributes:
        category: Display label of the category ("(blank)" when missing).
        ordinal: 1-based position of the category on the x axis.
        count: Number of samples.
        minimum / maximum: Absolute sample extremes.
        median: Median of the samples.
        quartile1 / quartile3: Interpolated quartiles; both None when count <= 2.
        mean: Arithmetic mean.
        whisker_low / whisker_high: Whisker bounds under the applied convention.
        whisker_low_label / whisker_high_label: Display text for the whiskers.
        convention: Convention actually applied (after overrides).
        outliers: Unique outlier values, ascending (empty when outliers are hidden).
        label_values: Values to annotate (empty when data labels are hidden).
    """
    category: str
    ordinal: int
    count: int
    minimum: float
    maximum: float
    median: float
    quartile1: Optional[float]
    quartile3: Optional[float]
    mean: float
    whisker_low: float
    whisker_high: float
    whisker_low_label: str
    whisker_high_label: str
    convention: WhiskerConvention
    outliers: tuple[float, ...] = field(default_factory=tuple)
    label_values: tuple[float, ...] = field(default_factory=tuple)

    @property
    def has_quartiles(self) -> bool:
        return self.quartile1 is not None and self.quartile3 is not None

    @property
    def iqr(self) -> Optional[float]:
        if not self.has_quartiles:
            return None
        return self.quartile3 - self.quartile1

    @property
    def extent(self) -> tuple[float, float]:
        """(low, high) drawn for this category: whiskers widened by any outlier."""
        low = min((self.whisker_low, *self.outliers))
        high = max((self.whisker_high, *self.outliers))
        return low, high

    def label_candidates(self) -> list[LabelCandidate]:
        """Fresh, unplaced label candidates; the summary itself is never mutated."""
        return [LabelCandidate(value=v) for v in self.label_values]


# -----------------------------------------------------------------------------
# Step 1: Missing-value filter + sort
# -----------------------------------------------------------------------------


def prepare_samples(samples: Iterable[Any]) -> np.ndarray:
    """Drop None / NaN values and return an ascending float array."""
    kept = [v for v in samples if v is not None]
    values = np.asarray(kept, dtype=float)
    values = values[~np.isnan(values)]
    return np.sort(values)


# -----------------------------------------------------------------------------
# Step 5: Label-candidate values
# -----------------------------------------------------------------------------


def build_label_values(
    whisker_high: float,
    whisker_low: float,
    mean: float,
    median: float,
    quartile1: Optional[float],
    quartile3: Optional[float],
    outliers: Iterable[float],
) -> tuple[float, ...]:
    """Unique {whisker_high, whisker_low, mean, median, quartile1, quartile3} followed by outliers.

    Undefined quartiles are skipped; duplicates are removed by value, first occurrence wins.
    """
    result: list[float] = []
    for v in (whisker_high, whisker_low, mean, median, quartile1, quartile3, *outliers):
        if v is None or v in result:
            continue
        result.append(float(v))
    return tuple(result)


# -----------------------------------------------------------------------------
# Full pipeline: sample set → CategorySummary
# -----------------------------------------------------------------------------


def summarize_category(
    category: Any,
    samples: Iterable[Any],
    options: Optional[ChartOptions] = None,
    *,
    ordinal: int = 1,
) -> CategorySummary:
    """
    Summarize one category's sample set.

    Pure function of (samples, options): nothing is cached or mutated.

    Args:
        category: Category identifier (None is displayed as "(blank)").
        samples: Sample values in any order; None / NaN are ignored.
        options: Chart options (convention, show_outliers, show_data_labels).
            Defaults to ChartOptions().
        ordinal: 1-based x position of the category.

    Returns:
        CategorySummary.

    Raises:
        ValueError: If no sample remains after dropping missing values.
        BoundaryUnsatisfiableError: TUKEY bound matched by no sample.
    """
    if options is None:
        options = ChartOptions()
    label = category_display_label(category)

    values = prepare_samples(samples)
    if len(values) == 0:
        raise ValueError(f"Category {label!r} has no samples to summarize")

    quantiles = estimate_quantiles(values)
    whiskers = classify_whiskers(
        options.whisker_type, values, quantiles.quartile1, quantiles.quartile3
    )

    outliers: tuple[float, ...] = ()
    if options.show_outliers:
        outliers = detect_outliers(values, whiskers.low, whiskers.high)

    mean = float(values.sum() / len(values))

    label_values: tuple[float, ...] = ()
    if options.show_data_labels:
        label_values = build_label_values(
            whiskers.high,
            whiskers.low,
            mean,
            quantiles.median,
            quantiles.quartile1,
            quantiles.quartile3,
            outliers,
        )

    summary = CategorySummary(
        category=label,
        ordinal=ordinal,
        count=len(values),
        minimum=float(values[0]),
        maximum=float(values[-1]),
        median=quantiles.median,
        quartile1=quantiles.quartile1,
        quartile3=quantiles.quartile3,
        mean=mean,
        whisker_low=whiskers.low,
        whisker_high=whiskers.high,
        whisker_low_label=whiskers.low_label,
        whisker_high_label=whiskers.high_label,
        convention=whiskers.convention,
        outliers=outliers,
        label_values=label_values,
    )
    logger.debug(
        f"Summarized {label!r}: n={summary.count}, median={summary.median}, "
        f"whiskers=({summary.whisker_low}, {summary.whisker_high}), "
        f"outliers={len(summary.outliers)}, convention={summary.convention.value}"
    )
    return summary
