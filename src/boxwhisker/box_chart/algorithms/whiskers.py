"""
Whisker classification algorithm — pure numpy.

Given quartiles and a WhiskerConvention, computes the lower/upper whisker
bounds and their display labels.

Assumptions (documented):
  1. Missing quartiles (n <= 2) force MIN_MAX whatever the configured convention.
  2. Three equal samples (n == 3, quartile1 == quartile3) also force MIN_MAX.
     Larger sets with a zero IQR keep the configured convention: the fences
     collapse onto the box and every sample off it is an outlier.
  3. TUKEY whiskers are actual samples. If no sample satisfies a bound,
     BoundaryUnsatisfiableError is raised rather than returning an undefined
     whisker.
  4. STRICT_IQR whiskers are the computed fences and may lie outside the
     sample range.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from boxwhisker.box_chart.conventions import (
    IQR_WHISKER_FACTOR,
    WhiskerConvention,
    whisker_labels,
)
from boxwhisker.box_chart.errors import BoundaryUnsatisfiableError
from boxwhisker.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class WhiskerBounds:
    """Whisker bounds, their labels, and the convention actually applied."""
    low: float
    high: float
    low_label: str
    high_label: str
    convention: WhiskerConvention


# -----------------------------------------------------------------------------
# Step 1: Resolve the effective convention
# -----------------------------------------------------------------------------


def effective_convention(
    convention: WhiskerConvention,
    quartile1: Optional[float],
    quartile3: Optional[float],
    sample_count: int,
) -> WhiskerConvention:
    """Convention to apply after the degenerate-quartile overrides.

    Returns MIN_MAX when either quartile is missing, or when a three-sample
    set has a zero IQR; otherwise returns convention unchanged. Logs a
    warning when the configured convention is overridden.
    """
    if convention == WhiskerConvention.MIN_MAX:
        return convention
    if quartile1 is None or quartile3 is None:
        logger.warning(
            f"{convention.value} whiskers need quartiles (fewer than 3 samples); using min_max"
        )
        return WhiskerConvention.MIN_MAX
    if sample_count <= 3 and quartile3 == quartile1:
        logger.warning(
            f"{convention.value} whiskers are degenerate for {sample_count} equal samples "
            f"(quartile1 == quartile3 == {quartile1}); using min_max"
        )
        return WhiskerConvention.MIN_MAX
    return convention


# -----------------------------------------------------------------------------
# Step 2: One handler per convention
# -----------------------------------------------------------------------------


def _min_max_whiskers(values: np.ndarray) -> tuple[float, float]:
    return float(values.min()), float(values.max())


def _tukey_whiskers(values: np.ndarray, quartile1: float, quartile3: float) -> tuple[float, float]:
    iqr = quartile3 - quartile1
    low_bound = quartile1 - IQR_WHISKER_FACTOR * iqr
    high_bound = quartile3 + IQR_WHISKER_FACTOR * iqr

    above_low = values[values >= low_bound]
    if len(above_low) == 0:
        raise BoundaryUnsatisfiableError("lower", low_bound)
    below_high = values[values <= high_bound]
    if len(below_high) == 0:
        raise BoundaryUnsatisfiableError("upper", high_bound)
    return float(above_low.min()), float(below_high.max())


def _strict_iqr_whiskers(quartile1: float, quartile3: float) -> tuple[float, float]:
    iqr = quartile3 - quartile1
    return quartile1 - IQR_WHISKER_FACTOR * iqr, quartile3 + IQR_WHISKER_FACTOR * iqr


def classify_whiskers(
    convention: WhiskerConvention,
    samples: Sequence[float],
    quartile1: Optional[float],
    quartile3: Optional[float],
) -> WhiskerBounds:
    """
    Compute whisker bounds and labels for one category.

    Args:
        convention: Configured whisker convention.
        samples: Non-empty sample set (order irrelevant).
        quartile1: Interpolated first quartile, or None.
        quartile3: Interpolated third quartile, or None.

    Returns:
        WhiskerBounds with the effective convention.

    Raises:
        ValueError: If samples is empty.
        BoundaryUnsatisfiableError: TUKEY bound matched by no sample.
    """
    values = np.asarray(samples, dtype=float)
    if len(values) == 0:
        raise ValueError("Cannot classify whiskers of an empty sample set")

    applied = effective_convention(convention, quartile1, quartile3, len(values))

    if applied == WhiskerConvention.TUKEY:
        low, high = _tukey_whiskers(values, quartile1, quartile3)
    elif applied == WhiskerConvention.STRICT_IQR:
        low, high = _strict_iqr_whiskers(quartile1, quartile3)
    else:
        low, high = _min_max_whiskers(values)

    low_label, high_label = whisker_labels(applied)
    return WhiskerBounds(
        low=low,
        high=high,
        low_label=low_label,
        high_label=high_label,
        convention=applied,
    )
