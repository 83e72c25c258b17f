"""Outlier detection: samples strictly outside the whiskers, ascending and unique."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def detect_outliers(sorted_samples: Sequence[float], low: float, high: float) -> tuple[float, ...]:
    """
    Samples strictly outside [low, high], deduplicated, in ascending order.

    Whether outliers are shown at all is decided by the caller; when the
    display is off the caller does not invoke this and uses an empty tuple.

    Args:
        sorted_samples: Sample set (ascending order expected, not required).
        low: Lower whisker bound.
        high: Upper whisker bound.

    Returns:
        Tuple of unique outlier values, ascending.
    """
    values = np.asarray(sorted_samples, dtype=float)
    outside = values[(values < low) | (values > high)]
    # np.unique sorts and deduplicates in one pass
    return tuple(float(v) for v in np.unique(outside))
