"""
Quantile estimation algorithm — pure numpy.

Median and linearly-interpolated quartiles of an ascending sample array.

Method (documented, must not be swapped for another percentile method):
  1. Median: mean of the elements at floor((n-1)/2) and ceil((n-1)/2).
  2. n <= 2: quartiles are undefined (None).
  3. n == 3: quartile1 is the first element, quartile3 the last.
  4. Otherwise: fractional rank r1 = (n-1)/4 and r3 = 3*r1. Each quartile is
     lo + frac(r) * (hi - lo) with lo, hi the elements at floor(r), ceil(r).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np


@dataclass(frozen=True)
class QuantileEstimate:
    """Median and (optional) quartiles of one sample set."""
    median: float
    quartile1: Optional[float]
    quartile3: Optional[float]

    @property
    def has_quartiles(self) -> bool:
        return self.quartile1 is not None and self.quartile3 is not None

    @property
    def iqr(self) -> Optional[float]:
        """quartile3 - quartile1, or None when quartiles are undefined."""
        if not self.has_quartiles:
            return None
        return self.quartile3 - self.quartile1


def _interpolate(values: np.ndarray, rank: float) -> float:
    """Linear interpolation between the floor and ceil neighbours of a fractional rank."""
    lo = float(values[math.floor(rank)])
    hi = float(values[math.ceil(rank)])
    return lo + (rank - math.floor(rank)) * (hi - lo)


def estimate_median(sorted_samples: Sequence[float]) -> float:
    """Median of an ascending sample array (mean of the two middle elements)."""
    values = np.asarray(sorted_samples, dtype=float)
    n = len(values)
    if n == 0:
        raise ValueError("Cannot estimate the median of an empty sample set")
    return (float(values[math.floor((n - 1) / 2)]) + float(values[math.ceil((n - 1) / 2)])) / 2


def estimate_quantiles(sorted_samples: Sequence[float]) -> QuantileEstimate:
    """
    Estimate median, quartile1 and quartile3 from an ascending sample array.

    The caller is responsible for sorting; the estimator does not sort.

    Args:
        sorted_samples: Ascending, non-empty sequence of finite numbers.

    Returns:
        QuantileEstimate. Quartiles are None when fewer than 3 samples.

    Raises:
        ValueError: If sorted_samples is empty.
    """
    values = np.asarray(sorted_samples, dtype=float)
    n = len(values)
    median = estimate_median(values)

    if n <= 2:
        return QuantileEstimate(median=median, quartile1=None, quartile3=None)

    if n == 3:
        return QuantileEstimate(
            median=median,
            quartile1=float(values[0]),
            quartile3=float(values[-1]),
        )

    r1 = (n - 1) / 4
    r3 = 3 * r1
    return QuantileEstimate(
        median=median,
        quartile1=_interpolate(values, r1),
        quartile3=_interpolate(values, r3),
    )
