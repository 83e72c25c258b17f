"""Whisker conventions and display-label constants for box-and-whisker charts.

Single source of truth for the convention enum and the label strings so the
classifier, the chart options, and the text report stay consistent.
"""

from __future__ import annotations

from enum import Enum


class WhiskerConvention(Enum):
    """Rule set that decides where the whiskers end.

    MIN_MAX: whiskers at the absolute sample extremes.
    TUKEY: whiskers at the most extreme samples within 1.5 x IQR of the quartiles.
    STRICT_IQR: whiskers at the computed 1.5 x IQR boundaries themselves.
    """
    MIN_MAX = "min_max"
    TUKEY = "tukey"
    STRICT_IQR = "strict_iqr"


# Multiplier applied to the IQR by the Tukey and StrictIQR conventions.
IQR_WHISKER_FACTOR = 1.5

MIN_LABEL = "Minimum"
MAX_LABEL = "Maximum"
IQR_LOW_LABEL = "Q1 − 1.5 × IQR"
IQR_HIGH_LABEL = "Q3 + 1.5 × IQR"

# Display name used for a category whose identifier is missing.
BLANK_CATEGORY_LABEL = "(blank)"


def whisker_labels(convention: WhiskerConvention) -> tuple[str, str]:
    """(low_label, high_label) shown next to the whiskers for a convention."""
    if convention == WhiskerConvention.STRICT_IQR:
        return IQR_LOW_LABEL, IQR_HIGH_LABEL
    return MIN_LABEL, MAX_LABEL


def parse_convention(value: object) -> WhiskerConvention:
    """Coerce an enum member or its string value to WhiskerConvention.

    Raises:
        ValueError: If value does not name a known convention.
    """
    if isinstance(value, WhiskerConvention):
        return value
    try:
        return WhiskerConvention(str(value))
    except ValueError:
        known = ", ".join(c.value for c in WhiskerConvention)
        raise ValueError(f"Unknown whisker convention {value!r}; expected one of: {known}") from None


def category_display_label(category: object) -> str:
    """Display label for a category identifier; None becomes BLANK_CATEGORY_LABEL."""
    if category is None:
        return BLANK_CATEGORY_LABEL
    return str(category)
