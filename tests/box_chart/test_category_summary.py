"""Unit tests for the per-category summarizer."""

import dataclasses
import math

import numpy as np
import pytest

from boxwhisker.box_chart.algorithms.category_summary import (
    build_label_values,
    prepare_samples,
    summarize_category,
)
from boxwhisker.box_chart.chart_state import ChartOptions
from boxwhisker.box_chart.conventions import BLANK_CATEGORY_LABEL, WhiskerConvention


def test_min_max_scenario(skewed_samples):
    """MIN_MAX: whiskers at 1 and 100, no outliers even when outliers are shown."""
    options = ChartOptions(whisker_type=WhiskerConvention.MIN_MAX, show_outliers=True)
    s = summarize_category("A", skewed_samples, options)
    assert (s.minimum, s.maximum) == (1, 100)
    assert s.median == 5.5
    assert s.quartile1 == pytest.approx(3.25)
    assert s.quartile3 == pytest.approx(7.75)
    assert (s.whisker_low, s.whisker_high) == (1, 100)
    assert s.outliers == ()
    assert s.count == 10
    assert s.mean == pytest.approx(14.5)


def test_tukey_scenario(skewed_samples):
    """TUKEY: whiskers at 1 and 9, 100 is the only outlier."""
    options = ChartOptions(whisker_type=WhiskerConvention.TUKEY, show_outliers=True)
    s = summarize_category("A", skewed_samples, options)
    assert s.iqr == pytest.approx(4.5)
    assert (s.whisker_low, s.whisker_high) == (1, 9)
    assert s.outliers == (100.0,)
    assert s.extent == (1, 100)


def test_outliers_hidden_when_switched_off(skewed_samples):
    options = ChartOptions(whisker_type=WhiskerConvention.TUKEY, show_outliers=False)
    s = summarize_category("A", skewed_samples, options)
    assert s.outliers == ()
    assert s.extent == (1, 9)


def test_label_values_built_when_labels_shown(skewed_samples):
    """Labels: whisker high/low, mean, median, quartiles, then outliers."""
    options = ChartOptions(
        whisker_type=WhiskerConvention.TUKEY, show_outliers=True, show_data_labels=True
    )
    s = summarize_category("A", skewed_samples, options)
    assert s.label_values == pytest.approx((9, 1, 14.5, 5.5, 3.25, 7.75, 100))


def test_label_values_empty_when_labels_hidden(skewed_samples):
    s = summarize_category("A", skewed_samples, ChartOptions())
    assert s.label_values == ()
    assert s.label_candidates() == []


def test_label_values_skip_undefined_and_duplicates():
    """Two samples: no quartiles, and mean == median appears once."""
    s = summarize_category("A", [3, 1], ChartOptions(show_data_labels=True))
    assert s.quartile1 is None and s.quartile3 is None
    assert s.label_values == (3.0, 1.0, 2.0)


def test_build_label_values_dedupes_outlier_equal_to_stat():
    assert build_label_values(9, 1, 5, 5, 3, 7, [1, 20]) == (9.0, 1.0, 5.0, 3.0, 7.0, 20.0)


def test_label_candidates_are_fresh_and_unplaced(skewed_samples):
    """Each call returns new candidates at the placeholder position."""
    s = summarize_category("A", skewed_samples, ChartOptions(show_data_labels=True))
    first = s.label_candidates()
    first[0].y = 123.0
    second = s.label_candidates()
    assert [c.value for c in second] == list(s.label_values)
    assert all(c.x == 0 and c.y == 0 for c in second)


def test_three_equal_samples_scenario():
    """[5, 5, 5] with TUKEY configured: quartiles 5/5 and MIN_MAX applied."""
    s = summarize_category("A", [5, 5, 5], ChartOptions(whisker_type=WhiskerConvention.TUKEY))
    assert (s.median, s.quartile1, s.quartile3) == (5, 5, 5)
    assert s.convention == WhiskerConvention.MIN_MAX


def test_zero_iqr_tukey_flags_values_off_the_box():
    """Seven samples with q1 == q3 == 5: TUKEY stays, 1 and 9 are outliers."""
    options = ChartOptions(whisker_type=WhiskerConvention.TUKEY, show_outliers=True)
    s = summarize_category("A", [1, 5, 5, 5, 5, 5, 9], options)
    assert (s.quartile1, s.quartile3) == (5, 5)
    assert s.convention == WhiskerConvention.TUKEY
    assert (s.whisker_low, s.whisker_high) == (5, 5)
    assert s.outliers == (1.0, 9.0)
    assert s.extent == (1, 9)


def test_missing_values_dropped():
    s = summarize_category("A", [None, 2, float("nan"), 1])
    assert s.count == 2
    assert (s.minimum, s.maximum) == (1, 2)


def test_prepare_samples_sorts():
    assert prepare_samples([3, None, 1, 2]).tolist() == [1.0, 2.0, 3.0]


def test_empty_category_raises():
    with pytest.raises(ValueError) as exc_info:
        summarize_category("empty", [None, float("nan")])
    assert "empty" in str(exc_info.value)


def test_blank_category_label():
    s = summarize_category(None, [1, 2, 3])
    assert s.category == BLANK_CATEGORY_LABEL


def test_summary_is_immutable(skewed_samples):
    s = summarize_category("A", skewed_samples)
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.median = 0


@pytest.mark.parametrize("convention", list(WhiskerConvention))
def test_invariants_random(convention):
    """Quartiles present together; whisker_low <= median <= whisker_high; outliers outside."""
    rng = np.random.default_rng(2024)
    options = ChartOptions(whisker_type=convention, show_outliers=True, show_data_labels=True)
    for n in range(1, 60):
        samples = rng.lognormal(mean=1.0, sigma=1.2, size=n).round(2)
        s = summarize_category("A", samples, options)
        assert (s.quartile1 is None) == (s.quartile3 is None)
        assert (s.quartile1 is None) == (n <= 2)
        if s.has_quartiles:
            assert s.whisker_low <= s.median <= s.whisker_high
        assert all(v < s.whisker_low or v > s.whisker_high for v in s.outliers)
        assert list(s.outliers) == sorted(set(s.outliers))
        assert len(set(s.label_values)) == len(s.label_values)
        assert math.isclose(s.mean, float(np.mean(samples)))
