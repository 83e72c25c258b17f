"""Text-report builders for box-and-whisker summaries.

Builds (params, summary_table, outliers) from the CategorySummary list of one
update. Used for inspection and copy-to-clipboard style reports; the core
never formats numbers for display, so values are written with str().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np
import pandas as pd

from boxwhisker.box_chart.algorithms.category_summary import CategorySummary
from boxwhisker.box_chart.chart_state import ChartOptions

# Columns of the per-category summary table, in report order.
SUMMARY_COLUMNS = [
    "category",
    "ordinal",
    "count",
    "min",
    "whisker_low",
    "quartile1",
    "median",
    "mean",
    "quartile3",
    "whisker_high",
    "max",
    "n_outliers",
    "whisker_low_label",
    "whisker_high_label",
    "convention",
]

# Options keys that only affect drawing (excluded from the text report).
PARAMS_VISUAL_KEYS = frozenset({
    "show_major_grid", "show_minor_grid", "show_legend", "min_label_gap",
})


@dataclass
class ChartSummary:
    """Structured summary of one chart update.

    Attributes:
        params: Non-visual ChartOptions as dict.
        summary_table: One row per category; columns = SUMMARY_COLUMNS.
        outliers: Long-format table, one row per (category, outlier value).
    """
    params: dict[str, Any]
    summary_table: pd.DataFrame
    outliers: pd.DataFrame


def summary_table(summaries: Sequence[CategorySummary]) -> pd.DataFrame:
    """One row per category with the five/seven-number summary.

    Undefined quartiles are NaN.
    """
    rows = []
    for s in summaries:
        rows.append({
            "category": s.category,
            "ordinal": s.ordinal,
            "count": s.count,
            "min": s.minimum,
            "whisker_low": s.whisker_low,
            "quartile1": np.nan if s.quartile1 is None else s.quartile1,
            "median": s.median,
            "mean": s.mean,
            "quartile3": np.nan if s.quartile3 is None else s.quartile3,
            "whisker_high": s.whisker_high,
            "max": s.maximum,
            "n_outliers": len(s.outliers),
            "whisker_low_label": s.whisker_low_label,
            "whisker_high_label": s.whisker_high_label,
            "convention": s.convention.value,
        })
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def outlier_table(summaries: Sequence[CategorySummary]) -> pd.DataFrame:
    """Long-format outliers: columns category, ordinal, value."""
    rows = [
        {"category": s.category, "ordinal": s.ordinal, "value": v}
        for s in summaries
        for v in s.outliers
    ]
    return pd.DataFrame(rows, columns=["category", "ordinal", "value"])


def build_chart_summary(
    summaries: Sequence[CategorySummary],
    options: Optional[ChartOptions] = None,
) -> ChartSummary:
    """Assemble params, summary table and outlier table for a report."""
    if options is None:
        options = ChartOptions()
    params = {k: v for k, v in options.to_dict().items() if k not in PARAMS_VISUAL_KEYS}
    return ChartSummary(
        params=params,
        summary_table=summary_table(summaries),
        outliers=outlier_table(summaries),
    )


def summary_to_tsv(summary: ChartSummary) -> str:
    """Format a ChartSummary as a tab-separated text report.

    Sections: params (key, value rows), blank line, summary table, blank
    line, outliers. An empty table is written as "(none)".
    """
    sep = "\t"
    lines = [f"{k}{sep}{v}" for k, v in summary.params.items()]
    for title, table in (("summary", summary.summary_table), ("outliers", summary.outliers)):
        lines.append("")
        lines.append(title)
        if table.empty:
            lines.append("(none)")
        else:
            lines.append(table.to_csv(path_or_buf=None, sep=sep, index=False).rstrip("\n"))
    return "\n".join(lines)
