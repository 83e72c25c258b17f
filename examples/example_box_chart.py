"""Build box-and-whisker chart data for three categories and print a text report."""

import numpy as np

from boxwhisker import ChartOptions, WhiskerConvention, build_chart
from boxwhisker.box_chart.chart_summary import build_chart_summary, summary_to_tsv
from boxwhisker.utils.logging import configure_logging

configure_logging(level="DEBUG")

rng = np.random.default_rng(0)
categories = {
    "control": rng.normal(20, 4, size=40).tolist(),
    "treated": rng.normal(26, 6, size=40).tolist() + [70.0],
    None: [18.0, 19.5, 22.0],
}

options = ChartOptions(
    whisker_type=WhiskerConvention.TUKEY,
    show_outliers=True,
    show_data_labels=True,
)
data = build_chart(categories, options)

plan = data.axis_plan
print(f"axis: [{plan.min}, {plan.max}] step={plan.tick_step} ticks={plan.tick_count}")
for summary, labels in zip(data.summaries, data.labels):
    print(f"{summary.category}: " + ", ".join(f"{c.value:.2f}@y={c.y:.1f}" for c in labels))
print()
print(summary_to_tsv(build_chart_summary(data.summaries, options)))
