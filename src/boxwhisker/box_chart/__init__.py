"""Box-and-whisker summarization and label layout."""

from boxwhisker.box_chart.algorithms.axis_plan import AxisPlan, plan_axis
from boxwhisker.box_chart.algorithms.category_summary import (
    CategorySummary,
    LabelCandidate,
    summarize_category,
)
from boxwhisker.box_chart.algorithms.label_layout import resolve_labels
from boxwhisker.box_chart.chart_builder import (
    BoxWhiskerChartBuilder,
    BoxWhiskerChartData,
    ChartWarning,
    build_chart,
)
from boxwhisker.box_chart.chart_layout import LinearScale, Viewport
from boxwhisker.box_chart.chart_state import ChartOptions
from boxwhisker.box_chart.conventions import WhiskerConvention
from boxwhisker.box_chart.errors import BoundaryUnsatisfiableError, BoxWhiskerError

__all__ = [
    "AxisPlan",
    "BoundaryUnsatisfiableError",
    "BoxWhiskerChartBuilder",
    "BoxWhiskerChartData",
    "BoxWhiskerError",
    "CategorySummary",
    "ChartOptions",
    "ChartWarning",
    "LabelCandidate",
    "LinearScale",
    "Viewport",
    "WhiskerConvention",
    "build_chart",
    "plan_axis",
    "resolve_labels",
    "summarize_category",
]
