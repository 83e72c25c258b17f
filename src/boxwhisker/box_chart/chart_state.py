"""Chart option state for box-and-whisker charts.

This module defines the ChartOptions dataclass used to serialize and pass
the per-update configuration (whisker convention and display switches).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from boxwhisker.box_chart.conventions import WhiskerConvention, parse_convention

DEFAULT_MIN_LABEL_GAP = 10.0


@dataclass
class ChartOptions:
    """Configuration for a single chart update.

    Holds the whisker convention and the display switches that gate
    optional computations (outliers, data labels, gridlines).
    """
    whisker_type: WhiskerConvention = WhiskerConvention.MIN_MAX
    show_outliers: bool = False        # detect and draw outliers
    show_data_labels: bool = False     # build and lay out numeric labels
    show_major_grid: bool = True       # gridlines at every axis tick
    show_minor_grid: bool = False      # 5 gridlines per axis tick (needs major grid)
    show_legend: bool = True           # legend strip reserves vertical space
    min_label_gap: float = DEFAULT_MIN_LABEL_GAP  # pixels between stacked labels

    def __post_init__(self) -> None:
        self.whisker_type = parse_convention(self.whisker_type)
        if self.min_label_gap <= 0:
            raise ValueError(f"min_label_gap must be positive, got {self.min_label_gap!r}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize ChartOptions to a JSON-friendly dictionary."""
        return {
            "whisker_type": self.whisker_type.value,  # Convert enum to string
            "show_outliers": self.show_outliers,
            "show_data_labels": self.show_data_labels,
            "show_major_grid": self.show_major_grid,
            "show_minor_grid": self.show_minor_grid,
            "show_legend": self.show_legend,
            "min_label_gap": self.min_label_gap,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChartOptions":
        """Deserialize ChartOptions from a dictionary.

        Missing keys take their defaults; unknown keys are ignored.

        Raises:
            ValueError: If whisker_type names an unknown convention.
        """
        return cls(
            whisker_type=parse_convention(data.get("whisker_type", WhiskerConvention.MIN_MAX.value)),
            show_outliers=bool(data.get("show_outliers", False)),
            show_data_labels=bool(data.get("show_data_labels", False)),
            show_major_grid=bool(data.get("show_major_grid", True)),
            show_minor_grid=bool(data.get("show_minor_grid", False)),
            show_legend=bool(data.get("show_legend", True)),
            min_label_gap=float(data.get("min_label_gap", DEFAULT_MIN_LABEL_GAP)),
        )
