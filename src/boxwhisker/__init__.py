"""
boxwhisker: box-and-whisker statistics and label layout for chart visuals.

This package provides:
- Per-category five/seven-number summaries under MinMax, Tukey or strict IQR whiskers
- Outlier detection consistent with the whisker convention
- "Nice" value-axis planning and pixel scales
- Greedy collision-free placement of numeric data labels
- Logging utilities for library and application use

For logging configuration in standalone scripts:
    ```python
    from boxwhisker.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```

When used as a library, logging is handled by the host application's configuration.
"""

import logging

from boxwhisker.utils.logging import configure_logging, get_logger

from boxwhisker.box_chart import (
    BoundaryUnsatisfiableError,
    BoxWhiskerChartBuilder,
    BoxWhiskerChartData,
    CategorySummary,
    ChartOptions,
    WhiskerConvention,
    build_chart,
)

# Ensure boxwhisker logger has NullHandler so logs don't propagate to root
# when no application has configured logging.
_logger = logging.getLogger("boxwhisker")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "BoundaryUnsatisfiableError",
    "BoxWhiskerChartBuilder",
    "BoxWhiskerChartData",
    "CategorySummary",
    "ChartOptions",
    "WhiskerConvention",
    "build_chart",
    "configure_logging",
    "get_logger",
]

__version__ = "0.1.0"
