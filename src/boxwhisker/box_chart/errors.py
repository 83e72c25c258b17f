"""Exceptions raised by the box-and-whisker engine."""

from __future__ import annotations


class BoxWhiskerError(Exception):
    """Base class for box-and-whisker computation errors."""


class BoundaryUnsatisfiableError(BoxWhiskerError, ValueError):
    """No sample lies within a Tukey whisker bound.

    Raised instead of returning an undefined whisker, which would corrupt
    the axis range computed from the summaries.
    """

    def __init__(self, side: str, bound: float) -> None:
        self.side = side
        self.bound = bound
        super().__init__(f"No sample satisfies the {side} Tukey whisker bound {bound!r}")
