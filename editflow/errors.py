"""Typed failures raised by the layout pipeline."""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for every failure surfaced by a layout call."""


class MeasurementFailure(LayoutError):
    """The text measurer failed or returned unusable metrics.

    Args:
        text: Text that was being measured.
        reason: Human-readable cause.
    """

    def __init__(self, *, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Could not measure {text!r}: {reason}")


class LayoutTimeout(LayoutError):
    """Pagination exceeded the caller's page or time budget.

    Args:
        limit: Which limit tripped ("pages" or "seconds").
        value: The configured limit.
    """

    def __init__(self, *, limit: str, value: float) -> None:
        self.limit = limit
        self.value = value
        super().__init__(f"Layout exceeded the {limit} budget of {value:g}")


class GeometryError(LayoutError, ValueError):
    """Page geometry or layout configuration is unusable."""
