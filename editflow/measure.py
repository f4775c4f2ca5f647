"""Text measurement backends used by the line breaker."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Mapping, Protocol, Tuple

from reportlab.pdfbase import pdfmetrics

from .errors import MeasurementFailure
from .models import BOLD, PLAIN, FontSpec, TextMetrics, Weight


class TextMeasurer(Protocol):
    """Protocol for anything that can measure a run of text."""

    def measure(self, text: str, font: FontSpec, weight: Weight = PLAIN) -> TextMetrics:
        """Return width, ascent, and descent of ``text`` in points."""


@dataclass(frozen=True, slots=True)
class ReportlabMeasurer:
    """Measure text with ReportLab's font metrics.

    Works for the standard Type 1 faces (Helvetica, Times-Roman, ...) and for
    any TrueType face registered through ``pdfmetrics.registerFont``.

    Example:
        >>> m = ReportlabMeasurer().measure("Hello", FontSpec())
        >>> round(m.width, 3)
        27.336
    """

    def measure(self, text: str, font: FontSpec, weight: Weight = PLAIN) -> TextMetrics:
        face = font.face(weight)
        width = pdfmetrics.stringWidth(text, face, font.size)
        ascent, descent = pdfmetrics.getAscentDescent(face, font.size)
        return TextMetrics(width=width, ascent=ascent, descent=abs(descent))


@dataclass(frozen=True, slots=True)
class FixedWidthMeasurer:
    """Synthetic measurer with fixed per-character advance.

    Args:
        char_width: Advance of every character, in points.
        bold_scale: Multiplier applied to bold text widths.
        ascent: Ascent reported for any text.
        descent: Descent reported for any text.
        widths: Exact widths for specific strings; overrides ``char_width``.

    Example:
        >>> FixedWidthMeasurer(char_width=5).measure("abcd", FontSpec()).width
        20.0
    """

    char_width: float = 6.0
    bold_scale: float = 1.0
    ascent: float = 9.0
    descent: float = 3.0
    widths: Mapping[str, float] = field(default_factory=dict)

    def measure(self, text: str, font: FontSpec, weight: Weight = PLAIN) -> TextMetrics:
        if text in self.widths:
            width = float(self.widths[text])
        else:
            width = len(text) * self.char_width
            if weight == BOLD:
                width *= self.bold_scale
        return TextMetrics(width=width, ascent=self.ascent, descent=self.descent)


def checked_measure(
    measurer: TextMeasurer, *, text: str, font: FontSpec, weight: Weight = PLAIN
) -> TextMetrics:
    """Measure text and reject failures or unusable numbers.

    Args:
        measurer: Backend to call.
        text: Text to measure.
        font: Font specification.
        weight: Run weight.
    Returns:
        Metrics with finite, non-negative values.
    Raises:
        MeasurementFailure: The backend raised or returned bad values.
    """

    try:
        metrics = measurer.measure(text, font, weight)
    except MeasurementFailure:
        raise
    except Exception as exc:  # noqa: BLE001
        raise MeasurementFailure(text=text, reason=str(exc) or type(exc).__name__) from exc
    values = (metrics.width, metrics.ascent, metrics.descent)
    if not all(math.isfinite(value) for value in values):
        raise MeasurementFailure(text=text, reason=f"non-finite metrics {values}")
    if any(value < 0 for value in values):
        raise MeasurementFailure(text=text, reason=f"negative metrics {values}")
    return metrics


@dataclass(slots=True)
class MeasureCache:
    """Memoize checked measurements for the duration of one layout call.

    Args:
        measurer: Backend to wrap.
        font: Font used for every lookup.
    """

    measurer: TextMeasurer
    font: FontSpec
    _cache: Dict[Tuple[str, str], TextMetrics] = field(default_factory=dict)

    def metrics(self, text: str, weight: Weight = PLAIN) -> TextMetrics:
        """Return cached metrics for ``text`` at ``weight``.

        Args:
            text: Text to measure.
            weight: Run weight.
        Returns:
            TextMetrics for the text.
        """

        key = (text, weight)
        if key not in self._cache:
            self._cache[key] = checked_measure(
                self.measurer, text=text, font=self.font, weight=weight
            )
        return self._cache[key]
