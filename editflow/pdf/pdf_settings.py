"""Fonts, page geometry, and layout limits for PDF generation."""

from __future__ import annotations

import dataclasses
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from ..errors import GeometryError, LayoutTimeout
from ..models import FontSpec
from .pdf_constants import EPSILON, RULE_OFFSET, STATS_SCALE, TITLE_SCALE


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """Immutable page geometry used during composition.

    Coordinates derived from it are page-relative with the origin at the
    top-left corner.

    Example:
        >>> geometry = PageGeometry()
        >>> geometry.body_width > 0
        True
    """

    page_width: float = A4[0]
    page_height: float = A4[1]
    margin_left: float = 20 * mm
    margin_right: float = 20 * mm
    margin_top: float = 20 * mm
    margin_bottom: float = 20 * mm
    header_height: float = 48.0
    paragraph_spacing: float = 6.0
    font: FontSpec = field(default_factory=FontSpec)
    logo_path: Path | None = None
    logo_size: float = 36.0
    rule_color: colors.Color = field(default_factory=lambda: colors.lightgrey)
    rule_width: float = 0.8

    def __post_init__(self) -> None:
        if self.font.size <= 0:
            raise GeometryError(f"Font size must be positive, got {self.font.size:g}")
        if self.body_width <= 0:
            raise GeometryError(f"Margins leave no horizontal space: {self.body_width:g}")
        if self.body_height <= EPSILON:
            raise GeometryError(f"Margins leave no vertical space: {self.body_height:g}")
        if self.header_height < 0 or self.first_page_height <= EPSILON:
            raise GeometryError(
                f"Header height {self.header_height:g} does not fit the first page"
            )
        if self.header_height + EPSILON < self.chrome_height:
            raise GeometryError(
                f"Header height {self.header_height:g} is below the "
                f"{self.chrome_height:g} points the title block needs"
            )
        if self.logo_path is not None and self.logo_size > self.header_height - RULE_OFFSET:
            raise GeometryError(
                f"Logo size {self.logo_size:g} does not fit a "
                f"{self.header_height:g} point header"
            )

    @property
    def body_width(self) -> float:
        """Return the width available for content inside margins.

        Returns:
            Width in points.
        """

        return self.page_width - self.margin_left - self.margin_right

    @property
    def body_height(self) -> float:
        """Return the height available for content on pages after the first.

        Returns:
            Height in points.
        """

        return self.page_height - self.margin_top - self.margin_bottom

    @property
    def first_page_height(self) -> float:
        """Return the body height left on page one below the header block."""

        return self.body_height - self.header_height

    @property
    def chrome_height(self) -> float:
        """Return the smallest header block that fits the first-page chrome.

        The title and statistics baselines stack from the top margin; the
        rule sits one offset above the block bottom with one offset of
        clearance under the statistics line.
        """

        return self.font.size * (TITLE_SCALE + STATS_SCALE) + 3 * RULE_OFFSET

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PageGeometry":
        """Build geometry from a JSON-style mapping.

        Args:
            data: Keys matching field names. ``font`` may be a nested mapping
                of FontSpec fields; ``rule_color`` may be a colour name or hex.
        Returns:
            PageGeometry instance.
        Raises:
            GeometryError: Unknown keys or invalid values.

        Example:
            >>> PageGeometry.from_mapping({"margin_left": 10, "margin_right": 10}).body_width > 500
            True
        """

        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise GeometryError(f"Unknown geometry keys: {', '.join(unknown)}")
        values = dict(data)
        if isinstance(values.get("font"), Mapping):
            font_fields = {f.name for f in dataclasses.fields(FontSpec)}
            bad = sorted(set(values["font"]) - font_fields)
            if bad:
                raise GeometryError(f"Unknown font keys: {', '.join(bad)}")
            values["font"] = FontSpec(**values["font"])
        if values.get("logo_path") is not None:
            values["logo_path"] = Path(values["logo_path"])
        if isinstance(values.get("rule_color"), str):
            try:
                values["rule_color"] = colors.toColor(values["rule_color"])
            except ValueError as exc:
                raise GeometryError(f"Bad rule colour {values['rule_color']!r}") from exc
        try:
            return cls(**values)
        except TypeError as exc:
            raise GeometryError(str(exc)) from exc


@dataclass(frozen=True, slots=True)
class LayoutLimits:
    """Caller budget guarding against pathological inputs.

    Args:
        max_pages: Largest page count allowed; None disables the check.
        max_seconds: Wall-clock budget for one layout call; None disables it.
    """

    max_pages: int | None = 1000
    max_seconds: float | None = 30.0

    def start(self, clock: Callable[[], float] = time.monotonic) -> "LayoutBudget":
        """Return a running budget for one layout call."""

        return LayoutBudget(limits=self, clock=clock, started=clock())


@dataclass(slots=True)
class LayoutBudget:
    """Running page/time budget for a single layout call."""

    limits: LayoutLimits
    clock: Callable[[], float]
    started: float

    def check_time(self) -> None:
        """Raise LayoutTimeout when the time budget is spent."""

        limit = self.limits.max_seconds
        if limit is not None and self.clock() - self.started > limit:
            raise LayoutTimeout(limit="seconds", value=limit)

    def check_pages(self, count: int) -> None:
        """Raise LayoutTimeout when ``count`` pages exceed the page budget.

        Args:
            count: Number of pages produced so far.
        """

        limit = self.limits.max_pages
        if limit is not None and count > limit:
            raise LayoutTimeout(limit="pages", value=limit)
        self.check_time()


def register_font_family(
    *, regular_path: Path, bold_path: Path | None = None, name: str | None = None
) -> FontSpec:
    """Register TrueType faces with ReportLab and return a FontSpec for them.

    Args:
        regular_path: Path to the regular face.
        bold_path: Path to the bold face; the regular face is reused if None.
        name: Registered base name; defaults to the regular file stem.
    Returns:
        FontSpec naming the registered faces.

    Example:
        >>> register_font_family(regular_path=Path("DejaVuSans.ttf"))  # doctest: +SKIP
        FontSpec(regular='DejaVuSans', bold='DejaVuSans-Bold', size=12.0, leading=3.0)
    """

    regular = name or regular_path.stem
    bold = f"{regular}-Bold"
    if regular not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(regular, str(regular_path)))
    if bold not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(bold, str(bold_path or regular_path)))
    pdfmetrics.registerFontFamily(regular, normal=regular, bold=bold)
    return FontSpec(regular=regular, bold=bold)
