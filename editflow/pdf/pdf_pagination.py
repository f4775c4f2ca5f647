"""Page composition: split a line stream into fixed-size pages."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import List, Sequence

from .pdf_constants import DEFAULT_TITLE, EPSILON
from .pdf_debug import _debug
from .pdf_settings import LayoutBudget, PageGeometry
from .pdf_types import DocumentHeader, DocumentStats, Line, Page


class ComposeState(Enum):
    """States of the page compositor."""

    FILLING_FIRST_PAGE = "filling-first-page"
    FILLING_PAGE = "filling-page"
    DONE = "done"


class PageCompositor:
    """Accumulate lines onto pages until each page's body height is used up.

    Page one loses the header block height; later pages use the full body.
    A line taller than an empty page is still placed, alone, on its own
    page.
    """

    def __init__(
        self,
        *,
        lines: Sequence[Line],
        geometry: PageGeometry,
        header: DocumentHeader,
        budget: LayoutBudget | None = None,
    ) -> None:
        """Create a compositor for one document's line stream."""

        self.lines = lines
        self.geometry = geometry
        self.header = header
        self.budget = budget
        self.state = ComposeState.FILLING_FIRST_PAGE
        self.pages: List[Page] = []
        self._placed: List[Line] = []
        self._used = 0.0
        self._forced = False

    @property
    def available_height(self) -> float:
        """Return the body height of the page being filled."""

        if self.state is ComposeState.FILLING_FIRST_PAGE:
            return self.geometry.first_page_height
        return self.geometry.body_height

    @property
    def body_top(self) -> float:
        """Return the y coordinate of the first body line on this page."""

        if self.state is ComposeState.FILLING_FIRST_PAGE:
            return self.geometry.margin_top + self.geometry.header_height
        return self.geometry.margin_top

    def run(self) -> List[Page]:
        """Compose all lines and return the pages.

        Returns:
            Pages in order; a single empty page when there are no lines.
        """

        if self.state is ComposeState.DONE:
            return self.pages
        for line in self.lines:
            self._place(line=line)
        self._emit_page()
        self.state = ComposeState.DONE
        return self.pages

    def _spacing_before(self, *, line: Line) -> float:
        """Return paragraph spacing owed before ``line`` on the current page.

        Args:
            line: Line about to be placed.
        Returns:
            Spacing in points; zero at the top of a page.
        """

        if not self._placed:
            return 0.0
        if self._placed[-1].paragraph_index == line.paragraph_index:
            return 0.0
        return self.geometry.paragraph_spacing

    def _place(self, *, line: Line) -> None:
        """Place one line, starting a new page first when it does not fit.

        Args:
            line: Line to place.
        Returns:
            None.
        """

        spacing = self._spacing_before(line=line)
        if self._placed and self._used + spacing + line.height > self.available_height + EPSILON:
            self._emit_page()
            spacing = 0.0
        if not self._placed and line.height > self.available_height + EPSILON:
            _debug(msg=f"page {len(self.pages) + 1}: forced overflow {line.height:.2f}")
            self._forced = True
        top = self.body_top + self._used + spacing
        self._placed.append(
            replace(line, x=self.geometry.margin_left, baseline=top + line.ascent)
        )
        self._used += spacing + line.height

    def _emit_page(self) -> None:
        """Close the current page and move to the next one.

        Returns:
            None.
        """

        if self.budget is not None:
            self.budget.check_pages(len(self.pages) + 1)
        page = Page(
            index=len(self.pages) + 1,
            lines=tuple(self._placed),
            header=self.header,
            geometry=self.geometry,
            available_height=self.available_height,
            used_height=self._used,
            forced_overflow=self._forced,
        )
        _debug(
            msg=(
                f"page {page.index}: {len(page.lines)} lines, "
                f"{page.used_height:.2f}/{page.available_height:.2f}"
            )
        )
        self.pages.append(page)
        self._placed = []
        self._used = 0.0
        self._forced = False
        self.state = ComposeState.FILLING_PAGE


def compose_pages(
    lines: Sequence[Line],
    geometry: PageGeometry,
    *,
    header: DocumentHeader | None = None,
    budget: LayoutBudget | None = None,
) -> List[Page]:
    """Split a line stream into pages.

    Args:
        lines: Lines from the line breaker, in reading order.
        geometry: Page geometry.
        header: Header metadata attached to every page; the default title
            with zero counts when None.
        budget: Optional running page/time budget.
    Returns:
        Pages numbered from 1.
    Raises:
        LayoutTimeout: The budget was exceeded.

    Example:
        >>> pages = compose_pages([], PageGeometry())
        >>> len(pages), pages[0].index, pages[0].lines
        (1, 1, ())
    """

    resolved = header or DocumentHeader(title=DEFAULT_TITLE, stats=DocumentStats())
    return PageCompositor(
        lines=lines, geometry=geometry, header=resolved, budget=budget
    ).run()
