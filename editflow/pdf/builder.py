"""PDF generation for an editor text snapshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from tqdm import tqdm

from ..bionic import ShortWordPolicy, transform
from ..cleaning import normalize_newlines
from ..measure import ReportlabMeasurer, TextMeasurer
from .pdf_canvas import render_pdf
from .pdf_constants import DEFAULT_TITLE
from .pdf_emit import emit
from .pdf_pagination import compose_pages
from .pdf_settings import LayoutLimits, PageGeometry
from .pdf_stats import document_header
from .pdf_text_lines import layout_paragraphs
from .pdf_types import Page, RenderInstruction

__all__ = [
    "ExportOptions",
    "build_pdf",
    "export_instructions",
    "layout_document",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExportOptions:
    """Per-export choices made by the caller.

    Args:
        bionic: Render words with a bold leading half.
        short_words: Bionic policy for words of three characters or fewer.
        title: Document title printed in the header.
        limits: Page and time budget for the layout call.
    """

    bionic: bool = False
    short_words: ShortWordPolicy = "plain"
    title: str = DEFAULT_TITLE
    limits: LayoutLimits = LayoutLimits()


def layout_document(
    text: str,
    *,
    geometry: PageGeometry | None = None,
    measurer: TextMeasurer | None = None,
    options: ExportOptions | None = None,
) -> List[Page]:
    """Run transform, line breaking, and composition for one snapshot.

    Args:
        text: Current document text.
        geometry: Page geometry; A4 defaults when None.
        measurer: Text measurer; ReportLab metrics when None.
        options: Export options; defaults when None.
    Returns:
        Pages numbered from 1. Empty text yields one header-only page.
    Raises:
        MeasurementFailure: The measurer failed on some text.
        LayoutTimeout: The page or time budget was exceeded.

    Example:
        >>> pages = layout_document("")
        >>> len(pages), pages[0].header.stats.reading_time
        (1, '0.00')
    """

    resolved = geometry or PageGeometry()
    backend = measurer or ReportlabMeasurer()
    opts = options or ExportOptions()
    budget = opts.limits.start()
    snapshot = normalize_newlines(text)
    paragraphs = transform(snapshot, bionic=opts.bionic, short_words=opts.short_words)
    lines = layout_paragraphs(
        paragraphs,
        content_width=resolved.body_width,
        font=resolved.font,
        measurer=backend,
        budget=budget,
    )
    pages = compose_pages(
        lines,
        resolved,
        header=document_header(snapshot, title=opts.title),
        budget=budget,
    )
    logger.info(
        "Laid out %d paragraphs into %d lines on %d pages",
        len(paragraphs),
        len(lines),
        len(pages),
    )
    return pages


def export_instructions(
    text: str,
    *,
    geometry: PageGeometry | None = None,
    measurer: TextMeasurer | None = None,
    options: ExportOptions | None = None,
) -> List[RenderInstruction]:
    """Return the flat draw-instruction sequence for a text snapshot.

    Args:
        text: Current document text.
        geometry: Page geometry; A4 defaults when None.
        measurer: Text measurer; ReportLab metrics when None.
        options: Export options; defaults when None.
    Returns:
        Instructions for all pages in order.
    """

    backend = measurer or ReportlabMeasurer()
    pages = layout_document(text, geometry=geometry, measurer=backend, options=options)
    return emit(pages, measurer=backend)


def build_pdf(
    text: str,
    *,
    output_path: Path,
    geometry: PageGeometry | None = None,
    measurer: TextMeasurer | None = None,
    options: ExportOptions | None = None,
    show_progress: bool = False,
) -> List[Page]:
    """Lay out ``text`` and write it to ``output_path`` as a PDF.

    Layout finishes completely before the file is opened, so a failure
    never leaves a partial export behind.

    Args:
        text: Current document text.
        output_path: Destination PDF path.
        geometry: Page geometry; A4 defaults when None.
        measurer: Text measurer; ReportLab metrics when None.
        options: Export options; defaults when None.
        show_progress: Show a tqdm progress bar while drawing pages.
    Returns:
        The composed pages.

    Example:
        >>> build_pdf("Hello world", output_path=Path("output/hello.pdf"))  # doctest: +SKIP
        [Page(index=1, ...)]
    """

    backend = measurer or ReportlabMeasurer()
    pages = layout_document(text, geometry=geometry, measurer=backend, options=options)
    progress = tqdm(
        total=len(pages), desc="Rendering pages", unit="page", disable=not show_progress
    )
    try:
        render_pdf(pages, output_path, measurer=backend, progress=progress)
    finally:
        progress.close()
    logger.info("Wrote %d pages to %s", len(pages), output_path)
    return pages
