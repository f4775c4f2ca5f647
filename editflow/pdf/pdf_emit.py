"""Turn composed pages into primitive draw instructions."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

from ..measure import TextMeasurer, checked_measure
from ..models import BOLD, PLAIN, FontSpec, Weight
from .pdf_constants import PAGE_LABEL_SIZE, RULE_OFFSET, STATS_SCALE, TITLE_SCALE
from .pdf_types import DrawImage, DrawRule, DrawText, Line, Page, RenderInstruction

LOGO_GAP = 8.0
PAGE_LABEL_OFFSET = 8.0


def _text_width(
    *, text: str, font: FontSpec, weight: Weight, measurer: TextMeasurer
) -> float:
    """Return the measured width of chrome text.

    Args:
        text: Text to measure.
        font: Font at the chrome size.
        weight: Run weight.
        measurer: Text measurer.
    Returns:
        Width in points.
    """

    return checked_measure(measurer, text=text, font=font, weight=weight).width


def _first_page_header(*, page: Page, measurer: TextMeasurer) -> List[RenderInstruction]:
    """Return logo, title, statistics, and rule instructions for page one.

    Args:
        page: The first page.
        measurer: Text measurer used to centre the title block.
    Returns:
        Header instructions.
    """

    geometry = page.geometry
    top = geometry.margin_top
    left = geometry.margin_left
    right = geometry.page_width - geometry.margin_right
    out: List[RenderInstruction] = []
    if geometry.logo_path is not None:
        out.append(
            DrawImage(
                resource=str(geometry.logo_path),
                x=left,
                y=top,
                w=geometry.logo_size,
                h=geometry.logo_size,
            )
        )
        left += geometry.logo_size + LOGO_GAP

    title_font = replace(geometry.font, size=geometry.font.size * TITLE_SCALE)
    stats_font = replace(geometry.font, size=geometry.font.size * STATS_SCALE)
    summary = page.header.stats.summary()
    title_width = _text_width(
        text=page.header.title, font=title_font, weight=BOLD, measurer=measurer
    )
    stats_width = _text_width(
        text=summary, font=stats_font, weight=PLAIN, measurer=measurer
    )
    title_y = top + title_font.size
    stats_y = title_y + stats_font.size + RULE_OFFSET
    out.append(
        DrawText(
            text=page.header.title,
            x=max(left, (geometry.page_width - title_width) / 2),
            y=title_y,
            font=title_font.face(BOLD),
            weight=BOLD,
            size=title_font.size,
        )
    )
    out.append(
        DrawText(
            text=summary,
            x=max(left, (geometry.page_width - stats_width) / 2),
            y=stats_y,
            font=stats_font.face(PLAIN),
            weight=PLAIN,
            size=stats_font.size,
        )
    )
    rule_y = top + geometry.header_height - RULE_OFFSET
    out.append(DrawRule(x1=geometry.margin_left, y1=rule_y, x2=right, y2=rule_y))
    return out


def _running_header(*, page: Page, measurer: TextMeasurer) -> List[RenderInstruction]:
    """Return the lighter title and page-number header for later pages.

    Args:
        page: A page after the first.
        measurer: Text measurer used to right-align the page label.
    Returns:
        Header instructions drawn inside the top margin.
    """

    geometry = page.geometry
    label_font = replace(geometry.font, size=PAGE_LABEL_SIZE)
    label = f"Page {page.index}"
    right = geometry.page_width - geometry.margin_right
    y = geometry.margin_top - PAGE_LABEL_OFFSET
    label_width = _text_width(text=label, font=label_font, weight=PLAIN, measurer=measurer)
    rule_y = geometry.margin_top - RULE_OFFSET
    return [
        DrawText(
            text=page.header.title,
            x=geometry.margin_left,
            y=y,
            font=label_font.face(PLAIN),
            weight=PLAIN,
            size=label_font.size,
        ),
        DrawText(
            text=label,
            x=right - label_width,
            y=y,
            font=label_font.face(PLAIN),
            weight=PLAIN,
            size=label_font.size,
        ),
        DrawRule(x1=geometry.margin_left, y1=rule_y, x2=right, y2=rule_y),
    ]


def _line_instructions(*, line: Line, font: FontSpec) -> List[DrawText]:
    """Return one DrawText per visible fragment of a placed line."""

    return [
        DrawText(
            text=frag.text,
            x=line.x + frag.x,
            y=line.baseline,
            font=font.face(frag.weight),
            weight=frag.weight,
            size=font.size,
        )
        for frag in line.fragments
        if not frag.is_space
    ]


def emit_page(page: Page, *, measurer: TextMeasurer) -> List[RenderInstruction]:
    """Return the draw instructions for a single page.

    Header instructions come first, then body text in reading order.

    Args:
        page: Composed page.
        measurer: Text measurer for aligning header text.
    Returns:
        Instructions with page-relative coordinates.
    """

    if page.is_first:
        out = _first_page_header(page=page, measurer=measurer)
    else:
        out = _running_header(page=page, measurer=measurer)
    for line in page.lines:
        out.extend(_line_instructions(line=line, font=page.geometry.font))
    return out


def emit(pages: Sequence[Page], *, measurer: TextMeasurer) -> List[RenderInstruction]:
    """Return draw instructions for every page, in page order.

    Args:
        pages: Composed pages.
        measurer: Text measurer for aligning header text.
    Returns:
        Flat instruction sequence.
    """

    out: List[RenderInstruction] = []
    for page in pages:
        out.extend(emit_page(page, measurer=measurer))
    return out
