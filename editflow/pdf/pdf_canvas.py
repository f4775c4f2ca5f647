"""Replay draw instructions onto a ReportLab canvas."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from reportlab.pdfgen import canvas as rl_canvas

from ..measure import TextMeasurer
from .pdf_settings import PageGeometry
from .pdf_types import DrawImage, DrawRule, DrawText, Page, RenderInstruction


class _ProgressTracker(Protocol):
    """Protocol for page rendering progress updates."""

    def update(self, n: int | float = 1) -> object:
        """Advance the progress tracker by ``n``."""


def draw_instruction(
    canvas: rl_canvas.Canvas, instruction: RenderInstruction, *, geometry: PageGeometry
) -> None:
    """Draw one instruction, flipping y into ReportLab's bottom-left origin.

    Images fill their box exactly: the top-left corner lands on (x, y) and
    the picture is scaled to (w, h).

    Args:
        canvas: Target canvas.
        instruction: Instruction with top-left page coordinates.
        geometry: Geometry of the page being drawn.
    Returns:
        None.
    """

    height = geometry.page_height
    if isinstance(instruction, DrawText):
        canvas.setFont(instruction.font, instruction.size)
        canvas.drawString(instruction.x, height - instruction.y, instruction.text)
    elif isinstance(instruction, DrawImage):
        canvas.drawImage(
            instruction.resource,
            instruction.x,
            height - instruction.y - instruction.h,
            width=instruction.w,
            height=instruction.h,
            mask="auto",
        )
    elif isinstance(instruction, DrawRule):
        canvas.saveState()
        canvas.setStrokeColor(geometry.rule_color)
        canvas.setLineWidth(geometry.rule_width)
        canvas.line(
            instruction.x1,
            height - instruction.y1,
            instruction.x2,
            height - instruction.y2,
        )
        canvas.restoreState()
    else:
        raise TypeError(f"Unknown render instruction: {instruction!r}")


def render_pdf(
    pages: Sequence[Page],
    output_path: Path,
    *,
    measurer: TextMeasurer,
    progress: _ProgressTracker | None = None,
) -> Path:
    """Write composed pages to a PDF file.

    Args:
        pages: Composed pages, at least one.
        output_path: Destination file; parent directories are created.
        measurer: Text measurer passed to the emitter.
        progress: Optional tracker advanced once per page.
    Returns:
        The written path.
    """

    if not pages:
        raise ValueError("Cannot render a document without pages")
    geometry = pages[0].geometry
    output_path.parent.mkdir(parents=True, exist_ok=True)
    canvas = rl_canvas.Canvas(
        str(output_path), pagesize=(geometry.page_width, geometry.page_height)
    )
    canvas.setTitle(pages[0].header.title)
    for page in pages:
        for instruction in page.instructions(measurer=measurer):
            draw_instruction(canvas, instruction, geometry=page.geometry)
        canvas.showPage()
        if progress is not None:
            progress.update(1)
    canvas.save()
    return output_path
