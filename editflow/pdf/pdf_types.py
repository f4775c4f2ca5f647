"""Data structures for line layout, pagination, and rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union

from ..measure import TextMeasurer
from ..models import PLAIN, Weight
from .pdf_settings import PageGeometry


@dataclass(frozen=True, slots=True)
class LineFragment:
    """A run, or a slice of one, placed on a line.

    Args:
        text: Fragment text.
        weight: Weight inherited from the source run.
        x: Offset from the line's left edge, in points.
        width: Rendered width; for spaces this is the resolved gap.
        run_index: Index of the source run inside its paragraph.
        is_space: True for inter-word gaps.
    """

    text: str
    weight: Weight
    x: float
    width: float
    run_index: int
    is_space: bool = False


@dataclass(frozen=True, slots=True)
class Line:
    """A laid-out line of fragments.

    ``x`` and ``baseline`` are page-relative and stay at zero until the
    compositor places the line on a page.
    """

    fragments: Tuple[LineFragment, ...]
    content_width: float
    ascent: float
    descent: float
    leading: float
    paragraph_index: int
    last_in_paragraph: bool
    justified: bool = False
    overflow: bool = False
    x: float = 0.0
    baseline: float = 0.0

    @property
    def height(self) -> float:
        """Return the vertical advance of the line."""
        return self.ascent + self.descent + self.leading

    @property
    def word_width(self) -> float:
        """Return the summed width of non-space fragments."""
        return sum(frag.width for frag in self.fragments if not frag.is_space)

    @property
    def gap_width(self) -> float:
        """Return the summed width of inter-word gaps."""
        return sum(frag.width for frag in self.fragments if frag.is_space)

    @property
    def width(self) -> float:
        return self.word_width + self.gap_width

    @property
    def text(self) -> str:
        return "".join(frag.text for frag in self.fragments)


@dataclass(frozen=True, slots=True)
class DocumentStats:
    """Summary counts for the whole document."""

    words: int = 0
    characters: int = 0
    characters_no_spaces: int = 0
    sentences: int = 0
    paragraphs: int = 0
    reading_minutes: float = 0.0

    @property
    def reading_time(self) -> str:
        """Return reading minutes formatted with two decimals.

        Example:
            >>> DocumentStats(words=250, reading_minutes=2.0).reading_time
            '2.00'
        """

        return f"{self.reading_minutes:.2f}"

    def summary(self) -> str:
        """Return the one-line statistics label printed under the title."""

        return (
            f"Words: {self.words}  |  Characters: {self.characters}  |  "
            f"Sentences: {self.sentences}  |  Paragraphs: {self.paragraphs}  |  "
            f"Reading time: {self.reading_time} min"
        )


@dataclass(frozen=True, slots=True)
class DocumentHeader:
    """Header metadata shared by every page of a document."""

    title: str
    stats: DocumentStats


@dataclass(frozen=True, slots=True)
class Page:
    """A composed page.

    Args:
        index: 1-based page number.
        lines: Lines placed on the page, with page-relative coordinates.
        header: Document header shared by all pages.
        geometry: Geometry the page was composed for.
        available_height: Body height usable on this page.
        used_height: Height consumed by lines and paragraph spacing.
        forced_overflow: True when a single line taller than the page was
            placed alone.
    """

    index: int
    lines: Tuple[Line, ...]
    header: DocumentHeader
    geometry: PageGeometry
    available_height: float
    used_height: float
    forced_overflow: bool = False

    @property
    def is_first(self) -> bool:
        return self.index == 1

    @property
    def body_top(self) -> float:
        """Return the y coordinate where body lines start."""

        top = self.geometry.margin_top
        return top + self.geometry.header_height if self.is_first else top

    def instructions(self, *, measurer: TextMeasurer) -> List[RenderInstruction]:
        """Return this page's draw instructions, header first.

        Args:
            measurer: Text measurer used to align header text.
        Returns:
            Instructions with page-relative coordinates.
        """

        from .pdf_emit import emit_page

        return emit_page(self, measurer=measurer)


@dataclass(frozen=True, slots=True)
class DrawText:
    """Place ``text`` with its left edge at ``x`` and baseline at ``y``."""

    text: str
    x: float
    y: float
    font: str
    weight: Weight = PLAIN
    size: float = 12.0


@dataclass(frozen=True, slots=True)
class DrawImage:
    """Place an image with its top-left corner at (x, y), scaled to w x h."""

    resource: str
    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True, slots=True)
class DrawRule:
    """Draw a straight line between two points."""

    x1: float
    y1: float
    x2: float
    y2: float


RenderInstruction = Union[DrawText, DrawImage, DrawRule]
