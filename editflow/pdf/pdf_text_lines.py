"""Greedy line breaking and full justification of paragraph runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from ..cleaning import split_pieces
from ..measure import MeasureCache, TextMeasurer
from ..models import FontSpec, Paragraph, Weight
from .pdf_constants import EPSILON
from .pdf_debug import _debug
from .pdf_settings import LayoutBudget
from .pdf_types import Line, LineFragment


@dataclass(frozen=True, slots=True)
class _Piece:
    """A measured whitespace or word slice of one run."""

    text: str
    weight: Weight
    run_index: int
    width: float
    ascent: float
    descent: float


@dataclass(slots=True)
class _Token:
    """A word made of one or more adjacent pieces plus the gap before it."""

    gap_before: List[_Piece] = field(default_factory=list)
    pieces: List[_Piece] = field(default_factory=list)

    @property
    def width(self) -> float:
        return sum(piece.width for piece in self.pieces)

    @property
    def gap_width(self) -> float:
        return sum(piece.width for piece in self.gap_before)


def _measured_piece(
    *, text: str, weight: Weight, run_index: int, cache: MeasureCache
) -> _Piece:
    """Return a piece with metrics from the cache.

    Args:
        text: Piece text.
        weight: Weight of the source run.
        run_index: Index of the source run.
        cache: Measurement cache for the current layout call.
    Returns:
        Measured _Piece.
    """

    metrics = cache.metrics(text, weight)
    return _Piece(
        text=text,
        weight=weight,
        run_index=run_index,
        width=metrics.width,
        ascent=metrics.ascent,
        descent=metrics.descent,
    )


def _tokens(
    *, paragraph: Paragraph, cache: MeasureCache, budget: LayoutBudget | None = None
) -> List[_Token]:
    """Group a paragraph's runs into whitespace-delimited tokens.

    Adjacent non-whitespace pieces from different runs (for example a bold
    prefix and its plain tail) form a single token. Trailing whitespace is
    dropped.

    Args:
        paragraph: Paragraph to tokenize.
        cache: Measurement cache.
        budget: Optional running budget checked after each measurement.
    Returns:
        Tokens in reading order.
    """

    tokens: List[_Token] = []
    current: _Token | None = None
    gap: List[_Piece] = []
    for run_index, run in enumerate(paragraph.runs):
        for text in split_pieces(run.text):
            piece = _measured_piece(
                text=text, weight=run.weight, run_index=run_index, cache=cache
            )
            if budget is not None:
                budget.check_time()
            if text.isspace():
                current = None
                gap.append(piece)
                continue
            if current is None:
                current = _Token(gap_before=gap)
                tokens.append(current)
                gap = []
            current.pieces.append(piece)
    return tokens


def _close_line(
    *,
    tokens: Sequence[_Token],
    content_width: float,
    font: FontSpec,
    paragraph_index: int,
    last: bool,
) -> Line:
    """Build a Line from tokens, justifying it unless it is final.

    Args:
        tokens: Tokens on the line, at least one.
        content_width: Target line width.
        font: Body font (for leading).
        paragraph_index: Index of the owning paragraph.
        last: Whether this is the paragraph's final line.
    Returns:
        Line with fragment offsets relative to the line start.
    """

    word_total = sum(token.width for token in tokens)
    justified = not last and len(tokens) > 1
    gap = (content_width - word_total) / (len(tokens) - 1) if justified else 0.0
    fragments: List[LineFragment] = []
    pieces: List[_Piece] = []
    x = 0.0
    for idx, token in enumerate(tokens):
        if idx > 0:
            width = gap if justified else token.gap_width
            fragments.append(
                LineFragment(
                    text="".join(piece.text for piece in token.gap_before),
                    weight=token.gap_before[0].weight,
                    x=x,
                    width=width,
                    run_index=token.gap_before[0].run_index,
                    is_space=True,
                )
            )
            pieces.extend(token.gap_before)
            x += width
        for piece in token.pieces:
            fragments.append(
                LineFragment(
                    text=piece.text,
                    weight=piece.weight,
                    x=x,
                    width=piece.width,
                    run_index=piece.run_index,
                )
            )
            pieces.append(piece)
            x += piece.width
    return Line(
        fragments=tuple(fragments),
        content_width=content_width,
        ascent=max(piece.ascent for piece in pieces),
        descent=max(piece.descent for piece in pieces),
        leading=font.leading,
        paragraph_index=paragraph_index,
        last_in_paragraph=last,
        justified=justified,
        overflow=len(tokens) == 1 and word_total > content_width + EPSILON,
    )


def layout_paragraph(
    paragraph: Paragraph,
    *,
    content_width: float,
    font: FontSpec,
    measurer: TextMeasurer | MeasureCache,
    budget: LayoutBudget | None = None,
) -> List[Line]:
    """Break a paragraph into justified lines.

    Tokens are appended greedily with their natural gap; a line closes when
    the next token would push it past ``content_width``. A token wider than
    the content width sits alone on its line and overflows. Every line but
    the last is justified by spreading the slack evenly over its gaps.

    Args:
        paragraph: Paragraph of runs.
        content_width: Available line width in points.
        font: Body font.
        measurer: Text measurer, or a cache already wrapping one.
        budget: Optional running budget, checked per measured piece and per
            placed token.
    Returns:
        Lines in reading order; empty for whitespace-only paragraphs.
    Raises:
        LayoutTimeout: The time budget ran out mid-paragraph.

    Example:
        >>> from editflow.bionic import transform
        >>> from editflow.measure import FixedWidthMeasurer
        >>> lines = layout_paragraph(
        ...     transform("Hello world")[0],
        ...     content_width=200,
        ...     font=FontSpec(),
        ...     measurer=FixedWidthMeasurer(),
        ... )
        >>> [line.text for line in lines]
        ['Hello world']
    """

    cache = (
        measurer
        if isinstance(measurer, MeasureCache)
        else MeasureCache(measurer=measurer, font=font)
    )
    lines: List[Line] = []
    current: List[_Token] = []
    current_width = 0.0
    for token in _tokens(paragraph=paragraph, cache=cache, budget=budget):
        if budget is not None:
            budget.check_time()
        if not current:
            current, current_width = [token], token.width
            continue
        candidate = current_width + token.gap_width + token.width
        if candidate > content_width + EPSILON:
            lines.append(
                _close_line(
                    tokens=current,
                    content_width=content_width,
                    font=font,
                    paragraph_index=paragraph.index,
                    last=False,
                )
            )
            current, current_width = [token], token.width
            continue
        current.append(token)
        current_width = candidate
    if current:
        lines.append(
            _close_line(
                tokens=current,
                content_width=content_width,
                font=font,
                paragraph_index=paragraph.index,
                last=True,
            )
        )
    _debug(msg=f"paragraph {paragraph.index}: {len(lines)} lines")
    return lines


def layout_paragraphs(
    paragraphs: Sequence[Paragraph],
    *,
    content_width: float,
    font: FontSpec,
    measurer: TextMeasurer,
    budget: LayoutBudget | None = None,
) -> List[Line]:
    """Lay out every paragraph into a single line stream.

    Args:
        paragraphs: Paragraphs in document order.
        content_width: Available line width in points.
        font: Body font.
        measurer: Text measurer shared by all paragraphs.
        budget: Optional running budget checked between and inside paragraphs.
    Returns:
        Lines for all paragraphs in reading order.
    """

    cache = MeasureCache(measurer=measurer, font=font)
    lines: List[Line] = []
    for paragraph in paragraphs:
        if budget is not None:
            budget.check_time()
        lines.extend(
            layout_paragraph(
                paragraph,
                content_width=content_width,
                font=font,
                measurer=cache,
                budget=budget,
            )
        )
    return lines
