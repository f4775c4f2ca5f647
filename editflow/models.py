"""
Typed containers for text runs, paragraphs, and font choices.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

Weight = Literal["plain", "bold"]

PLAIN: Weight = "plain"
BOLD: Weight = "bold"


@dataclass(frozen=True, slots=True)
class Run:
    """A contiguous span of text sharing one weight.

    Attributes:
        text: The characters of the span.
        weight: ``"plain"`` or ``"bold"``.
    """

    text: str
    weight: Weight = PLAIN

    @property
    def is_space(self) -> bool:
        """Return True when the run holds only whitespace."""
        return bool(self.text) and self.text.isspace()


@dataclass(frozen=True, slots=True)
class Paragraph:
    """A blank-line delimited block of the document and its runs."""

    index: int
    text: str
    runs: Tuple[Run, ...]

    def joined(self) -> str:
        """Return the concatenated run text.

        Example:
            >>> Paragraph(0, "hi you", (Run("hi"), Run(" "), Run("you"))).joined()
            'hi you'
        """

        return "".join(run.text for run in self.runs)


@dataclass(frozen=True, slots=True)
class FontSpec:
    """Font faces and size used for body text.

    Attributes:
        regular: Face name for plain runs.
        bold: Face name for bold runs.
        size: Font size in points.
        leading: Fixed extra space added below every line, in points.
    """

    regular: str = "Helvetica"
    bold: str = "Helvetica-Bold"
    size: float = 12.0
    leading: float = 3.0

    def face(self, weight: Weight) -> str:
        """Return the face name for a run weight."""
        return self.bold if weight == BOLD else self.regular


@dataclass(frozen=True, slots=True)
class TextMetrics:
    """Measured extent of a piece of text."""

    width: float
    ascent: float
    descent: float

    @property
    def height(self) -> float:
        return self.ascent + self.descent
