"""
Bionic reading transform: bold the leading half of every word.
"""

from __future__ import annotations

import math
from typing import List, Literal, Tuple

from .cleaning import split_paragraphs, split_pieces
from .models import BOLD, PLAIN, Paragraph, Run

ShortWordPolicy = Literal["plain", "bold", "split"]

SHORT_WORD_LENGTH = 3
SHORT_WORD_POLICIES: Tuple[str, ...] = ("plain", "bold", "split")


def split_point(word: str) -> int:
    """Return the index where the bold prefix of ``word`` ends.

    Example:
        >>> split_point("Hello"), split_point("word")
        (3, 2)
    """

    return math.ceil(len(word) / 2)


def word_runs(word: str, *, short_words: ShortWordPolicy = "plain") -> List[Run]:
    """Return the bold/plain runs for a single non-whitespace word.

    Args:
        word: Word without surrounding whitespace.
        short_words: Treatment of words of three characters or fewer.
    Returns:
        One or two runs whose text concatenates back to ``word``.

    Example:
        >>> [run.text for run in word_runs("world")]
        ['wor', 'ld']
    """

    if len(word) <= SHORT_WORD_LENGTH and short_words != "split":
        return [Run(word, BOLD if short_words == "bold" else PLAIN)]
    mid = split_point(word)
    runs = [Run(word[:mid], BOLD)]
    if word[mid:]:
        runs.append(Run(word[mid:], PLAIN))
    return runs


def paragraph_runs(
    text: str, *, bionic: bool = True, short_words: ShortWordPolicy = "plain"
) -> Tuple[Run, ...]:
    """Return the runs for one paragraph of text.

    Whitespace is kept as its own plain run so gaps are measured with the
    regular face.

    Args:
        text: Paragraph text.
        bionic: When False every word becomes one plain run.
        short_words: Treatment of short words in bionic mode.
    Returns:
        Runs in reading order.
    """

    runs: List[Run] = []
    for piece in split_pieces(text):
        if piece.isspace() or not bionic:
            runs.append(Run(piece, PLAIN))
            continue
        runs.extend(word_runs(piece, short_words=short_words))
    return tuple(runs)


def transform(
    text: str, *, bionic: bool = True, short_words: ShortWordPolicy = "plain"
) -> List[Paragraph]:
    """Split a document into paragraphs of bold/plain runs.

    Args:
        text: Full document text with ``\\n`` line breaks.
        bionic: Apply the bionic split; plain runs only when False.
        short_words: ``"plain"``, ``"bold"`` or ``"split"`` for words of
            three characters or fewer.
    Returns:
        Paragraphs in document order.

    Example:
        >>> [(r.text, r.weight) for r in transform("Hello world")[0].runs]
        [('Hel', 'bold'), ('lo', 'plain'), (' ', 'plain'), ('wor', 'bold'), ('ld', 'plain')]
    """

    if short_words not in SHORT_WORD_POLICIES:
        raise ValueError(f"Unknown short word policy: {short_words!r}")
    return [
        Paragraph(
            index=idx,
            text=chunk,
            runs=paragraph_runs(chunk, bionic=bionic, short_words=short_words),
        )
        for idx, chunk in enumerate(split_paragraphs(text))
    ]
