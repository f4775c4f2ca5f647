"""Document statistics printed in the page header."""

from __future__ import annotations

import re

from ..cleaning import count_words, split_paragraphs
from .pdf_constants import DEFAULT_TITLE, READING_MINUTES_PER_WORD
from .pdf_types import DocumentHeader, DocumentStats

_SENTENCE_END = re.compile(r"[.!?]+")
_WHITESPACE = re.compile(r"\s")


def document_stats(text: str) -> DocumentStats:
    """Return word, character, sentence, and paragraph counts for ``text``.

    Sentences are counted as the number of ``.``/``!``/``?`` groups; blank
    paragraphs are not counted.

    Example:
        >>> stats = document_stats("Hi there. Bye!")
        >>> stats.words, stats.sentences, stats.paragraphs
        (3, 2, 1)
    """

    words = count_words(text)
    return DocumentStats(
        words=words,
        characters=len(text),
        characters_no_spaces=len(_WHITESPACE.sub("", text)),
        sentences=len(_SENTENCE_END.split(text)) - 1,
        paragraphs=sum(1 for chunk in split_paragraphs(text) if chunk.strip()),
        reading_minutes=READING_MINUTES_PER_WORD * words,
    )


def document_header(text: str, *, title: str = DEFAULT_TITLE) -> DocumentHeader:
    """Return the header metadata shared by every page of ``text``."""

    return DocumentHeader(title=title, stats=document_stats(text))
