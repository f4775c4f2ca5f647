"""
Small, focused text splitting utilities.
"""

import re
from typing import List


_CARRIAGE_RETURNS = re.compile(r"\r\n?")
_BLANK_LINE = re.compile(r"\n\s*\n")
_PIECES = re.compile(r"\s+|\S+")


def normalize_newlines(value: str) -> str:
    """Turn Windows and old Mac line endings into ``\\n``.

    Example:
        >>> normalize_newlines("a\\r\\nb\\rc")
        'a\\nb\\nc'
    """

    return _CARRIAGE_RETURNS.sub("\n", value)


def split_paragraphs(value: str) -> List[str]:
    """Split text on blank lines, keeping paragraph order.

    A blank line is two line breaks with only whitespace between them.
    Empty pieces (leading or trailing blank lines) are dropped.

    Example:
        >>> split_paragraphs("one\\n\\n\\ntwo\\n  \\nthree")
        ['one', 'two', 'three']
    """

    return [piece for piece in _BLANK_LINE.split(value) if piece]


def split_pieces(value: str) -> List[str]:
    """Cut text into alternating whitespace and non-whitespace pieces.

    Example:
        >>> split_pieces("Hello  world")
        ['Hello', '  ', 'world']
    """

    return _PIECES.findall(value)


def count_words(value: str) -> int:
    """Return the number of whitespace-delimited words."""

    return len(value.split())
