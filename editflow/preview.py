"""
HTML preview of the bionic transform for the editing surface.
"""

from __future__ import annotations

from bs4 import BeautifulSoup

from .bionic import ShortWordPolicy, transform


def bionic_markup(text: str, *, short_words: ShortWordPolicy = "plain") -> str:
    """Return ``text`` as HTML with one ``<p>`` per paragraph and bold runs in ``<strong>``.

    Example:
        >>> bionic_markup("Hello world")
        '<p><strong>Hel</strong>lo <strong>wor</strong>ld</p>'
    """

    soup = BeautifulSoup("", "html.parser")
    for paragraph in transform(text, bionic=True, short_words=short_words):
        block = soup.new_tag("p")
        for run in paragraph.runs:
            if run.weight == "bold":
                strong = soup.new_tag("strong")
                strong.string = run.text
                block.append(strong)
            else:
                block.append(run.text)
        soup.append(block)
    return soup.decode_contents()


def strip_markup(html: str) -> str:
    """Return the plain text of a markup fragment.

    Paragraph blocks are joined with a blank line so the result feeds back
    into the layout engine unchanged.

    Example:
        >>> strip_markup("<p><strong>Hel</strong>lo</p><p>you</p>")
        'Hello\\n\\nyou'
    """

    soup = BeautifulSoup(html, "html.parser")
    blocks = soup.find_all("p")
    if not blocks:
        return soup.get_text()
    return "\n\n".join(block.get_text() for block in blocks)
