import pytest

from editflow.pdf.pdf_constants import DEFAULT_TITLE
from editflow.pdf.pdf_stats import document_header, document_stats
from editflow.pdf.pdf_types import DocumentStats


class TestDocumentStats:
    def test_counts(self):
        stats = document_stats("Hello world. How are you?\n\nFine!")
        assert stats.words == 6
        assert stats.characters == 32
        assert stats.characters_no_spaces == 26
        assert stats.sentences == 3
        assert stats.paragraphs == 2
        assert stats.reading_minutes == pytest.approx(0.048)
        assert stats.reading_time == "0.05"

    def test_empty_text(self):
        assert document_stats("") == DocumentStats()
        assert document_stats("").reading_time == "0.00"

    def test_whitespace_only(self):
        stats = document_stats("  \n\n \n")
        assert stats.words == 0
        assert stats.paragraphs == 0
        assert stats.characters_no_spaces == 0

    def test_repeated_punctuation_is_one_sentence_end(self):
        assert document_stats("Really?! Yes...").sentences == 2

    def test_text_without_terminator_has_no_sentences(self):
        assert document_stats("no ending here").sentences == 0

    def test_summary_line(self):
        summary = document_stats("Hi there.").summary()
        assert "Words: 2" in summary
        assert "Sentences: 1" in summary
        assert summary.endswith("Reading time: 0.02 min")


class TestDocumentHeader:
    def test_default_title(self):
        assert document_header("x").title == DEFAULT_TITLE

    def test_custom_title(self):
        header = document_header("one two", title="Notes")
        assert header.title == "Notes"
        assert header.stats.words == 2
