"""Unit tests for selecting the text submitted for translation."""

from docx_bilingual.core.docx.extractor import extract_texts, translatable_runs
from docx_bilingual.core.docx.models import Paragraph, Run


class TestExtractTexts:
    """Test extract_texts and translatable_runs."""

    def test_non_empty_runs_in_order(self):
        paragraph = Paragraph(runs=(Run("One "), Run("", True), Run("two", True)))

        assert extract_texts(paragraph) == ["One ", "two"]
        assert translatable_runs(paragraph) == [Run("One "), Run("two", True)]

    def test_only_empty_runs_gives_empty_list(self):
        paragraph = Paragraph(runs=(Run(""), Run("")))

        assert extract_texts(paragraph) == []

    def test_paragraph_without_runs(self):
        assert extract_texts(Paragraph()) == []

    def test_whitespace_runs_are_kept(self):
        """Only the empty string is skipped."""
        paragraph = Paragraph(runs=(Run(" "), Run("\t")))

        assert extract_texts(paragraph) == [" ", "\t"]
