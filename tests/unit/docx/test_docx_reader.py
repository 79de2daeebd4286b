"""Unit tests for reading paragraphs from DOCX files."""

import dataclasses

import pytest

from docx_bilingual.core.docx.reader import open_document
from docx_bilingual.core.docx.models import Paragraph, Run
from docx_bilingual.core.exceptions import OpenError


class TestOpenDocument:
    """Test opening source documents."""

    def test_missing_path_raises_open_error(self, tmp_path):
        """A path that does not exist should raise OpenError."""
        missing = tmp_path / "missing.docx"

        with pytest.raises(OpenError) as exc_info:
            open_document(missing)

        assert exc_info.value.path == str(missing)

    def test_directory_raises_open_error(self, tmp_path):
        """A directory is not a document."""
        with pytest.raises(OpenError):
            open_document(tmp_path)

    def test_non_docx_file_raises_open_error(self, tmp_path):
        """A plain text file should raise OpenError."""
        bogus = tmp_path / "notes.docx"
        bogus.write_text("this is not a zip package")

        with pytest.raises(OpenError):
            open_document(bogus)

    def test_zip_without_document_raises_open_error(self, tmp_path):
        """A zip that is not a Word package should raise OpenError."""
        import zipfile

        archive = tmp_path / "archive.docx"
        with zipfile.ZipFile(archive, 'w') as zf:
            zf.writestr("hello.txt", "hello")

        with pytest.raises(OpenError):
            open_document(archive)

    def test_accepts_str_path(self, make_docx):
        path = make_docx(["Hello"])
        assert len(open_document(str(path))) == 1


class TestParagraphContent:
    """Test paragraph, run, style and bold extraction."""

    def test_single_paragraph(self, make_docx):
        paragraphs = open_document(make_docx(["Hello world"]))

        assert paragraphs == [Paragraph(runs=(Run("Hello world", False),), style="", bold=False)]

    def test_runs_keep_order_and_bold(self, make_docx):
        path = make_docx([{'runs': [("Plain ", False), ("strong", True), (" tail", False)]}])

        paragraph = open_document(path)[0]

        assert [run.text for run in paragraph.runs] == ["Plain ", "strong", " tail"]
        assert [run.bold for run in paragraph.runs] == [False, True, False]
        assert paragraph.text == "Plain strong tail"

    def test_hyperlink_runs_are_read_in_place(self, make_docx):
        path = make_docx([{'runs': [("See ", False), ("the docs", True, "docs"), (" now", False)]}])

        paragraph = open_document(path)[0]

        assert [run.text for run in paragraph.runs] == ["See ", "the docs", " now"]
        assert [run.bold for run in paragraph.runs] == [False, True, False]
        assert paragraph.text == "See the docs now"

    def test_style_id_is_read(self, make_docx):
        path = make_docx([{'runs': [("Title", False)], 'style': 'Heading 1'}])

        assert open_document(path)[0].style == "Heading1"

    def test_paragraph_mark_bold_is_read(self, make_docx):
        path = make_docx([{'runs': [("Bold paragraph", False)], 'bold': True}])

        paragraph = open_document(path)[0]

        assert paragraph.bold is True
        assert paragraph.runs[0].bold is False

    def test_empty_runs_are_kept_by_reader(self, make_docx):
        """The reader does not filter; empty runs are dropped later."""
        path = make_docx([{'runs': [("", False)]}])

        paragraph = open_document(path)[0]

        assert paragraph.runs == (Run("", False),)

    def test_paragraphs_are_immutable(self, make_docx):
        paragraph = open_document(make_docx(["Hello"]))[0]

        with pytest.raises(dataclasses.FrozenInstanceError):
            paragraph.style = "Other"


class TestStructuredContentBlocks:
    """Test flattening of paragraphs held in w:sdt blocks."""

    def test_block_paragraphs_follow_body_paragraphs(self, make_docx):
        """Body paragraphs come first even when a block sits between them."""
        path = make_docx(["Body one", ["Block one", "Block two"], "Body two"])

        texts = [p.text for p in open_document(path)]

        assert texts == ["Body one", "Body two", "Block one", "Block two"]

    def test_blocks_keep_document_order(self, make_docx):
        path = make_docx([["First block"], "Body", ["Second block"]])

        texts = [p.text for p in open_document(path)]

        assert texts == ["Body", "First block", "Second block"]

    def test_nested_block_is_flattened_in_place(self, make_docx):
        path = make_docx([["Outer start", ["Inner"], "Outer end"]])

        texts = [p.text for p in open_document(path)]

        assert texts == ["Outer start", "Inner", "Outer end"]

    def test_block_paragraph_formatting(self, make_docx):
        path = make_docx([[{'runs': [("Heading in block", True)], 'style': 'Heading 2', 'bold': True}]])

        paragraph = open_document(path)[0]

        assert paragraph.style == "Heading2"
        assert paragraph.bold is True
        assert paragraph.runs[0].bold is True
