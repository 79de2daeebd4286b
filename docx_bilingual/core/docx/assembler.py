"""
Build the side-by-side output document.

The output holds a single borderless, full-width table with one row per
translated paragraph: the original text on the left, the translation on the
right.
"""

from typing import Iterable

from docx import Document
from docx.document import Document as DocumentObject
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph as DocxParagraph

from .models import TranslatedParagraph

# Table width in fiftieths of a percent (5000 = 100%)
FULL_WIDTH_PCT = '5000'
BORDER_EDGES = ('top', 'left', 'bottom', 'right', 'insideH', 'insideV')


class DocumentAssembler:
    """
    Assembles translated paragraphs into a two-column table.

    ``paragraph_count`` and ``run_count`` report what the last call to
    :meth:`assemble` wrote; they do not affect the output.
    """

    def __init__(self):
        self.paragraph_count = 0
        self.run_count = 0

    def assemble(self, paragraphs: Iterable[TranslatedParagraph]) -> DocumentObject:
        """
        Create a new document with one row per translated paragraph.

        Left cell runs are bold when the source run or the source paragraph is
        bold. Right cell runs only follow the source run's bold flag.

        Args:
            paragraphs: Translated paragraphs in output order

        Returns:
            A new python-docx Document
        """
        self.paragraph_count = 0
        self.run_count = 0

        document = Document()
        table = document.add_table(rows=0, cols=2)
        _set_full_width(table)
        _remove_borders(table)

        for paragraph in paragraphs:
            self.paragraph_count += 1
            row = table.add_row()
            original_cell, translation_cell = row.cells

            original_paragraph = original_cell.paragraphs[0]
            translation_paragraph = translation_cell.paragraphs[0]
            _apply_style(original_paragraph, paragraph.style)
            _apply_style(translation_paragraph, paragraph.style)

            for run in paragraph.runs:
                self.run_count += 1

                original_run = original_paragraph.add_run(run.original)
                original_run.bold = run.bold or paragraph.bold

                translation_run = translation_paragraph.add_run(run.translation)
                translation_run.bold = run.bold

        return document


def _apply_style(paragraph: DocxParagraph, style_id: str) -> None:
    # Style ids are copied as-is; the output template may not define them
    if style_id:
        paragraph._p.style = style_id


def _set_full_width(table: Table) -> None:
    tblPr = table._tbl.tblPr
    tblW = tblPr.find(qn('w:tblW'))
    if tblW is None:
        tblW = OxmlElement('w:tblW')
        tblPr.insert(0, tblW)
    tblW.set(qn('w:type'), 'pct')
    tblW.set(qn('w:w'), FULL_WIDTH_PCT)


def _remove_borders(table: Table) -> None:
    tblPr = table._tbl.tblPr
    existing = tblPr.find(qn('w:tblBorders'))
    if existing is not None:
        tblPr.remove(existing)

    borders = OxmlElement('w:tblBorders')
    for edge in BORDER_EDGES:
        element = OxmlElement(f'w:{edge}')
        element.set(qn('w:val'), 'none')
        element.set(qn('w:sz'), '0')
        element.set(qn('w:space'), '0')
        element.set(qn('w:color'), 'auto')
        borders.append(element)

    # tblBorders follows tblW in CT_TblPr
    tblPr.find(qn('w:tblW')).addnext(borders)
