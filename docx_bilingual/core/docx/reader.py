"""
Read paragraphs from a DOCX file.

Body paragraphs come first, followed by the paragraphs held in body-level
structured document tags (``w:sdt``), in block order. A tag nested inside
another tag contributes its paragraphs at its position in the outer tag.
"""

import zipfile
from pathlib import Path
from typing import Iterator, List, Union

from docx import Document
from docx.document import Document as DocumentObject
from docx.opc.exceptions import PackageNotFoundError
from docx.oxml.ns import qn
from docx.text.paragraph import Paragraph as DocxParagraph
from docx.text.run import Run as DocxRun
from lxml import etree

from ..exceptions import OpenError
from .models import Paragraph, Run

_TRUE_VALUES = {'true', '1', 'on'}


def open_document(path: Union[str, Path]) -> List[Paragraph]:
    """
    Open a DOCX file and return its paragraphs in reading order.

    Args:
        path: Path to the source document

    Returns:
        Paragraphs from the body, then from structured content blocks

    Raises:
        OpenError: If the path does not exist or is not a valid DOCX file
    """
    path = Path(path)
    if not path.is_file():
        raise OpenError(f"Document not found: {path}", path=str(path))

    try:
        with open(path, 'rb') as stream:
            document = Document(stream)
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError, etree.XMLSyntaxError) as e:
        raise OpenError(f"Not a valid DOCX document: {e}", path=str(path)) from e
    except OSError as e:
        raise OpenError(f"Cannot read document: {e}", path=str(path)) from e

    return read_paragraphs(document)


def read_paragraphs(document: DocumentObject) -> List[Paragraph]:
    """Convert an opened python-docx document into immutable paragraphs."""
    paragraphs = [_to_paragraph(p) for p in document.paragraphs]

    body = document.element.body
    for sdt in body.iterchildren(qn('w:sdt')):
        for p in _iter_sdt_paragraphs(sdt):
            paragraphs.append(_to_paragraph(DocxParagraph(p, document)))

    return paragraphs


def _iter_sdt_paragraphs(sdt) -> Iterator[etree._Element]:
    """Yield ``w:p`` elements of a structured document tag, descending into nested tags."""
    content = sdt.find(qn('w:sdtContent'))
    if content is None:
        return
    for child in content.iterchildren():
        if child.tag == qn('w:p'):
            yield child
        elif child.tag == qn('w:sdt'):
            yield from _iter_sdt_paragraphs(child)


def _to_paragraph(paragraph: DocxParagraph) -> Paragraph:
    p = paragraph._p
    style_ids = p.xpath('./w:pPr/w:pStyle/@w:val')
    mark_rpr = p.find(qn('w:pPr') + '/' + qn('w:rPr'))

    return Paragraph(
        runs=tuple(Run(text=run.text, bold=bool(run.bold)) for run in _iter_runs(paragraph)),
        style=str(style_ids[0]) if style_ids else "",
        bold=_is_bold(mark_rpr),
    )


def _is_bold(rpr) -> bool:
    """Resolve a ``w:b`` toggle inside run properties (absent ``w:val`` means on)."""
    if rpr is None:
        return False
    b = rpr.find(qn('w:b'))
    if b is None:
        return False
    val = b.get(qn('w:val'))
    return val is None or val.lower() in _TRUE_VALUES


def _iter_runs(paragraph: DocxParagraph) -> Iterator[DocxRun]:
    """Yield the paragraph's runs in order, including those inside hyperlinks."""
    for r in paragraph._p.xpath('./w:r | ./w:hyperlink/w:r'):
        yield DocxRun(r, paragraph)
