"""
Pytest configuration and fixtures for all tests.

This file is automatically loaded by pytest and provides common fixtures
and configuration for all test modules.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from docx import Document
from docx.oxml import OxmlElement, parse_xml
from docx.oxml.ns import nsdecls, qn

from docx_bilingual.core.exceptions import TranslationError
from docx_bilingual.core.translation.base import BatchTranslator
from docx_bilingual.utils.unified_logger import UnifiedLogger


class DictionaryTranslator(BatchTranslator):
    """Deterministic translator: looks texts up in a mapping, tags unknown ones.

    ``fail_on_call`` makes the n-th call (1-based) raise TranslationError.
    """

    def __init__(self, mapping=None, fail_on_call=None):
        self.mapping = mapping or {}
        self.fail_on_call = fail_on_call
        self.calls = []
        self.closed = False

    async def translate(self, texts, target_language):
        self.calls.append((list(texts), target_language))
        if self.fail_on_call is not None and len(self.calls) == self.fail_on_call:
            raise TranslationError("Service unavailable", status_code=503)
        return [self.mapping.get(text, f"[{target_language}] {text}") for text in texts]

    async def close(self):
        self.closed = True


def _add_paragraph(document, layout):
    """Add a paragraph to the body.

    ``layout`` is either a string (one plain run) or a dict with ``runs``
    (list of (text, bold) or (text, bold, anchor) for a hyperlinked run),
    optional ``style`` name and paragraph ``bold``.
    """
    if isinstance(layout, str):
        layout = {'runs': [(layout, False)]}

    paragraph = document.add_paragraph(style=layout.get('style'))
    for text, bold, *anchor in layout.get('runs', []):
        run = paragraph.add_run(text)
        if bold:
            run.bold = True
        if anchor:
            # Wrap the run in an internal hyperlink pointing at the bookmark name
            hyperlink = OxmlElement('w:hyperlink')
            hyperlink.set(qn('w:anchor'), anchor[0])
            run._r.addprevious(hyperlink)
            hyperlink.append(run._r)

    if layout.get('bold'):
        pPr = paragraph._p.get_or_add_pPr()
        rPr = OxmlElement('w:rPr')
        rPr.append(OxmlElement('w:b'))
        pPr.append(rPr)

    return paragraph


def _make_block(document, items):
    """Build a ``w:sdt`` holding the given paragraphs; nested lists become nested blocks."""
    sdt = parse_xml(f'<w:sdt {nsdecls("w")}><w:sdtPr/><w:sdtContent/></w:sdt>')
    content = sdt.find(qn('w:sdtContent'))
    for item in items:
        if isinstance(item, list):
            content.append(_make_block(document, item))
        else:
            # Moves the freshly added paragraph out of the body into the block
            content.append(_add_paragraph(document, item)._p)
    return sdt


def build_docx(path, content):
    """Write a .docx whose body holds ``content`` in order.

    Strings and dicts become paragraphs, lists become structured content blocks.
    """
    document = Document()
    body = document.element.body
    for item in content:
        if isinstance(item, list):
            sdt = _make_block(document, item)
            sectPr = body.find(qn('w:sectPr'))
            if sectPr is not None:
                sectPr.addprevious(sdt)
            else:
                body.append(sdt)
        else:
            _add_paragraph(document, item)
    document.save(str(path))
    return Path(path)


def read_output_rows(path):
    """Return the rows of the single output table as dicts of runs and styles."""
    document = Document(str(path))
    assert len(document.tables) == 1
    rows = []
    for row in document.tables[0].rows:
        left, right = row.cells
        assert len(left.paragraphs) == 1
        assert len(right.paragraphs) == 1
        left_p, right_p = left.paragraphs[0], right.paragraphs[0]
        rows.append({
            'left': [(run.text, bool(run.bold)) for run in left_p.runs],
            'right': [(run.text, bool(run.bold)) for run in right_p.runs],
            'left_style': left_p._p.xpath('string(./w:pPr/w:pStyle/@w:val)'),
            'right_style': right_p._p.xpath('string(./w:pPr/w:pStyle/@w:val)'),
        })
    return rows


@pytest.fixture
def make_docx(tmp_path):
    """Factory fixture: make_docx(content, name='input.docx') -> Path."""
    def _make(content, name='input.docx'):
        return build_docx(tmp_path / name, content)
    return _make


@pytest.fixture
def read_output():
    return read_output_rows


@pytest.fixture
def translator_class():
    return DictionaryTranslator


@pytest.fixture
def log_entries():
    return []


@pytest.fixture
def quiet_logger(log_entries):
    """Logger that prints nothing and records entries in ``log_entries``."""
    return UnifiedLogger(console_output=False, storage_callback=log_entries.append)
