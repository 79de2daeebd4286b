"""
DOCX reading, side-by-side assembly and writing.
"""

from .models import Paragraph, Run, TranslatedParagraph, TranslatedRun
from .reader import open_document, read_paragraphs
from .extractor import extract_texts, translatable_runs
from .assembler import DocumentAssembler
from .writer import save_document

__all__ = [
    'Paragraph',
    'Run',
    'TranslatedParagraph',
    'TranslatedRun',
    'open_document',
    'read_paragraphs',
    'extract_texts',
    'translatable_runs',
    'DocumentAssembler',
    'save_document'
]
