"""
Select the text of a paragraph that is submitted for translation.
"""

from typing import List

from .models import Paragraph, Run


def translatable_runs(paragraph: Paragraph) -> List[Run]:
    """Runs with non-empty text, in paragraph order."""
    return [run for run in paragraph.runs if run.text != ""]


def extract_texts(paragraph: Paragraph) -> List[str]:
    """
    Ordered list of non-empty run texts.

    An empty list means the paragraph is dropped from the output entirely.
    Whitespace-only runs are kept.
    """
    return [run.text for run in translatable_runs(paragraph)]
