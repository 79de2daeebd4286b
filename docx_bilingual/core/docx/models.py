"""
Data structures for paragraphs read from a source document and their translations.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class Run:
    """A span of text with its run-level bold flag."""
    text: str
    bold: bool = False


@dataclass(frozen=True)
class Paragraph:
    """A source paragraph: style id, paragraph-mark bold and its runs in order."""
    runs: Tuple[Run, ...] = ()
    style: str = ""
    bold: bool = False

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


@dataclass
class TranslatedRun:
    """Original text, its translation and the bold flag of the source run."""
    original: str
    translation: str
    bold: bool = False


@dataclass
class TranslatedParagraph:
    """Style, paragraph bold and the translated runs of one source paragraph."""
    style: str = ""
    bold: bool = False
    runs: List[TranslatedRun] = field(default_factory=list)

    @classmethod
    def from_pairs(
        cls,
        paragraph: Paragraph,
        source_runs: Sequence[Run],
        pairs: Sequence[Tuple[str, str]]
    ) -> "TranslatedParagraph":
        """
        Build a translated paragraph from the runs that were submitted and the
        (original, translated) pairs returned for them.

        Args:
            paragraph: Source paragraph
            source_runs: Non-empty runs of the paragraph, in submission order
            pairs: (original, translated) tuples, same length and order

        Raises:
            ValueError: If the pairs do not line up with the submitted runs
        """
        if len(source_runs) != len(pairs):
            raise ValueError(
                f"Got {len(pairs)} translations for {len(source_runs)} runs"
            )

        runs = []
        for run, (original, translation) in zip(source_runs, pairs):
            if run.text != original:
                raise ValueError(f"Translation pair does not match run text: {original!r}")
            runs.append(TranslatedRun(original=original, translation=translation, bold=run.bold))

        return cls(style=paragraph.style, bold=paragraph.bold, runs=runs)
