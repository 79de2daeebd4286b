"""
Side-by-side translation pipeline.

The run is strictly linear: open → extract → translate → assemble → write.
Nothing is written to disk until every paragraph has been translated, so a
failure at any stage leaves no output file behind.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from docx_bilingual.config import PipelineConfig
from docx_bilingual.utils.unified_logger import UnifiedLogger, LogType, get_logger
from .exceptions import TranslationError
from .language import language_name
from .translation.base import BatchTranslator
from .docx.models import Paragraph, Run, TranslatedParagraph
from .docx.reader import open_document
from .docx.extractor import translatable_runs
from .docx.assembler import DocumentAssembler
from .docx.writer import save_document


class PipelineState(Enum):
    """Stages of a pipeline run"""
    IDLE = "idle"
    OPENED = "opened"
    EXTRACTED = "extracted"
    TRANSLATED = "translated"
    ASSEMBLED = "assembled"
    WRITTEN = "written"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PipelineResult:
    """Outcome of a successful run."""
    output_path: Path
    paragraph_count: int
    run_count: int
    skipped_paragraphs: int = 0


# A paragraph paired with the runs submitted for translation
ExtractedParagraph = Tuple[Paragraph, List[Run]]


class BilingualDocxPipeline:
    """
    Translates a DOCX file into a two-column original/translation document.

    The translator is injected so that any BatchTranslator (including test
    stubs) can be used. ``state`` reports the last stage reached.
    """

    def __init__(self, translator: BatchTranslator,
                 config: Optional[PipelineConfig] = None,
                 logger: Optional[UnifiedLogger] = None):
        self.translator = translator
        self.config = config or PipelineConfig()
        self.logger = logger or get_logger()
        self.assembler = DocumentAssembler()
        self.state = PipelineState.IDLE

    async def run(self, doc_path: Union[str, Path],
                  paragraphs: Optional[Sequence[Paragraph]] = None) -> PipelineResult:
        """
        Run the whole pipeline on one document.

        Args:
            doc_path: Source DOCX path
            paragraphs: Paragraphs already read from ``doc_path``; the file is
                opened here when omitted

        Returns:
            PipelineResult with the output path and counters

        Raises:
            OpenError, TranslationError, WriteError: The first failure, unchanged
        """
        self.state = PipelineState.IDLE
        try:
            if paragraphs is None:
                paragraphs = open_document(doc_path)
            self.state = PipelineState.OPENED

            extracted = self._extract(paragraphs)
            self.state = PipelineState.EXTRACTED

            self.logger.info("Translation Started", LogType.TRANSLATION_START, {
                'input_file': str(doc_path),
                'target_lang': f"{language_name(self.config.target_language)} ({self.config.target_language})",
                'total_paragraphs': len(extracted)
            })

            translated = await self._translate(extracted)
            self.state = PipelineState.TRANSLATED

            document = self.assembler.assemble(translated)
            self.state = PipelineState.ASSEMBLED

            output_path = save_document(document, self.config.output_path)
            self.state = PipelineState.WRITTEN
            self.logger.info(f"Document saved to {output_path}", LogType.FILE_OPERATION)
        except BaseException:
            self.state = PipelineState.FAILED
            raise

        self.state = PipelineState.DONE
        return PipelineResult(
            output_path=output_path,
            paragraph_count=self.assembler.paragraph_count,
            run_count=self.assembler.run_count,
            skipped_paragraphs=len(paragraphs) - len(extracted)
        )

    def _extract(self, paragraphs: Sequence[Paragraph]) -> List[ExtractedParagraph]:
        """Keep paragraphs that have at least one non-empty run."""
        extracted = []
        for paragraph in paragraphs:
            runs = translatable_runs(paragraph)
            if runs:
                extracted.append((paragraph, runs))
        self.logger.debug(
            f"Extracted {len(extracted)} of {len(paragraphs)} paragraphs "
            f"({len(paragraphs) - len(extracted)} without text)"
        )
        return extracted

    async def _translate(self, extracted: Sequence[ExtractedParagraph]) -> List[TranslatedParagraph]:
        if self.config.coalesce_requests:
            return await self._translate_coalesced(extracted)
        return await self._translate_per_paragraph(extracted)

    async def _translate_per_paragraph(self, extracted: Sequence[ExtractedParagraph]) -> List[TranslatedParagraph]:
        """One request per paragraph."""
        target = self.config.target_language
        total = len(extracted)
        translated = []

        for index, (paragraph, runs) in enumerate(extracted, 1):
            try:
                pairs = await self.translator.translate_pairs([run.text for run in runs], target)
            except TranslationError as e:
                if e.paragraph_index is None:
                    e.paragraph_index = index
                    e.context['paragraph'] = index
                raise
            translated.append(TranslatedParagraph.from_pairs(paragraph, runs, pairs))
            self.logger.debug("Progress", LogType.PROGRESS, {'current': index, 'total': total})

        return translated

    async def _translate_coalesced(self, extracted: Sequence[ExtractedParagraph]) -> List[TranslatedParagraph]:
        """
        Send the texts of consecutive paragraphs together, at most
        ``max_segments_per_request`` strings per request, then split the
        pairs back per paragraph in order.
        """
        target = self.config.target_language
        limit = self.config.max_segments_per_request
        texts = [run.text for _, runs in extracted for run in runs]

        pairs: List[Tuple[str, str]] = []
        for start in range(0, len(texts), limit):
            pairs.extend(await self.translator.translate_pairs(texts[start:start + limit], target))
            self.logger.debug("Progress", LogType.PROGRESS, {'current': len(pairs), 'total': len(texts)})

        translated = []
        offset = 0
        for paragraph, runs in extracted:
            paragraph_pairs = pairs[offset:offset + len(runs)]
            offset += len(runs)
            translated.append(TranslatedParagraph.from_pairs(paragraph, runs, paragraph_pairs))
        return translated


async def translate_document(doc_path: Union[str, Path],
                             translator: BatchTranslator,
                             config: Optional[PipelineConfig] = None,
                             logger: Optional[UnifiedLogger] = None,
                             paragraphs: Optional[Sequence[Paragraph]] = None) -> PipelineResult:
    """
    Translate ``doc_path`` into a side-by-side document.

    Args:
        doc_path: Source DOCX path
        translator: Batch translation client
        config: Pipeline settings (defaults from the environment)
        logger: Logger (defaults to the global logger)
        paragraphs: Paragraphs already read from ``doc_path``

    Returns:
        PipelineResult
    """
    pipeline = BilingualDocxPipeline(translator, config=config, logger=logger)
    return await pipeline.run(doc_path, paragraphs=paragraphs)
