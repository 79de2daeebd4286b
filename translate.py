"""
Command-line interface for side-by-side DOCX translation
"""
import sys
import argparse
import asyncio
from typing import Callable, Optional, Sequence

from docx_bilingual.config import PipelineConfig
from docx_bilingual.core.docx import open_document
from docx_bilingual.core.exceptions import DocxBilingualError
from docx_bilingual.core.pipeline import PipelineResult, translate_document
from docx_bilingual.core.translation import BatchTranslator, GoogleTranslateClient
from docx_bilingual.utils.unified_logger import UnifiedLogger, setup_cli_logger, LogType


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Translate a Word document and write original and translation side by side."
    )
    parser.add_argument("--doc", required=True, help="Path to the input .docx document.")
    return parser


def default_translator_factory(config: PipelineConfig) -> BatchTranslator:
    return GoogleTranslateClient(
        timeout=config.request_timeout,
        source_language=config.source_language
    )


async def run(doc_path: str, config: PipelineConfig, logger: UnifiedLogger,
              translator_factory: Callable[[PipelineConfig], BatchTranslator]) -> PipelineResult:
    # Open first: a missing input is reported ahead of client setup errors
    paragraphs = open_document(doc_path)
    translator = translator_factory(config)
    async with translator:
        return await translate_document(doc_path, translator, config=config, logger=logger,
                                        paragraphs=paragraphs)


def main(argv: Optional[Sequence[str]] = None,
         translator_factory: Optional[Callable[[PipelineConfig], BatchTranslator]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_cli_logger()

    logger.info(f"Processing {args.doc}...")

    try:
        config = PipelineConfig()
        result = asyncio.run(run(
            args.doc,
            config,
            logger,
            translator_factory or default_translator_factory
        ))
    except DocxBilingualError as e:
        logger.error(f"Translation failed: {e.message}", LogType.ERROR_DETAIL, {
            'details': str(e),
            'input_file': args.doc
        })
        return 1

    logger.info("Translation Completed Successfully", LogType.TRANSLATION_END, {
        'output_file': str(result.output_path),
        'paragraphs': result.paragraph_count,
        'runs': result.run_count
    })
    return 0


if __name__ == "__main__":
    sys.exit(main())
