"""
Base class for batch translation clients.

A client receives an ordered batch of strings and returns one translation per
string, in the same order. Callers use :meth:`BatchTranslator.translate_pairs`,
which checks that contract and pairs every original with its translation.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

from ..exceptions import TranslationError


class BatchTranslator(ABC):
    """Abstract base class for translation clients"""

    @abstractmethod
    async def translate(self, texts: Sequence[str], target_language: str) -> List[str]:
        """
        Translate a batch of strings.

        Args:
            texts: Strings to translate, in order
            target_language: ISO language code of the translation

        Returns:
            One translated string per input string, same order

        Raises:
            TranslationError: On any network or service failure
        """
        pass

    async def translate_pairs(self, texts: Sequence[str], target_language: str) -> List[Tuple[str, str]]:
        """Translate a batch and return (original, translated) pairs."""
        texts = list(texts)
        if not texts:
            return []

        translations = await self.translate(texts, target_language)
        if len(translations) != len(texts):
            raise TranslationError(
                f"Translator returned {len(translations)} strings for a batch of {len(texts)}",
                context={'expected': len(texts), 'received': len(translations)}
            )
        return list(zip(texts, translations))

    async def close(self):
        """Release any resources held by the client"""
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
