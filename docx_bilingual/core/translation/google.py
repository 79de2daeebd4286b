"""
Google Cloud Translation provider implementation.

This module provides the GoogleTranslateClient class for the Translation API
v2 REST endpoint (``translate/v2``), which translates a list of strings in a
single request.
"""

from typing import List, Optional, Sequence
import httpx

from docx_bilingual.config import (
    GOOGLE_TRANSLATE_API_KEY,
    TRANSLATE_API_ENDPOINT,
    REQUEST_TIMEOUT
)
from ..exceptions import ClientInitError, TranslationError
from .base import BatchTranslator


class GoogleTranslateClient(BatchTranslator):
    """
    Client for the Google Cloud Translation API (v2).

    Configuration:
        api_key: Google Cloud API key with the Translation API enabled (required)
        api_endpoint: REST endpoint (default: TRANSLATE_API_ENDPOINT)
        timeout: Per-request timeout in seconds
        source_language: Source language code, or None to let the API detect it

    Example:
        >>> async with GoogleTranslateClient(api_key="AI...") as client:
        ...     await client.translate(["Bonjour"], "en")
        ['Hello']
    """

    def __init__(self, api_key: Optional[str] = GOOGLE_TRANSLATE_API_KEY,
                 api_endpoint: str = TRANSLATE_API_ENDPOINT,
                 timeout: float = REQUEST_TIMEOUT,
                 source_language: Optional[str] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the client.

        Raises:
            ClientInitError: If no API key is configured
        """
        if not api_key:
            raise ClientInitError(
                "Google Cloud Translation API key is not configured",
                {'env_var': 'GOOGLE_TRANSLATE_API_KEY'}
            )
        if not api_endpoint:
            raise ClientInitError("Translation API endpoint is empty", {'env_var': 'TRANSLATE_API_ENDPOINT'})

        self.api_key = api_key
        self.api_endpoint = api_endpoint
        self.timeout = timeout
        self.source_language = source_language
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create a persistent HTTP client with connection pooling"""
        if self._client is None:
            self._client = httpx.AsyncClient(
                limits=httpx.Limits(max_keepalive_connections=5, max_connections=10),
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport
            )
        return self._client

    async def close(self):
        """Close the HTTP client"""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def translate(self, texts: Sequence[str], target_language: str) -> List[str]:
        """
        Translate a batch of strings with one API request.

        Args:
            texts: Strings to translate
            target_language: ISO code of the target language

        Returns:
            Translated strings in input order

        Raises:
            TranslationError: On timeout, HTTP error, or an unexpected response body
        """
        texts = list(texts)
        if not texts:
            return []

        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key
        }
        payload = {
            "q": texts,
            "target": target_language,
            "format": "text"
        }
        if self.source_language:
            payload["source"] = self.source_language

        client = await self._get_client()
        try:
            response = await client.post(self.api_endpoint, json=payload, headers=headers)
            response.raise_for_status()
            response_json = response.json()
        except httpx.TimeoutException as e:
            raise TranslationError(
                f"Translation request timed out after {self.timeout}s",
                context={'segments': len(texts)}
            ) from e
        except httpx.HTTPStatusError as e:
            raise TranslationError(
                f"Translation API error: {_error_message(e.response)}",
                status_code=e.response.status_code
            ) from e
        except httpx.HTTPError as e:
            raise TranslationError(f"Translation request failed: {e}") from e
        except ValueError as e:
            raise TranslationError("Translation API returned invalid JSON") from e

        try:
            translations = response_json["data"]["translations"]
            return [item["translatedText"] for item in translations]
        except (KeyError, TypeError) as e:
            raise TranslationError(
                "Unexpected translation API response",
                context={'body': str(response_json)[:200]}
            ) from e


def _error_message(response: httpx.Response) -> str:
    """Pull the error message out of a Google API error body, falling back to the raw text."""
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return f"HTTP {response.status_code} - {response.text[:500]}"
