"""
Exception hierarchy for the bilingual DOCX pipeline.

Every failure in the pipeline is fatal for the whole document: errors are
raised where they happen and propagate to the CLI, which reports them and
exits with a non-zero status.
"""

from typing import Optional, Dict, Any


class DocxBilingualError(Exception):
    """Base exception for all pipeline errors.

    Attributes:
        message: Human-readable error message
        context: Additional context about the error
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        base = f"{self.__class__.__name__}: {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base += f" (context: {context_str})"
        return base


# ============================================================================
# Input / output errors
# ============================================================================

class OpenError(DocxBilingualError):
    """Raised when the source document is missing or is not a valid DOCX."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = context or {}
        if path is not None:
            ctx['path'] = path
        super().__init__(message, ctx)
        self.path = path


class WriteError(DocxBilingualError):
    """Raised when the output document cannot be created or written."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = context or {}
        if path is not None:
            ctx['path'] = path
        super().__init__(message, ctx)
        self.path = path


# ============================================================================
# Configuration errors
# ============================================================================

class LanguageConfigError(DocxBilingualError):
    """Raised when the target (or source) language code is not a valid ISO code."""
    pass


class ClientInitError(DocxBilingualError):
    """Raised when the translation client cannot be constructed (e.g. missing credentials)."""
    pass


# ============================================================================
# Translation errors
# ============================================================================

class TranslationError(DocxBilingualError):
    """Raised when a translation request fails for any reason.

    Network failures, timeouts, quota or authentication errors and malformed
    responses all surface as this exception.

    Attributes:
        status_code: HTTP status returned by the service, if any
        paragraph_index: 1-based index of the paragraph being translated, if known
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        paragraph_index: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = context or {}
        if status_code is not None:
            ctx['status_code'] = status_code
        if paragraph_index is not None:
            ctx['paragraph'] = paragraph_index
        super().__init__(message, ctx)
        self.status_code = status_code
        self.paragraph_index = paragraph_index
