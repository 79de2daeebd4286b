"""
Centralized configuration
"""
import os
import logging
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

from .core.language import validate_language_code

# Setup debug logger for configuration
_config_logger = logging.getLogger('config')

# Load .env file from the current working directory if it exists
_env_file = Path.cwd() / '.env'
load_dotenv(_env_file)

# Google Cloud Translation (v2 REST API)
GOOGLE_TRANSLATE_API_KEY = os.getenv('GOOGLE_TRANSLATE_API_KEY', '')
TRANSLATE_API_ENDPOINT = os.getenv(
    'TRANSLATE_API_ENDPOINT',
    'https://translation.googleapis.com/language/translate/v2'
)
REQUEST_TIMEOUT = float(os.getenv('REQUEST_TIMEOUT', '60'))

# Languages (ISO codes). An empty source language lets the service auto-detect.
DEFAULT_TARGET_LANGUAGE = os.getenv('DEFAULT_TARGET_LANGUAGE', 'en')
DEFAULT_SOURCE_LANGUAGE = os.getenv('DEFAULT_SOURCE_LANGUAGE', '')

# Output document, relative to the working directory
OUTPUT_PATH = os.getenv('OUTPUT_PATH', 'document-output.docx')

# Request batching: by default one request is sent per paragraph.
# When coalescing is enabled, runs of many paragraphs share a request.
COALESCE_TRANSLATION_REQUESTS = os.getenv('COALESCE_TRANSLATION_REQUESTS', 'false').lower() == 'true'
# Google Cloud Translation v2 accepts at most 128 text segments per request
MAX_SEGMENTS_PER_REQUEST = int(os.getenv('MAX_SEGMENTS_PER_REQUEST', '128'))

DEBUG_MODE = os.getenv('DEBUG_MODE', 'false').lower() == 'true'

if DEBUG_MODE:
    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    _config_logger.setLevel(logging.DEBUG)
    _config_logger.debug("="*60)
    _config_logger.debug("LOADED CONFIGURATION VALUES:")
    _config_logger.debug("="*60)
    _config_logger.debug(f"   .env: {_env_file.absolute()} (exists: {_env_file.exists()})")
    _config_logger.debug(f"   TRANSLATE_API_ENDPOINT: {TRANSLATE_API_ENDPOINT}")
    _config_logger.debug(f"   GOOGLE_TRANSLATE_API_KEY: {'***' + GOOGLE_TRANSLATE_API_KEY[-4:] if GOOGLE_TRANSLATE_API_KEY else '(not set)'}")
    _config_logger.debug(f"   REQUEST_TIMEOUT: {REQUEST_TIMEOUT}")
    _config_logger.debug(f"   DEFAULT_TARGET_LANGUAGE: {DEFAULT_TARGET_LANGUAGE}")
    _config_logger.debug(f"   DEFAULT_SOURCE_LANGUAGE: {DEFAULT_SOURCE_LANGUAGE or '(auto)'}")
    _config_logger.debug(f"   OUTPUT_PATH: {OUTPUT_PATH}")
    _config_logger.debug(f"   COALESCE_TRANSLATION_REQUESTS: {COALESCE_TRANSLATION_REQUESTS}")
    _config_logger.debug(f"   MAX_SEGMENTS_PER_REQUEST: {MAX_SEGMENTS_PER_REQUEST}")
    _config_logger.debug("="*60)


@dataclass
class PipelineConfig:
    """
    Per-run settings for the translation pipeline.

    Defaults come from the environment (see module constants). Language codes
    are validated and normalized on construction.

    Raises:
        LanguageConfigError: If target_language or source_language is invalid
    """
    target_language: str = DEFAULT_TARGET_LANGUAGE
    output_path: str = OUTPUT_PATH
    source_language: Optional[str] = field(default_factory=lambda: DEFAULT_SOURCE_LANGUAGE or None)
    request_timeout: float = REQUEST_TIMEOUT
    coalesce_requests: bool = COALESCE_TRANSLATION_REQUESTS
    max_segments_per_request: int = MAX_SEGMENTS_PER_REQUEST

    def __post_init__(self):
        self.target_language = validate_language_code(self.target_language)
        if self.source_language:
            self.source_language = validate_language_code(self.source_language)
        self.max_segments_per_request = max(1, self.max_segments_per_request)
