"""
Language code validation for the translation target.

Codes are ISO 639-1 / 639-2 primary subtags, optionally followed by a script
(``zh-Hant``) and/or region (``pt-BR``, ``es-419``) subtag, which is the form
the Google Cloud Translation API accepts.
"""
import re
from typing import Optional

from .exceptions import LanguageConfigError


# Mapping from ISO 639-1 codes to full language names (used for display only)
LANGUAGE_CODE_MAP = {
    'en': 'English',
    'zh': 'Chinese',
    'zh-cn': 'Chinese (Simplified)',
    'zh-tw': 'Chinese (Traditional)',
    'es': 'Spanish',
    'fr': 'French',
    'de': 'German',
    'ja': 'Japanese',
    'ko': 'Korean',
    'pt': 'Portuguese',
    'it': 'Italian',
    'ru': 'Russian',
    'ar': 'Arabic',
    'hi': 'Hindi',
    'nl': 'Dutch',
    'pl': 'Polish',
    'tr': 'Turkish',
    'sv': 'Swedish',
    'no': 'Norwegian',
    'da': 'Danish',
    'fi': 'Finnish',
    'cs': 'Czech',
    'el': 'Greek',
    'he': 'Hebrew',
    'th': 'Thai',
    'vi': 'Vietnamese',
    'id': 'Indonesian',
    'ms': 'Malay',
    'uk': 'Ukrainian',
    'ro': 'Romanian',
    'bg': 'Bulgarian',
    'hr': 'Croatian',
    'sr': 'Serbian',
    'sk': 'Slovak',
    'sl': 'Slovenian',
    'et': 'Estonian',
    'lv': 'Latvian',
    'lt': 'Lithuanian',
}

_LANGUAGE_TAG_RE = re.compile(
    r'^(?P<language>[A-Za-z]{2,3})'
    r'(?:-(?P<script>[A-Za-z]{4}))?'
    r'(?:-(?P<region>[A-Za-z]{2}|\d{3}))?$'
)


def validate_language_code(code: Optional[str]) -> str:
    """
    Validate and normalize a language code.

    The primary subtag is lowercased, a script subtag is title-cased and a
    region subtag is uppercased (``ZH-tw`` -> ``zh-TW``).

    Args:
        code: Language code such as "en", "fr", "pt-BR"

    Returns:
        Normalized language code

    Raises:
        LanguageConfigError: If the code is empty or malformed
    """
    if code is None or not code.strip():
        raise LanguageConfigError("Language code is empty")

    match = _LANGUAGE_TAG_RE.match(code.strip().replace('_', '-'))
    if not match:
        raise LanguageConfigError(
            f"Invalid language code '{code}'",
            {'expected': 'ISO 639 code, e.g. en, fr, pt-BR'}
        )

    normalized = match.group('language').lower()
    if match.group('script'):
        normalized += '-' + match.group('script').title()
    if match.group('region'):
        normalized += '-' + match.group('region').upper()
    return normalized


def language_name(code: str) -> str:
    """Return a display name for a language code, or the code itself if unknown."""
    lowered = code.lower()
    if lowered in LANGUAGE_CODE_MAP:
        return LANGUAGE_CODE_MAP[lowered]
    return LANGUAGE_CODE_MAP.get(lowered.split('-')[0], code)
