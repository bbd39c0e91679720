"""Language names and oracle-based language detection."""

import logging
import re

from .models import Subtitle
from .oracle import Oracle

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
DETECTION_SAMPLE_SIZE = 10

DETECTION_PROMPT = """Detect the language of the following text and respond with ONLY the ISO 639-1 two-letter language code (e.g., 'en', 'es', 'fr'). Do not include any other text in your response.

Text: {sample}"""

LANGUAGE_NAMES = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "ru": "Russian",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese",
    "ar": "Arabic",
    "hi": "Hindi",
    "nl": "Dutch",
    "pl": "Polish",
    "sv": "Swedish",
    "da": "Danish",
    "no": "Norwegian",
    "fi": "Finnish",
    "tr": "Turkish",
    "el": "Greek",
    "he": "Hebrew",
    "th": "Thai",
    "vi": "Vietnamese",
    "id": "Indonesian",
    "ms": "Malay",
    "cs": "Czech",
    "sk": "Slovak",
    "hu": "Hungarian",
    "ro": "Romanian",
    "uk": "Ukrainian",
    "bg": "Bulgarian",
    "hr": "Croatian",
    "sr": "Serbian",
}

_WORD_RE = re.compile(r"[a-z]+(?:'[a-z]+)*")


def get_language_name(code: str) -> str:
    """Get full language name from code."""
    return LANGUAGE_NAMES.get(code.lower(), code)


def common_languages() -> list[str]:
    """Language codes sorted by their display name."""
    return sorted(LANGUAGE_NAMES, key=LANGUAGE_NAMES.get)


def parse_language_code(reply: str, default: str = DEFAULT_LANGUAGE) -> str:
    """Pull a known two-letter code out of a short oracle reply.

    A reply that is exactly a known code wins. Otherwise the first two-letter
    word that is a known code is used, so contractions like "it's" are not
    mistaken for Italian.
    """
    cleaned = reply.strip().strip("'\"`.").lower()
    if cleaned in LANGUAGE_NAMES:
        return cleaned
    for word in _WORD_RE.findall(cleaned):
        if len(word) == 2 and word in LANGUAGE_NAMES:
            return word
    return default


def detect_language(subtitles: list[Subtitle], oracle: Oracle) -> str:
    """Detect the language of subtitles by asking the oracle.

    The first few entries are sent as a sample. Replies that do not contain a
    known language code fall back to English.
    """
    sample = " ".join(sub.text for sub in subtitles[:DETECTION_SAMPLE_SIZE])
    if not sample.strip():
        return DEFAULT_LANGUAGE

    reply = oracle.invoke(DETECTION_PROMPT.format(sample=sample))
    code = parse_language_code(reply)
    logger.info("Detected language %s from reply %r", code, reply.strip()[:40])
    return code
