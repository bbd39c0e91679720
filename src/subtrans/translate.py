"""Subtitle translation: chunking, prompt building and reply reconciliation.

Requests and replies share a line-oriented wire form, one entry per line::

    [12] translated text\\nsecond line

Newlines inside an entry are escaped as the two characters ``\\n`` in the
prompt. Replies are parsed leniently: the text for an index runs up to the
next ``[digits]`` marker, so an oracle that answers with real line breaks
still maps back onto the right entry.
"""

import logging
import re
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable

from .errors import (
    ChunkTranslationError,
    InvalidArgumentError,
    OracleError,
    TranslationCancelledError,
)
from .languages import get_language_name
from .models import Subtitle
from .oracle import Oracle

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 50
RETRY_DELAY = 1.0

DEFAULT_INSTRUCTIONS = """You are a professional subtitle translator. Translate the subtitles accurately while:
- Preserving the natural flow and timing of dialogue
- Maintaining the original tone and style (formal, casual, humorous, etc.)
- Keeping cultural references accessible when possible
- Preserving any formatting tags (like <i> for italics)
- Not translating proper nouns unless they have established translations
- Preserving line breaks within subtitle entries (use \\n for newlines)"""

FORMATTING_RULES = """CRITICAL FORMATTING RULES:
1. Return ONLY the translations, nothing else
2. Use this exact format: [index] translated text
3. Keep each translation on a SINGLE line (use \\n for line breaks within subtitles)
4. Include ALL entries - do not skip any"""

ESCAPED_NEWLINE = "\\n"

_WIRE_RE = re.compile(r"\[(\d{1,9})\]\s*(.*?)(?=\[\d{1,9}\]|\Z)", re.DOTALL)


def chunk_subtitles(subtitles: list[Subtitle], chunk_size: int) -> list[list[Subtitle]]:
    """Split subtitles into contiguous chunks of at most chunk_size entries.

    Raises:
        InvalidArgumentError: If chunk_size is less than 1
    """
    if chunk_size < 1:
        raise InvalidArgumentError(f"Chunk size must be positive, got {chunk_size}")
    return [
        subtitles[i:i + chunk_size] for i in range(0, len(subtitles), chunk_size)
    ]


def escape_text(text: str) -> str:
    """Collapse an entry onto one line by escaping its newlines."""
    return text.replace("\r\n", ESCAPED_NEWLINE).replace("\n", ESCAPED_NEWLINE)


def unescape_text(text: str) -> str:
    return text.replace(ESCAPED_NEWLINE, "\n")


def build_prompt(
    chunk: list[Subtitle],
    source_lang: str,
    target_lang: str,
    instructions: str | None = None,
) -> str:
    """Render a chunk into an oracle request.

    Args:
        chunk: Entries to translate, in order
        source_lang: Source language code or name
        target_lang: Target language code or name
        instructions: Custom instructions replacing the default ones

    Returns:
        The prompt string
    """
    source_name = get_language_name(source_lang)
    target_name = get_language_name(target_lang)

    lines = [
        instructions if instructions and instructions.strip() else DEFAULT_INSTRUCTIONS,
        "",
        f"Translate the following subtitles from {source_name} to {target_name}.",
        "",
        FORMATTING_RULES,
        "",
        "Subtitles to translate:",
        "",
    ]
    lines.extend(f"[{sub.index}] {escape_text(sub.text)}" for sub in chunk)
    return "\n".join(lines) + "\n"


def _clean_capture(text: str) -> str:
    """Unescape captured text and drop blank lines, which would split a cue."""
    lines = unescape_text(text.strip()).splitlines()
    return "\n".join(line.rstrip() for line in lines if line.strip())


def parse_wire_lines(response: str) -> dict[int, str]:
    """Map each [index] marker in a reply to its trimmed, unescaped text.

    Later duplicates of an index replace earlier ones. Markers with empty
    text are ignored.
    """
    translations = {}
    for match in _WIRE_RE.finditer(response):
        text = _clean_capture(match.group(2))
        if text:
            translations[int(match.group(1))] = text
    return translations


def parse_translation_response(response: str, original_subs: list[Subtitle]) -> list[Subtitle]:
    """Merge an oracle reply back onto the original entries.

    Entries whose index is missing from the reply keep their original text.
    Never raises: an unusable reply leaves the chunk untranslated.
    """
    trans_by_index = parse_wire_lines(response or "")

    missing = [sub.index for sub in original_subs if sub.index not in trans_by_index]
    if missing:
        logger.warning(
            "Reply is missing %d of %d entries, keeping original text for: %s",
            len(missing),
            len(original_subs),
            ", ".join(str(i) for i in missing[:10]),
        )

    return [
        sub.with_text(trans_by_index[sub.index]) if sub.index in trans_by_index else sub
        for sub in original_subs
    ]


def translate_chunk(
    chunk: list[Subtitle],
    oracle: Oracle,
    source_lang: str,
    target_lang: str,
    instructions: str | None = None,
    retries: int = 0,
) -> list[Subtitle]:
    """Translate a single chunk, retrying the oracle call on failure."""
    if retries < 0:
        raise InvalidArgumentError(f"Retries must not be negative, got {retries}")
    prompt = build_prompt(chunk, source_lang, target_lang, instructions)

    for attempt in range(retries + 1):
        try:
            response = oracle.invoke(prompt)
            break
        except OracleError as e:
            if attempt >= retries:
                raise
            logger.warning(
                "Oracle call failed (attempt %d/%d): %s", attempt + 1, retries + 1, e
            )
            time.sleep(RETRY_DELAY)

    return parse_translation_response(response, chunk)


def _flatten(results: list[list[Subtitle] | None]) -> list[Subtitle]:
    """Concatenate the leading run of finished chunks."""
    flat = []
    for result in results:
        if result is None:
            break
        flat.extend(result)
    return flat


def translate_subtitles(
    subtitles: list[Subtitle],
    oracle: Oracle,
    source_lang: str,
    target_lang: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    instructions: str | None = None,
    on_progress: Callable[[int, int], None] | None = None,
    cancel_event: threading.Event | None = None,
    workers: int = 1,
    retries: int = 0,
    continue_on_error: bool = False,
) -> list[Subtitle]:
    """Translate subtitles chunk by chunk.

    Chunks are sent one at a time unless workers > 1, in which case they are
    dispatched through a thread pool. Either way the result keeps the original
    entry order.

    Args:
        subtitles: Entries to translate
        oracle: Translation oracle
        source_lang: Source language code
        target_lang: Target language code
        chunk_size: Maximum entries per oracle request
        instructions: Custom instructions replacing the default ones
        on_progress: Called with (chunk number, total chunks) before each dispatch
        cancel_event: When set, no further chunks are dispatched
        workers: Number of chunks in flight at once
        retries: Extra oracle attempts per chunk
        continue_on_error: Keep original text for failed chunks instead of aborting

    Returns:
        Translated entries, same length and order as the input

    Raises:
        InvalidArgumentError: If chunk_size or workers is less than 1, or retries
            is negative
        ChunkTranslationError: If a chunk fails and continue_on_error is False
        TranslationCancelledError: If cancel_event is set before all chunks ran
    """
    chunks = chunk_subtitles(subtitles, chunk_size)
    if workers < 1:
        raise InvalidArgumentError(f"Workers must be positive, got {workers}")
    if retries < 0:
        raise InvalidArgumentError(f"Retries must not be negative, got {retries}")

    total = len(chunks)
    results: list[list[Subtitle] | None] = [None] * total
    logger.info(
        "Translating %d entries in %d chunks (%s -> %s)",
        len(subtitles), total, source_lang, target_lang,
    )

    def run(position: int) -> list[Subtitle]:
        if cancel_event is not None and cancel_event.is_set():
            raise TranslationCancelledError()
        if on_progress:
            on_progress(position + 1, total)

        chunk = chunks[position]
        try:
            return translate_chunk(
                chunk, oracle, source_lang, target_lang, instructions, retries
            )
        except OracleError as e:
            if not continue_on_error:
                raise
            logger.warning(
                "Chunk %d/%d failed, keeping original text: %s", position + 1, total, e
            )
            return list(chunk)

    if workers == 1 or total <= 1:
        for position in range(total):
            try:
                results[position] = run(position)
            except TranslationCancelledError:
                raise TranslationCancelledError(_flatten(results)) from None
            except OracleError as e:
                raise ChunkTranslationError(position + 1, total, e, _flatten(results)) from e
        return _flatten(results)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        future_to_position = {
            executor.submit(run, position): position for position in range(total)
        }
        for future in as_completed(future_to_position):
            position = future_to_position[future]
            try:
                results[position] = future.result()
            except (TranslationCancelledError, OracleError) as e:
                for pending in future_to_position:
                    pending.cancel()
                if isinstance(e, TranslationCancelledError):
                    raise TranslationCancelledError(_flatten(results)) from None
                raise ChunkTranslationError(position + 1, total, e, _flatten(results)) from e

    return _flatten(results)
