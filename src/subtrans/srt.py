"""SRT subtitle parsing and generation.

Parsing is best-effort extraction: blocks that do not have the shape
index line, timing line, one or more text lines are skipped rather than
failing the whole file.
"""

import logging
import re

from .models import Subtitle
from .timecode import format_srt_time, parse_srt_time

logger = logging.getLogger(__name__)

_SRT_BLOCK_RE = re.compile(
    r"^[ \t]*(\d+)[ \t]*\n"
    r"[ \t]*(\d+:\d{2}:\d{2}[,.]\d{1,3})[ \t]*-->[ \t]*(\d+:\d{2}:\d{2}[,.]\d{1,3})[^\n]*\n"
    r"((?:[ \t]*\S[^\n]*(?:\n|\Z))+)",
    re.MULTILINE,
)


def normalize_newlines(content: str) -> str:
    """Strip a leading BOM and convert CRLF/CR line endings to LF."""
    if content.startswith("\ufeff"):
        content = content[1:]
    return content.replace("\r\n", "\n").replace("\r", "\n")


def parse_srt(content: str) -> list[Subtitle]:
    """Parse SRT content into Subtitle objects.

    Args:
        content: Raw SRT file content

    Returns:
        List of Subtitle objects in file order, with source indices kept
    """
    content = normalize_newlines(content)
    subtitles = []
    position = 0

    for match in _SRT_BLOCK_RE.finditer(content):
        skipped = content[position:match.start()].strip()
        if skipped:
            logger.debug("Skipping malformed SRT block: %r", skipped[:80])
        position = match.end()

        index, start, end, text = match.groups()
        subtitles.append(
            Subtitle(
                index=int(index),
                start=parse_srt_time(start),
                end=parse_srt_time(end),
                text=text.strip(),
            )
        )

    trailing = content[position:].strip()
    if trailing:
        logger.debug("Skipping malformed SRT block: %r", trailing[:80])

    return subtitles


def subtitle_to_srt_block(sub: Subtitle) -> str:
    """Convert one entry to an SRT block, including its blank separator line."""
    start_ts = format_srt_time(sub.start)
    end_ts = format_srt_time(sub.end)
    return f"{sub.index}\n{start_ts} --> {end_ts}\n{sub.text}\n\n"


def subtitles_to_srt(subtitles: list[Subtitle]) -> str:
    """Convert subtitles to SRT format string.

    Args:
        subtitles: List of Subtitle objects

    Returns:
        SRT formatted string
    """
    return "".join(subtitle_to_srt_block(sub) for sub in subtitles)
