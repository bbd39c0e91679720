"""Timestamp parsing and formatting for SRT and WebVTT."""

import re

from .errors import FormatError
from .models import TimeCode

_SRT_TIME_RE = re.compile(r"(\d+):(\d+):(\d+)[,.](\d+)")
_VTT_TIME_RE = re.compile(r"(?:(\d+):)?(\d+):(\d+)(?:\.(\d+))?")


def _fraction_to_millis(fraction: str | None) -> int:
    """Right-pad a fractional-seconds string to 3 digits, then truncate."""
    if not fraction:
        return 0
    return int(fraction.ljust(3, "0")[:3])


def parse_srt_time(timestamp: str) -> TimeCode:
    """Parse SRT timestamp to a TimeCode.

    Args:
        timestamp: SRT timestamp format "HH:MM:SS,mmm"

    Returns:
        Parsed TimeCode

    Raises:
        FormatError: If the timestamp is malformed
    """
    match = _SRT_TIME_RE.fullmatch(timestamp.strip())
    if not match:
        raise FormatError(f"Invalid SRT timestamp: {timestamp!r}")

    hours, minutes, seconds, fraction = match.groups()
    return TimeCode.from_parts(
        int(hours), int(minutes), int(seconds), _fraction_to_millis(fraction)
    )


def parse_vtt_time(timestamp: str) -> TimeCode:
    """Parse WebVTT timestamp to a TimeCode.

    Accepts "MM:SS.mmm" or "HH:MM:SS.mmm". The fraction may have any number
    of digits: ".5" is 500ms and ".12345" is 123ms.

    Raises:
        FormatError: If the timestamp is malformed
    """
    match = _VTT_TIME_RE.fullmatch(timestamp.strip())
    if not match:
        raise FormatError(f"Invalid WebVTT timestamp: {timestamp!r}")

    hours, minutes, seconds, fraction = match.groups()
    return TimeCode.from_parts(
        int(hours or 0), int(minutes), int(seconds), _fraction_to_millis(fraction)
    )


def format_srt_time(time: TimeCode) -> str:
    """Format a TimeCode as SRT timestamp (HH:MM:SS,mmm)."""
    return f"{time.hours:02d}:{time.minutes:02d}:{time.seconds:02d},{time.millis:03d}"


def format_vtt_time(time: TimeCode) -> str:
    """Format a TimeCode as WebVTT timestamp (HH:MM:SS.mmm)."""
    return f"{time.hours:02d}:{time.minutes:02d}:{time.seconds:02d}.{time.millis:03d}"
