"""WebVTT subtitle parsing and generation."""

from .models import Subtitle
from .srt import normalize_newlines
from .timecode import format_vtt_time, parse_vtt_time

VTT_HEADER = "WEBVTT"


def _is_skippable(line: str) -> bool:
    stripped = line.strip()
    return (
        not stripped
        or stripped.upper().startswith(VTT_HEADER)
        or stripped.upper().startswith("NOTE")
    )


def parse_vtt(content: str) -> list[Subtitle]:
    """Parse WebVTT content into Subtitle objects.

    WebVTT has no native index, so cues are numbered from 1 in file order.
    Cue identifiers, NOTE blocks and cue settings are ignored.

    Args:
        content: Raw WebVTT file content

    Returns:
        List of Subtitle objects

    Raises:
        FormatError: If a cue timing line has a malformed timestamp
    """
    lines = normalize_newlines(content).split("\n")
    subtitles = []
    i = 0

    while i < len(lines):
        line = lines[i]
        if _is_skippable(line) or "-->" not in line:
            i += 1
            continue

        left, right = line.split("-->", 1)
        start = parse_vtt_time(left)
        end_parts = right.split()
        end = parse_vtt_time(end_parts[0] if end_parts else "")

        text_lines = []
        i += 1
        while i < len(lines) and lines[i].strip():
            text_lines.append(lines[i])
            i += 1

        subtitles.append(
            Subtitle(
                index=len(subtitles) + 1,
                start=start,
                end=end,
                text="\n".join(text_lines),
            )
        )

    return subtitles


def subtitles_to_vtt(subtitles: list[Subtitle]) -> str:
    """Convert subtitles to WebVTT format string."""
    blocks = [f"{VTT_HEADER}\n\n"]
    for sub in subtitles:
        start_ts = format_vtt_time(sub.start)
        end_ts = format_vtt_time(sub.end)
        blocks.append(f"{start_ts} --> {end_ts}\n{sub.text}\n\n")
    return "".join(blocks)
