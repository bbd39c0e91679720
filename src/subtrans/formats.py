"""Subtitle format dispatch and file I/O."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .errors import UnsupportedFormatError
from .models import Subtitle
from .srt import parse_srt, subtitles_to_srt
from .vtt import parse_vtt, subtitles_to_vtt


@dataclass(frozen=True)
class SubtitleFormat:
    """A parser/serializer pair for one file extension."""

    name: str
    extension: str
    parse: Callable[[str], list[Subtitle]]
    serialize: Callable[[list[Subtitle]], str]


SRT = SubtitleFormat("SubRip", ".srt", parse_srt, subtitles_to_srt)
VTT = SubtitleFormat("WebVTT", ".vtt", parse_vtt, subtitles_to_vtt)

FORMATS = {fmt.extension: fmt for fmt in (SRT, VTT)}


def get_format(path: str | Path) -> SubtitleFormat:
    """Select the subtitle format from a file extension (case-insensitive).

    Raises:
        UnsupportedFormatError: If the extension is not .srt or .vtt
    """
    suffix = Path(path).suffix.lower()
    fmt = FORMATS.get(suffix)
    if fmt is None:
        raise UnsupportedFormatError(
            f"Unsupported subtitle format: {suffix or '(no extension)'}"
        )
    return fmt


def parse_subtitles(content: str, fmt: SubtitleFormat) -> list[Subtitle]:
    return fmt.parse(content)


def serialize_subtitles(subtitles: list[Subtitle], fmt: SubtitleFormat) -> str:
    return fmt.serialize(subtitles)


def read_subtitles(path: str | Path) -> list[Subtitle]:
    """Read and parse a subtitle file.

    Args:
        path: Path to a .srt or .vtt file

    Returns:
        List of Subtitle objects
    """
    path = Path(path)
    fmt = get_format(path)
    content = path.read_text(encoding="utf-8", errors="replace")
    return parse_subtitles(content, fmt)


def write_subtitles(subtitles: list[Subtitle], path: str | Path) -> Path:
    """Write subtitles to a file, choosing the format from its extension.

    Args:
        subtitles: List of Subtitle objects
        path: Output file path

    Returns:
        The written path
    """
    path = Path(path)
    fmt = get_format(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize_subtitles(subtitles, fmt), encoding="utf-8")
    return path


def generate_output_path(input_path: str | Path, target_lang: str) -> Path:
    """Insert the target language code before the extension.

    "movie.srt" translated to "es" becomes "movie.es.srt" in the same directory.
    """
    input_path = Path(input_path)
    return input_path.with_name(f"{input_path.stem}.{target_lang}{input_path.suffix}")
