import pytest

from subtrans.errors import FormatError
from subtrans.models import TimeCode
from subtrans.vtt import parse_vtt, subtitles_to_vtt

SAMPLE_VTT = """WEBVTT

NOTE This is a comment

intro
00:01.000 --> 00:02.500 position:50% align:center
Hello
there

00:00:03.000 --> 00:00:04.000
World
"""


def test_parse_vtt_numbers_cues_from_one():
    subs = parse_vtt(SAMPLE_VTT)
    assert [s.index for s in subs] == [1, 2]
    assert subs[0].text == "Hello\nthere"
    assert subs[1].text == "World"


def test_parse_vtt_drops_cue_settings_and_optional_hours():
    subs = parse_vtt(SAMPLE_VTT)
    assert subs[0].start == TimeCode(milliseconds=1000)
    assert subs[0].end == TimeCode(milliseconds=2500)


def test_parse_vtt_raises_on_bad_timestamp():
    with pytest.raises(FormatError):
        parse_vtt("WEBVTT\n\nnot-a-time --> 00:00:01.000\nText\n")


def test_parse_vtt_empty_file():
    assert parse_vtt("WEBVTT\n") == []


def test_subtitles_to_vtt_format():
    subs = parse_vtt(SAMPLE_VTT)
    assert subtitles_to_vtt(subs) == (
        "WEBVTT\n\n"
        "00:00:01.000 --> 00:00:02.500\nHello\nthere\n\n"
        "00:00:03.000 --> 00:00:04.000\nWorld\n\n"
    )


def test_vtt_round_trip():
    first = parse_vtt(SAMPLE_VTT)
    assert parse_vtt(subtitles_to_vtt(first)) == first
