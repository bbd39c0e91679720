from subtrans.models import TimeCode
from subtrans.srt import parse_srt, subtitles_to_srt


def test_parse_srt_parses_entries():
    subs = parse_srt(
        "1\n"
        "00:00:01,000 --> 00:00:02,000\n"
        "Hello\n"
        "\n"
        "2\n"
        "00:00:03,000 --> 00:00:04,500\n"
        "World\n"
    )
    assert [s.index for s in subs] == [1, 2]
    assert [s.text for s in subs] == ["Hello", "World"]
    assert subs[1].start == TimeCode(milliseconds=3000)
    assert subs[1].end == TimeCode(milliseconds=4500)


def test_parse_srt_keeps_source_indices():
    subs = parse_srt(
        "7\n00:00:01,000 --> 00:00:02,000\nA\n\n"
        "42\n00:00:03,000 --> 00:00:04,000\nB\n"
    )
    assert [s.index for s in subs] == [7, 42]


def test_parse_srt_multiline_text_and_no_trailing_blank_line():
    subs = parse_srt("1\n00:00:01,000 --> 00:00:02,000\n  First line\nSecond line  ")
    assert len(subs) == 1
    assert subs[0].text == "First line\nSecond line"


def test_parse_srt_skips_malformed_block_between_valid_ones():
    content = (
        "1\n00:00:01,000 --> 00:00:02,000\nHello\n\n"
        "2\nthis is not a timing line\nBroken\n\n"
        "3\n00:00:05,000 --> 00:00:06,000\nWorld\n\n"
    )
    subs = parse_srt(content)
    assert [(s.index, s.text) for s in subs] == [(1, "Hello"), (3, "World")]


def test_parse_srt_skips_block_without_text():
    content = (
        "1\n00:00:01,000 --> 00:00:02,000\n\n"
        "2\n00:00:03,000 --> 00:00:04,000\nKept\n"
    )
    subs = parse_srt(content)
    assert [(s.index, s.text) for s in subs] == [(2, "Kept")]


def test_parse_srt_handles_crlf_bom_and_timing_whitespace():
    content = "\ufeff1\r\n00:00:01,000   -->   00:00:02,000  \r\nHola\r\nmundo\r\n\r\n"
    subs = parse_srt(content)
    assert len(subs) == 1
    assert subs[0].text == "Hola\nmundo"
    assert subs[0].end == TimeCode(milliseconds=2000)


def test_parse_srt_empty_input():
    assert parse_srt("") == []
    assert parse_srt("garbage\nonly\n") == []


def test_subtitles_to_srt_format():
    subs = parse_srt("1\n00:00:01,000 --> 00:00:02,000\nHello\nthere\n")
    assert subtitles_to_srt(subs) == "1\n00:00:01,000 --> 00:00:02,000\nHello\nthere\n\n"


def test_srt_round_trip():
    content = (
        "3\n00:00:01,250 --> 00:00:02,000\n<i>Hello</i>\n\n"
        "4\n01:00:03,000 --> 01:00:04,999\nTwo\nlines\n\n"
    )
    first = parse_srt(content)
    assert subtitles_to_srt(first) == content
    assert parse_srt(subtitles_to_srt(first)) == first
