import pytest

from subtrans.errors import FormatError
from subtrans.models import TimeCode
from subtrans.timecode import (
    format_srt_time,
    format_vtt_time,
    parse_srt_time,
    parse_vtt_time,
)


def test_parse_srt_time_one_second():
    assert parse_srt_time("00:00:01,000") == TimeCode(milliseconds=1000)


def test_parse_srt_time_components():
    t = parse_srt_time("01:02:03,456")
    assert (t.hours, t.minutes, t.seconds, t.millis) == (1, 2, 3, 456)


@pytest.mark.parametrize("value", ["00:00:00,000", "01:02:03,456", "99:59:59,999", "12:00:00,001"])
def test_format_srt_time_round_trips_canonical_values(value):
    assert format_srt_time(parse_srt_time(value)) == value


@pytest.mark.parametrize("value", ["00:01,000", "aa:bb:cc,ddd", "", "00:00:01"])
def test_parse_srt_time_rejects_malformed(value):
    with pytest.raises(FormatError):
        parse_srt_time(value)


def test_parse_vtt_time_without_hours_and_short_fraction():
    t = parse_vtt_time("01:02.5")
    assert (t.hours, t.minutes, t.seconds, t.millis) == (0, 1, 2, 500)


def test_parse_vtt_time_truncates_long_fraction():
    assert parse_vtt_time("00:00:01.12345").millis == 123


def test_parse_vtt_time_with_hours():
    assert parse_vtt_time("02:00:00.000") == TimeCode.from_parts(hours=2)


@pytest.mark.parametrize("value", ["1.000", "xx:00.000", "00:00:00:00.000", "00:00,500"])
def test_parse_vtt_time_rejects_malformed(value):
    with pytest.raises(FormatError):
        parse_vtt_time(value)


def test_format_vtt_time_always_emits_hours():
    assert format_vtt_time(parse_vtt_time("01:02.5")) == "00:01:02.500"


def test_hours_past_99_do_not_wrap():
    assert format_srt_time(TimeCode.from_parts(hours=123)) == "123:00:00,000"


def test_time_code_rejects_negative():
    with pytest.raises(ValueError):
        TimeCode(milliseconds=-1)


def test_time_code_ordering():
    assert TimeCode(milliseconds=1) < TimeCode(milliseconds=2)
    assert TimeCode.from_seconds(1.5) == TimeCode(milliseconds=1500)
