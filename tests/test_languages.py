import pytest

from conftest import FakeOracle, make_sub
from subtrans.languages import (
    LANGUAGE_NAMES,
    common_languages,
    detect_language,
    get_language_name,
    parse_language_code,
)


def test_get_language_name():
    assert get_language_name("es") == "Spanish"
    assert get_language_name("ES") == "Spanish"
    assert get_language_name("tlh") == "tlh"


def test_common_languages_sorted_by_name():
    names = [LANGUAGE_NAMES[code] for code in common_languages()]
    assert names == sorted(names)
    assert names[0] == "Arabic"


@pytest.mark.parametrize(
    "reply, expected",
    [("es", "es"), ("  FR\n", "fr"), ("'de'", "de"), ("The language is ja.", "ja"), ("", "en"), ("xx", "en"),
     ("It's es", "es"), ("it", "it"), ("Language: pt.", "pt")],
)
def test_parse_language_code(reply, expected):
    assert parse_language_code(reply) == expected


def test_detect_language_samples_first_ten_entries():
    subs = [make_sub(i, f"frase {i}") for i in range(1, 15)]
    oracle = FakeOracle("es\n")

    assert detect_language(subs, oracle) == "es"
    (prompt,) = oracle.prompts
    assert "ISO 639-1" in prompt
    assert "frase 1 frase 2" in prompt
    assert "frase 10" in prompt
    assert "frase 11" not in prompt


def test_detect_language_without_text_skips_oracle():
    oracle = FakeOracle("fr")
    assert detect_language([], oracle) == "en"
    assert oracle.prompts == []
