import pytest

from replaygain_tool.core.numbers import (
    ParseResult,
    normalize_number_string,
    parse_decimal,
    strip_leading_sign,
)


def test_strip_leading_sign_only_at_first_position() -> None:
    assert strip_leading_sign("+1.5", "+") == "1.5"
    assert strip_leading_sign("+ 1.5", "+") == "1.5"
    assert strip_leading_sign("1.5+", "+") == "1.5+"
    assert strip_leading_sign("-1.5", "+") == "-1.5"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("3.5", "3.5"),
        ("  3.5 ", "3.5"),
        ("+3.5", "3.5"),
        ("  + 3.5 dB", "3.5 dB"),
        ("-3.5", "-3.5"),
        ("--3.5", "--3.5"),
        ("", ""),
        ("+", ""),
    ],
)
def test_normalize_number_string_accepts(text: str, expected: str) -> None:
    assert normalize_number_string(text) == ParseResult(expected, True)


@pytest.mark.parametrize("text", ["++3", " +-3 ", "+ -3", "+ + 3"])
def test_normalize_number_string_rejects_stacked_signs(text: str) -> None:
    normalized, valid = normalize_number_string(text)
    assert not valid
    assert normalized == text


def test_parse_result_unpacks_like_tuple() -> None:
    result = ParseResult(1.5, True)
    value, valid = result
    assert value == 1.5
    assert valid
    assert result == (1.5, True)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1.5", 1.5),
        ("-2", -2.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e3", 1000.0),
        ("-2.5E-1", -0.25),
    ],
)
def test_parse_decimal(text: str, expected: float) -> None:
    assert parse_decimal(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "-", ".", "inf", "nan", "1_000", "0x10", "1 5", "--1", "-+1", "1,5", "3dB"],
)
def test_parse_decimal_rejects_non_decimal(text: str) -> None:
    assert parse_decimal(text) is None
