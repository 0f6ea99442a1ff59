"""Tests for sentence parsing and value coercion."""

import pytest

from flagpr.core.prompt_parser import coerce_value, format_value, parse_prompt


def test_parses_full_sentence():
    intent = parse_prompt("onUPDATE volumeQuotaFlag to false for stage environment and delhi region")

    assert intent is not None
    assert intent.flag_path == "volumeQuotaFlag"
    assert intent.value is False
    assert intent.environment == "stage"
    assert intent.region == "delhi"


def test_optional_clauses_are_independent():
    only_env = parse_prompt("onUPDATE a.b to 3 for prod environment")
    only_region = parse_prompt("onUPDATE a.b to 3 and eu region")
    bare = parse_prompt("onUPDATE a.b to 3")

    assert (only_env.environment, only_env.region) == ("prod", None)
    assert (only_region.environment, only_region.region) == (None, "eu")
    assert (bare.environment, bare.region) == (None, None)
    assert bare.segments == ["a", "b"]


def test_keywords_are_case_insensitive():
    intent = parse_prompt("ONupdate feature.x TO on FOR qa ENVIRONMENT AND us REGION")

    assert intent.flag_path == "feature.x"
    assert intent.value == "on"
    assert intent.environment == "qa"
    assert intent.region == "us"


@pytest.mark.parametrize("padding", ["", "  ", "\t", "\n  "])
def test_surrounding_whitespace_does_not_matter(padding):
    intent = parse_prompt(f"{padding}onUPDATE   retries  to   5 {padding}")

    assert intent.flag_path == "retries"
    assert intent.value == 5


@pytest.mark.parametrize(
    "text",
    [
        "",
        "update retries to 5",
        "onUPDATE retries 5",
        "onUPDATE retries to",
        "onUPDATE retries to 5 for stage",
        "onUPDATE retries to 5 please",
        "onUPDATE a..b to 5",
        "onUPDATE .a to 5",
    ],
)
def test_non_matching_input_returns_none(text):
    assert parse_prompt(text) is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("true", True),
        ("false", False),
        ("42", 42),
        ("-3.5", -3.5),
        ("1e3", 1000),
        ("+7", 7),
        (".5", 0.5),
        ("007", 7),
        ("delhi", "delhi"),
        ("True", "True"),
        ("nan", "nan"),
        ("0x10", "0x10"),
        ("12345678901234567891", 12345678901234567891),
        ("-9007199254740993", -9007199254740993),
    ],
)
def test_coerce_value(raw, expected):
    value = coerce_value(raw)

    assert value == expected
    assert type(value) is type(expected)


def test_format_value_matches_plain_text_rendering():
    assert format_value(False) == "false"
    assert format_value(True) == "true"
    assert format_value(42) == "42"
    assert format_value(-3.5) == "-3.5"
    assert format_value("delhi") == "delhi"
    assert format_value(12345678901234567891) == "12345678901234567891"
    assert format_value(1e-07) == "1e-7"
    assert format_value(2.5e21) == "2.5e+21"
