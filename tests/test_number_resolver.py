"""Tests for spoken-number resolution."""

from __future__ import annotations

import sys

import pytest

from src.intent.numbers import parse_numeral, resolve_number


@pytest.mark.parametrize(
    ("token", "language_tag"),
    [("2", "en-US"), ("two", "en-US"), ("दो", "hi-IN"), ("do", "hi-IN"), ("२", "hi-IN")],
)
def test_every_representation_of_two_resolves_to_two(token: str, language_tag: str) -> None:
    assert resolve_number(token, language_tag) == 2


def test_decimal_numerals_are_floored() -> None:
    assert resolve_number("2.7", "en-US") == 2
    assert parse_numeral("0.5") == 0


def test_zero_is_distinct_from_no_match() -> None:
    assert resolve_number("0", "en-US") == 0
    assert resolve_number("apples", "en-US") is None


def test_number_words_are_case_insensitive_and_ignore_punctuation() -> None:
    assert resolve_number("Three,", "en-US") == 3
    assert resolve_number(" दो ", "hi-IN") == 2


def test_common_misrecognitions_of_two() -> None:
    assert resolve_number("to", "en-US") == 2
    assert resolve_number("too", "en-US") == 2


def test_words_only_resolve_in_their_own_language() -> None:
    assert resolve_number("two", "hi-IN") is None
    assert resolve_number("दो", "en-US") is None


def test_unknown_language_uses_english_words() -> None:
    assert resolve_number("five", "fr-FR") == 5


@pytest.mark.parametrize("token", ["", "   ", "-", "1,5", "2x"])
def test_non_numbers_return_none(token: str) -> None:
    assert resolve_number(token, "en-US") is None


def test_long_numerals_are_exact() -> None:
    assert resolve_number("12345678901234567891", "en-US") == 12345678901234567891
    assert resolve_number("12345678901234567891.99", "en-US") == 12345678901234567891
    assert parse_numeral("9" * 400) == int("9" * 400)


def test_numeral_beyond_int_conversion_limit_is_not_a_number() -> None:
    limit = sys.get_int_max_str_digits()
    if limit == 0:
        pytest.skip("int conversion limit is disabled")
    assert parse_numeral("9" * (limit + 1)) is None
