"""Spoken-number resolution.

Turns a single token ("2", "2.5", "two", "दो", "do", "२") into an integer quantity, or `None` when
the token expresses no number at all. `None` is deliberately distinct from `0`.
"""

from __future__ import annotations

import re
import unicodedata

from src.intent.profiles import LanguageProfile, resolve_profile

# `\d` matches any Unicode decimal digit, so Devanagari numerals are literal numerals too.
_NUMERAL_RE = re.compile(r"\d+(?:\.\d+)?")


def parse_numeral(token: str) -> int | None:
    """Parse an integer or decimal numeral, returning its floor.

    Numerals are never negative, so the floor is the integer part. It is parsed exactly, without a
    float round trip, so long numerals neither overflow nor lose digits. A numeral longer than the
    interpreter's int conversion limit is not a number.
    """

    value = (token or "").strip()
    if not _NUMERAL_RE.fullmatch(value):
        return None
    integer_part, _, _ = value.partition(".")
    try:
        return int(integer_part)
    except ValueError:
        return None


def resolve_number_for(token: str, profile: LanguageProfile) -> int | None:
    """Resolve a token against an already selected language profile.

    Resolution order:
        1) literal numeral (floored),
        2) number word lookup after stripping characters outside the profile's letter set,
        3) otherwise `None`.
    """

    value = unicodedata.normalize("NFC", token or "").strip()
    numeral = parse_numeral(value)
    if numeral is not None:
        return numeral

    cleaned = profile.number_strip_re.sub("", value.lower())
    if not cleaned:
        return None
    return profile.number_words.get(cleaned)


def resolve_number(token: str, language_tag: str | None) -> int | None:
    """Resolve a token to an integer using the profile selected by `language_tag`."""

    return resolve_number_for(token, resolve_profile(language_tag))
