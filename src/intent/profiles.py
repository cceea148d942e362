"""Language profiles and the profile registry.

A `LanguageProfile` bundles everything the interpreter needs to know about one language: trigger
patterns, price and brand phrasings, the number-word table, filler words and the character sets used
to clean tokens and slots. Profiles are compiled once at import time and are immutable afterwards,
so they can be shared by any number of concurrent interpretations.

Adding a language means adding a profile here (and its vocabulary in `src.intent.dictionaries`);
the classifier itself never branches on the language.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from src.intent import dictionaries as d

# Devanagari block without the danda punctuation marks (U+0964, U+0965).
_DEVANAGARI = "\u0900-\u0963\u0966-\u097f"


@dataclass(frozen=True)
class LanguageProfile:
    """Compiled, read-only rules for one language."""

    code: str
    search_re: re.Pattern[str]
    add_re: re.Pattern[str]
    remove_re: re.Pattern[str]
    search_strip_re: re.Pattern[str]
    list_phrase_re: re.Pattern[str]
    price_res: tuple[re.Pattern[str], ...]
    brand_res: tuple[re.Pattern[str], ...]
    number_words: Mapping[str, int]
    number_strip_re: re.Pattern[str]
    token_strip_re: re.Pattern[str]
    item_strip_re: re.Pattern[str]
    particles_re: re.Pattern[str]
    filler_words: frozenset[str]
    short_form_re: re.Pattern[str]
    short_form_max_tokens: int

    def match_search(self, text: str) -> re.Match[str] | None:
        return self.search_re.search(text)

    def match_add(self, text: str) -> re.Match[str] | None:
        return self.add_re.search(text)

    def match_remove(self, text: str) -> re.Match[str] | None:
        return self.remove_re.search(text)

    def strip_particles(self, text: str) -> str:
        """Drop leading possessive/article tokens (e.g. "की", "of")."""

        return self.particles_re.sub("", text)

    def strip_list_phrases(self, text: str) -> str:
        """Drop references to the list itself ("to my list", "लिस्ट में")."""

        return self.list_phrase_re.sub(" ", text)

    def extract_price(self, text: str) -> tuple[float | None, str]:
        """Return the price ceiling (if any) and the text with the price phrase removed."""

        for pattern in self.price_res:
            match = pattern.search(text)
            if match:
                remaining = text[: match.start()] + " " + text[match.end():]
                return float(match.group("price")), remaining
        return None, text

    def extract_brand(self, text: str) -> tuple[str | None, str]:
        """Return the brand filter (if any) and the text with the brand phrase removed."""

        for pattern in self.brand_res:
            match = pattern.search(text)
            if match:
                remaining = text[: match.start()] + " " + text[match.end():]
                return match.group("brand"), remaining
        return None, text

    def is_filler(self, token: str) -> bool:
        return token in self.filler_words

    def is_short_form(self, text: str) -> bool:
        """Whether the text is a bare item name ("bread", "आलू प्याज")."""

        if not self.short_form_re.fullmatch(text):
            return False
        return len(text.split()) <= self.short_form_max_tokens


def _nfc(values: Iterable[str]) -> list[str]:
    return [unicodedata.normalize("NFC", v) for v in values]


def _build_regex_alternation(phrases: Iterable[str]) -> str:
    # Sort by length desc to prefer longer phrases (e.g. "please add" over "add").
    parts = sorted(set(phrases), key=lambda p: (-len(p), p))
    return "|".join(re.escape(p) for p in parts)


def _whole_words(phrases: Iterable[str]) -> str:
    """Match whole words/phrases (Latin script, where `\\b` is reliable)."""

    return rf"\b(?:{_build_regex_alternation(phrases)})\b"


def _token_stems(phrases: Iterable[str], *, negations: Iterable[str] = ()) -> str:
    """Match whole tokens starting with any stem ("जोड़" matches "जोड़ो", "जोड़ें").

    `\\b` is unusable for Devanagari because vowel signs are not word characters, so token edges
    are expressed with whitespace lookarounds instead.
    """

    guards = "".join(rf"(?<!{re.escape(n)}\s)" for n in _nfc(negations))
    return rf"(?<!\S){guards}(?:{_build_regex_alternation(_nfc(phrases))})\S*"


def _exact_tokens(words: Iterable[str]) -> str:
    return rf"(?<!\S)(?:{_build_regex_alternation(_nfc(words))})(?!\S)"


def _leading_particles(particles: Iterable[str]) -> re.Pattern[str]:
    return re.compile(rf"^(?:(?:{_build_regex_alternation(_nfc(particles))})\s+)+")


def _compile_all(patterns: Iterable[str]) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(unicodedata.normalize("NFC", p)) for p in patterns)


def _number_table(table: Mapping[str, int]) -> Mapping[str, int]:
    return MappingProxyType({unicodedata.normalize("NFC", k).lower(): v for k, v in table.items()})


ENGLISH = LanguageProfile(
    code="en",
    search_re=re.compile(_whole_words(d.EN_SEARCH_TRIGGERS)),
    add_re=re.compile(_whole_words(d.EN_ADD_TRIGGERS)),
    remove_re=re.compile(_whole_words(d.EN_REMOVE_TRIGGERS)),
    search_strip_re=re.compile(_whole_words((*d.EN_SEARCH_TRIGGERS, *d.EN_SEARCH_FILLERS))),
    list_phrase_re=re.compile(d.EN_LIST_PHRASE),
    price_res=_compile_all(d.EN_PRICE_PATTERNS),
    brand_res=_compile_all(d.EN_BRAND_PATTERNS),
    number_words=_number_table(d.EN_NUMBER_WORDS),
    number_strip_re=re.compile(r"[^a-z]+"),
    token_strip_re=re.compile(r"[^a-z0-9.]+"),
    item_strip_re=re.compile(r"[^a-z0-9\s\-]+"),
    particles_re=_leading_particles(d.EN_LEADING_PARTICLES),
    filler_words=frozenset(d.EN_FILLER_WORDS),
    short_form_re=re.compile(r"[a-z]+(?:\s+[a-z]+)*"),
    short_form_max_tokens=2,
)

HINDI = LanguageProfile(
    code="hi",
    search_re=re.compile(_token_stems(d.HI_SEARCH_TRIGGERS)),
    add_re=re.compile(_token_stems(d.HI_ADD_TRIGGERS, negations=d.HI_ADD_NEGATIONS)),
    remove_re=re.compile(_token_stems(d.HI_REMOVE_TRIGGERS)),
    search_strip_re=re.compile(
        _token_stems(d.HI_SEARCH_TRIGGERS) + "|" + _exact_tokens(d.HI_SEARCH_FILLERS)
    ),
    list_phrase_re=re.compile(unicodedata.normalize("NFC", d.HI_LIST_PHRASE)),
    price_res=_compile_all(d.HI_PRICE_PATTERNS),
    brand_res=_compile_all(d.HI_BRAND_PATTERNS),
    number_words=_number_table(d.HI_NUMBER_WORDS),
    number_strip_re=re.compile(rf"[^{_DEVANAGARI}a-z]+"),
    token_strip_re=re.compile(rf"[^{_DEVANAGARI}a-z0-9.]+"),
    item_strip_re=re.compile(rf"[^{_DEVANAGARI}a-z0-9\s\-]+"),
    particles_re=_leading_particles(d.HI_LEADING_PARTICLES),
    filler_words=frozenset(_nfc(d.HI_FILLER_WORDS)),
    short_form_re=re.compile(r"[\u0900-\u097fa-z0-9\s\-]+"),
    short_form_max_tokens=3,
)

DEFAULT_PROFILE = ENGLISH

PROFILES: Mapping[str, LanguageProfile] = MappingProxyType(
    {profile.code: profile for profile in (ENGLISH, HINDI)}
)


def resolve_profile(language_tag: str | None) -> LanguageProfile:
    """Resolve a loosely BCP-47 tag ("hi-IN", "en_us", "HI") to a profile.

    Matching uses the case-insensitive two-letter language prefix. Unknown, empty or malformed tags
    resolve to the default (English) profile; this function never fails.
    """

    code = (language_tag or "").strip()[:2].lower()
    return PROFILES.get(code, DEFAULT_PROFILE)
