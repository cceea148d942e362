"""Tests for language profile lookup and per-language matching rules."""

from __future__ import annotations

import pytest

from src.intent.normalize import normalize_text
from src.intent.profiles import DEFAULT_PROFILE, ENGLISH, HINDI, PROFILES, resolve_profile


@pytest.mark.parametrize("tag", ["hi-IN", "hi-XX", "HI", "hi_in", " hi-IN "])
def test_hindi_tags_resolve_to_hindi(tag: str) -> None:
    assert resolve_profile(tag) is HINDI


@pytest.mark.parametrize("tag", ["en-US", "en_gb", "fr-FR", "", None, "x", "123", "h"])
def test_other_tags_fall_back_to_english(tag: str | None) -> None:
    assert resolve_profile(tag) is ENGLISH


def test_registry_contents() -> None:
    assert DEFAULT_PROFILE is ENGLISH
    assert set(PROFILES) == {"en", "hi"}


def test_profiles_are_immutable() -> None:
    with pytest.raises(AttributeError):
        ENGLISH.code = "fr"  # type: ignore[misc]
    with pytest.raises(TypeError):
        ENGLISH.number_words["three"] = 4  # type: ignore[index]


def test_english_triggers_match_whole_words_only() -> None:
    assert ENGLISH.match_add("add milk")
    assert ENGLISH.match_add("please add milk")
    assert not ENGLISH.match_add("paddle")
    assert not ENGLISH.match_search("refinder")


def test_hindi_triggers_match_inflected_tokens() -> None:
    assert HINDI.match_add(normalize_text("दूध जोड़ो"))
    assert HINDI.match_add(normalize_text("दो आम चाहिए"))
    assert HINDI.match_remove(normalize_text("ब्रेड हटाओ"))
    assert HINDI.match_search(normalize_text("टूथपेस्ट खोजो"))


def test_hindi_negated_need_is_not_an_add() -> None:
    text = normalize_text("मुझे ब्रेड नहीं चाहिए")
    assert not HINDI.match_add(text)
    assert HINDI.match_remove(text)


def test_english_price_extraction_discards_currency_marker() -> None:
    price, rest = ENGLISH.extract_price("find soap under $3.50")
    assert price == 3.5
    assert "3.50" not in rest
    assert "soap" in rest


def test_hindi_price_extraction() -> None:
    price, rest = HINDI.extract_price(normalize_text("50 रुपये से कम का टूथपेस्ट दिखाओ"))
    assert price == 50
    assert "टूथपेस्ट" in rest


def test_brand_extraction() -> None:
    brand, rest = ENGLISH.extract_brand("find toothpaste by colgate")
    assert brand == "colgate"
    assert rest.split() == ["find", "toothpaste"]


def test_list_phrases_are_removed() -> None:
    assert ENGLISH.strip_list_phrases("add milk to my shopping list").split() == ["add", "milk"]
    stripped = HINDI.strip_list_phrases(normalize_text("दूध मेरी लिस्ट में जोड़ो"))
    assert stripped.split() == ["दूध", normalize_text("जोड़ो")]


def test_short_form_limits() -> None:
    assert ENGLISH.is_short_form("bread")
    assert ENGLISH.is_short_form("brown bread")
    assert not ENGLISH.is_short_form("milk eggs bread")
    assert not ENGLISH.is_short_form("xyz123")
    assert HINDI.is_short_form("आलू प्याज टमाटर")
    assert not HINDI.is_short_form("आलू प्याज टमाटर दूध")
