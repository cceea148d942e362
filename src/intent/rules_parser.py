"""Rules-based bilingual command parser.

This parser is intentionally small and deterministic:
    - it evaluates an ordered list of rules (search, add, remove, short form) and the first match
      wins,
    - all language-specific knowledge lives in the active `LanguageProfile`,
    - it produces a `ParsedCommand` validated by the Pydantic schema, or raises `RulesParserError`.
"""

from __future__ import annotations

import re

from src.intent.normalize import normalize_slot, normalize_text
from src.intent.numbers import resolve_number_for
from src.intent.profiles import LanguageProfile, resolve_profile
from src.intent.schema import Intent, ParsedCommand

_MULTISPACE_RE = re.compile(r"\s+")


class RulesParserError(ValueError):
    """Raised when the rules parser cannot produce a valid command."""


def _collapse(text: str) -> str:
    return _MULTISPACE_RE.sub(" ", text).strip()


def _item_command(
        intent: Intent,
        raw_item: str,
        profile: LanguageProfile,
        *,
        quantity: int = 1,
) -> ParsedCommand:
    item = normalize_slot(raw_item, profile)
    if not item:
        raise RulesParserError(f"empty item for intent={intent}")
    return ParsedCommand(intent=intent, item=item, quantity=quantity)


def _parse_search(text: str, profile: LanguageProfile) -> ParsedCommand:
    """Search: optional price ceiling and brand, the rest of the utterance is the query."""

    price, rest = profile.extract_price(text)
    brand, rest = profile.extract_brand(rest)
    query = normalize_slot(profile.search_strip_re.sub(" ", rest), profile)

    if brand is not None:
        brand = normalize_slot(brand, profile) or None

    return ParsedCommand(intent=Intent.search, query=query, price=price, brand=brand)


def _extract_add_slots(text: str, profile: LanguageProfile) -> tuple[str, int]:
    """Split an add utterance into `(item phrase, quantity)`.

    The first token resolving to a number is the quantity. Every later token, numeric or not, is
    part of the item phrase ("2 बिस्कुट 50 ग्राम" -> quantity 2, item "बिस्कुट 50"). Trigger
    phrases and filler words are dropped. Without any item token the utterance's final token is
    used as the item.
    """

    quantity: int | None = None
    item_tokens: list[str] = []

    for token in profile.add_re.sub(" ", text).split():
        cleaned = profile.token_strip_re.sub("", token).strip(".")
        if not cleaned:
            continue

        if quantity is None:
            number = resolve_number_for(cleaned, profile)
            if number is not None:
                # A quantity is always a positive integer; "0" or "0.5" still means one.
                quantity = max(number, 1)
                continue

        if profile.is_filler(cleaned):
            continue
        item_tokens.append(token)

    item = " ".join(item_tokens) or text.split()[-1]
    return item, quantity or 1


def _extract_remove_item(text: str, match: re.Match[str], profile: LanguageProfile) -> str:
    """Take the remainder after the trigger; fall back to the text before it (verb-final order)."""

    remainder = text[match.end():].strip() or text[: match.start()].strip()
    tokens = [
        token
        for token in remainder.split()
        if not profile.is_filler(profile.token_strip_re.sub("", token))
    ]
    return " ".join(tokens)


def parse_command(text: str, language_tag: str | None) -> ParsedCommand:
    """Parse an utterance into a validated ParsedCommand.

    Raises:
        RulesParserError: If no rule matches or a matched rule yields an empty item.
    """

    profile = resolve_profile(language_tag)

    normalized = _collapse(profile.strip_list_phrases(normalize_text(text)))
    if not normalized:
        raise RulesParserError("empty input")

    if profile.match_search(normalized):
        return _parse_search(normalized, profile)

    if profile.match_add(normalized):
        item, quantity = _extract_add_slots(normalized, profile)
        return _item_command(Intent.add_item, item, profile, quantity=quantity)

    match = profile.match_remove(normalized)
    if match:
        item = _extract_remove_item(normalized, match, profile)
        return _item_command(Intent.remove_item, item, profile)

    if profile.is_short_form(normalized):
        return _item_command(Intent.add_item, normalized, profile)

    raise RulesParserError("unsupported command")
