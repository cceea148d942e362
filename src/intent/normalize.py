"""Text normalization for deterministic command parsing."""

from __future__ import annotations

import re
import unicodedata

from src.intent.profiles import LanguageProfile

_MULTISPACE_RE = re.compile(r"\s+")


def normalize_text(text: str | None) -> str:
    """Normalize a raw utterance before rule matching.

    Normalization is intentionally conservative:
        - Unicode NFC (so nukta letters compare equal however they were composed).
        - Lowercase.
        - Unify typographic apostrophes and dashes.
        - Collapse whitespace.

    Punctuation is kept: prices ("2.50") and currency markers ("$5") are matched on this text.
    """

    value = unicodedata.normalize("NFC", text or "").strip().lower()

    value = value.replace("’", "'").replace("‘", "'")
    value = value.replace("—", "-").replace("–", "-")

    return _MULTISPACE_RE.sub(" ", value).strip()


def normalize_slot(text: str | None, profile: LanguageProfile) -> str:
    """Clean an extracted item/query string.

    Steps: lowercase, strip one trailing period, drop characters outside the profile's item charset
    (letters, digits, space, hyphen), collapse whitespace, strip leading particles ("की", "of").

    Normalizing an already normalized value is a no-op, and an empty value stays empty.
    """

    value = unicodedata.normalize("NFC", text or "").strip().lower()
    value = value.removesuffix(".")
    value = profile.item_strip_re.sub("", value)
    value = _MULTISPACE_RE.sub(" ", value).strip()
    value = profile.strip_particles(value)
    return value.strip()
