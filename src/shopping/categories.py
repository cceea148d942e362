"""Keyword-based item categories and substitute suggestions.

Categories are assigned when an item is first added to a list. Matching is a plain keyword search on
the normalized item name; the first category whose keywords match wins.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

DEFAULT_CATEGORY = "other"

CATEGORY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "dairy": (
        "milk",
        "cheese",
        "butter",
        "yogurt",
        "curd",
        "ghee",
        "paneer",
        "दूध",
        "दही",
        "पनीर",
        "घी",
        "मक्खन",
    ),
    "produce": (
        "apple",
        "banana",
        "mango",
        "orange",
        "watermelon",
        "corn",
        "tomato",
        "onion",
        "potato",
        "lettuce",
        "spinach",
        "सेब",
        "केला",
        "केले",
        "आम",
        "संतरा",
        "टमाटर",
        "प्याज",
        "आलू",
        "पालक",
    ),
    "snacks": ("chips", "cookies", "chocolate", "snack", "soda", "biscuit", "बिस्कुट", "नमकीन"),
    "household": ("toothpaste", "soap", "shampoo", "detergent", "टूथपेस्ट", "साबुन", "शैम्पू"),
    "grains": ("rice", "wheat", "bread", "pasta", "flour", "atta", "चावल", "गेहूं", "ब्रेड", "आटा"),
}

SUBSTITUTES: dict[str, str] = {
    "milk": "almond milk",
    "bread": "multigrain bread",
    "butter": "ghee",
    "sugar": "jaggery",
    "eggs": "plant-based egg substitute",
}

_CATEGORY_RES: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (category, re.compile("|".join(re.escape(k) for k in keywords)))
    for category, keywords in CATEGORY_KEYWORDS.items()
)


def get_category(item: str) -> str:
    """Return the category for an item name ("almond milk" -> "dairy")."""

    value = (item or "").lower()
    for category, pattern in _CATEGORY_RES:
        if pattern.search(value):
            return category
    return DEFAULT_CATEGORY


def substitute_for(item: str) -> str | None:
    """Return a suggested substitute for an item, if one is known."""

    return SUBSTITUTES.get((item or "").strip().lower())


SUGGESTED_ITEMS: dict[str, tuple[str, ...]] = {
    "frequently bought": ("milk", "bread", "eggs"),
    "in season": ("mangoes", "watermelon", "corn"),
    "on sale": ("toothpaste", "chips"),
}


def suggest(on_list: Iterable[str]) -> dict[str, list[str]]:
    """Group suggestions by kind for a list that already holds `on_list`.

    Items already on the list are not suggested again. Listed items with a known substitute get a
    "substitutes" entry. Empty groups are omitted.
    """

    present = {(item or "").strip().lower() for item in on_list}
    groups = {
        kind: [item for item in items if item not in present]
        for kind, items in SUGGESTED_ITEMS.items()
    }
    groups["substitutes"] = [
        f"{SUBSTITUTES[item]} instead of {item}" for item in sorted(present) if item in SUBSTITUTES
    ]
    return {kind: items for kind, items in groups.items() if items}
