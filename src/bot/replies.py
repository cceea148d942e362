"""User-facing reply texts.

Replies are plain text (the bot runs without a parse mode). Every function here is pure so the
wording can be tested without Telegram.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby

from src.dispatch.actions import ListItem, Product
from src.dispatch.session import TIMED_OUT, DispatchOutcome
from src.intent.schema import Intent
from src.shopping.categories import substitute_for

HELP_TEXT = (
    "Tell me what to do with your shopping list, in English or Hindi:\n"
    '• "add 2 apples" / "दो आम चाहिए"\n'
    '• "remove bread" / "ब्रेड हटाओ"\n'
    '• "find toothpaste under 5" / "टूथपेस्ट खोजो"\n'
    "Commands: /list, /clear, /suggest"
)

FALLBACK_REPLY = "Something went wrong, please try again."
TIMEOUT_REPLY = "This is taking longer than usual. Check /list in a moment."

_FAILURE_REPLIES: dict[Intent, str] = {
    Intent.add_item: "Failed to add item",
    Intent.remove_item: "Failed to remove item",
    Intent.search: "Search failed",
    Intent.unknown: FALLBACK_REPLY,
}


def _format_price(product: Product) -> str:
    return f"{product.price:.2f} {product.currency}"


def format_added(added: ListItem) -> str:
    text = f"Added {added.quantity} × {added.item}"
    substitute = substitute_for(added.item)
    if substitute:
        text += f"\nTip: you could also try {substitute}."
    return text


def format_search(products: Sequence[Product]) -> str:
    if not products:
        return "No items found"
    lines = [f"Found {len(products)} items:"]
    lines.extend(f"• {p.item} ({p.brand}) {_format_price(p)}" for p in products)
    return "\n".join(lines)


def format_list(items: Sequence[ListItem]) -> str:
    if not items:
        return 'Your list is empty. Try "add 2 apples".'

    lines: list[str] = []
    ordered = sorted(items, key=lambda i: (i.category, i.item))
    for category, group in groupby(ordered, key=lambda i: i.category):
        lines.append(f"{category}:")
        lines.extend(f"  {i.quantity} × {i.item}" for i in group)
    return "\n".join(lines)


def format_suggestions(groups: dict[str, list[str]]) -> str:
    if not groups:
        return "No suggestions right now."
    return "\n".join(f"{kind.capitalize()}: {', '.join(items)}" for kind, items in groups.items())


def format_outcome(outcome: DispatchOutcome) -> str | None:
    """Reply for a handled utterance, or `None` when feedback was already sent via `notify`."""

    command = outcome.command
    if outcome.error == TIMED_OUT:
        return TIMEOUT_REPLY
    if not outcome.ok or outcome.result is None:
        return _FAILURE_REPLIES[command.intent]

    value = outcome.result.value
    if command.intent == Intent.add_item and isinstance(value, ListItem):
        return format_added(value)
    if command.intent == Intent.remove_item:
        if value:
            return f"Removed {command.item}"
        return f"{command.item} is not on your list"
    if command.intent == Intent.search and isinstance(value, list):
        return format_search(value)
    return None
