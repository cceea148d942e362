"""Tests for the aiogram message handler reply contract.

Every incoming message must produce exactly one reply: either the formatted dispatch outcome, the
dispatcher's "not understood" notification, or a generic fallback when something fails internally.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from src.bot.handlers import handle_clear, handle_list, handle_message, handle_suggest
from src.bot.replies import FALLBACK_REPLY, HELP_TEXT
from src.dispatch.actions import ListItem, Product
from src.dispatch.dispatcher import NOT_UNDERSTOOD_MESSAGE
from src.dispatch.session import CommandSession, SessionRegistry
from src.shopping.actions import ListActions
from src.shopping.categories import get_category
from src.shopping.store import StoreError

_CHAT_ID = 7


class _FakeStore:
    """In-memory stand-in for `ShoppingStore`."""

    def __init__(self, *, fail: bool = False) -> None:
        self.items: dict[tuple[str, str], int] = {}
        self._fail = fail

    async def add_item(self, list_id: str, item: str, quantity: int) -> ListItem:
        if self._fail:
            raise StoreError("add failed: connection refused")
        key = (list_id, item)
        self.items[key] = self.items.get(key, 0) + quantity
        return ListItem(item=item, quantity=self.items[key], category=get_category(item))

    async def remove_item(self, list_id: str, item: str) -> bool:
        return self.items.pop((list_id, item), None) is not None

    async def list_items(self, list_id: str) -> list[ListItem]:
        return [
            ListItem(item=item, quantity=quantity, category=get_category(item))
            for (owner, item), quantity in sorted(self.items.items())
            if owner == list_id
        ]

    async def clear(self, list_id: str) -> int:
        keys = [k for k in self.items if k[0] == list_id]
        for key in keys:
            del self.items[key]
        return len(keys)

    async def search_products(
            self,
            query: str,
            *,
            price: float | None = None,
            brand: str | None = None,
    ) -> list[Product]:
        catalog = [
            Product(item="toothpaste", brand="Generic", price=1.99, currency="USD"),
            Product(item="colgate toothpaste", brand="Colgate", price=3.5, currency="USD"),
        ]
        return [
            p
            for p in catalog
            if query in p.item and (price is None or p.price <= price)
        ]


class _FakeMessage:
    def __init__(self, text: str | None, *, language_code: str | None = "en") -> None:
        self.text = text
        self.caption = None
        self.chat = SimpleNamespace(id=_CHAT_ID)
        self.from_user = None if language_code is None else SimpleNamespace(
            language_code=language_code
        )
        self.answers: list[str] = []

    async def answer(self, text: str) -> None:
        """Record the outgoing bot reply (aiogram's `Message.answer` substitute)."""
        self.answers.append(text)


def _make_app(store: _FakeStore, outbox: list[str]) -> Any:
    async def send(_chat_id: str, text: str) -> None:
        outbox.append(text)

    def new_session(chat_id: str) -> CommandSession:
        actions = ListActions(store, chat_id, send=send)  # type: ignore[arg-type]
        return CommandSession(actions, timeout_s=1.0)

    return SimpleNamespace(
        settings=SimpleNamespace(default_language="en-US"),
        store=store,
        sessions=SessionRegistry(new_session),
    )


async def _send(app: Any, outbox: list[str], text: str | None, **kwargs: Any) -> list[str]:
    """Handle one message and return every reply it produced (direct answers and notifications)."""

    message = _FakeMessage(text, **kwargs)
    outbox.clear()
    await handle_message(message, app)  # type: ignore[arg-type]
    return message.answers + outbox


@pytest.mark.asyncio
async def test_add_replies_once() -> None:
    outbox: list[str] = []
    app = _make_app(_FakeStore(), outbox)

    assert await _send(app, outbox, "add 2 apples") == ["Added 2 × apples"]


@pytest.mark.asyncio
async def test_repeated_adds_merge_quantities() -> None:
    outbox: list[str] = []
    store = _FakeStore()
    app = _make_app(store, outbox)

    await _send(app, outbox, "add 2 apples")
    await _send(app, outbox, "add 3 apples")

    assert store.items == {(str(_CHAT_ID), "apples"): 5}


@pytest.mark.asyncio
async def test_hindi_user_language_is_used() -> None:
    outbox: list[str] = []
    app = _make_app(_FakeStore(), outbox)

    assert await _send(app, outbox, "दो आम चाहिए", language_code="hi") == ["Added 2 × आम"]


@pytest.mark.asyncio
async def test_missing_user_falls_back_to_default_language() -> None:
    outbox: list[str] = []
    app = _make_app(_FakeStore(), outbox)

    replies = await _send(app, outbox, "remove bread", language_code=None)

    assert replies == ["bread is not on your list"]


@pytest.mark.asyncio
async def test_not_understood_is_notified_once() -> None:
    outbox: list[str] = []
    app = _make_app(_FakeStore(), outbox)

    assert await _send(app, outbox, "xyz123!!") == [NOT_UNDERSTOOD_MESSAGE]


@pytest.mark.asyncio
async def test_search_reply_lists_products() -> None:
    outbox: list[str] = []
    app = _make_app(_FakeStore(), outbox)

    replies = await _send(app, outbox, "find toothpaste under 2")

    assert len(replies) == 1
    assert replies[0].splitlines() == ["Found 1 items:", "• toothpaste (Generic) 1.99 USD"]


@pytest.mark.asyncio
async def test_store_failure_replies_with_failure_text() -> None:
    outbox: list[str] = []
    app = _make_app(_FakeStore(fail=True), outbox)

    assert await _send(app, outbox, "add milk") == ["Failed to add item"]


@pytest.mark.asyncio
async def test_empty_text_replies_with_help() -> None:
    outbox: list[str] = []
    app = _make_app(_FakeStore(), outbox)

    assert await _send(app, outbox, None) == [HELP_TEXT]
    assert await _send(app, outbox, "   ") == [HELP_TEXT]


@pytest.mark.asyncio
async def test_internal_error_replies_with_fallback() -> None:
    outbox: list[str] = []
    app = _make_app(_FakeStore(), outbox)

    def broken_get(_session_id: str) -> CommandSession:
        raise RuntimeError("boom")

    app.sessions = SimpleNamespace(get=broken_get)

    assert await _send(app, outbox, "add milk") == [FALLBACK_REPLY]


@pytest.mark.asyncio
async def test_list_and_clear_commands() -> None:
    outbox: list[str] = []
    app = _make_app(_FakeStore(), outbox)
    await _send(app, outbox, "add 2 apples")
    await _send(app, outbox, "milk")

    listed = _FakeMessage("/list")
    await handle_list(listed, app)  # type: ignore[arg-type]
    assert listed.answers == ["dairy:\n  1 × milk\nproduce:\n  2 × apples"]

    cleared = _FakeMessage("/clear")
    await handle_clear(cleared, app)  # type: ignore[arg-type]
    assert cleared.answers == ["Cleared shopping list (2 items removed)"]


@pytest.mark.asyncio
async def test_suggest_command_uses_the_current_list() -> None:
    outbox: list[str] = []
    app = _make_app(_FakeStore(), outbox)
    await _send(app, outbox, "add bread")

    message = _FakeMessage("/suggest")
    await handle_suggest(message, app)  # type: ignore[arg-type]

    assert len(message.answers) == 1
    lines = message.answers[0].splitlines()
    assert "Frequently bought: milk, eggs" in lines
    assert "Substitutes: multigrain bread instead of bread" in lines
