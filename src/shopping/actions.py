"""`ShoppingActions` bound to one shopping list.

Adapts the list-scoped `ShoppingStore` and a message sender to the collaborator protocol the
dispatcher consumes.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from src.dispatch.actions import ListItem, Product
from src.shopping.store import ShoppingStore

logger = logging.getLogger(__name__)

Send = Callable[[str, str], Awaitable[Any]]


class ListActions:
    """Shopping actions for a single list, with feedback sent to the list's owner."""

    def __init__(self, store: ShoppingStore, list_id: str, *, send: Send) -> None:
        self._store = store
        self._list_id = list_id
        self._send = send

    @property
    def list_id(self) -> str:
        return self._list_id

    async def add_item(self, name: str, quantity: int) -> ListItem:
        return await self._store.add_item(self._list_id, name, quantity)

    async def remove_item(self, name: str) -> bool:
        return await self._store.remove_item(self._list_id, name)

    async def search_items(
            self,
            query: str,
            price: float | None = None,
            brand: str | None = None,
    ) -> list[Product]:
        return await self._store.search_products(query, price=price, brand=brand)

    async def notify(self, message: str) -> None:
        """Send feedback to the list owner; delivery failures are logged, not raised."""

        try:
            await self._send(self._list_id, message)
        except Exception:  # noqa: BLE001 - feedback is fire-and-forget
            logger.exception("notify failed list_id=%s", self._list_id)
