"""Collaborator contracts consumed by the dispatcher.

The dispatcher only knows this protocol. The list storage, product catalog and user feedback channel
behind it are provided by the outer layers (see `src.shopping.actions`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ListItem:
    """One shopping list entry after an add."""

    item: str
    quantity: int
    category: str


@dataclass(frozen=True)
class Product:
    """One catalog search hit."""

    item: str
    brand: str
    price: float
    currency: str


ActionValue = ListItem | bool | list[Product] | None


class ShoppingActions(Protocol):
    """Asynchronous, fallible side effects a command can trigger."""

    async def add_item(self, name: str, quantity: int) -> ListItem:
        """Add `quantity` units of `name`; repeated adds merge quantities."""
        ...

    async def remove_item(self, name: str) -> bool:
        """Remove `name`; returns whether anything was removed."""
        ...

    async def search_items(
            self,
            query: str,
            price: float | None = None,
            brand: str | None = None,
    ) -> list[Product]:
        """Search the catalog, cheapest first."""
        ...

    async def notify(self, message: str) -> None:
        """Send user feedback; the return value is never consumed."""
        ...
