"""Postgres-backed shopping lists and product catalog.

Each list is identified by an opaque `list_id` (the bot uses the Telegram chat id). Item names are
expected to be normalized already; the store only lowercases and trims them.
"""

from __future__ import annotations

import logging

import psycopg
from psycopg_pool import AsyncConnectionPool

from src.db.pool import get_conn
from src.db.query import execute_rowcount, fetch_all, fetch_one
from src.dispatch.actions import ListItem, Product
from src.shopping.categories import get_category
from src.sql.builder import (
    SQLBuilderError,
    build_add_item,
    build_clear_list,
    build_list_items,
    build_remove_item,
    build_search_products,
)

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """Raised when a list or catalog operation fails."""


def _key(item: str) -> str:
    return (item or "").strip().lower()


class ShoppingStore:
    """List and catalog operations over an async connection pool."""

    def __init__(self, pool: AsyncConnectionPool, *, search_limit: int = 5) -> None:
        self._pool = pool
        self._search_limit = search_limit

    async def add_item(self, list_id: str, item: str, quantity: int) -> ListItem:
        """Add an item, merging the quantity into an existing entry with the same name."""

        name = _key(item)
        try:
            built = build_add_item(list_id, name, quantity, get_category(name))
            async with get_conn(self._pool) as conn:
                row = await fetch_one(conn, built.sql, built.params)
        except (SQLBuilderError, psycopg.Error) as exc:
            raise StoreError(f"add failed: {exc}") from exc

        if row is None:
            raise StoreError("add returned no row")
        logger.info("item added list_id=%s quantity=%d total=%d", list_id, quantity, row[1])
        return ListItem(item=row[0], quantity=int(row[1]), category=row[2])

    async def remove_item(self, list_id: str, item: str) -> bool:
        """Remove an item; returns whether the item was on the list."""

        try:
            built = build_remove_item(list_id, _key(item))
            async with get_conn(self._pool) as conn:
                row = await fetch_one(conn, built.sql, built.params)
        except (SQLBuilderError, psycopg.Error) as exc:
            raise StoreError(f"remove failed: {exc}") from exc

        return row is not None

    async def list_items(self, list_id: str) -> list[ListItem]:
        try:
            built = build_list_items(list_id)
            async with get_conn(self._pool) as conn:
                rows = await fetch_all(conn, built.sql, built.params)
        except (SQLBuilderError, psycopg.Error) as exc:
            raise StoreError(f"list failed: {exc}") from exc

        return [ListItem(item=r[0], quantity=int(r[1]), category=r[2]) for r in rows]

    async def clear(self, list_id: str) -> int:
        """Remove every item from the list; returns how many were removed."""

        try:
            built = build_clear_list(list_id)
            async with get_conn(self._pool) as conn:
                return await execute_rowcount(conn, built.sql, built.params)
        except (SQLBuilderError, psycopg.Error) as exc:
            raise StoreError(f"clear failed: {exc}") from exc

    async def search_products(
            self,
            query: str,
            *,
            price: float | None = None,
            brand: str | None = None,
    ) -> list[Product]:
        """Search the catalog by item/brand substring, cheapest first."""

        try:
            built = build_search_products(
                query,
                price=price,
                brand=brand,
                limit=self._search_limit,
            )
            async with get_conn(self._pool) as conn:
                rows = await fetch_all(conn, built.sql, built.params)
        except (SQLBuilderError, psycopg.Error) as exc:
            raise StoreError(f"search failed: {exc}") from exc

        return [
            Product(item=r[0], brand=r[1], price=float(r[2]), currency=r[3]) for r in rows
        ]
