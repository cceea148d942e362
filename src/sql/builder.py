"""Deterministic SQL builder.

The builder converts shopping-list and catalog operations into parameterized SQL queries. Table and
column names are fixed in this module; only values become bound parameters. User text used in
`ILIKE` patterns is escaped so `%` and `_` are matched literally.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

MAX_SEARCH_LIMIT = 50


class SQLBuilderError(ValueError):
    """Raised when an operation cannot be converted into deterministic SQL."""


@dataclass(frozen=True)
class BuiltQuery:
    """A parameterized SQL query ready for execution."""

    sql: str
    params: tuple[Any, ...]


def _where_and(clauses: list[str]) -> str:
    if not clauses:
        return ""
    return "WHERE " + " AND ".join(clauses)


def _like_contains(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _require_text(name: str, value: str) -> str:
    value = (value or "").strip()
    if not value:
        raise SQLBuilderError(f"{name} must be a non-empty string")
    return value


def build_add_item(list_id: str, item: str, quantity: int, category: str) -> BuiltQuery:
    """Insert an item or merge its quantity into the existing row."""

    if quantity < 1:
        raise SQLBuilderError("quantity must be a positive integer")

    sql = (
        "INSERT INTO shopping_items (list_id, item, quantity, category)"
        " VALUES (%s, %s, %s, %s)"
        " ON CONFLICT (list_id, item) DO UPDATE SET"
        " quantity = shopping_items.quantity + EXCLUDED.quantity,"
        " updated_at = NOW()"
        " RETURNING item, quantity, category"
    )
    params = (
        _require_text("list_id", list_id),
        _require_text("item", item),
        quantity,
        _require_text("category", category),
    )
    return BuiltQuery(sql=sql, params=params)


def build_remove_item(list_id: str, item: str) -> BuiltQuery:
    sql = "DELETE FROM shopping_items WHERE list_id = %s AND item = %s RETURNING item"
    return BuiltQuery(
        sql=sql,
        params=(_require_text("list_id", list_id), _require_text("item", item)),
    )


def build_list_items(list_id: str) -> BuiltQuery:
    sql = (
        "SELECT item, quantity, category FROM shopping_items"
        " WHERE list_id = %s ORDER BY category, item"
    )
    return BuiltQuery(sql=sql, params=(_require_text("list_id", list_id),))


def build_clear_list(list_id: str) -> BuiltQuery:
    sql = "DELETE FROM shopping_items WHERE list_id = %s"
    return BuiltQuery(sql=sql, params=(_require_text("list_id", list_id),))


def build_search_products(
        query: str,
        *,
        price: float | None = None,
        brand: str | None = None,
        limit: int = 5,
) -> BuiltQuery:
    """Build a catalog search, cheapest first.

    The query matches item or brand as a case-insensitive substring; an empty query matches every
    product. `price` is an inclusive ceiling.
    """

    if limit < 1 or limit > MAX_SEARCH_LIMIT:
        raise SQLBuilderError(f"limit must be between 1 and {MAX_SEARCH_LIMIT}")
    if price is not None and price < 0:
        raise SQLBuilderError("price must be non-negative")

    clauses: list[str] = []
    params: list[Any] = []

    query = (query or "").strip()
    if query:
        clauses.append("(p.item ILIKE %s OR p.brand ILIKE %s)")
        params.extend([_like_contains(query), _like_contains(query)])

    if brand:
        clauses.append("p.brand ILIKE %s")
        params.append(_like_contains(brand.strip()))

    if price is not None:
        clauses.append("p.price <= %s")
        params.append(price)

    sql = (
        f"SELECT p.item, p.brand, p.price, p.currency FROM products p {_where_and(clauses)}"
        " ORDER BY p.price ASC, p.item ASC LIMIT %s"
    )
    params.append(limit)
    return BuiltQuery(sql=" ".join(sql.split()), params=tuple(params))
