"""Safe DB query helpers.

These helpers are used by the shopping store. They never interpolate user values into SQL; all
values are passed as bound parameters.
"""

from __future__ import annotations

from typing import Any, LiteralString, cast

from psycopg import AsyncConnection


async def fetch_all(
        conn: AsyncConnection,
        sql: str,
        params: tuple[Any, ...] = (),
) -> list[tuple[Any, ...]]:
    """Execute a query and return every row (DB errors are not swallowed)."""

    async with conn.cursor() as cur:
        await cur.execute(cast(LiteralString, sql), params)
        return list(await cur.fetchall())


async def fetch_one(
        conn: AsyncConnection,
        sql: str,
        params: tuple[Any, ...] = (),
) -> tuple[Any, ...] | None:
    """Execute a query and return its first row, or `None` if it yields no rows."""

    async with conn.cursor() as cur:
        await cur.execute(cast(LiteralString, sql), params)
        return await cur.fetchone()


async def execute_rowcount(conn: AsyncConnection, sql: str, params: tuple[Any, ...] = ()) -> int:
    """Execute a statement and return the number of affected rows."""

    async with conn.cursor() as cur:
        await cur.execute(cast(LiteralString, sql), params)
        return max(cur.rowcount, 0)
