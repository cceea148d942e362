"""Async Postgres pool used by the shopping store."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from src.db.connection import APPLICATION_NAME, database_url_from_env


def create_pool(
        database_url: str | None = None,
        *,
        min_size: int = 1,
        max_size: int | None = None,
        timeout: float = 30.0,
) -> AsyncConnectionPool:
    """Create a closed pool; the caller opens it with `await pool.open()` at startup.

    Connections are health-checked on checkout, since a chat can stay idle for hours between
    commands. Without `database_url` the URL is read from the environment.
    """

    return AsyncConnectionPool(
        conninfo=database_url or database_url_from_env(),
        min_size=min_size,
        max_size=max_size,
        timeout=timeout,
        kwargs={"application_name": APPLICATION_NAME},
        check=AsyncConnectionPool.check_connection,
        name="shopping",
        open=False,
    )


@asynccontextmanager
async def get_conn(pool: AsyncConnectionPool) -> AsyncIterator[AsyncConnection]:
    """Borrow a connection; its transaction commits on normal exit and rolls back on error."""

    async with pool.connection() as conn:
        yield conn
