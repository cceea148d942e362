"""Application composition root.

This module wires together configuration, the DB pool, the shopping store and per-chat command
sessions for the bot runtime.
"""

from __future__ import annotations

from dataclasses import dataclass

from psycopg_pool import AsyncConnectionPool

from src.config.settings import Settings
from src.db.pool import create_pool
from src.dispatch.session import CommandSession, SessionRegistry
from src.shopping.actions import ListActions, Send
from src.shopping.store import ShoppingStore


@dataclass(frozen=True)
class App:
    """Shared application dependencies for handlers."""

    settings: Settings
    pool: AsyncConnectionPool
    store: ShoppingStore
    sessions: SessionRegistry


def create_app(settings: Settings, *, send: Send) -> App:
    """Create the application container.

    `send(chat_id, text)` delivers feedback messages (the bot passes `Bot.send_message`).

    Note:
        The returned DB pool is not opened. Call `await app.pool.open()` at startup.
    """

    pool = create_pool(settings.database_url, max_size=10)
    store = ShoppingStore(pool, search_limit=settings.search_limit)

    def new_session(chat_id: str) -> CommandSession:
        return CommandSession(
            ListActions(store, chat_id, send=send),
            timeout_s=settings.dispatch_timeout_s,
        )

    return App(settings=settings, pool=pool, store=store, sessions=SessionRegistry(new_session))
