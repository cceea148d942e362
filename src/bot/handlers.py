"""aiogram message handlers.

Contract: every incoming text message produces exactly one reply. Understood commands are answered
from their dispatch outcome; not-understood utterances are answered by the dispatcher's `notify`
call. On any internal error the user gets a generic fallback reply and the error is logged.
"""

from __future__ import annotations

import logging
from time import monotonic

from aiogram.types import Message

from src.app import App
from src.bot.replies import (
    FALLBACK_REPLY,
    HELP_TEXT,
    format_list,
    format_outcome,
    format_suggestions,
)
from src.shopping.categories import suggest

logger = logging.getLogger(__name__)


def _language_of(message: Message, default: str) -> str:
    user = message.from_user
    code = getattr(user, "language_code", None) if user is not None else None
    return code or default


def _chat_key(message: Message) -> str:
    return str(message.chat.id)


async def handle_start(message: Message) -> None:
    await message.answer(HELP_TEXT)


async def handle_list(message: Message, app: App) -> None:
    """Reply with the chat's shopping list grouped by category."""

    # noinspection PyBroadException
    try:
        items = await app.store.list_items(_chat_key(message))
        reply = format_list(items)
    except Exception:
        logger.exception("list failed")
        reply = FALLBACK_REPLY
    await message.answer(reply)


async def handle_clear(message: Message, app: App) -> None:
    # noinspection PyBroadException
    try:
        removed = await app.store.clear(_chat_key(message))
        reply = f"Cleared shopping list ({removed} items removed)"
    except Exception:
        logger.exception("clear failed")
        reply = FALLBACK_REPLY
    await message.answer(reply)


async def handle_suggest(message: Message, app: App) -> None:
    """Reply with item suggestions for the chat's current list."""

    # noinspection PyBroadException
    try:
        items = await app.store.list_items(_chat_key(message))
        reply = format_suggestions(suggest(i.item for i in items))
    except Exception:
        logger.exception("suggest failed")
        reply = FALLBACK_REPLY
    await message.answer(reply)


async def handle_message(message: Message, app: App) -> None:
    """Interpret a text message and dispatch it on the chat's command session."""

    started = monotonic()
    reply: str | None = FALLBACK_REPLY

    raw_text = message.text or message.caption or ""
    if not raw_text.strip():
        await message.answer(HELP_TEXT)
        return

    # noinspection PyBroadException
    try:
        language_tag = _language_of(message, app.settings.default_language)
        session = app.sessions.get(_chat_key(message))
        outcome = await session.handle(raw_text, language_tag)
        reply = format_outcome(outcome)

        latency_ms = int((monotonic() - started) * 1000)
        logger.info(
            "handled intent=%s lang=%s ok=%s latency_ms=%d",
            outcome.command.intent,
            language_tag,
            outcome.ok,
            latency_ms,
        )
        logger.debug("utterance text=%r", raw_text)
    except Exception:
        # Handler boundary: any internal error must still produce a reply, without leaking details.
        logger.exception("handler failed")

    if reply is not None:
        await message.answer(reply)
