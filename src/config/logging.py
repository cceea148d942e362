"""Logging configuration for the bot and CLI tools."""

from __future__ import annotations

import logging
import os

# Per-update and per-connection chatter; warnings from these still get through.
_QUIET_LOGGERS = ("aiogram.event", "psycopg.pool")


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from `level` or the `LOG_LEVEL` environment variable.

    Messages use `key=value` fields. Utterance text is only emitted at DEBUG, so INFO logs carry
    intents, languages and chat ids but never what the user typed.
    """

    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL") or "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
