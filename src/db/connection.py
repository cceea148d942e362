"""Postgres connection settings shared by the bot and the CLI tools."""

from __future__ import annotations

import os

import psycopg
from dotenv import load_dotenv

APPLICATION_NAME = "shopping-command-bot"


def database_url_from_env() -> str:
    """Return `DATABASE_URL`, loading a local `.env` first.

    Raises:
        RuntimeError: If the variable is missing or empty.
    """

    load_dotenv(".env")
    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        raise RuntimeError("DATABASE_URL is required (set it in .env or environment)")
    return database_url


def connect(database_url: str) -> psycopg.Connection:
    """Open a synchronous connection for migrations and catalog loading."""

    return psycopg.connect(database_url, application_name=f"{APPLICATION_NAME}-cli")
