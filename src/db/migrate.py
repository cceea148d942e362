"""Apply SQL migrations to the configured PostgreSQL database.

Migrations are plain `.sql` files under `src/db/migrations/`, applied in lexicographic order. Each
applied filename is recorded in `schema_migrations`, so re-running the command is safe.

Usage:
    python -m src.db.migrate [--recreate] [--dry-run]
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import LiteralString, cast

import psycopg

from src.config.logging import configure_logging
from src.db.connection import connect, database_url_from_env

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"

# Dropped by --recreate, children first.
MANAGED_TABLES: tuple[str, ...] = ("shopping_items", "products", "schema_migrations")


def _ensure_schema_migrations(conn: psycopg.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS schema_migrations
        (
            filename   TEXT PRIMARY KEY,
            applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );
        """,
        prepare=False,
    )


def list_migration_files(directory: Path = MIGRATIONS_DIR) -> list[Path]:
    """Return migration files in the order they must be applied."""

    if not directory.exists():
        raise RuntimeError(f"Migrations directory does not exist: {directory}")

    files = sorted(p for p in directory.iterdir() if p.is_file() and p.suffix == ".sql")
    if not files:
        raise RuntimeError(f"No .sql migration files found in {directory}")
    return files


def pending_migrations(files: list[Path], applied: set[str]) -> list[Path]:
    """Filter out migrations that were already applied, keeping order."""

    return [p for p in files if p.name not in applied]


def _get_applied_migrations(conn: psycopg.Connection) -> set[str]:
    rows = conn.execute("SELECT filename FROM schema_migrations", prepare=False).fetchall()
    return {r[0] for r in rows}


def _apply_migration(conn: psycopg.Connection, path: Path) -> None:
    sql_text = path.read_text(encoding="utf-8")
    with conn.transaction():
        conn.execute(cast(LiteralString, sql_text), prepare=False)
        conn.execute(
            "INSERT INTO schema_migrations(filename) VALUES (%s)",
            (path.name,),
            prepare=False,
        )
    logger.info("applied migration=%s", path.name)


def migrate(*, recreate: bool, dry_run: bool = False) -> list[str]:
    """Run pending migrations against `DATABASE_URL`; returns the applied (or pending) names."""

    database_url = database_url_from_env()

    files = list_migration_files()

    with connect(database_url) as conn:
        if recreate and not dry_run:
            for table in MANAGED_TABLES:
                conn.execute(
                    cast(LiteralString, f"DROP TABLE IF EXISTS {table}"),
                    prepare=False,
                )
            logger.warning("dropped tables=%s", ",".join(MANAGED_TABLES))

        _ensure_schema_migrations(conn)
        pending = pending_migrations(files, _get_applied_migrations(conn))

        if dry_run:
            return [p.name for p in pending]

        for path in pending:
            _apply_migration(conn, path)

    return [p.name for p in pending]


def main() -> None:
    """CLI entry point for applying migrations."""

    parser = argparse.ArgumentParser(description="Apply SQL migrations to Postgres.")
    parser.add_argument(
        "--recreate",
        action="store_true",
        help="Drop the shopping tables and re-apply all migrations (destructive).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only print the migrations that would be applied.",
    )
    args = parser.parse_args()

    configure_logging()
    names = migrate(recreate=args.recreate, dry_run=args.dry_run)
    if args.dry_run:
        print("\n".join(names) or "nothing to apply")


if __name__ == "__main__":
    main()
