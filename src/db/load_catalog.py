"""Load a product catalog JSON file into Postgres.

The file is expected to be a JSON object with a single top-level key `"products"` containing a list
of `{item, brand, price, currency}` objects (see `data/products.json`).

Usage:
    python -m src.db.load_catalog --path data/products.json [--truncate]
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from urllib.request import urlopen

from src.config.logging import configure_logging
from src.db.catalog_rows import iter_product_rows
from src.db.connection import connect, database_url_from_env

logger = logging.getLogger(__name__)


def _load_json_bytes(*, path: str | None, url: str | None) -> bytes:
    if bool(path) == bool(url):
        raise ValueError("Exactly one of --path or --url must be provided")

    if path:
        return Path(path).read_bytes()

    assert url is not None
    with urlopen(url) as resp:  # noqa: S310 (controlled URL from CLI)
        return resp.read()


def load_catalog(*, path: str | None, url: str | None, truncate: bool) -> int:
    """Upsert the catalog into the `products` table; returns the number of rows written."""

    database_url = database_url_from_env()

    payload = json.loads(_load_json_bytes(path=path, url=url))
    if (
            not isinstance(payload, dict)
            or "products" not in payload
            or not isinstance(payload["products"], list)
    ):
        raise ValueError(
            "Unexpected catalog format: expected object with key 'products' containing a list"
        )

    rows = list(iter_product_rows(payload["products"]))

    with connect(database_url) as conn:
        with conn.transaction():
            with conn.cursor() as cur:
                if truncate:
                    cur.execute("TRUNCATE products", prepare=False)

                cur.executemany(
                    """
                    INSERT INTO products (item, brand, price, currency)
                    VALUES (%s, %s, %s, %s) ON CONFLICT (item, brand) DO
                    UPDATE SET
                        price = EXCLUDED.price,
                        currency = EXCLUDED.currency
                    """,
                    rows,
                )

    logger.info("loaded products=%d truncate=%s", len(rows), truncate)
    return len(rows)


def main() -> None:
    """CLI entry point for loading the product catalog into Postgres."""

    parser = argparse.ArgumentParser(description="Load a product catalog into Postgres.")
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("--path", help="Path to the catalog JSON file (e.g. data/products.json).")
    src.add_argument("--url", help="URL to download the catalog JSON.")
    parser.add_argument(
        "--truncate",
        action="store_true",
        help="TRUNCATE the products table before loading (destructive).",
    )
    args = parser.parse_args()

    configure_logging()
    load_catalog(path=args.path, url=args.url, truncate=args.truncate)


if __name__ == "__main__":
    main()
