"""Catalog-to-row conversion helpers.

Both the catalog loader and the integration tests convert a parsed catalog payload (`products`)
into row tuples for the `products` table. Keeping the conversion in one place prevents drift between
loader behavior and test fixtures.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

DEFAULT_CURRENCY = "USD"


def iter_product_rows(products: Sequence[dict[str, Any]]) -> Iterable[tuple[Any, ...]]:
    """Yield `(item, brand, price, currency)` tuples for inserting into `products`.

    Item names are stored lowercased, the same way list items are normalized. Negative prices are
    rejected.
    """

    for product in products:
        price = float(product["price"])
        if price < 0:
            raise ValueError(f"negative price for product {product.get('item')!r}")
        yield (
            str(product["item"]).strip().lower(),
            str(product.get("brand") or "Generic").strip(),
            price,
            str(product.get("currency") or DEFAULT_CURRENCY).strip().upper(),
        )
