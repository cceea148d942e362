"""Tests for catalog-to-row conversion."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.db.catalog_rows import iter_product_rows


def test_rows_are_normalized() -> None:
    rows = list(
        iter_product_rows(
            [
                {"item": " Almond Milk ", "brand": "NutAlly", "price": "4", "currency": "usd"},
                {"item": "watermelon", "price": 5},
            ]
        )
    )
    assert rows == [
        ("almond milk", "NutAlly", 4.0, "USD"),
        ("watermelon", "Generic", 5.0, "USD"),
    ]


def test_negative_price_is_rejected() -> None:
    with pytest.raises(ValueError):
        list(iter_product_rows([{"item": "soap", "price": -1}]))


def test_sample_catalog_converts() -> None:
    path = Path(__file__).resolve().parents[1] / "data" / "products.json"
    payload = json.loads(path.read_text(encoding="utf-8"))

    rows = list(iter_product_rows(payload["products"]))

    assert len(rows) == len(payload["products"])
    assert all(price >= 0 for _item, _brand, price, _currency in rows)
