"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
equality semantics, derived totals, and dict round-trips used by the
stores.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import pytest

from grocno.core.models import DEFAULT_PRODUCTS, CartItem, Product


def _make_product(**overrides: Any) -> Product:
    defaults: dict[str, Any] = {
        "id": 4,
        "name": "Tata Salt",
        "price": Decimal("25"),
        "image": "assets/4.jpg",
    }
    defaults.update(overrides)
    return Product(**defaults)


def _make_item(**overrides: Any) -> CartItem:
    defaults: dict[str, Any] = {
        "id": 2,
        "name": "Del Monte Tomato Ketchup",
        "price": Decimal("75"),
        "img": "assets/2.jpg",
        "qty": 3,
    }
    defaults.update(overrides)
    return CartItem(**defaults)


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------

class TestProduct:
    def test_frozen(self) -> None:
        p = _make_product()
        with pytest.raises(AttributeError):
            p.price = Decimal("1")  # type: ignore[misc]

    def test_equality(self) -> None:
        assert _make_product() == _make_product()
        assert _make_product(id=1) != _make_product(id=2)

    def test_to_dict_stores_price_as_text(self) -> None:
        assert _make_product(price=Decimal("25.50")).to_dict() == {
            "id": 4,
            "name": "Tata Salt",
            "price": "25.50",
            "image": "assets/4.jpg",
        }

    def test_from_dict_accepts_numeric_price(self) -> None:
        p = Product.from_dict({"id": "7", "name": "Fortune oil", "price": 650, "image": "x.jpg"})
        assert p.id == 7
        assert p.price == Decimal("650")

    def test_round_trip(self) -> None:
        p = _make_product()
        assert Product.from_dict(p.to_dict()) == p

    def test_from_dict_missing_field(self) -> None:
        with pytest.raises(KeyError):
            Product.from_dict({"id": 1, "name": "x", "price": 1})


# ---------------------------------------------------------------------------
# CartItem
# ---------------------------------------------------------------------------

class TestCartItem:
    def test_total(self) -> None:
        assert _make_item(price=Decimal("12.50"), qty=4).total == Decimal("50.00")

    def test_qty_defaults_to_one(self) -> None:
        item = CartItem(1, "x", Decimal("1"), "x.jpg")
        assert item.qty == 1

    def test_from_dict_defaults_missing_qty(self) -> None:
        item = CartItem.from_dict({"id": 1, "name": "x", "price": "2", "img": "x.jpg"})
        assert item.qty == 1

    def test_round_trip(self) -> None:
        item = _make_item()
        assert CartItem.from_dict(item.to_dict()) == item

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            _make_item().qty = 9  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Seed catalog
# ---------------------------------------------------------------------------

class TestDefaultProducts:
    def test_nine_products_with_sequential_ids(self) -> None:
        assert [p.id for p in DEFAULT_PRODUCTS] == list(range(1, 10))

    def test_prices_are_non_negative_decimals(self) -> None:
        assert all(isinstance(p.price, Decimal) and p.price >= 0 for p in DEFAULT_PRODUCTS)

    def test_is_immutable_tuple(self) -> None:
        assert isinstance(DEFAULT_PRODUCTS, tuple)
