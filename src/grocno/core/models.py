"""Domain models for grocno.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and (de)serialisation to plain dicts.
They carry zero I/O and zero dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


# ---------------------------------------------------------------------------
# Catalog entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Product:
    """A single catalog entry."""

    id: int
    """Positive identifier assigned by the catalog store."""

    name: str
    """Display name, already trimmed."""

    price: Decimal
    """Non-negative unit price."""

    image: str
    """Image path or URL."""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable mapping (price as a string)."""
        return {
            "id": self.id,
            "name": self.name,
            "price": str(self.price),
            "image": self.image,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Product:
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            price=Decimal(str(data["price"])),
            image=str(data["image"]),
        )


# ---------------------------------------------------------------------------
# Cart line item
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CartItem:
    """One line of the shopping cart.

    ``id`` is the id of the product the line was created from, so a
    product appears at most once in the cart.
    """

    id: int
    name: str
    price: Decimal
    img: str
    qty: int = 1

    @property
    def total(self) -> Decimal:
        """Line total: ``price * qty``."""
        return self.price * self.qty

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "price": str(self.price),
            "img": self.img,
            "qty": self.qty,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CartItem:
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            price=Decimal(str(data["price"])),
            img=str(data["img"]),
            qty=int(data.get("qty") or 1),
        )


# ---------------------------------------------------------------------------
# Seed catalog
# ---------------------------------------------------------------------------

DEFAULT_PRODUCTS: tuple[Product, ...] = (
    Product(1, "Kissan Fresh Tomato Ketchup", Decimal("215"), "assets/1.jpg"),
    Product(2, "Del Monte Tomato Ketchup", Decimal("75"), "assets/2.jpg"),
    Product(3, "Veeba Truly Tomato Ketchup", Decimal("140"), "assets/3.jpg"),
    Product(4, "Tata Salt", Decimal("25"), "assets/4.jpg"),
    Product(5, "Aashirvaad Iodized Salt", Decimal("30"), "assets/5.jpg"),
    Product(6, "Aashirvaad Himalayan Pink Salt", Decimal("106"), "assets/6.jpg"),
    Product(7, "Fortune oil", Decimal("650"), "assets/7.jpg"),
    Product(8, "Amami oil", Decimal("208"), "assets/8.jpg"),
    Product(9, "Saffola oil", Decimal("1072"), "assets/9.jpg"),
)
"""Products seeded into an empty catalog."""
