"""Cart store — line items keyed by product id.

Same persistence model as :mod:`grocno.core.catalog`: a single record
list under :data:`CART_KEY`, rewritten on every change.  Line items are
kept in insertion order and are never sorted.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from grocno.core.models import CartItem, Product
from grocno.core.protocols import StorageBackend
from grocno.core.validation import validate_id, validate_price, validate_quantity, validate_text
from grocno.exceptions import CartItemNotFoundError, StorageError
from grocno.utils.logging import get_logger

CART_KEY = "grocno_cart"

log = get_logger(__name__)


class CartStore:
    """Shopping cart backed by a :class:`StorageBackend`."""

    def __init__(self, storage: StorageBackend) -> None:
        self._storage: StorageBackend = storage

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_items(self) -> list[CartItem]:
        """Return the cart lines; an unreadable cart reads as empty."""
        try:
            raw = self._storage.load(CART_KEY)
            if raw is None:
                return []
            return [CartItem.from_dict(entry) for entry in raw]
        except (StorageError, KeyError, TypeError, ValueError, ArithmeticError) as exc:
            log.warning("Ignoring unreadable cart: %s", exc)
            return []

    def item_count(self) -> int:
        """Total number of units across all lines."""
        return sum(item.qty for item in self.get_items())

    def total(self) -> Decimal:
        return sum((item.total for item in self.get_items()), Decimal("0"))

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def save_items(self, items: Sequence[CartItem]) -> None:
        self._storage.save(CART_KEY, [item.to_dict() for item in items])

    def add(self, product: Product) -> CartItem:
        """Add one unit of *product*, creating the line if needed.

        Raises
        ------
        ValidationError
            If the product carries an invalid id, name, price or image.
        """
        product_id = validate_id(product.id)
        name = validate_text(product.name, "name")
        price = validate_price(product.price)
        img = validate_text(product.image, "image URL")

        items = self.get_items()
        for index, item in enumerate(items):
            if item.id == product_id:
                line = CartItem(item.id, item.name, item.price, item.img, item.qty + 1)
                items[index] = line
                break
        else:
            line = CartItem(product_id, name, price, img, 1)
            items.append(line)

        self.save_items(items)
        log.info("Cart line %d now has qty %d", line.id, line.qty)
        return line

    def remove(self, product_id: int) -> None:
        """Drop the line for *product_id*.

        Raises
        ------
        CartItemNotFoundError
            If the cart has no such line.
        """
        validate_id(product_id)
        items = self.get_items()
        remaining = [item for item in items if item.id != product_id]
        if len(remaining) == len(items):
            raise CartItemNotFoundError(f"Product {product_id} is not in the cart.")

        self.save_items(remaining)
        log.info("Removed cart line %d", product_id)

    def update_quantity(self, product_id: int, qty: object) -> CartItem | None:
        """Set the quantity of a line.

        A quantity below 1 removes the line and returns ``None``.
        """
        validate_id(product_id)
        quantity = validate_quantity(qty)
        if quantity < 1:
            self.remove(product_id)
            return None

        items = self.get_items()
        for index, item in enumerate(items):
            if item.id == product_id:
                line = CartItem(item.id, item.name, item.price, item.img, quantity)
                items[index] = line
                self.save_items(items)
                log.info("Cart line %d now has qty %d", product_id, quantity)
                return line
        raise CartItemNotFoundError(f"Product {product_id} is not in the cart.")

    def clear(self) -> None:
        self._storage.remove(CART_KEY)
        log.info("Cart cleared")

    def checkout(self) -> Decimal:
        """Empty the cart and return the amount that was due."""
        amount = self.total()
        self.clear()
        log.info("Checked out cart totalling %s", amount)
        return amount
