"""Catalog store — CRUD over the product list.

Products are persisted as one record list under :data:`PRODUCTS_KEY`
through an injected :class:`~grocno.core.protocols.StorageBackend`.
Every mutation is read-modify-write of the whole list; there is no
locking across processes.

Guarantees
----------
* Only :class:`~grocno.exceptions.GrocnoError` subclasses escape.
* An empty catalog is seeded with :data:`~grocno.core.models.DEFAULT_PRODUCTS`.
* Ordering is delegated to :func:`~grocno.core.sorter.sort_records`.
"""

from __future__ import annotations

from collections.abc import Sequence

from grocno.core.models import DEFAULT_PRODUCTS, Product
from grocno.core.protocols import StorageBackend
from grocno.core.sorter import SortKey, sort_records
from grocno.core.validation import validate_id, validate_price, validate_text
from grocno.exceptions import ProductNotFoundError, StorageError
from grocno.utils.logging import get_logger

PRODUCTS_KEY = "grocno_products"

log = get_logger(__name__)


class CatalogStore:
    """Product catalog backed by a :class:`StorageBackend`.

    Parameters
    ----------
    storage:
        Any object satisfying the :class:`StorageBackend` protocol.
    """

    def __init__(self, storage: StorageBackend) -> None:
        self._storage: StorageBackend = storage

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_products(self) -> list[Product]:
        """Return every product, seeding the defaults into an empty store.

        Unreadable storage is logged and answered with the defaults; the
        stored data is left untouched.
        """
        try:
            raw = self._storage.load(PRODUCTS_KEY)
            if raw is None:
                self.save_products(DEFAULT_PRODUCTS)
                return list(DEFAULT_PRODUCTS)
            return [Product.from_dict(entry) for entry in raw]
        except (StorageError, KeyError, TypeError, ValueError, ArithmeticError) as exc:
            log.warning("Falling back to default products: %s", exc)
            return list(DEFAULT_PRODUCTS)

    def get_product(self, product_id: int) -> Product:
        """Return the product with *product_id*.

        Raises
        ------
        ValidationError
            If *product_id* is not a positive integer.
        ProductNotFoundError
            If no product has that id.
        """
        validate_id(product_id)
        for product in self.get_products():
            if product.id == product_id:
                return product
        raise ProductNotFoundError(f"No product with id {product_id}.")

    def count(self) -> int:
        return len(self.get_products())

    def sorted_products(self, key: SortKey | str) -> list[Product]:
        """Return the catalog ordered by *key* (``price`` or ``name``)."""
        return sort_records(self.get_products(), key)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def save_products(self, products: Sequence[Product]) -> None:
        self._storage.save(PRODUCTS_KEY, [product.to_dict() for product in products])

    def add_product(self, name: str, price: object, image: str) -> Product:
        """Validate and append a new product with the next free id.

        Raises
        ------
        ValidationError
            If *name* or *image* is blank or *price* is not a
            non-negative number.
        """
        clean_name = validate_text(name, "name")
        clean_price = validate_price(price)
        clean_image = validate_text(image, "image URL")

        products = self.get_products()
        next_id = max((product.id for product in products), default=0) + 1
        product = Product(id=next_id, name=clean_name, price=clean_price, image=clean_image)

        products.append(product)
        self.save_products(products)
        log.info("Added product %d (%s)", product.id, product.name)
        return product

    def update_product(
        self,
        product_id: int,
        *,
        name: str | None = None,
        price: object = None,
        image: str | None = None,
    ) -> Product:
        """Replace the supplied fields of product *product_id*.

        Fields left as ``None`` keep their current value.  All supplied
        fields are validated before anything is written.
        """
        validate_id(product_id)
        products = self.get_products()
        index = self._index_of(products, product_id)

        current = products[index]
        updated = Product(
            id=current.id,
            name=current.name if name is None else validate_text(name, "name"),
            price=current.price if price is None else validate_price(price),
            image=current.image if image is None else validate_text(image, "image URL"),
        )

        products[index] = updated
        self.save_products(products)
        log.info("Updated product %d", product_id)
        return updated

    def delete_product(self, product_id: int) -> None:
        """Remove product *product_id* from the catalog."""
        validate_id(product_id)
        products = self.get_products()
        index = self._index_of(products, product_id)

        del products[index]
        self.save_products(products)
        log.info("Deleted product %d", product_id)

    def clear_all(self) -> None:
        """Discard the stored catalog and reseed the defaults."""
        self._storage.remove(PRODUCTS_KEY)
        self.save_products(DEFAULT_PRODUCTS)
        log.info("Catalog reset to %d default products", len(DEFAULT_PRODUCTS))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _index_of(products: list[Product], product_id: int) -> int:
        for index, product in enumerate(products):
            if product.id == product_id:
                return index
        raise ProductNotFoundError(f"No product with id {product_id}.")
