"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O (storage is injected).
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from grocno.core.cart import CartStore
from grocno.core.catalog import CatalogStore
from grocno.core.models import DEFAULT_PRODUCTS, CartItem, Product
from grocno.core.protocols import StorageBackend
from grocno.core.sorter import SortKey, clone_records, merge_sort, sort_by_name, sort_by_price, sort_records

__all__: list[str] = [
    "DEFAULT_PRODUCTS",
    "CartItem",
    "CartStore",
    "CatalogStore",
    "Product",
    "SortKey",
    "StorageBackend",
    "clone_records",
    "merge_sort",
    "sort_by_name",
    "sort_by_price",
    "sort_records",
]
