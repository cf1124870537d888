"""Custom exception hierarchy for grocno.

All exceptions that cross layer boundaries must inherit from
:class:`GrocnoError`.  Raw ``OSError`` / ``json`` exceptions must NEVER
propagate beyond the infrastructure layer — they are caught and
re-raised as a typed subclass defined here.

Hierarchy
---------
GrocnoError
├── SortError
│   ├── InvalidInputError
│   └── InvalidKeyError
├── ValidationError
├── ProductNotFoundError
├── CartItemNotFoundError
├── StorageError
└── EnvironmentError
"""

from __future__ import annotations


class GrocnoError(Exception):
    """Base exception for all grocno errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Sorting ---------------------------------------------------------------

class SortError(GrocnoError):
    """Base class for precondition violations detected by the sorter."""


class InvalidInputError(SortError):
    """Raised when the sorter is not given a finite, ordered sequence."""


class InvalidKeyError(SortError):
    """Raised when a record lacks the sort key or the key has the wrong shape."""


# --- Catalog / cart --------------------------------------------------------

class ValidationError(GrocnoError):
    """Raised when a product or cart field fails validation."""


class ProductNotFoundError(GrocnoError):
    """Raised when no product exists with the requested id."""


class CartItemNotFoundError(GrocnoError):
    """Raised when the cart holds no line for the requested id."""


# --- Storage ---------------------------------------------------------------

class StorageError(GrocnoError):
    """Raised when the storage backend cannot read or write a key."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(GrocnoError):
    """Raised when a required runtime dependency is not available."""
