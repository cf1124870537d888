"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Any, Protocol


class StorageBackend(Protocol):
    """Contract for key → record-list persistence backends.

    Mirrors a browser ``localStorage`` holding one JSON array per key.
    Any object that implements these three methods satisfies the
    protocol structurally (no explicit inheritance required).
    """

    def load(self, key: str) -> list[dict[str, Any]] | None:
        """Return the records stored under *key*, or ``None`` if absent.

        Raises
        ------
        StorageError
            When the stored payload cannot be read or is not a list of
            objects.
        """
        ...  # pragma: no cover

    def save(self, key: str, records: list[dict[str, Any]]) -> None:
        """Replace the records stored under *key*.

        Raises
        ------
        StorageError
            When the payload cannot be written.
        """
        ...  # pragma: no cover

    def remove(self, key: str) -> None:
        """Delete *key*; a missing key is not an error."""
        ...  # pragma: no cover
