"""JSON-file implementation of :class:`~grocno.core.protocols.StorageBackend`.

Each key is stored as ``<directory>/<key>.json`` holding a JSON array of
objects.  This module is the **only** place that touches the
filesystem; every ``OSError`` and JSON decoding error is re-raised as
:class:`~grocno.exceptions.StorageError`.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from grocno.exceptions import StorageError


class JsonFileStorage:
    """Concrete :class:`StorageBackend` keeping one JSON file per key.

    Usage::

        storage = JsonFileStorage(Path("~/.grocno").expanduser())
        storage.save("grocno_cart", [{"id": 1, "qty": 2}])
        storage.load("grocno_cart")
    """

    def __init__(self, directory: Path) -> None:
        self._directory: Path = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, key: str) -> Path:
        """Return the file backing *key*."""
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.json"

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def load(self, key: str) -> list[dict[str, Any]] | None:
        path = self.path_for(key)
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StorageError(f"Cannot read {path}: {exc}") from exc

        try:
            data: Any = json.loads(raw.decode("utf-8"))
        except ValueError as exc:
            raise StorageError(
                f"Corrupt data in {path}: {exc}",
                hint="Delete the file or run 'grocno reset' to start over.",
            ) from exc

        if not isinstance(data, list) or not all(isinstance(e, dict) for e in data):
            raise StorageError(
                f"Unexpected data structure in {path}; expected a list of objects.",
                hint="Delete the file or run 'grocno reset' to start over.",
            )
        return data

    def save(self, key: str, records: list[dict[str, Any]]) -> None:
        path = self.path_for(key)
        try:
            payload = json.dumps(records, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Cannot serialise records for {key!r}: {exc}") from exc

        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            # Write-then-rename so readers never observe a half-written file.
            fd, tmp_name = tempfile.mkstemp(
                dir=self._directory, prefix=f".{key}.", suffix=".tmp",
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"Cannot write {path}: {exc}") from exc

    def remove(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot remove {path}: {exc}") from exc
