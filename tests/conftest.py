"""Shared pytest fixtures and configuration for the grocno test suite.

Guidelines
----------
* Core tests must be pure — the sorter never touches storage.
* Store tests use :class:`MemoryStorage`; only storage and CLI tests
  touch the filesystem, and only under ``tmp_path``.
* No test may read or write the real ``~/.grocno``.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from grocno.config import get_settings


class MemoryStorage:
    """In-memory :class:`~grocno.core.protocols.StorageBackend` for tests."""

    def __init__(self, initial: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self.data: dict[str, list[dict[str, Any]]] = copy.deepcopy(initial or {})
        self.saves: int = 0

    def load(self, key: str) -> list[dict[str, Any]] | None:
        records = self.data.get(key)
        return copy.deepcopy(records) if records is not None else None

    def save(self, key: str, records: list[dict[str, Any]]) -> None:
        self.saves += 1
        self.data[key] = copy.deepcopy(records)

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point settings at a per-test data dir and drop cached values."""
    monkeypatch.setenv("GROCNO_DATA_DIR", str(tmp_path / "data"))
    for name in ("GROCNO_DEFAULT_SORT", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def make_storage() -> type[MemoryStorage]:
    """Return the fake class so tests can pre-load stored records."""
    return MemoryStorage
