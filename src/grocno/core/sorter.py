"""Stable merge sort over product-like records.

Every function in this module is a **pure** transformation — no storage
I/O and no shared state; the only side effect is debug logging in
:func:`sort_records`.  The pipeline it runs is:

1. **Validate** — the input must be a finite, ordered sequence.
2. **Clone** — deep-copy every record (:func:`clone_records`) so the
   caller's objects are never aliased by the result.
3. **Extract keys** — resolve ``price`` or ``name`` for every record up
   front; a malformed record fails here, even in a singleton input.
4. **Merge sort** — top-down split at ``n // 2``, merge taking the left
   head on ties (stable).

Records are either objects exposing ``price`` / ``name`` attributes
(:class:`~grocno.core.models.Product`, :class:`~grocno.core.models.CartItem`)
or mappings such as ``{"price": 215}``.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping, Sequence, Set
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, TypeVar

from grocno.core.collation import collation_key
from grocno.exceptions import InvalidInputError, InvalidKeyError
from grocno.utils.logging import get_logger

T = TypeVar("T")
R = TypeVar("R")

log = get_logger(__name__)


class SortKey(str, Enum):
    """Record attribute a catalog can be ordered by."""

    PRICE = "price"
    NAME = "name"


# ---------------------------------------------------------------------------
# 1. Validate
# ---------------------------------------------------------------------------

def _ensure_sequence(records: object) -> Sequence[Any]:
    """Reject anything that is not a finite, ordered, non-textual sequence."""
    if isinstance(records, (str, bytes, bytearray)):
        raise InvalidInputError(
            f"Expected a sequence of records, got {type(records).__name__}.",
        )
    if isinstance(records, (Mapping, Set)) or not isinstance(records, Sequence):
        raise InvalidInputError(
            f"Expected an ordered sequence of records, got {type(records).__name__}.",
            hint="Materialise iterators and generators with list() first.",
        )
    if any(item is records for item in records):
        raise InvalidInputError("Record sequence contains itself.")
    return records


def _resolve_key(key: SortKey | str) -> SortKey:
    try:
        return SortKey(key)
    except ValueError:
        valid = ", ".join(member.value for member in SortKey)
        raise InvalidKeyError(
            f"Unknown sort key: {key!r}",
            hint=f"Use one of: {valid}",
        ) from None


# ---------------------------------------------------------------------------
# 2. Clone
# ---------------------------------------------------------------------------

def clone_records(records: Sequence[R]) -> list[R]:
    """Return a new list holding a deep copy of every record in *records*."""
    return [copy.deepcopy(record) for record in records]


# ---------------------------------------------------------------------------
# 3. Key extraction
# ---------------------------------------------------------------------------

_MISSING = object()


def _field(record: Any, name: str) -> Any:
    """Read *name* from a mapping or an attribute-bearing object."""
    if isinstance(record, Mapping):
        value = record.get(name, _MISSING)
    else:
        value = getattr(record, name, _MISSING)
    if value is _MISSING:
        raise InvalidKeyError(
            f"Record has no {name!r} field: {record!r}",
        )
    return value


def price_key(record: Any) -> Decimal:
    """Numeric comparison key for the ``price`` field."""
    value = _field(record, SortKey.PRICE.value)
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise InvalidKeyError(
            f"Price must be numeric, got {type(value).__name__}: {value!r}",
        )
    try:
        price = Decimal(value.strip() if isinstance(value, str) else str(value))
    except InvalidOperation:
        raise InvalidKeyError(f"Price is not a number: {value!r}") from None
    if not price.is_finite():
        raise InvalidKeyError(f"Price must be finite, got {value!r}")
    return price


def name_key(record: Any) -> tuple[str, str, str]:
    """Collation key for the ``name`` field."""
    value = _field(record, SortKey.NAME.value)
    if not isinstance(value, str):
        raise InvalidKeyError(
            f"Name must be text, got {type(value).__name__}: {value!r}",
        )
    return collation_key(value)


_KEY_FUNCS: dict[SortKey, Callable[[Any], Any]] = {
    SortKey.PRICE: price_key,
    SortKey.NAME: name_key,
}


# ---------------------------------------------------------------------------
# 4. Merge sort
# ---------------------------------------------------------------------------

def _merge(
    left: list[T],
    right: list[T],
    key: Callable[[T], Any],
) -> list[T]:
    """Merge two sorted lists; the left head wins ties."""
    result: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if key(left[i]) <= key(right[j]):
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(items: Sequence[T], *, key: Callable[[T], Any]) -> list[T]:
    """Return a new list with *items* in ascending *key* order (stable).

    *items* is sliced, never mutated.  ``key`` is called on every
    comparison, so callers with expensive keys should pre-compute them
    (see :func:`sort_records`).
    """
    if len(items) <= 1:
        return list(items)

    middle = len(items) // 2
    left = merge_sort(items[:middle], key=key)
    right = merge_sort(items[middle:], key=key)
    return _merge(left, right, key)


def _decorated_key(pair: tuple[Any, Any]) -> Any:
    return pair[0]


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def sort_records(records: Sequence[R], key: SortKey | str = SortKey.PRICE) -> list[R]:
    """Return a new list of cloned *records* ordered ascending by *key*.

    Raises
    ------
    InvalidInputError
        If *records* is not a finite, ordered sequence.
    InvalidKeyError
        If *key* is unknown, or a record lacks it or holds a malformed value.
    """
    checked = _ensure_sequence(records)
    sort_key = _resolve_key(key)
    extract = _KEY_FUNCS[sort_key]

    clones = clone_records(checked)
    decorated = [(extract(record), record) for record in clones]
    ordered = merge_sort(decorated, key=_decorated_key)

    log.debug("Sorted %d records by %s", len(ordered), sort_key.value)
    return [record for _, record in ordered]


def sort_by_price(records: Sequence[R]) -> list[R]:
    """Sort *records* by ascending numeric price."""
    return sort_records(records, SortKey.PRICE)


def sort_by_name(records: Sequence[R]) -> list[R]:
    """Sort *records* alphabetically by name."""
    return sort_records(records, SortKey.NAME)
