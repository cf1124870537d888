"""Locale-style text collation for product names.

Raw ``str`` comparison orders by code point, which puts ``"Zebra"``
before ``"apple"`` and ``"Éclair"`` after ``"zucchini"``.  The key built
here compares in three levels, the way UCA-based collators do:

1. **Primary** — base characters only: accents stripped, case folded.
   Spaces, punctuation and symbols rank below digits and letters.
2. **Secondary** — accents: unaccented before accented.
3. **Tertiary** — case: lowercase before uppercase.

Characters within one class still compare by code point, so scripts
and symbols are not reordered against each other the way a full
locale table would.
"""

from __future__ import annotations

import unicodedata

CollationKey = tuple[str, str, str]

# Prefix for non-alphanumeric characters; sorts below every printable one.
_LOW_WEIGHT = "\x00"


def _strip_marks(decomposed: str) -> str:
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _primary(base: str) -> str:
    return "".join(ch if ch.isalnum() else _LOW_WEIGHT + ch for ch in base.casefold())


def collation_key(text: str) -> CollationKey:
    """Return a sort key for *text* that orders like a locale collator.

    >>> sorted(["banana", "Apple", "éclair", "apple", "~tilde"], key=collation_key)
    ['~tilde', 'apple', 'Apple', 'banana', 'éclair']
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = _strip_marks(decomposed)
    primary = _primary(base)
    # Combining marks sort after ASCII, so "e" < "é".
    secondary = decomposed.casefold()
    # swapcase() maps lowercase to uppercase code points, which are lower.
    tertiary = base.swapcase()
    return primary, secondary, tertiary
