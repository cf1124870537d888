"""Field validation shared by the catalog and cart stores.

Each validator returns the normalised value or raises
:class:`~grocno.exceptions.ValidationError`.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from grocno.exceptions import ValidationError


def validate_id(value: object) -> int:
    """Ids are positive integers (``bool`` is rejected)."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(f"Invalid id: {value!r}", hint="Ids are positive integers.")
    return value


def validate_text(value: object, field: str) -> str:
    """Return *value* stripped; it must be a non-empty string."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field.capitalize()} must not be empty.")
    return value.strip()


def validate_price(value: object) -> Decimal:
    """Parse *value* as a finite, non-negative decimal."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise ValidationError(f"Invalid price: {value!r}")
    try:
        price = Decimal(value.strip() if isinstance(value, str) else str(value))
    except InvalidOperation:
        raise ValidationError(
            f"Invalid price: {value!r}",
            hint="Enter a number such as 49 or 49.50.",
        ) from None
    if not price.is_finite() or price < 0:
        raise ValidationError(
            f"Invalid price: {value!r}",
            hint="Price must be zero or more.",
        )
    return price


def validate_quantity(value: object) -> int:
    """Parse *value* as an integer quantity (sign not checked)."""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid quantity: {value!r}")
    try:
        return int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid quantity: {value!r}") from None
