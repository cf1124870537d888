"""Interactive product picker for ``grocno shop``.

This module is responsible for:

* Rendering the (optionally sorted) catalog table.
* Prompting the user to pick a product via questionary arrow keys.
* Returning the selected product id.

No cart logic lives here — the caller adds the pick to the cart.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from grocno.cli.tables import format_price, render_catalog
from grocno.core.models import Product
from grocno.exceptions import EnvironmentError, ValidationError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _build_choice_label(product: Product) -> str:
    """Single-line label, e.g. ``"  4.  Tata Salt                ₹25.00"``."""
    return f"{product.id:>3}.  {product.name:<32} {format_price(product.price):>12}"


def prompt_product_selection(
    products: Sequence[Product],
    sort_key: str | None = None,
) -> int:
    """Display *products* and prompt for an interactive selection.

    Parameters
    ----------
    products:
        Catalog entries in display order.
    sort_key:
        Key the products were sorted by, shown in the table title.

    Returns
    -------
    int
        The ``id`` of the chosen product.

    Raises
    ------
    ValidationError
        If the catalog is empty or the user cancels (Esc).
    """
    if not products:
        raise ValidationError(
            "The catalog is empty.",
            hint="Run 'grocno reset' to restore the default products.",
        )

    questionary = _import_questionary()

    render_catalog(products, sort_key)

    choices = [
        questionary.Choice(title=_build_choice_label(product), value=product.id)
        for product in products
    ]

    selected: int | None = questionary.select(
        "Add which product to the cart?",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()  # None on Esc

    if selected is None:
        raise ValidationError(
            "No product selected.",
            hint="Use arrow keys to pick a product, then press Enter.",
        )
    return selected
