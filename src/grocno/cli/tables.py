"""Rich table rendering for the catalog and the cart.

Display logic only — callers fetch and sort the records; this module
turns them into tables.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from grocno.cli.console import output
from grocno.core.models import CartItem, Product
from grocno.exceptions import EnvironmentError

CURRENCY = "₹"


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


# ---------------------------------------------------------------------------
# Presentation helpers (pure, no I/O)
# ---------------------------------------------------------------------------

def format_price(amount: Decimal) -> str:
    """Render ``215`` as ``"₹215.00"``."""
    return f"{CURRENCY}{amount:,.2f}"


def _catalog_title(sort_key: str | None) -> str:
    if sort_key is None:
        return "Products"
    return f"Products (sorted by {sort_key})"


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def render_catalog(products: Sequence[Product], sort_key: str | None = None) -> None:
    """Print the product catalog as a table."""
    table_class = _import_rich_table()

    table = table_class(
        title=_catalog_title(sort_key),
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("ID", justify="right", style="dim", width=4)
    table.add_column("Name", justify="left", min_width=24)
    table.add_column("Price", justify="right", min_width=10)
    table.add_column("Image", justify="left", style="dim")

    for product in products:
        table.add_row(
            str(product.id),
            product.name,
            format_price(product.price),
            product.image,
        )

    output.print(table)
    if not products:
        output.print("[dim]No products yet. Add one with 'grocno add'.[/dim]")


def render_cart(items: Sequence[CartItem], total: Decimal) -> None:
    """Print the cart lines followed by the grand total."""
    if not items:
        output.print("[dim]Your cart is empty.[/dim]")
        return

    table_class = _import_rich_table()
    table = table_class(
        title="Cart",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("ID", justify="right", style="dim", width=4)
    table.add_column("Name", justify="left", min_width=24)
    table.add_column("Price", justify="right", min_width=10)
    table.add_column("Qty", justify="right", min_width=4)
    table.add_column("Total", justify="right", min_width=10)

    for item in items:
        table.add_row(
            str(item.id),
            item.name,
            format_price(item.price),
            str(item.qty),
            format_price(item.total),
        )

    output.print(table)
    output.print(f"[bold]Total:[/bold] {format_price(total)}")
