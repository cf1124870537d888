"""CLI application entry point and command routing for grocno.

This module is the **sole error boundary** for the entire application.
It catches :class:`~grocno.exceptions.GrocnoError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  stores and the sorter.
* Handlers build their stores from the resolved data directory, so
  tests can point every command at a temporary directory.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from grocno.cli import exit_codes
from grocno.cli.console import console
from grocno.config import get_settings
from grocno.exceptions import GrocnoError, ValidationError
from grocno.utils.logging import configure_logging, get_logger
from grocno.version import __version__

if TYPE_CHECKING:
    from grocno.core.cart import CartStore
    from grocno.core.catalog import CatalogStore

log = get_logger(__name__)

SORT_CHOICES = ("price", "name")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser and its sub-commands."""
    parser = argparse.ArgumentParser(
        prog="grocno",
        description="Command-line grocery storefront: catalog, admin, and cart.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding the catalog and cart files (env: GROCNO_DATA_DIR).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level: DEBUG, INFO, WARNING, ERROR or CRITICAL (env: LOG_LEVEL).",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit logs as JSON lines (env: LOG_JSON).",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    catalog = commands.add_parser("catalog", help="List products.")
    catalog.add_argument("--sort", choices=SORT_CHOICES, default=None)

    add = commands.add_parser("add", help="Add a product.")
    add.add_argument("name")
    add.add_argument("price")
    add.add_argument("image")

    update = commands.add_parser("update", help="Edit a product.")
    update.add_argument("id", type=int)
    update.add_argument("--name", default=None)
    update.add_argument("--price", default=None)
    update.add_argument("--image", default=None)

    delete = commands.add_parser("delete", help="Delete a product.")
    delete.add_argument("id", type=int)

    commands.add_parser("reset", help="Restore the default products.")

    cart = commands.add_parser("cart", help="Show or change the cart.")
    cart_commands = cart.add_subparsers(dest="cart_command", metavar="ACTION")
    cart_commands.add_parser("show", help="Show the cart (default).")
    cart_add = cart_commands.add_parser("add", help="Add one unit of a product.")
    cart_add.add_argument("id", type=int)
    cart_remove = cart_commands.add_parser("remove", help="Remove a line.")
    cart_remove.add_argument("id", type=int)
    cart_qty = cart_commands.add_parser("qty", help="Set a line's quantity (0 removes it).")
    cart_qty.add_argument("id", type=int)
    cart_qty.add_argument("qty", type=int)
    cart_commands.add_parser("clear", help="Empty the cart.")
    cart_commands.add_parser("checkout", help="Pay and empty the cart.")

    shop = commands.add_parser("shop", help="Pick a product interactively and add it to the cart.")
    shop.add_argument("--sort", choices=SORT_CHOICES, default=None)

    commands.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def _open_stores(data_dir: Path) -> tuple[CatalogStore, CartStore]:
    """Build the catalog and cart stores over one JSON storage directory."""
    from grocno.core.cart import CartStore
    from grocno.core.catalog import CatalogStore
    from grocno.infra.json_storage import JsonFileStorage

    storage = JsonFileStorage(data_dir)
    return CatalogStore(storage), CartStore(storage)


def _resolve_sort(requested: str | None) -> str | None:
    return requested if requested is not None else get_settings().default_sort


# ---------------------------------------------------------------------------
# Catalog / admin commands
# ---------------------------------------------------------------------------

def _handle_catalog(args: argparse.Namespace, data_dir: Path) -> int:
    from grocno.cli.tables import render_catalog

    catalog, _ = _open_stores(data_dir)
    sort_key = _resolve_sort(args.sort)
    products = catalog.sorted_products(sort_key) if sort_key else catalog.get_products()
    render_catalog(products, sort_key)
    return exit_codes.SUCCESS


def _handle_add(args: argparse.Namespace, data_dir: Path) -> int:
    from grocno.cli.tables import format_price

    catalog, _ = _open_stores(data_dir)
    product = catalog.add_product(args.name, args.price, args.image)
    console.print(
        f"[bold green]Added[/bold green] #{product.id} {product.name} "
        f"at {format_price(product.price)}"
    )
    return exit_codes.SUCCESS


def _handle_update(args: argparse.Namespace, data_dir: Path) -> int:
    if args.name is None and args.price is None and args.image is None:
        raise ValidationError(
            "Nothing to update.",
            hint="Pass at least one of --name, --price or --image.",
        )

    catalog, _ = _open_stores(data_dir)
    product = catalog.update_product(
        args.id, name=args.name, price=args.price, image=args.image,
    )
    console.print(f"[bold green]Updated[/bold green] #{product.id} {product.name}")
    return exit_codes.SUCCESS


def _handle_delete(args: argparse.Namespace, data_dir: Path) -> int:
    catalog, _ = _open_stores(data_dir)
    catalog.delete_product(args.id)
    console.print(f"[bold green]Deleted[/bold green] product #{args.id}")
    return exit_codes.SUCCESS


def _handle_reset(args: argparse.Namespace, data_dir: Path) -> int:
    catalog, _ = _open_stores(data_dir)
    catalog.clear_all()
    console.print(f"[bold green]Catalog reset[/bold green] ({catalog.count()} products)")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Cart commands
# ---------------------------------------------------------------------------

def _handle_cart(args: argparse.Namespace, data_dir: Path) -> int:
    """Dispatch ``grocno cart <action>``; no action shows the cart."""
    from grocno.cli.tables import format_price, render_cart

    catalog, cart = _open_stores(data_dir)
    action = args.cart_command or "show"

    if action == "add":
        line = cart.add(catalog.get_product(args.id))
        console.print(f"[bold green]In cart:[/bold green] {line.name} x{line.qty}")
    elif action == "remove":
        cart.remove(args.id)
        console.print(f"Removed product #{args.id} from the cart.")
    elif action == "qty":
        line = cart.update_quantity(args.id, args.qty)
        if line is None:
            console.print(f"Removed product #{args.id} from the cart.")
        else:
            console.print(f"[bold green]In cart:[/bold green] {line.name} x{line.qty}")
    elif action == "clear":
        cart.clear()
        console.print("Cart cleared.")
    elif action == "checkout":
        if not cart.get_items():
            console.print("[yellow]Your cart is empty.[/yellow]")
            return exit_codes.SUCCESS
        amount = cart.checkout()
        console.print(f"[bold green]Order placed.[/bold green] Paid {format_price(amount)}")
    else:
        render_cart(cart.get_items(), cart.total())
    return exit_codes.SUCCESS


def _handle_shop(args: argparse.Namespace, data_dir: Path) -> int:
    """Interactive flow: show the catalog, pick a product, add it to the cart."""
    from grocno.cli.product_prompt import prompt_product_selection

    catalog, cart = _open_stores(data_dir)
    sort_key = _resolve_sort(args.sort)
    products = catalog.sorted_products(sort_key) if sort_key else catalog.get_products()

    product_id = prompt_product_selection(products, sort_key)
    line = cart.add(catalog.get_product(product_id))
    console.print(
        f"[bold green]Added to cart:[/bold green] {line.name} x{line.qty} "
        f"({cart.item_count()} items in cart)"
    )
    return exit_codes.SUCCESS


def _handle_doctor(args: argparse.Namespace, data_dir: Path) -> int:
    from grocno.cli.doctor import run_doctor

    return run_doctor(data_dir)


_HANDLERS: dict[str, Callable[[argparse.Namespace, Path], int]] = {
    "catalog": _handle_catalog,
    "add": _handle_add,
    "update": _handle_update,
    "delete": _handle_delete,
    "reset": _handle_reset,
    "cart": _handle_cart,
    "shop": _handle_shop,
    "doctor": _handle_doctor,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the grocno CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    settings = get_settings()
    configure_logging(
        level=args.log_level or settings.log_level,
        json_logs=args.log_json or settings.log_json,
    )
    data_dir = (args.data_dir or settings.data_dir).expanduser()
    log.debug("Running %s with data dir %s", args.command, data_dir)

    return _HANDLERS[args.command](args, data_dir)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` so the process never exits with a raw stack trace
    during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except GrocnoError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        log.debug("Unhandled exception", exc_info=True)
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
