"""grocno — a small command-line grocery storefront.

Product catalog, admin CRUD, and shopping cart persisted as JSON files,
with a stable merge sort for ordering the catalog by price or name.
"""

from grocno.version import __version__

__all__: list[str] = ["__version__"]
