"""Infrastructure layer — filesystem persistence.

Every raw ``OSError`` or decoding error must be caught here and
re-raised as a :class:`~grocno.exceptions.GrocnoError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from grocno.infra.json_storage import JsonFileStorage

__all__: list[str] = ["JsonFileStorage"]
