"""Shared utilities — logging setup and other cross-cutting concerns.

Rules
-----
* No business logic.
* No storage I/O.
* Importable by any layer.
"""
