"""Exit-code constants used by the CLI layer.

Every exit path returns one of these values; command handlers never
hand raw integers back to :func:`grocno.cli.app.main`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed without error."""

GENERAL_ERROR: int = 1
"""A known GrocnoError was caught and its message displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C (128 + SIGINT)."""
