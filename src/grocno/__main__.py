"""Allow ``python -m grocno`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m grocno`` behaves identically to the ``grocno``
console script.
"""

from __future__ import annotations

from grocno.cli.app import cli

if __name__ == "__main__":
    cli()
