"""``grocno doctor`` — environment diagnostics command.

Collects runtime information and renders a table summarising whether
the environment can run grocno: interpreter version, UI libraries, and
whether the data directory is writable.  Falls back to plain stderr
output when Rich itself is missing.
"""

from __future__ import annotations

import os
import platform
import sys
from importlib import metadata
from pathlib import Path

from grocno.cli import exit_codes
from grocno.cli.console import console
from grocno.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _package_check(distribution: str, *, required: bool) -> Check:
    """Return the row for an installed distribution.

    A missing *required* package fails the run; a missing optional one
    only warns.
    """
    try:
        version = metadata.version(distribution)
    except metadata.PackageNotFoundError:
        status = "[red]FAIL[/red]" if required else "[yellow]WARN[/yellow]"
        return distribution, "NOT INSTALLED", status
    return distribution, version, "[green]OK[/green]"


def _data_dir_check(data_dir: Path) -> Check:
    """Return the row for the storage directory."""
    if data_dir.exists() and not data_dir.is_dir():
        return "Data dir", f"{data_dir} (not a directory)", "[red]FAIL[/red]"
    # Missing directories are created on first write; probe the nearest ancestor.
    target = data_dir
    while not target.exists() and target != target.parent:
        target = target.parent
    if os.access(target, os.W_OK):
        return "Data dir", str(data_dir), "[green]OK[/green]"
    return "Data dir", f"{data_dir} (not writable)", "[red]FAIL[/red]"


def _grocno_version_check() -> Check:
    return "grocno", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def collect_checks(data_dir: Path) -> list[Check]:
    return [
        _grocno_version_check(),
        _python_version_check(),
        _package_check("pydantic-settings", required=True),
        _package_check("rich", required=False),
        _package_check("questionary", required=False),
        _data_dir_check(data_dir),
    ]


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\ngrocno doctor", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Component':<18} {'Value':<30} {'Status':<8}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<18} {value:<30} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(data_dir: Path) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = collect_checks(data_dir)
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        print("Some checks failed." if has_failure else "All checks passed.", file=sys.stderr)
    else:
        table = Table(
            title="grocno doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=18)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
        if has_failure:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            console.print("[bold green]All checks passed.[/bold green]")

    return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS
