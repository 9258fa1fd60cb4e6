"""``serptech doctor`` — local environment diagnostics.

Gathers client, interpreter and credential information and renders a
Rich table summarising whether serp-cli is ready to talk to the API.
No request is sent; tokens are reported as present or missing, never
printed.

This module lives in the CLI layer; it may import from ``infra`` and
``core``, and it renders via Rich.
"""

from __future__ import annotations

import platform
import sys

from serp_cli.cli import exit_codes
from serp_cli.cli.console import console
from serp_cli.settings import Settings
from serp_cli.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _serp_cli_version_check() -> Check:
    """Return (label, value, status) for the serp-cli version row."""
    return "serp-cli", __version__, "[green]OK[/green]"


def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _httpx_version_check() -> Check:
    """Return (label, value, status) for the httpx row."""
    try:
        import httpx
    except ImportError:
        return "httpx", "NOT INSTALLED", "[red]FAIL[/red]"
    return "httpx", getattr(httpx, "__version__", "unknown"), "[green]OK[/green]"


def _base_url_check(settings: Settings) -> Check:
    return "Base URL", settings.base_url, "[green]OK[/green]"


def _mask(token: str) -> str:
    """Show only the last four characters of *token*."""
    if len(token) <= 4:
        return "set"
    return f"set (…{token[-4:]})"


def _access_token_check(settings: Settings) -> Check:
    """Access token row; falling back to the root token is only a warning."""
    if settings.access_token:
        return "Access token", _mask(settings.access_token), "[green]OK[/green]"
    if settings.root_token:
        return "Access token", "using root token", "[yellow]WARN[/yellow]"
    return "Access token", "not set", "[red]FAIL[/red]"


def _root_token_check(settings: Settings) -> Check:
    if settings.root_token:
        return "Root token", _mask(settings.root_token), "[green]OK[/green]"
    return "Root token", "not set", "[yellow]WARN[/yellow]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\nserptech doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<38} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<14} {value:<38} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def collect_checks(settings: Settings) -> list[Check]:
    return [
        _serp_cli_version_check(),
        _python_version_check(),
        _httpx_version_check(),
        _base_url_check(settings),
        _access_token_check(settings),
        _root_token_check(settings),
    ]


def run_doctor(settings: Settings) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = collect_checks(settings)
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        print("Some checks failed." if has_failure else "All checks passed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS

    table = Table(
        title="serptech doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
