"""Interactive confirmation for destructive commands.

Deletions ask before touching the API unless ``--yes`` was given.  A
non-interactive stdin never blocks: it fails with a hint instead.
"""

from __future__ import annotations

import sys
from typing import Any

from serp_cli.exceptions import ConfirmationDeclinedError, EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive confirmation."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
            hint="Or pass --yes to skip the confirmation prompt.",
        ) from exc
    return questionary


def confirm_deletion(description: str, *, assume_yes: bool) -> None:
    """Ask the user to confirm deleting *description*.

    Raises
    ------
    ConfirmationDeclinedError
        If the user declines, cancels, or stdin is not a terminal.
    """
    if assume_yes:
        return

    if not sys.stdin.isatty():
        raise ConfirmationDeclinedError(
            f"refusing to delete {description} without confirmation",
            hint="Re-run with --yes to skip the prompt.",
        )

    questionary = _import_questionary()
    answer: bool | None = questionary.confirm(
        f"Delete {description}?",
        default=False,
    ).ask()  # Returns None on Ctrl+C / Esc

    if not answer:
        raise ConfirmationDeclinedError(f"deletion of {description} cancelled")
