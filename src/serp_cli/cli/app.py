"""CLI application entry point and command routing for serp-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~serp_cli.exceptions.SerpCliError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here. Flag resolution and validation live in
  ``core``, API access in ``infra``, per-resource glue in
  ``cli.commands``.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from serp_cli.cli import exit_codes
from serp_cli.cli.commands import COMMAND_MODULES
from serp_cli.cli.console import console, escape
from serp_cli.cli.context import ClientFactory, CommandContext
from serp_cli.cli.options import build_global_options
from serp_cli.exceptions import SerpCliError
from serp_cli.utils.logging import configure_logging, get_logger
from serp_cli.version import __version__

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser with every sub-command."""
    global_options = build_global_options()
    parser = argparse.ArgumentParser(
        prog="serptech",
        description="SERP is a real-time facial recognition platform.",
        parents=[global_options],
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.set_defaults(help_parser=parser)
    subparsers = parser.add_subparsers(title="commands", metavar="COMMAND")

    for module in COMMAND_MODULES:
        module.register(subparsers, [global_options])

    doctor = subparsers.add_parser(
        "doctor",
        parents=[global_options],
        help="check local configuration and credentials",
    )
    doctor.set_defaults(handler=_handle_doctor)
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_doctor(args: argparse.Namespace, ctx: CommandContext) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from serp_cli.cli.doctor import run_doctor

    return run_doctor(ctx.settings)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    client_factory: ClientFactory | None = None,
) -> int:
    """Run the serp-cli CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    client_factory:
        Replacement for :meth:`SerpClient.from_settings`, used by tests to
        inject a fake client.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    handler = getattr(args, "handler", None)
    if handler is None:
        args.help_parser.print_help()
        return exit_codes.SUCCESS

    ctx = CommandContext.from_args(args, client_factory)
    configure_logging(debug=ctx.settings.debug)
    logger.debug("command.dispatch", handler=handler.__qualname__, module=handler.__module__)

    try:
        return handler(args, ctx)
    finally:
        ctx.close()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except SerpCliError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
