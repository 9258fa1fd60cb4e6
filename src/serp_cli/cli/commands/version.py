"""``serptech version`` — API version information."""

from __future__ import annotations

import argparse

from serp_cli.cli import exit_codes
from serp_cli.cli.context import CommandContext


def handle_version(args: argparse.Namespace, ctx: CommandContext) -> int:
    ctx.write(ctx.client().users.version())
    return exit_codes.SUCCESS


def register(
    subparsers: argparse._SubParsersAction,
    parents: list[argparse.ArgumentParser],
) -> None:
    parser = subparsers.add_parser(
        "version", parents=parents, help="display API version information",
    )
    parser.set_defaults(handler=handle_version)
