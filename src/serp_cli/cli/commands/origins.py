"""``serptech origins`` — manage origin configuration.

Examples::

    serptech origins list --limit 20
    serptech origins get --id 3
    serptech origins update --id 3 --name "Lobby" --is-active=false
    serptech origins delete --id 7
    serptech origins create --name "Warehouse"
"""

from __future__ import annotations

import argparse

from serp_cli.cli import exit_codes
from serp_cli.cli.console import stdout
from serp_cli.cli.context import CommandContext
from serp_cli.cli.options import add_optional_bool, add_yes_flag
from serp_cli.cli.prompts import confirm_deletion
from serp_cli.core.query import QueryBuilder
from serp_cli.core.requests import (
    OriginCreateRequest,
    OriginUpdateRequest,
    require_id,
    require_text,
)
from serp_cli.exceptions import InvalidFieldValueError


# ---------------------------------------------------------------------------
# Request builders
# ---------------------------------------------------------------------------

def build_update_request(args: argparse.Namespace) -> OriginUpdateRequest:
    """Patch request carrying only the flags that were supplied."""
    request = OriginUpdateRequest(
        id=require_id(args.id, "origin id"),
        name=args.name.strip() if args.name is not None else None,
        is_active=args.is_active,
        min_facesize=args.min_facesize,
        entry_storage_days=args.entry_storage_days,
        create_min_facesize=args.create_min_facesize,
        create_ha=args.create_ha,
        create_junk=args.create_junk,
    )
    request.validate()
    return request


def build_create_request(args: argparse.Namespace) -> OriginCreateRequest:
    """Creation request; unset optional flags keep the server defaults."""
    name = require_text(args.name, "origin name")
    if args.entry_storage_days is not None:
        raise InvalidFieldValueError(
            "entry-storage-days is not supported during origin creation; use update instead",
        )
    request = OriginCreateRequest(
        name=name,
        is_active=True if args.is_active is None else args.is_active,
        min_facesize=args.min_facesize,
        create_min_facesize=args.create_min_facesize,
        create_ha=args.create_ha,
        create_junk=args.create_junk,
    )
    request.validate()
    return request


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def handle_list(args: argparse.Namespace, ctx: CommandContext) -> int:
    query = QueryBuilder.search_pagination(args.search, ctx.limit, ctx.offset)
    client = ctx.client()
    ctx.write(client.origins.list(query.build()))
    return exit_codes.SUCCESS


def handle_get(args: argparse.Namespace, ctx: CommandContext) -> int:
    origin_id = require_id(args.id, "origin id")
    client = ctx.client()
    ctx.write(client.origins.get(origin_id))
    return exit_codes.SUCCESS


def handle_update(args: argparse.Namespace, ctx: CommandContext) -> int:
    request = build_update_request(args)
    client = ctx.client()
    ctx.write(client.origins.update(request))
    return exit_codes.SUCCESS


def handle_create(args: argparse.Namespace, ctx: CommandContext) -> int:
    request = build_create_request(args)
    client = ctx.client()
    ctx.write(client.origins.create(request))
    return exit_codes.SUCCESS


def handle_delete(args: argparse.Namespace, ctx: CommandContext) -> int:
    origin_id = require_id(args.id, "origin id")
    confirm_deletion(f"origin {origin_id}", assume_yes=args.yes)

    client = ctx.client()
    client.origins.delete(origin_id)
    stdout.out(f"origin {origin_id} successfully deleted\n")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Parser registration
# ---------------------------------------------------------------------------

def _add_settings_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--name", help="origin name")
    add_optional_bool(parser, "--is-active", "whether origin is active")
    parser.add_argument("--min-facesize", type=int, help="minimum facesize for uploads")
    parser.add_argument("--entry-storage-days", type=int, help="number of days to keep entries")
    parser.add_argument(
        "--create-min-facesize", type=int, help="minimum facesize when creating profiles",
    )
    add_optional_bool(parser, "--create-ha", "allow profile creation when confidence is HA")
    add_optional_bool(parser, "--create-junk", "allow profile creation when confidence is junk")


def register(
    subparsers: argparse._SubParsersAction,
    parents: list[argparse.ArgumentParser],
) -> None:
    origins = subparsers.add_parser(
        "origins",
        parents=parents,
        help="manage origin configuration",
        description="Provides helpers for listing and maintaining origin configuration.",
        epilog=__doc__.split("Examples::", 1)[1],
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    origins.set_defaults(help_parser=origins)
    actions = origins.add_subparsers(title="actions", metavar="ACTION")

    list_parser = actions.add_parser("list", parents=parents, help="list origins")
    list_parser.add_argument("-s", "--search", help="filtering by partially specified name")
    list_parser.set_defaults(handler=handle_list)

    get_parser = actions.add_parser("get", parents=parents, help="show one origin")
    get_parser.add_argument("--id", type=int, help="origin identifier")
    get_parser.set_defaults(handler=handle_get)

    update_parser = actions.add_parser(
        "update", parents=parents, help="change only the supplied origin settings",
    )
    update_parser.add_argument("--id", type=int, help="origin identifier")
    _add_settings_flags(update_parser)
    update_parser.set_defaults(handler=handle_update)

    create_parser = actions.add_parser("create", parents=parents, help="create an origin")
    _add_settings_flags(create_parser)
    create_parser.set_defaults(handler=handle_create)

    delete_parser = actions.add_parser("delete", parents=parents, help="delete an origin")
    delete_parser.add_argument("--id", type=int, help="origin identifier")
    add_yes_flag(delete_parser)
    delete_parser.set_defaults(handler=handle_delete)
