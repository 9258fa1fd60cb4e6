"""``serptech users`` — current user and user management.

Examples::

    serptech users me
    serptech users list-tokens
    serptech users statistics
    serptech users list --limit 50 --query admin
    serptech users get --id 12
    serptech users update --id 12 --username admin --is-active=false
    serptech users patch --id 12 --is-active=true

``list``, ``get``, ``update`` and ``patch`` require the root token.
"""

from __future__ import annotations

import argparse

from serp_cli.cli import exit_codes
from serp_cli.cli.context import CommandContext
from serp_cli.cli.options import add_optional_bool
from serp_cli.core.requests import UserPatchRequest, UserUpdateRequest, require_id


# ---------------------------------------------------------------------------
# Request builders
# ---------------------------------------------------------------------------

def build_patch_request(args: argparse.Namespace) -> UserPatchRequest:
    """Patch request with only the supplied fields; none are required."""
    request = UserPatchRequest(
        username=args.username.strip() if args.username is not None else None,
        is_active=args.is_active,
    )
    request.validate()
    return request


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def handle_me(args: argparse.Namespace, ctx: CommandContext) -> int:
    ctx.write(ctx.client().users.me())
    return exit_codes.SUCCESS


def handle_list_tokens(args: argparse.Namespace, ctx: CommandContext) -> int:
    ctx.write(ctx.client().tokens.list_access(None))
    return exit_codes.SUCCESS


def handle_statistics(args: argparse.Namespace, ctx: CommandContext) -> int:
    ctx.write(ctx.client().users.statistics())
    return exit_codes.SUCCESS


def handle_list(args: argparse.Namespace, ctx: CommandContext) -> int:
    query = ctx.pagination().set_str("q", args.query, skip_blank=True)
    client = ctx.root_client()
    ctx.write(client.users.list(query.build()))
    return exit_codes.SUCCESS


def handle_get(args: argparse.Namespace, ctx: CommandContext) -> int:
    user_id = require_id(args.id, "user id")
    client = ctx.root_client()
    ctx.write(client.users.get(user_id))
    return exit_codes.SUCCESS


def handle_update(args: argparse.Namespace, ctx: CommandContext) -> int:
    """Full update: ``--username`` and ``--is-active`` are both mandatory."""
    user_id = require_id(args.id, "user id")
    request = UserUpdateRequest.from_flags(args.username, args.is_active)
    client = ctx.root_client()
    ctx.write(client.users.update(user_id, request))
    return exit_codes.SUCCESS


def handle_patch(args: argparse.Namespace, ctx: CommandContext) -> int:
    user_id = require_id(args.id, "user id")
    request = build_patch_request(args)
    client = ctx.root_client()
    ctx.write(client.users.partial_update(user_id, request))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Parser registration
# ---------------------------------------------------------------------------

def _add_user_fields(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--id", type=int, help="target user identifier")
    parser.add_argument("--username", help="username value")
    add_optional_bool(parser, "--is-active", "toggle active status")


def register(
    subparsers: argparse._SubParsersAction,
    parents: list[argparse.ArgumentParser],
) -> None:
    users = subparsers.add_parser(
        "users",
        parents=parents,
        help="interact with user-related endpoints",
        description="Available actions: me, list-tokens, statistics, list, get, update, patch.",
        epilog=__doc__.split("Examples::", 1)[1],
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    users.set_defaults(help_parser=users)
    actions = users.add_subparsers(title="actions", metavar="ACTION")

    for name, handler, help_text in (
        ("me", handle_me, "show the authenticated user"),
        ("list-tokens", handle_list_tokens, "list access tokens of the current user"),
        ("statistics", handle_statistics, "show usage statistics"),
    ):
        parser = actions.add_parser(name, parents=parents, help=help_text)
        parser.set_defaults(handler=handler)

    list_parser = actions.add_parser("list", parents=parents, help="list users (root token)")
    list_parser.add_argument("--query", help="filter users by username substring")
    list_parser.set_defaults(handler=handle_list)

    get_parser = actions.add_parser("get", parents=parents, help="show one user (root token)")
    get_parser.add_argument("--id", type=int, help="target user identifier")
    get_parser.set_defaults(handler=handle_get)

    update_parser = actions.add_parser(
        "update", parents=parents, help="replace username and active flag (root token)",
    )
    _add_user_fields(update_parser)
    update_parser.set_defaults(handler=handle_update)

    patch_parser = actions.add_parser(
        "patch", parents=parents, help="change only the supplied fields (root token)",
    )
    _add_user_fields(patch_parser)
    patch_parser.set_defaults(handler=handle_patch)
