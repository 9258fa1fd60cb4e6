"""``serptech tokens`` — access and stream tokens.

Both token kinds expose the same ``list``/``create``/``delete`` trio,
so the parsers are generated from one table.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from serp_cli.cli import exit_codes
from serp_cli.cli.console import stdout
from serp_cli.cli.context import CommandContext
from serp_cli.cli.options import add_yes_flag, explicit
from serp_cli.cli.prompts import confirm_deletion
from serp_cli.core.requests import CreateTokenRequest, require_text
from serp_cli.infra.client import SerpClient, TokensApi


@dataclass(frozen=True, slots=True)
class _TokenKind:
    """Binds CLI wording to the names of the matching :class:`TokensApi` methods."""

    command: str
    label: str
    list_method: str
    create_method: str
    delete_method: str

    def bind(self, tokens: TokensApi, operation: str) -> Callable[..., Any]:
        """Return the bound API method for *operation* (list, create, delete)."""
        return getattr(tokens, getattr(self, f"{operation}_method"))


_KINDS: tuple[_TokenKind, ...] = (
    _TokenKind(
        "access", "access token",
        "list_access", "create_access", "delete_access",
    ),
    _TokenKind(
        "streams", "stream token",
        "list_streams", "create_stream", "delete_stream",
    ),
)


def _tokens(ctx: CommandContext) -> TokensApi:
    client: SerpClient = ctx.client()
    return client.tokens


def handle_list(args: argparse.Namespace, ctx: CommandContext) -> int:
    kind: _TokenKind = args.token_kind
    query = ctx.pagination().set_flag(explicit(args, "space_id"))
    ctx.write(kind.bind(_tokens(ctx), "list")(query.build()))
    return exit_codes.SUCCESS


def handle_create(args: argparse.Namespace, ctx: CommandContext) -> int:
    kind: _TokenKind = args.token_kind
    request = CreateTokenRequest(permanent=args.permanent)
    ctx.write(kind.bind(_tokens(ctx), "create")(request))
    return exit_codes.SUCCESS


def handle_delete(args: argparse.Namespace, ctx: CommandContext) -> int:
    kind: _TokenKind = args.token_kind
    key = require_text(args.key, "token key")
    confirm_deletion(f"{kind.label} {key}", assume_yes=args.yes)

    kind.bind(_tokens(ctx), "delete")(key)
    stdout.out(f"{kind.label} {key} successfully deleted\n")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Parser registration
# ---------------------------------------------------------------------------

def register(
    subparsers: argparse._SubParsersAction,
    parents: list[argparse.ArgumentParser],
) -> None:
    tokens = subparsers.add_parser(
        "tokens", parents=parents, help="manage API tokens", description="Manage API tokens.",
    )
    tokens.set_defaults(help_parser=tokens)
    kinds = tokens.add_subparsers(title="token kinds", metavar="KIND")

    for kind in _KINDS:
        group = kinds.add_parser(kind.command, parents=parents, help=f"manage {kind.label}s")
        group.set_defaults(help_parser=group, token_kind=kind)
        actions = group.add_subparsers(title="actions", metavar="ACTION")

        list_parser = actions.add_parser("list", parents=parents, help=f"list {kind.label}s")
        list_parser.add_argument("--space-id", type=int, help="filter by space identifier")
        list_parser.set_defaults(handler=handle_list)

        create = actions.add_parser("create", parents=parents, help=f"create {kind.label}")
        create.add_argument("--permanent", action="store_true", help="create permanent token")
        create.set_defaults(handler=handle_create)

        delete = actions.add_parser("delete", parents=parents, help=f"delete {kind.label}")
        delete.add_argument("--key", help="token key")
        add_yes_flag(delete)
        delete.set_defaults(handler=handle_delete)
