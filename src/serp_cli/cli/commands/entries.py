"""``serptech entries`` — recognition entries and statistics."""

from __future__ import annotations

import argparse

from serp_cli.cli import exit_codes
from serp_cli.cli.console import stdout
from serp_cli.cli.context import CommandContext
from serp_cli.cli.options import add_yes_flag, non_negative_int
from serp_cli.cli.prompts import confirm_deletion
from serp_cli.core.requests import StatsSourcesRequest, require_id
from serp_cli.core.resolvers import resolve_confidence, resolve_date, resolve_liveness


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def handle_list(args: argparse.Namespace, ctx: CommandContext) -> int:
    """List recognition entries with optional filters."""
    query = ctx.pagination()
    query.set_str("origin_ids", args.origin_ids)
    query.set_str("spaces_ids", args.spaces_ids)
    query.set_str("person_ids", args.person_ids)
    query.set_str("conf", args.conf)
    if args.date_from is not None:
        query.set_date("date_from", resolve_date(args.date_from))
    if args.date_to is not None:
        query.set_date("date_to", resolve_date(args.date_to))

    client = ctx.client()
    ctx.write(client.entries.list(query.build()))
    return exit_codes.SUCCESS


def handle_delete(args: argparse.Namespace, ctx: CommandContext) -> int:
    entry_id = require_id(args.id, "entry id")
    confirm_deletion(f"entry {entry_id}", assume_yes=args.yes)

    client = ctx.client()
    client.entries.delete(entry_id)
    stdout.out(f"entry {entry_id} successfully deleted\n")
    return exit_codes.SUCCESS


def build_stats_request(args: argparse.Namespace) -> StatsSourcesRequest:
    """Resolve ``entries stats sources`` flags into a validated request."""
    request = StatsSourcesRequest(
        person_ids=args.person_ids.strip() if args.person_ids is not None else None,
        conf=resolve_confidence(args.conf) if args.conf is not None else None,
        liveness=resolve_liveness(args.liveness) if args.liveness is not None else None,
        source=args.source_id,
        entry_id_from=args.entry_id_from,
        date_from=resolve_date(args.date_from) if args.date_from is not None else None,
        date_to=resolve_date(args.date_to) if args.date_to is not None else None,
    )
    request.validate()
    return request


def handle_stats_sources(args: argparse.Namespace, ctx: CommandContext) -> int:
    """Show entry statistics grouped by origin."""
    request = build_stats_request(args)

    client = ctx.client()
    ctx.write(client.entries.stats_sources(request))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Parser registration
# ---------------------------------------------------------------------------

def register(
    subparsers: argparse._SubParsersAction,
    parents: list[argparse.ArgumentParser],
) -> None:
    entries = subparsers.add_parser(
        "entries",
        parents=parents,
        help="inspect recognition entries and statistics",
        description="Inspect recognition entries and statistics.",
    )
    entries.set_defaults(help_parser=entries)
    actions = entries.add_subparsers(title="commands", metavar="COMMAND")

    list_parser = actions.add_parser("list", parents=parents, help="list recognition entries")
    list_parser.add_argument("--origin-ids", help="comma-separated list of origin identifiers")
    list_parser.add_argument("--spaces-ids", help="comma-separated list of space identifiers")
    list_parser.add_argument("--person-ids", help="comma-separated list of person identifiers")
    list_parser.add_argument("--conf", help="comma-separated list of confidence values")
    list_parser.add_argument(
        "--date-from",
        help="filter entries created after the given date (YYYY-MM-DD or RFC3339)",
    )
    list_parser.add_argument(
        "--date-to",
        help="filter entries created before the given date (YYYY-MM-DD or RFC3339)",
    )
    list_parser.set_defaults(handler=handle_list)

    delete_parser = actions.add_parser(
        "delete", parents=parents, help="delete entry by identifier",
    )
    delete_parser.add_argument("--id", type=int, help="entry identifier")
    add_yes_flag(delete_parser)
    delete_parser.set_defaults(handler=handle_delete)

    stats = actions.add_parser("stats", parents=parents, help="retrieve entry statistics")
    stats.set_defaults(help_parser=stats)
    stats_actions = stats.add_subparsers(title="commands", metavar="COMMAND")

    sources = stats_actions.add_parser(
        "sources", parents=parents, help="show statistics grouped by origins",
    )
    sources.add_argument("--person-ids", help="comma-separated list of person identifiers")
    sources.add_argument("--conf", help="filter by confidence (name or integer value)")
    sources.add_argument("--liveness", help="filter by liveness (passed|failed|undetermined)")
    sources.add_argument("--source-id", type=int, help="filter by origin identifier")
    sources.add_argument(
        "--entry-id-from",
        type=non_negative_int,
        help="filter entries starting from identifier",
    )
    sources.add_argument("--date-from", help="filter by start date (YYYY-MM-DD or RFC3339)")
    sources.add_argument("--date-to", help="filter by end date (YYYY-MM-DD or RFC3339)")
    sources.set_defaults(handler=handle_stats_sources)
