"""``serptech utility`` — health, metrics and face-analysis helpers."""

from __future__ import annotations

import argparse

from serp_cli.cli import exit_codes
from serp_cli.cli.context import CommandContext
from serp_cli.core.requests import AsmRequest, CompareRequest, LivenessRequest
from serp_cli.core.resolvers import resolve_confidence
from serp_cli.infra.photo_loader import load_photo


def handle_health(args: argparse.Namespace, ctx: CommandContext) -> int:
    ctx.write(ctx.anonymous_client().utility.health())
    return exit_codes.SUCCESS


def handle_metrics(args: argparse.Namespace, ctx: CommandContext) -> int:
    """Print platform metrics verbatim (the endpoint answers in plain text)."""
    metrics = ctx.client().utility.metrics()
    if isinstance(metrics, str):
        ctx.write_text(metrics)
    else:
        ctx.write(metrics)
    return exit_codes.SUCCESS


def handle_asm(args: argparse.Namespace, ctx: CommandContext) -> int:
    request = AsmRequest(photo=load_photo(args.photo))
    ctx.write(ctx.client().utility.asm(request))
    return exit_codes.SUCCESS


def handle_liveness(args: argparse.Namespace, ctx: CommandContext) -> int:
    request = LivenessRequest(
        photo1=load_photo(args.photo1, flag="photo1"),
        photo2=load_photo(args.photo2, flag="photo2"),
    )
    ctx.write(ctx.client().utility.liveness(request))
    return exit_codes.SUCCESS


def handle_compare(args: argparse.Namespace, ctx: CommandContext) -> int:
    photo1 = load_photo(args.photo1, flag="photo1")
    photo2 = load_photo(args.photo2, flag="photo2")
    request = CompareRequest(
        photo1=photo1,
        photo2=photo2,
        conf=resolve_confidence(args.conf) if args.conf is not None else None,
        liveness_photo1=args.liveness_photo1,
        liveness_photo2=args.liveness_photo2,
    )

    ctx.write(ctx.client().utility.compare(request))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Parser registration
# ---------------------------------------------------------------------------

def register(
    subparsers: argparse._SubParsersAction,
    parents: list[argparse.ArgumentParser],
) -> None:
    utility = subparsers.add_parser(
        "utility",
        parents=parents,
        help="access utility endpoints (health, metrics, checks)",
        description="Access utility endpoints (health, metrics, checks).",
    )
    utility.set_defaults(help_parser=utility)
    actions = utility.add_subparsers(title="commands", metavar="COMMAND")

    health = actions.add_parser("health", parents=parents, help="health check")
    health.set_defaults(handler=handle_health)

    metrics = actions.add_parser("metrics", parents=parents, help="platform metrics")
    metrics.set_defaults(handler=handle_metrics)

    asm = actions.add_parser("asm", parents=parents, help="age/sex/mood prediction")
    asm.add_argument("--photo", help="path to photo")
    asm.set_defaults(handler=handle_asm)

    liveness = actions.add_parser("liveness", parents=parents, help="run liveness check")
    liveness.add_argument("--photo1", help="path to first photo")
    liveness.add_argument("--photo2", help="path to second photo")
    liveness.set_defaults(handler=handle_liveness)

    compare = actions.add_parser(
        "compare", parents=parents, help="compare two faces",
    )
    compare.add_argument("--photo1", help="path to first photo")
    compare.add_argument("--photo2", help="path to second photo")
    compare.add_argument(
        "--conf", help="optional confidence threshold (name or integer value)",
    )
    compare.add_argument(
        "--liveness-photo1", action="store_true", help="mark first photo as liveness frame",
    )
    compare.add_argument(
        "--liveness-photo2", action="store_true", help="mark second photo as liveness frame",
    )
    compare.set_defaults(handler=handle_compare)
