"""``serptech profiles`` — profile lifecycle.

Example::

    serptech profiles create --photo img/profile.png --origin-id 42
"""

from __future__ import annotations

import argparse

from serp_cli.cli import exit_codes
from serp_cli.cli.console import stdout
from serp_cli.cli.context import CommandContext
from serp_cli.cli.options import add_optional_bool, add_yes_flag
from serp_cli.cli.prompts import confirm_deletion
from serp_cli.core.requests import (
    ProfileCreateRequest,
    ProfileReinitRequest,
    ProfileSearchRequest,
    require_id,
    require_text,
)
from serp_cli.infra.photo_loader import load_photo


def handle_create(args: argparse.Namespace, ctx: CommandContext) -> int:
    """Create a profile from ``--photo`` within ``--origin-id``."""
    origin_id = require_id(args.origin_id, "origin-id")
    photo = load_photo(args.photo)
    request = ProfileCreateRequest(
        photo=photo,
        origin_id=origin_id,
        create_min_facesize=args.create_min_facesize,
        create_ha=args.create_ha,
        create_junk=args.create_junk,
    )
    request.validate()

    client = ctx.client()
    ctx.write(client.profiles.create(request))
    return exit_codes.SUCCESS


def handle_search(args: argparse.Namespace, ctx: CommandContext) -> int:
    primary = load_photo(args.photo)
    secondary = load_photo(args.second_photo, flag="second-photo") if args.second_photo else None
    request = ProfileSearchRequest(photo=primary, second_photo=secondary)

    client = ctx.client()
    ctx.write(client.profiles.search(request))
    return exit_codes.SUCCESS


def handle_delete(args: argparse.Namespace, ctx: CommandContext) -> int:
    profile_id = require_text(args.profile_id, "profile-id")
    confirm_deletion(f"profile {profile_id}", assume_yes=args.yes)

    client = ctx.client()
    client.profiles.delete(profile_id)
    stdout.out(f"profile {profile_id} successfully deleted\n")
    return exit_codes.SUCCESS


def handle_reinit(args: argparse.Namespace, ctx: CommandContext) -> int:
    """Replace a profile's reference photo.  An empty reply is not an error."""
    profile_id = require_text(args.profile_id, "profile-id")
    photo = load_photo(args.photo)
    request = ProfileReinitRequest(
        photo=photo,
        create_min_facesize=args.create_min_facesize,
        min_conf=args.min_conf,
    )
    request.validate()

    client = ctx.client()
    response = client.profiles.reinit(profile_id, request)
    if not response:
        stdout.out("reinit completed\n")
        return exit_codes.SUCCESS
    ctx.write(response)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Parser registration
# ---------------------------------------------------------------------------

def _add_photo_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-p", "--photo", help="path to photo")


def register(
    subparsers: argparse._SubParsersAction,
    parents: list[argparse.ArgumentParser],
) -> None:
    profiles = subparsers.add_parser(
        "profiles",
        parents=parents,
        help="manage recognition profiles",
        description="Provides helpers for working with the profile lifecycle.",
        epilog=__doc__.split("Example::", 1)[1],
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    profiles.set_defaults(help_parser=profiles)
    actions = profiles.add_subparsers(title="actions", metavar="ACTION")

    create = actions.add_parser("create", parents=parents, help="create a profile from a photo")
    _add_photo_flag(create)
    create.add_argument("--origin-id", type=int, help="origin identifier")
    create.add_argument(
        "--create-min-facesize", type=int, help="minimum face size when creating",
    )
    add_optional_bool(create, "--create-ha", "allow creation when result confidence is HA")
    add_optional_bool(create, "--create-junk", "allow creation when result confidence is junk")
    create.set_defaults(handler=handle_create)

    search = actions.add_parser("search", parents=parents, help="search profiles by photo")
    _add_photo_flag(search)
    search.add_argument("--second-photo", help="optional path to secondary photo")
    search.set_defaults(handler=handle_search)

    delete = actions.add_parser("delete", parents=parents, help="delete a profile")
    delete.add_argument("--profile-id", help="profile identifier")
    add_yes_flag(delete)
    delete.set_defaults(handler=handle_delete)

    reinit = actions.add_parser(
        "reinit", parents=parents, help="reinitialize a profile with a new photo",
    )
    reinit.add_argument("--profile-id", help="profile identifier")
    _add_photo_flag(reinit)
    reinit.add_argument(
        "--create-min-facesize", type=int, help="minimum face size when reinitializing",
    )
    reinit.add_argument("--min-conf", type=int, help="minimum match confidence for reinit")
    reinit.set_defaults(handler=handle_reinit)
