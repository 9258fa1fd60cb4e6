"""Argument-parsing helpers shared by every command module.

Per-command flags default to ``None``, which is how handlers tell "not
supplied" apart from "supplied as a zero value".  Global options use
``argparse.SUPPRESS`` instead so they can appear before or after any
sub-command without a later parser overwriting an earlier value.
"""

from __future__ import annotations

import argparse

from serp_cli.core.query import DEFAULT_LIMIT, MAX_LIMIT, FlagValue

_TRUE_WORDS = frozenset({"1", "t", "true", "y", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "f", "false", "n", "no", "off"})


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

def parse_bool(raw: str) -> bool:
    """argparse ``type`` accepting the usual spellings of true and false."""
    lowered = raw.strip().lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {raw!r}")


def limit_type(raw: str) -> int:
    """argparse ``type`` for ``--limit`` (1..1000)."""
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {raw!r}") from None
    if not 1 <= value <= MAX_LIMIT:
        raise argparse.ArgumentTypeError(f"limit must be between 1 and {MAX_LIMIT}")
    return value


def non_negative_int(raw: str) -> int:
    """argparse ``type`` for offsets and counters."""
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError("value must not be negative")
    return value


# ---------------------------------------------------------------------------
# Flag declarations
# ---------------------------------------------------------------------------

def add_optional_bool(parser: argparse.ArgumentParser, flag: str, help_text: str) -> None:
    """Declare a tri-state boolean: absent, bare (true) or ``=true/false``."""
    parser.add_argument(
        flag,
        nargs="?",
        const=True,
        default=None,
        type=parse_bool,
        metavar="BOOL",
        help=help_text,
    )


def add_yes_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="skip the confirmation prompt",
    )


def build_global_options() -> argparse.ArgumentParser:
    """Parent parser holding options accepted at every command level."""
    parent = argparse.ArgumentParser(add_help=False, argument_default=argparse.SUPPRESS)
    group = parent.add_argument_group("global options")
    group.add_argument("--token", help="serptech.ru access token (SERP_ACCESS_TOKEN)")
    group.add_argument("--root-token", help="root API token (SERP_ROOT_TOKEN)")
    group.add_argument("--base-url", help="serptech.ru API base URL override (SERP_BASE_URL)")
    group.add_argument("--debug", action="store_true", help="debug cli and client (SERP_DEBUG)")
    group.add_argument(
        "-o",
        "--output",
        metavar="PATH",
        help="path to file for writing output result",
    )
    group.add_argument(
        "--limit",
        type=limit_type,
        help=f"the number of output items, maximum {MAX_LIMIT} entries per request "
        f"(default {DEFAULT_LIMIT})",
    )
    group.add_argument(
        "--offset",
        type=non_negative_int,
        help="a sequential number of an output item, to return a sampling after this one "
        "(default 0)",
    )
    return parent


# ---------------------------------------------------------------------------
# Namespace access
# ---------------------------------------------------------------------------

def explicit(args: argparse.Namespace, dest: str, name: str | None = None) -> FlagValue:
    """Wrap ``args.<dest>`` as a :class:`FlagValue` sent under *name*."""
    value = getattr(args, dest, None)
    return FlagValue(name=name or dest, is_set=value is not None, value=value)
