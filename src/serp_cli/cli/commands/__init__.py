"""Command handlers, one module per API resource.

Each module exposes ``register(subparsers, parents)``, which adds its
parsers and binds a ``handler(args, ctx) -> int`` to every leaf.
"""

from __future__ import annotations

from serp_cli.cli.commands import entries, origins, profiles, tokens, users, utility, version

COMMAND_MODULES = (entries, origins, profiles, tokens, users, utility, version)

__all__: list[str] = ["COMMAND_MODULES"]
