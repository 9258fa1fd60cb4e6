"""Allow ``python -m serp_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m serp_cli`` behaves identically to the ``serptech``
console script.
"""

from __future__ import annotations

from serp_cli.cli.app import cli

if __name__ == "__main__":
    cli()
