"""Per-invocation command context.

Holds the resolved settings and global options for exactly one CLI run
and hands out API clients authenticated with the right token.  Nothing
here is process-wide: :func:`~serp_cli.cli.app.main` builds a fresh
context for every call.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from serp_cli.cli.output import write_output, write_text
from serp_cli.core.query import DEFAULT_LIMIT, QueryBuilder
from serp_cli.infra.client import SerpClient
from serp_cli.settings import Settings, load_settings
from serp_cli.utils.logging import get_logger

logger = get_logger(__name__)

ClientFactory = Callable[[Settings, str], SerpClient]


@dataclass
class CommandContext:
    """Everything a command handler needs besides its own flags."""

    settings: Settings
    output_path: str | None = None
    limit: int = DEFAULT_LIMIT
    offset: int = 0
    client_factory: ClientFactory = SerpClient.from_settings
    _clients: list[SerpClient] = field(default_factory=list, repr=False)

    @classmethod
    def from_args(
        cls,
        args: argparse.Namespace,
        client_factory: ClientFactory | None = None,
    ) -> CommandContext:
        """Resolve global options; explicit flags win over ``SERP_*`` variables."""
        settings = load_settings(
            access_token=getattr(args, "token", None),
            root_token=getattr(args, "root_token", None),
            base_url=getattr(args, "base_url", None),
            debug=True if getattr(args, "debug", False) else None,
        )
        return cls(
            settings=settings,
            output_path=getattr(args, "output", None),
            limit=getattr(args, "limit", DEFAULT_LIMIT),
            offset=getattr(args, "offset", 0),
            client_factory=client_factory or SerpClient.from_settings,
        )

    # ------------------------------------------------------------------
    # Clients
    # ------------------------------------------------------------------

    def client(self) -> SerpClient:
        """Client using the access token, or the root token as fallback."""
        return self._make(self.settings.require_any_token(), "access")

    def root_client(self) -> SerpClient:
        """Client that must use the root token."""
        return self._make(self.settings.require_root_token(), "root")

    def anonymous_client(self) -> SerpClient:
        """Client sending whatever token is configured, possibly none."""
        return self._make(self.settings.effective_access_token, "anonymous")

    def _make(self, token: str, kind: str) -> SerpClient:
        logger.debug("client.create", kind=kind, base_url=self.settings.base_url)
        client = self.client_factory(self.settings, token)
        self._clients.append(client)
        return client

    def close(self) -> None:
        for client in self._clients:
            client.close()
        self._clients.clear()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def pagination(self) -> QueryBuilder:
        return QueryBuilder.pagination(self.limit, self.offset)

    def write(self, data: Any) -> None:
        write_output(data, self.output_path)

    def write_text(self, text: str) -> None:
        write_text(text, self.output_path)
