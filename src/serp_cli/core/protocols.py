"""Protocols (interfaces) consumed by the API resource layer.

These define the contracts that transport adapters must satisfy.
Resource classes depend ONLY on these protocols, never on a concrete
HTTP library, so tests can substitute an in-memory fake.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class Transport(Protocol):
    """Contract for the HTTP backend talking to the SERP API.

    Any object that implements :meth:`request` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Mapping[str, Any] | None = None,
        data: Mapping[str, str] | None = None,
        files: Mapping[str, tuple[str, bytes, str]] | None = None,
    ) -> Any:
        """Send one request and return the decoded response body.

        JSON responses are decoded; an empty body yields ``{}``; any
        other content type is returned as text.

        Raises
        ------
        ApiError
            When the API answers with a non-success status code.
        TransportError
            When the API cannot be reached.
        """
        ...  # pragma: no cover
