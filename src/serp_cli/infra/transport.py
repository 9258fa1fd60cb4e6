"""httpx-backed implementation of :class:`~serp_cli.core.protocols.Transport`.

This module is the **only** place in the codebase that imports
``httpx``.  All httpx exceptions are caught here and re-raised as typed
:class:`~serp_cli.exceptions.SerpCliError` subclasses, so nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from serp_cli.exceptions import ApiError, TransportError, hint_for_status
from serp_cli.utils.logging import get_logger
from serp_cli.version import __version__

logger = get_logger(__name__)


class HttpTransport:
    """Concrete :class:`Transport` wrapping an ``httpx.Client``.

    Usage::

        transport = HttpTransport.create("https://api.serptech.ru/v1/", token)
        body = transport.request("GET", "users/me/")

    The ``httpx.Client`` is injected for testability; pass one built
    with ``httpx.MockTransport`` to avoid any network access.
    """

    def __init__(self, client: httpx.Client) -> None:
        self._client: httpx.Client = client

    @classmethod
    def create(cls, base_url: str, token: str, *, timeout: float = 30.0) -> HttpTransport:
        """Build a transport authenticated with *token*."""
        client = httpx.Client(
            base_url=base_url,
            headers=cls.default_headers(token),
            timeout=timeout,
        )
        return cls(client)

    @staticmethod
    def default_headers(token: str) -> dict[str, str]:
        """Headers sent with every request."""
        headers = {
            "Accept": "application/json",
            "User-Agent": f"serp-cli/{__version__}",
        }
        if token:
            headers["Authorization"] = f"Token {token}"
        return headers

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

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
        """Send one request and decode its body.

        Raises
        ------
        ApiError
            When the response status is not 2xx.
        TransportError
            When the request could not be completed.
        """
        logger.debug("api.request", method=method, path=path, params=dict(params or {}))
        try:
            response = self._client.request(
                method,
                path,
                params=dict(params) if params else None,
                json=dict(json) if json is not None else None,
                data=dict(data) if data else None,
                files=dict(files) if files else None,
            )
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"request to {path} timed out",
                hint="Raise SERP_TIMEOUT or check your network connection.",
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"unable to reach the SERP API: {exc}",
                hint="Check --base-url / SERP_BASE_URL and your network connection.",
            ) from exc

        logger.debug("api.response", method=method, path=path, status=response.status_code)

        if response.is_error:
            self._raise_for_status(response)

        return self._decode(response)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Response handling
    # ------------------------------------------------------------------

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        """Return decoded JSON, ``{}`` for an empty body, else raw text."""
        if not response.content:
            return {}
        content_type = response.headers.get("content-type", "")
        if "json" in content_type:
            try:
                return response.json()
            except ValueError:
                return response.text
        return response.text

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        """Translate an error response into :class:`ApiError`.  Always raises."""
        detail = response.text.strip() or response.reason_phrase
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            for key in ("detail", "message", "error"):
                if body.get(key):
                    detail = str(body[key])
                    break
        raise ApiError(
            f"API request failed with status {response.status_code}: {detail}",
            status_code=response.status_code,
            hint=hint_for_status(response.status_code),
        )
