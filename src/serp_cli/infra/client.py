"""Resource-oriented SERP API client.

Each resource group maps typed requests onto endpoint paths and hands
them to an injected :class:`~serp_cli.core.protocols.Transport`.
Mutating operations re-validate their request so that an invalid value
can never reach the wire, whichever caller built it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from serp_cli.core.protocols import Transport
from serp_cli.core.requests import (
    AsmRequest,
    CompareRequest,
    CreateTokenRequest,
    LivenessRequest,
    OriginCreateRequest,
    OriginUpdateRequest,
    ProfileCreateRequest,
    ProfileReinitRequest,
    ProfileSearchRequest,
    StatsSourcesRequest,
    UserPatchRequest,
    UserUpdateRequest,
    require_id,
    require_text,
)
from serp_cli.infra.transport import HttpTransport
from serp_cli.settings import Settings

Query = Mapping[str, Any]


def _segment(value: str) -> str:
    """Quote a user-supplied identifier for use as a single path segment."""
    return quote(value, safe="")


class _Resource:
    def __init__(self, transport: Transport) -> None:
        self._transport: Transport = transport


# ---------------------------------------------------------------------------
# Resource groups
# ---------------------------------------------------------------------------

class EntriesApi(_Resource):
    """Recognition entries and their statistics."""

    def list(self, query: Query) -> Any:
        return self._transport.request("GET", "entries/", params=query)

    def delete(self, entry_id: int) -> None:
        require_id(entry_id, "entry id")
        self._transport.request("DELETE", f"entries/{entry_id}/")

    def stats_sources(self, request: StatsSourcesRequest) -> Any:
        request.validate()
        return self._transport.request(
            "GET", "entries/stats/sources/", params=request.to_payload(),
        )


class OriginsApi(_Resource):
    """Upload sources and their recognition settings."""

    def list(self, query: Query) -> Any:
        return self._transport.request("GET", "origins/", params=query)

    def get(self, origin_id: int) -> Any:
        require_id(origin_id, "origin id")
        return self._transport.request("GET", f"origins/{origin_id}/")

    def create(self, request: OriginCreateRequest) -> Any:
        request.validate()
        return self._transport.request("POST", "origins/", json=request.to_payload())

    def update(self, request: OriginUpdateRequest) -> Any:
        request.validate()
        return self._transport.request(
            "PATCH", f"origins/{request.id}/", json=request.to_payload(),
        )

    def delete(self, origin_id: int) -> None:
        require_id(origin_id, "origin id")
        self._transport.request("DELETE", f"origins/{origin_id}/")


class ProfilesApi(_Resource):
    """Stored facial identities."""

    def create(self, request: ProfileCreateRequest) -> Any:
        request.validate()
        return self._transport.request(
            "POST", "profiles/", data=request.to_form(), files=request.to_files(),
        )

    def search(self, request: ProfileSearchRequest) -> Any:
        return self._transport.request(
            "POST", "profiles/search/", files=request.to_files(),
        )

    def delete(self, profile_id: str) -> None:
        profile_id = require_text(profile_id, "profile-id")
        self._transport.request("DELETE", f"profiles/{_segment(profile_id)}/")

    def reinit(self, profile_id: str, request: ProfileReinitRequest) -> Any:
        profile_id = require_text(profile_id, "profile-id")
        request.validate()
        return self._transport.request(
            "POST",
            f"profiles/{_segment(profile_id)}/reinit/",
            data=request.to_form(),
            files=request.to_files(),
        )


class TokensApi(_Resource):
    """Access and stream tokens.  Both kinds share one endpoint layout."""

    def list_access(self, query: Query | None = None) -> Any:
        return self._list("access", query)

    def create_access(self, request: CreateTokenRequest) -> Any:
        return self._create("access", request)

    def delete_access(self, key: str) -> None:
        self._delete("access", key)

    def list_streams(self, query: Query | None = None) -> Any:
        return self._list("streams", query)

    def create_stream(self, request: CreateTokenRequest) -> Any:
        return self._create("streams", request)

    def delete_stream(self, key: str) -> None:
        self._delete("streams", key)

    def _list(self, kind: str, query: Query | None) -> Any:
        return self._transport.request("GET", f"tokens/{kind}/", params=query)

    def _create(self, kind: str, request: CreateTokenRequest) -> Any:
        return self._transport.request("POST", f"tokens/{kind}/", json=request.to_payload())

    def _delete(self, kind: str, key: str) -> None:
        key = require_text(key, "token key")
        self._transport.request("DELETE", f"tokens/{kind}/{_segment(key)}/")


class UsersApi(_Resource):
    """Current user, user management and platform version."""

    def me(self) -> Any:
        return self._transport.request("GET", "users/me/")

    def statistics(self) -> Any:
        return self._transport.request("GET", "users/statistics/")

    def version(self) -> Any:
        return self._transport.request("GET", "version/")

    def list(self, query: Query) -> Any:
        return self._transport.request("GET", "users/", params=query)

    def get(self, user_id: int) -> Any:
        require_id(user_id, "user id")
        return self._transport.request("GET", f"users/{user_id}/")

    def update(self, user_id: int, request: UserUpdateRequest) -> Any:
        require_id(user_id, "user id")
        request.validate()
        return self._transport.request("PUT", f"users/{user_id}/", json=request.to_payload())

    def partial_update(self, user_id: int, request: UserPatchRequest) -> Any:
        require_id(user_id, "user id")
        request.validate()
        return self._transport.request("PATCH", f"users/{user_id}/", json=request.to_payload())


class UtilityApi(_Resource):
    """Health, metrics and stateless face-analysis helpers."""

    def health(self) -> Any:
        return self._transport.request("GET", "utility/health/")

    def metrics(self) -> Any:
        return self._transport.request("GET", "utility/metrics/")

    def asm(self, request: AsmRequest) -> Any:
        return self._transport.request("POST", "utility/asm/", files=request.to_files())

    def liveness(self, request: LivenessRequest) -> Any:
        return self._transport.request("POST", "utility/liveness/", files=request.to_files())

    def compare(self, request: CompareRequest) -> Any:
        return self._transport.request(
            "POST", "utility/compare/", data=request.to_form(), files=request.to_files(),
        )


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class SerpClient:
    """Entry point grouping every resource behind one transport."""

    def __init__(self, transport: Transport) -> None:
        self.transport: Transport = transport
        self.entries = EntriesApi(transport)
        self.origins = OriginsApi(transport)
        self.profiles = ProfilesApi(transport)
        self.tokens = TokensApi(transport)
        self.users = UsersApi(transport)
        self.utility = UtilityApi(transport)

    @classmethod
    def from_settings(cls, settings: Settings, token: str) -> SerpClient:
        """Build a client talking to ``settings.base_url`` with *token*."""
        transport = HttpTransport.create(settings.base_url, token, timeout=settings.timeout)
        return cls(transport)

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()
