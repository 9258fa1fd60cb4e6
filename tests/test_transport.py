"""Tests for the httpx transport (infra/transport.py).

httpx is served by ``httpx.MockTransport``; no sockets are opened.
"""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from serp_cli.exceptions import ApiError, TransportError
from serp_cli.infra.transport import HttpTransport

BASE_URL = "https://api.example.test/v1/"


def _transport(handler: Callable[[httpx.Request], httpx.Response]) -> HttpTransport:
    client = httpx.Client(
        base_url=BASE_URL,
        headers=HttpTransport.default_headers("secret"),
        transport=httpx.MockTransport(handler),
    )
    return HttpTransport(client)


class TestRequest:
    def test_json_response_decoded(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"id": 1})

        body = _transport(handler).request("GET", "users/me/")
        assert body == {"id": 1}
        assert str(seen[0].url) == "https://api.example.test/v1/users/me/"
        assert seen[0].headers["Authorization"] == "Token secret"

    def test_query_params_sent(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        _transport(handler).request("GET", "entries/", params={"limit": 20, "q": ""})
        assert seen[0].url.params["limit"] == "20"
        assert seen[0].url.params["q"] == ""

    def test_json_body_sent(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        _transport(handler).request("PATCH", "users/1/", json={"is_active": False})
        assert json.loads(seen[0].content) == {"is_active": False}

    def test_multipart_upload(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={"ok": True})

        _transport(handler).request(
            "POST",
            "profiles/",
            data={"origin_id": "42"},
            files={"photo": ("face.jpg", b"img", "image/jpeg")},
        )
        request = seen[0]
        request.read()
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'name="origin_id"' in request.content
        assert b'filename="face.jpg"' in request.content

    def test_empty_body_is_empty_dict(self) -> None:
        body = _transport(lambda request: httpx.Response(204)).request("DELETE", "entries/1/")
        assert body == {}

    def test_text_body_returned_verbatim(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, text="serp_up 1\n", headers={"content-type": "text/plain"},
            )

        assert _transport(handler).request("GET", "utility/metrics/") == "serp_up 1\n"


class TestErrors:
    def test_status_error_uses_detail(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"detail": "Not found."})

        with pytest.raises(ApiError, match="Not found.") as exc_info:
            _transport(handler).request("GET", "origins/9/")
        assert exc_info.value.status_code == 404
        assert exc_info.value.hint is not None

    def test_status_error_plain_text(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, text="bad conf")

        with pytest.raises(ApiError, match="bad conf"):
            _transport(handler).request("GET", "entries/")

    def test_unauthorized_hint_mentions_token(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"detail": "Invalid token."})

        with pytest.raises(ApiError) as exc_info:
            _transport(handler).request("GET", "users/me/")
        assert "token" in (exc_info.value.hint or "").lower()

    def test_connect_error_mapped(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError, match="unable to reach"):
            _transport(handler).request("GET", "utility/health/")

    def test_timeout_mapped(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        with pytest.raises(TransportError, match="timed out"):
            _transport(handler).request("GET", "utility/health/")


class TestConstruction:
    def test_headers_without_token(self) -> None:
        headers = HttpTransport.default_headers("")
        assert "Authorization" not in headers
        assert headers["User-Agent"].startswith("serp-cli/")

    def test_context_manager_closes_client(self) -> None:
        client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        with HttpTransport(client):
            pass
        assert client.is_closed
