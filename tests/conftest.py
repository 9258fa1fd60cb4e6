"""Shared pytest fixtures and configuration for the serp-cli test suite.

Guidelines
----------
* No internet access in any test.
* The API client is mocked at the ``client_factory`` seam, or httpx is
  served by ``httpx.MockTransport``.
* Core tests must be pure, with no side effects.
* Tests must not depend on the caller's ``SERP_*`` environment.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from serp_cli.settings import Settings
from serp_cli.utils.logging import configure_logging

_SERP_VARS = (
    "SERP_ACCESS_TOKEN",
    "SERP_ROOT_TOKEN",
    "SERP_BASE_URL",
    "SERP_DEBUG",
    "SERP_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _SERP_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def _quiet_logging() -> None:
    configure_logging(debug=False)


class FakeClientFactory:
    """Records every client request and hands out one shared mock."""

    def __init__(self) -> None:
        self.client = MagicMock(name="SerpClient")
        self.tokens: list[str] = []
        self.settings: list[Settings] = []

    def __call__(self, settings: Settings, token: str) -> MagicMock:
        self.settings.append(settings)
        self.tokens.append(token)
        return self.client


@pytest.fixture
def factory() -> FakeClientFactory:
    return FakeClientFactory()


@pytest.fixture
def photo_file(tmp_path: Path) -> Path:
    path = tmp_path / "face.jpg"
    path.write_bytes(b"\xff\xd8\xff\xe0fake-jpeg")
    return path


@pytest.fixture
def second_photo_file(tmp_path: Path) -> Path:
    path = tmp_path / "face2.png"
    path.write_bytes(b"\x89PNGfake-png")
    return path
