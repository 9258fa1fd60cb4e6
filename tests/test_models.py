"""Tests for domain models (core/models.py)."""

from __future__ import annotations

import dataclasses

import pytest

from serp_cli.core.models import Confidence, Liveness, Photo


# ---------------------------------------------------------------------------
# Confidence
# ---------------------------------------------------------------------------

class TestConfidence:
    def test_codes_are_contiguous(self) -> None:
        assert [int(level) for level in Confidence] == list(range(8))

    def test_platform_order(self) -> None:
        assert Confidence(0) is Confidence.NO_MATCH
        assert Confidence(4) is Confidence.HIGH_ACCURACY
        assert Confidence(7) is Confidence.NO_FACE

    def test_unknown_code(self) -> None:
        with pytest.raises(ValueError):
            Confidence(8)


# ---------------------------------------------------------------------------
# Liveness
# ---------------------------------------------------------------------------

class TestLiveness:
    def test_wire_values(self) -> None:
        assert [level.value for level in Liveness] == ["passed", "failed", "undetermined"]

    def test_compares_as_string(self) -> None:
        assert Liveness.FAILED == "failed"


# ---------------------------------------------------------------------------
# Photo
# ---------------------------------------------------------------------------

class TestPhoto:
    def test_frozen(self) -> None:
        photo = Photo(name="a.jpg", data=b"x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            photo.name = "b.jpg"  # type: ignore[misc]

    def test_default_content_type(self) -> None:
        assert Photo(name="a", data=b"x").content_type == "application/octet-stream"

    def test_as_file(self) -> None:
        photo = Photo(name="a.png", data=b"\x89PNG", content_type="image/png")
        assert photo.as_file() == ("a.png", b"\x89PNG", "image/png")

    def test_repr_hides_bytes(self) -> None:
        photo = Photo(name="a.jpg", data=b"0123456789")
        assert repr(photo) == "Photo(name='a.jpg', size=10)"
