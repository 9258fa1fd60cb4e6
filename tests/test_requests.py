"""Tests for request values and the update-vs-patch contracts (core/requests.py)."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from serp_cli.core.models import Confidence, Liveness, Photo
from serp_cli.core.requests import (
    CompareRequest,
    CreateTokenRequest,
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
from serp_cli.exceptions import (
    InvalidFieldValueError,
    MissingRequiredFieldError,
    ValidationError,
)


def _photo(name: str = "face.jpg") -> Photo:
    return Photo(name=name, data=b"img", content_type="image/jpeg")


# ---------------------------------------------------------------------------
# Field validators
# ---------------------------------------------------------------------------

class TestRequireId:
    def test_positive(self) -> None:
        assert require_id(3, "origin id") == 3

    def test_missing(self) -> None:
        with pytest.raises(MissingRequiredFieldError, match="origin id is required"):
            require_id(None, "origin id")

    @pytest.mark.parametrize("value", [0, -4])
    def test_non_positive(self, value: int) -> None:
        with pytest.raises(InvalidFieldValueError):
            require_id(value, "origin id")


class TestRequireText:
    def test_trimmed(self) -> None:
        assert require_text("  abc ", "profile-id") == "abc"

    def test_missing(self) -> None:
        with pytest.raises(MissingRequiredFieldError):
            require_text(None, "profile-id")

    def test_blank(self) -> None:
        with pytest.raises(InvalidFieldValueError, match="blank"):
            require_text("   ", "profile-id")


# ---------------------------------------------------------------------------
# Full update vs patch
# ---------------------------------------------------------------------------

class TestUserUpdateRequest:
    def test_from_flags(self) -> None:
        request = UserUpdateRequest.from_flags(" admin ", False)
        assert request == UserUpdateRequest(username="admin", is_active=False)
        assert request.to_payload() == {"username": "admin", "is_active": False}

    def test_missing_is_active(self) -> None:
        with pytest.raises(MissingRequiredFieldError, match="is-active"):
            UserUpdateRequest.from_flags("admin", None)

    def test_missing_username(self) -> None:
        with pytest.raises(MissingRequiredFieldError, match="username"):
            UserUpdateRequest.from_flags(None, True)

    def test_blank_username(self) -> None:
        with pytest.raises(InvalidFieldValueError):
            UserUpdateRequest.from_flags("   ", True)


class TestUserPatchRequest:
    def test_same_input_as_failed_update_succeeds(self) -> None:
        request = UserPatchRequest(username="admin")
        request.validate()
        assert request.to_payload() == {"username": "admin"}

    def test_only_is_active(self) -> None:
        assert UserPatchRequest(is_active=False).to_payload() == {"is_active": False}

    def test_all_absent_is_valid(self) -> None:
        request = UserPatchRequest()
        request.validate()
        assert request.to_payload() == {}

    def test_blank_username_rejected(self) -> None:
        with pytest.raises(InvalidFieldValueError):
            UserPatchRequest(username=" ").validate()


# ---------------------------------------------------------------------------
# Origins
# ---------------------------------------------------------------------------

class TestOriginUpdateRequest:
    def test_payload_excludes_id_and_unset_fields(self) -> None:
        request = OriginUpdateRequest(id=3, name="Lobby", is_active=False)
        request.validate()
        assert request.to_payload() == {"name": "Lobby", "is_active": False}

    def test_zero_values_are_sent(self) -> None:
        request = OriginUpdateRequest(id=3, min_facesize=0, create_ha=False)
        assert request.to_payload() == {"min_facesize": 0, "create_ha": False}

    def test_payload_follows_field_order(self) -> None:
        request = OriginUpdateRequest(id=1, create_junk=True, name="A", entry_storage_days=7)
        assert list(request.to_payload()) == ["name", "entry_storage_days", "create_junk"]

    def test_invalid_id(self) -> None:
        with pytest.raises(InvalidFieldValueError):
            OriginUpdateRequest(id=0).validate()

    def test_blank_name(self) -> None:
        with pytest.raises(InvalidFieldValueError, match="origin name"):
            OriginUpdateRequest(id=1, name="").validate()

    def test_negative_storage_days(self) -> None:
        with pytest.raises(InvalidFieldValueError, match="entry-storage-days"):
            OriginUpdateRequest(id=1, entry_storage_days=-1).validate()


class TestOriginCreateRequest:
    def test_defaults(self) -> None:
        assert OriginCreateRequest(name="Warehouse").to_payload() == {
            "name": "Warehouse",
            "is_active": True,
        }

    def test_blank_name(self) -> None:
        with pytest.raises(ValidationError):
            OriginCreateRequest(name=" ").validate()


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------

class TestStatsSourcesRequest:
    def test_wire_values(self) -> None:
        request = StatsSourcesRequest(
            conf=Confidence.EXACT,
            liveness=Liveness.PASSED,
            source=0,
            date_from=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )
        assert request.to_payload() == {
            "conf": 2,
            "liveness": "passed",
            "source": 0,
            "date_from": "2024-01-01T00:00:00Z",
        }

    def test_empty(self) -> None:
        assert StatsSourcesRequest().to_payload() == {}

    def test_inverted_range_passed_through(self) -> None:
        request = StatsSourcesRequest(
            date_from=datetime(2024, 2, 1, tzinfo=timezone.utc),
            date_to=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )
        request.validate()
        assert request.to_payload() == {
            "date_from": "2024-02-01T00:00:00Z",
            "date_to": "2024-01-01T00:00:00Z",
        }


# ---------------------------------------------------------------------------
# Uploads
# ---------------------------------------------------------------------------

class TestUploadRequests:
    def test_profile_create_form_and_files(self) -> None:
        request = ProfileCreateRequest(photo=_photo(), origin_id=42, create_ha=True)
        assert request.to_form() == {"origin_id": "42", "create_ha": "true"}
        assert request.to_files() == {"photo": ("face.jpg", b"img", "image/jpeg")}

    def test_profile_create_requires_origin(self) -> None:
        with pytest.raises(InvalidFieldValueError):
            ProfileCreateRequest(photo=_photo(), origin_id=0).validate()

    def test_profile_search_second_image(self) -> None:
        request = ProfileSearchRequest(photo=_photo(), second_photo=_photo("b.jpg"))
        assert set(request.to_files()) == {"photo", "second_image"}

    def test_profile_search_single_image(self) -> None:
        assert set(ProfileSearchRequest(photo=_photo()).to_files()) == {"photo"}

    def test_reinit_negative_min_conf(self) -> None:
        with pytest.raises(InvalidFieldValueError, match="min-conf"):
            ProfileReinitRequest(photo=_photo(), min_conf=-1).validate()

    def test_compare_form(self) -> None:
        request = CompareRequest(
            photo1=_photo(), photo2=_photo("b.jpg"), conf=Confidence.HIGH_ACCURACY,
        )
        assert request.to_form() == {
            "conf": "4",
            "liveness_photo1": "false",
            "liveness_photo2": "false",
        }

    def test_create_token_payload(self) -> None:
        assert CreateTokenRequest(permanent=True).to_payload() == {"permanent": True}
