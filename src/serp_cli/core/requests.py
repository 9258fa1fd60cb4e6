"""Typed request values and their validation contracts.

Two mutation shapes guard the same kind of resource change:

* **Full update**: every required field must be explicitly supplied.
  :meth:`UserUpdateRequest.from_flags` refuses to build a request when
  one is missing.
* **Patch**: every field is optional; ``None`` means "not supplied"
  and is never serialized.  An all-absent patch is valid.

All validation happens here, before any network call is attempted.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any

from serp_cli.core.models import Confidence, Liveness, Photo
from serp_cli.core.resolvers import format_timestamp
from serp_cli.exceptions import InvalidFieldValueError, MissingRequiredFieldError


# ---------------------------------------------------------------------------
# Field validators
# ---------------------------------------------------------------------------

def require_id(value: int | None, label: str) -> int:
    """Return a positive integer identifier or raise."""
    if value is None:
        raise MissingRequiredFieldError(f"{label} is required")
    if value <= 0:
        raise InvalidFieldValueError(f"{label} must be a positive integer, got {value}")
    return value


def require_text(value: str | None, label: str) -> str:
    """Return a trimmed, non-blank string or raise."""
    if value is None:
        raise MissingRequiredFieldError(f"{label} is required")
    trimmed = value.strip()
    if not trimmed:
        raise InvalidFieldValueError(f"{label} must not be blank")
    return trimmed


def _check_not_blank(value: str | None, label: str) -> None:
    if value is not None and not value.strip():
        raise InvalidFieldValueError(f"{label} must not be blank")


def _check_non_negative(value: int | None, label: str) -> None:
    if value is not None and value < 0:
        raise InvalidFieldValueError(f"{label} must not be negative, got {value}")


def _wire(value: Any) -> Any:
    if isinstance(value, Confidence):
        return int(value)
    if isinstance(value, Liveness):
        return value.value
    if isinstance(value, datetime):
        return format_timestamp(value)
    return value


def _form(value: Any) -> str:
    """Render a scalar as a multipart form field."""
    value = _wire(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class _OptionalFields:
    """Mixin serializing every non-``None`` dataclass field, in order."""

    _excluded: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        for field in fields(self):  # type: ignore[arg-type]
            if field.name in self._excluded:
                continue
            value = getattr(self, field.name)
            if value is not None and not isinstance(value, Photo):
                payload[field.name] = _wire(value)
        return payload

    def to_form(self) -> dict[str, str]:
        return {key: _form(value) for key, value in self.to_payload().items()}

    def validate(self) -> None:
        """Requests without cross-field rules accept any constructed value."""


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class UserUpdateRequest(_OptionalFields):
    """Full replacement of a user's mutable fields."""

    username: str
    is_active: bool

    @classmethod
    def from_flags(cls, username: str | None, is_active: bool | None) -> UserUpdateRequest:
        """Build a validated request, refusing any missing required flag.

        Raises
        ------
        MissingRequiredFieldError
            If *username* or *is_active* was not supplied.
        InvalidFieldValueError
            If *username* is blank.
        """
        if username is None:
            raise MissingRequiredFieldError("username is required")
        if is_active is None:
            raise MissingRequiredFieldError(
                "is-active is required",
                hint="Full updates replace every field; use 'users patch' to change one.",
            )
        request = cls(username=username.strip(), is_active=is_active)
        request.validate()
        return request

    def validate(self) -> None:
        _check_not_blank(self.username, "username")


@dataclass(frozen=True, slots=True)
class UserPatchRequest(_OptionalFields):
    """Partial update of a user; only supplied fields are sent."""

    username: str | None = None
    is_active: bool | None = None

    def validate(self) -> None:
        _check_not_blank(self.username, "username")


# ---------------------------------------------------------------------------
# Origins
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OriginUpdateRequest(_OptionalFields):
    """Partial update of an origin's configuration."""

    _excluded = ("id",)

    id: int
    name: str | None = None
    is_active: bool | None = None
    min_facesize: int | None = None
    entry_storage_days: int | None = None
    create_min_facesize: int | None = None
    create_ha: bool | None = None
    create_junk: bool | None = None

    def validate(self) -> None:
        require_id(self.id, "origin id")
        _check_not_blank(self.name, "origin name")
        _check_non_negative(self.min_facesize, "min-facesize")
        _check_non_negative(self.entry_storage_days, "entry-storage-days")
        _check_non_negative(self.create_min_facesize, "create-min-facesize")


@dataclass(frozen=True, slots=True)
class OriginCreateRequest(_OptionalFields):
    """New origin; anything not supplied falls back to server defaults."""

    name: str
    is_active: bool = True
    min_facesize: int | None = None
    create_min_facesize: int | None = None
    create_ha: bool | None = None
    create_junk: bool | None = None

    def validate(self) -> None:
        _check_not_blank(self.name, "origin name")
        _check_non_negative(self.min_facesize, "min-facesize")
        _check_non_negative(self.create_min_facesize, "create-min-facesize")


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StatsSourcesRequest(_OptionalFields):
    """Filters for per-origin entry statistics."""

    person_ids: str | None = None
    conf: Confidence | None = None
    liveness: Liveness | None = None
    source: int | None = None
    entry_id_from: int | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProfileCreateRequest(_OptionalFields):
    """Create a profile from a photo uploaded to an origin."""

    photo: Photo
    origin_id: int
    create_min_facesize: int | None = None
    create_ha: bool | None = None
    create_junk: bool | None = None

    def validate(self) -> None:
        require_id(self.origin_id, "origin-id")
        _check_non_negative(self.create_min_facesize, "create-min-facesize")

    def to_files(self) -> dict[str, tuple[str, bytes, str]]:
        return {"photo": self.photo.as_file()}


@dataclass(frozen=True, slots=True)
class ProfileSearchRequest(_OptionalFields):
    """Search profiles by a photo and an optional second image."""

    photo: Photo
    second_photo: Photo | None = None

    def to_files(self) -> dict[str, tuple[str, bytes, str]]:
        files = {"photo": self.photo.as_file()}
        if self.second_photo is not None:
            files["second_image"] = self.second_photo.as_file()
        return files


@dataclass(frozen=True, slots=True)
class ProfileReinitRequest(_OptionalFields):
    """Replace the reference photo of an existing profile."""

    photo: Photo
    create_min_facesize: int | None = None
    min_conf: int | None = None

    def validate(self) -> None:
        _check_non_negative(self.create_min_facesize, "create-min-facesize")
        _check_non_negative(self.min_conf, "min-conf")

    def to_files(self) -> dict[str, tuple[str, bytes, str]]:
        return {"photo": self.photo.as_file()}


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CreateTokenRequest(_OptionalFields):
    permanent: bool = False


# ---------------------------------------------------------------------------
# Utility
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AsmRequest(_OptionalFields):
    """Age / sex / mood prediction for a single photo."""

    photo: Photo

    def to_files(self) -> dict[str, tuple[str, bytes, str]]:
        return {"photo": self.photo.as_file()}


@dataclass(frozen=True, slots=True)
class LivenessRequest(_OptionalFields):
    """Liveness check over two consecutive frames."""

    photo1: Photo
    photo2: Photo

    def to_files(self) -> dict[str, tuple[str, bytes, str]]:
        return {"photo1": self.photo1.as_file(), "photo2": self.photo2.as_file()}


@dataclass(frozen=True, slots=True)
class CompareRequest(_OptionalFields):
    """One-to-one face comparison."""

    photo1: Photo
    photo2: Photo
    conf: Confidence | None = None
    liveness_photo1: bool = False
    liveness_photo2: bool = False

    def to_files(self) -> dict[str, tuple[str, bytes, str]]:
        return {"photo1": self.photo1.as_file(), "photo2": self.photo2.as_file()}
