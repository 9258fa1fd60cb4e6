"""Read photos from disk into :class:`~serp_cli.core.models.Photo` values."""

from __future__ import annotations

import mimetypes
from pathlib import Path

from serp_cli.core.models import Photo
from serp_cli.exceptions import MissingRequiredFieldError, PhotoReadError


def load_photo(path: str | Path | None, *, flag: str = "photo") -> Photo:
    """Load the image at *path*.

    *flag* names the option the path came from and is used in error
    messages.

    Raises
    ------
    MissingRequiredFieldError
        If *path* is ``None`` or blank.
    PhotoReadError
        If the file is missing, is not a regular file, is empty, or
        cannot be read.
    """
    if path is None or not str(path).strip():
        raise MissingRequiredFieldError(
            f"{flag} is required",
            hint=f"Supply --{flag} /path/to/image",
        )

    photo_path = Path(path).expanduser()
    if not photo_path.is_file():
        raise PhotoReadError(f"photo not found: {photo_path}")

    try:
        data = photo_path.read_bytes()
    except OSError as exc:
        raise PhotoReadError(f"unable to read photo {photo_path}: {exc}") from exc

    if not data:
        raise PhotoReadError(f"photo is empty: {photo_path}")

    content_type, _ = mimetypes.guess_type(photo_path.name)
    return Photo(
        name=photo_path.name,
        data=data,
        content_type=content_type or "application/octet-stream",
    )
