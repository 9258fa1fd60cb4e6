"""Pure resolvers turning raw flag strings into typed request values.

Every function in this module is a **pure** transformation: no I/O,
no environment lookups, fully deterministic.  Failures are reported by
raising a :class:`~serp_cli.exceptions.ResolutionError` subclass; the
CLI error boundary decides what happens next.

Confidence accepts a numeric fallback while liveness does not.  The two
resolvers are intentionally kept asymmetric.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from serp_cli.core.models import Confidence, Liveness
from serp_cli.exceptions import (
    MissingValueError,
    OutOfRangeError,
    UnknownValueError,
    UnparseableDateError,
)


# ---------------------------------------------------------------------------
# Confidence
# ---------------------------------------------------------------------------

CONFIDENCE_ALIASES: dict[str, Confidence] = {
    "nm": Confidence.NO_MATCH,
    "no-match": Confidence.NO_MATCH,
    "no-matches": Confidence.NO_MATCH,
    "new": Confidence.NEW,
    "exact": Confidence.EXACT,
    "junk": Confidence.JUNK,
    "ha": Confidence.HIGH_ACCURACY,
    "high-accuracy": Confidence.HIGH_ACCURACY,
    "det": Confidence.DETECTED,
    "reinit": Confidence.REINIT,
    "nf": Confidence.NO_FACE,
    "no-face": Confidence.NO_FACE,
}
"""Textual aliases accepted for each confidence level (lower-case keys)."""

_INTEGER_RE = re.compile(r"[+-]?\d+")


def resolve_confidence(raw: str) -> Confidence:
    """Resolve a confidence alias or integer code.

    Raises
    ------
    MissingValueError
        If *raw* is empty after trimming.
    UnknownValueError
        If *raw* is neither an alias nor an integer.
    OutOfRangeError
        If *raw* is an integer outside the defined codes.
    """
    lowered = raw.strip().lower()
    level = CONFIDENCE_ALIASES.get(lowered)
    if level is not None:
        return level

    if not lowered:
        raise MissingValueError("conf value is required")

    if _INTEGER_RE.fullmatch(lowered) is None:
        raise UnknownValueError(
            f"unknown conf value {raw!r}",
            hint=f"Use one of: {', '.join(CONFIDENCE_ALIASES)}, or an integer code.",
        )

    code = int(lowered)
    try:
        return Confidence(code)
    except ValueError:
        lowest, highest = min(Confidence), max(Confidence)
        raise OutOfRangeError(
            f"conf value {code} is out of range",
            hint=f"Integer codes must be between {lowest.value} and {highest.value}.",
        ) from None


# ---------------------------------------------------------------------------
# Liveness
# ---------------------------------------------------------------------------

def resolve_liveness(raw: str) -> Liveness:
    """Resolve one of ``passed``, ``failed`` or ``undetermined``.

    Raises
    ------
    MissingValueError
        If *raw* is empty after trimming.
    UnknownValueError
        For any other input, including integers.
    """
    lowered = raw.strip().lower()
    if not lowered:
        raise MissingValueError("liveness value is required")
    try:
        return Liveness(lowered)
    except ValueError:
        raise UnknownValueError(
            f"unknown liveness {raw!r}",
            hint="Use one of: passed, failed, undetermined.",
        ) from None


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

_DATETIME = r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}"
_OFFSET = r"(?:Z|[+-][0-9]{2}:[0-9]{2})"

DATE_LAYOUTS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(_DATETIME + _OFFSET), "%Y-%m-%dT%H:%M:%S%z"),
    (re.compile(_DATETIME + r"\.[0-9]+" + _OFFSET), "%Y-%m-%dT%H:%M:%S.%f%z"),
    (re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}"), "%Y-%m-%d"),
)
"""Accepted input shapes and their ``strptime`` layouts, tried in order."""

_EXCESS_FRACTION = re.compile(r"(\.[0-9]{6})[0-9]+")


def resolve_date(raw: str) -> datetime | None:
    """Parse an RFC 3339 timestamp or a plain ``YYYY-MM-DD`` date.

    Plain dates resolve to midnight UTC.  Empty input returns ``None``,
    which callers treat as "omit this filter".  Fractions longer than
    microseconds are truncated.

    Raises
    ------
    UnparseableDateError
        If *raw* matches none of :data:`DATE_LAYOUTS`.
    """
    trimmed = raw.strip()
    if not trimmed:
        return None

    for shape, layout in DATE_LAYOUTS:
        if shape.fullmatch(trimmed) is None:
            continue
        try:
            parsed = datetime.strptime(_EXCESS_FRACTION.sub(r"\1", trimmed), layout)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    raise UnparseableDateError(
        f"unable to parse date {raw!r}",
        hint="Use YYYY-MM-DD or an RFC 3339 timestamp such as 2024-01-15T10:00:00Z.",
    )


def format_timestamp(value: datetime) -> str:
    """Render *value* in the RFC 3339 wire format (second precision).

    Naive datetimes are treated as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    offset = value.utcoffset() or timedelta(0)
    base = value.strftime("%Y-%m-%dT%H:%M:%S")
    if offset == timedelta(0):
        return f"{base}Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    hours, minutes = divmod(minutes, 60)
    return f"{base}{sign}{hours:02d}:{minutes:02d}"

