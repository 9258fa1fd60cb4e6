"""Ordered builders for outgoing query parameters.

A flag that the user did not supply must never reach the wire, even
when its default is a zero value (``0``, ``""``, ``False``).  Both
helpers here therefore work on explicit "was it set?" information
rather than on truthiness.

Insertion order mirrors declaration order so output is reproducible in
tests and debug logs.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Union

from serp_cli.core.resolvers import format_timestamp

QueryValue = Union[str, int, bool]
"""Scalar types accepted as query parameter values."""

DEFAULT_LIMIT: int = 20
MAX_LIMIT: int = 1000


# ---------------------------------------------------------------------------
# Flag triples
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlagValue:
    """A single user flag together with its explicit-vs-default state."""

    name: str
    is_set: bool
    value: QueryValue | None


def build_optional_query(
    flags: Iterable[FlagValue | tuple[str, bool, QueryValue | None]],
) -> dict[str, QueryValue]:
    """Return a mapping holding only the flags that were explicitly set.

    Accepts :class:`FlagValue` instances or plain ``(name, is_set, value)``
    tuples.  Set flags are kept even when their value is falsy.
    """
    query: dict[str, QueryValue] = {}
    for flag in flags:
        name, is_set, value = (
            (flag.name, flag.is_set, flag.value) if isinstance(flag, FlagValue) else flag
        )
        if is_set and value is not None:
            query[name] = value
    return query


# ---------------------------------------------------------------------------
# Typed builder
# ---------------------------------------------------------------------------

class QueryBuilder:
    """Ordered key/value builder with typed setters.

    Every setter ignores ``None``, so callers can pass an argparse value
    straight through: ``None`` means the flag was never supplied.
    """

    def __init__(self) -> None:
        self._params: dict[str, QueryValue] = {}

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def pagination(cls, limit: int = DEFAULT_LIMIT, offset: int = 0) -> QueryBuilder:
        """Start a query carrying ``limit`` and ``offset``."""
        builder = cls()
        builder.set_int("limit", limit)
        builder.set_int("offset", offset)
        return builder

    @classmethod
    def search_pagination(
        cls,
        search: str | None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> QueryBuilder:
        """Pagination query plus a ``search`` term when one is non-blank."""
        builder = cls.pagination(limit, offset)
        if search is not None and search.strip():
            builder.set_str("search", search)
        return builder

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_str(self, key: str, value: str | None, *, skip_blank: bool = False) -> QueryBuilder:
        """Store a trimmed string.  ``skip_blank`` drops whitespace-only input."""
        if value is None:
            return self
        trimmed = value.strip()
        if skip_blank and not trimmed:
            return self
        self._params[key] = trimmed
        return self

    def set_int(self, key: str, value: int | None) -> QueryBuilder:
        if value is not None:
            self._params[key] = int(value)
        return self

    def set_date(self, key: str, value: datetime | None) -> QueryBuilder:
        """Store *value* in wire format; ``None`` (absent date) is skipped."""
        if value is not None:
            self._params[key] = format_timestamp(value)
        return self

    def set_flag(self, flag: FlagValue) -> QueryBuilder:
        """Store a :class:`FlagValue` when it was explicitly set."""
        self._params.update(build_optional_query([flag]))
        return self

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def build(self) -> dict[str, QueryValue]:
        """Return a copy of the collected parameters in insertion order."""
        return dict(self._params)
