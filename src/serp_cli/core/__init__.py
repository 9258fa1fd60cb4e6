"""Core layer — pure flag resolution, query building and request validation.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from serp_cli.core.models import Confidence, Liveness, Photo
from serp_cli.core.protocols import Transport
from serp_cli.core.query import FlagValue, QueryBuilder, build_optional_query
from serp_cli.core.resolvers import (
    format_timestamp,
    resolve_confidence,
    resolve_date,
    resolve_liveness,
)

__all__: list[str] = [
    "Confidence",
    "FlagValue",
    "Liveness",
    "Photo",
    "QueryBuilder",
    "Transport",
    "build_optional_query",
    "format_timestamp",
    "resolve_confidence",
    "resolve_date",
    "resolve_liveness",
]
