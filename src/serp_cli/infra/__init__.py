"""Infrastructure layer — external system integration.

This layer wraps all interaction with the SERP HTTP API and the local
filesystem.  Every raw third-party exception must be caught here and
re-raised as a :class:`~serp_cli.exceptions.SerpCliError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the CLI layer.
"""

from serp_cli.infra.client import SerpClient
from serp_cli.infra.photo_loader import load_photo
from serp_cli.infra.transport import HttpTransport

__all__: list[str] = [
    "HttpTransport",
    "SerpClient",
    "load_photo",
]
