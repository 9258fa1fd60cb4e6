"""Domain models for serp-cli.

Enumerations mirror the platform's fixed vocabularies; the remaining
models are **frozen** dataclasses, immutable value objects that live
for a single command invocation.  They carry zero I/O and no
dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Confidence(IntEnum):
    """Certainty bucket of a recognition match, as coded by the platform."""

    NO_MATCH = 0
    NEW = 1
    EXACT = 2
    JUNK = 3
    HIGH_ACCURACY = 4
    DETECTED = 5
    REINIT = 6
    NO_FACE = 7


class Liveness(str, Enum):
    """Outcome of a liveness check."""

    PASSED = "passed"
    FAILED = "failed"
    UNDETERMINED = "undetermined"


# ---------------------------------------------------------------------------
# Upload payload
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Photo:
    """An image read from disk, ready for multipart upload."""

    name: str
    """Base file name sent as the multipart filename."""

    data: bytes
    """Raw image bytes."""

    content_type: str = "application/octet-stream"
    """MIME type guessed from the file extension."""

    def as_file(self) -> tuple[str, bytes, str]:
        """Return the ``(filename, content, content_type)`` triple httpx expects."""
        return (self.name, self.data, self.content_type)

    def __repr__(self) -> str:
        return f"Photo(name={self.name!r}, size={len(self.data)})"
