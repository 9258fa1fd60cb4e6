"""Custom exception hierarchy for serp-cli.

All exceptions that cross layer boundaries must inherit from
:class:`SerpCliError`.  Raw third-party exceptions (e.g. from httpx)
must NEVER propagate beyond the infrastructure layer; they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
SerpCliError
├── ResolutionError
│   ├── MissingValueError
│   ├── UnknownValueError
│   ├── OutOfRangeError
│   └── UnparseableDateError
├── ValidationError
│   ├── MissingRequiredFieldError
│   └── InvalidFieldValueError
├── ConfigurationError
├── PhotoReadError
├── ConfirmationDeclinedError
├── EnvironmentError
├── ApiError
└── TransportError
"""

from __future__ import annotations


class SerpCliError(Exception):
    """Base exception for all serp-cli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Flag resolution -------------------------------------------------------

class ResolutionError(SerpCliError):
    """Raised when a raw flag value cannot be turned into a typed value."""


class MissingValueError(ResolutionError):
    """Raised when a flag was supplied with an empty value."""


class UnknownValueError(ResolutionError):
    """Raised when a flag value matches no known alias."""


class OutOfRangeError(ResolutionError):
    """Raised when a numeric flag value falls outside the allowed codes."""


class UnparseableDateError(ResolutionError):
    """Raised when a date flag matches none of the accepted formats."""


# --- Request validation ----------------------------------------------------

class ValidationError(SerpCliError):
    """Raised when a request fails validation before being sent."""


class MissingRequiredFieldError(ValidationError):
    """Raised when a required field was not explicitly supplied."""


class InvalidFieldValueError(ValidationError):
    """Raised when a supplied field value is not acceptable."""


# --- Local environment -----------------------------------------------------

class ConfigurationError(SerpCliError):
    """Raised when credentials or settings are missing or malformed."""


class PhotoReadError(SerpCliError):
    """Raised when a photo file cannot be read from disk."""


class ConfirmationDeclinedError(SerpCliError):
    """Raised when a destructive action was not confirmed."""


class EnvironmentError(SerpCliError):
    """Raised when a required runtime dependency is not available."""


# --- Remote API ------------------------------------------------------------

class ApiError(SerpCliError):
    """Raised when the API answers with a non-success status code."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status_code: int = status_code
        """HTTP status code returned by the API."""


class TransportError(SerpCliError):
    """Raised when the API cannot be reached at all."""


def hint_for_status(status_code: int) -> str | None:
    """Return actionable guidance for well-known API status codes."""
    if status_code == 401:
        return "Check the token passed via --token or SERP_ACCESS_TOKEN."
    if status_code == 403:
        return "This action may require a root token (--root-token or SERP_ROOT_TOKEN)."
    if status_code == 404:
        return "Verify the identifier, or the --base-url if every request fails."
    if status_code >= 500:
        return "The SERP API reported an internal error. Retry later."
    return None
