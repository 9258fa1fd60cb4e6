"""Client settings loaded from environment variables via pydantic-settings.

Sources, highest priority first:

1. Explicit CLI flags (``--token``, ``--root-token``, ``--base-url``,
   ``--debug``) passed to :func:`load_settings` as overrides.
2. ``SERP_*`` environment variables, e.g. ``SERP_ACCESS_TOKEN``.
3. The defaults declared on :class:`Settings`.

The process environment is read, never written.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from serp_cli.exceptions import ConfigurationError

DEFAULT_BASE_URL: str = "https://api.serptech.ru/v1/"


class Settings(BaseSettings):
    """serp-cli runtime settings."""

    model_config = SettingsConfigDict(env_prefix="SERP_", extra="ignore")

    access_token: str = ""
    root_token: str = ""
    base_url: str = DEFAULT_BASE_URL
    debug: bool = False
    timeout: float = 30.0

    @field_validator("access_token", "root_token")
    @classmethod
    def _strip_token(cls, value: str) -> str:
        return value.strip()

    @field_validator("base_url")
    @classmethod
    def _normalise_base_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("base URL must start with http:// or https://")
        # httpx joins relative paths onto the last path segment otherwise.
        return value if value.endswith("/") else f"{value}/"

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value

    # ------------------------------------------------------------------
    # Credential resolution
    # ------------------------------------------------------------------

    @property
    def effective_access_token(self) -> str:
        """Access token, falling back to the root token when unset."""
        return self.access_token or self.root_token

    def require_root_token(self) -> str:
        """Return the root token or raise :class:`ConfigurationError`."""
        if not self.root_token:
            raise ConfigurationError(
                "SERP_ROOT_TOKEN environment variable is required for this action",
                hint="Pass --root-token or export SERP_ROOT_TOKEN.",
            )
        return self.root_token

    def require_any_token(self) -> str:
        """Return the effective access token or raise :class:`ConfigurationError`."""
        token = self.effective_access_token
        if not token:
            raise ConfigurationError(
                "no API token configured",
                hint="Pass --token or export SERP_ACCESS_TOKEN (or SERP_ROOT_TOKEN).",
            )
        return token


def load_settings(**overrides: Any) -> Settings:
    """Build :class:`Settings`, letting non-empty *overrides* win over the environment.

    Raises
    ------
    ConfigurationError
        If any value fails validation.
    """
    explicit = {key: value for key, value in overrides.items() if value not in (None, "")}
    try:
        return Settings(**explicit)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(
            f"invalid configuration: {problems}",
            hint="Check the SERP_* environment variables and global flags.",
        ) from exc
