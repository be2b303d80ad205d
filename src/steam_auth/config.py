"""Authenticator configuration loaded from arguments or environment variables."""

import os
from dataclasses import dataclass
from typing import Optional

from .auth.errors import ConfigurationError

DEFAULT_REALM = "http://localhost:8080"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class AuthenticatorConfig:
    """Immutable settings shared by every authenticator call."""

    # Provisioned at https://steamcommunity.com/dev/apikey
    api_key: str
    # The OpenID realm, usually the base URL of the web application
    realm: str
    timeout: Optional[float] = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "AuthenticatorConfig":
        """
        Build the configuration from environment variables.

        Expected env vars:
        - STEAM_API_KEY (required)
        - STEAM_REALM (defaults to http://localhost:8080)
        - STEAM_REQUEST_TIMEOUT (seconds, defaults to 10)
        """
        api_key = os.getenv("STEAM_API_KEY", "").strip()
        if not api_key:
            raise ConfigurationError("STEAM_API_KEY is not set")

        realm = os.getenv("STEAM_REALM", "").strip() or DEFAULT_REALM

        raw_timeout = os.getenv("STEAM_REQUEST_TIMEOUT", "").strip()
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ConfigurationError(
                    f"STEAM_REQUEST_TIMEOUT must be a number, got {raw_timeout!r}"
                ) from e
            if timeout <= 0:
                raise ConfigurationError("STEAM_REQUEST_TIMEOUT must be positive")

        return cls(api_key=api_key, realm=realm, timeout=timeout)


def is_configured() -> bool:
    """Check whether minimal Steam configuration is present in env."""
    return bool(os.getenv("STEAM_API_KEY", "").strip())
