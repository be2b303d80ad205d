"""Steam sign-in facade tying the OpenID and Web API helpers together."""

from typing import Optional, Union
from urllib.parse import parse_qs

import requests
from loguru import logger

from ..auth.openid_client import CallbackParams, build_login_url, validate_callback
from ..config import DEFAULT_TIMEOUT, AuthenticatorConfig
from ..models.steam_user import SteamUser
from ..webapi.player_summaries import fetch_player_summary


class SteamAuthenticator:
    """Handles authentication for Steam users.

    Holds only immutable configuration, so one instance can serve any number
    of concurrent requests. Each call makes at most one request to Steam.
    """

    def __init__(
        self,
        api_key: str,
        realm: str,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the authenticator.

        Args:
            api_key: Steam Web API key
            realm: OpenID realm, typically the base URL of your application
                (ex. http://localhost:8080)
            timeout: Timeout in seconds applied to every request to Steam
            session: Optional requests session shared by all calls
        """
        self._config = AuthenticatorConfig(
            api_key=api_key, realm=realm, timeout=timeout
        )
        self._session = session
        logger.debug(f"Steam authenticator initialized for realm: {realm}")

    @classmethod
    def from_config(
        cls, config: AuthenticatorConfig, session: Optional[requests.Session] = None
    ) -> "SteamAuthenticator":
        return cls(
            config.api_key, config.realm, timeout=config.timeout, session=session
        )

    @classmethod
    def from_env(
        cls, session: Optional[requests.Session] = None
    ) -> "SteamAuthenticator":
        """Build an authenticator from STEAM_* environment variables."""
        return cls.from_config(AuthenticatorConfig.from_env(), session=session)

    @property
    def config(self) -> AuthenticatorConfig:
        return self._config

    def get_auth_url(self, return_url: str) -> str:
        """
        Generate the OpenID URL to redirect the user to in order to sign in.

        Args:
            return_url: Where to send the user once they've signed in. The
                handler there should call validate_callback.

        Returns:
            The Steam login URL
        """
        return build_login_url(self._config.realm, return_url)

    def validate_callback(self, params: Union[CallbackParams, str]) -> str:
        """
        Validate the callback at the end of the OpenID flow.

        Args:
            params: The query parameters of the callback request, or the raw
                query string

        Returns:
            The verified steamid64
        """
        if isinstance(params, str):
            params = parse_qs(params.lstrip("?"), keep_blank_values=True)
        return validate_callback(
            params, session=self._session, timeout=self._config.timeout
        )

    def get_steam_user(self, steamid64: str) -> SteamUser:
        """
        Get basic information about the user with the given steamid64.

        Useful right after validate_callback. Copy the result somewhere if you
        don't want to depend on Steam for every request to your site.
        """
        return fetch_player_summary(
            self._config.api_key,
            steamid64,
            session=self._session,
            timeout=self._config.timeout,
        )
