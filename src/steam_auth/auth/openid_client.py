"""
OpenID 2.0 helpers for Steam sign-in.

This module encapsulates the two halves of the OpenID handshake:
- Build the login URL the user is redirected to (checkid_setup)
- Validate the callback Steam redirects back with, by replaying the
  assertion to Steam as a check_authentication request

Steam has no OpenID discovery step worth doing, so the endpoint is fixed.
"""

from typing import List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import urlencode, urlsplit, urlunsplit

import requests
from loguru import logger

from .errors import (
    CallbackProtocolError,
    InvalidAuthRequestError,
    LoginUrlError,
    SteamRequestError,
    UnexpectedModeError,
)
from ..config import DEFAULT_TIMEOUT

# From https://steamcommunity.com/openid/
OPENID_LOGIN_URL = "https://steamcommunity.com/openid/login"

OPENID_NS = "http://specs.openid.net/auth/2.0"
IDENTIFIER_SELECT = "http://specs.openid.net/auth/2.0/identifier_select"

MODE_CHECKID_SETUP = "checkid_setup"
MODE_ID_RES = "id_res"
MODE_CHECK_AUTHENTICATION = "check_authentication"

VALID_MARKER = "is_valid:true"

CallbackParams = Mapping[str, Union[str, Sequence[str]]]


def _parse_login_url() -> Tuple[str, str, str]:
    """Split the fixed login endpoint into scheme, host and path."""
    try:
        parts = urlsplit(OPENID_LOGIN_URL)
    except ValueError as e:
        raise LoginUrlError(f"could not parse {OPENID_LOGIN_URL!r}: {e}") from e
    if not parts.scheme or not parts.netloc:
        raise LoginUrlError(f"{OPENID_LOGIN_URL!r} is not an absolute URL")
    return parts.scheme, parts.netloc, parts.path


def build_login_url(realm: str, return_url: str) -> str:
    """
    Build the OpenID 2.0 URL that starts Steam sign-in.

    Args:
        realm: The OpenID realm, usually the base URL of the web application
        return_url: Where Steam sends the user back to once they've signed in

    Returns:
        The absolute URL to redirect the user to

    Raises:
        LoginUrlError: If the login endpoint cannot be parsed
    """
    scheme, netloc, path = _parse_login_url()
    params = {
        "openid.ns": OPENID_NS,
        "openid.mode": MODE_CHECKID_SETUP,
        "openid.realm": realm,
        "openid.return_to": return_url,
        # The user hasn't asserted who they are yet
        "openid.claimed_id": IDENTIFIER_SELECT,
        "openid.identity": IDENTIFIER_SELECT,
    }
    return urlunsplit((scheme, netloc, path, urlencode(params), ""))


def _first(value: Union[str, Sequence[str], None]) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return value[0] if value else None


def _as_pairs(params: CallbackParams) -> List[Tuple[str, str]]:
    """Flatten single and multi-valued parameters into ordered pairs."""
    pairs: List[Tuple[str, str]] = []
    for key, value in params.items():
        if isinstance(value, str):
            pairs.append((key, value))
        else:
            pairs.extend((key, item) for item in value)
    return pairs


def build_check_authentication_params(
    params: CallbackParams,
) -> List[Tuple[str, str]]:
    """Copy the callback parameters, switching openid.mode to check_authentication."""
    return [
        (k, MODE_CHECK_AUTHENTICATION if k == "openid.mode" else v)
        for k, v in _as_pairs(params)
    ]


def extract_steamid(claimed_id: str) -> str:
    """Return the last path segment of a claimed id, unvalidated."""
    return claimed_id.split("/")[-1]


def validate_callback(
    params: CallbackParams,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> str:
    """
    Validate the query parameters Steam redirected the user back with.

    The parameters are replayed to Steam as a check_authentication request;
    nothing in them is trusted until Steam confirms the assertion.

    Args:
        params: Query parameters received at the return URL
        session: Optional requests session to send the confirmation with
        timeout: Request timeout in seconds

    Returns:
        The verified steamid64

    Raises:
        UnexpectedModeError: If openid.mode is not id_res
        CallbackProtocolError: If openid.claimed_id is missing
        SteamRequestError: If Steam cannot be reached or answers with an error
        InvalidAuthRequestError: If Steam does not confirm the assertion
    """
    mode = _first(params.get("openid.mode"))
    if mode != MODE_ID_RES:
        raise UnexpectedModeError(mode)

    claimed_id = _first(params.get("openid.claimed_id"))
    if claimed_id is None:
        raise CallbackProtocolError("the callback is missing openid.claimed_id")

    body = urlencode(build_check_authentication_params(params))
    http = session or requests
    logger.debug(f"Sending check_authentication request for {claimed_id}")
    try:
        resp = http.post(
            OPENID_LOGIN_URL,
            data=body,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            timeout=timeout,
        )
        resp.raise_for_status()
        text = resp.text
    except requests.RequestException as e:
        raise SteamRequestError(
            f"validate callback: failed making validation request: {e}"
        ) from e

    if VALID_MARKER not in text:
        raise InvalidAuthRequestError()

    return extract_steamid(claimed_id)
