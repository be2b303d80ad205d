"""Steam Web API client for ISteamUser/GetPlayerSummaries."""

from typing import Optional

import requests
from loguru import logger

from ..auth.errors import NoDataError, SteamRequestError, UnexpectedStatusError
from ..config import DEFAULT_TIMEOUT
from ..models.steam_user import SteamUser

PLAYER_SUMMARIES_URL = (
    "http://api.steampowered.com/ISteamUser/GetPlayerSummaries/v0002"
)


def fetch_player_summary(
    api_key: str,
    steamid64: str,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> SteamUser:
    """
    Fetch basic public information about a Steam user.

    Nothing is cached; store the result yourself if you don't want to depend
    on Steam for every request.

    Args:
        api_key: Steam Web API key (https://steamcommunity.com/dev/apikey)
        steamid64: A steamid64 returned by validate_callback
        session: Optional requests session to send the request with
        timeout: Request timeout in seconds

    Returns:
        The SteamUser for the given steamid64

    Raises:
        SteamRequestError: If the request fails or the body cannot be decoded
        UnexpectedStatusError: If the API does not answer with 200
        NoDataError: If the API returns no players
    """
    http = session or requests
    logger.debug(f"Fetching player summary for steamid {steamid64}")
    try:
        resp = http.get(
            PLAYER_SUMMARIES_URL,
            params={"key": api_key, "steamids": steamid64},
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise SteamRequestError(
            f"get steam user ({steamid64}): make get request: {e}"
        ) from e

    if resp.status_code != 200:
        raise UnexpectedStatusError(steamid64, resp.status_code, resp.reason or "")

    try:
        players = resp.json()["response"]["players"]
    except (ValueError, KeyError, TypeError) as e:
        raise SteamRequestError(
            f"get steam user ({steamid64}): decode response body: {e}"
        ) from e

    if not players:
        raise NoDataError(steamid64)

    try:
        return SteamUser.from_dict(players[0])
    except (ValueError, KeyError, TypeError) as e:
        raise SteamRequestError(
            f"get steam user ({steamid64}): decode player: {e}"
        ) from e
