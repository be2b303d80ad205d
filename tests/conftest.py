"""Shared fixtures for the steam_auth tests."""

import json
from unittest.mock import MagicMock

import pytest
import requests
from loguru import logger

STEAMID = "76561197960287930"
CLAIMED_ID = f"https://steamcommunity.com/openid/id/{STEAMID}"


def make_response(status_code=200, body="", reason="OK"):
    """Build a real requests.Response carrying the given body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp.encoding = "utf-8"
    if not isinstance(body, (str, bytes)):
        body = json.dumps(body)
    resp._content = body.encode("utf-8") if isinstance(body, str) else body
    resp.url = "https://example.invalid/"
    return resp


def confirmation_body(valid=True):
    flag = "true" if valid else "false"
    return f"ns:http://specs.openid.net/auth/2.0\nis_valid:{flag}\n"


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def callback_params():
    return {
        "openid.ns": "http://specs.openid.net/auth/2.0",
        "openid.mode": "id_res",
        "openid.op_endpoint": "https://steamcommunity.com/openid/login",
        "openid.claimed_id": CLAIMED_ID,
        "openid.identity": CLAIMED_ID,
        "openid.return_to": "http://localhost:8080/auth/callback",
        "openid.response_nonce": "2024-01-01T00:00:00ZabcDEF",
        "openid.assoc_handle": "1234567890",
        "openid.signed": (
            "signed,op_endpoint,claimed_id,identity,"
            "return_to,response_nonce,assoc_handle"
        ),
        "openid.sig": "c2lnbmF0dXJl",
    }


@pytest.fixture
def player_data():
    return {
        "steamid": STEAMID,
        "personaname": "Rabscuttle",
        "personastate": 3,
        "profileurl": f"https://steamcommunity.com/profiles/{STEAMID}/",
        "profilestate": 1,
        "communityvisibilitystate": 3,
        "avatar": "https://avatars.steamstatic.com/abc.jpg",
        "avatarmedium": "https://avatars.steamstatic.com/abc_medium.jpg",
        "avatarfull": "https://avatars.steamstatic.com/abc_full.jpg",
    }


@pytest.fixture
def clean_logger():
    """Drop any sinks a test adds."""
    yield logger
    logger.remove()
