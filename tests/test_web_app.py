"""Tests for the Flask demo host."""

from urllib.parse import parse_qs, urlencode, urlsplit

import pytest
import requests

from conftest import STEAMID, confirmation_body, make_response
from steam_auth import SteamAuthenticator
from steam_auth.web.app import create_app


@pytest.fixture
def client(session):
    authenticator = SteamAuthenticator("key", "http://localhost:8080/", session=session)
    app = create_app(authenticator)
    app.testing = True
    return app.test_client()


def test_index_links_to_login(client) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert b'href="/auth"' in response.data


def test_login_redirects_to_steam(client) -> None:
    response = client.get("/auth")

    assert response.status_code == 307
    location = urlsplit(response.headers["Location"])
    assert location.netloc == "steamcommunity.com"
    query = parse_qs(location.query)
    assert query["openid.return_to"] == ["http://localhost:8080/auth/callback"]
    assert query["openid.realm"] == ["http://localhost:8080/"]


def test_callback_signs_user_in(client, session, callback_params, player_data) -> None:
    session.post.return_value = make_response(body=confirmation_body())
    session.get.return_value = make_response(
        body={"response": {"players": [player_data]}}
    )

    response = client.get("/auth/callback?" + urlencode(callback_params))

    assert response.status_code == 200
    assert response.get_json() == {"success": True, "user": player_data}
    sent = parse_qs(session.post.call_args.kwargs["data"])
    assert sent["openid.sig"] == [callback_params["openid.sig"]]


def test_callback_cancelled(client, session, callback_params) -> None:
    callback_params["openid.mode"] = "cancel"

    response = client.get("/auth/callback?" + urlencode(callback_params))

    assert response.status_code == 403
    assert response.get_json()["success"] is False
    session.post.assert_not_called()


def test_callback_forged(client, session, callback_params) -> None:
    session.post.return_value = make_response(body=confirmation_body(valid=False))

    response = client.get("/auth/callback?" + urlencode(callback_params))

    assert response.status_code == 403
    assert response.get_json()["error"] == "invalid authentication attempt"
    session.get.assert_not_called()


def test_callback_steam_unreachable(client, session, callback_params) -> None:
    session.post.side_effect = requests.ConnectionError("down")

    response = client.get("/auth/callback?" + urlencode(callback_params))

    assert response.status_code == 502


def test_callback_profile_missing(client, session, callback_params) -> None:
    session.post.return_value = make_response(body=confirmation_body())
    session.get.return_value = make_response(body={"response": {"players": []}})

    response = client.get("/auth/callback?" + urlencode(callback_params))

    assert response.status_code == 404
    assert STEAMID in response.get_json()["error"]
