import json

import pytest

from steam_auth.models.steam_user import (
    CommunityVisibilityState,
    PersonaState,
    ProfileState,
    SteamUser,
)


def test_enum_values_match_web_api() -> None:
    assert [s.value for s in PersonaState] == [0, 1, 2, 3, 4, 5, 6]
    assert ProfileState.CONFIGURED == 1 and ProfileState.NOT_CONFIGURED == 0
    assert CommunityVisibilityState.NOT_VISIBLE == 1
    assert CommunityVisibilityState.PUBLIC == 3


def test_to_dict_serializes_raw_integers(player_data) -> None:
    user = SteamUser.from_dict(player_data)

    encoded = json.loads(json.dumps(user.to_dict()))

    assert encoded == player_data
    assert user.is_public


@pytest.mark.parametrize("field", ["steamid", "personaname"])
def test_from_dict_requires_always_sent_fields(player_data, field) -> None:
    del player_data[field]
    with pytest.raises(KeyError):
        SteamUser.from_dict(player_data)


def test_from_dict_defaults_missing_profilestate(player_data) -> None:
    del player_data["profilestate"]

    user = SteamUser.from_dict(player_data)

    assert user.profilestate is ProfileState.NOT_CONFIGURED
    assert user.to_dict()["profilestate"] == 0
