"""Data models for Steam users as returned by GetPlayerSummaries."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict


class PersonaState(IntEnum):
    """Current status of the user. Always OFFLINE for private profiles."""

    OFFLINE = 0
    ONLINE = 1
    BUSY = 2
    AWAY = 3
    SNOOZE = 4
    LOOKING_TO_TRADE = 5
    LOOKING_TO_PLAY = 6


class ProfileState(IntEnum):
    """Whether the user has set up their community profile."""

    NOT_CONFIGURED = 0
    CONFIGURED = 1


class CommunityVisibilityState(IntEnum):
    """Whether the profile is visible to the API key owner."""

    NOT_VISIBLE = 1
    PUBLIC = 3


@dataclass(frozen=True)
class SteamUser:
    """A Steam user, as represented in the GetPlayerSummaries response."""

    steamid: str  # steamid64
    personaname: str
    personastate: PersonaState
    profileurl: str
    profilestate: ProfileState
    communityvisibilitystate: CommunityVisibilityState
    avatar: str  # 32x32
    avatarmedium: str  # 64x64
    avatarfull: str  # 184x184

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SteamUser":
        """
        Build a SteamUser from one entry of the ``players`` list.

        Args:
            data: Player object decoded from the Web API JSON

        Returns:
            The decoded SteamUser

        Raises:
            KeyError: If a field Steam always sends is missing
            ValueError: If an enumerated field holds an unknown value
        """
        return cls(
            steamid=str(data["steamid"]),
            personaname=data["personaname"],
            personastate=PersonaState(data["personastate"]),
            profileurl=data["profileurl"],
            # Only sent once the user has set up a community profile
            profilestate=ProfileState(
                data.get("profilestate", ProfileState.NOT_CONFIGURED)
            ),
            communityvisibilitystate=CommunityVisibilityState(
                data["communityvisibilitystate"]
            ),
            avatar=data["avatar"],
            avatarmedium=data["avatarmedium"],
            avatarfull=data["avatarfull"],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the Web API shape, with raw integer enum values."""
        return {
            "steamid": self.steamid,
            "personaname": self.personaname,
            "personastate": int(self.personastate),
            "profileurl": self.profileurl,
            "profilestate": int(self.profilestate),
            "communityvisibilitystate": int(self.communityvisibilitystate),
            "avatar": self.avatar,
            "avatarmedium": self.avatarmedium,
            "avatarfull": self.avatarfull,
        }

    @property
    def is_public(self) -> bool:
        """Check if the profile is publicly visible."""
        return self.communityvisibilitystate == CommunityVisibilityState.PUBLIC
