"""Steam OpenID sign-in and player summary helpers."""

from .auth.errors import (
    CallbackProtocolError,
    ConfigurationError,
    InvalidAuthRequestError,
    LoginUrlError,
    NoDataError,
    SteamAuthError,
    SteamRequestError,
    UnexpectedModeError,
    UnexpectedStatusError,
)
from .components.authenticator import SteamAuthenticator
from .config import AuthenticatorConfig
from .models.steam_user import (
    CommunityVisibilityState,
    PersonaState,
    ProfileState,
    SteamUser,
)

__all__ = [
    "AuthenticatorConfig",
    "CallbackProtocolError",
    "CommunityVisibilityState",
    "ConfigurationError",
    "InvalidAuthRequestError",
    "LoginUrlError",
    "NoDataError",
    "PersonaState",
    "ProfileState",
    "SteamAuthError",
    "SteamAuthenticator",
    "SteamRequestError",
    "SteamUser",
    "UnexpectedModeError",
    "UnexpectedStatusError",
]
