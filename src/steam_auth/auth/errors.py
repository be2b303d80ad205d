"""Exception types raised by the Steam OpenID and Web API helpers."""

from typing import Optional


class SteamAuthError(Exception):
    """Base class for every error raised by steam_auth."""


class ConfigurationError(SteamAuthError):
    """Raised when the authenticator configuration is missing or malformed."""


class LoginUrlError(SteamAuthError):
    """Raised when the OpenID login URL cannot be built."""


class SteamRequestError(SteamAuthError):
    """Raised when Steam cannot be reached or its response cannot be read.

    The underlying ``requests`` or decode exception is available as
    ``__cause__``.
    """


class CallbackProtocolError(SteamAuthError):
    """Raised when the callback parameters are not a usable OpenID assertion."""


class UnexpectedModeError(CallbackProtocolError):
    """Raised when ``openid.mode`` is anything other than ``id_res``."""

    def __init__(self, mode: Optional[str]) -> None:
        self.mode = mode
        super().__init__(
            f"the openid.mode was not expected. got={mode!r}, expected='id_res'"
        )


class InvalidAuthRequestError(SteamAuthError):
    """Raised when Steam says the assertion is not genuine.

    This may be due to the user attempting to impersonate someone else, or
    replaying an expired assertion.
    """

    def __init__(self, message: str = "invalid authentication attempt") -> None:
        super().__init__(message)


class UnexpectedStatusError(SteamAuthError):
    """Raised when the Steam Web API answers with a status other than 200."""

    def __init__(self, steamid: str, status_code: int, reason: str = "") -> None:
        self.steamid = steamid
        self.status_code = status_code
        self.reason = reason
        status = f"{status_code} {reason}".strip()
        super().__init__(
            f"get steam user ({steamid}): status code is not 200 ({status})"
        )


class NoDataError(SteamAuthError):
    """Raised when Steam returns no data about the requested steamid64."""

    def __init__(self, steamid: str) -> None:
        self.steamid = steamid
        super().__init__(
            f"steam did not return any data about the provided user ({steamid})"
        )


__all__ = [
    "CallbackProtocolError",
    "ConfigurationError",
    "InvalidAuthRequestError",
    "LoginUrlError",
    "NoDataError",
    "SteamAuthError",
    "SteamRequestError",
    "UnexpectedModeError",
    "UnexpectedStatusError",
]
