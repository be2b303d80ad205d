"""OpenID 2.0 utilities for Steam sign-in."""

from .openid_client import (
    OPENID_LOGIN_URL,
    build_check_authentication_params,
    build_login_url,
    extract_steamid,
    validate_callback,
)

__all__ = [
    "OPENID_LOGIN_URL",
    "build_check_authentication_params",
    "build_login_url",
    "extract_steamid",
    "validate_callback",
]
