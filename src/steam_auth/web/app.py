"""Flask demo app showing the Steam sign-in flow end to end."""

import os

from dotenv import load_dotenv
from flask import Flask, jsonify, redirect, request
from loguru import logger

from ..auth.errors import (
    CallbackProtocolError,
    InvalidAuthRequestError,
    NoDataError,
    SteamAuthError,
)
from ..components.authenticator import SteamAuthenticator
from ..utils.logger import log_auth_event, setup_logging

INDEX_HTML = '<a href="/auth">Sign in through Steam</a>'


def _error_status(error: SteamAuthError) -> int:
    if isinstance(error, (CallbackProtocolError, InvalidAuthRequestError)):
        return 403
    if isinstance(error, NoDataError):
        return 404
    # Steam unreachable or answering with an error
    return 502


def create_app(authenticator: SteamAuthenticator) -> Flask:
    """Build the demo app around an authenticator."""
    app = Flask(__name__)
    callback_url = f"{authenticator.config.realm.rstrip('/')}/auth/callback"

    @app.route("/")
    def index():
        return INDEX_HTML

    @app.route("/auth")
    def login():
        """Send the user to Steam to sign in"""
        try:
            url = authenticator.get_auth_url(callback_url)
        except SteamAuthError as e:
            log_auth_event("login_started", success=False, details=str(e))
            return jsonify({"success": False, "error": str(e)}), 500

        log_auth_event("login_started")
        return redirect(url, code=307)

    @app.route("/auth/callback")
    def callback():
        """Verify the assertion Steam sent back and show who signed in"""
        try:
            steamid = authenticator.validate_callback(request.args.to_dict(flat=False))
        except SteamAuthError as e:
            log_auth_event("login_rejected", success=False, details=str(e))
            return jsonify({"success": False, "error": str(e)}), _error_status(e)

        try:
            user = authenticator.get_steam_user(steamid)
        except SteamAuthError as e:
            log_auth_event("profile_fetch", steamid, success=False, details=str(e))
            return jsonify({"success": False, "error": str(e)}), _error_status(e)

        log_auth_event("login_completed", steamid, details=user.personaname)
        return jsonify({"success": True, "user": user.to_dict()})

    return app


def main() -> None:
    # Load environment variables
    load_dotenv()

    # Initialize logging
    setup_logging(os.getenv("LOG_LEVEL", "INFO"), os.getenv("LOG_DIR") or None)

    authenticator = SteamAuthenticator.from_env()
    port = int(os.getenv("PORT", "8080"))
    logger.info(f"Starting Steam sign-in demo on port {port}")
    create_app(authenticator).run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
