#!/usr/bin/env python3
"""
Diagnostic script to check Steam sign-in setup and configuration.
"""

import argparse
import os
import sys

from dotenv import load_dotenv


def check_environment():
    """Check environment variables."""
    print("🔍 Checking environment variables...")

    from steam_auth.config import is_configured

    if is_configured():
        print("   ✅ STEAM_API_KEY = (set)")
    else:
        print("   ❌ STEAM_API_KEY = Not set")
        print("   💡 Get a key at https://steamcommunity.com/dev/apikey")
        return False

    for var, default in (
        ("STEAM_REALM", "http://localhost:8080"),
        ("STEAM_REQUEST_TIMEOUT", "10"),
    ):
        value = os.getenv(var)
        if value:
            print(f"   ✅ {var} = {value}")
        else:
            print(f"   ⚠️  {var} = Not set (using {default})")

    return True


def check_dependencies():
    """Check if required dependencies are installed."""
    print("\n🔍 Checking dependencies...")

    required_packages = [
        ("requests", "HTTP client"),
        ("loguru", "Logging"),
        ("dotenv", "Environment file loader"),
        ("steam_auth", "Steam sign-in package"),
    ]

    missing_packages = []
    for package, description in required_packages:
        try:
            __import__(package)
            print(f"   ✅ {package} - {description}")
        except ImportError:
            print(f"   ❌ {package} - {description} (NOT INSTALLED)")
            missing_packages.append(package)

    if missing_packages:
        print(f"\n⚠️  Missing packages: {', '.join(missing_packages)}")
        print("   Install with: pip install -e .")
        return False

    return True


def check_login_url():
    """Build the Steam login URL for the configured realm."""
    print("\n🔍 Building login URL...")

    from steam_auth import SteamAuthError, SteamAuthenticator

    try:
        authenticator = SteamAuthenticator.from_env()
        realm = authenticator.config.realm.rstrip("/")
        url = authenticator.get_auth_url(f"{realm}/auth/callback")
    except SteamAuthError as e:
        print(f"   ❌ Could not build login URL: {e}")
        return False

    print(f"   ✅ {url}")
    return True


def check_player_summary(steamid):
    """Fetch a player summary to verify the API key."""
    print(f"\n🔍 Fetching player summary for {steamid}...")

    from steam_auth import SteamAuthError, SteamAuthenticator, UnexpectedStatusError

    try:
        user = SteamAuthenticator.from_env().get_steam_user(steamid)
    except UnexpectedStatusError as e:
        print(f"   ❌ {e}")
        if e.status_code == 403:
            print("   💡 The API key was rejected, check STEAM_API_KEY")
        return False
    except SteamAuthError as e:
        print(f"   ❌ {e}")
        return False

    print(f"   ✅ {user.personaname} ({user.steamid}) - {user.profileurl}")
    print(f"   ✅ Visibility: {user.communityvisibilitystate.name}")
    return True


def main():
    """Run all diagnostic checks."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--steamid", help="steamid64 to fetch, verifies the API key end to end"
    )
    args = parser.parse_args()

    load_dotenv()

    print("🏥 Steam Sign-in Diagnostic Tool")
    print("=" * 50)

    checks = [
        ("Environment Variables", check_environment),
        ("Dependencies", check_dependencies),
        ("Login URL", check_login_url),
    ]
    if args.steamid:
        checks.append(("Player Summary", lambda: check_player_summary(args.steamid)))

    results = []
    for check_name, check_func in checks:
        try:
            result = check_func()
            results.append((check_name, result))
        except Exception as e:
            print(f"   💥 {check_name} check crashed: {e}")
            results.append((check_name, False))

    print("\n" + "=" * 50)
    print("📊 DIAGNOSTIC SUMMARY")
    print("=" * 50)

    failed = 0
    for check_name, result in results:
        status = "✅ PASS" if result else "❌ FAIL"
        print(f"{status} - {check_name}")
        if not result:
            failed += 1

    print(f"\nResults: {len(results) - failed} passed, {failed} failed")

    if failed:
        print(f"\n⚠️  {failed} checks failed. Please fix the issues above.")
        sys.exit(1)

    print("\n🎉 All checks passed! Steam sign-in should be working correctly.")


if __name__ == "__main__":
    main()
