"""Logging configuration and utilities using Loguru."""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger


def setup_logging(
    log_level: str = "INFO", log_dir: Optional[Union[str, Path]] = None
) -> None:
    """
    Configure loguru logging for the application.

    Args:
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for rotating log files; console only when None
    """
    # Remove default logger
    logger.remove()

    # Console logging with colors
    logger.add(
        sys.stdout,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        level=log_level,
        colorize=True,
    )

    if log_dir is None:
        return

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    file_format = (
        "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
        "{name}:{function}:{line} | {message}"
    )

    # File logging - general logs
    logger.add(
        log_dir / "steam_auth.log",
        format=file_format,
        level=log_level,
        rotation="10 MB",
        retention="7 days",
        compression="zip",
    )

    # File logging - sign-in events only
    logger.add(
        log_dir / "auth_events.log",
        format=file_format,
        level="INFO",
        filter=lambda record: "AUTH_EVENT" in record["extra"],
        rotation="10 MB",
        retention="30 days",
        compression="zip",
    )


def get_auth_logger():
    """Get a logger configured for sign-in events."""
    return logger.bind(AUTH_EVENT=True)


def log_auth_event(
    event: str,
    steamid: Optional[str] = None,
    success: bool = True,
    details: str = "",
) -> None:
    """
    Log a sign-in event.

    Args:
        event: What happened (e.g., 'login_started', 'login_rejected')
        steamid: The verified steamid64, if known
        success: Whether the step succeeded; failures are logged as warnings
        details: Additional details about the event
    """
    auth_logger = get_auth_logger()
    message = (
        f"Auth event - Event: {event}, SteamID: {steamid or 'N/A'}, "
        f"Status: {'SUCCESS' if success else 'FAILED'}, Details: {details}"
    )
    if success:
        auth_logger.info(message)
    else:
        auth_logger.warning(message)
