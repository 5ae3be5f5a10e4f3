"""
Admin Authentication for FastAPI

A single shared secret gates the admin endpoints. The admin page sends it in
the X-Admin-Token header; there are no sessions or tokens to issue.
"""
import secrets
from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from config.settings import Settings
from src.mentors.api.dependencies import get_settings
from src.mentors.utils.logger import get_logger

logger = get_logger(__name__)

ADMIN_TOKEN_HEADER = "X-Admin-Token"


def is_admin_secret(candidate: Optional[str], app_settings: Settings) -> bool:
    """
    Compare a candidate secret with the configured admin password.

    Args:
        candidate: Value supplied by the client
        app_settings: Application settings

    Returns:
        True if the candidate matches, False otherwise
    """
    if not candidate:
        return False
    return secrets.compare_digest(
        candidate.encode("utf-8"),
        app_settings.admin_password.encode("utf-8"),
    )


async def require_admin(
    x_admin_token: Optional[str] = Header(None, alias=ADMIN_TOKEN_HEADER),
    app_settings: Settings = Depends(get_settings),
) -> None:
    """
    Reject the request unless it carries the admin token.

    Raises:
        HTTPException: 401 if the header is missing or wrong
    """
    if not is_admin_secret(x_admin_token, app_settings):
        logger.warning("admin_token_rejected", header_present=x_admin_token is not None)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
