"""Authentication dependency for FastAPI.

Resolves the caller from the session cookie set at login, or from an
``Authorization: Bearer <session id>`` header for non-browser clients.
"""

from dataclasses import dataclass

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.core.config import get_settings
from brandkit.core.database import get_session
from brandkit.core.logging import get_logger
from brandkit.services.auth import AuthService

logger = get_logger(__name__)

AUTHENTICATION_REQUIRED = "Authentication required"


@dataclass
class UserInfo:
    """Authenticated user information."""

    id: int
    username: str
    name: str
    email: str


def session_token_from_request(request: Request) -> str | None:
    """Session token from the cookie, falling back to a Bearer header."""
    settings = get_settings()
    token = request.cookies.get(settings.session_cookie_name)
    if token:
        return token

    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.startswith("Bearer "):
        return auth_header[7:] or None
    return None


async def get_current_user(
    request: Request, db: AsyncSession = Depends(get_session)
) -> UserInfo:
    """FastAPI dependency that validates the session and returns the current user."""
    token = session_token_from_request(request)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=AUTHENTICATION_REQUIRED,
        )

    user = await AuthService(db).resolve_session(token)
    if user is None:
        logger.warning("Rejected session: %s...", token[:8])
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=AUTHENTICATION_REQUIRED,
        )

    return UserInfo(id=user.id, username=user.username, name=user.name, email=user.email)
