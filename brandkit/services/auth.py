"""Authentication service: registration, password checks and login sessions.

Passwords are hashed with passlib (pbkdf2_sha256). Sessions are opaque random
tokens stored in ``user_sessions``; the token travels in the session cookie.
"""

import secrets
from datetime import UTC, datetime, timedelta

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.core.config import get_settings
from brandkit.core.logging import get_logger, security_logger
from brandkit.models.user import User
from brandkit.repositories.user import UserRepository
from brandkit.schemas.user import RegisterRequest

logger = get_logger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def as_utc(value: datetime) -> datetime:
    """Treat naive timestamps (as returned by some drivers) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class AuthServiceError(Exception):
    """Base exception for AuthService errors."""

    pass


class UsernameTakenError(AuthServiceError):
    """Raised when registering a username that already exists."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username already exists: {username}")


class EmailTakenError(AuthServiceError):
    """Raised when registering an email that already exists."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")


class InvalidCredentialsError(AuthServiceError):
    """Raised when a username/password pair does not match."""

    def __init__(self) -> None:
        super().__init__("Invalid username or password")


class AuthService:
    """Service for accounts and login sessions."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repository = UserRepository(session)

    async def register(self, data: RegisterRequest) -> User:
        """Create an account.

        Raises:
            UsernameTakenError: If the username is in use
            EmailTakenError: If the email is in use

        A concurrent registration that wins the unique constraint is reported
        the same way.
        """
        email = str(data.email).strip().lower()
        for existing in await self.repository.find_conflicts(data.username, email):
            if existing.username == data.username:
                raise UsernameTakenError(data.username)
            raise EmailTakenError(email)

        try:
            return await self.repository.create(
                username=data.username,
                password_hash=hash_password(data.password),
                email=email,
                name=data.name,
            )
        except IntegrityError as e:
            await self.session.rollback()
            if await self.repository.get_by_username(data.username) is not None:
                raise UsernameTakenError(data.username) from e
            raise EmailTakenError(email) from e

    async def authenticate(self, username: str, password: str) -> User:
        """Return the user for a valid username/password pair.

        Raises:
            InvalidCredentialsError: On unknown user or wrong password
        """
        user = await self.repository.get_by_username(username.strip())
        if user is None or not verify_password(password, user.password):
            security_logger.login_failed(username)
            raise InvalidCredentialsError()
        return user

    async def start_session(self, user: User) -> tuple[str, datetime]:
        """Issue a new session token for ``user``.

        Returns:
            Tuple of (session token, expiry timestamp)
        """
        settings = get_settings()
        token = secrets.token_urlsafe(32)
        expires_at = datetime.now(UTC) + timedelta(hours=settings.session_ttl_hours)
        await self.repository.create_session(token, user.id, expires_at)
        logger.info("Session started", extra={"user_id": user.id})
        return token, expires_at

    async def end_session(self, token: str) -> None:
        await self.repository.delete_session(token)

    async def resolve_session(self, token: str) -> User | None:
        """Return the user behind a live session token, or None.

        Expired sessions are deleted when encountered.
        """
        found = await self.repository.get_session_with_user(token)
        if found is None:
            logger.debug("Session not found", extra={"session": token[:8]})
            return None

        user_session, user = found
        if as_utc(user_session.expires_at) < datetime.now(UTC):
            logger.info(
                "Session expired",
                extra={"user_id": user.id, "expired_at": user_session.expires_at.isoformat()},
            )
            await self.repository.delete_session(token)
            # The 401 that follows skips the request-level commit
            await self.session.commit()
            return None

        return user
